import asyncio
import json

import pytest

from xrpl_intents import (
    Amount,
    CappedAtMax,
    CheckIntent,
    Fixed,
    Instructions,
    LedgerApi,
    PathFindDestination,
    PathFindIntent,
    PathFindSource,
    PaymentIntent,
    Prepared,
    ValidationError,
)

SRC = "r9cZA1mLK5R5Am25ArfXFmqgNwjZgnfk59"
DST = "rpZc4mVfWUif9CRoHRKKcmhu1nx2xktxBo"
ISSUER = "rMH4UxPrbuMa1spCBR98hLLyNJp4d8p4tM"


def test_compile_payment_offline_prepare():
    api = LedgerApi()
    p = PaymentIntent(source=CappedAtMax(SRC, Amount("XRP", "0.01")), destination=Fixed(DST, Amount("XRP", "0.01")))
    prepared = asyncio.run(api.compile_payment(SRC, p, Instructions(fee="0.000012", sequence=23, max_ledger_version=8820051)))
    tx = json.loads(prepared.tx_json)
    print("[compile_payment]", prepared)
    assert tx["Fee"] == "12"
    assert tx["Sequence"] == 23
    assert tx["LastLedgerSequence"] == 8820051
    assert tx["Amount"] == "10000"
    assert prepared.instructions == {"fee": "0.000012", "sequence": 23, "maxLedgerVersion": 8820051}


def test_compile_payment_without_instructions():
    api = LedgerApi()
    p = PaymentIntent(source=CappedAtMax(SRC, Amount("XRP", "1")), destination=Fixed(DST, Amount("XRP", "1")))
    prepared = asyncio.run(api.compile_payment(SRC, p))
    assert "Fee" not in json.loads(prepared.tx_json)
    assert prepared.instructions == {}


def test_async_preparer_receives_compiled_object():
    seen = []

    async def prepare(tx_json, instructions):
        seen.append((tx_json, instructions))
        return Prepared(tx_json=json.dumps(tx_json), instructions={})

    api = LedgerApi(prepare=prepare)
    check = CheckIntent(destination=DST, send_max=Amount("USD", "3", ISSUER))
    asyncio.run(api.compile_check_create(SRC, check))
    assert seen[0][0]["TransactionType"] == "CheckCreate"
    assert seen[0][1] is None


def test_validation_fails_before_prepare():
    calls = []
    api = LedgerApi(prepare=lambda tx, ins: calls.append(tx))
    p = PaymentIntent(source=Fixed(SRC, Amount("XRP", "1")), destination=Fixed(DST, Amount("XRP", "1")))
    with pytest.raises(ValidationError):
        asyncio.run(api.compile_payment(SRC, p))
    assert calls == []


def test_find_paths_conflict_fails_before_transport(fake_transport):
    t = fake_transport({})
    api = LedgerApi(t)
    q = PathFindIntent(
        source=PathFindSource(SRC, amount=Amount("XRP", "1")),
        destination=PathFindDestination(DST, Amount("XRP", "1")),
    )
    with pytest.raises(ValidationError):
        asyncio.run(api.find_paths(q))
    assert t.calls == []


def test_route_set_feeds_back_into_compile_payment(fake_transport):
    alt = {
        "paths_computed": [[{"currency": "USD", "issuer": ISSUER}]],
        "source_amount": {"currency": "EUR", "issuer": SRC, "value": "1.02"},
    }
    t = fake_transport({"ripple_path_find": {"alternatives": [alt], "destination_currencies": ["USD"]}})
    api = LedgerApi(t)
    q = PathFindIntent(
        source=PathFindSource(SRC),
        destination=PathFindDestination(DST, Amount("USD", "1", ISSUER)),
    )
    routes = asyncio.run(api.find_paths(q))
    intents = routes.to_payment_intents()
    assert len(intents) == 1
    assert isinstance(intents[0].source, CappedAtMax)

    prepared = asyncio.run(api.compile_payment(SRC, intents[0]))
    tx = json.loads(prepared.tx_json)
    assert tx["SendMax"] == {"currency": "EUR", "issuer": SRC, "value": "1.02"}
    assert tx["Amount"] == {"currency": "USD", "issuer": ISSUER, "value": "1"}
    assert tx["Paths"] == [[{"currency": "USD", "issuer": ISSUER}]]


def test_find_paths_requires_transport():
    q = PathFindIntent(source=PathFindSource(SRC), destination=PathFindDestination(DST, Amount("XRP", "1")))
    with pytest.raises(RuntimeError):
        asyncio.run(LedgerApi().find_paths(q))
