"""Demo: compile payment/check intents and (optionally) query routes from a live node.

Scenarios covered:
P1) XRP->XRP payment, source capped at max, destination fixed
P2) USD delivery floor funded by a fixed XRP spend (DeliverMin + maximal Amount)
C1) CheckCreate with expiration and destination tag
R1) Route query against a rippled JSON-RPC endpoint (needs --rpc)
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Callable, List, NamedTuple

from xrpl_intents import (
    Amount,
    CappedAtMax,
    CheckIntent,
    Fixed,
    FloorAtMin,
    Instructions,
    LedgerApi,
    LedgerIntentError,
    PathFindDestination,
    PathFindIntent,
    PathFindSource,
    PaymentIntent,
)

SOURCE = "r9cZA1mLK5R5Am25ArfXFmqgNwjZgnfk59"
DESTINATION = "rKmBGxocj9Abgy25J51Mk1iqFzW9aVF9Tc"
ISSUER = "rMH4UxPrbuMa1spCBR98hLLyNJp4d8p4tM"

INSTRUCTIONS = Instructions(fee="0.000012", sequence=1, max_ledger_version=1000)

# ---------- pretty printers ----------

def print_prepared(title: str, prepared) -> None:
    print(f"\n=== {title} ===")
    print(json.dumps(json.loads(prepared.tx_json), indent=2, sort_keys=True))


def print_routes(title: str, routes) -> None:
    print(f"\n=== {title} ===")
    for i, alt in enumerate(routes, start=1):
        hops = sum(len(p) for p in alt.computed_path)
        print(f"  [{i}] spend {alt.source_amount.value} {alt.source_amount.currency} ({hops} hops)")


# ---------- scenarios ----------

class Scenario(NamedTuple):
    sid: str
    fn: Callable[[], None]


def p1(api: LedgerApi) -> None:
    payment = PaymentIntent(
        source=CappedAtMax(SOURCE, Amount("XRP", "0.01")),
        destination=Fixed(DESTINATION, Amount("XRP", "0.01")),
    )
    print_prepared("P1) XRP->XRP", asyncio.run(api.compile_payment(SOURCE, payment, INSTRUCTIONS)))


def p2(api: LedgerApi) -> None:
    payment = PaymentIntent(
        source=Fixed(SOURCE, Amount("XRP", "25")),
        destination=FloorAtMin(DESTINATION, Amount("USD", "10", ISSUER)),
    )
    print_prepared("P2) XRP->USD delivery floor", asyncio.run(api.compile_payment(SOURCE, payment, INSTRUCTIONS)))


def c1(api: LedgerApi) -> None:
    check = CheckIntent(
        destination=DESTINATION,
        send_max=Amount("USD", "100", ISSUER),
        destination_tag=1,
        expiration="2030-01-01T00:00:00Z",
    )
    print_prepared("C1) CheckCreate", asyncio.run(api.compile_check_create(SOURCE, check, INSTRUCTIONS)))


def r1(api: LedgerApi, source: str, destination: str, currency: str, value: str) -> None:
    pathfind = PathFindIntent(
        source=PathFindSource(source),
        destination=PathFindDestination(destination, Amount(currency, value)),
    )
    print_routes("R1) ripple_path_find", asyncio.run(api.find_paths(pathfind)))


# ---------- run scenarios ----------
if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="XRPL intent compilation demo")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., P1,C1)")
    parser.add_argument("--rpc", type=str, default=None, help="rippled JSON-RPC URL for R1, e.g. http://127.0.0.1:5005")
    parser.add_argument("--source", type=str, default=SOURCE)
    parser.add_argument("--destination", type=str, default=DESTINATION)
    parser.add_argument("--currency", type=str, default="XRP")
    parser.add_argument("--value", type=str, default="1")
    args = parser.parse_args(sys.argv[1:])

    transport = None
    if args.rpc:
        from xrpl_intents.rpc import JsonRpcTransport, RpcConfig
        transport = JsonRpcTransport(RpcConfig(args.rpc))
    api = LedgerApi(transport)

    scenarios: List[Scenario] = [
        Scenario("P1", lambda: p1(api)),
        Scenario("P2", lambda: p2(api)),
        Scenario("C1", lambda: c1(api)),
    ]
    if transport is not None:
        scenarios.append(Scenario("R1", lambda: r1(api, args.source, args.destination, args.currency, args.value)))

    only = set(args.only.split(",")) if args.only else None
    for s in scenarios:
        if only and s.sid not in only:
            continue
        try:
            s.fn()
        except LedgerIntentError as e:
            print(f"[{s.sid}] {type(e).__name__}: {e}")
