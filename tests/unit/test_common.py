from datetime import datetime

import pytest

from xrpl_intents.common import decode_paths, encode_memo, to_ledger_time
from xrpl_intents.core.datatypes import Memo
from xrpl_intents.core.exc import ValidationError


def test_encode_memo_omits_unset_parts():
    assert encode_memo(Memo(data="A")) == {"Memo": {"MemoData": "41"}}


@pytest.mark.parametrize(
    "ts,expected",
    [
        ("2000-01-01T00:00:00Z", 0),
        ("2000-01-01T01:00:00+01:00", 0),
        ("2017-11-14T00:00:00.000Z", 563932800),
    ],
)
def test_to_ledger_time(ts, expected):
    assert to_ledger_time(ts) == expected


@pytest.mark.parametrize(
    "ts",
    ["not a date", "1999-12-31T23:59:59Z", datetime(2020, 1, 1)],
)
def test_to_ledger_time_rejects(ts):
    with pytest.raises(ValidationError):
        to_ledger_time(ts)


def test_decode_paths():
    assert decode_paths('[[{"currency": "USD"}]]') == [[{"currency": "USD"}]]
    assert decode_paths([[]]) == [[]]
    with pytest.raises(ValidationError):
        decode_paths('{"a": 1}')


def test_encode_memo_requires_some_part():
    with pytest.raises(ValidationError):
        encode_memo(Memo())
