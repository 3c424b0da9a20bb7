"""Wire helpers shared by the compilers: memos, ledger time, path sets."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Union

from .core.constants import LEDGER_EPOCH_OFFSET
from .core.datatypes import Memo
from .core.exc import ValidationError


def _hex(text: str) -> str:
    return text.encode("utf-8").hex().upper()


def encode_memo(memo: Memo) -> Dict[str, Dict[str, str]]:
    """Memo -> rippled memo object. Unset parts are omitted."""
    if memo.data is None and memo.type is None and memo.format is None:
        raise ValidationError("memo must set at least one of type, format or data")
    inner: Dict[str, str] = {}
    if memo.data is not None:
        inner["MemoData"] = _hex(memo.data)
    if memo.type is not None:
        inner["MemoType"] = _hex(memo.type)
    if memo.format is not None:
        inner["MemoFormat"] = _hex(memo.format)
    return {"Memo": inner}


def to_ledger_time(timestamp: Union[str, datetime]) -> int:
    """ISO-8601 string or aware datetime -> seconds since the ledger epoch (2000-01-01Z)."""
    if isinstance(timestamp, str):
        try:
            # fromisoformat() on older interpreters does not accept a trailing 'Z'
            dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        except ValueError:
            raise ValidationError(f"not an ISO-8601 timestamp: {timestamp!r}") from None
    elif isinstance(timestamp, datetime):
        dt = timestamp
    else:
        raise ValidationError(f"unsupported timestamp type: {type(timestamp).__name__}")
    if dt.tzinfo is None:
        raise ValidationError(f"timestamp must carry a UTC offset: {timestamp!r}")
    unix = int(dt.astimezone(timezone.utc).timestamp())
    if unix < LEDGER_EPOCH_OFFSET:
        raise ValidationError(f"timestamp precedes the ledger epoch: {timestamp!r}")
    return unix - LEDGER_EPOCH_OFFSET


def decode_paths(raw: Union[str, List[Any]]) -> List[List[Dict[str, Any]]]:
    """Path-set JSON text (or an already decoded list) -> rippled `Paths` structure."""
    if isinstance(raw, str):
        try:
            paths = json.loads(raw)
        except ValueError:
            raise ValidationError("paths is not valid JSON") from None
    else:
        paths = raw
    if not isinstance(paths, list) or not all(isinstance(p, list) for p in paths):
        raise ValidationError("paths must be a list of path step lists")
    return paths


__all__ = [
    "encode_memo",
    "to_ledger_time",
    "decode_paths",
]
