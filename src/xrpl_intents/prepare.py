"""
Offline preparation step.

Stamps only what the caller supplied in `Instructions` and renders canonical
JSON. Fee, sequence and ledger-window discovery belong to a networked preparer;
pass one to `LedgerApi(prepare=...)` to replace this default.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .core.amounts import drops_from_xrp
from .core.datatypes import Instructions, Prepared

# Debug printing control
DEBUG_PREPARE = False

def _dbg(msg: str) -> None:
    if DEBUG_PREPARE:
        print(msg)


def prepare_transaction(tx_json: Dict[str, Any], instructions: Optional[Instructions] = None) -> Prepared:
    tx = dict(tx_json)
    instructions = instructions or Instructions()
    out: Dict[str, Any] = {}
    if instructions.fee is not None:
        tx["Fee"] = str(drops_from_xrp(instructions.fee))
        out["fee"] = instructions.fee
    if instructions.sequence is not None:
        tx["Sequence"] = instructions.sequence
        out["sequence"] = instructions.sequence
    if instructions.max_ledger_version is not None:
        tx["LastLedgerSequence"] = instructions.max_ledger_version
        out["maxLedgerVersion"] = instructions.max_ledger_version
    _dbg(f"prepare_transaction: {tx.get('TransactionType')} stamped {sorted(out)}")
    return Prepared(tx_json=json.dumps(tx, sort_keys=True, separators=(",", ":")), instructions=out)


__all__ = ["prepare_transaction"]
