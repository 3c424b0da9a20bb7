"""CheckCreate compiler: CheckIntent -> rippled CheckCreate transaction object."""
from __future__ import annotations

from typing import Any, Dict

from .common import to_ledger_time
from .core.amounts import encode_amount
from .core.datatypes import CheckIntent


def create_check_create_transaction(account: str, check: CheckIntent) -> Dict[str, Any]:
    """Compile `check` for signer `account` into a plain CheckCreate object."""
    tx: Dict[str, Any] = {
        "Account": account,
        "TransactionType": "CheckCreate",
        "Destination": check.destination,
        "SendMax": encode_amount(check.send_max),
    }
    if check.destination_tag is not None:
        tx["DestinationTag"] = check.destination_tag
    if check.expiration is not None:
        tx["Expiration"] = to_ledger_time(check.expiration)
    if check.invoice_id is not None:
        tx["InvoiceID"] = check.invoice_id
    return tx


__all__ = ["create_check_create_transaction"]
