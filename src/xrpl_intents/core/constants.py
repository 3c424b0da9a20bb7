"""
XRPL Intents Core Constants
===========================

Protocol constants fixed by the rippled RPC contract. Everything here is a
plain module-level value; Decimal context settings live in `fmt.py`.
"""

# NOTE: Sentinel values are wire strings, not numbers. They are copied verbatim
#       into outgoing requests and must never be re-formatted.

from decimal import Decimal

# ---------------------------------------------------------------------------
# Native currency
# ---------------------------------------------------------------------------

#: Currency code of the ledger's built-in settlement asset.
NATIVE_CURRENCY: str = "XRP"

#: Integer bridge: number of drops per 1 XRP.
DROPS_PER_XRP: int = 1_000_000

#: Minimum quantisation step for XRP values (1 drop = 1e-6 XRP).
XRP_QUANTUM: Decimal = Decimal("1e-6")


# ---------------------------------------------------------------------------
# Sentinels
# ---------------------------------------------------------------------------

#: Ceiling used for a native destination amount when only a delivery minimum matters.
MAX_XRP_VALUE: str = "100000000000"

#: Ceiling used for an issued destination amount (max mantissa at max exponent).
MAX_IOU_VALUE: str = "9999999999999999e80"

#: Destination value meaning "discover the maximum deliverable" in ripple_path_find.
PATHFIND_ANY_VALUE: str = "-1"


# ---------------------------------------------------------------------------
# Payment flags (tf*)
# ---------------------------------------------------------------------------

TF_NO_DIRECT_RIPPLE: int = 0x00010000
TF_PARTIAL_PAYMENT: int = 0x00020000
TF_LIMIT_QUALITY: int = 0x00040000


# ---------------------------------------------------------------------------
# Ledger time
# ---------------------------------------------------------------------------

#: Seconds between the Unix epoch and the ledger epoch (2000-01-01T00:00:00Z).
LEDGER_EPOCH_OFFSET: int = 946_684_800


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "NATIVE_CURRENCY",
    "DROPS_PER_XRP",
    "XRP_QUANTUM",
    "MAX_XRP_VALUE",
    "MAX_IOU_VALUE",
    "PATHFIND_ANY_VALUE",
    "TF_NO_DIRECT_RIPPLE",
    "TF_PARTIAL_PAYMENT",
    "TF_LIMIT_QUALITY",
    "LEDGER_EPOCH_OFFSET",
]
