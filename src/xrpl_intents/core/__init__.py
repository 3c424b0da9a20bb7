"""
XRPL Intents Core
=================

Unified exports for the intent datatypes, amount algebra and wire codec.
All value comparisons use Decimal; floats are rejected at the boundary.
"""

# NOTE:
#   The `core` package is dependency-free. Compilers and the route pipeline
#   build on it; nothing here performs I/O.

# Protocol constants (rippled RPC contract)
from .constants import (
    NATIVE_CURRENCY,
    DROPS_PER_XRP,
    XRP_QUANTUM,
    MAX_XRP_VALUE,
    MAX_IOU_VALUE,
    PATHFIND_ANY_VALUE,
    TF_NO_DIRECT_RIPPLE,
    TF_PARTIAL_PAYMENT,
    TF_LIMIT_QUALITY,
    LEDGER_EPOCH_OFFSET,
)

# Decimal helpers
from .fmt import (
    DEFAULT_DECIMAL_PRECISION,
    to_decimal,
    fmt_value,
)

# Intent and route datatypes
from .datatypes import (
    Amount,
    Fixed,
    CappedAtMax,
    FloorAtMin,
    Adjustment,
    Memo,
    PaymentIntent,
    CheckIntent,
    PathFindSource,
    PathFindDestination,
    PathFindIntent,
    RouteAlternative,
    RouteSet,
    Instructions,
    Prepared,
)

# Amount algebra and codec
from .amounts import (
    is_native_currency,
    is_all_native_payment,
    adjustment_amount,
    default_counterparty,
    apply_any_counterparty,
    create_maximal_amount,
    xrp_from_drops,
    drops_from_xrp,
    encode_amount,
    decode_amount,
    rename_counterparty_to_issuer,
)

# Core exceptions
from .exc import LedgerIntentError, ValidationError, AmountDomainError, NotFoundError

__all__ = [
    # constants
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
    # fmt
    "DEFAULT_DECIMAL_PRECISION",
    "to_decimal",
    "fmt_value",
    # datatypes
    "Amount",
    "Fixed",
    "CappedAtMax",
    "FloorAtMin",
    "Adjustment",
    "Memo",
    "PaymentIntent",
    "CheckIntent",
    "PathFindSource",
    "PathFindDestination",
    "PathFindIntent",
    "RouteAlternative",
    "RouteSet",
    "Instructions",
    "Prepared",
    # amounts
    "is_native_currency",
    "is_all_native_payment",
    "adjustment_amount",
    "default_counterparty",
    "apply_any_counterparty",
    "create_maximal_amount",
    "xrp_from_drops",
    "drops_from_xrp",
    "encode_amount",
    "decode_amount",
    "rename_counterparty_to_issuer",
    # exceptions
    "LedgerIntentError",
    "ValidationError",
    "AmountDomainError",
    "NotFoundError",
]
