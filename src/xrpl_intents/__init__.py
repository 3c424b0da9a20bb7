# Top-level API for xrpl_intents.
"""
Top-level API for xrpl_intents.

Compiles payment, check and route-query intents into rippled request objects
and turns ripple_path_find results into filtered route sets:
  - LedgerApi: compile_payment / compile_check_create / find_paths
  - create_payment_transaction, create_check_create_transaction: pure compilers
  - build_path_find_request: pure route-query builder

Signing, binary serialization, fee and sequence discovery are out of scope;
plug a networked preparer into `LedgerApi(prepare=...)` for those.
"""

# NOTE:
#   The JSON-RPC transport (`xrpl_intents.rpc`) is not imported here so that
#   the compilers can be used without `requests` being loaded.

from __future__ import annotations

from .api import LedgerApi
from .payment import create_payment_transaction
from .check import create_check_create_transaction
from .pathfind import build_path_find_request, find_paths
from .prepare import prepare_transaction
from .transport import Transport, get_native_balance

from .core import (
    Amount,
    Fixed,
    CappedAtMax,
    FloorAtMin,
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
    LedgerIntentError,
    ValidationError,
    AmountDomainError,
    NotFoundError,
)

__all__ = [
    # entry points
    "LedgerApi",
    "create_payment_transaction",
    "create_check_create_transaction",
    "build_path_find_request",
    "find_paths",
    "prepare_transaction",
    "Transport",
    "get_native_balance",
    # datatypes
    "Amount",
    "Fixed",
    "CappedAtMax",
    "FloorAtMin",
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
    # exceptions
    "LedgerIntentError",
    "ValidationError",
    "AmountDomainError",
    "NotFoundError",
]
