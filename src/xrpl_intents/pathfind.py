"""Route discovery: PathFindIntent -> ripple_path_find request -> RouteSet.

The response side is an ordered pipeline of stages:
  1. merge request parameters into the raw result
  2. direct XRP route injection (one balance lookup, only when XRP is accepted)
  3. low-funds filtering for fixed-spend queries
  4. formatting, or a diagnosed NotFoundError when nothing survives

Balances and values are compared as Decimal in XRP units on both sides.
"""
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .core.amounts import (
    decode_amount,
    encode_amount,
    rename_counterparty_to_issuer,
    wire_value,
)
from .core.constants import NATIVE_CURRENCY, PATHFIND_ANY_VALUE
from .core.datatypes import Amount, PathFindIntent, RouteAlternative, RouteSet
from .core.exc import NotFoundError, ValidationError
from .core.fmt import to_decimal
from .transport import Transport, get_native_balance

# Debug printing control
DEBUG_PATHFIND = False

def _dbg(msg: str) -> None:
    if DEBUG_PATHFIND:
        print(msg)


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

def build_path_find_request(pathfind: PathFindIntent) -> Dict[str, Any]:
    """Compile a route query into a `ripple_path_find` request."""
    destination_amount = pathfind.destination.amount
    if destination_amount.value is None:
        destination_amount = replace(destination_amount, value=PATHFIND_ANY_VALUE)

    request: Dict[str, Any] = {
        "command": "ripple_path_find",
        "source_account": pathfind.source.address,
        "destination_account": pathfind.destination.address,
        "destination_amount": encode_amount(destination_amount),
    }
    if isinstance(request["destination_amount"], dict) and "issuer" not in request["destination_amount"]:
        # blank issuer means "any issuer" the recipient trusts
        request["destination_amount"]["issuer"] = request["destination_account"]

    if pathfind.source.currencies:
        request["source_currencies"] = [rename_counterparty_to_issuer(c) for c in pathfind.source.currencies]

    if pathfind.source.amount is not None:
        if pathfind.destination.amount.value is not None:
            raise ValidationError(
                "Cannot specify both source.amount and destination.amount.value in find_paths"
            )
        send_max = encode_amount(pathfind.source.amount)
        if isinstance(send_max, dict) and "issuer" not in send_max:
            send_max["issuer"] = pathfind.source.address
        request["send_max"] = send_max

    _dbg(f"build_path_find_request: {request}")
    return request


# ---------------------------------------------------------------------------
# Response stages
# ---------------------------------------------------------------------------

def _add_params(request: Dict[str, Any], result: Dict[str, Any]) -> Dict[str, Any]:
    paths = dict(result)
    paths["source_account"] = request["source_account"]
    paths["source_currencies"] = request.get("source_currencies")
    paths.setdefault("destination_account", request["destination_account"])
    paths.setdefault("destination_amount", request["destination_amount"])
    paths["alternatives"] = list(paths.get("alternatives") or [])
    return paths


def accepts_direct_xrp(paths: Dict[str, Any]) -> bool:
    """True when a direct XRP route is worth a balance lookup."""
    destination_amount = paths["destination_amount"]
    if not isinstance(destination_amount, str):
        return False
    return NATIVE_CURRENCY in (paths.get("destination_currencies") or [])


def _native_value(raw: str) -> Decimal:
    # the open-query sentinel is -1 in XRP units, not -1 drop
    if raw == PATHFIND_ANY_VALUE:
        return to_decimal(PATHFIND_ANY_VALUE)
    return wire_value(raw)


def add_direct_xrp_path(paths: Dict[str, Any], xrp_balance: str) -> Dict[str, Any]:
    """Prepend a zero-hop alternative if `xrp_balance` covers the destination amount."""
    destination_amount = paths["destination_amount"]
    if to_decimal(xrp_balance) >= _native_value(destination_amount):
        _dbg(f"add_direct_xrp_path: balance {xrp_balance} covers {destination_amount} drops")
        paths = dict(paths)
        paths["alternatives"] = [
            {"paths_computed": [], "source_amount": destination_amount},
            *paths["alternatives"],
        ]
    return paths


def filter_source_funds_low_paths(pathfind: PathFindIntent, paths: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only alternatives spending exactly the fixed source amount.

    Applies to "how much can this spend deliver" queries: source amount fixed,
    destination value open. A no-op otherwise.
    """
    if pathfind.source.amount is None or pathfind.destination.amount.value is not None:
        return paths
    requested = to_decimal(pathfind.source.amount.value)
    kept: List[Dict[str, Any]] = []
    for alt in paths["alternatives"]:
        raw = alt.get("source_amount")
        if raw is None:
            continue
        if wire_value(raw) == requested:
            kept.append(alt)
    _dbg(f"filter_source_funds_low_paths: kept {len(kept)}/{len(paths['alternatives'])}")
    paths = dict(paths)
    paths["alternatives"] = kept
    return paths


def _decode_open_amount(raw: Any) -> Amount:
    if raw == PATHFIND_ANY_VALUE:
        return Amount(currency=NATIVE_CURRENCY)
    if isinstance(raw, dict) and raw.get("value") == PATHFIND_ANY_VALUE:
        return Amount(currency=raw["currency"], counterparty=raw.get("issuer"))
    return decode_amount(raw)


def parse_path_find(paths: Dict[str, Any]) -> RouteSet:
    """Raw (merged) response -> RouteSet, preferred alternative first."""
    alternatives = []
    for alt in paths["alternatives"]:
        raw_source = alt.get("source_amount")
        if raw_source is None:
            continue
        raw_dest: Optional[Any] = alt.get("destination_amount")
        alternatives.append(RouteAlternative(
            source_amount=_decode_open_amount(raw_source),
            computed_path=list(alt.get("paths_computed") or []),
            destination_amount=None if raw_dest is None else decode_amount(raw_dest),
        ))
    return RouteSet(
        source_address=paths["source_account"],
        destination_address=paths["destination_account"],
        destination_amount=_decode_open_amount(paths["destination_amount"]),
        alternatives=tuple(alternatives),
    )


def format_response(pathfind: PathFindIntent, paths: Dict[str, Any]) -> RouteSet:
    if any(alt.get("source_amount") is not None for alt in paths["alternatives"]):
        return parse_path_find(paths)

    currency = pathfind.destination.amount.currency
    destination_currencies = paths.get("destination_currencies")
    if destination_currencies is not None and currency not in destination_currencies:
        raise NotFoundError(
            "No paths found. The destination_account does not accept "
            f"{currency}, they only accept: {', '.join(destination_currencies)}",
            accepted_currencies=list(destination_currencies),
        )
    if paths.get("source_currencies"):
        raise NotFoundError(
            "No paths found. Please ensure that the source_account has sufficient "
            "funds to execute the payment in one of the specified source_currencies. "
            "If it does there may be insufficient liquidity in the network to execute "
            "this payment right now"
        )
    raise NotFoundError(
        "No paths found. Please ensure that the source_account has sufficient "
        "funds to execute the payment. If it does there may be insufficient "
        "liquidity in the network to execute this payment right now"
    )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

async def process_path_find_response(
    transport: Transport,
    pathfind: PathFindIntent,
    request: Dict[str, Any],
    result: Dict[str, Any],
) -> RouteSet:
    paths = _add_params(request, result)
    if accepts_direct_xrp(paths):
        balance = await get_native_balance(transport, pathfind.source.address)
        paths = add_direct_xrp_path(paths, balance)
    paths = filter_source_funds_low_paths(pathfind, paths)
    return format_response(pathfind, paths)


async def find_paths(transport: Transport, pathfind: PathFindIntent) -> RouteSet:
    """Build the request, make one round trip, and post-process the result."""
    request = build_path_find_request(pathfind)
    result = await transport.request(request)
    return await process_path_find_response(transport, pathfind, request, result)


__all__ = [
    "build_path_find_request",
    "accepts_direct_xrp",
    "add_direct_xrp_path",
    "filter_source_funds_low_paths",
    "parse_path_find",
    "format_response",
    "process_path_find_response",
    "find_paths",
]
