"""
Amount algebra and wire codec.

- Native amounts (XRP) travel as integer drop strings; caller-facing values are
  XRP decimal strings.
- Issued amounts travel as {"currency", "issuer", "value"} objects; the
  caller-facing counterparty is the wire issuer.
- Counterparty defaulting follows the "any counterparty" convention: a blank
  counterparty on an issued amount is replaced by the owning side's address.

All value arithmetic is Decimal; binary floats are rejected at the boundary.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Dict, Optional, Union

from .constants import (
    NATIVE_CURRENCY,
    DROPS_PER_XRP,
    XRP_QUANTUM,
    MAX_XRP_VALUE,
    MAX_IOU_VALUE,
    PATHFIND_ANY_VALUE,
)
from .datatypes import Amount, Fixed, CappedAtMax, FloorAtMin, Adjustment, PaymentIntent
from .exc import AmountDomainError
from .fmt import to_decimal, fmt_value

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(msg)


#: Wire form of an amount: drop string (native) or issued-amount object.
WireAmount = Union[str, Dict[str, str]]


# ----------------------------
# Classification
# ----------------------------

def is_native_currency(amount: Amount) -> bool:
    """True iff `amount` is denominated in the ledger's native currency."""
    return amount.currency == NATIVE_CURRENCY


def is_all_native_payment(payment: PaymentIntent) -> bool:
    """True iff both the resolved source and destination currencies are native."""
    return (
        is_native_currency(adjustment_amount(payment.source))
        and is_native_currency(adjustment_amount(payment.destination))
    )


def adjustment_amount(adjustment: Adjustment) -> Amount:
    """The amount an adjustment commits to, whatever its shape."""
    if isinstance(adjustment, CappedAtMax):
        return adjustment.max_amount
    if isinstance(adjustment, FloorAtMin):
        return adjustment.min_amount
    return adjustment.amount


# ----------------------------
# Counterparty defaulting
# ----------------------------

def default_counterparty(amount: Amount, owner_address: str) -> Amount:
    """Return `amount` with a blank issued-currency counterparty set to `owner_address`.

    Native amounts and amounts that already name a counterparty come back unchanged.
    """
    if is_native_currency(amount) or amount.counterparty is not None:
        return amount
    _dbg(f"default_counterparty: {amount.currency} -> {owner_address}")
    return replace(amount, counterparty=owner_address)


def apply_any_counterparty(adjustment: Adjustment) -> Adjustment:
    """Default every amount-bearing field of `adjustment` from its own address."""
    if isinstance(adjustment, CappedAtMax):
        return replace(adjustment, max_amount=default_counterparty(adjustment.max_amount, adjustment.address))
    if isinstance(adjustment, FloorAtMin):
        return replace(adjustment, min_amount=default_counterparty(adjustment.min_amount, adjustment.address))
    if isinstance(adjustment, Fixed):
        return replace(adjustment, amount=default_counterparty(adjustment.amount, adjustment.address))
    return adjustment


# ----------------------------
# Sentinels
# ----------------------------

def create_maximal_amount(amount: Amount) -> Amount:
    """Copy of `amount` with its value replaced by the currency's ceiling sentinel."""
    max_value = MAX_XRP_VALUE if is_native_currency(amount) else MAX_IOU_VALUE
    return replace(amount, value=max_value)


# ----------------------------
# XRP Decimal bridges
# ----------------------------

def xrp_from_drops(d: Union[int, str]) -> Decimal:
    """Return Decimal XRP from integer drops."""
    if isinstance(d, str):
        if not d.strip().lstrip("-").isdigit():
            raise AmountDomainError(f"xrp_from_drops: drops must be an integer string: {d!r}")
        d = int(d)
    if isinstance(d, bool) or not isinstance(d, int):
        raise AmountDomainError("xrp_from_drops: drops must be int")
    return Decimal(d) * XRP_QUANTUM


def drops_from_xrp(x: Union[str, Decimal]) -> int:
    """Exact XRP -> drops conversion. Sub-drop precision is an error, never rounded."""
    d = to_decimal(x)
    q = d * DROPS_PER_XRP
    if q != q.to_integral_value():
        raise AmountDomainError(f"drops_from_xrp: value {x!r} has more than 6 decimal places")
    return int(q)


# ----------------------------
# Wire codec
# ----------------------------

def encode_amount(amount: Amount) -> WireAmount:
    """Caller amount -> rippled amount.

    The route-discovery sentinel '-1' is passed through verbatim for both
    native and issued amounts.
    """
    if amount.value is None:
        raise AmountDomainError(f"encode_amount: {amount.currency} amount has no value")
    if is_native_currency(amount):
        if amount.value == PATHFIND_ANY_VALUE:
            return PATHFIND_ANY_VALUE
        return str(drops_from_xrp(amount.value))
    out: Dict[str, str] = {"currency": amount.currency, "value": amount.value}
    if amount.counterparty is not None:
        out["issuer"] = amount.counterparty
    return out


def decode_amount(raw: WireAmount) -> Amount:
    """rippled amount -> caller amount (drops become XRP, issuer becomes counterparty)."""
    if isinstance(raw, str):
        return Amount(currency=NATIVE_CURRENCY, value=fmt_value(xrp_from_drops(raw)))
    if not isinstance(raw, dict) or "currency" not in raw:
        raise AmountDomainError(f"decode_amount: unrecognised amount {raw!r}")
    return Amount(
        currency=raw["currency"],
        value=raw.get("value"),
        counterparty=raw.get("issuer"),
    )


def rename_counterparty_to_issuer(amount: Amount) -> Dict[str, str]:
    """Structured-amount shape without a value, as used for `source_currencies`."""
    out: Dict[str, str] = {"currency": amount.currency}
    if amount.counterparty is not None:
        out["issuer"] = amount.counterparty
    if amount.value is not None:
        out["value"] = amount.value
    return out


def wire_value(raw: WireAmount) -> Optional[Decimal]:
    """Decimal value of a wire amount in caller units (XRP for drops)."""
    if isinstance(raw, str):
        return xrp_from_drops(raw)
    value = raw.get("value") if isinstance(raw, dict) else None
    return None if value is None else to_decimal(value)


__all__ = [
    "WireAmount",
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
    "wire_value",
]
