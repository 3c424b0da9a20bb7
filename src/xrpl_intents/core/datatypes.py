"""
Core datatypes for intents and route sets.

All datatypes are frozen dataclasses. Compilers never mutate caller objects;
they derive normalised copies with `dataclasses.replace`.

Notes:
- Adjustment shape is a tagged variant (`Fixed`, `CappedAtMax`, `FloorAtMin`)
  chosen at construction time. Which pairings form a valid payment is checked
  by the payment compiler.
- `Amount.value` is a decimal *string* as it appears on the wire; it may be
  None only where a query leaves the value open (route discovery).
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional, Tuple, Union

from .constants import NATIVE_CURRENCY
from .exc import ValidationError
from .fmt import to_decimal

# Classic address: base58 (ripple alphabet) with leading 'r'.
_ADDRESS_RE = re.compile(r"^r[1-9A-HJ-NP-Za-km-z]{24,34}$")
# Standard 3-char code or 160-bit hex code.
_CURRENCY_RE = re.compile(r"^([A-Za-z0-9?!@#$%^&*<>(){}\[\]|]{3}|[0-9A-Fa-f]{40})$")
_HASH256_RE = re.compile(r"^[0-9A-Fa-f]{64}$")

UINT32_MAX = 2 ** 32 - 1


def _check_address(address: Any, what: str) -> None:
    if not isinstance(address, str) or not _ADDRESS_RE.match(address):
        raise ValidationError(f"{what} is not a valid address: {address!r}")


def _check_tag(tag: Any, what: str) -> None:
    if tag is None:
        return
    if isinstance(tag, bool) or not isinstance(tag, int) or not (0 <= tag <= UINT32_MAX):
        raise ValidationError(f"{what} must be an integer in [0, 2^32-1]: {tag!r}")


def _check_invoice_id(invoice_id: Any) -> None:
    if invoice_id is None:
        return
    if not isinstance(invoice_id, str) or not _HASH256_RE.match(invoice_id):
        raise ValidationError(f"invoice_id must be a 256-bit hex string: {invoice_id!r}")


# ---------------------------------------------------------------------------
# Amount
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Amount:
    """Currency amount as supplied by a caller.

    Fields:
    - currency: 'XRP' or an issued currency code.
    - value: decimal string; None when a route query leaves it open.
    - counterparty: issuer address; never set for the native currency.
    """

    currency: str
    value: Optional[str] = None
    counterparty: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.currency, str) or not _CURRENCY_RE.match(self.currency):
            raise ValidationError(f"invalid currency code: {self.currency!r}")
        if self.value is not None:
            if not isinstance(self.value, str):
                raise ValidationError(f"amount value must be a decimal string: {self.value!r}")
            to_decimal(self.value)
        if self.counterparty is not None:
            if self.currency == NATIVE_CURRENCY:
                raise ValidationError("native currency amounts cannot carry a counterparty")
            _check_address(self.counterparty, "counterparty")


# ---------------------------------------------------------------------------
# Adjustments (tagged variant)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Fixed:
    """A participant side with an exact amount."""

    address: str
    amount: Amount
    tag: Optional[int] = None

    def __post_init__(self):
        _check_address(self.address, "adjustment address")
        _check_tag(self.tag, "tag")


@dataclass(frozen=True)
class CappedAtMax:
    """A source side that may spend up to `max_amount`."""

    address: str
    max_amount: Amount
    tag: Optional[int] = None

    def __post_init__(self):
        _check_address(self.address, "adjustment address")
        _check_tag(self.tag, "tag")


@dataclass(frozen=True)
class FloorAtMin:
    """A destination side that must receive at least `min_amount`."""

    address: str
    min_amount: Amount
    tag: Optional[int] = None

    def __post_init__(self):
        _check_address(self.address, "adjustment address")
        _check_tag(self.tag, "tag")


Adjustment = Union[Fixed, CappedAtMax, FloorAtMin]


# ---------------------------------------------------------------------------
# Intents
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Memo:
    """Free-form memo attached to a transaction (plain text, hex-encoded on the wire)."""

    type: Optional[str] = None
    format: Optional[str] = None
    data: Optional[str] = None


@dataclass(frozen=True)
class PaymentIntent:
    """A payment from `source` to `destination`.

    `paths` is the JSON text of a computed path set, as produced by
    `RouteSet.to_payment_intents()`.
    """

    source: Union[Fixed, CappedAtMax]
    destination: Union[Fixed, FloorAtMin]
    paths: Optional[str] = None
    memos: Optional[Tuple[Memo, ...]] = None
    invoice_id: Optional[str] = None
    allow_partial_payment: bool = False
    no_direct_route: bool = False
    limit_quality: bool = False

    def __post_init__(self):
        _check_invoice_id(self.invoice_id)
        if self.memos is not None and not isinstance(self.memos, tuple):
            # freeze caller lists so the intent stays immutable
            object.__setattr__(self, "memos", tuple(self.memos))


@dataclass(frozen=True)
class CheckIntent:
    """A check that `destination` may later cash for up to `send_max`."""

    destination: str
    send_max: Amount
    destination_tag: Optional[int] = None
    expiration: Optional[Union[str, datetime]] = None
    invoice_id: Optional[str] = None

    def __post_init__(self):
        _check_address(self.destination, "destination")
        if self.send_max.value is None:
            raise ValidationError("send_max must carry a value")
        _check_tag(self.destination_tag, "destination_tag")
        _check_invoice_id(self.invoice_id)


@dataclass(frozen=True)
class PathFindSource:
    address: str
    amount: Optional[Amount] = None
    currencies: Optional[Tuple[Amount, ...]] = None

    def __post_init__(self):
        _check_address(self.address, "source address")
        if self.currencies is not None and not isinstance(self.currencies, tuple):
            object.__setattr__(self, "currencies", tuple(self.currencies))


@dataclass(frozen=True)
class PathFindDestination:
    address: str
    amount: Amount

    def __post_init__(self):
        _check_address(self.address, "destination address")


@dataclass(frozen=True)
class PathFindIntent:
    """Route query: how to move value from `source` to `destination`.

    Exactly one side may be fixed: either `source.amount` is set (spend a fixed
    amount) or `destination.amount.value` is set (deliver a fixed amount).
    """

    source: PathFindSource
    destination: PathFindDestination


# ---------------------------------------------------------------------------
# Route sets
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RouteAlternative:
    """One discovered way to move value, in caller units.

    - source_amount: what the source spends on this route.
    - computed_path: rippled `paths_computed` (list of path steps), verbatim.
    - destination_amount: set only when the query left the destination value
      open and the network reported what this route delivers.
    """

    source_amount: Amount
    computed_path: List[List[dict]] = field(default_factory=list)
    destination_amount: Optional[Amount] = None


@dataclass(frozen=True)
class RouteSet:
    """Ordered route alternatives; the first entry is the preferred one."""

    source_address: str
    destination_address: str
    destination_amount: Amount
    alternatives: Tuple[RouteAlternative, ...] = ()

    def __len__(self) -> int:
        return len(self.alternatives)

    def __iter__(self):
        return iter(self.alternatives)

    def __getitem__(self, i: int) -> RouteAlternative:
        return self.alternatives[i]

    def to_payment_intents(self) -> List[PaymentIntent]:
        """Turn each alternative into a PaymentIntent ready for compilation."""
        out: List[PaymentIntent] = []
        for alt in self.alternatives:
            paths = json.dumps(alt.computed_path)
            if alt.destination_amount is not None:
                intent = PaymentIntent(
                    source=Fixed(self.source_address, alt.source_amount),
                    destination=FloorAtMin(self.destination_address, alt.destination_amount),
                    paths=paths,
                )
            else:
                intent = PaymentIntent(
                    source=CappedAtMax(self.source_address, alt.source_amount),
                    destination=Fixed(self.destination_address, self.destination_amount),
                    paths=paths,
                )
            out.append(intent)
        return out


# ---------------------------------------------------------------------------
# Preparation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Instructions:
    """Caller-supplied preparation values. Nothing here is computed locally.

    - fee: XRP decimal string.
    - sequence: account sequence to use.
    - max_ledger_version: last ledger in which the transaction may validate.
    """

    fee: Optional[str] = None
    sequence: Optional[int] = None
    max_ledger_version: Optional[int] = None


@dataclass(frozen=True)
class Prepared:
    """Output of the preparation pipeline: canonical JSON text plus instructions."""

    tx_json: str
    instructions: dict


__all__ = [
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
]
