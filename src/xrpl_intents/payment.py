"""Payment intent compiler: PaymentIntent -> rippled Payment transaction object.

Validation runs first and aborts before anything is assembled:
  1. counterparty defaulting on a normalised copy (owner address supplies the default)
  2. signing address must equal source.address
  3. adjustment pairing must be (CappedAtMax, Fixed) or (Fixed, FloorAtMin)

With a FloorAtMin destination the Amount field is only an upper bound, so for
anything but XRP->XRP it is raised to the currency ceiling; otherwise the
destination cap could bind before the source cap. DeliverMin carries the real
minimum and the partial-payment flag is forced.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Tuple

from .common import decode_paths, encode_memo
from .core.amounts import (
    adjustment_amount,
    apply_any_counterparty,
    create_maximal_amount,
    encode_amount,
    is_all_native_payment,
)
from .core.constants import TF_LIMIT_QUALITY, TF_NO_DIRECT_RIPPLE, TF_PARTIAL_PAYMENT
from .core.datatypes import Amount, CappedAtMax, Fixed, FloorAtMin, PaymentIntent
from .core.exc import ValidationError

# Debug printing control
DEBUG_PAYMENT = False

def _dbg(msg: str) -> None:
    if DEBUG_PAYMENT:
        print(msg)


def _check_adjustment_shape(payment: PaymentIntent) -> None:
    src, dst = payment.source, payment.destination
    capped_to_fixed = isinstance(src, CappedAtMax) and isinstance(dst, Fixed)
    fixed_to_floor = isinstance(src, Fixed) and isinstance(dst, FloorAtMin)
    if not (capped_to_fixed or fixed_to_floor):
        raise ValidationError(
            "payment must specify either (source.max_amount and destination.amount) "
            "or (source.amount and destination.min_amount); "
            f"got ({type(src).__name__}, {type(dst).__name__})"
        )


def _resolve_amounts(payment: PaymentIntent) -> Tuple[Amount, Amount]:
    return adjustment_amount(payment.source), adjustment_amount(payment.destination)


def create_payment_transaction(address: str, payment: PaymentIntent) -> Dict[str, Any]:
    """Compile `payment` for signer `address` into a plain Payment object."""
    payment = replace(
        payment,
        source=apply_any_counterparty(payment.source),
        destination=apply_any_counterparty(payment.destination),
    )

    if address != payment.source.address:
        raise ValidationError("address must match payment.source.address")
    _check_adjustment_shape(payment)

    source_amount, destination_amount = _resolve_amounts(payment)
    deliver_min = isinstance(payment.destination, FloorAtMin)
    all_native = is_all_native_payment(payment)

    amount = create_maximal_amount(destination_amount) if (deliver_min and not all_native) else destination_amount
    _dbg(f"create_payment_transaction: all_native={all_native} deliver_min={deliver_min} amount={amount}")

    tx: Dict[str, Any] = {
        "TransactionType": "Payment",
        "Account": payment.source.address,
        "Destination": payment.destination.address,
        "Amount": encode_amount(amount),
        "Flags": 0,
    }

    if payment.invoice_id is not None:
        tx["InvoiceID"] = payment.invoice_id
    if payment.source.tag is not None:
        tx["SourceTag"] = payment.source.tag
    if payment.destination.tag is not None:
        tx["DestinationTag"] = payment.destination.tag
    if payment.memos is not None:
        tx["Memos"] = [encode_memo(m) for m in payment.memos]
    if payment.no_direct_route:
        tx["Flags"] |= TF_NO_DIRECT_RIPPLE
    if payment.limit_quality:
        tx["Flags"] |= TF_LIMIT_QUALITY

    if not all_native:
        # SendMax is redundant for XRP->XRP and never set there
        if payment.allow_partial_payment or deliver_min:
            tx["Flags"] |= TF_PARTIAL_PAYMENT
        tx["SendMax"] = encode_amount(source_amount)
        if deliver_min:
            tx["DeliverMin"] = encode_amount(destination_amount)
        if payment.paths is not None:
            tx["Paths"] = decode_paths(payment.paths)
    elif payment.allow_partial_payment:
        raise ValidationError("XRP to XRP payments cannot be partial payments")

    return tx


__all__ = ["create_payment_transaction"]
