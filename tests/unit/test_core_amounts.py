import pytest
from decimal import Decimal

from xrpl_intents.core.amounts import (
    is_native_currency,
    is_all_native_payment,
    default_counterparty,
    apply_any_counterparty,
    create_maximal_amount,
    encode_amount,
    decode_amount,
    drops_from_xrp,
    xrp_from_drops,
    wire_value,
)
from xrpl_intents.core.constants import MAX_XRP_VALUE, MAX_IOU_VALUE
from xrpl_intents.core.datatypes import Amount, Fixed, CappedAtMax, FloorAtMin, PaymentIntent
from xrpl_intents.core.exc import AmountDomainError, ValidationError

SRC = "r9cZA1mLK5R5Am25ArfXFmqgNwjZgnfk59"
DST = "rpZc4mVfWUif9CRoHRKKcmhu1nx2xktxBo"
ISSUER = "rMH4UxPrbuMa1spCBR98hLLyNJp4d8p4tM"


# -----------------------------
# Classification
# -----------------------------


def test_is_native_currency():
    assert is_native_currency(Amount("XRP", "1"))
    assert not is_native_currency(Amount("USD", "1"))


@pytest.mark.parametrize(
    "src_ccy,dst_ccy,expected",
    [
        ("XRP", "XRP", True),
        ("XRP", "USD", False),
        ("USD", "XRP", False),
        ("USD", "USD", False),
    ],
)
def test_is_all_native_payment(src_ccy, dst_ccy, expected):
    p = PaymentIntent(
        source=CappedAtMax(SRC, Amount(src_ccy, "1")),
        destination=Fixed(DST, Amount(dst_ccy, "1")),
    )
    print(f"[all-native] {src_ccy}->{dst_ccy} expect {expected}")
    assert is_all_native_payment(p) is expected


# -----------------------------
# Counterparty defaulting
# -----------------------------


def test_default_counterparty_sets_blank_issued():
    a = default_counterparty(Amount("USD", "5"), SRC)
    assert a.counterparty == SRC


def test_default_counterparty_keeps_existing():
    a = Amount("USD", "5", ISSUER)
    assert default_counterparty(a, SRC) is a


def test_default_counterparty_never_touches_native():
    a = Amount("XRP", "5")
    out = default_counterparty(a, SRC)
    assert out is a
    assert out.counterparty is None


@pytest.mark.parametrize(
    "adjustment,field",
    [
        (Fixed(DST, Amount("EUR", "1")), "amount"),
        (CappedAtMax(DST, Amount("EUR", "1")), "max_amount"),
        (FloorAtMin(DST, Amount("EUR", "1")), "min_amount"),
    ],
)
def test_apply_any_counterparty_uses_owner_address(adjustment, field):
    out = apply_any_counterparty(adjustment)
    assert getattr(out, field).counterparty == DST
    # caller object untouched
    assert getattr(adjustment, field).counterparty is None


# -----------------------------
# Maximal amount sentinel
# -----------------------------


def test_create_maximal_amount_native():
    a = create_maximal_amount(Amount("XRP", "0.5"))
    assert a == Amount("XRP", MAX_XRP_VALUE)


def test_create_maximal_amount_issued_preserves_counterparty():
    a = create_maximal_amount(Amount("USD", "0.5", ISSUER))
    assert a.value == MAX_IOU_VALUE
    assert a.currency == "USD"
    assert a.counterparty == ISSUER
    assert Decimal(MAX_IOU_VALUE) > Decimal(MAX_XRP_VALUE)


# -----------------------------
# Drops bridge and wire codec
# -----------------------------


def test_drops_from_xrp_exact():
    assert drops_from_xrp("0.01") == 10_000
    assert drops_from_xrp(MAX_XRP_VALUE) == 10 ** 17


def test_drops_from_xrp_rejects_sub_drop():
    with pytest.raises(AmountDomainError):
        drops_from_xrp("0.0000001")


def test_xrp_from_drops():
    assert xrp_from_drops("1500000") == Decimal("1.5")
    with pytest.raises(AmountDomainError):
        xrp_from_drops("1.5")


def test_encode_native_and_issued():
    assert encode_amount(Amount("XRP", "2")) == "2000000"
    assert encode_amount(Amount("USD", "2", ISSUER)) == {"currency": "USD", "value": "2", "issuer": ISSUER}
    assert encode_amount(Amount("USD", "2")) == {"currency": "USD", "value": "2"}


def test_encode_requires_value():
    with pytest.raises(AmountDomainError):
        encode_amount(Amount("USD"))


def test_decode_amount():
    assert decode_amount("1500000") == Amount("XRP", "1.5")
    assert decode_amount({"currency": "USD", "issuer": ISSUER, "value": "3"}) == Amount("USD", "3", ISSUER)


def test_wire_value_uses_caller_units():
    assert wire_value("10000000") == Decimal("10")
    assert wire_value({"currency": "USD", "value": "4.20"}) == Decimal("4.2")


# -----------------------------
# Input validation
# -----------------------------


@pytest.mark.parametrize(
    "call",
    [
        lambda: Amount("XRP", "1", ISSUER),
        lambda: Amount("US", "1"),
        lambda: Amount("USD", "abc"),
        lambda: Amount("USD", 1.5),
        lambda: Fixed("not-an-address", Amount("XRP", "1")),
        lambda: Fixed(SRC, Amount("XRP", "1"), tag=-1),
    ],
)
def test_invalid_inputs_rejected(call):
    with pytest.raises(ValidationError):
        call()
