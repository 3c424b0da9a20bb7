"""
Decimal parsing and formatting helpers.

All comparisons between balances and amounts go through `to_decimal` so that
nothing on the value path touches binary floating point.
"""

from decimal import Decimal, InvalidOperation, getcontext

from .exc import AmountDomainError

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Global Decimal precision
# ---------------------------------------------------------------------------

#: Significant digits for Decimal arithmetic. Wire values carry at most 16
#: significant digits for issued amounts and 17 integer digits for drops.
DEFAULT_DECIMAL_PRECISION: int = 34
getcontext().prec = DEFAULT_DECIMAL_PRECISION


# ---------------------------------------------------------------------------
# Parsing / formatting
# ---------------------------------------------------------------------------

def to_decimal(value) -> Decimal:
    """Parse a decimal string (or int/Decimal) into a finite Decimal.

    Floats are rejected: '0.1' and 0.1 are not the same amount.
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise AmountDomainError(f"to_decimal(): unsupported type {type(value).__name__}")
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, (int, str)):
        try:
            d = Decimal(str(value).strip())
        except InvalidOperation:
            raise AmountDomainError(f"to_decimal(): not a decimal string: {value!r}") from None
    else:
        raise AmountDomainError(f"to_decimal(): unsupported type {type(value).__name__}")
    if d.is_nan() or d.is_infinite():
        raise AmountDomainError(f"to_decimal(): non-finite value {value!r}")
    _dbg(f"to_decimal: {value!r} -> {d}")
    return d


def fmt_value(d: Decimal) -> str:
    """Render a Decimal as a plain wire string without exponent or trailing zeros.

      Decimal('1.500000') -> '1.5'
      Decimal('1E+2')     -> '100'
      Decimal('0E-6')     -> '0'
    """
    if d == 0:
        return "0"
    s = format(d.normalize(), "f")
    return s


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "to_decimal",
    "fmt_value",
]
