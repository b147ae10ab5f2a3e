from decimal import Decimal, ROUND_HALF_UP

TWO_DP = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Coerce a strategy result (int, float or Decimal) to Decimal.

    Floats go through ``str`` so 0.1 stays 0.1 rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number, got {type(value).__name__}: {value!r}")
    return Decimal(str(value))


def round_money(value) -> Decimal:
    """Round to 2 dp, halves away from zero (2.675 → 2.68, -2.675 → -2.68)."""
    return to_decimal(value).quantize(TWO_DP, rounding=ROUND_HALF_UP)
