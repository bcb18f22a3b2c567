"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, JSON, or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize a nullable numeric value, keeping None as None."""
    if value is None:
        return None
    return coerce_decimal(value)


def try_coerce_decimal(value) -> Decimal | None:
    """Return a Decimal for numeric-looking values, None otherwise.

    Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool) or value is None:
        return None
    try:
        result = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if result.is_nan() or result.is_infinite():
        return None
    return result


def quantize_money(value: Decimal) -> Decimal:
    """Round a Decimal amount to cents using half-up rounding."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide two Decimals, returning zero when the denominator is zero."""
    if denominator == 0:
        return Decimal("0")
    return numerator / denominator


__all__ = [
    "CENT",
    "coerce_decimal",
    "coerce_optional_decimal",
    "try_coerce_decimal",
    "quantize_money",
    "safe_divide",
]
