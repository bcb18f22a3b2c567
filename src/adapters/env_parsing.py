"""Helpers shared by the command-line adapters to read environment values."""

from datetime import date
from decimal import Decimal

from src.utils.decimal_utils import try_coerce_decimal


def parse_amount(value: str | None, name: str, logger) -> Decimal | None:
    """Parse a monetary environment value.

    Args:
        value: Raw value.
        name: Variable name used in warnings.
        logger: Logger used for warnings.

    Returns:
        Decimal | None: Parsed value or None when missing or invalid.
    """
    if value is None or not value.strip():
        return None
    amount = try_coerce_decimal(value.strip())
    if amount is None:
        logger.warning(f"Invalid {name} '{value}'. Expected a number.")
    return amount


def parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def parse_flag(value: str | None) -> bool:
    """Return True for the usual truthy spellings."""
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


__all__ = ["parse_amount", "parse_date", "parse_flag"]
