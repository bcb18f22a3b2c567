"""Boundary validation for debts entering the engine."""

from dataclasses import replace
from decimal import Decimal, InvalidOperation
from logging import Logger

from src.domain.models import Debt
from src.utils.decimal_utils import coerce_optional_decimal

_NUMERIC_FIELDS = (
    "current_balance",
    "interest_rate",
    "minimum_payment",
    "original_amount",
    "credit_limit",
)


def _is_nan(value: Decimal | None) -> bool:
    return value is not None and value.is_nan()


def _coerce_numbers(debt: Debt) -> Debt:
    """Convert the numeric fields of a debt to Decimal.

    Raises:
        ValueError: If a field is not numeric or the balance is missing.
    """
    changes = {}
    for name in _NUMERIC_FIELDS:
        raw = getattr(debt, name)
        try:
            value = coerce_optional_decimal(raw)
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise ValueError(
                f"Debt {debt.id} has a non-numeric {name}: {raw!r}"
            ) from exc
        if value is not raw:
            changes[name] = value
    if debt.current_balance is None:
        raise ValueError(f"Debt {debt.id} has no balance")
    return replace(debt, **changes) if changes else debt


def normalize_debt(debt: Debt, logger: Logger) -> Debt:
    """Reject unusable debts and clamp recoverable values.

    Numeric fields given as int, float or str are converted to Decimal.
    Negative or NaN balances and negative minimum payments are rejected.
    Negative or NaN interest rates are clamped to zero with a warning.

    Args:
        debt: Debt received from a caller or the data store.
        logger: Logger used for warnings.

    Returns:
        Debt: The debt, possibly converted or with its rate clamped.

    Raises:
        ValueError: If a numeric field cannot be read, or the balance or
            minimum payment is unusable.
    """
    debt = _coerce_numbers(debt)
    if _is_nan(debt.current_balance) or debt.current_balance < 0:
        raise ValueError(
            f"Debt {debt.id} has an invalid balance: {debt.current_balance}"
        )
    if debt.minimum_payment is not None and (
        _is_nan(debt.minimum_payment) or debt.minimum_payment < 0
    ):
        raise ValueError(
            f"Debt {debt.id} has an invalid minimum payment: "
            f"{debt.minimum_payment}"
        )
    rate = debt.interest_rate
    if rate is not None and (_is_nan(rate) or rate < 0):
        logger.warning(
            f"Interest rate for debt {debt.id} is {rate}; treating it as 0"
        )
        return replace(debt, interest_rate=Decimal("0"))
    return debt


def normalize_debts(debts: list[Debt], logger: Logger) -> list[Debt]:
    """Apply ``normalize_debt`` to every debt, preserving order."""
    return [normalize_debt(debt, logger) for debt in debts]


__all__ = ["normalize_debt", "normalize_debts"]
