"""Use case to record a payment against a debt."""

from collections.abc import Callable
from datetime import date
from uuid import uuid4

from src.application.ports.debt_repository import DebtRepositoryPort
from src.domain.models import DebtPayment
from src.domain.services import apply_payment, normalize_debt
from src.infrastructure.logging.logger import get_app_logger


def _new_id() -> str:
    return str(uuid4())


class RecordDebtPaymentUseCase:
    """Split a payment into principal and interest and persist it."""

    def __init__(
        self,
        debt_repository: DebtRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        """Initialize the use case.

        Args:
            debt_repository: Port persisting debts and payments.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Generates identifiers for new payments.
        """
        self._debt_repository = debt_repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory

    def execute(
        self,
        user_id: str,
        debt_id: str,
        amount,
        payment_date: date | None = None,
        is_extra_payment: bool = False,
        notes: str | None = None,
    ) -> DebtPayment:
        """Record a payment and update the debt balance.

        Args:
            user_id: Owner of the debt.
            debt_id: Debt being paid.
            amount: Payment amount; must be positive.
            payment_date: Date of the payment, today when omitted.
            is_extra_payment: Whether the payment exceeds the minimum.
            notes: Optional free text.

        Returns:
            DebtPayment: The persisted payment.

        Raises:
            ValueError: If the amount is not positive or the debt is invalid.
            RuntimeError: If the debt does not exist for the user.
        """
        debt = normalize_debt(
            self._debt_repository.get_debt(debt_id, user_id),
            self._logger,
        )
        payment, updated = apply_payment(
            debt,
            amount,
            payment_date or date.today(),
            self._id_factory(),
            is_extra_payment=is_extra_payment,
            notes=notes,
        )
        saved = self._debt_repository.record_payment(payment)
        self._logger.info(
            f"Recorded payment of {payment.amount} on debt {debt_id}; "
            f"remaining balance {updated.current_balance}"
        )
        return saved


__all__ = ["RecordDebtPaymentUseCase"]
