"""Port for persisting debts, payments, and strategies."""

from typing import Protocol

from src.domain.models import Debt, DebtPayment, DebtStrategy


class DebtRepositoryPort(Protocol):
    """Port exposing CRUD over a user's debts, payments, and strategies."""

    def get_debts(self, user_id: str) -> list[Debt]:
        """Return the active debts of a user, largest balance first."""

    def get_debt(self, debt_id: str, user_id: str) -> Debt:
        """Return one debt of a user.

        Raises:
            RuntimeError: If the debt does not exist for the user.
        """

    def create_debt(self, debt: Debt) -> Debt:
        """Insert a debt and return it."""

    def update_debt(self, debt: Debt) -> Debt:
        """Persist the editable fields of a debt and return it."""

    def deactivate_debt(self, debt_id: str, user_id: str) -> None:
        """Soft-delete a debt by clearing its active flag."""

    def record_payment(self, payment: DebtPayment) -> DebtPayment:
        """Append a payment and set the debt balance to its remaining balance.

        Both writes happen in one transaction.
        """

    def get_payment_history(self, debt_id: str) -> list[DebtPayment]:
        """Return the payments of a debt, most recent first."""

    def get_strategies(self, user_id: str) -> list[DebtStrategy]:
        """Return the strategies of a user, newest first."""

    def create_strategy(self, strategy: DebtStrategy) -> DebtStrategy:
        """Insert a strategy as the user's only active strategy.

        Other strategies of the user are deactivated in the same transaction.
        """

    def activate_strategy(self, strategy_id: str, user_id: str) -> DebtStrategy:
        """Make a strategy the user's only active strategy.

        Precondition: the strategy exists and belongs to ``user_id``.
        Postcondition: it is the only active strategy of ``user_id``.

        Raises:
            RuntimeError: If the precondition does not hold.
        """


__all__ = ["DebtRepositoryPort"]
