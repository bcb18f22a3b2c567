"""Domain models for debts and recorded payments."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class DebtType(str, Enum):
    """Kinds of liability a user can track."""

    CREDIT_CARD = "credit_card"
    PERSONAL_LOAN = "personal_loan"
    STUDENT_LOAN = "student_loan"
    MORTGAGE = "mortgage"
    AUTO_LOAN = "auto_loan"
    MEDICAL_DEBT = "medical_debt"
    BUSINESS_LOAN = "business_loan"
    FAMILY_LOAN = "family_loan"
    OTHER = "other"


@dataclass(frozen=True)
class Debt:
    """A single liability owned by a user.

    Attributes:
        id: Unique debt identifier.
        user_id: Owner of the debt.
        creditor_name: Display name of the creditor.
        debt_type: Kind of liability.
        current_balance: Outstanding balance, never negative.
        interest_rate: Annual percentage rate; None means 0.
        minimum_payment: Required monthly payment, if known.
        original_amount: Principal at origination, if known.
        due_day: Day of month the payment is due.
        credit_limit: Limit for credit cards.
        loan_term_months: Contractual term for installment loans.
        notes: Free-text notes.
        is_active: False once the debt has been soft-deleted.
    """

    id: str
    user_id: str
    creditor_name: str
    debt_type: DebtType
    current_balance: Decimal
    interest_rate: Decimal | None = None
    minimum_payment: Decimal | None = None
    original_amount: Decimal | None = None
    due_day: int | None = None
    credit_limit: Decimal | None = None
    loan_term_months: int | None = None
    notes: str | None = None
    is_active: bool = True

    @property
    def rate(self) -> Decimal:
        """Return the annual rate with a missing value treated as zero."""
        return self.interest_rate or Decimal("0")

    @property
    def minimum(self) -> Decimal:
        """Return the minimum payment with a missing value treated as zero."""
        return self.minimum_payment or Decimal("0")


@dataclass(frozen=True)
class DebtPayment:
    """Immutable ledger entry for a payment applied to a debt."""

    id: str
    debt_id: str
    user_id: str
    payment_date: date
    amount: Decimal
    principal_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal
    is_extra_payment: bool = False
    notes: str | None = None


__all__ = ["DebtType", "Debt", "DebtPayment"]
