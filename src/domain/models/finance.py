"""Domain models for portfolio-level debt figures."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.debts import Debt


@dataclass(frozen=True)
class DebtSummary:
    """Aggregate statistics for a debt portfolio.

    Attributes:
        total_debt: Sum of current balances.
        total_minimum_payment: Sum of minimum payments.
        average_interest_rate: Unweighted mean annual rate.
        weighted_average_interest: Balance-weighted mean annual rate.
        highest_interest_debt: Debt carrying the highest rate.
        smallest_balance_debt: Debt with the smallest balance.
        debt_to_income_ratio: Minimum payments as a percentage of income.
        projected_payoff_date: Payoff date of the slowest debt on minimums.
        total_interest_to_pay: Interest paid if only minimums are paid.
    """

    total_debt: Decimal
    total_minimum_payment: Decimal
    average_interest_rate: Decimal
    weighted_average_interest: Decimal
    highest_interest_debt: Debt | None
    smallest_balance_debt: Debt | None
    debt_to_income_ratio: Decimal
    projected_payoff_date: date
    total_interest_to_pay: Decimal


@dataclass(frozen=True)
class CashFlowImpact:
    """Monthly cash position after expenses and minimum debt payments."""

    available_income: Decimal
    total_debt_payments: Decimal
    remaining_after_debt: Decimal
    emergency_fund_coverage: Decimal
    discretionary_income: Decimal
    debt_payment_percentage: Decimal


@dataclass(frozen=True)
class FinancialSnapshot:
    """Derived monthly view of a user's finances fed to strategy generators.

    ``available_for_debt`` may be negative to signal that income does not
    cover expenses plus minimum payments.
    """

    monthly_income: Decimal
    monthly_expenses: Decimal
    available_for_debt: Decimal
    emergency_fund: Decimal
    debt_to_income_ratio: Decimal
    total_debt: Decimal
    weighted_avg_interest: Decimal

    @property
    def extra_payment_pool(self) -> Decimal:
        """Return the non-negative amount that can go to extra payments."""
        return max(Decimal("0"), self.available_for_debt)


__all__ = ["DebtSummary", "CashFlowImpact", "FinancialSnapshot"]
