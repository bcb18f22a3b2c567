"""Domain models for amortization results."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.constants import MAX_PAYOFF_MONTHS, PAYOFF_EPSILON


@dataclass(frozen=True)
class MonthlyPayment:
    """One row of a simulated payment schedule."""

    month: int
    payment_amount: Decimal
    principal_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class PayoffCalculation:
    """Outcome of simulating the payoff of a single debt.

    Attributes:
        debt_id: Identifier of the simulated debt.
        months_to_payoff: Number of simulated months.
        total_interest: Interest accrued over the simulation.
        total_amount: Starting balance plus total interest.
        monthly_payments: Full month-by-month schedule.
    """

    debt_id: str
    months_to_payoff: int
    total_interest: Decimal
    total_amount: Decimal
    monthly_payments: list[MonthlyPayment] = field(default_factory=list)

    @property
    def remaining_balance(self) -> Decimal:
        """Return the balance left after the last simulated month."""
        if not self.monthly_payments:
            return Decimal("0")
        return self.monthly_payments[-1].remaining_balance

    @property
    def never_pays_off(self) -> bool:
        """Return True when the plan hit the month cap with a balance left."""
        return (
            self.months_to_payoff >= MAX_PAYOFF_MONTHS
            and self.remaining_balance > PAYOFF_EPSILON
        )


@dataclass(frozen=True)
class ConsolidationAnalysis:
    """Comparison between current debts and a consolidation loan."""

    current_total: Decimal
    consolidated_total: Decimal
    consolidated_payment: Decimal
    monthly_savings: Decimal
    total_savings: Decimal
    break_even_months: int


__all__ = ["MonthlyPayment", "PayoffCalculation", "ConsolidationAnalysis"]
