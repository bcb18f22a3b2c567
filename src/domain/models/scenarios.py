"""Domain models for what-if scenario simulations."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class SimulationAssumptions:
    """Adjusted inputs for a what-if run.

    Attributes:
        monthly_extra_payment: Extra amount added on top of the plan.
        income_change: Income change in percent; scales all payments.
        expense_change: Expense change in percent.
        interest_rate_change: Additive change in annual percentage points.
        unexpected_expenses: One-off shock amounts.
    """

    monthly_extra_payment: Decimal = Decimal("0")
    income_change: Decimal = Decimal("0")
    expense_change: Decimal = Decimal("0")
    interest_rate_change: Decimal | None = None
    unexpected_expenses: list[Decimal] = field(default_factory=list)


@dataclass(frozen=True)
class SimulationOutcomes:
    """Computed results of a scenario run.

    ``never_pays_off`` is True when at least one debt still carries a balance
    at the month cap, so ``debt_free_date`` is not reached.
    """

    debt_free_date: date
    total_interest_paid: Decimal
    total_amount_paid: Decimal
    monthly_payment_range: tuple[Decimal, Decimal]
    success_probability: int
    months_to_debt_free: int = 0
    never_pays_off: bool = False


@dataclass(frozen=True)
class ScenarioSimulation:
    """Named what-if scenario with its assumptions and outcomes."""

    name: str
    assumptions: SimulationAssumptions
    outcomes: SimulationOutcomes


__all__ = [
    "SimulationAssumptions",
    "SimulationOutcomes",
    "ScenarioSimulation",
]
