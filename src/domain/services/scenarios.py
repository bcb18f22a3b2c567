"""Scenario simulator: re-runs a plan under what-if assumptions."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from src.domain.models import (
    AIDebtStrategy,
    Debt,
    ScenarioSimulation,
    SimulationAssumptions,
    SimulationOutcomes,
)
from src.domain.services.amortization import (
    calculate_payoff,
    projected_payoff_date,
)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def adjust_debts(
    debts: list[Debt],
    assumptions: SimulationAssumptions,
) -> list[Debt]:
    """Return copies of the debts with the assumed rate change applied.

    A missing rate counts as zero; adjusted rates never drop below zero.
    """
    change = assumptions.interest_rate_change
    if not change:
        return list(debts)
    return [
        replace(debt, interest_rate=max(ZERO, debt.rate + change))
        for debt in debts
    ]


def success_probability(assumptions: SimulationAssumptions) -> int:
    """Estimate the chance the plan survives the assumptions, 0 to 100."""
    probability = 100
    if assumptions.income_change < -10:
        probability -= 20
    if assumptions.expense_change > 10:
        probability -= 15
    probability -= 5 * len(assumptions.unexpected_expenses)
    return max(0, probability)


def scenario_name(assumptions: SimulationAssumptions) -> str:
    """Derive a display name from the non-default assumptions."""
    parts = []
    if assumptions.income_change:
        parts.append(
            "Income Increase"
            if assumptions.income_change > 0
            else "Income Decrease"
        )
    if assumptions.monthly_extra_payment:
        parts.append("Extra Payments")
    if assumptions.expense_change:
        parts.append(
            "Expense Increase"
            if assumptions.expense_change > 0
            else "Expense Decrease"
        )
    if assumptions.interest_rate_change:
        parts.append(
            "Rate Increase"
            if assumptions.interest_rate_change > 0
            else "Rate Decrease"
        )
    if assumptions.unexpected_expenses:
        parts.append("With Emergencies")
    return " + ".join(parts) if parts else "Base Scenario"


def calculate_simulation_outcomes(
    debts: list[Debt],
    strategy: AIDebtStrategy,
    assumptions: SimulationAssumptions,
    today: date | None = None,
) -> SimulationOutcomes:
    """Re-run every debt of the plan with payments scaled by income change.

    The portfolio is debt-free only once its slowest debt is paid, so the
    debt-free date uses the maximum months across debts.
    """
    today = today or date.today()
    by_id = {debt.id: debt for debt in debts}
    scale = 1 + assumptions.income_change / HUNDRED
    total_paid = ZERO
    total_interest = ZERO
    max_months = 0
    never_pays_off = False
    monthly_payments: list[Decimal] = []

    for priority in strategy.debt_order:
        debt = by_id.get(priority.debt_id)
        if debt is None:
            continue
        payment = priority.monthly_payment * scale
        extra = (
            priority.extra_payment + assumptions.monthly_extra_payment
        ) * scale
        calculation = calculate_payoff(debt, payment, extra)
        total_paid += calculation.total_amount
        total_interest += calculation.total_interest
        max_months = max(max_months, calculation.months_to_payoff)
        never_pays_off = never_pays_off or calculation.never_pays_off
        monthly_payments.append(payment + extra)

    payment_range = (ZERO, ZERO)
    if monthly_payments:
        payment_range = (min(monthly_payments), max(monthly_payments))

    return SimulationOutcomes(
        debt_free_date=projected_payoff_date(today, max_months),
        total_interest_paid=total_interest,
        total_amount_paid=total_paid,
        monthly_payment_range=payment_range,
        success_probability=success_probability(assumptions),
        months_to_debt_free=max_months,
        never_pays_off=never_pays_off,
    )


def simulate_scenarios(
    debts: list[Debt],
    base_strategy: AIDebtStrategy,
    assumptions: list[SimulationAssumptions],
    today: date | None = None,
) -> list[ScenarioSimulation]:
    """Simulate each assumption set against the base strategy.

    Args:
        debts: Current debts.
        base_strategy: Strategy whose debt order and payments are re-run.
        assumptions: What-if assumption sets, one simulation each.
        today: Reference date for debt-free dates.

    Returns:
        list[ScenarioSimulation]: One named simulation per assumption set.
    """
    simulations = []
    for assumption in assumptions:
        adjusted = adjust_debts(debts, assumption)
        simulations.append(
            ScenarioSimulation(
                name=scenario_name(assumption),
                assumptions=assumption,
                outcomes=calculate_simulation_outcomes(
                    adjusted,
                    base_strategy,
                    assumption,
                    today,
                ),
            )
        )
    return simulations


__all__ = [
    "adjust_debts",
    "success_probability",
    "scenario_name",
    "calculate_simulation_outcomes",
    "simulate_scenarios",
]
