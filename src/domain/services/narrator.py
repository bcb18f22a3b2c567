"""Template-based insight strings for a computed strategy."""

from collections.abc import Callable, Sequence
from decimal import Decimal
from enum import Enum
import math
import random

from src.domain.constants import QUICK_WIN_BALANCE
from src.domain.models import AIDebtStrategy, Debt
from src.utils.decimal_utils import safe_divide

Selector = Callable[[Sequence[str]], str]


class InsightContext(str, Enum):
    GENERAL = "general"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    MOTIVATIONAL = "motivational"


def _never_payoff_warning(
    debts: list[Debt],
    strategy: AIDebtStrategy,
) -> str | None:
    names = {debt.id: debt.creditor_name for debt in debts}
    stuck = [
        names.get(priority.debt_id, priority.debt_id)
        for priority in strategy.debt_order
        if priority.never_pays_off
    ]
    if not stuck:
        return None
    return (
        f"This plan never pays off {', '.join(stuck)}: the payment does not "
        "cover the monthly interest. Raise the payment above the monthly "
        "interest to start reducing the balance."
    )


def _general(debts: list[Debt], strategy: AIDebtStrategy) -> str:
    if not strategy.debt_order:
        return "Add your debts to build a payoff plan."
    warning = _never_payoff_warning(debts, strategy)
    if warning:
        return warning
    months = max(priority.months_to_payoff for priority in strategy.debt_order)
    focus = strategy.debt_order[0].reasoning.split(",")[0]
    return (
        f"Based on your current strategy, you'll be debt-free in {months} "
        f"months, saving ${strategy.total_interest_saved:.0f} in interest. "
        f"Focus on {focus} first for optimal results."
    )


def _weekly(debts: list[Debt], strategy: AIDebtStrategy) -> str:
    warning = _never_payoff_warning(debts, strategy)
    if warning:
        return warning
    weekly_extra = strategy.cash_flow_impact / 4
    days_closer = Decimal(7) / Decimal(30) * strategy.months_reduced
    return (
        f"This week, allocating ${weekly_extra:.0f} extra toward your "
        f"highest-priority debt moves you {days_closer:.1f} days closer to "
        "freedom. Every payment counts!"
    )


def _monthly(debts: list[Debt], strategy: AIDebtStrategy) -> str:
    by_id = {debt.id: debt for debt in debts}
    for priority in strategy.debt_order:
        debt = by_id.get(priority.debt_id)
        if debt is None or debt.current_balance >= QUICK_WIN_BALANCE:
            continue
        payment = priority.monthly_payment + priority.extra_payment
        if (
            payment <= 0
            or debt.current_balance <= 0
            or priority.never_pays_off
        ):
            continue
        remaining = math.ceil(safe_divide(debt.current_balance, payment))
        return (
            f"You're close to eliminating {debt.creditor_name}! Just "
            f"{remaining} more payments and you'll free up "
            f"${priority.monthly_payment:.2f} monthly."
        )
    return (
        "Great progress! You've optimized your strategy to save "
        f"${strategy.total_interest_saved / 12:.0f} per month in unnecessary "
        "interest. Keep going!"
    )


def motivational_messages(strategy: AIDebtStrategy) -> list[str]:
    """Return the fixed pool of motivational sentences for a strategy."""
    per_dollar = safe_divide(
        strategy.total_interest_saved,
        strategy.cash_flow_impact,
    )
    return [
        "Your optimized strategy beats minimum payments by "
        f"{strategy.months_reduced} months!",
        f"Every extra dollar today saves ${per_dollar:.2f} in interest.",
        "You're in the top 20% of people actively managing their debt. "
        "Keep it up!",
        f"{strategy.months_reduced} months faster to financial freedom with "
        "your current plan!",
    ]


def generate_insight(
    debts: list[Debt],
    strategy: AIDebtStrategy,
    context: str = InsightContext.GENERAL,
    selector: Selector = random.choice,
) -> str:
    """Render a short insight about a strategy.

    Args:
        debts: Debts the strategy refers to.
        strategy: Computed strategy.
        context: One of general, weekly, monthly, motivational; anything
            else renders the general insight.
        selector: Picks one motivational sentence from the pool.

    Returns:
        str: The insight text.
    """
    try:
        resolved = InsightContext(context)
    except ValueError:
        resolved = InsightContext.GENERAL

    if resolved is InsightContext.WEEKLY:
        return _weekly(debts, strategy)
    if resolved is InsightContext.MONTHLY:
        return _monthly(debts, strategy)
    if resolved is InsightContext.MOTIVATIONAL:
        return selector(motivational_messages(strategy))
    return _general(debts, strategy)


__all__ = [
    "InsightContext",
    "Selector",
    "motivational_messages",
    "generate_insight",
]
