"""Strategy generators producing ranked debt attack plans.

Every generator allocates the whole extra payment to the rank-1 debt for the
current cycle; the cascade to later debts once rank 1 is cleared is not
modelled here.
"""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    HIGH_INTEREST_RATE,
    HIGH_UTILIZATION,
    INTEREST_SCORE_CEILING,
    QUICK_WIN_BALANCE,
)
from src.domain.models import (
    AIDebtStrategy,
    Debt,
    DebtPriority,
    DebtType,
    FinancialSnapshot,
    OptimizationWeights,
    Recommendation,
)
from src.domain.services.amortization import (
    calculate_payoff,
    projected_payoff_date,
)
from src.domain.services.risk import (
    calculate_risk_score,
    generate_default_recommendations,
)
from src.utils.decimal_utils import coerce_decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")

DEFAULT_WEIGHTS = OptimizationWeights()

AVALANCHE_STRATEGY_NAME = "Avalanche Strategy"
AVALANCHE_METHODOLOGY = (
    "Pay highest interest rate debts first to minimize total interest paid"
)
SNOWBALL_STRATEGY_NAME = "Snowball Strategy"
SNOWBALL_METHODOLOGY = (
    "Pay smallest balance debts first for psychological wins and momentum"
)
HYBRID_STRATEGY_NAME = "Hybrid Optimization Strategy"
HYBRID_METHODOLOGY = (
    "Combines mathematical optimization with psychological quick wins for "
    "sustainable debt reduction"
)


def format_rate(rate: Decimal) -> str:
    """Render an annual rate without trailing zeros (``24.50`` -> ``24.5``)."""
    return f"{rate.normalize():f}"


def _build_priorities(
    ordered: list[Debt],
    extra_payment: Decimal,
    reasoning: Callable[[Debt, int], str],
    today: date | None,
) -> list[DebtPriority]:
    today = today or date.today()
    priorities = []
    for index, debt in enumerate(ordered):
        extra = extra_payment if index == 0 else ZERO
        calculation = calculate_payoff(debt, debt.minimum, extra)
        priorities.append(
            DebtPriority(
                debt_id=debt.id,
                priority=index + 1,
                reasoning=reasoning(debt, index),
                monthly_payment=debt.minimum,
                extra_payment=extra,
                projected_payoff=projected_payoff_date(
                    today,
                    calculation.months_to_payoff,
                ),
                months_to_payoff=calculation.months_to_payoff,
                never_pays_off=calculation.never_pays_off,
            )
        )
    return priorities


def generate_avalanche_strategy(
    debts: list[Debt],
    extra_payment,
    today: date | None = None,
) -> list[DebtPriority]:
    """Rank debts by interest rate, highest first.

    Args:
        debts: Debts to rank.
        extra_payment: Extra monthly amount given to the rank-1 debt.
        today: Reference date for projected payoff dates.

    Returns:
        list[DebtPriority]: Ranked priorities.
    """
    ordered = sorted(debts, key=lambda debt: debt.rate, reverse=True)

    def _reason(debt: Debt, index: int) -> str:
        label = "Highest interest debt" if index == 0 else "Lower priority"
        return f"Interest rate: {format_rate(debt.rate)}% - {label}"

    return _build_priorities(
        ordered,
        coerce_decimal(extra_payment),
        _reason,
        today,
    )


def generate_snowball_strategy(
    debts: list[Debt],
    extra_payment,
    today: date | None = None,
) -> list[DebtPriority]:
    """Rank debts by current balance, smallest first.

    Args:
        debts: Debts to rank.
        extra_payment: Extra monthly amount given to the rank-1 debt.
        today: Reference date for projected payoff dates.

    Returns:
        list[DebtPriority]: Ranked priorities.
    """
    ordered = sorted(debts, key=lambda debt: debt.current_balance)

    def _reason(debt: Debt, index: int) -> str:
        label = "Smallest balance" if index == 0 else "Higher balance"
        return f"Balance: ${debt.current_balance:,.2f} - {label}"

    return _build_priorities(
        ordered,
        coerce_decimal(extra_payment),
        _reason,
        today,
    )


def payoff_time_score(debt: Debt) -> Decimal:
    """Score how quickly a debt clears on minimum payments alone."""
    if debt.minimum == 0:
        return ZERO
    months = debt.current_balance / debt.minimum
    if months <= 6:
        return Decimal("100")
    if months <= 12:
        return Decimal("80")
    if months <= 24:
        return Decimal("60")
    if months <= 36:
        return Decimal("40")
    return Decimal("20")


def credit_utilization(debt: Debt) -> Decimal | None:
    """Return balance over limit for credit cards with a known limit."""
    if debt.debt_type != DebtType.CREDIT_CARD or not debt.credit_limit:
        return None
    return debt.current_balance / debt.credit_limit


def utilization_score(debt: Debt) -> Decimal:
    """Score credit-card utilization; other debts get a neutral 50."""
    utilization = credit_utilization(debt)
    if utilization is None:
        return Decimal("50")
    if utilization > HIGH_UTILIZATION:
        return Decimal("100")
    if utilization > Decimal("0.5"):
        return Decimal("80")
    if utilization > Decimal("0.3"):
        return Decimal("60")
    return Decimal("40")


def score_debt(
    debt: Debt,
    total_debt: Decimal,
    weights: OptimizationWeights = DEFAULT_WEIGHTS,
) -> Decimal:
    """Return the weighted multi-factor score of a debt.

    Args:
        debt: Debt to score.
        total_debt: Portfolio balance used for the balance factor.
        weights: Factor weights.

    Returns:
        Decimal: Score where higher means attack sooner.
    """
    interest_factor = debt.rate / INTEREST_SCORE_CEILING * HUNDRED
    balance_factor = ZERO
    if total_debt > 0:
        balance_factor = (1 - debt.current_balance / total_debt) * HUNDRED
    return (
        weights.interest * interest_factor
        + weights.balance * balance_factor
        + weights.payoff_time * payoff_time_score(debt)
        + weights.utilization * utilization_score(debt)
    )


def _optimized_reasoning(debt: Debt, score: Decimal) -> str:
    reasons = []
    if debt.rate > HIGH_INTEREST_RATE:
        reasons.append(f"High interest rate ({format_rate(debt.rate)}%)")
    if debt.current_balance < QUICK_WIN_BALANCE:
        reasons.append("Quick win opportunity")
    utilization = credit_utilization(debt)
    if utilization is not None and utilization > HIGH_UTILIZATION:
        reasons.append("High credit utilization")
    reasons.append(f"Optimization score: {score:.1f}")
    return ", ".join(reasons)


def generate_optimized_order(
    debts: list[Debt],
    snapshot: FinancialSnapshot,
    weights: OptimizationWeights = DEFAULT_WEIGHTS,
    today: date | None = None,
) -> list[DebtPriority]:
    """Rank debts by the weighted multi-factor score, highest first.

    The rank-1 debt receives the non-negative part of
    ``snapshot.available_for_debt`` as its extra payment.

    Args:
        debts: Debts to rank.
        snapshot: Financial snapshot providing total debt and extra pool.
        weights: Factor weights.
        today: Reference date for projected payoff dates.

    Returns:
        list[DebtPriority]: Ranked priorities.
    """
    scores = {
        debt.id: score_debt(debt, snapshot.total_debt, weights)
        for debt in debts
    }
    ordered = sorted(debts, key=lambda debt: scores[debt.id], reverse=True)
    return _build_priorities(
        ordered,
        snapshot.extra_payment_pool,
        lambda debt, _index: _optimized_reasoning(debt, scores[debt.id]),
        today,
    )


def calculate_strategy_outcomes(
    debts: list[Debt],
    debt_order: list[DebtPriority],
) -> tuple[Decimal, int]:
    """Compare a plan with paying only the minimums.

    Returns:
        tuple[Decimal, int]: Total interest saved and total months reduced
        across the debts of the plan.
    """
    by_id = {debt.id: debt for debt in debts}
    interest_saved = ZERO
    months_reduced = 0
    for priority in debt_order:
        debt = by_id.get(priority.debt_id)
        if debt is None:
            continue
        baseline = calculate_payoff(debt, debt.minimum)
        planned = calculate_payoff(
            debt,
            priority.monthly_payment,
            priority.extra_payment,
        )
        interest_saved += baseline.total_interest - planned.total_interest
        months_reduced += baseline.months_to_payoff - planned.months_to_payoff
    return interest_saved, months_reduced


def build_strategy(
    strategy_name: str,
    methodology: str,
    debts: list[Debt],
    debt_order: list[DebtPriority],
    snapshot: FinancialSnapshot,
    risk_score: int | None = None,
    recommendations: list[Recommendation] | None = None,
) -> AIDebtStrategy:
    """Assemble a strategy from a ranked order and a snapshot.

    Missing risk score and recommendations are computed from the snapshot.
    """
    interest_saved, months_reduced = calculate_strategy_outcomes(
        debts,
        debt_order,
    )
    if risk_score is None:
        risk_score = calculate_risk_score(snapshot)
    if recommendations is None:
        recommendations = generate_default_recommendations(snapshot)
    return AIDebtStrategy(
        strategy_name=strategy_name,
        methodology=methodology,
        debt_order=debt_order,
        total_interest_saved=interest_saved,
        months_reduced=months_reduced,
        cash_flow_impact=snapshot.extra_payment_pool,
        risk_score=risk_score,
        recommendations=recommendations,
    )


def generate_hybrid_strategy(
    debts: list[Debt],
    snapshot: FinancialSnapshot,
    weights: OptimizationWeights = DEFAULT_WEIGHTS,
    today: date | None = None,
) -> AIDebtStrategy:
    """Return the deterministic optimized strategy with local scoring."""
    order = generate_optimized_order(debts, snapshot, weights, today)
    return build_strategy(
        HYBRID_STRATEGY_NAME,
        HYBRID_METHODOLOGY,
        debts,
        order,
        snapshot,
    )


__all__ = [
    "DEFAULT_WEIGHTS",
    "AVALANCHE_STRATEGY_NAME",
    "AVALANCHE_METHODOLOGY",
    "SNOWBALL_STRATEGY_NAME",
    "SNOWBALL_METHODOLOGY",
    "HYBRID_STRATEGY_NAME",
    "HYBRID_METHODOLOGY",
    "format_rate",
    "generate_avalanche_strategy",
    "generate_snowball_strategy",
    "payoff_time_score",
    "credit_utilization",
    "utilization_score",
    "score_debt",
    "generate_optimized_order",
    "calculate_strategy_outcomes",
    "build_strategy",
    "generate_hybrid_strategy",
]
