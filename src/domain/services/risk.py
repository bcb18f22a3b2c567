"""Rule-based risk scoring and default recommendations."""

from decimal import Decimal

from src.domain.constants import MAX_RECOMMENDATIONS
from src.domain.models import (
    Effort,
    FinancialSnapshot,
    Recommendation,
    RecommendationType,
)

ZERO = Decimal("0")


def emergency_fund_months(snapshot: FinancialSnapshot) -> Decimal:
    """Return how many months of expenses the emergency fund covers.

    Zero or negative expenses are treated as one unit of expense.
    """
    expenses = snapshot.monthly_expenses
    if expenses <= 0:
        expenses = Decimal("1")
    return snapshot.emergency_fund / expenses


def calculate_risk_score(snapshot: FinancialSnapshot) -> int:
    """Score how fragile a repayment plan is, from 0 (safe) to 100.

    Args:
        snapshot: Monthly financial snapshot.

    Returns:
        int: Additive risk score clamped to [0, 100].
    """
    score = 0

    ratio = snapshot.debt_to_income_ratio
    if ratio > 40:
        score += 30
    elif ratio > 30:
        score += 20
    elif ratio > 20:
        score += 10

    coverage = emergency_fund_months(snapshot)
    if coverage < 1:
        score += 30
    elif coverage < 3:
        score += 20
    elif coverage < 6:
        score += 10

    if snapshot.available_for_debt < 100:
        score += 20
    elif snapshot.available_for_debt < 200:
        score += 10

    if snapshot.weighted_avg_interest > 20:
        score += 20
    elif snapshot.weighted_avg_interest > 15:
        score += 10

    return max(0, min(100, score))


def generate_default_recommendations(
    snapshot: FinancialSnapshot,
) -> list[Recommendation]:
    """Return up to three rule-based recommendations, highest priority first.

    Args:
        snapshot: Monthly financial snapshot.

    Returns:
        list[Recommendation]: Recommendations sorted by priority.
    """
    recommendations: list[Recommendation] = []

    if emergency_fund_months(snapshot) < 3:
        recommendations.append(
            Recommendation(
                type=RecommendationType.EXPENSE,
                action=(
                    "Build emergency fund to 3 months of expenses before "
                    "aggressive debt payoff"
                ),
                impact=snapshot.monthly_expenses * 3 - snapshot.emergency_fund,
                effort=Effort.MEDIUM,
                priority=1,
            )
        )

    if snapshot.weighted_avg_interest > 18:
        # Two years of the rate differential against a 10% loan.
        impact = (
            snapshot.total_debt
            * (snapshot.weighted_avg_interest - 10)
            / 100
            / 12
            * 24
        )
        recommendations.append(
            Recommendation(
                type=RecommendationType.CONSOLIDATION,
                action=(
                    "Consider debt consolidation loan or balance transfer to "
                    "reduce interest rates"
                ),
                impact=impact,
                effort=Effort.MEDIUM,
                priority=2,
            )
        )

    if snapshot.debt_to_income_ratio > 30:
        recommendations.append(
            Recommendation(
                type=RecommendationType.INCOME,
                action=(
                    "Explore side income opportunities to accelerate debt "
                    "payoff"
                ),
                impact=snapshot.monthly_income * Decimal("0.2") * 12,
                effort=Effort.HIGH,
                priority=3,
            )
        )

    if snapshot.available_for_debt < 200:
        recommendations.append(
            Recommendation(
                type=RecommendationType.EXPENSE,
                action=(
                    "Review and reduce monthly expenses to free up more for "
                    "debt payments"
                ),
                impact=snapshot.monthly_expenses * Decimal("0.1") * 12,
                effort=Effort.LOW,
                priority=2,
            )
        )

    recommendations.sort(key=lambda item: item.priority)
    return recommendations[:MAX_RECOMMENDATIONS]


__all__ = [
    "emergency_fund_months",
    "calculate_risk_score",
    "generate_default_recommendations",
]
