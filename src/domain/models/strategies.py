"""Domain models for debt repayment strategies."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from src.domain.constants import (
    DEFAULT_EXPENSE_CHANGE_TRIGGER,
    DEFAULT_INCOME_CHANGE_TRIGGER,
    DEFAULT_REVIEW_INTERVAL_DAYS,
)


class StrategyType(str, Enum):
    """Named heuristics a stored strategy can be built from."""

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"
    CUSTOM = "custom"
    HYBRID = "hybrid"
    AI_OPTIMIZED = "ai_optimized"


class RecommendationType(str, Enum):
    PAYMENT = "payment"
    CONSOLIDATION = "consolidation"
    NEGOTIATION = "negotiation"
    INCOME = "income"
    EXPENSE = "expense"


class Effort(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class DebtPriority:
    """One entry of an ordered debt attack plan.

    Attributes:
        debt_id: Debt the entry refers to.
        priority: 1-based rank; rank 1 receives the extra payment.
        reasoning: Human-readable justification for the rank.
        monthly_payment: Regular payment applied each month.
        extra_payment: Extra amount allocated this cycle.
        projected_payoff: Month in which the debt is projected to be paid.
        months_to_payoff: Simulated months until payoff.
        never_pays_off: True when the payment never clears the balance.
    """

    debt_id: str
    priority: int
    reasoning: str
    monthly_payment: Decimal
    extra_payment: Decimal
    projected_payoff: date
    months_to_payoff: int = 0
    never_pays_off: bool = False


@dataclass(frozen=True)
class Recommendation:
    """Actionable suggestion attached to a strategy."""

    type: RecommendationType
    action: str
    impact: Decimal
    effort: Effort
    priority: int


@dataclass(frozen=True)
class AdjustmentTriggers:
    """Thresholds signalling that a plan should be recomputed."""

    income_change: Decimal = DEFAULT_INCOME_CHANGE_TRIGGER
    expense_change: Decimal = DEFAULT_EXPENSE_CHANGE_TRIGGER
    time_interval: int = DEFAULT_REVIEW_INTERVAL_DAYS


@dataclass(frozen=True)
class OptimizationWeights:
    """Weights of the multi-factor score used by the optimized order.

    The defaults encode a product judgement rather than a derived optimum.
    """

    interest: Decimal = Decimal("0.40")
    balance: Decimal = Decimal("0.30")
    payoff_time: Decimal = Decimal("0.20")
    utilization: Decimal = Decimal("0.10")


@dataclass(frozen=True)
class AIDebtStrategy:
    """Computed repayment plan with its aggregate outcomes.

    Attributes:
        strategy_name: Display name of the plan.
        methodology: Description of how the order was chosen.
        debt_order: Ranked debt priorities.
        total_interest_saved: Interest saved versus minimum-only payments.
        months_reduced: Months saved versus minimum-only payments.
        cash_flow_impact: Monthly amount committed to extra payments.
        risk_score: 0-100, higher is riskier.
        recommendations: At most three ranked recommendations.
        adjustment_triggers: Thresholds for recomputing the plan.
    """

    strategy_name: str
    methodology: str
    debt_order: list[DebtPriority]
    total_interest_saved: Decimal
    months_reduced: int
    cash_flow_impact: Decimal
    risk_score: int
    recommendations: list[Recommendation] = field(default_factory=list)
    adjustment_triggers: AdjustmentTriggers = field(
        default_factory=AdjustmentTriggers
    )


@dataclass(frozen=True)
class DebtStrategy:
    """Persisted strategy owned by a user.

    At most one strategy per user is active at a time.
    """

    id: str
    user_id: str
    strategy_name: str
    strategy_type: StrategyType
    extra_payment_amount: Decimal | None = None
    payment_allocation: dict[str, int] = field(default_factory=dict)
    is_active: bool = False
    ai_metadata: dict[str, Any] | None = None
    created_at: datetime | None = None


__all__ = [
    "StrategyType",
    "RecommendationType",
    "Effort",
    "DebtPriority",
    "Recommendation",
    "AdjustmentTriggers",
    "OptimizationWeights",
    "AIDebtStrategy",
    "DebtStrategy",
]
