"""Use case to build a repayment strategy report for a set of debts."""

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date

from src.application.use_cases.generate_optimal_strategy import (
    OptimalStrategyGenerator,
)
from src.domain.models import (
    AIDebtStrategy,
    CashFlowImpact,
    Debt,
    DebtSummary,
    FinancialSnapshot,
    OptimizationWeights,
    StrategyType,
)
from src.domain.services import (
    build_financial_snapshot,
    calculate_cash_flow_impact,
    calculate_debt_summary,
    generate_avalanche_strategy,
    generate_hybrid_strategy,
    generate_insight,
    generate_snowball_strategy,
    normalize_debts,
)
from src.domain.services.narrator import InsightContext
from src.domain.services.strategies import (
    AVALANCHE_METHODOLOGY,
    AVALANCHE_STRATEGY_NAME,
    DEFAULT_WEIGHTS,
    SNOWBALL_METHODOLOGY,
    SNOWBALL_STRATEGY_NAME,
    build_strategy,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DebtStrategyReport:
    """Strategy with the figures it was derived from."""

    snapshot: FinancialSnapshot
    summary: DebtSummary
    cash_flow: CashFlowImpact
    strategy: AIDebtStrategy
    insight: str


def parse_strategy_type(value) -> StrategyType:
    """Map a raw strategy type to the enum, defaulting to AI-optimized."""
    if isinstance(value, StrategyType):
        return value
    try:
        return StrategyType(str(value).strip().lower())
    except ValueError:
        return StrategyType.AI_OPTIMIZED


class GenerateDebtStrategyUseCase:
    """Generate a strategy, its financial context, and a narrated insight."""

    def __init__(
        self,
        optimal_generator: OptimalStrategyGenerator | None = None,
        logger=None,
        weights: OptimizationWeights = DEFAULT_WEIGHTS,
        today: date | None = None,
        selector: Callable[[Sequence[str]], str] = random.choice,
    ) -> None:
        """Initialize the use case.

        Args:
            optimal_generator: Generator for the AI-assisted path. A
                generator without text collaborator is used when omitted.
            logger: Optional logger compatible with logging.Logger-like API.
            weights: Weights of the local hybrid strategy.
            today: Reference date for payoff projections.
            selector: Picks the motivational message of the insight.
        """
        self._logger = logger or get_app_logger()
        self._optimal_generator = optimal_generator or OptimalStrategyGenerator(
            logger=self._logger,
            weights=weights,
            today=today,
        )
        self._weights = weights
        self._today = today
        self._selector = selector

    async def execute(
        self,
        debts: list[Debt],
        monthly_income,
        monthly_expenses,
        emergency_fund=0,
        strategy_type: StrategyType | str = StrategyType.AI_OPTIMIZED,
        insight_context: InsightContext | str = InsightContext.GENERAL,
    ) -> DebtStrategyReport:
        """Return the strategy report for the debts.

        Args:
            debts: Debts of the user; validated before any computation.
            monthly_income: Monthly income.
            monthly_expenses: Monthly expenses excluding debt payments.
            emergency_fund: Savings available for emergencies.
            strategy_type: Requested strategy; unknown values take the
                AI-assisted path.
            insight_context: Flavor of the narrated insight.

        Returns:
            DebtStrategyReport: Snapshot, summary, cash flow, strategy and
            insight.

        Raises:
            ValueError: If a debt has a negative balance or minimum payment.
        """
        debts = normalize_debts(debts, self._logger)
        snapshot = build_financial_snapshot(
            debts,
            monthly_income,
            monthly_expenses,
            emergency_fund,
        )
        summary = calculate_debt_summary(debts, monthly_income, self._today)
        cash_flow = calculate_cash_flow_impact(
            monthly_income,
            monthly_expenses,
            debts,
            emergency_fund,
        )
        kind = parse_strategy_type(strategy_type)
        strategy = await self._generate(kind, debts, snapshot)
        self._logger.info(
            f"Generated {strategy.strategy_name} for {len(debts)} debts "
            f"(risk score {strategy.risk_score})"
        )
        insight = generate_insight(
            debts,
            strategy,
            context=insight_context,
            selector=self._selector,
        )
        return DebtStrategyReport(
            snapshot=snapshot,
            summary=summary,
            cash_flow=cash_flow,
            strategy=strategy,
            insight=insight,
        )

    async def _generate(
        self,
        kind: StrategyType,
        debts: list[Debt],
        snapshot: FinancialSnapshot,
    ) -> AIDebtStrategy:
        if kind == StrategyType.AVALANCHE:
            order = generate_avalanche_strategy(
                debts,
                snapshot.extra_payment_pool,
                self._today,
            )
            return build_strategy(
                AVALANCHE_STRATEGY_NAME,
                AVALANCHE_METHODOLOGY,
                debts,
                order,
                snapshot,
            )
        if kind == StrategyType.SNOWBALL:
            order = generate_snowball_strategy(
                debts,
                snapshot.extra_payment_pool,
                self._today,
            )
            return build_strategy(
                SNOWBALL_STRATEGY_NAME,
                SNOWBALL_METHODOLOGY,
                debts,
                order,
                snapshot,
            )
        if kind == StrategyType.HYBRID:
            return generate_hybrid_strategy(
                debts,
                snapshot,
                self._weights,
                self._today,
            )
        return await self._optimal_generator.generate(debts, snapshot)


__all__ = [
    "DebtStrategyReport",
    "parse_strategy_type",
    "GenerateDebtStrategyUseCase",
]
