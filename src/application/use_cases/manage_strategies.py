"""Use cases to persist strategies and switch the active one."""

from collections.abc import Callable
from datetime import datetime
from typing import Any
from uuid import uuid4

from src.application.ports.debt_repository import DebtRepositoryPort
from src.domain.models import AIDebtStrategy, DebtStrategy, StrategyType
from src.domain.policies.strategy_activation import (
    ensure_single_active_strategy,
)
from src.infrastructure.logging.logger import get_app_logger


def _new_id() -> str:
    return str(uuid4())


def strategy_metadata(strategy: AIDebtStrategy) -> dict[str, Any]:
    """Return a JSON-compatible description of a computed strategy."""
    return {
        "methodology": strategy.methodology,
        "risk_score": strategy.risk_score,
        "total_interest_saved": str(strategy.total_interest_saved),
        "months_reduced": strategy.months_reduced,
        "cash_flow_impact": str(strategy.cash_flow_impact),
        "debt_order": [
            {
                "debt_id": priority.debt_id,
                "priority": priority.priority,
                "reasoning": priority.reasoning,
                "monthly_payment": str(priority.monthly_payment),
                "extra_payment": str(priority.extra_payment),
                "projected_payoff": priority.projected_payoff.isoformat(),
            }
            for priority in strategy.debt_order
        ],
        "recommendations": [
            {
                "type": rec.type.value,
                "action": rec.action,
                "impact": str(rec.impact),
                "effort": rec.effort.value,
                "priority": rec.priority,
            }
            for rec in strategy.recommendations
        ],
        "adjustment_triggers": {
            "income_change": str(strategy.adjustment_triggers.income_change),
            "expense_change": str(strategy.adjustment_triggers.expense_change),
            "time_interval": strategy.adjustment_triggers.time_interval,
        },
    }


def to_debt_strategy(
    strategy_id: str,
    user_id: str,
    strategy_type: StrategyType,
    strategy: AIDebtStrategy,
    created_at: datetime | None = None,
) -> DebtStrategy:
    """Convert a computed strategy into its stored, active form."""
    return DebtStrategy(
        id=strategy_id,
        user_id=user_id,
        strategy_name=strategy.strategy_name,
        strategy_type=strategy_type,
        extra_payment_amount=strategy.cash_flow_impact,
        payment_allocation={
            priority.debt_id: priority.priority
            for priority in strategy.debt_order
        },
        is_active=True,
        ai_metadata=strategy_metadata(strategy),
        created_at=created_at,
    )


class SaveDebtStrategyUseCase:
    """Store a computed strategy as the user's active strategy."""

    def __init__(
        self,
        debt_repository: DebtRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        """Initialize the use case.

        Args:
            debt_repository: Port persisting strategies.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Generates identifiers for new strategies.
        """
        self._debt_repository = debt_repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory

    def execute(
        self,
        user_id: str,
        strategy_type: StrategyType | str,
        strategy: AIDebtStrategy,
    ) -> DebtStrategy:
        """Persist the strategy; every other strategy becomes inactive.

        Raises:
            ValueError: If the strategy type is unknown.
            RuntimeError: If the store ends with another active strategy.
        """
        stored = to_debt_strategy(
            self._id_factory(),
            user_id,
            StrategyType(strategy_type),
            strategy,
            created_at=datetime.now(),
        )
        created = self._debt_repository.create_strategy(stored)
        ensure_single_active_strategy(
            self._debt_repository.get_strategies(user_id),
            created.id,
        )
        self._logger.info(
            f"Saved {created.strategy_name} as active strategy for {user_id}"
        )
        return created


class ActivateDebtStrategyUseCase:
    """Switch the user's active strategy."""

    def __init__(
        self,
        debt_repository: DebtRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            debt_repository: Port persisting strategies.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._debt_repository = debt_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, strategy_id: str) -> DebtStrategy:
        """Activate a strategy of the user.

        Args:
            user_id: Owner of the strategy.
            strategy_id: Strategy to activate.

        Returns:
            DebtStrategy: The now active strategy.

        Raises:
            RuntimeError: If the strategy does not belong to the user or the
                store ends with more than one active strategy.
        """
        self._debt_repository.activate_strategy(strategy_id, user_id)
        active = ensure_single_active_strategy(
            self._debt_repository.get_strategies(user_id),
            strategy_id,
        )
        self._logger.info(f"Activated strategy {strategy_id} for {user_id}")
        return active


__all__ = [
    "strategy_metadata",
    "to_debt_strategy",
    "SaveDebtStrategyUseCase",
    "ActivateDebtStrategyUseCase",
]
