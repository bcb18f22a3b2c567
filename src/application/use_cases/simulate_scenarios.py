"""Use case to run what-if scenarios against a strategy."""

from datetime import date
from decimal import Decimal

from src.domain.models import (
    AIDebtStrategy,
    Debt,
    ScenarioSimulation,
    SimulationAssumptions,
)
from src.domain.services import normalize_debts, simulate_scenarios
from src.infrastructure.logging.logger import get_app_logger


def default_assumptions() -> list[SimulationAssumptions]:
    """Return the base run plus common what-if variations."""
    return [
        SimulationAssumptions(),
        SimulationAssumptions(monthly_extra_payment=Decimal("100")),
        SimulationAssumptions(income_change=Decimal("-15")),
        SimulationAssumptions(interest_rate_change=Decimal("2")),
    ]


class SimulateDebtScenariosUseCase:
    """Re-run a strategy under adjusted assumptions."""

    def __init__(self, logger=None, today: date | None = None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            today: Reference date for debt-free dates.
        """
        self._logger = logger or get_app_logger()
        self._today = today

    def execute(
        self,
        debts: list[Debt],
        strategy: AIDebtStrategy,
        assumptions: list[SimulationAssumptions] | None = None,
    ) -> list[ScenarioSimulation]:
        """Return one simulation per assumption set.

        Args:
            debts: Current debts of the user.
            strategy: Strategy whose order and payments are re-run.
            assumptions: Assumption sets; ``default_assumptions()`` if None.

        Returns:
            list[ScenarioSimulation]: Simulations in input order.
        """
        if assumptions is None:
            assumptions = default_assumptions()
        debts = normalize_debts(debts, self._logger)
        simulations = simulate_scenarios(
            debts,
            strategy,
            assumptions,
            self._today,
        )
        self._logger.info(
            f"Simulated {len(simulations)} scenarios for "
            f"{strategy.strategy_name}"
        )
        return simulations


__all__ = ["default_assumptions", "SimulateDebtScenariosUseCase"]
