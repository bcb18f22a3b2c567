"""Application use cases package."""

from .generate_debt_strategy import (
    DebtStrategyReport,
    GenerateDebtStrategyUseCase,
)
from .generate_optimal_strategy import OptimalStrategyGenerator
from .manage_strategies import (
    ActivateDebtStrategyUseCase,
    SaveDebtStrategyUseCase,
)
from .record_debt_payment import RecordDebtPaymentUseCase
from .simulate_scenarios import SimulateDebtScenariosUseCase

__all__ = [
    "DebtStrategyReport",
    "GenerateDebtStrategyUseCase",
    "OptimalStrategyGenerator",
    "ActivateDebtStrategyUseCase",
    "SaveDebtStrategyUseCase",
    "RecordDebtPaymentUseCase",
    "SimulateDebtScenariosUseCase",
]
