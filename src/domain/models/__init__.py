"""Domain models package."""

from .debts import Debt, DebtPayment, DebtType
from .finance import CashFlowImpact, DebtSummary, FinancialSnapshot
from .payoff import ConsolidationAnalysis, MonthlyPayment, PayoffCalculation
from .scenarios import (
    ScenarioSimulation,
    SimulationAssumptions,
    SimulationOutcomes,
)
from .strategies import (
    AdjustmentTriggers,
    AIDebtStrategy,
    DebtPriority,
    DebtStrategy,
    Effort,
    OptimizationWeights,
    Recommendation,
    RecommendationType,
    StrategyType,
)

__all__ = [
    "Debt",
    "DebtPayment",
    "DebtType",
    "CashFlowImpact",
    "DebtSummary",
    "FinancialSnapshot",
    "ConsolidationAnalysis",
    "MonthlyPayment",
    "PayoffCalculation",
    "ScenarioSimulation",
    "SimulationAssumptions",
    "SimulationOutcomes",
    "AdjustmentTriggers",
    "AIDebtStrategy",
    "DebtPriority",
    "DebtStrategy",
    "Effort",
    "OptimizationWeights",
    "Recommendation",
    "RecommendationType",
    "StrategyType",
]
