"""Domain package for debt payoff rules and core models."""

from .constants import MAX_PAYOFF_MONTHS, PAYOFF_EPSILON
from .models import (
    AIDebtStrategy,
    CashFlowImpact,
    Debt,
    DebtPayment,
    DebtPriority,
    DebtStrategy,
    DebtSummary,
    DebtType,
    FinancialSnapshot,
    PayoffCalculation,
    ScenarioSimulation,
    SimulationAssumptions,
    StrategyType,
)
from .policies import ensure_single_active_strategy
from .services import (
    build_financial_snapshot,
    calculate_cash_flow_impact,
    calculate_debt_summary,
    calculate_payoff,
    generate_avalanche_strategy,
    generate_insight,
    generate_optimized_order,
    generate_snowball_strategy,
    simulate_scenarios,
)

__all__ = [
    "MAX_PAYOFF_MONTHS",
    "PAYOFF_EPSILON",
    "AIDebtStrategy",
    "CashFlowImpact",
    "Debt",
    "DebtPayment",
    "DebtPriority",
    "DebtStrategy",
    "DebtSummary",
    "DebtType",
    "FinancialSnapshot",
    "PayoffCalculation",
    "ScenarioSimulation",
    "SimulationAssumptions",
    "StrategyType",
    "ensure_single_active_strategy",
    "build_financial_snapshot",
    "calculate_cash_flow_impact",
    "calculate_debt_summary",
    "calculate_payoff",
    "generate_avalanche_strategy",
    "generate_insight",
    "generate_optimized_order",
    "generate_snowball_strategy",
    "simulate_scenarios",
]
