"""Domain services package."""

from .amortization import (
    analyze_consolidation,
    apply_payment,
    calculate_interest_savings,
    calculate_payoff,
)
from .extraction import ExtractionResult, extract_json_object
from .finance import (
    build_financial_snapshot,
    calculate_cash_flow_impact,
    calculate_debt_summary,
)
from .narrator import InsightContext, generate_insight
from .risk import calculate_risk_score, generate_default_recommendations
from .scenarios import simulate_scenarios
from .strategies import (
    calculate_strategy_outcomes,
    generate_avalanche_strategy,
    generate_hybrid_strategy,
    generate_optimized_order,
    generate_snowball_strategy,
)
from .validation import normalize_debt, normalize_debts

__all__ = [
    "analyze_consolidation",
    "apply_payment",
    "calculate_interest_savings",
    "calculate_payoff",
    "ExtractionResult",
    "extract_json_object",
    "build_financial_snapshot",
    "calculate_cash_flow_impact",
    "calculate_debt_summary",
    "InsightContext",
    "generate_insight",
    "calculate_risk_score",
    "generate_default_recommendations",
    "simulate_scenarios",
    "calculate_strategy_outcomes",
    "generate_avalanche_strategy",
    "generate_hybrid_strategy",
    "generate_optimized_order",
    "generate_snowball_strategy",
    "normalize_debt",
    "normalize_debts",
]
