"""Domain constants for the debt payoff engine."""

from decimal import Decimal

MAX_PAYOFF_MONTHS = 360
PAYOFF_EPSILON = Decimal("0.01")

# Rate (annual %) that maps to a full interest score in the optimized order.
INTEREST_SCORE_CEILING = Decimal("30")
QUICK_WIN_BALANCE = Decimal("1000")
HIGH_INTEREST_RATE = Decimal("20")
HIGH_UTILIZATION = Decimal("0.7")

DEFAULT_INCOME_CHANGE_TRIGGER = Decimal("10")
DEFAULT_EXPENSE_CHANGE_TRIGGER = Decimal("15")
DEFAULT_REVIEW_INTERVAL_DAYS = 30

MAX_RECOMMENDATIONS = 3

# Bounds on scanning free-text replies for a JSON object.
MAX_EXTRACTION_CHARS = 50_000
MAX_EXTRACTION_CANDIDATES = 64


__all__ = [
    "MAX_PAYOFF_MONTHS",
    "PAYOFF_EPSILON",
    "INTEREST_SCORE_CEILING",
    "QUICK_WIN_BALANCE",
    "HIGH_INTEREST_RATE",
    "HIGH_UTILIZATION",
    "DEFAULT_INCOME_CHANGE_TRIGGER",
    "DEFAULT_EXPENSE_CHANGE_TRIGGER",
    "DEFAULT_REVIEW_INTERVAL_DAYS",
    "MAX_RECOMMENDATIONS",
    "MAX_EXTRACTION_CHARS",
    "MAX_EXTRACTION_CANDIDATES",
]
