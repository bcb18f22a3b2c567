"""Domain policies package."""

from .strategy_activation import (
    active_strategies,
    ensure_single_active_strategy,
)

__all__ = ["active_strategies", "ensure_single_active_strategy"]
