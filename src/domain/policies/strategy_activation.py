"""Policy guarding the single-active-strategy invariant."""

from collections.abc import Iterable

from src.domain.models import DebtStrategy


def active_strategies(strategies: Iterable[DebtStrategy]) -> list[DebtStrategy]:
    """Return the strategies flagged active."""
    return [strategy for strategy in strategies if strategy.is_active]


def ensure_single_active_strategy(
    strategies: Iterable[DebtStrategy],
    strategy_id: str,
) -> DebtStrategy:
    """Check that exactly the given strategy is active.

    Args:
        strategies: All strategies of one user.
        strategy_id: Strategy expected to be the only active one.

    Returns:
        DebtStrategy: The active strategy.

    Raises:
        RuntimeError: If no strategy, another strategy, or more than one
            strategy is active.
    """
    active = active_strategies(strategies)
    if len(active) != 1 or active[0].id != strategy_id:
        active_ids = [strategy.id for strategy in active]
        raise RuntimeError(
            f"Expected only strategy {strategy_id} to be active, "
            f"found {active_ids}"
        )
    return active[0]


__all__ = ["active_strategies", "ensure_single_active_strategy"]
