"""Tests for GenerateDebtStrategyUseCase."""

import asyncio
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.use_cases.generate_debt_strategy import (
    GenerateDebtStrategyUseCase,
    parse_strategy_type,
)
from src.domain.models import Debt, DebtType, StrategyType
from src.domain.services.strategies import (
    AVALANCHE_STRATEGY_NAME,
    HYBRID_STRATEGY_NAME,
    SNOWBALL_STRATEGY_NAME,
)

TODAY = date(2026, 1, 1)


def _debt(debt_id, balance, rate, minimum) -> Debt:
    return Debt(
        id=debt_id,
        user_id="user-1",
        creditor_name=debt_id.title(),
        debt_type=DebtType.PERSONAL_LOAN,
        current_balance=Decimal(balance),
        interest_rate=Decimal(rate),
        minimum_payment=Decimal(minimum),
    )


def _debts() -> list[Debt]:
    return [
        _debt("a", "1000", "25", "50"),
        _debt("b", "10000", "10", "200"),
        _debt("c", "400", "5", "25"),
    ]


def _use_case(optimal_generator=None, **kwargs) -> GenerateDebtStrategyUseCase:
    return GenerateDebtStrategyUseCase(
        optimal_generator=optimal_generator or MagicMock(),
        logger=MagicMock(),
        today=TODAY,
        selector=lambda options: options[0],
        **kwargs,
    )


def test_avalanche_report_contains_context_and_outcomes():
    """Avalanche uses the local generator with computed outcomes."""
    optimal = MagicMock()
    optimal.generate = AsyncMock()
    use_case = _use_case(optimal)

    report = asyncio.run(
        use_case.execute(_debts(), 5000, 3000, 0, strategy_type="avalanche")
    )

    assert report.strategy.strategy_name == AVALANCHE_STRATEGY_NAME
    assert [p.debt_id for p in report.strategy.debt_order] == ["a", "b", "c"]
    assert report.strategy.debt_order[0].extra_payment == Decimal("1725")
    assert report.strategy.total_interest_saved > 0
    assert report.strategy.months_reduced > 0
    assert report.snapshot.available_for_debt == Decimal("1725")
    assert report.summary.total_debt == Decimal("11400")
    assert report.cash_flow.total_debt_payments == Decimal("275")
    assert report.insight.startswith("Based on your current strategy")
    optimal.generate.assert_not_awaited()


def test_snowball_and_hybrid_use_local_generators():
    """Snowball and hybrid never call the AI-assisted generator."""
    optimal = MagicMock()
    optimal.generate = AsyncMock()
    use_case = _use_case(optimal)

    snowball = asyncio.run(
        use_case.execute(_debts(), 5000, 3000, strategy_type=StrategyType.SNOWBALL)
    )
    hybrid = asyncio.run(
        use_case.execute(_debts(), 5000, 3000, strategy_type="HYBRID")
    )

    assert snowball.strategy.strategy_name == SNOWBALL_STRATEGY_NAME
    assert [p.debt_id for p in snowball.strategy.debt_order] == ["c", "a", "b"]
    assert hybrid.strategy.strategy_name == HYBRID_STRATEGY_NAME
    optimal.generate.assert_not_awaited()


@pytest.mark.parametrize("strategy_type", ["ai_optimized", "custom", "unknown"])
def test_other_types_take_the_ai_path(strategy_type):
    """AI-optimized, custom and unknown types use the optimal generator."""
    sentinel = MagicMock(
        strategy_name="AI Optimized Strategy",
        risk_score=20,
        debt_order=[],
    )
    optimal = MagicMock()
    optimal.generate = AsyncMock(return_value=sentinel)
    use_case = _use_case(optimal)

    report = asyncio.run(
        use_case.execute(_debts(), 5000, 3000, strategy_type=strategy_type)
    )

    assert report.strategy is sentinel
    debts_arg, snapshot_arg = optimal.generate.await_args.args
    assert [debt.id for debt in debts_arg] == ["a", "b", "c"]
    assert snapshot_arg.total_debt == Decimal("11400")


def test_invalid_debts_are_rejected_before_generation():
    """A negative balance fails at the boundary."""
    optimal = MagicMock()
    optimal.generate = AsyncMock()
    use_case = _use_case(optimal)
    debts = _debts() + [_debt("bad", "-10", "5", "10")]

    with pytest.raises(ValueError):
        asyncio.run(use_case.execute(debts, 5000, 3000))
    optimal.generate.assert_not_awaited()


def test_negative_rates_are_clamped_before_generation():
    """Clamped rates flow into the strategy."""
    use_case = _use_case()
    debts = [_debt("neg", "500", "-4", "50")]

    report = asyncio.run(
        use_case.execute(debts, 3000, 2000, strategy_type="avalanche")
    )

    assert report.strategy.debt_order[0].reasoning.startswith(
        "Interest rate: 0%"
    )


def test_insight_context_is_forwarded():
    """The narrated insight follows the requested context."""
    use_case = _use_case()

    report = asyncio.run(
        use_case.execute(
            _debts(),
            5000,
            3000,
            strategy_type="snowball",
            insight_context="motivational",
        )
    )

    assert report.insight.startswith("Your optimized strategy beats")


def test_default_generator_is_built_without_collaborator():
    """Without an injected generator the AI path uses the local fallback."""
    use_case = GenerateDebtStrategyUseCase(
        logger=MagicMock(),
        today=TODAY,
    )

    report = asyncio.run(use_case.execute(_debts(), 5000, 3000))

    assert report.strategy.strategy_name == HYBRID_STRATEGY_NAME


def test_parse_strategy_type():
    """Strategy types parse case-insensitively with an AI default."""
    assert parse_strategy_type(" Avalanche ") is StrategyType.AVALANCHE
    assert parse_strategy_type(StrategyType.SNOWBALL) is StrategyType.SNOWBALL
    assert parse_strategy_type(None) is StrategyType.AI_OPTIMIZED
