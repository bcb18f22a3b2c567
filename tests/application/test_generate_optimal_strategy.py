"""Tests for the AI-assisted strategy generator and its fallback."""

import asyncio
from datetime import date
from decimal import Decimal
import json
from unittest.mock import MagicMock

from src.application.use_cases.generate_optimal_strategy import (
    AI_DEFAULT_METHODOLOGY,
    AI_STRATEGY_NAME,
    OptimalStrategyGenerator,
    build_prompt,
    parse_recommendations,
    parse_risk_score,
)
from src.domain.models import (
    Debt,
    DebtType,
    Effort,
    OptimizationWeights,
    RecommendationType,
)
from src.domain.services.finance import build_financial_snapshot
from src.domain.services.strategies import (
    HYBRID_STRATEGY_NAME,
    generate_hybrid_strategy,
)

TODAY = date(2026, 2, 1)


class FakeTextGenerator:
    """Text generator returning a canned response."""

    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


class SlowTextGenerator:
    """Text generator that never answers in time."""

    async def generate(self, prompt: str) -> str:
        await asyncio.sleep(5)
        return "{}"


def _debts() -> list[Debt]:
    return [
        Debt(
            id="card",
            user_id="user-1",
            creditor_name="Visa",
            debt_type=DebtType.CREDIT_CARD,
            current_balance=Decimal("2500"),
            interest_rate=Decimal("24.5"),
            minimum_payment=Decimal("75"),
            credit_limit=Decimal("3000"),
        ),
        Debt(
            id="car",
            user_id="user-1",
            creditor_name="Auto Finance",
            debt_type=DebtType.AUTO_LOAN,
            current_balance=Decimal("12000"),
            interest_rate=Decimal("6"),
            minimum_payment=Decimal("320"),
        ),
    ]


def _snapshot(debts):
    return build_financial_snapshot(debts, 5200, 3600, 1500)


def _generator(text_generator, **kwargs) -> OptimalStrategyGenerator:
    return OptimalStrategyGenerator(
        text_generator=text_generator,
        logger=MagicMock(),
        usage_logger=MagicMock(),
        today=TODAY,
        **kwargs,
    )


def _payload(**overrides) -> str:
    payload = {
        "methodology": "Clear the card, then the car",
        "risk_score": 42.6,
        "recommendations": [
            {
                "type": "negotiation",
                "action": "Call Visa to ask for a lower APR",
                "impact": 300,
                "effort": "low",
                "priority": 2,
            },
            {
                "type": "payment",
                "action": "Send the extra $1205 to Visa",
                "impact": "850.50",
                "effort": "Medium",
                "priority": 1,
            },
        ],
    }
    payload.update(overrides)
    return f"Sure! Here is the plan:\n{json.dumps(payload)}\nThanks."


def test_uses_ai_fields_on_top_of_optimized_order():
    """AI text supplies methodology, risk and recommendations."""
    debts = _debts()
    snapshot = _snapshot(debts)
    fake = FakeTextGenerator(_payload())

    strategy = asyncio.run(_generator(fake).generate(debts, snapshot))

    expected_order = generate_hybrid_strategy(debts, snapshot, today=TODAY)
    assert strategy.strategy_name == AI_STRATEGY_NAME
    assert strategy.methodology == "Clear the card, then the car"
    assert strategy.risk_score == 43
    assert strategy.debt_order == expected_order.debt_order
    assert [rec.priority for rec in strategy.recommendations] == [1, 2]
    first = strategy.recommendations[0]
    assert first.type is RecommendationType.PAYMENT
    assert first.effort is Effort.MEDIUM
    assert first.impact == Decimal("850.50")
    assert len(fake.prompts) == 1
    assert "Visa (credit_card): Balance $2500.00" in fake.prompts[0]


def test_missing_fields_fall_back_to_local_values():
    """Absent or invalid fields are replaced with local defaults."""
    debts = _debts()
    snapshot = _snapshot(debts)
    fake = FakeTextGenerator(
        '{"risk_score": "very high", "recommendations": [{"type": "magic"}]}'
    )
    logger = MagicMock()
    generator = OptimalStrategyGenerator(
        text_generator=fake,
        logger=logger,
        usage_logger=MagicMock(),
        today=TODAY,
    )

    strategy = asyncio.run(generator.generate(debts, snapshot))

    local = generate_hybrid_strategy(debts, snapshot, today=TODAY)
    assert strategy.strategy_name == AI_STRATEGY_NAME
    assert strategy.methodology == AI_DEFAULT_METHODOLOGY
    assert strategy.risk_score == local.risk_score
    assert strategy.recommendations == local.recommendations
    logger.warning.assert_called_once()


def test_unparseable_response_falls_back_to_hybrid():
    """Prose without JSON yields the deterministic hybrid strategy."""
    debts = _debts()
    snapshot = _snapshot(debts)
    generator = _generator(FakeTextGenerator("I am not able to do that."))

    strategy = asyncio.run(generator.generate(debts, snapshot))

    assert strategy == generate_hybrid_strategy(debts, snapshot, today=TODAY)
    assert strategy.strategy_name == HYBRID_STRATEGY_NAME


def test_collaborator_error_falls_back_to_hybrid():
    """Exceptions from the collaborator are logged, not raised."""
    debts = _debts()
    snapshot = _snapshot(debts)
    logger = MagicMock()
    generator = OptimalStrategyGenerator(
        text_generator=FakeTextGenerator(error=ConnectionError("offline")),
        logger=logger,
        usage_logger=MagicMock(),
        today=TODAY,
    )

    strategy = asyncio.run(generator.generate(debts, snapshot))

    assert strategy.strategy_name == HYBRID_STRATEGY_NAME
    logger.error.assert_called_once()
    assert "offline" in logger.error.call_args.args[0]


def test_timeout_falls_back_to_hybrid():
    """A slow collaborator is cut off by the timeout."""
    debts = _debts()
    snapshot = _snapshot(debts)
    logger = MagicMock()
    generator = OptimalStrategyGenerator(
        text_generator=SlowTextGenerator(),
        logger=logger,
        usage_logger=MagicMock(),
        timeout_seconds=0.01,
        today=TODAY,
    )

    strategy = asyncio.run(generator.generate(debts, snapshot))

    assert strategy.strategy_name == HYBRID_STRATEGY_NAME
    logger.warning.assert_called_once()


def test_without_collaborator_uses_hybrid_with_weights():
    """No collaborator means the hybrid strategy with the given weights."""
    debts = _debts()
    snapshot = _snapshot(debts)
    weights = OptimizationWeights(
        interest=Decimal("0"),
        balance=Decimal("0"),
        payoff_time=Decimal("1"),
        utilization=Decimal("0"),
    )

    strategy = asyncio.run(
        _generator(None, weights=weights).generate(debts, snapshot)
    )

    assert strategy == generate_hybrid_strategy(
        debts,
        snapshot,
        weights,
        TODAY,
    )


def test_parse_risk_score_bounds():
    """Only numbers within [0, 100] are accepted."""
    assert parse_risk_score(0) == 0
    assert parse_risk_score("100") == 100
    assert parse_risk_score(101) is None
    assert parse_risk_score(-1) is None
    assert parse_risk_score(True) is None
    assert parse_risk_score(None) is None


def test_parse_recommendations_caps_at_three():
    """At most three recommendations are kept, by priority."""
    raw = [
        {
            "type": "expense",
            "action": f"Cut cost {index}",
            "impact": 10 * index,
            "effort": "low",
            "priority": 5 - index,
        }
        for index in range(5)
    ]

    parsed = parse_recommendations(raw)

    assert [rec.priority for rec in parsed] == [1, 2, 3]
    assert parse_recommendations([]) is None
    assert parse_recommendations("cut costs") is None
    assert parse_recommendations([{"type": "expense", "action": ""}]) is None


def test_build_prompt_lists_debts_and_snapshot():
    """The prompt carries the snapshot figures and each debt."""
    debts = _debts()

    prompt = build_prompt(debts, _snapshot(debts))

    assert "Monthly Income: $5200.00" in prompt
    assert "Available for Extra Debt Payment: $1205.00" in prompt
    assert "Auto Finance (auto_loan)" in prompt
    assert "Interest Rate 24.5%" in prompt
    assert build_prompt([], _snapshot([])).count("- none") == 1
