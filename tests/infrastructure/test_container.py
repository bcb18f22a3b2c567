"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import OptimizationWeights
from src.infrastructure import container
from src.infrastructure.settings import StrategySettings


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", MagicMock)


def test_build_debt_repository_uses_given_port():
    """The repository should wrap the provided database port."""
    db_port = MagicMock()

    repository = container.build_debt_repository(db_port)

    assert isinstance(repository, container.SqlAlchemyDebtRepository)
    assert repository._db_port is db_port


def test_build_text_generator_none_without_key():
    """No API key means no text generator."""
    settings = StrategySettings(openai_api_key=None)

    assert container.build_text_generator(settings) is None


def test_build_text_generator_none_when_disabled():
    """A disabled AI path means no text generator even with a key."""
    settings = StrategySettings(openai_api_key="sk-test", ai_enabled=False)

    assert container.build_text_generator(settings) is None


def test_build_text_generator_uses_settings(monkeypatch):
    """The OpenAI adapter should receive key, model and timeout."""
    captured = {}

    def _fake_generator(**kwargs):
        captured.update(kwargs)
        return "generator"

    monkeypatch.setattr(container, "OpenAITextGenerator", _fake_generator)
    settings = StrategySettings(
        openai_api_key="sk-test",
        ai_model="gpt-4o",
        ai_timeout_seconds=7.5,
    )

    assert container.build_text_generator(settings) == "generator"
    assert captured == {
        "api_key": "sk-test",
        "model": "gpt-4o",
        "timeout_seconds": 7.5,
    }


def test_build_optimal_strategy_generator_carries_weights():
    """Configured weights and timeout should reach the generator."""
    weights = OptimizationWeights(interest=Decimal("1"))
    settings = StrategySettings(
        ai_enabled=False,
        ai_timeout_seconds=3.0,
        weights=weights,
    )

    generator = container.build_optimal_strategy_generator(settings)

    assert generator._text_generator is None
    assert generator._weights is weights
    assert generator._timeout_seconds == 3.0


def test_build_generate_debt_strategy_use_case_wires_generator(monkeypatch):
    """The report use case should use the settings-driven generator."""
    fake_generator = MagicMock()
    monkeypatch.setattr(
        container,
        "build_optimal_strategy_generator",
        lambda settings: fake_generator,
    )
    settings = StrategySettings(ai_enabled=False)

    use_case = container.build_generate_debt_strategy_use_case(settings)

    assert use_case._optimal_generator is fake_generator
    assert use_case._weights is settings.weights
