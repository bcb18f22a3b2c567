"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.debt_repository import DebtRepositoryPort
from src.application.ports.text_generation import TextGenerationPort
from src.application.use_cases.generate_debt_strategy import (
    GenerateDebtStrategyUseCase,
)
from src.application.use_cases.generate_optimal_strategy import (
    OptimalStrategyGenerator,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.debt_repository import SqlAlchemyDebtRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import StrategySettings
from src.infrastructure.text_generation import OpenAITextGenerator


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_debt_repository(
    db_port: DatabaseEnginePort | None = None,
) -> DebtRepositoryPort:
    """Return the debts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyDebtRepository(resolved_db, logger=get_app_logger())


def build_text_generator(
    settings: StrategySettings | None = None,
) -> TextGenerationPort | None:
    """Return the text generator, or None when AI is disabled or unkeyed."""
    resolved = settings or StrategySettings.from_env()
    if not resolved.ai_available:
        get_app_logger().info(
            "AI-assisted strategies disabled; using local optimization"
        )
        return None
    return OpenAITextGenerator(
        api_key=resolved.openai_api_key,
        model=resolved.ai_model,
        timeout_seconds=resolved.ai_timeout_seconds,
    )


def build_optimal_strategy_generator(
    settings: StrategySettings | None = None,
) -> OptimalStrategyGenerator:
    """Return the AI-assisted strategy generator."""
    resolved = settings or StrategySettings.from_env()
    return OptimalStrategyGenerator(
        text_generator=build_text_generator(resolved),
        logger=get_app_logger(),
        weights=resolved.weights,
        timeout_seconds=resolved.ai_timeout_seconds,
    )


def build_generate_debt_strategy_use_case(
    settings: StrategySettings | None = None,
) -> GenerateDebtStrategyUseCase:
    """Return the strategy report use case wired from settings."""
    resolved = settings or StrategySettings.from_env()
    return GenerateDebtStrategyUseCase(
        optimal_generator=build_optimal_strategy_generator(resolved),
        logger=get_app_logger(),
        weights=resolved.weights,
    )


__all__ = [
    "build_database_adapter",
    "build_debt_repository",
    "build_text_generator",
    "build_optimal_strategy_generator",
    "build_generate_debt_strategy_use_case",
]
