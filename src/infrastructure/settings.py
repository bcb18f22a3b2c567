"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from decimal import Decimal
from typing import Optional

import dotenv

from src.domain.models import OptimizationWeights
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import try_coerce_decimal

_DEFAULT_WEIGHTS = OptimizationWeights()
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class StrategySettings:
    """Settings for strategy generation.

    Attributes:
        openai_api_key: Key for the text-generation service, if any.
        ai_model: Chat model used for AI-assisted strategies.
        ai_timeout_seconds: Upper bound on a text-generation call.
        ai_enabled: Whether the AI-assisted path may call the service.
        weights: Weights of the multi-factor score.
    """

    openai_api_key: Optional[str] = None
    ai_model: str = "gpt-4o-mini"
    ai_timeout_seconds: float = 20.0
    ai_enabled: bool = True
    weights: OptimizationWeights = _DEFAULT_WEIGHTS

    @property
    def ai_available(self) -> bool:
        """Return True when the AI-assisted path can be used."""
        return self.ai_enabled and bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "StrategySettings":
        """Build settings from environment variables.

        Invalid values are logged and replaced by their defaults.

        Returns:
            StrategySettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        timeout = cls._decimal_var(
            "DEBT_AI_TIMEOUT_SECONDS",
            Decimal("20"),
            logger,
            positive=True,
        )
        weights = OptimizationWeights(
            interest=cls._decimal_var(
                "DEBT_WEIGHT_INTEREST",
                _DEFAULT_WEIGHTS.interest,
                logger,
            ),
            balance=cls._decimal_var(
                "DEBT_WEIGHT_BALANCE",
                _DEFAULT_WEIGHTS.balance,
                logger,
            ),
            payoff_time=cls._decimal_var(
                "DEBT_WEIGHT_PAYOFF_TIME",
                _DEFAULT_WEIGHTS.payoff_time,
                logger,
            ),
            utilization=cls._decimal_var(
                "DEBT_WEIGHT_UTILIZATION",
                _DEFAULT_WEIGHTS.utilization,
                logger,
            ),
        )
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            ai_model=os.getenv("DEBT_AI_MODEL", "").strip() or "gpt-4o-mini",
            ai_timeout_seconds=float(timeout),
            ai_enabled=cls._bool_var("DEBT_AI_ENABLED", True, logger),
            weights=weights,
        )

    @staticmethod
    def _decimal_var(
        name: str,
        default: Decimal,
        logger,
        positive: bool = False,
    ) -> Decimal:
        """Read a non-negative decimal environment variable.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.
            positive: Also reject zero.

        Returns:
            Decimal: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        value = try_coerce_decimal(raw.strip())
        if value is None or value < 0 or (positive and value == 0):
            logger.warning(f"Ignoring invalid {name}={raw!r}")
            return default
        return value

    @staticmethod
    def _bool_var(name: str, default: bool, logger) -> bool:
        """Read a boolean environment variable.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            bool: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        logger.warning(f"Ignoring invalid {name}={raw!r}")
        return default


__all__ = ["StrategySettings"]
