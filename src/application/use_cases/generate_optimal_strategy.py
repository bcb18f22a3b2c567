"""AI-assisted strategy generation with a deterministic fallback.

The numeric plan always comes from the optimized multi-factor order. The
text-generation collaborator only contributes the methodology text, a risk
score, and recommendations. When it is missing, slow, failing, or returns
text without a usable JSON object, the hybrid strategy is returned instead.
"""

import asyncio
from datetime import date
from typing import Any

from src.application.ports.text_generation import TextGenerationPort
from src.domain.constants import MAX_RECOMMENDATIONS
from src.domain.models import (
    AIDebtStrategy,
    Debt,
    Effort,
    FinancialSnapshot,
    OptimizationWeights,
    Recommendation,
    RecommendationType,
)
from src.domain.services.extraction import extract_json_object
from src.domain.services.strategies import (
    DEFAULT_WEIGHTS,
    build_strategy,
    format_rate,
    generate_hybrid_strategy,
    generate_optimized_order,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.decimal_utils import try_coerce_decimal

AI_STRATEGY_NAME = "AI Optimized Strategy"
AI_DEFAULT_METHODOLOGY = (
    "Balanced approach considering both mathematical optimization and "
    "psychological factors"
)
DEFAULT_TIMEOUT_SECONDS = 20.0

PROMPT_TEMPLATE = """Analyze this debt portfolio and create an optimal repayment strategy.

Financial Snapshot:
- Monthly Income: ${income:.2f}
- Monthly Expenses: ${expenses:.2f}
- Available for Extra Debt Payment: ${available:.2f}
- Emergency Fund: ${emergency_fund:.2f}
- Total Debt: ${total_debt:.2f}
- Weighted Average Interest: {weighted:.2f}%
- Debt-to-Income Ratio: {dti:.1f}%

Debts:
{debts}

Consider:
1. Mathematical optimization (interest savings vs psychological wins)
2. Cash flow stability and emergency fund adequacy
3. Risk factors (income stability, unexpected expenses)
4. Behavioral factors (motivation, stress reduction)

Reply with a single JSON object with these keys:
- "methodology": string explaining the approach
- "risk_score": number from 0 (safe) to 100 (risky)
- "recommendations": up to 3 objects with "type" (payment, consolidation,
  negotiation, income or expense), "action", "impact" (estimated dollars),
  "effort" (low, medium or high) and "priority" (1 is most important)
"""


def build_prompt(debts: list[Debt], snapshot: FinancialSnapshot) -> str:
    """Render the strategy prompt for the text-generation collaborator."""
    lines = [
        f"- {debt.creditor_name} ({debt.debt_type.value}): "
        f"Balance ${debt.current_balance:.2f}, "
        f"Interest Rate {format_rate(debt.rate)}%, "
        f"Minimum Payment ${debt.minimum:.2f}"
        for debt in debts
    ]
    return PROMPT_TEMPLATE.format(
        income=snapshot.monthly_income,
        expenses=snapshot.monthly_expenses,
        available=snapshot.available_for_debt,
        emergency_fund=snapshot.emergency_fund,
        total_debt=snapshot.total_debt,
        weighted=snapshot.weighted_avg_interest,
        dti=snapshot.debt_to_income_ratio,
        debts="\n".join(lines) or "- none",
    )


def parse_risk_score(raw: Any) -> int | None:
    """Return a risk score in [0, 100] or None when unusable."""
    value = try_coerce_decimal(raw)
    if value is None or value < 0 or value > 100:
        return None
    return int(value.to_integral_value())


def parse_recommendations(raw: Any) -> list[Recommendation] | None:
    """Convert the collaborator's recommendations, or None if any is invalid."""
    if not isinstance(raw, list) or not raw:
        return None
    parsed = []
    for item in raw:
        if not isinstance(item, dict):
            return None
        try:
            rec_type = RecommendationType(str(item.get("type", "")).lower())
            effort = Effort(str(item.get("effort", "")).lower())
        except ValueError:
            return None
        action = item.get("action")
        impact = try_coerce_decimal(item.get("impact"))
        priority = try_coerce_decimal(item.get("priority"))
        if not isinstance(action, str) or not action.strip():
            return None
        if impact is None or priority is None:
            return None
        parsed.append(
            Recommendation(
                type=rec_type,
                action=action.strip(),
                impact=impact,
                effort=effort,
                priority=int(priority),
            )
        )
    parsed.sort(key=lambda rec: rec.priority)
    return parsed[:MAX_RECOMMENDATIONS]


class OptimalStrategyGenerator:
    """Generate the optimized strategy, decorated by AI text when available."""

    def __init__(
        self,
        text_generator: TextGenerationPort | None = None,
        logger=None,
        usage_logger=None,
        weights: OptimizationWeights = DEFAULT_WEIGHTS,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        today: date | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            text_generator: Optional text-generation collaborator.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording collaborator usage.
            weights: Weights of the multi-factor score.
            timeout_seconds: Upper bound on the collaborator call.
            today: Reference date for payoff projections.
        """
        self._text_generator = text_generator
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._weights = weights
        self._timeout_seconds = timeout_seconds
        self._today = today

    async def generate(
        self,
        debts: list[Debt],
        snapshot: FinancialSnapshot,
    ) -> AIDebtStrategy:
        """Return the optimal strategy; never raises for collaborator errors.

        Args:
            debts: Debts to plan for.
            snapshot: Financial snapshot of the user.

        Returns:
            AIDebtStrategy: AI-decorated strategy, or the hybrid fallback.
        """
        if self._text_generator is None:
            self._logger.info("No text generator configured; using fallback")
            return self._fallback(debts, snapshot)

        prompt = build_prompt(debts, snapshot)
        try:
            response = await asyncio.wait_for(
                self._text_generator.generate(prompt),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            self._logger.warning(
                f"Text generation timed out after {self._timeout_seconds}s"
            )
            return self._fallback(debts, snapshot)
        except Exception as exc:
            self._logger.error(f"Text generation failed: {exc}")
            return self._fallback(debts, snapshot)

        strategy = self._from_response(response, debts, snapshot)
        if strategy is None:
            return self._fallback(debts, snapshot)
        self._usage_logger.info(
            f"AI strategy generated for {len(debts)} debts"
        )
        return strategy

    def _from_response(
        self,
        response: str,
        debts: list[Debt],
        snapshot: FinancialSnapshot,
    ) -> AIDebtStrategy | None:
        extraction = extract_json_object(response)
        if not extraction.ok:
            self._logger.warning(
                f"Unusable text generation response: {extraction.error}"
            )
            return None

        payload = extraction.value
        methodology = payload.get("methodology")
        if not isinstance(methodology, str) or not methodology.strip():
            methodology = AI_DEFAULT_METHODOLOGY
        risk_score = parse_risk_score(payload.get("risk_score"))
        recommendations = parse_recommendations(payload.get("recommendations"))
        if recommendations is None and "recommendations" in payload:
            self._logger.warning(
                "Discarding malformed AI recommendations; using defaults"
            )

        order = generate_optimized_order(
            debts,
            snapshot,
            self._weights,
            self._today,
        )
        return build_strategy(
            AI_STRATEGY_NAME,
            methodology.strip(),
            debts,
            order,
            snapshot,
            risk_score=risk_score,
            recommendations=recommendations,
        )

    def _fallback(
        self,
        debts: list[Debt],
        snapshot: FinancialSnapshot,
    ) -> AIDebtStrategy:
        self._usage_logger.info(
            f"Fallback strategy generated for {len(debts)} debts"
        )
        return generate_hybrid_strategy(
            debts,
            snapshot,
            self._weights,
            self._today,
        )


__all__ = [
    "AI_STRATEGY_NAME",
    "AI_DEFAULT_METHODOLOGY",
    "build_prompt",
    "parse_risk_score",
    "parse_recommendations",
    "OptimalStrategyGenerator",
]
