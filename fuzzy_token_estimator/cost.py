"""Token cost calculation from injected pricing."""

from __future__ import annotations

import logging

from fuzzy_token_estimator.core.errors import ConfigValidationError
from fuzzy_token_estimator.core.types import CostResult
from fuzzy_token_estimator.providers.base import CostProvider
from fuzzy_token_estimator.providers.memory import coerce_pricing

logger = logging.getLogger(__name__)


class TokenCostCalculator:
    """Converts token counts into a cost using per-1000-token prices."""

    def __init__(self, cost_provider: CostProvider, *, currency_symbol: str = "$") -> None:
        self._cost_provider = cost_provider
        self._currency_symbol = currency_symbol

    @property
    def cost_provider(self) -> CostProvider:
        return self._cost_provider

    def calculate(self, model: str, input_tokens: int, output_tokens: int) -> CostResult:
        pricing = self._cost_provider.get_cost(model)
        if pricing is None:
            logger.debug("No pricing for model %r", model)
            return CostResult()
        try:
            pricing = coerce_pricing(pricing)
        except ConfigValidationError as exc:
            logger.warning("Unusable pricing for model %r: %s", model, exc)
            return CostResult()

        input_cost = (input_tokens / 1000) * pricing.input
        output_cost = (output_tokens / 1000) * pricing.output
        total_cost = input_cost + output_cost
        return CostResult(
            input_cost=input_cost,
            output_cost=output_cost,
            total_cost=total_cost,
            formatted_total=f"{self._currency_symbol}{total_cost:.4f}",
            available=True,
        )
