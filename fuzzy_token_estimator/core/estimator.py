"""FuzzyTokenEstimator: heuristic token counting driven by per-model weights."""

from __future__ import annotations

import logging
import math
from typing import Any, AsyncIterable, AsyncIterator, Iterable, Mapping

from fuzzy_token_estimator.config import DEFAULT_FALLBACK_CONFIG, FuzzyModelConfig
from fuzzy_token_estimator.core.classifier import analyze_composition, classify
from fuzzy_token_estimator.core.types import (
    CharCategory,
    Confidence,
    EstimationResult,
    StreamEstimate,
    TextAnalysis,
    TextComposition,
    TextPayload,
    TokenBreakdown,
    WhitespaceHandling,
)
from fuzzy_token_estimator.providers.base import ModelConfigProvider

logger = logging.getLogger(__name__)

UNKNOWN_MODEL = "unknown"
DEFAULT_MAX_OUTPUT_TOKENS = 500
PAYLOAD_SAFETY_MARGIN = 1.1
WHITESPACE_TOKENS_PER_CHAR = 0.3


def calculate_adjustment_factor(cjk_ratio: float) -> float:
    """Scale factor for the base estimate; CJK-heavy text tokenizes denser.

    0 -> 1.0, (0, 0.2) -> 0.7, [0.2, 0.8] falls linearly from 0.7 to 0.6,
    above 0.8 -> 0.6.
    """
    if cjk_ratio > 0.8:
        return 0.6
    if cjk_ratio == 0:
        return 1.0
    if cjk_ratio < 0.2:
        return 0.7
    return 0.7 - ((cjk_ratio - 0.2) / 0.6) * 0.1


def calculate_confidence(composition: TextComposition) -> Confidence:
    if composition.total < 10:
        return Confidence.LOW
    if composition.cjk_ratio > 0.9 or composition.cjk_ratio < 0.1:
        return Confidence.HIGH
    if composition.symbols / composition.total > 0.3:
        return Confidence.LOW
    return Confidence.MEDIUM


def _accumulate_run(
    breakdown: TokenBreakdown,
    category: CharCategory,
    length: int,
    config: FuzzyModelConfig,
) -> None:
    if category is CharCategory.CJK:
        breakdown.cjk += length * config.cjk_tokens_per_char
    elif category is CharCategory.LATIN:
        breakdown.latin += math.ceil(length / config.chars_per_token)
    elif category is CharCategory.DIGIT:
        breakdown.digits += math.ceil(length / config.effective_number_tokens_per_char)
    elif category is CharCategory.SYMBOL:
        breakdown.symbols += math.ceil(length / config.effective_symbol_tokens_per_char)
    elif config.whitespace_handling is WhitespaceHandling.COUNT:
        breakdown.symbols += length * WHITESPACE_TOKENS_PER_CHAR
    # IGNORE and COMPRESS whitespace runs contribute nothing.


def _iter_runs(text: str) -> Iterable[tuple[CharCategory, int]]:
    """Yield (category, length) for each maximal same-category run."""
    current: CharCategory | None = None
    length = 0
    for char in text:
        category = classify(char)
        if category is not current:
            if current is not None:
                yield current, length
            current = category
            length = 0
        length += 1
    if current is not None:
        yield current, length


class FuzzyTokenEstimator:
    """Estimates token counts from character composition.

    The model provider may be replaced between calls with
    ``set_model_provider``; replacement is not synchronised, so callers
    sharing an estimator across threads must serialise it themselves.
    """

    def __init__(
        self,
        model_provider: ModelConfigProvider,
        *,
        fallback_config: FuzzyModelConfig | None = None,
        default_model: str | None = None,
    ) -> None:
        self._model_provider = model_provider
        self._fallback_config = fallback_config or DEFAULT_FALLBACK_CONFIG
        get_default = getattr(model_provider, "get_default_model", None)
        self._default_model = default_model or (get_default() if get_default else None)

    # --- Provider access ---

    @property
    def model_provider(self) -> ModelConfigProvider:
        return self._model_provider

    def get_model_provider(self) -> ModelConfigProvider:
        return self._model_provider

    def set_model_provider(self, provider: ModelConfigProvider) -> None:
        logger.debug("Model provider replaced with %s", type(provider).__name__)
        self._model_provider = provider

    @property
    def default_model(self) -> str | None:
        return self._default_model

    @property
    def fallback_config(self) -> FuzzyModelConfig:
        return self._fallback_config

    def get_supported_models(self) -> list[str]:
        return list(self._model_provider.get_supported_models())

    def resolve_config(self, model_name: str | None = None) -> tuple[FuzzyModelConfig, str]:
        """Return the config for a model and the model name it resolved to."""
        model = model_name or self._default_model or UNKNOWN_MODEL
        config = self._model_provider.get_config(model)
        if config is None:
            logger.debug("No config for model %r, using fallback config", model)
            config = self._fallback_config
        return config, model

    # --- Estimation ---

    def estimate(self, text: str, model_name: str | None = None) -> int:
        return self.estimate_detailed(text, model_name).tokens

    def estimate_detailed(
        self, text: str, model_name: str | None = None
    ) -> EstimationResult:
        config, model = self.resolve_config(model_name)

        if not text:
            return EstimationResult(
                tokens=config.overhead,
                breakdown=TokenBreakdown(overhead=config.overhead),
                text_analysis=TextAnalysis(),
                confidence=Confidence.HIGH,
                model_used=model,
            )

        composition = analyze_composition(text)

        breakdown = TokenBreakdown(overhead=config.overhead)
        for category, length in _iter_runs(text):
            _accumulate_run(breakdown, category, length, config)

        # Multiplier applies to single-script text too.
        base_tokens = breakdown.total() * config.mixed_text_multiplier
        adjustment_factor = calculate_adjustment_factor(composition.cjk_ratio)

        return EstimationResult(
            tokens=math.ceil(base_tokens * adjustment_factor),
            breakdown=breakdown,
            text_analysis=TextAnalysis(
                total_chars=composition.total,
                cjk_ratio=composition.cjk_ratio,
                adjustment_factor=adjustment_factor,
            ),
            confidence=calculate_confidence(composition),
            model_used=model,
        )

    def estimate_payload(self, payload: TextPayload | Mapping[str, Any]) -> int:
        """Estimate prompt plus output budget, with a 10% safety margin."""
        if not isinstance(payload, TextPayload):
            payload = TextPayload(
                prompt=payload.get("prompt"),
                model=payload.get("model"),
                max_tokens=payload.get("max_tokens") or payload.get("maxTokens"),
            )

        if isinstance(payload.prompt, str):
            prompt_tokens = self.estimate(payload.prompt, payload.model)
        else:
            prompt_tokens = self.resolve_config(payload.model)[0].overhead

        max_tokens = payload.max_tokens
        if not max_tokens or max_tokens <= 0:
            max_tokens = DEFAULT_MAX_OUTPUT_TOKENS

        return math.ceil((prompt_tokens + max_tokens) * PAYLOAD_SAFETY_MARGIN)

    def estimate_batch(
        self, texts: Iterable[str], model_name: str | None = None
    ) -> list[EstimationResult]:
        return [self.estimate_detailed(text, model_name) for text in texts]

    async def estimate_stream(
        self, chunks: AsyncIterable[str], model_name: str | None = None
    ) -> AsyncIterator[StreamEstimate]:
        """Yield one estimate per chunk with a running total.

        Pull-driven: the next chunk is only awaited when the consumer asks
        for the next result.
        """
        total = 0
        async for chunk in chunks:
            tokens = self.estimate(chunk, model_name)
            total += tokens
            yield StreamEstimate(chunk=chunk, tokens=tokens, total=total)
