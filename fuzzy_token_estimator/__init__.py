"""Fuzzy Token Estimator: tokenizer-free token count approximation."""

from __future__ import annotations

from typing import Any, Mapping

from fuzzy_token_estimator.config import (
    DEFAULT_FALLBACK_CONFIG,
    EstimatorOptions,
    FuzzyModelConfig,
)
from fuzzy_token_estimator.core.classifier import CharacterClassifier
from fuzzy_token_estimator.core.errors import (
    ConfigValidationError,
    FuzzyTokenError,
    ProviderLoadError,
)
from fuzzy_token_estimator.core.estimator import FuzzyTokenEstimator
from fuzzy_token_estimator.core.types import (
    CharCategory,
    Confidence,
    CostResult,
    EstimationResult,
    ModelPricing,
    StreamEstimate,
    TextAnalysis,
    TextComposition,
    TextPayload,
    TokenBreakdown,
    WhitespaceHandling,
)
from fuzzy_token_estimator.cost import TokenCostCalculator
from fuzzy_token_estimator.providers import (
    CostProvider,
    JsonCostProvider,
    JsonModelConfigProvider,
    ModelConfigProvider,
    SimpleCostProvider,
    SimpleModelConfigProvider,
)


def create_fuzzy_estimator(
    model_provider: ModelConfigProvider,
    options: EstimatorOptions | None = None,
    *,
    fallback_config: FuzzyModelConfig | None = None,
    default_model: str | None = None,
) -> FuzzyTokenEstimator:
    """Factory: build an estimator around an existing provider.

    Keyword arguments take precedence over ``options``.
    """
    options = options or EstimatorOptions()
    return FuzzyTokenEstimator(
        model_provider,
        fallback_config=fallback_config or options.fallback_config,
        default_model=default_model or options.default_model,
    )


def create_simple_fuzzy_estimator(
    model_configs: Mapping[str, FuzzyModelConfig | Mapping[str, Any]],
    default_model: str | None = None,
) -> FuzzyTokenEstimator:
    """Factory: build an estimator straight from a name -> config mapping."""
    provider = SimpleModelConfigProvider(model_configs, default_model)
    return FuzzyTokenEstimator(provider, default_model=default_model)


__all__ = [
    # Factories
    "create_fuzzy_estimator",
    "create_simple_fuzzy_estimator",
    # Engine
    "FuzzyTokenEstimator",
    "CharacterClassifier",
    "TokenCostCalculator",
    # Config
    "FuzzyModelConfig",
    "EstimatorOptions",
    "DEFAULT_FALLBACK_CONFIG",
    # Providers
    "ModelConfigProvider",
    "CostProvider",
    "SimpleModelConfigProvider",
    "SimpleCostProvider",
    "JsonModelConfigProvider",
    "JsonCostProvider",
    # Types
    "CharCategory",
    "Confidence",
    "CostResult",
    "EstimationResult",
    "ModelPricing",
    "StreamEstimate",
    "TextAnalysis",
    "TextComposition",
    "TextPayload",
    "TokenBreakdown",
    "WhitespaceHandling",
    # Errors
    "FuzzyTokenError",
    "ConfigValidationError",
    "ProviderLoadError",
]
