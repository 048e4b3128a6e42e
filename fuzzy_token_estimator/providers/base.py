"""Provider protocols for model weights and pricing."""

from __future__ import annotations

from typing import Iterable, Protocol

from fuzzy_token_estimator.config import FuzzyModelConfig
from fuzzy_token_estimator.core.types import ModelPricing


class ModelConfigProvider(Protocol):
    def get_config(self, model_name: str) -> FuzzyModelConfig | None: ...

    def get_supported_models(self) -> Iterable[str]: ...

    # Optional: the estimator falls back to "unknown" when a provider
    # does not define it or returns None.
    # def get_default_model(self) -> str | None: ...


class CostProvider(Protocol):
    def get_cost(self, model_name: str) -> ModelPricing | None: ...
