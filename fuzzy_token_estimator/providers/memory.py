"""In-memory providers built from plain mappings."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from fuzzy_token_estimator.config import FuzzyModelConfig
from fuzzy_token_estimator.core.errors import ConfigValidationError
from fuzzy_token_estimator.core.types import ModelPricing


def coerce_model_config(value: FuzzyModelConfig | Mapping[str, Any]) -> FuzzyModelConfig:
    if isinstance(value, FuzzyModelConfig):
        return value
    if isinstance(value, Mapping):
        return FuzzyModelConfig.from_dict(value)
    raise ConfigValidationError(f"Cannot build a model config from {type(value).__name__}")


def _price(value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigValidationError(f"Price must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Price must be a number, got {value!r}") from exc


def coerce_pricing(
    value: ModelPricing | Mapping[str, float] | Sequence[float],
) -> ModelPricing:
    if isinstance(value, ModelPricing):
        return value
    if isinstance(value, Mapping):
        try:
            return ModelPricing(input=_price(value["input"]), output=_price(value["output"]))
        except KeyError as exc:
            raise ConfigValidationError(f"Pricing is missing {exc.args[0]!r}") from exc
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
        return ModelPricing(input=_price(value[0]), output=_price(value[1]))
    raise ConfigValidationError(f"Cannot build pricing from {value!r}")


class SimpleModelConfigProvider:
    """ModelConfigProvider over a fixed name -> config mapping."""

    def __init__(
        self,
        configs: Mapping[str, FuzzyModelConfig | Mapping[str, Any]],
        default_model: str | None = None,
    ) -> None:
        self._configs: dict[str, FuzzyModelConfig] = {
            name: coerce_model_config(config) for name, config in configs.items()
        }
        self._default_model = default_model

    def get_config(self, model_name: str) -> FuzzyModelConfig | None:
        return self._configs.get(model_name)

    def get_supported_models(self) -> list[str]:
        return list(self._configs)

    def get_default_model(self) -> str | None:
        return self._default_model


class SimpleCostProvider:
    """CostProvider over a fixed name -> pricing mapping."""

    def __init__(
        self,
        prices: Mapping[str, ModelPricing | Mapping[str, float] | Sequence[float]],
    ) -> None:
        self._prices: dict[str, ModelPricing] = {
            name: coerce_pricing(price) for name, price in prices.items()
        }

    def get_cost(self, model_name: str) -> ModelPricing | None:
        return self._prices.get(model_name)
