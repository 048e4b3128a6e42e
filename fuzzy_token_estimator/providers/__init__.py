"""Providers module: model weighting and pricing sources."""

from fuzzy_token_estimator.providers.base import CostProvider, ModelConfigProvider
from fuzzy_token_estimator.providers.memory import SimpleCostProvider, SimpleModelConfigProvider
from fuzzy_token_estimator.providers.file import JsonCostProvider, JsonModelConfigProvider

__all__ = [
    "CostProvider",
    "ModelConfigProvider",
    "SimpleCostProvider",
    "SimpleModelConfigProvider",
    "JsonCostProvider",
    "JsonModelConfigProvider",
]
