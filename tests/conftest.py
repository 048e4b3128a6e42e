"""Shared test fixtures."""

from __future__ import annotations

import pytest

from fuzzy_token_estimator.config import FuzzyModelConfig
from fuzzy_token_estimator.core.estimator import FuzzyTokenEstimator
from fuzzy_token_estimator.core.types import ModelPricing, WhitespaceHandling
from fuzzy_token_estimator.providers.memory import SimpleCostProvider, SimpleModelConfigProvider


class MockCostProvider:
    """CostProvider with a fixed price table."""

    PRICES = {
        "gpt-3.5-turbo": ModelPricing(input=0.0015, output=0.002),
        "gpt-4": ModelPricing(input=0.03, output=0.06),
        "cheap-model": ModelPricing(input=0.001, output=0.001),
    }

    def get_cost(self, model_name: str) -> ModelPricing | None:
        return self.PRICES.get(model_name)


@pytest.fixture
def model_config():
    return FuzzyModelConfig(
        chars_per_token=4,
        overhead=10,
        cjk_tokens_per_char=1.2,
        mixed_text_multiplier=1.05,
        number_tokens_per_char=3.5,
        symbol_tokens_per_char=2.5,
        whitespace_handling=WhitespaceHandling.COMPRESS,
    )


@pytest.fixture
def model_provider(model_config):
    return SimpleModelConfigProvider({"test-model": model_config}, default_model="test-model")


@pytest.fixture
def estimator(model_provider):
    return FuzzyTokenEstimator(model_provider)


@pytest.fixture
def cost_provider():
    return MockCostProvider()


@pytest.fixture
def simple_cost_provider():
    return SimpleCostProvider({"available-model": {"input": 0.001, "output": 0.002}})
