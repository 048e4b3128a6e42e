"""Tests for TokenCostCalculator."""

from __future__ import annotations

import pytest

from fuzzy_token_estimator.core.types import CostResult, ModelPricing
from fuzzy_token_estimator.cost import TokenCostCalculator


# ---- priced models ----

def test_gpt35_costs(cost_provider):
    result = TokenCostCalculator(cost_provider).calculate("gpt-3.5-turbo", 1000, 500)
    assert result.available
    assert result.input_cost == pytest.approx(0.0015)
    assert result.output_cost == pytest.approx(0.001)
    assert result.total_cost == pytest.approx(0.0025)
    assert result.formatted_total == "$0.0025"


def test_gpt4_costs(cost_provider):
    result = TokenCostCalculator(cost_provider).calculate("gpt-4", 2000, 1000)
    assert result.input_cost == pytest.approx(0.06)
    assert result.output_cost == pytest.approx(0.06)
    assert result.total_cost == pytest.approx(0.12)
    assert result.formatted_total == "$0.1200"


def test_fractional_token_counts(cost_provider):
    result = TokenCostCalculator(cost_provider).calculate("cheap-model", 250, 750)
    assert result.input_cost == pytest.approx(0.00025)
    assert result.output_cost == pytest.approx(0.00075)
    assert result.total_cost == pytest.approx(0.001)
    assert result.formatted_total == "$0.0010"


def test_zero_tokens(cost_provider):
    result = TokenCostCalculator(cost_provider).calculate("gpt-3.5-turbo", 0, 0)
    assert result.available
    assert result.total_cost == 0
    assert result.formatted_total == "$0.0000"


def test_large_token_counts(cost_provider):
    result = TokenCostCalculator(cost_provider).calculate("gpt-3.5-turbo", 100000, 50000)
    assert result.input_cost == pytest.approx(0.15)
    assert result.output_cost == pytest.approx(0.1)
    assert result.formatted_total == "$0.2500"


def test_free_model():
    class FreeProvider:
        def get_cost(self, model_name):
            return ModelPricing(input=0, output=0)

    result = TokenCostCalculator(FreeProvider()).calculate("free-model", 1000, 500)
    assert result.available
    assert result.total_cost == 0
    assert result.formatted_total == "$0.0000"


def test_custom_currency_symbol(cost_provider):
    calc = TokenCostCalculator(cost_provider, currency_symbol="€")
    assert calc.calculate("gpt-4", 1000, 0).formatted_total == "€0.0300"


# ---- unavailable pricing ----

def test_unknown_model(cost_provider):
    result = TokenCostCalculator(cost_provider).calculate("unknown-model", 1000, 500)
    assert result == CostResult(
        input_cost=0, output_cost=0, total_cost=0, formatted_total="N/A", available=False
    )


def test_simple_cost_provider(simple_cost_provider):
    calc = TokenCostCalculator(simple_cost_provider)
    assert calc.cost_provider is simple_cost_provider
    assert calc.calculate("available-model", 1000, 500).total_cost == pytest.approx(0.002)
    assert not calc.calculate("other-model", 1000, 500).available


def test_provider_returning_mapping():
    class MappingProvider:
        def get_cost(self, model_name):
            return {"input": 0.0015, "output": 0.002}

    result = TokenCostCalculator(MappingProvider()).calculate("any", 1000, 500)
    assert result.available
    assert result.formatted_total == "$0.0025"


def test_unusable_pricing_is_unavailable():
    class BrokenProvider:
        def get_cost(self, model_name):
            return {"input": "n/a"}

    result = TokenCostCalculator(BrokenProvider()).calculate("any", 1000, 500)
    assert not result.available
    assert result.formatted_total == "N/A"
