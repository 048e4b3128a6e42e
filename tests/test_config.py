"""Tests for model configuration."""

from __future__ import annotations

import dataclasses

import pytest

from fuzzy_token_estimator.config import DEFAULT_FALLBACK_CONFIG, FuzzyModelConfig
from fuzzy_token_estimator.core.errors import ConfigValidationError, FuzzyTokenError
from fuzzy_token_estimator.core.types import WhitespaceHandling


def test_default_fallback_values():
    assert DEFAULT_FALLBACK_CONFIG.chars_per_token == 4
    assert DEFAULT_FALLBACK_CONFIG.overhead == 10
    assert DEFAULT_FALLBACK_CONFIG.cjk_tokens_per_char == 1.5
    assert DEFAULT_FALLBACK_CONFIG.mixed_text_multiplier == 1.05
    assert DEFAULT_FALLBACK_CONFIG.number_tokens_per_char == 3.5
    assert DEFAULT_FALLBACK_CONFIG.symbol_tokens_per_char == 2.5
    assert DEFAULT_FALLBACK_CONFIG.whitespace_handling is WhitespaceHandling.COMPRESS


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_FALLBACK_CONFIG.overhead = 99


def test_from_dict_camel_case():
    config = FuzzyModelConfig.from_dict(
        {
            "charsPerToken": 6,
            "overhead": 5,
            "cjkTokensPerChar": 1.0,
            "mixedTextMultiplier": 1.0,
            "whitespaceHandling": "ignore",
        }
    )
    assert config.chars_per_token == 6
    assert config.whitespace_handling is WhitespaceHandling.IGNORE
    assert config.number_tokens_per_char == 3.5


def test_to_dict_round_trip():
    assert FuzzyModelConfig.from_dict(DEFAULT_FALLBACK_CONFIG.to_dict()) == DEFAULT_FALLBACK_CONFIG


def test_whitespace_string_is_coerced():
    config = FuzzyModelConfig(4, 10, 1.2, 1.05, whitespace_handling="count")
    assert config.whitespace_handling is WhitespaceHandling.COUNT


@pytest.mark.parametrize(
    "overrides",
    [
        {"chars_per_token": 0},
        {"chars_per_token": -1},
        {"overhead": -1},
        {"cjk_tokens_per_char": -0.5},
        {"mixed_text_multiplier": -1},
        {"number_tokens_per_char": -3},
        {"whitespace_handling": "squash"},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ConfigValidationError):
        dataclasses.replace(DEFAULT_FALLBACK_CONFIG, **overrides)


def test_from_dict_unknown_field():
    with pytest.raises(ConfigValidationError):
        FuzzyModelConfig.from_dict({"charsPerToken": 4, "tokensPerWord": 1})


def test_from_dict_missing_field():
    with pytest.raises(ConfigValidationError, match="overhead"):
        FuzzyModelConfig.from_dict({"charsPerToken": 4, "cjkTokensPerChar": 1, "mixedTextMultiplier": 1})


def test_errors_share_base():
    assert issubclass(ConfigValidationError, FuzzyTokenError)


@pytest.mark.parametrize(
    "overrides",
    [
        {"chars_per_token": "4"},
        {"overhead": None},
        {"cjk_tokens_per_char": True},
        {"symbol_tokens_per_char": "2.5"},
    ],
)
def test_non_numeric_values_rejected(overrides):
    with pytest.raises(ConfigValidationError):
        dataclasses.replace(DEFAULT_FALLBACK_CONFIG, **overrides)


def test_fractional_overhead_rejected():
    with pytest.raises(ConfigValidationError, match="overhead"):
        FuzzyModelConfig.from_dict(
            {"charsPerToken": 4, "overhead": 10.5, "cjkTokensPerChar": 1, "mixedTextMultiplier": 1}
        )


def test_integral_float_overhead_becomes_int():
    config = FuzzyModelConfig(4, 10.0, 1.2, 1.05)
    assert config.overhead == 10
    assert isinstance(config.overhead, int)
