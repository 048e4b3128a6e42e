"""Model weighting configuration and estimator options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from fuzzy_token_estimator.core.errors import ConfigValidationError
from fuzzy_token_estimator.core.types import WhitespaceHandling

DEFAULT_NUMBER_TOKENS_PER_CHAR = 3.5
DEFAULT_SYMBOL_TOKENS_PER_CHAR = 2.5

# camelCase keys accepted by from_dict, mapped to field names
_FIELD_ALIASES: dict[str, str] = {
    "charsPerToken": "chars_per_token",
    "overhead": "overhead",
    "cjkTokensPerChar": "cjk_tokens_per_char",
    "mixedTextMultiplier": "mixed_text_multiplier",
    "numberTokensPerChar": "number_tokens_per_char",
    "symbolTokensPerChar": "symbol_tokens_per_char",
    "whitespaceHandling": "whitespace_handling",
}

_NUMERIC_FIELDS = (
    "chars_per_token",
    "overhead",
    "cjk_tokens_per_char",
    "mixed_text_multiplier",
    "number_tokens_per_char",
    "symbol_tokens_per_char",
)
_OPTIONAL_FIELDS = ("number_tokens_per_char", "symbol_tokens_per_char")


@dataclass(frozen=True)
class FuzzyModelConfig:
    chars_per_token: float
    overhead: int
    cjk_tokens_per_char: float
    mixed_text_multiplier: float
    number_tokens_per_char: float | None = DEFAULT_NUMBER_TOKENS_PER_CHAR
    symbol_tokens_per_char: float | None = DEFAULT_SYMBOL_TOKENS_PER_CHAR
    whitespace_handling: WhitespaceHandling = WhitespaceHandling.COMPRESS

    def __post_init__(self) -> None:
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if value is None and name in _OPTIONAL_FIELDS:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigValidationError(f"{name} must be a number, got {value!r}")
        if isinstance(self.overhead, float):
            if not self.overhead.is_integer():
                raise ConfigValidationError(f"overhead must be an integer, got {self.overhead!r}")
            object.__setattr__(self, "overhead", int(self.overhead))
        if self.chars_per_token <= 0:
            raise ConfigValidationError(
                f"chars_per_token must be positive, got {self.chars_per_token!r}"
            )
        for name in ("number_tokens_per_char", "symbol_tokens_per_char"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ConfigValidationError(f"{name} must not be negative, got {value!r}")
        for name in ("overhead", "cjk_tokens_per_char", "mixed_text_multiplier"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigValidationError(f"{name} must not be negative, got {value!r}")
        try:
            handling = WhitespaceHandling(self.whitespace_handling)
        except ValueError as exc:
            raise ConfigValidationError(
                f"Unknown whitespace handling {self.whitespace_handling!r}"
            ) from exc
        object.__setattr__(self, "whitespace_handling", handling)

    @property
    def effective_number_tokens_per_char(self) -> float:
        return self.number_tokens_per_char or DEFAULT_NUMBER_TOKENS_PER_CHAR

    @property
    def effective_symbol_tokens_per_char(self) -> float:
        return self.symbol_tokens_per_char or DEFAULT_SYMBOL_TOKENS_PER_CHAR

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FuzzyModelConfig:
        """Build a config from a camelCase or snake_case mapping."""
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _FIELD_ALIASES.get(key, key)
            if name not in _FIELD_ALIASES.values():
                raise ConfigValidationError(f"Unknown model config field {key!r}")
            if value is not None:
                kwargs[name] = value
        missing = [
            name
            for name in ("chars_per_token", "overhead", "cjk_tokens_per_char", "mixed_text_multiplier")
            if name not in kwargs
        ]
        if missing:
            raise ConfigValidationError(f"Missing model config fields: {', '.join(missing)}")
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "chars_per_token": self.chars_per_token,
            "overhead": self.overhead,
            "cjk_tokens_per_char": self.cjk_tokens_per_char,
            "mixed_text_multiplier": self.mixed_text_multiplier,
            "number_tokens_per_char": self.number_tokens_per_char,
            "symbol_tokens_per_char": self.symbol_tokens_per_char,
            "whitespace_handling": self.whitespace_handling.value,
        }


DEFAULT_FALLBACK_CONFIG = FuzzyModelConfig(
    chars_per_token=4,
    overhead=10,
    cjk_tokens_per_char=1.5,
    mixed_text_multiplier=1.05,
    number_tokens_per_char=3.5,
    symbol_tokens_per_char=2.5,
    whitespace_handling=WhitespaceHandling.COMPRESS,
)


@dataclass
class EstimatorOptions:
    fallback_config: FuzzyModelConfig | None = None
    default_model: str | None = None
