"""Core data types for token estimation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class CharCategory(str, Enum):
    CJK = "cjk"
    LATIN = "latin"
    DIGIT = "digit"
    SYMBOL = "symbol"
    WHITESPACE = "whitespace"


class WhitespaceHandling(str, Enum):
    IGNORE = "ignore"
    COUNT = "count"
    # Currently contributes nothing, same as IGNORE.
    COMPRESS = "compress"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ---------------------------------------------------------------------------
# Text analysis
# ---------------------------------------------------------------------------

@dataclass
class TextComposition:
    cjk: int = 0
    latin: int = 0
    digits: int = 0
    symbols: int = 0
    whitespace: int = 0
    total: int = 0
    cjk_ratio: float = 0.0


# ---------------------------------------------------------------------------
# Estimation results
# ---------------------------------------------------------------------------

@dataclass
class TokenBreakdown:
    cjk: float = 0.0
    latin: float = 0.0
    digits: float = 0.0
    symbols: float = 0.0
    overhead: int = 0

    def total(self) -> float:
        return self.cjk + self.latin + self.digits + self.symbols + self.overhead


@dataclass
class TextAnalysis:
    total_chars: int = 0
    cjk_ratio: float = 0.0
    adjustment_factor: float = 1.0


@dataclass
class EstimationResult:
    tokens: int
    breakdown: TokenBreakdown = field(default_factory=TokenBreakdown)
    text_analysis: TextAnalysis = field(default_factory=TextAnalysis)
    confidence: Confidence = Confidence.HIGH
    model_used: str = ""


@dataclass
class TextPayload:
    prompt: str | None = None
    model: str | None = None
    max_tokens: int | None = None


@dataclass
class StreamEstimate:
    chunk: str
    tokens: int
    total: int


# ---------------------------------------------------------------------------
# Pricing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ModelPricing:
    """Price per 1000 tokens."""

    input: float
    output: float


@dataclass
class CostResult:
    input_cost: float = 0.0
    output_cost: float = 0.0
    total_cost: float = 0.0
    formatted_total: str = "N/A"
    available: bool = False
