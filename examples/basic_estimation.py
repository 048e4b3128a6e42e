"""
Basic estimation example
========================

Shows how to estimate tokens with the Fuzzy Token Estimator:
- build an estimator from a plain model-config mapping
- compare models on the same text
- inspect the detailed breakdown and confidence
- estimate a full request payload (prompt + output budget)

Run:
    python examples/basic_estimation.py
"""

from fuzzy_token_estimator import (
    TextPayload,
    create_simple_fuzzy_estimator,
)


MODEL_CONFIGS = {
    "gpt-3.5-turbo": {
        "charsPerToken": 4,
        "overhead": 10,
        "cjkTokensPerChar": 1.2,
        "mixedTextMultiplier": 1.05,
        "numberTokensPerChar": 3.5,
        "symbolTokensPerChar": 2.5,
        "whitespaceHandling": "compress",
    },
    "gpt-4": {
        "charsPerToken": 4,
        "overhead": 12,
        "cjkTokensPerChar": 1.3,
        "mixedTextMultiplier": 1.08,
        "numberTokensPerChar": 3.2,
        "symbolTokensPerChar": 2.3,
        "whitespaceHandling": "compress",
    },
    "claude-3-haiku": {
        "charsPerToken": 3.8,
        "overhead": 8,
        "cjkTokensPerChar": 1.1,
        "mixedTextMultiplier": 1.03,
        "numberTokensPerChar": 3.8,
        "symbolTokensPerChar": 2.8,
        "whitespaceHandling": "compress",
    },
}

SAMPLES = [
    "Hello, world!",
    "こんにちは、世界！",
    "Hello world こんにちは 123 ★☆",
    "人工知能（AI）の発展により、自然言語処理技術が飛躍的に向上しています。",
]


def main() -> None:
    estimator = create_simple_fuzzy_estimator(MODEL_CONFIGS, default_model="gpt-3.5-turbo")

    print("=" * 60)
    print("  Per-model estimates")
    print("=" * 60)
    for text in SAMPLES:
        counts = {model: estimator.estimate(text, model) for model in estimator.get_supported_models()}
        print(f"{text[:30]!r}: {counts}")

    print("\n" + "=" * 60)
    print("  Detailed result")
    print("=" * 60)
    result = estimator.estimate_detailed(SAMPLES[2])
    print(f"  model:      {result.model_used}")
    print(f"  tokens:     {result.tokens}")
    print(f"  confidence: {result.confidence.value}")
    print(f"  breakdown:  {result.breakdown}")
    print(f"  analysis:   {result.text_analysis}")

    payload = TextPayload(prompt=SAMPLES[3], model="gpt-4", max_tokens=256)
    print(f"\n  payload budget (gpt-4, 256 out): {estimator.estimate_payload(payload)}")


if __name__ == "__main__":
    main()
