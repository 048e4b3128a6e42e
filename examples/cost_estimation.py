"""
Cost estimation example
=======================

Loads model weights and pricing from JSON files, estimates a prompt and
converts the result into a cost.

Run:
    python examples/cost_estimation.py
"""

import json
import logging
import tempfile
from pathlib import Path

from fuzzy_token_estimator import (
    JsonCostProvider,
    JsonModelConfigProvider,
    TokenCostCalculator,
    create_fuzzy_estimator,
)


def write_fixtures(base: Path) -> tuple[Path, Path]:
    models_path = base / "models.json"
    prices_path = base / "prices.json"
    models_path.write_text(
        json.dumps(
            {
                "default_model": "gpt-3.5-turbo",
                "models": {
                    "gpt-3.5-turbo": {
                        "charsPerToken": 4,
                        "overhead": 10,
                        "cjkTokensPerChar": 1.2,
                        "mixedTextMultiplier": 1.05,
                    },
                    "gpt-4": {
                        "charsPerToken": 3.5,
                        "overhead": 12,
                        "cjkTokensPerChar": 1.3,
                        "mixedTextMultiplier": 1.1,
                    },
                },
            }
        ),
        encoding="utf-8",
    )
    prices_path.write_text(
        json.dumps(
            {
                "models": {
                    "gpt-3.5-turbo": {"input": 0.0015, "output": 0.002},
                    "gpt-4": {"input": 0.03, "output": 0.06},
                }
            }
        ),
        encoding="utf-8",
    )
    return models_path, prices_path


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    with tempfile.TemporaryDirectory() as tmp:
        models_path, prices_path = write_fixtures(Path(tmp))
        estimator = create_fuzzy_estimator(JsonModelConfigProvider(models_path))
        calculator = TokenCostCalculator(JsonCostProvider(prices_path))

    prompt = "Summarise the following meeting notes: 本日の会議では新製品の発売日について議論しました。"
    for model in [*estimator.get_supported_models(), "llama-unknown"]:
        input_tokens = estimator.estimate(prompt, model)
        cost = calculator.calculate(model, input_tokens, 500)
        print(f"  {model:<15} input={input_tokens:<4} cost={cost.formatted_total}")


if __name__ == "__main__":
    main()
