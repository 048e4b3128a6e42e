"""File-based providers (local JSON documents).

Model configs::

    {
      "default_model": "gpt-4",
      "models": {
        "gpt-4": {"charsPerToken": 4, "overhead": 12, ...}
      }
    }

Pricing (per 1000 tokens)::

    {"models": {"gpt-4": {"input": 0.03, "output": 0.06}}}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from fuzzy_token_estimator.config import FuzzyModelConfig
from fuzzy_token_estimator.core.errors import ConfigValidationError, ProviderLoadError
from fuzzy_token_estimator.providers.memory import (
    SimpleCostProvider,
    SimpleModelConfigProvider,
)

logger = logging.getLogger(__name__)


def _load_document(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise ProviderLoadError(f"Provider file {str(path)!r} not found") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ProviderLoadError(f"Provider file {str(path)!r} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise ProviderLoadError(f"Provider file {str(path)!r} cannot be read: {exc}") from exc
    if not isinstance(data, dict) or not isinstance(data.get("models"), dict):
        raise ProviderLoadError(f"Provider file {str(path)!r} has no 'models' object")
    return data


class JsonModelConfigProvider(SimpleModelConfigProvider):
    """ModelConfigProvider loaded once from a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        data = _load_document(self._path)
        default_model = data.get("default_model", data.get("defaultModel"))
        try:
            super().__init__(data["models"], default_model=default_model)
        except ConfigValidationError as exc:
            raise ProviderLoadError(f"Invalid model config in {str(self._path)!r}: {exc}") from exc
        logger.info("Loaded %d model configs from %s", len(self._configs), self._path)

    @property
    def path(self) -> Path:
        return self._path

    @staticmethod
    def dump(
        path: str | Path,
        configs: dict[str, FuzzyModelConfig],
        default_model: str | None = None,
    ) -> None:
        data: dict[str, Any] = {"models": {name: c.to_dict() for name, c in configs.items()}}
        if default_model is not None:
            data["default_model"] = default_model
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)


class JsonCostProvider(SimpleCostProvider):
    """CostProvider loaded once from a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        data = _load_document(self._path)
        try:
            super().__init__(data["models"])
        except ConfigValidationError as exc:
            raise ProviderLoadError(f"Invalid pricing in {str(self._path)!r}: {exc}") from exc
        logger.info("Loaded pricing for %d models from %s", len(self._prices), self._path)

    @property
    def path(self) -> Path:
        return self._path
