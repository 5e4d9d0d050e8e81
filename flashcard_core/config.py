"""Runtime configuration for scoring and the scoring service."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

# Similarity needed for each feedback tier (inclusive lower bounds)
EXACT_THRESHOLD = 0.8
CLOSE_THRESHOLD = 0.6

SCORING_SERVICE_URL = os.getenv("SCORING_SERVICE_URL", "http://localhost:8000/classify")
SCORING_SERVICE_TIMEOUT = float(os.getenv("SCORING_SERVICE_TIMEOUT", "5"))
LOG_LEVEL = os.getenv("FLASHCARD_LOG_LEVEL", "INFO").upper()

# Recognized option names -> field names
_OPTION_ALIASES = {
    "exactThreshold": "exact_threshold",
    "exact_threshold": "exact_threshold",
    "closeThreshold": "close_threshold",
    "close_threshold": "close_threshold",
}


@dataclass(frozen=True)
class ScoringConfig:
    """Tier thresholds used to classify a similarity score.

    Attributes:
        exact_threshold: Lowest score counted as a correct answer
        close_threshold: Lowest score counted as "close, try again"
    """
    exact_threshold: float = EXACT_THRESHOLD
    close_threshold: float = CLOSE_THRESHOLD

    def __post_init__(self) -> None:
        for name in ("exact_threshold", "close_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value!r}")
        if self.close_threshold > self.exact_threshold:
            raise ValueError(
                f"close_threshold ({self.close_threshold}) must not exceed "
                f"exact_threshold ({self.exact_threshold})"
            )

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "ScoringConfig":
        """Build a config from user options, ignoring unknown keys.

        Both ``exactThreshold``/``closeThreshold`` and their snake_case forms
        are accepted. Missing options keep their defaults.
        """
        values = {}
        for key, value in (options or {}).items():
            field_name = _OPTION_ALIASES.get(key)
            if field_name is None or value is None:
                continue
            values[field_name] = _to_float(key, value)
        return cls(**values)

    @classmethod
    def from_env(cls) -> "ScoringConfig":
        """Build a config from FLASHCARD_EXACT_THRESHOLD / FLASHCARD_CLOSE_THRESHOLD."""
        return cls.from_mapping({
            "exact_threshold": os.getenv("FLASHCARD_EXACT_THRESHOLD"),
            "close_threshold": os.getenv("FLASHCARD_CLOSE_THRESHOLD"),
        })


def _to_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None


DEFAULT_CONFIG = ScoringConfig()
