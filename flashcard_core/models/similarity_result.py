"""Data model for a scored spoken answer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Tier(Enum):
    """Feedback bucket derived from a similarity score."""
    EXACT = "exact"
    CLOSE = "close"
    LOW = "low"


@dataclass(frozen=True)
class SimilarityResult:
    """Similarity between a spoken guess and the target word.

    Attributes:
        score: Normalized similarity in [0, 1] (1.0 = identical)
        tier: Feedback tier derived from the score
    """
    score: float
    tier: Tier

    @property
    def is_correct(self) -> bool:
        return self.tier is Tier.EXACT

    def to_dict(self) -> dict:
        return {"score": self.score, "tier": self.tier.value}
