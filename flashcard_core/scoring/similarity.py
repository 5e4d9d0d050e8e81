"""Similarity scoring and tier classification for spoken answers."""
from __future__ import annotations

from typing import Optional

from ..config import DEFAULT_CONFIG, ScoringConfig
from ..matching.edit_distance import levenshtein_distance
from ..matching.normalizer import grapheme_units, normalize_word
from ..models.similarity_result import SimilarityResult, Tier


def similarity_score(guess: Optional[str], target: Optional[str]) -> float:
    """Normalized similarity between a guess and a target word.

    score = 1 - distance / max(len(guess), len(target)), computed on the
    normalized inputs with lengths counted in user-perceived characters.
    Two empty strings are a trivial perfect match.

    Args:
        guess: Transcribed answer (``None`` counts as silence)
        target: Target vocabulary word

    Returns:
        Similarity in [0, 1]
    """
    a = grapheme_units(normalize_word(guess))
    b = grapheme_units(normalize_word(target))
    length = max(len(a), len(b))
    if length == 0:
        return 1.0
    score = 1.0 - levenshtein_distance(a, b) / length
    return min(1.0, max(0.0, score))


def classify_score(score: float, config: Optional[ScoringConfig] = None) -> Tier:
    """Map a similarity score to a tier. First match wins, bounds inclusive."""
    config = config or DEFAULT_CONFIG
    if score >= config.exact_threshold:
        return Tier.EXACT
    if score >= config.close_threshold:
        return Tier.CLOSE
    return Tier.LOW


def classify(
    guess: Optional[str], target: Optional[str], config: Optional[ScoringConfig] = None
) -> SimilarityResult:
    """Score a spoken guess against the target word and bucket it.

    Args:
        guess: Raw transcription, any case
        target: Target word, any case
        config: Tier thresholds (defaults to 0.8 / 0.6)

    Returns:
        SimilarityResult with the score and its tier
    """
    score = similarity_score(guess, target)
    return SimilarityResult(score=score, tier=classify_score(score, config))
