"""HTTP client for the scoring service with local fallback."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from flashcard_core.config import SCORING_SERVICE_TIMEOUT, SCORING_SERVICE_URL, ScoringConfig
from flashcard_core.models.similarity_result import SimilarityResult, Tier
from flashcard_core.scoring.similarity import classify

logger = logging.getLogger(__name__)


def classify_remote(
    guess: Optional[str],
    target: str,
    url: Optional[str] = None,
    timeout: Optional[float] = None,
    config: Optional[ScoringConfig] = None,
) -> SimilarityResult:
    """Ask the scoring service to classify a guess.

    Falls back to scoring locally if the service is unreachable or answers
    with something unexpected, so a flaky network never blocks the game.

    Args:
        guess: Transcribed answer (``None`` for silence)
        target: Target word
        url: Service endpoint (defaults to SCORING_SERVICE_URL)
        timeout: Request timeout in seconds
        config: Thresholds for the local fallback (defaults to the same
            environment settings the service reads)

    Returns:
        SimilarityResult from the service, or computed locally
    """
    url = url or SCORING_SERVICE_URL
    try:
        response = requests.post(
            url,
            json={"guess": guess, "target": target},
            timeout=timeout or SCORING_SERVICE_TIMEOUT,
        )
        response.raise_for_status()
        payload = response.json()
        return SimilarityResult(score=float(payload["score"]), tier=Tier(payload["tier"]))
    except requests.RequestException as e:
        logger.warning("Scoring service call failed (%s), scoring locally", e)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Malformed scoring service response (%s), scoring locally", e)
    return classify(guess, target, config or ScoringConfig.from_env())
