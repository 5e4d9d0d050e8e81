"""Game state around scored answers: current card, score and feedback."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .asr.transcription import ListeningSession, TranscriptionSource
from .cards import CardCatalog, CardCategory, FlashCard, progress_percent
from .config import DEFAULT_CONFIG, ScoringConfig
from .models.similarity_result import SimilarityResult
from .scoring.rules import CELEBRATION_DELAY_S, FEEDBACK
from .scoring.similarity import classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnswerOutcome:
    """What the UI needs after one spoken answer.

    Attributes:
        result: Score and tier of the answer
        card: Card that was answered
        next_card: Card to show next (same card unless the answer was correct)
        score: Running score after this answer
        message: Feedback text for the child
        color: Feedback color name
        advance_after_s: Celebration delay before showing next_card, or None
    """
    result: SimilarityResult
    card: FlashCard
    next_card: FlashCard
    score: int
    message: str
    color: str
    advance_after_s: Optional[float] = None

    @property
    def correct(self) -> bool:
        return self.result.is_correct

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.result.to_dict(),
            "correct": self.correct,
            "card": self.card.to_dict(),
            "next_card": self.next_card.to_dict(),
            "score": self.score,
            "message": self.message,
            "color": self.color,
            "advance_after_s": self.advance_after_s,
        }

class GameSession:
    """One child's run through the flashcards.

    Constructed explicitly with its catalog and thresholds; nothing here is
    shared between sessions. With a ``category`` every card shown, the
    first one included, comes from that category. Answers are serialized
    so concurrent submissions each score against the card they see.
    """

    def __init__(
        self,
        catalog: Optional[CardCatalog] = None,
        config: Optional[ScoringConfig] = None,
        card: Optional[FlashCard] = None,
        category: Optional[CardCategory] = None,
    ):
        self.catalog = catalog or CardCatalog()
        self.config = config or DEFAULT_CONFIG
        self.category = category
        # Raises LookupError when the category has no cards
        self.current_card = card or self.catalog.random_card(category=category)
        self.score = 0
        self.history: List[AnswerOutcome] = []
        self._lock = threading.Lock()

    @property
    def attempts(self) -> int:
        return len(self.history)

    def submit_answer(self, spoken_text: Optional[str]) -> AnswerOutcome:
        """Score a transcription against the current card.

        A correct answer bumps the score and moves to a different card;
        anything else keeps the card so the child can retry. ``None`` is
        treated as silence.
        """
        with self._lock:
            card = self.current_card
            result = classify(spoken_text, card.word, self.config)
            message, color = FEEDBACK[result.tier]

            next_card = card
            advance_after_s = None
            if result.is_correct:
                self.score += 1
                next_card = self.catalog.random_card(exclude=card, category=self.category)
                self.current_card = next_card
                advance_after_s = CELEBRATION_DELAY_S

            outcome = AnswerOutcome(
                result=result,
                card=card,
                next_card=next_card,
                score=self.score,
                message=message,
                color=color,
                advance_after_s=advance_after_s,
            )
            self.history.append(outcome)

        logger.info(
            "Answer %r for %r: score=%.3f tier=%s total=%d",
            spoken_text, card.word, result.score, result.tier.value, outcome.score,
        )
        return outcome

    async def listen_and_submit(
        self, source: TranscriptionSource, timeout: Optional[float] = None
    ) -> AnswerOutcome:
        """Wait for one finalized transcription from ``source`` and submit it."""
        text = await ListeningSession(source).wait(timeout)
        return self.submit_answer(text)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "card": self.current_card.to_dict(),
                "category": self.category.value if self.category else None,
                "score": self.score,
                "attempts": self.attempts,
                "progress_percent": progress_percent(self.score, len(self.catalog)),
                "exact_threshold": self.config.exact_threshold,
                "close_threshold": self.config.close_threshold,
            }
