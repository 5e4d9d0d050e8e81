"""Fuzzy scoring of spoken flashcard answers."""
from .cards import CardCatalog, CardCategory, FlashCard
from .config import ScoringConfig
from .game import AnswerOutcome, GameSession
from .models import SimilarityResult, Tier
from .scoring import classify, similarity_score

__version__ = "0.1.0"

__all__ = [
    "AnswerOutcome",
    "CardCatalog",
    "CardCategory",
    "FlashCard",
    "GameSession",
    "ScoringConfig",
    "SimilarityResult",
    "Tier",
    "classify",
    "similarity_score",
]
