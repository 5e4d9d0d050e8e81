"""
Flashcard Tools - Shared entry points for flashcard answer scoring.

Collects the pieces a game screen needs (scoring, catalog, session,
listening) so screens import from one place instead of re-implementing
the similarity check each time.
"""
# --- Scoring ---
from flashcard_core.scoring.similarity import classify, classify_score, similarity_score
from flashcard_core.matching.edit_distance import levenshtein_distance
from flashcard_core.config import ScoringConfig

# --- Cards & game state ---
from flashcard_core.cards import CardCatalog, progress_percent
from flashcard_core.game import GameSession

# --- Listening ---
from flashcard_core.asr.transcription import ListeningSession

# --- Remote scoring ---
from api.client import classify_remote


__all__ = [
    "classify",
    "classify_score",
    "similarity_score",
    "levenshtein_distance",
    "ScoringConfig",
    "CardCatalog",
    "progress_percent",
    "GameSession",
    "ListeningSession",
    "classify_remote",
]
