"""Scoring of spoken answers against flashcard words."""
from .rules import CELEBRATION_DELAY_S, FEEDBACK
from .similarity import classify, classify_score, similarity_score

__all__ = ["classify", "classify_score", "similarity_score", "FEEDBACK", "CELEBRATION_DELAY_S"]
