"""Character-level matching between spoken guesses and target words."""
from .edit_distance import levenshtein_distance
from .normalizer import grapheme_units, normalize_word

__all__ = ["levenshtein_distance", "grapheme_units", "normalize_word"]
