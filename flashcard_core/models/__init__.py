"""Value types shared across the flashcard scoring modules."""
from .similarity_result import SimilarityResult, Tier

__all__ = ["SimilarityResult", "Tier"]
