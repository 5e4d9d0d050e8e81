"""Feedback rules for scored answers."""
from __future__ import annotations

from ..models.similarity_result import Tier

# Message and color shown to the child for each tier
FEEDBACK = {
    Tier.EXACT: ("Perfect! 🌟", "green"),
    Tier.CLOSE: ("Close! Try again 💪", "orange"),
    Tier.LOW: ("Keep practicing! 📚", "red"),
}

# Seconds the celebration stays up before the next card is shown
CELEBRATION_DELAY_S = 1.5
