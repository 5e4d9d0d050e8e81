"""Flashcard vocabulary and catalog lookups."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional


class CardCategory(Enum):
    ANIMALS = "animals"
    FRUITS = "fruits"
    NUMBERS = "numbers"
    COLORS = "colors"
    SHAPES = "shapes"
    ACTIONS = "actions"


@dataclass(frozen=True)
class FlashCard:
    """A single vocabulary card.

    Attributes:
        word: Word the child is asked to say
        image_name: Asset name of the picture shown on the card
        difficulty: 1 (easy) and up
        category: Dashboard category the card belongs to
        card_id: Stable id derived from the word
    """
    word: str
    image_name: str
    difficulty: int
    category: CardCategory
    card_id: str = field(default="")

    def __post_init__(self) -> None:
        if not self.card_id:
            object.__setattr__(self, "card_id", self.word.lower())

    def to_dict(self) -> Dict[str, object]:
        return {
            "card_id": self.card_id,
            "word": self.word,
            "image_name": self.image_name,
            "difficulty": self.difficulty,
            "category": self.category.value,
        }


DEFAULT_CARDS = (
    FlashCard("Apple", "apple", 1, CardCategory.FRUITS),
    FlashCard("Banana", "banana", 1, CardCategory.FRUITS),
    FlashCard("Cat", "cat", 1, CardCategory.ANIMALS),
    FlashCard("Dog", "dog", 1, CardCategory.ANIMALS),
    FlashCard("Elephant", "elephant", 2, CardCategory.ANIMALS),
    FlashCard("Fish", "fish", 1, CardCategory.ANIMALS),
    FlashCard("Giraffe", "giraffe", 2, CardCategory.ANIMALS),
    FlashCard("Horse", "horse", 1, CardCategory.ANIMALS),
)


class CardCatalog:
    """Read-only set of flashcards with random selection.

    The random source is injected so callers (and tests) control the
    card order.
    """

    def __init__(self, cards: Optional[Iterable[FlashCard]] = None, rng: Optional[random.Random] = None):
        self._cards: List[FlashCard] = list(DEFAULT_CARDS if cards is None else cards)
        self._by_id: Dict[str, FlashCard] = {c.card_id: c for c in self._cards}
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._cards)

    def all(self) -> List[FlashCard]:
        return list(self._cards)

    def get(self, card_id: str) -> FlashCard:
        """Look up a card by id. Raises KeyError for an unknown id."""
        return self._by_id[card_id]

    def by_category(self, category: CardCategory) -> List[FlashCard]:
        return [c for c in self._cards if c.category is category]

    def random_card(
        self, exclude: Optional[FlashCard] = None, category: Optional[CardCategory] = None
    ) -> FlashCard:
        """Pick a random card, avoiding ``exclude`` when another card exists.

        Args:
            exclude: Card to avoid, usually the one just answered
            category: Only draw from this category

        Raises:
            LookupError: If the catalog (or the category) has no cards
        """
        pool = self._cards if category is None else self.by_category(category)
        if not pool:
            where = "card catalog" if category is None else f"category {category.value!r}"
            raise LookupError(f"{where} has no cards")
        candidates = [c for c in pool if c != exclude] or pool
        return self._rng.choice(candidates)


def progress_percent(score: int, total: int) -> int:
    """Dashboard progress as a whole percentage, capped at 100."""
    if total <= 0:
        return 0
    return min(100, int(score / total * 100))
