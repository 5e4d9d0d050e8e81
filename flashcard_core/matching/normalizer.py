"""Word normalization before comparison."""
from __future__ import annotations

import unicodedata
from typing import List, Optional

import regex

# One user-perceived character (extended grapheme cluster)
_GRAPHEME = regex.compile(r"\X")


def normalize_word(text: Optional[str]) -> str:
    """Normalize a word for case-insensitive comparison.

    Case is folded and the text is NFC-composed, so a decomposed "e" plus
    combining accent equals the precomposed "é". Accents, punctuation and
    whitespace are otherwise kept as-is: "Café" and "cafe" still differ by
    one substitution.

    Args:
        text: Raw word or transcription. ``None`` (no transcription) is
            treated as the empty string.

    Returns:
        Lower-cased, NFC-composed text
    """
    if text is None:
        return ""
    return unicodedata.normalize("NFC", text.lower())


def grapheme_units(text: str) -> List[str]:
    """Split text into user-perceived characters.

    Each cluster is NFC-composed so canonically equivalent spellings
    compare equal. A ZWJ emoji sequence such as "👨‍👩‍👧" is a single unit.
    """
    return [unicodedata.normalize("NFC", g) for g in _GRAPHEME.findall(text)]
