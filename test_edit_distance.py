"""Tests for the Levenshtein distance used to score spoken answers."""
import itertools

import pytest

from flashcard_core.matching.edit_distance import levenshtein_distance
from flashcard_core.matching.normalizer import grapheme_units, normalize_word

WORDS = ["", "a", "cat", "cet", "act", "dog", "elefant", "elephant", "giraffe", "girafe", "über"]


@pytest.mark.parametrize("a, b, expected", [
    ("", "", 0),
    ("", "cat", 3),
    ("cat", "", 3),
    ("cat", "cat", 0),
    ("cet", "cat", 1),
    ("dog", "cat", 3),
    ("kitten", "sitting", 3),
    ("elefant", "elephant", 2),
    ("horse", "hose", 1),
    ("banana", "bananas", 1),
])
def test_known_distances(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def test_multibyte_characters_are_single_units():
    assert levenshtein_distance("über", "uber") == 1
    assert levenshtein_distance("cafe\u0301", "cafe") == 1
    assert levenshtein_distance("🐱", "🐶") == 1


@pytest.mark.parametrize("s", WORDS)
def test_identity(s):
    assert levenshtein_distance(s, s) == 0


def test_symmetry_and_upper_bound():
    for a, b in itertools.product(WORDS, repeat=2):
        d = levenshtein_distance(a, b)
        assert d == levenshtein_distance(b, a)
        assert d <= max(len(a), len(b))


def test_triangle_inequality():
    for a, b, c in itertools.product(WORDS, repeat=3):
        assert levenshtein_distance(a, c) <= levenshtein_distance(a, b) + levenshtein_distance(b, c)


def test_normalize_word_only_folds_case():
    assert normalize_word("CaT") == "cat"
    assert normalize_word(" Dog! ") == " dog! "
    assert normalize_word("Éléphant") == "éléphant"
    assert normalize_word(None) == ""


DECOMPOSED_CAFE = "cafe\u0301"
PRECOMPOSED_CAFE = "caf\u00e9"
FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
MAN = "\U0001F468"


def test_decomposed_accent_equals_precomposed():
    assert levenshtein_distance(DECOMPOSED_CAFE, PRECOMPOSED_CAFE) == 0
    assert levenshtein_distance(DECOMPOSED_CAFE, "cafe") == 1


def test_zwj_emoji_sequence_is_one_character():
    assert levenshtein_distance(FAMILY, MAN) == 1
    assert levenshtein_distance(FAMILY, FAMILY) == 0


def test_pre_split_sequences_are_compared_as_given():
    assert levenshtein_distance(["ca", "t"], ["ca", "r"]) == 1


def test_grapheme_units():
    assert grapheme_units(DECOMPOSED_CAFE) == ["c", "a", "f", "\u00e9"]
    assert grapheme_units(FAMILY + "!") == [FAMILY, "!"]
    assert grapheme_units("") == []


def test_normalize_word_composes_accents():
    assert normalize_word("CAFE\u0301") == PRECOMPOSED_CAFE
