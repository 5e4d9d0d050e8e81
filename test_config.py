"""Tests for scoring configuration."""
from unittest.mock import patch

import pytest

from flashcard_core.config import CLOSE_THRESHOLD, EXACT_THRESHOLD, ScoringConfig


def test_defaults():
    config = ScoringConfig()
    assert config.exact_threshold == EXACT_THRESHOLD == 0.8
    assert config.close_threshold == CLOSE_THRESHOLD == 0.6


@pytest.mark.parametrize("exact, close", [
    (1.2, 0.6),
    (0.8, -0.1),
    (0.5, 0.6),
])
def test_invalid_thresholds(exact, close):
    with pytest.raises(ValueError):
        ScoringConfig(exact_threshold=exact, close_threshold=close)


def test_from_mapping_accepts_both_spellings():
    assert ScoringConfig.from_mapping({"exactThreshold": 0.9, "closeThreshold": "0.7"}) == ScoringConfig(0.9, 0.7)
    assert ScoringConfig.from_mapping({"exact_threshold": 0.95}) == ScoringConfig(0.95, 0.6)


def test_from_mapping_ignores_unknown_keys():
    assert ScoringConfig.from_mapping({"difficulty": 3}) == ScoringConfig()
    assert ScoringConfig.from_mapping(None) == ScoringConfig()


def test_from_mapping_rejects_non_numbers():
    with pytest.raises(ValueError):
        ScoringConfig.from_mapping({"exactThreshold": "high"})


def test_from_env():
    env = {"FLASHCARD_EXACT_THRESHOLD": "0.9", "FLASHCARD_CLOSE_THRESHOLD": "0.5"}
    with patch.dict("os.environ", env):
        assert ScoringConfig.from_env() == ScoringConfig(0.9, 0.5)


def test_from_env_defaults_when_unset():
    with patch.dict("os.environ", {}, clear=True):
        assert ScoringConfig.from_env() == ScoringConfig()
