"""Tests for the scoring service client."""
from unittest.mock import MagicMock, patch

import requests

from api.client import classify_remote
from flashcard_core.config import ScoringConfig
from flashcard_core.models.similarity_result import SimilarityResult, Tier


def _response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def test_uses_service_result():
    with patch("api.client.requests.post", return_value=_response({"score": 0.9, "tier": "exact"})) as post:
        result = classify_remote("cat", "cat", url="http://scoring.test/classify", timeout=2)
    assert result == SimilarityResult(score=0.9, tier=Tier.EXACT)
    post.assert_called_once_with(
        "http://scoring.test/classify",
        json={"guess": "cat", "target": "cat"},
        timeout=2,
    )


def test_falls_back_when_service_down():
    with patch("api.client.requests.post", side_effect=requests.ConnectionError("refused")):
        result = classify_remote("cet", "cat")
    assert result.tier is Tier.CLOSE


def test_falls_back_on_http_error():
    response = _response({})
    response.raise_for_status.side_effect = requests.HTTPError("500")
    with patch("api.client.requests.post", return_value=response):
        assert classify_remote("dog", "cat").tier is Tier.LOW


def test_falls_back_on_malformed_payload():
    with patch("api.client.requests.post", return_value=_response({"score": 1.0, "tier": "perfect"})):
        result = classify_remote("CAT", "cat")
    assert result == SimilarityResult(score=1.0, tier=Tier.EXACT)


def test_fallback_uses_env_thresholds():
    env = {"FLASHCARD_EXACT_THRESHOLD": "1.0", "FLASHCARD_CLOSE_THRESHOLD": "0.6"}
    with patch.dict("os.environ", env), \
         patch("api.client.requests.post", side_effect=requests.ConnectionError("refused")):
        assert classify_remote("elephnt", "elephant").tier is Tier.CLOSE


def test_fallback_uses_given_config():
    lenient = ScoringConfig(exact_threshold=0.6, close_threshold=0.3)
    with patch("api.client.requests.post", side_effect=requests.Timeout("slow")):
        assert classify_remote("cet", "cat", config=lenient).tier is Tier.EXACT
