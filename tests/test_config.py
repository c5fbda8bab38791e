"""Tests for weight loading."""

import json
import logging

import pytest

from nightbuzz.config import load_weights, weight_totals
from nightbuzz.models import Platform, ScoringWeights


def test_default_weights_sum_to_100() -> None:
    """Built-in weights are balanced."""
    assert weight_totals(ScoringWeights()) == {"tonight": 100, "monthly": 100}


def test_default_social_settings() -> None:
    """Social defaults cover every platform and weekday."""
    social = ScoringWeights().social

    assert social.platform_weight(Platform.TIKTOK) == 1.0
    assert social.viral_threshold == 80
    assert sorted(social.expected_peak_hours) == list(range(7))


def test_load_weights_from_file(tmp_path) -> None:
    """Weights files override defaults and keep unspecified sections."""
    path = tmp_path / "weights.json"
    path.write_text(json.dumps({
        "version": 3,
        "tonight": {"popularity": 40, "quality": 15, "open_now": 15, "deals": 15, "proximity": 10, "expert_boost": 5},
        "bayesian": {"m": 25, "C": 4.0},
        "unknown_section": {"ignored": True},
    }))

    weights = load_weights(path)

    assert weights.version == 3
    assert weights.tonight.popularity == 40
    assert weights.bayesian.m == 25
    assert weights.monthly.quality == 40


def test_unbalanced_weights_warn_but_load(tmp_path, caplog) -> None:
    """Totals other than 100 are logged, not rejected."""
    path = tmp_path / "weights.json"
    path.write_text(json.dumps({"monthly": {"quality": 50}}))

    with caplog.at_level(logging.WARNING, logger="nightbuzz.config"):
        weights = load_weights(path)

    assert weights.monthly.quality == 50
    assert "monthly weights sum to 110" in caplog.text


def test_invalid_weights_file(tmp_path) -> None:
    """Malformed JSON surfaces as a decode error."""
    path = tmp_path / "weights.json"
    path.write_text("{not json")

    with pytest.raises(json.JSONDecodeError):
        load_weights(path)
