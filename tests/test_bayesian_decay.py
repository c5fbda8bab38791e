"""Tests for Bayesian rating adjustment and decay curves."""

import math

import pytest

from nightbuzz.scoring import bayesian_rating, proximity_bonus, recency_weight


def test_bayesian_zero_votes_returns_prior() -> None:
    """A venue with no votes gets exactly the prior mean."""
    assert bayesian_rating(5.0, 0, 10, 3.8) == 3.8


def test_bayesian_small_sample_does_not_beat_large_sample() -> None:
    """A 3-review 4.8 venue ranks below a 400-review 4.4 venue."""
    few = bayesian_rating(4.8, 3, 10, 3.8)
    many = bayesian_rating(4.4, 400, 10, 3.8)

    assert few == pytest.approx(52.4 / 13)
    assert many == pytest.approx(1798 / 410)
    assert few < many


def test_bayesian_converges_to_rating() -> None:
    """With many votes the adjusted rating approaches the raw rating."""
    assert bayesian_rating(4.6, 100_000, 10, 3.8) == pytest.approx(4.6, abs=1e-3)


def test_bayesian_does_not_clamp() -> None:
    """Out-of-range ratings pass straight through."""
    assert bayesian_rating(7.0, 1000, 10, 3.8) > 5.0


def test_recency_weight_half_life() -> None:
    """Weight halves after one half-life."""
    assert recency_weight(0, 6) == 1.0
    assert recency_weight(6, 6) == pytest.approx(0.5)
    assert recency_weight(12, 6) == pytest.approx(0.25)


def test_proximity_bonus_bands() -> None:
    """Full boost nearby, decay in between, zero far away."""
    assert proximity_bonus(0.3, 5, 0.5) == 1.0
    assert proximity_bonus(0.5, 5, 0.5) == 1.0
    assert proximity_bonus(2.5, 5, 0.5) == pytest.approx(math.exp(-0.25))
    assert proximity_bonus(10, 5, 0.5) == 0.0
    assert proximity_bonus(25, 5, 0.5) == 0.0


def test_proximity_bonus_never_increases_with_distance() -> None:
    """Moving farther away never raises the bonus."""
    distances = [0, 0.5, 1, 2, 5, 9.9, 10, 20]
    bonuses = [proximity_bonus(d, 5, 0.5) for d in distances]

    assert bonuses == sorted(bonuses, reverse=True)
