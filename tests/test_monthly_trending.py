"""Tests for the monthly power score and trending momentum."""

import pytest

from nightbuzz.models import Direction, MonthlyInput, ScoringWeights, TrendingInput, WeekOverWeek
from nightbuzz.scoring import calculate_monthly_score, calculate_points, calculate_trending_score


def strong_month(**overrides) -> MonthlyInput:
    data = {
        "avg_rating": 4.5,
        "total_reviews": 500,
        "new_reviews_this_month": 60,
        "previous_month_reviews": 30,
        "rating_std_dev": 0.3,
        "deals_quality": 0.5,
    }
    data.update(overrides)
    return MonthlyInput(**data)


def test_monthly_breakdown() -> None:
    """Each component follows its weight."""
    score = calculate_monthly_score(strong_month(), ScoringWeights())

    assert score.breakdown.quality == pytest.approx(35.9)
    assert score.breakdown.popularity == pytest.approx(30.0)
    assert score.breakdown.consistency == pytest.approx(12.0)
    assert score.breakdown.deals == pytest.approx(5.0)
    assert score.breakdown.expert_boost == 0
    assert score.power_score == pytest.approx(82.9)


def test_monthly_rank_fields_left_unset() -> None:
    """Ranks are filled in later by the leaderboard."""
    score = calculate_monthly_score(strong_month(), ScoringWeights())

    assert score.power_rank is None
    assert score.previous_rank is None
    assert score.rank_delta is None


def test_monthly_consistency_floor() -> None:
    """Very erratic ratings earn no consistency points."""
    score = calculate_monthly_score(strong_month(rating_std_dev=3.0), ScoringWeights())
    assert score.breakdown.consistency == 0


def test_monthly_velocity_without_previous_month() -> None:
    """A missing previous month counts as one review."""
    score = calculate_monthly_score(
        strong_month(total_reviews=0, new_reviews_this_month=1, previous_month_reviews=0),
        ScoringWeights(),
    )
    assert score.breakdown.popularity == pytest.approx(9.0)


def test_monthly_capped_at_100() -> None:
    """A huge expert multiplier cannot push past 100."""
    score = calculate_monthly_score(strong_month(), ScoringWeights(), expert_multiplier=3.0)
    assert score.power_score == 100.0


@pytest.mark.parametrize(
    "overrides,expert_multiplier",
    [
        ({}, 3.0),
        ({"avg_rating": 3.37, "total_reviews": 143, "new_reviews_this_month": 7, "previous_month_reviews": 9}, 1.0),
        ({"avg_rating": 4.21, "total_reviews": 61, "rating_std_dev": 0.77, "deals_quality": 0.35}, 1.08),
        ({"avg_rating": 1.95, "total_reviews": 4, "new_reviews_this_month": 1, "rating_std_dev": 1.1}, 1.0),
    ],
)
def test_monthly_breakdown_sums_to_power_score(overrides, expert_multiplier) -> None:
    """Rounded components add up to the power score, including when capped."""
    score = calculate_monthly_score(strong_month(**overrides), ScoringWeights(), expert_multiplier)

    assert sum(score.breakdown.model_dump().values()) == pytest.approx(score.power_score, abs=0.1)
    assert score.power_score <= 100.0


@pytest.mark.parametrize("rank,points", [(1, 25), (2, 18), (3, 15), (10, 1), (11, 0), (0, 0)])
def test_points_table(rank: int, points: int) -> None:
    """Only the top ten earn points."""
    assert calculate_points(rank) == points


def test_momentum_is_clamped_and_rising() -> None:
    """A big jump saturates at +100."""
    score = calculate_trending_score(TrendingInput(
        current_rank=3,
        previous_rank=10,
        current_score=70,
        previous_score=60,
        week_over_week=WeekOverWeek(rating_delta=0.1, reviews_delta=4),
    ))

    assert score.momentum == 100
    assert score.direction == Direction.RISING
    assert score.month_over_month.rank_delta == 7
    assert score.week_over_week.score_delta == pytest.approx(10.0)
    assert score.trending_rank is None


def test_momentum_falling() -> None:
    """Dropping two places is a fall."""
    score = calculate_trending_score(TrendingInput(
        current_rank=5, previous_rank=3, current_score=50, previous_score=50,
    ))

    assert score.momentum == -20
    assert score.direction == Direction.FALLING


@pytest.mark.parametrize("previous_rank,current_rank", [(5, 4), (4, 5), (4, 4)])
def test_momentum_band_is_stable(previous_rank: int, current_rank: int) -> None:
    """Moves of ten points or less either way are stable."""
    score = calculate_trending_score(TrendingInput(
        current_rank=current_rank, previous_rank=previous_rank, current_score=50, previous_score=50,
    ))
    assert score.direction == Direction.STABLE


def test_momentum_floor() -> None:
    """A collapse saturates at -100."""
    score = calculate_trending_score(TrendingInput(
        current_rank=40, previous_rank=1, current_score=20, previous_score=90,
    ))

    assert score.momentum == -100
    assert score.direction == Direction.FALLING
