"""Trending momentum: how quickly a venue is climbing or sliding."""

from nightbuzz.models import Direction, TrendingInput, TrendingScore
from nightbuzz.models.scoring import MonthOverMonthDelta, WeekOverWeekDelta
from nightbuzz.utils import clamp, round_half_up

MOMENTUM_LIMIT = 100
DIRECTION_BAND = 10

RANK_WEIGHT = 10
SCORE_WEIGHT = 2
REVIEWS_WEIGHT = 5
RATING_WEIGHT = 20


def momentum_direction(momentum: float) -> Direction:
    if momentum > DIRECTION_BAND:
        return Direction.RISING
    if momentum < -DIRECTION_BAND:
        return Direction.FALLING
    return Direction.STABLE


def calculate_trending_score(data: TrendingInput) -> TrendingScore:
    """Momentum in [-100, 100]; positive means the venue is rising.

    Moving up one rank is worth 10 points, one score point 2, one extra
    weekly review 5 and a tenth of a star 2.
    """
    rank_delta = data.previous_rank - data.current_rank
    score_delta = data.current_score - data.previous_score
    wow = data.week_over_week

    raw = (
        rank_delta * RANK_WEIGHT
        + score_delta * SCORE_WEIGHT
        + wow.reviews_delta * REVIEWS_WEIGHT
        + wow.rating_delta * RATING_WEIGHT
    )
    bounded = clamp(raw, -MOMENTUM_LIMIT, MOMENTUM_LIMIT)

    return TrendingScore(
        momentum=round_half_up(bounded, 0),
        direction=momentum_direction(bounded),
        week_over_week=WeekOverWeekDelta(
            rating_delta=wow.rating_delta,
            reviews_delta=wow.reviews_delta,
            score_delta=round_half_up(score_delta, 1),
        ),
        month_over_month=MonthOverMonthDelta(
            rank_delta=rank_delta,
            score_delta=round_half_up(score_delta, 1),
        ),
    )
