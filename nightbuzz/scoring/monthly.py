"""
Monthly Power Score
===================
Month-level standing of a venue (0-100).

Components (default weights summing to 100):
- quality (40): Bayesian-adjusted average rating
- popularity (30): review velocity vs last month, plus total volume
- consistency (15): rating stability, lower std dev scores higher
- deals (10): deal quality fraction
- expert_boost (5): curated expert multiplier
"""

from nightbuzz.models import MonthlyBreakdown, MonthlyInput, MonthlyScore, ScoringWeights
from nightbuzz.utils import cap_components

from .bayesian import bayesian_rating
from .tonight import MAX_RATING, MAX_SCORE, expert_boost_points

MAX_VELOCITY = 2.0
VOLUME_SATURATION = 500
VELOCITY_SHARE = 0.6
VOLUME_SHARE = 0.4
STD_DEV_CEILING = 1.5

# F1-style points for the top ten
POINTS_TABLE = [25, 18, 15, 12, 10, 8, 6, 4, 2, 1]


def calculate_monthly_score(
    data: MonthlyInput,
    weights: ScoringWeights,
    expert_multiplier: float = 1.0,
) -> MonthlyScore:
    """Power score for one venue. Rank fields are left for the leaderboard."""
    monthly = weights.monthly

    adjusted = bayesian_rating(data.avg_rating, data.total_reviews, weights.bayesian.m, weights.bayesian.C)
    quality = adjusted / MAX_RATING * monthly.quality

    velocity = data.new_reviews_this_month / max(data.previous_month_reviews, 1)
    velocity_normalized = min(velocity, MAX_VELOCITY) / MAX_VELOCITY
    volume_normalized = min(data.total_reviews / VOLUME_SATURATION, 1.0)
    popularity = (velocity_normalized * VELOCITY_SHARE + volume_normalized * VOLUME_SHARE) * monthly.popularity

    consistency = max(0.0, 1 - data.rating_std_dev / STD_DEV_CEILING) * monthly.consistency
    deals = data.deals_quality * monthly.deals
    expert = expert_boost_points(expert_multiplier, monthly.expert_boost)

    components, total = cap_components(
        {
            "quality": quality,
            "popularity": popularity,
            "consistency": consistency,
            "deals": deals,
            "expert_boost": expert,
        },
        "expert_boost",
        MAX_SCORE,
    )

    return MonthlyScore(power_score=total, breakdown=MonthlyBreakdown(**components))


def calculate_points(rank: int) -> int:
    if 1 <= rank <= len(POINTS_TABLE):
        return POINTS_TABLE[rank - 1]
    return 0
