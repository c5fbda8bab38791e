"""
Venue Scoring
=============
Tonight, monthly and trending scorers plus their building blocks.
"""

from .bayesian import bayesian_rating
from .decay import proximity_bonus, recency_weight
from .monthly import calculate_monthly_score, calculate_points
from .tonight import calculate_tonight_score
from .trending import calculate_trending_score

__all__ = [
    "bayesian_rating",
    "recency_weight",
    "proximity_bonus",
    "calculate_tonight_score",
    "calculate_monthly_score",
    "calculate_points",
    "calculate_trending_score",
]
