"""Scoring weight configuration models.

Weights are resolved once per invocation by the caller and passed by value into
every scoring function. Each score's component weights are expected to sum to
100; the models do not enforce it (see ``nightbuzz.config.weight_totals``).
"""

from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .enums import Platform


# Hours (0-23) a crowd is expected, keyed by weekday with Monday = 0.
# Activity outside these hours is treated as a surprise by the buzz engine.
DEFAULT_EXPECTED_PEAK_HOURS: Dict[int, List[int]] = {
    0: [18, 19, 20],  # Monday
    1: [18, 19, 20],  # Tuesday
    2: [18, 19, 20, 21],  # Wednesday
    3: [20, 21, 22, 23],  # Thursday
    4: [21, 22, 23, 0, 1],  # Friday
    5: [21, 22, 23, 0, 1, 2],  # Saturday
    6: [21, 22, 23],  # Sunday
}


class TonightWeights(BaseModel):
    popularity: float = 30
    quality: float = 25
    open_now: float = 15
    deals: float = 15
    proximity: float = 10
    expert_boost: float = 5


class MonthlyWeights(BaseModel):
    quality: float = 40
    popularity: float = 30
    consistency: float = 15
    deals: float = 10
    expert_boost: float = 5


class BayesianWeights(BaseModel):
    m: float = Field(10, description="Votes needed before a rating is fully trusted")
    C: float = Field(3.8, description="Prior mean rating across all venues")


class ProximityWeights(BaseModel):
    max_boost_miles: float = 5
    decay_rate: float = 0.5


class RecencyWeights(BaseModel):
    tonight_half_life_hours: float = 6
    trending_half_life_days: float = 7


class SocialWeights(BaseModel):
    platform_weights: Dict[Platform, float] = Field(
        default_factory=lambda: {platform: 1.0 for platform in Platform}
    )
    viral_threshold: float = Field(80, description="Pulse at or above which a venue counts as viral")
    hourly_decay: float = 0.9
    min_weight: float = 0.1
    expected_peak_hours: Dict[int, List[int]] = Field(
        default_factory=lambda: {day: list(hours) for day, hours in DEFAULT_EXPECTED_PEAK_HOURS.items()}
    )

    def platform_weight(self, platform: Platform) -> float:
        return self.platform_weights.get(platform, 1.0)


class ScoringWeights(BaseModel):
    """Versioned weight configuration for every leaderboard."""

    version: int = 1
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None

    tonight: TonightWeights = Field(default_factory=TonightWeights)
    monthly: MonthlyWeights = Field(default_factory=MonthlyWeights)
    bayesian: BayesianWeights = Field(default_factory=BayesianWeights)
    proximity: ProximityWeights = Field(default_factory=ProximityWeights)
    recency: RecencyWeights = Field(default_factory=RecencyWeights)
    social: SocialWeights = Field(default_factory=SocialWeights)

    model_config = {"extra": "ignore"}
