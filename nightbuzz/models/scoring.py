"""Scoring models for venue leaderboards."""

from typing import List, Optional
from pydantic import BaseModel, Field

from .enums import Confidence, Direction, HourlyTrend


class SignalSummary(BaseModel):
    """Per-venue signal snapshot, created fresh for every scoring call.

    Values are taken as given; negative counts or ratings above 5 are not
    clamped here or in the scorers.
    """

    rating: float = 0.0
    rating_count: int = 0
    recent_reviews: int = 0
    checkins: int = 0
    mentions: int = 0
    is_open: bool = False
    active_deals: int = 0
    distance_miles: float = 0.0
    hours_since_last_signal: float = Field(24.0, description="Age of the freshest hourly signal")
    sources: List[str] = Field(default_factory=list, description="Connectors that supplied data")

    model_config = {"extra": "ignore"}


class MonthlyInput(BaseModel):
    """Month-level review aggregates for one venue."""
    avg_rating: float = 0.0
    total_reviews: int = 0
    new_reviews_this_month: int = 0
    previous_month_reviews: int = 0
    rating_std_dev: float = 0.0
    deals_quality: float = Field(0.0, description="Deal quality fraction (0-1)")

    model_config = {"extra": "ignore"}


class WeekOverWeek(BaseModel):
    rating_delta: float = 0.0
    reviews_delta: float = 0.0


class TrendingInput(BaseModel):
    """Current and previous period standings for one venue."""
    current_rank: int
    previous_rank: int
    current_score: float
    previous_score: float
    week_over_week: WeekOverWeek = Field(default_factory=WeekOverWeek)

    model_config = {"extra": "ignore"}


class SocialBuzzBoost(BaseModel):
    """Social buzz that fed into a tonight score."""
    buzz_score: float = Field(..., description="Scoring factor derived from the pulse (0-100)")
    pulse: float = 0.0
    trend: HourlyTrend = HourlyTrend.STEADY
    is_viral: bool = False
    live_now: bool = False

    model_config = {"frozen": True}


class TonightBreakdown(BaseModel):
    quality: float = 0.0
    popularity: float = 0.0
    open_now: float = 0.0
    deals: float = 0.0
    proximity: float = 0.0
    expert_boost: float = 0.0

    model_config = {"frozen": True}


class TonightScore(BaseModel):
    """Real-time "hot tonight" score for a venue."""
    total: float = Field(..., description="Overall score (0-100)")
    breakdown: TonightBreakdown
    confidence: Confidence
    signals: SignalSummary
    sources: List[str] = Field(default_factory=list)
    social_buzz: Optional[SocialBuzzBoost] = None

    model_config = {"frozen": True}


class MonthlyBreakdown(BaseModel):
    quality: float = 0.0
    popularity: float = 0.0
    consistency: float = 0.0
    deals: float = 0.0
    expert_boost: float = 0.0

    model_config = {"frozen": True}


class MonthlyScore(BaseModel):
    """Monthly power score. Rank fields are filled in by the leaderboard."""
    power_score: float = Field(..., description="Power score (0-100)")
    breakdown: MonthlyBreakdown
    power_rank: Optional[int] = None
    previous_rank: Optional[int] = None
    rank_delta: Optional[int] = None

    model_config = {"frozen": True}


class WeekOverWeekDelta(BaseModel):
    rating_delta: float = 0.0
    reviews_delta: float = 0.0
    score_delta: float = 0.0


class MonthOverMonthDelta(BaseModel):
    rank_delta: int = 0
    score_delta: float = 0.0


class TrendingScore(BaseModel):
    """Momentum of a venue between two periods."""
    momentum: float = Field(..., description="Momentum (-100 to 100)")
    direction: Direction
    week_over_week: WeekOverWeekDelta
    month_over_month: MonthOverMonthDelta
    trending_rank: Optional[int] = None

    model_config = {"frozen": True}
