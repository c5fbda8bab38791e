"""
Night Buzz Data Models
======================
Pydantic models for scoring inputs, weights and leaderboard outputs.
"""

from .enums import (
    ActivityLevel,
    BadgeType,
    Confidence,
    Direction,
    HourlyTrend,
    LeaderboardType,
    MediaType,
    Platform,
    SentimentLabel,
)
from .venue import Venue
from .weights import DEFAULT_EXPECTED_PEAK_HOURS, ScoringWeights, SocialWeights
from .social import (
    ActivityResult,
    HourlyActivityPulse,
    RealTimeBuzz,
    SentimentResult,
    SocialMention,
    TopPost,
    VenueSocialStats,
)
from .scoring import (
    MonthlyBreakdown,
    MonthlyInput,
    MonthlyScore,
    SignalSummary,
    SocialBuzzBoost,
    TonightBreakdown,
    TonightScore,
    TrendingInput,
    TrendingScore,
    WeekOverWeek,
)
from .leaderboard import Badge, LeaderboardEntry, LeaderboardMeta, LeaderboardResponse, Period

__all__ = [
    # Enums
    "ActivityLevel",
    "BadgeType",
    "Confidence",
    "Direction",
    "HourlyTrend",
    "LeaderboardType",
    "MediaType",
    "Platform",
    "SentimentLabel",
    # Identity & config
    "Venue",
    "ScoringWeights",
    "SocialWeights",
    "DEFAULT_EXPECTED_PEAK_HOURS",
    # Social
    "ActivityResult",
    "HourlyActivityPulse",
    "RealTimeBuzz",
    "SentimentResult",
    "SocialMention",
    "TopPost",
    "VenueSocialStats",
    # Scoring
    "MonthlyBreakdown",
    "MonthlyInput",
    "MonthlyScore",
    "SignalSummary",
    "SocialBuzzBoost",
    "TonightBreakdown",
    "TonightScore",
    "TrendingInput",
    "TrendingScore",
    "WeekOverWeek",
    # Leaderboard
    "Badge",
    "LeaderboardEntry",
    "LeaderboardMeta",
    "LeaderboardResponse",
    "Period",
]
