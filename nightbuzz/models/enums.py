"""Enumeration types for Night Buzz."""

from enum import Enum


class Platform(str, Enum):
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    REEL = "reel"
    STORY = "story"
    TEXT = "text"


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class ActivityLevel(str, Enum):
    DEAD = "dead"
    SLOW = "slow"
    MODERATE = "moderate"
    BUSY = "busy"
    PACKED = "packed"
    EXPLODING = "exploding"


class HourlyTrend(str, Enum):
    EXPLODING = "exploding"
    RISING = "rising"
    HOT_STREAK = "hot_streak"
    COOLING = "cooling"
    CLIMBING = "climbing"
    TOP_OF_MONTH = "top_of_month"
    STEADY = "steady"
    FALLING = "falling"
    DEAD = "dead"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Direction(str, Enum):
    RISING = "rising"
    HOT_STREAK = "hot_streak"
    COOLING = "cooling"
    CLIMBING = "climbing"
    TOP_OF_MONTH = "top_of_month"
    STABLE = "stable"
    FALLING = "falling"


class LeaderboardType(str, Enum):
    TONIGHT = "tonight"
    MONTHLY = "monthly"
    TRENDING = "trending"


class BadgeType(str, Enum):
    EXPERT_PICK = "expert_pick"
    HOT_TONIGHT = "hot_tonight"
    MOST_IMPROVED = "most_improved"
    TRENDING_ON_SOCIAL = "trending_on_social"
    BEST_DEALS = "best_deals"
    RISING = "rising"
    HOT_STREAK = "hot_streak"
    COOLING = "cooling"
    CLIMBING = "climbing"
    TOP_OF_MONTH = "top_of_month"
