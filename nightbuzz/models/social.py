"""Social mention and buzz models."""

from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from nightbuzz.utils import as_aware

from .enums import ActivityLevel, HourlyTrend, MediaType, Platform, SentimentLabel


class SocialMention(BaseModel):
    """A normalized post about a venue, produced by a platform connector."""

    id: Optional[str] = None
    platform: Platform
    posted_at: datetime
    engagement_score: float = Field(0.0, description="Per-platform engagement (0-100)")
    author_followers: int = 0
    is_live: bool = False
    location_tagged: bool = False
    media_type: MediaType = MediaType.TEXT

    post_url: Optional[str] = None
    author_username: Optional[str] = None
    content: str = ""
    hashtags: List[str] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    @field_validator("author_followers", mode="before")
    @classmethod
    def coerce_int(cls, v):
        return int(v) if v is not None else 0

    @field_validator("engagement_score", mode="before")
    @classmethod
    def coerce_float(cls, v):
        return float(v) if v is not None else 0.0

    @field_validator("posted_at", mode="before")
    @classmethod
    def parse_datetime(cls, v):
        if isinstance(v, str):
            v = datetime.fromisoformat(v.replace("Z", "+00:00"))
        # Connectors that drop the offset report UTC
        return as_aware(v) if isinstance(v, datetime) else v

    @field_validator("content", mode="before")
    @classmethod
    def coerce_str(cls, v):
        return v if v is not None else ""


class SentimentResult(BaseModel):
    """Keyword-based sentiment of a piece of text."""
    score: float = Field(0.0, ge=-1.0, le=1.0, description="-1 to 1 sentiment")
    label: SentimentLabel = SentimentLabel.NEUTRAL
    confidence: float = 1.0
    keywords: List[str] = Field(default_factory=list)


class ActivityResult(BaseModel):
    """How busy a venue sounds in a piece of text."""
    level: ActivityLevel
    score: float = Field(..., description="Activity score (0-100)")
    indicators: List[str] = Field(default_factory=list)


class TopPost(BaseModel):
    platform: Platform
    post_url: Optional[str] = None
    engagement: float
    content: str = ""


class RealTimeBuzz(BaseModel):
    """Snapshot of a venue's social pulse, derived fresh from the mention stream."""

    venue_id: str
    current_pulse: float = Field(0.0, description="Real-time buzz score (0-100)")
    hourly_trend: HourlyTrend = HourlyTrend.DEAD
    trend_percent: float = 0.0
    peak_hour: int = Field(21, ge=0, le=23)
    total_mentions_today: int = 0
    total_mentions_hour: int = 0
    mentions_by_platform: Dict[Platform, int] = Field(default_factory=dict)
    active_platforms: List[Platform] = Field(default_factory=list)
    top_post: Optional[TopPost] = None
    live_now: bool = False
    is_viral: bool = False
    last_updated: datetime

    model_config = {"frozen": True}


class WindowStats(BaseModel):
    mentions: int = 0
    engagement: float = 0.0
    sentiment: float = 0.0
    platforms: Dict[Platform, int] = Field(default_factory=dict)


class WeeklyStats(BaseModel):
    mentions: int = 0
    engagement: float = 0.0
    avg_daily_mentions: float = 0.0
    trend: str = "stable"
    trend_percentage: float = 0.0


class HashtagCount(BaseModel):
    tag: str
    count: int


class VenueSocialStats(BaseModel):
    """Aggregated social stats for a venue over hour, day and week windows."""

    venue_id: str
    last_hour: WindowStats
    last_24_hours: WindowStats
    peak_hour: int = 21
    last_7_days: WeeklyStats
    top_hashtags: List[HashtagCount] = Field(default_factory=list)
    influencer_mentions: int = 0
    viral_posts: int = 0
    buzz_score: float = 0.0


class HourlyActivityPulse(BaseModel):
    """Per-hour activity record for a venue, for the calling job to store."""

    id: str
    venue_id: str
    hour: datetime
    platform: Optional[Platform] = Field(None, description="None means all platforms")
    mention_count: int = 0
    total_engagement: float = 0.0
    avg_sentiment: float = 0.0
    viral_posts: int = 0
    live_streams_count: int = 0
    unique_posters: int = 0
    top_hashtags: List[str] = Field(default_factory=list)
    peak_activity_minute: int = 0
    pulse_score: float = 0.0
