"""
Social Buzz Engine
==================
Aggregates social mentions across Instagram, TikTok and Twitter/X into a
real-time pulse for a venue: what is popping RIGHT NOW.

Everything here is a pure function of (mentions, now, settings). Buzz is
recomputed from the mention window on every call and never cached.
"""

import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from nightbuzz.models import (
    HourlyTrend,
    MediaType,
    Platform,
    RealTimeBuzz,
    SocialMention,
    SocialWeights,
    TopPost,
    VenueSocialStats,
)
from nightbuzz.models.social import HashtagCount, WeeklyStats, WindowStats
from nightbuzz.utils import as_aware, round_half_up

from .constants import (
    DEFAULT_PEAK_HOUR,
    EARLY_WEEK_DAYS,
    EXPLODING_THRESHOLD,
    FALLING_THRESHOLD,
    INFLUENCER_TIERS,
    LATE_NIGHT_HOURS,
    LATE_NIGHT_MULTIPLIER,
    LIVE_BONUS,
    LIVE_MULTIPLIER,
    LOCATION_TAG_MULTIPLIER,
    OFF_PEAK_EARLY_WEEK_MULTIPLIER,
    OFF_PEAK_MULTIPLIER,
    PULSE_NORMALIZER,
    RISING_THRESHOLD,
    TIME_WINDOWS,
    TREND_FACTOR_MULTIPLIERS,
    VIDEO_MULTIPLIER,
    VIRAL_POST_ENGAGEMENT,
)
from .sentiment import analyze_sentiment

logger = logging.getLogger(__name__)

TOP_POST_PREVIEW_CHARS = 100
TOP_HASHTAGS_LIMIT = 10
WEEKLY_TREND_BAND = 10


# ============================================================================
# Per-mention weighting
# ============================================================================

def influencer_multiplier(followers: int) -> float:
    for min_followers, _tier, multiplier in INFLUENCER_TIERS:
        if followers >= min_followers:
            return multiplier
    return 1.0


def influencer_tier(followers: int) -> Optional[str]:
    for min_followers, tier, _multiplier in INFLUENCER_TIERS:
        if followers >= min_followers:
            return tier
    return None


def _age_minutes(mention: SocialMention, now: datetime) -> float:
    # Clock skew can put posts slightly in the future; treat them as brand new
    return max(0.0, (now - mention.posted_at).total_seconds() / 60)


def freshness_multiplier(age_minutes: float, settings: SocialWeights) -> float:
    return max(settings.min_weight, settings.hourly_decay ** (age_minutes / 60))


def mention_score(mention: SocialMention, now: datetime, settings: SocialWeights) -> float:
    """Engagement x freshness x influencer x content multipliers x platform weight."""
    score = mention.engagement_score
    score *= freshness_multiplier(_age_minutes(mention, now), settings)
    score *= influencer_multiplier(mention.author_followers)

    if mention.media_type in (MediaType.VIDEO, MediaType.REEL):
        score *= VIDEO_MULTIPLIER
    if mention.location_tagged:
        score *= LOCATION_TAG_MULTIPLIER
    if mention.is_live:
        score *= LIVE_MULTIPLIER

    return score * settings.platform_weight(mention.platform)


# ============================================================================
# Windows
# ============================================================================

def _local(moment: datetime, now: datetime) -> datetime:
    if moment.tzinfo is not None and now.tzinfo is not None:
        return moment.astimezone(now.tzinfo)
    return moment


def mentions_within(
    mentions: Iterable[SocialMention], now: datetime, window: timedelta
) -> List[SocialMention]:
    cutoff = now - window
    return [m for m in mentions if m.posted_at >= cutoff]


def partition_mentions(
    mentions: Iterable[SocialMention], now: datetime
) -> Tuple[List[SocialMention], List[SocialMention]]:
    """Split into (last hour, last 24 hours). Anything older is dropped."""
    last_24h = mentions_within(mentions, now, TIME_WINDOWS["daily"])
    last_hour = mentions_within(last_24h, now, TIME_WINDOWS["hourly"])
    return last_hour, last_24h


# ============================================================================
# Pulse
# ============================================================================

def is_expected_peak(now: datetime, settings: SocialWeights) -> bool:
    return now.hour in settings.expected_peak_hours.get(now.weekday(), [])


def surprise_multiplier(now: datetime, settings: SocialWeights) -> float:
    """Off-peak activity is more notable: 1:15 AM on a Tuesday is a big deal."""
    multiplier = 1.0
    if not is_expected_peak(now, settings):
        if now.weekday() in EARLY_WEEK_DAYS:
            multiplier *= OFF_PEAK_EARLY_WEEK_MULTIPLIER
        else:
            multiplier *= OFF_PEAK_MULTIPLIER
    if now.hour in LATE_NIGHT_HOURS:
        multiplier *= LATE_NIGHT_MULTIPLIER
    return multiplier


def calculate_pulse_score(
    mentions: List[SocialMention], now: datetime, settings: SocialWeights
) -> float:
    """Pulse (0-100) of an already-windowed set of mentions."""
    if not mentions:
        return 0.0

    raw = sum(mention_score(m, now, settings) for m in mentions)
    raw *= surprise_multiplier(now, settings)
    return round_half_up(min(100.0, raw / PULSE_NORMALIZER), 1)


# ============================================================================
# Trend
# ============================================================================

def _percent_change(current: float, average: float) -> float:
    if average > 0:
        return (current - average) / average * 100
    return 100.0 if current > 0 else 0.0


def classify_hourly_trend(
    hour_count: int,
    hour_engagement: float,
    avg_hourly_count: float,
    avg_hourly_engagement: float,
) -> Tuple[HourlyTrend, float]:
    """Compare the last hour against the 24h hourly average.

    Returns the trend label and the blended percent change
    (40% mention count, 60% engagement).
    """
    if hour_count == 0 and avg_hourly_count == 0:
        return HourlyTrend.DEAD, 0.0

    count_change = _percent_change(hour_count, avg_hourly_count)
    engagement_change = _percent_change(hour_engagement, avg_hourly_engagement)
    percent = count_change * 0.4 + engagement_change * 0.6

    if percent >= EXPLODING_THRESHOLD:
        trend = HourlyTrend.EXPLODING
    elif percent >= RISING_THRESHOLD:
        trend = HourlyTrend.RISING
    elif percent <= FALLING_THRESHOLD:
        trend = HourlyTrend.FALLING
    else:
        trend = HourlyTrend.STEADY
    return trend, percent


def determine_hourly_trend(
    last_hour: List[SocialMention], last_24h: List[SocialMention]
) -> Tuple[HourlyTrend, float]:
    hours_in_day = TIME_WINDOWS["daily"] / TIME_WINDOWS["hourly"]
    return classify_hourly_trend(
        len(last_hour),
        sum(m.engagement_score for m in last_hour),
        len(last_24h) / hours_in_day,
        sum(m.engagement_score for m in last_24h) / hours_in_day,
    )


# ============================================================================
# Summaries
# ============================================================================

def find_peak_hour(mentions: List[SocialMention], now: datetime) -> int:
    """Busiest hour of day; ties go to the earliest hour."""
    counts = Counter(_local(m.posted_at, now).hour for m in mentions)
    if not counts:
        return DEFAULT_PEAK_HOUR
    return min(counts, key=lambda hour: (-counts[hour], hour))


def find_top_post(mentions: List[SocialMention]) -> Optional[TopPost]:
    if not mentions:
        return None

    top = max(mentions, key=lambda m: m.engagement_score)
    content = top.content[:TOP_POST_PREVIEW_CHARS]
    if len(top.content) > TOP_POST_PREVIEW_CHARS:
        content += "..."
    return TopPost(
        platform=top.platform,
        post_url=top.post_url,
        engagement=top.engagement_score,
        content=content,
    )


def platform_counts(mentions: Iterable[SocialMention]) -> Dict[Platform, int]:
    counts = Counter(m.platform for m in mentions)
    return {platform: counts.get(platform, 0) for platform in Platform}


def active_platforms(mentions: Iterable[SocialMention]) -> List[Platform]:
    seen = {m.platform for m in mentions}
    return [platform for platform in Platform if platform in seen]


def calculate_real_time_buzz(
    venue_id: str,
    mentions: List[SocialMention],
    now: datetime,
    settings: Optional[SocialWeights] = None,
) -> RealTimeBuzz:
    """Derive a venue's current buzz from its recent mentions."""
    now = as_aware(now)
    settings = settings or SocialWeights()
    last_hour, last_24h = partition_mentions(mentions, now)

    pulse = calculate_pulse_score(last_hour, now, settings)
    trend, percent = determine_hourly_trend(last_hour, last_24h)

    logger.debug(
        "Buzz for %s: %d mentions/hour, pulse %.1f, trend %s",
        venue_id, len(last_hour), pulse, trend.value,
    )

    return RealTimeBuzz(
        venue_id=venue_id,
        current_pulse=pulse,
        hourly_trend=trend,
        trend_percent=round_half_up(percent, 1),
        peak_hour=find_peak_hour(last_24h, now),
        total_mentions_today=len(last_24h),
        total_mentions_hour=len(last_hour),
        mentions_by_platform=platform_counts(last_24h),
        active_platforms=active_platforms(last_hour),
        top_post=find_top_post(last_24h),
        live_now=any(m.is_live for m in last_hour),
        is_viral=pulse >= settings.viral_threshold,
        last_updated=now,
    )


def buzz_to_scoring_factor(buzz: RealTimeBuzz) -> int:
    """Collapse a buzz snapshot into a 0-100 factor for the tonight scorer."""
    score = buzz.current_pulse * TREND_FACTOR_MULTIPLIERS.get(buzz.hourly_trend.value, 1.0)

    if buzz.live_now:
        score += LIVE_BONUS

    platforms = len(buzz.active_platforms)
    if platforms >= 3:
        score *= 1.2
    elif platforms >= 2:
        score *= 1.1

    return int(min(100, round_half_up(score, 0)))


# ============================================================================
# Venue social stats
# ============================================================================

def average_sentiment(mentions: List[SocialMention]) -> float:
    if not mentions:
        return 0.0
    return sum(analyze_sentiment(m.content).score for m in mentions) / len(mentions)


def top_hashtags(mentions: Iterable[SocialMention], limit: int = TOP_HASHTAGS_LIMIT) -> List[HashtagCount]:
    counts = Counter(tag for m in mentions for tag in m.hashtags)
    return [HashtagCount(tag=tag, count=count) for tag, count in counts.most_common(limit)]


def _window_stats(mentions: List[SocialMention]) -> WindowStats:
    return WindowStats(
        mentions=len(mentions),
        engagement=sum(m.engagement_score for m in mentions),
        sentiment=average_sentiment(mentions),
        platforms=platform_counts(mentions),
    )


def calculate_venue_social_stats(
    venue_id: str,
    mentions: List[SocialMention],
    now: datetime,
    settings: Optional[SocialWeights] = None,
) -> VenueSocialStats:
    """Hour, day and week tallies for a venue, with week-over-week trend."""
    now = as_aware(now)
    settings = settings or SocialWeights()
    week = TIME_WINDOWS["weekly"]

    last_hour, last_24h = partition_mentions(mentions, now)
    last_7d = mentions_within(mentions, now, week)
    previous_week = [m for m in mentions if now - 2 * week <= m.posted_at < now - week]

    trend_percentage = _percent_change(len(last_7d), len(previous_week))
    if trend_percentage > WEEKLY_TREND_BAND:
        weekly_trend = "up"
    elif trend_percentage < -WEEKLY_TREND_BAND:
        weekly_trend = "down"
    else:
        weekly_trend = "stable"

    buzz = calculate_real_time_buzz(venue_id, mentions, now, settings)

    return VenueSocialStats(
        venue_id=venue_id,
        last_hour=_window_stats(last_hour),
        last_24_hours=_window_stats(last_24h),
        peak_hour=buzz.peak_hour,
        last_7_days=WeeklyStats(
            mentions=len(last_7d),
            engagement=sum(m.engagement_score for m in last_7d),
            avg_daily_mentions=len(last_7d) / 7,
            trend=weekly_trend,
            trend_percentage=trend_percentage,
        ),
        top_hashtags=top_hashtags(last_7d),
        influencer_mentions=sum(1 for m in last_7d if influencer_tier(m.author_followers)),
        viral_posts=sum(1 for m in last_7d if m.engagement_score >= VIRAL_POST_ENGAGEMENT),
        buzz_score=buzz.current_pulse,
    )
