"""
Per-platform engagement normalization.

Connectors hand raw like/comment/share/view counts to these helpers to fill
``SocialMention.engagement_score`` on a shared 0-100 log scale. Each platform
values different actions, so each has its own weighting.
"""

import math
from typing import Optional

from nightbuzz.models import MediaType


def _log_scale(engagement: float, factor: float) -> float:
    return min(100.0, math.log10(max(engagement, 0.0) + 1) * factor)


def instagram_engagement(
    likes: int,
    comments: int,
    followers: int = 0,
    views: Optional[int] = None,
) -> float:
    """Comments count double; high like+comment rates relative to followers get a boost."""
    engagement = likes + comments * 2
    if views:
        engagement += views * 0.01

    if followers > 0:
        rate = (likes + comments) / followers
        if rate > 0.1:
            engagement *= 2
        elif rate > 0.05:
            engagement *= 1.5

    return _log_scale(engagement, 20)


def tiktok_engagement(views: int, likes: int, comments: int, shares: int) -> float:
    """Views are the baseline; shares weigh most."""
    engagement = views * 0.001 + likes * 0.5 + comments * 2 + shares * 5

    if views > 0:
        rate = (likes + comments + shares) / views
        if rate > 0.1:
            engagement *= 2.5
        elif rate > 0.05:
            engagement *= 1.5

    if views > 1_000_000:
        engagement *= 3
    elif views > 100_000:
        engagement *= 2
    elif views > 10_000:
        engagement *= 1.5

    return _log_scale(engagement, 15)


def twitter_engagement(
    likes: int,
    retweets: int,
    replies: int,
    quotes: int,
    followers: int = 0,
    verified: bool = False,
    views: Optional[int] = None,
) -> float:
    """Retweets and quotes drive reach, so they outweigh likes."""
    engagement = likes + retweets * 5 + quotes * 8 + replies * 3
    if views:
        engagement += views * 0.01

    if followers > 0:
        rate = (likes + retweets + replies + quotes) / followers
        if rate > 0.1:
            engagement *= 3
        elif rate > 0.05:
            engagement *= 2
        elif rate > 0.02:
            engagement *= 1.5

    if verified:
        engagement *= 1.5

    if followers > 100_000:
        engagement *= 2
    elif followers > 10_000:
        engagement *= 1.5

    return _log_scale(engagement, 18)


def twitter_media_type(attachment_type: Optional[str]) -> MediaType:
    if attachment_type == "photo":
        return MediaType.IMAGE
    if attachment_type in ("video", "gif"):
        return MediaType.VIDEO
    return MediaType.TEXT


def instagram_media_type(media_type: Optional[str]) -> MediaType:
    kind = (media_type or "").upper()
    if kind == "VIDEO":
        return MediaType.VIDEO
    if kind in ("REELS", "REEL"):
        return MediaType.REEL
    if kind == "STORY":
        return MediaType.STORY
    return MediaType.IMAGE
