"""
Tonight Score
=============
Real-time "what's hot tonight" score (0-100).

Components (default weights summing to 100):
- popularity (30): recent reviews, check-ins and mentions, decayed by signal age
  and optionally boosted by social buzz
- quality (25): Bayesian-adjusted rating
- open_now (15): currently open
- deals (15): active deals, saturating at three
- proximity (10): distance decay from the user
- expert_boost (5): curated expert multiplier
"""

import logging
from typing import List, Optional

from nightbuzz.models import (
    Confidence,
    RealTimeBuzz,
    ScoringWeights,
    SignalSummary,
    SocialBuzzBoost,
    TonightBreakdown,
    TonightScore,
)
from nightbuzz.social.buzz_engine import buzz_to_scoring_factor
from nightbuzz.utils import cap_components

from .bayesian import bayesian_rating
from .decay import proximity_bonus, recency_weight

logger = logging.getLogger(__name__)

MAX_SCORE = 100.0
MAX_RATING = 5.0
ACTIVITY_SATURATION = 20
DEALS_SATURATION = 3
MAX_BUZZ_BOOST = 0.5
EXPERT_BOOST_SCALE = 15


def expert_boost_points(multiplier: float, weight: float) -> float:
    """Points for a curated multiplier; a 1.15x pick earns the full weight."""
    return (multiplier - 1) * 100 * (weight / EXPERT_BOOST_SCALE)


def tonight_confidence(signals: SignalSummary) -> Confidence:
    if signals.rating_count > 50 and signals.recent_reviews > 2:
        return Confidence.HIGH
    if signals.rating_count > 10:
        return Confidence.MEDIUM
    return Confidence.LOW


def _sources(signals: SignalSummary, buzz: Optional[RealTimeBuzz]) -> List[str]:
    sources = list(dict.fromkeys(signals.sources))
    if buzz is not None:
        for platform, count in buzz.mentions_by_platform.items():
            if count > 0 and platform.value not in sources:
                sources.append(platform.value)
    return sources


def calculate_tonight_score(
    signals: SignalSummary,
    weights: ScoringWeights,
    expert_multiplier: float = 1.0,
    buzz: Optional[RealTimeBuzz] = None,
) -> TonightScore:
    """Score a venue for tonight.

    Args:
        signals: Fresh signal snapshot for the venue.
        weights: Weights resolved once by the caller for this run.
        expert_multiplier: Curated boost; callers pass 1.0 outside expert mode.
        buzz: Real-time social buzz, or None when there is no social data.
    """
    tonight = weights.tonight

    adjusted = bayesian_rating(signals.rating, signals.rating_count, weights.bayesian.m, weights.bayesian.C)
    quality = adjusted / MAX_RATING * tonight.quality

    activity = min(
        (signals.recent_reviews * 3 + signals.checkins * 2 + signals.mentions) / ACTIVITY_SATURATION,
        1.0,
    )
    freshness = recency_weight(signals.hours_since_last_signal, weights.recency.tonight_half_life_hours)
    popularity = activity * freshness * tonight.popularity

    social_buzz = None
    if buzz is not None:
        factor = buzz_to_scoring_factor(buzz)
        popularity = min(popularity * (1 + factor / 100 * MAX_BUZZ_BOOST), tonight.popularity)
        social_buzz = SocialBuzzBoost(
            buzz_score=factor,
            pulse=buzz.current_pulse,
            trend=buzz.hourly_trend,
            is_viral=buzz.is_viral,
            live_now=buzz.live_now,
        )

    open_now = tonight.open_now if signals.is_open else 0.0
    deals = min(signals.active_deals / DEALS_SATURATION, 1.0) * tonight.deals
    proximity = proximity_bonus(
        signals.distance_miles, weights.proximity.max_boost_miles, weights.proximity.decay_rate
    ) * tonight.proximity
    expert = expert_boost_points(expert_multiplier, tonight.expert_boost)

    # Overflow past the cap comes out of the expert boost
    components, total = cap_components(
        {
            "quality": quality,
            "popularity": popularity,
            "open_now": open_now,
            "deals": deals,
            "proximity": proximity,
            "expert_boost": expert,
        },
        "expert_boost",
        MAX_SCORE,
    )

    return TonightScore(
        total=total,
        breakdown=TonightBreakdown(**components),
        confidence=tonight_confidence(signals),
        signals=signals,
        sources=_sources(signals, buzz),
        social_buzz=social_buzz,
    )
