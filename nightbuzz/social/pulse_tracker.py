"""
Hourly Pulse Tracker
====================
Hourly activity records, "surprisingly busy" call-outs, heat maps and simple
predictions built on top of the buzz engine.
"""

from collections import Counter, defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from nightbuzz.models import (
    ActivityLevel,
    HourlyActivityPulse,
    Platform,
    SocialMention,
    SocialWeights,
)
from nightbuzz.utils import round_half_up

from .buzz_engine import average_sentiment, calculate_pulse_score, top_hashtags
from .constants import ACTIVITY_BREAKPOINTS, VIRAL_POST_ENGAGEMENT

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
WEEKEND_DAYS = {4, 5}  # Friday and Saturday nights

HOURLY_HASHTAGS_LIMIT = 5


class UnexpectedActivity(BaseModel):
    is_unexpected: bool = False
    message: str = ""


class HeatMapCell(BaseModel):
    hour: int
    avg_pulse: float
    peak_day: int


class ActivityPrediction(BaseModel):
    predicted_pulse: float
    confidence: float
    based_on: int


def activity_level_for_pulse(pulse: float) -> ActivityLevel:
    for lower_bound, level in ACTIVITY_BREAKPOINTS:
        if pulse >= lower_bound:
            return ActivityLevel(level)
    return ActivityLevel.DEAD


def format_hour(hour: int) -> str:
    if hour == 0:
        return "12 AM"
    if hour == 12:
        return "12 PM"
    if hour < 12:
        return f"{hour} AM"
    return f"{hour - 12} PM"


def detect_unexpected_activity(
    pulse: float,
    hour: int,
    weekday: int,
    settings: Optional[SocialWeights] = None,
) -> UnexpectedActivity:
    """Flag activity that doesn't match the usual rhythm of the week."""
    settings = settings or SocialWeights()
    is_weekend = weekday in WEEKEND_DAYS
    is_expected_peak = hour in settings.expected_peak_hours.get(weekday, [])
    is_late_night = 0 <= hour <= 4
    day = DAY_NAMES[weekday]

    if pulse >= 50:
        if not is_weekend and is_late_night:
            if hour >= 2:
                message = f"Still going strong at {format_hour(hour)} on a {day}!"
            else:
                message = f"Surprisingly active for {format_hour(hour)} on a {day}"
            return UnexpectedActivity(is_unexpected=True, message=message)

        if not is_expected_peak and pulse >= 60:
            return UnexpectedActivity(
                is_unexpected=True,
                message=f"Unexpectedly buzzing at {format_hour(hour)}",
            )

    if pulse < 30 and is_expected_peak and is_weekend:
        return UnexpectedActivity(is_unexpected=True, message=f"Quieter than usual for {day} night")

    return UnexpectedActivity()


def _peak_minute(mentions: List[SocialMention]) -> int:
    counts = Counter(m.posted_at.minute for m in mentions)
    if not counts:
        return 0
    return min(counts, key=lambda minute: (-counts[minute], minute))


def generate_hourly_pulse(
    venue_id: str,
    mentions: List[SocialMention],
    now: datetime,
    platform: Optional[Platform] = None,
    settings: Optional[SocialWeights] = None,
) -> HourlyActivityPulse:
    """Summarize one hour of mentions for storage. ``platform=None`` means all."""
    settings = settings or SocialWeights()
    hour = now.replace(minute=0, second=0, microsecond=0)
    selected = [m for m in mentions if platform is None or m.platform == platform]
    platform_key = platform.value if platform else "all"

    return HourlyActivityPulse(
        id=f"{venue_id}_{hour.isoformat()}_{platform_key}",
        venue_id=venue_id,
        hour=hour,
        platform=platform,
        mention_count=len(selected),
        total_engagement=sum(m.engagement_score for m in selected),
        avg_sentiment=average_sentiment(selected),
        viral_posts=sum(1 for m in selected if m.engagement_score >= VIRAL_POST_ENGAGEMENT),
        live_streams_count=sum(1 for m in selected if m.is_live),
        unique_posters=len({m.author_username for m in selected}),
        top_hashtags=[h.tag for h in top_hashtags(selected, HOURLY_HASHTAGS_LIMIT)],
        peak_activity_minute=_peak_minute(selected),
        pulse_score=calculate_pulse_score(selected, now, settings),
    )


def calculate_heat_map(pulses: List[HourlyActivityPulse]) -> List[HeatMapCell]:
    """Average pulse per hour of day, with the weekday that peaked hardest."""
    totals: Dict[int, List[float]] = defaultdict(list)
    peaks: Dict[int, Tuple[float, int]] = {}

    for pulse in pulses:
        hour = pulse.hour.hour
        totals[hour].append(pulse.pulse_score)
        if pulse.pulse_score > peaks.get(hour, (0.0, 0))[0]:
            peaks[hour] = (pulse.pulse_score, pulse.hour.weekday())

    cells = []
    for hour in range(24):
        scores = totals.get(hour, [])
        avg = round_half_up(sum(scores) / len(scores), 0) if scores else 0.0
        cells.append(HeatMapCell(hour=hour, avg_pulse=avg, peak_day=peaks.get(hour, (0.0, 0))[1]))
    return cells


def predict_activity(
    history: List[HourlyActivityPulse],
    weekday: int,
    hour: int,
    settings: Optional[SocialWeights] = None,
) -> ActivityPrediction:
    """Predict the pulse for a weekday/hour from past pulses at the same slot."""
    settings = settings or SocialWeights()
    relevant = [p for p in history if p.hour.weekday() == weekday and p.hour.hour == hour]

    if not relevant:
        predicted = 40.0
        if weekday in WEEKEND_DAYS:
            predicted += 20
        if hour in settings.expected_peak_hours.get(weekday, []):
            predicted += 15
        return ActivityPrediction(predicted_pulse=predicted, confidence=0.3, based_on=0)

    avg = sum(p.pulse_score for p in relevant) / len(relevant)
    return ActivityPrediction(
        predicted_pulse=round_half_up(avg, 0),
        confidence=min(0.95, 0.5 + len(relevant) * 0.05),
        based_on=len(relevant),
    )
