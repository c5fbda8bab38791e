"""Small numeric and datetime helpers shared by the scorers."""

import math
from datetime import datetime, timezone
from typing import Dict, Tuple


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like a scoreboard does: 2.25 -> 2.3, -2.25 -> -2.2."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def cap_components(parts: Dict[str, float], trim_key: str, cap: float) -> Tuple[Dict[str, float], float]:
    """Round each component to one decimal and cap their sum.

    Overflow past ``cap`` is taken out of ``trim_key`` so the returned
    components add up to the returned total.
    """
    rounded = {name: round_half_up(value, 1) for name, value in parts.items()}
    overflow = round_half_up(sum(rounded.values()) - cap, 1)
    if overflow > 0:
        rounded[trim_key] = max(0.0, round_half_up(rounded[trim_key] - overflow, 1))
    total = min(round_half_up(sum(rounded.values()), 1), cap)
    return rounded, total


def as_aware(moment: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes are returned unchanged."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
