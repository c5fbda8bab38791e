"""Time and distance decay curves."""

import math

FULL_BOOST_MILES = 0.5


def recency_weight(hours_ago: float, half_life_hours: float) -> float:
    """Exponential half-life decay: 1.0 now, 0.5 after one half-life."""
    return 0.5 ** (hours_ago / half_life_hours)


def proximity_bonus(distance_miles: float, max_boost_miles: float, decay_rate: float) -> float:
    """0-1 multiplier: 0 beyond twice the boost radius, 1 within half a mile."""
    if distance_miles >= max_boost_miles * 2:
        return 0.0
    if distance_miles <= FULL_BOOST_MILES:
        return 1.0
    return math.exp(-decay_rate * (distance_miles / max_boost_miles))
