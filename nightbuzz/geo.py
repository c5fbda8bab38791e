"""Geographic helpers for distance-based scoring."""

import math
from typing import Dict, Iterable, List

from nightbuzz.models import Venue
from nightbuzz.utils import round_half_up

EARTH_RADIUS_MILES = 3959
MILES_PER_DEGREE_LAT = 69


def calculate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Haversine distance in miles, rounded to two decimals."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round_half_up(EARTH_RADIUS_MILES * c, 2)


def bounding_box(lat: float, lng: float, radius_miles: float) -> Dict[str, float]:
    """Approximate lat/lng box around a point, for coarse pre-filtering."""
    lat_delta = radius_miles / MILES_PER_DEGREE_LAT
    lng_delta = radius_miles / (MILES_PER_DEGREE_LAT * math.cos(math.radians(lat)))
    return {
        "north": lat + lat_delta,
        "south": lat - lat_delta,
        "east": lng + lng_delta,
        "west": lng - lng_delta,
    }


def within_radius(venues: Iterable[Venue], lat: float, lng: float, radius_miles: float) -> List[Venue]:
    return [
        venue for venue in venues
        if calculate_distance(lat, lng, venue.latitude, venue.longitude) <= radius_miles
    ]
