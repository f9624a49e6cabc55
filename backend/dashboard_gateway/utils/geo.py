"""Coordinate helpers shared by cache keys and weather subscriptions."""

import math

# Publications within this distance (degrees) belong to the same subscriber.
PROXIMITY_TOLERANCE = 0.01


def format_coord(value: float) -> str:
    """Two-decimal coordinate string used in cache and subscription keys."""
    return f"{value:.2f}"


def location_key(lat: float, lon: float) -> str:
    return f"{format_coord(lat)},{format_coord(lon)}"


def is_nearby(
    lat: float,
    lon: float,
    other_lat: float,
    other_lon: float,
    tolerance: float = PROXIMITY_TOLERANCE,
) -> bool:
    return abs(lat - other_lat) < tolerance and abs(lon - other_lon) < tolerance


def round_half_up(value: float) -> int:
    """Round halves toward positive infinity (22.5 -> 23, -2.5 -> -2).

    Python's ``round`` uses banker's rounding, which would show 22 for 22.5.
    """
    return math.floor(value + 0.5)
