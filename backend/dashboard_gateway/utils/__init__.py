"""Utility helpers: TTL cache and coordinate math."""

from .cache import TTLCache
from .geo import is_nearby, location_key, round_half_up

__all__ = ["TTLCache", "is_nearby", "location_key", "round_half_up"]
