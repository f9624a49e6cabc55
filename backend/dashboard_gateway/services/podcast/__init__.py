"""Podcast directory data from PodcastIndex."""

from .auth import build_podcast_index_headers
from .normalize import (
    normalize_categories,
    normalize_episodes_response,
    normalize_feed,
    normalize_feed_categories,
    normalize_feeds_response,
)
from .service import PodcastIndexClient

__all__ = [
    "PodcastIndexClient",
    "build_podcast_index_headers",
    "normalize_categories",
    "normalize_episodes_response",
    "normalize_feed",
    "normalize_feed_categories",
    "normalize_feeds_response",
]
