"""PodcastIndex request signing.

Each request carries ``X-Auth-Key``, ``X-Auth-Date`` (unix seconds) and
``Authorization = sha1(key + secret + date)`` as lowercase hex. The
timestamp must be fresh, so headers are rebuilt for every request.
"""

import hashlib
import time
from typing import Callable

USER_AGENT = "DashboardGateway/0.1"


def build_podcast_index_headers(
    api_key: str,
    api_secret: str,
    now: Callable[[], float] = time.time,
) -> dict[str, str]:
    timestamp = str(int(now()))
    # SHA-1 is the signature scheme PodcastIndex mandates, not a security primitive here.
    digest = hashlib.sha1(
        f"{api_key}{api_secret}{timestamp}".encode("utf-8"),
        usedforsecurity=False,
    ).hexdigest()
    return {
        "X-Auth-Key": api_key,
        "X-Auth-Date": timestamp,
        "Authorization": digest,
        "User-Agent": USER_AGENT,
    }
