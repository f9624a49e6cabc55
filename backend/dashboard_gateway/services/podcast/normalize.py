"""PodcastIndex payloads to canonical podcast models.

PodcastIndex sends ``categories`` as an object keyed by category id
(``{"55": "News", "59": "Politics"}``). Clients want one display string,
so it is flattened to ``"News, Politics"`` in insertion order.
"""

from typing import Any, Optional

from dashboard_gateway.models import (
    PodcastEpisode,
    PodcastEpisodesResponse,
    PodcastFeed,
    PodcastSearchResponse,
)


def normalize_categories(categories: Any) -> Optional[str]:
    if not categories:
        return None
    if isinstance(categories, dict):
        return ", ".join(str(value) for value in categories.values())
    return str(categories)


def normalize_feed_categories(data: Any) -> Any:
    """Rewrite ``categories`` in place on a raw search/trending/feed response.

    Used by the REST proxy, which otherwise returns provider JSON verbatim.
    """
    if not isinstance(data, dict):
        return data
    for feed in data.get("feeds") or []:
        if isinstance(feed, dict) and "categories" in feed:
            feed["categories"] = normalize_categories(feed["categories"])
    feed = data.get("feed")
    if isinstance(feed, dict) and "categories" in feed:
        feed["categories"] = normalize_categories(feed["categories"])
    return data


def normalize_feed(feed: dict) -> PodcastFeed:
    return PodcastFeed(
        id=str(feed.get("id") or ""),
        title=feed.get("title") or "",
        author=feed.get("author") or None,
        artwork=feed.get("artwork") or feed.get("image") or None,
        description=feed.get("description") or None,
        categories=normalize_categories(feed.get("categories")),
        episodeCount=feed.get("episodeCount"),
        language=feed.get("language") or None,
    )


def normalize_feeds_response(data: Any) -> PodcastSearchResponse:
    data = data or {}
    return PodcastSearchResponse(
        feeds=[normalize_feed(feed) for feed in data.get("feeds") or []],
        count=data.get("count") or 0,
    )


def normalize_episode(item: dict) -> PodcastEpisode:
    feed_id = item.get("feedId")
    return PodcastEpisode(
        id=str(item.get("id") or ""),
        title=item.get("title") or "",
        description=item.get("description") or None,
        datePublished=item.get("datePublished"),
        duration=item.get("duration"),
        enclosureUrl=item.get("enclosureUrl") or None,
        image=item.get("image") or item.get("feedImage") or None,
        feedId=str(feed_id) if feed_id is not None else None,
    )


def normalize_episodes_response(data: Any) -> PodcastEpisodesResponse:
    data = data or {}
    items = [normalize_episode(item) for item in data.get("items") or []]
    return PodcastEpisodesResponse(items=items, count=data.get("count") or len(items))
