"""Normalized PodcastIndex models."""

from typing import Optional

from pydantic import BaseModel, Field


class PodcastFeed(BaseModel):
    id: str
    title: str
    author: Optional[str] = None
    artwork: Optional[str] = None
    description: Optional[str] = None
    categories: Optional[str] = Field(None, description='Display string, e.g. "News, Tech"')
    episodeCount: Optional[int] = None
    language: Optional[str] = None


class PodcastEpisode(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    datePublished: Optional[int] = None
    duration: Optional[int] = None
    enclosureUrl: Optional[str] = None
    image: Optional[str] = None
    feedId: Optional[str] = None


class PodcastSearchResponse(BaseModel):
    """Search and trending results share this shape."""

    feeds: list[PodcastFeed] = Field(default_factory=list)
    count: int = 0


class PodcastEpisodesResponse(BaseModel):
    items: list[PodcastEpisode] = Field(default_factory=list)
    count: int = 0
