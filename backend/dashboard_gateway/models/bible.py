"""Normalized YouVersion models."""

from typing import Optional

from pydantic import BaseModel


class BibleVersion(BaseModel):
    id: int
    abbreviation: str = ""
    title: str = ""


class BibleVerse(BaseModel):
    text: str = ""
    reference: str
    translation: Optional[str] = None
    copyright: Optional[str] = None


class BiblePassage(BaseModel):
    text: str = ""
    reference: str
    translation: Optional[str] = None
    verseCount: Optional[int] = 0
    copyright: Optional[str] = None
