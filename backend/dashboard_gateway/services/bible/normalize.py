"""YouVersion payloads to canonical Bible models."""

from typing import Any

from dashboard_gateway.models import BiblePassage, BibleVerse, BibleVersion


def normalize_versions(data: Any) -> list[BibleVersion]:
    rows = data.get("data") if isinstance(data, dict) else data
    return [
        BibleVersion(
            id=row["id"],
            abbreviation=row.get("abbreviation") or row.get("abbr") or "",
            title=row.get("title") or row.get("name") or "",
        )
        for row in rows or []
    ]


def normalize_passage(data: Any, reference: str, bible_id: int) -> BiblePassage:
    data = data if isinstance(data, dict) else {}
    return BiblePassage(
        text=(data.get("content") or data.get("text") or "").strip(),
        reference=data.get("reference") or reference,
        translation=data.get("bible_abbreviation") or data.get("translation") or str(bible_id),
        verseCount=data.get("verse_count") or len(data.get("verses") or []),
        copyright=data.get("copyright") or None,
    )


def passage_to_verse(passage: BiblePassage) -> BibleVerse:
    return BibleVerse(
        text=passage.text,
        reference=passage.reference,
        translation=passage.translation,
        copyright=passage.copyright,
    )


def normalize_verse(data: Any, reference: str, default_translation: str) -> BibleVerse:
    data = data if isinstance(data, dict) else {}
    return BibleVerse(
        text=(data.get("content") or data.get("text") or "").strip(),
        reference=data.get("reference") or reference,
        translation=data.get("bible_abbreviation") or data.get("translation") or default_translation,
        copyright=data.get("copyright") or None,
    )
