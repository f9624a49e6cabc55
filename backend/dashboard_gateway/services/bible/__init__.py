"""Bible text from the YouVersion Platform API."""

from .normalize import normalize_passage, normalize_verse, normalize_versions, passage_to_verse
from .service import YouVersionClient
from .usfm import BOOK_CODES, to_usfm
from .votd import DAILY_VERSES, DEFAULT_BIBLE_ID, DEFAULT_TRANSLATION, curated_reference

__all__ = [
    "BOOK_CODES",
    "DAILY_VERSES",
    "DEFAULT_BIBLE_ID",
    "DEFAULT_TRANSLATION",
    "YouVersionClient",
    "curated_reference",
    "normalize_passage",
    "normalize_verse",
    "normalize_versions",
    "passage_to_verse",
    "to_usfm",
]
