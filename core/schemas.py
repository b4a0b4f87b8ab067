"""
Pydantic models for the vocabulary collection.

These models define the structure of MongoDB documents and of the
JSON export format.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


class WordStatus(str, Enum):
    """How well the learner knows an entry."""
    UNKNOWN = "unknown"     # Doesn't know it yet
    PARTIAL = "partial"     # Knows it somewhat
    KNOWN = "known"         # Knows it
    EXCLUDED = "excluded"   # Never shown in review


class ReviewSchedule(str, Enum):
    """Distinguished values for next_review_at."""
    NEVER = "never"  # Interval is infinite, entry is retired from review


class Language(str, Enum):
    """Languages the collection is organised by."""
    JAPANESE = "japanese"
    CHINESE = "chinese"
    KOREAN = "korean"
    OTHER = "other"


class WordType(str, Enum):
    """Grammatical category of an entry."""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PARTICLE = "particle"
    EXPRESSION = "expression"
    OTHER = "other"


# Levels offered by the entry form (free strings are accepted too)
LEVEL_OPTIONS = [
    "N5/HSK1",
    "N4/HSK2",
    "N3/HSK3",
    "N2/HSK4",
    "N1/HSK5",
    "HSK6",
    "TOPIK1",
    "TOPIK2",
]
DEFAULT_LEVEL = LEVEL_OPTIONS[0]


def generate_entry_id() -> str:
    """Generate a unique entry ID (UUID)."""
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # MongoDB and JSON may hand back naive datetimes; they are stored as UTC
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class VocabularyEntry(BaseModel):
    """
    A single vocabulary entry.

    Scheduling fields (status, last_reviewed_at, next_review_at, review_count)
    are only ever rewritten through core.review; the store persists them verbatim.
    """
    id: str = Field(default_factory=generate_entry_id, description="Stable unique identifier")

    # Card content
    writing: str = Field(..., min_length=1, description="Written form (kanji, hanzi, hangul...)")
    reading: str = Field(default="", description="Reading (kana, pinyin, romanization)")
    meaning: str = Field(default="", description="Meaning in the learner's language")
    word_type: WordType = Field(default=WordType.NOUN)
    level: str = Field(default=DEFAULT_LEVEL, description="Course level, e.g. N5/HSK1")
    language: Language = Field(default=Language.JAPANESE)

    # Scheduling state
    status: WordStatus = Field(default=WordStatus.UNKNOWN)
    last_reviewed_at: Optional[datetime] = None
    next_review_at: Optional[Union[datetime, ReviewSchedule]] = None
    review_count: int = Field(default=0, ge=0)

    created_at: datetime = Field(default_factory=_utc_now)

    @field_validator("last_reviewed_at", "created_at")
    @classmethod
    def _ensure_timezone(cls, value):
        return _as_utc(value)

    @field_validator("next_review_at")
    @classmethod
    def _ensure_next_review_timezone(cls, value):
        return _as_utc(value)

    @property
    def is_new(self) -> bool:
        """True if the entry was never reviewed."""
        return self.last_reviewed_at is None

    def to_document(self) -> dict:
        """Serialize for MongoDB (datetimes kept native, enums as values)."""
        document = self.model_dump()
        document["status"] = self.status.value
        document["word_type"] = self.word_type.value
        document["language"] = self.language.value
        if isinstance(self.next_review_at, ReviewSchedule):
            document["next_review_at"] = self.next_review_at.value
        return document

    @classmethod
    def from_document(cls, document: dict) -> "VocabularyEntry":
        """Build an entry from a MongoDB document (ignores the _id key)."""
        data = {key: value for key, value in document.items() if key != "_id"}
        return cls.model_validate(data)
