"""
Import / export of the vocabulary collection.

Formats:
- JSON: a list of entry records (snake_case fields, ISO timestamps)
- CSV: one entry per row, same column names as the JSON fields

Records written by the earlier browser version of the app are accepted too:
camelCase fields (lastReview, nextReview, reviewCount, createdAt, type) and
Spanish keys for status, language and word type.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
from pydantic import ValidationError

from core.review.constants import IntervalConfig
from core.review.scheduler import compute_next_review
from core.schemas import VocabularyEntry, WordStatus


class ImportFormatError(ValueError):
    """Import data could not be turned into vocabulary entries."""


# ---- Legacy Key Mapping ----

LEGACY_FIELDS = {
    "lastReview": "last_reviewed_at",
    "nextReview": "next_review_at",
    "reviewCount": "review_count",
    "createdAt": "created_at",
    "type": "word_type",
}

LEGACY_STATUS = {
    "no-se": "unknown",
    "algo-se": "partial",
    "la-se": "known",
    "excluir": "excluded",
}

LEGACY_LANGUAGE = {
    "japones": "japanese",
    "chino": "chinese",
    "coreano": "korean",
    "otro": "other",
}

LEGACY_WORD_TYPE = {
    "sustantivo": "noun",
    "verbo": "verb",
    "adjetivo": "adjective",
    "adverbio": "adverb",
    "particula": "particle",
    "expresion": "expression",
    "otro": "other",
}


def _normalize_record(record: dict) -> dict:
    """
    Rename legacy fields, translate legacy values and drop blanks.
    """
    data = {}
    for key, value in record.items():
        if key == "_id":
            continue
        if isinstance(value, str) and value.strip() == "":
            value = None
        data[LEGACY_FIELDS.get(key, key)] = value

    if data.get("status") is not None:
        data["status"] = LEGACY_STATUS.get(data["status"], data["status"])
    else:
        data.pop("status", None)
    if data.get("language") is not None:
        data["language"] = LEGACY_LANGUAGE.get(data["language"], data["language"])
    else:
        data.pop("language", None)
    if data.get("word_type") is not None:
        data["word_type"] = LEGACY_WORD_TYPE.get(data["word_type"], data["word_type"])
    else:
        data.pop("word_type", None)

    # Defaults apply for missing values
    for key in ("id", "review_count", "created_at", "level", "reading", "meaning"):
        if data.get(key) is None:
            data.pop(key, None)

    return data


def entry_from_record(
    record: dict,
    config: Optional[IntervalConfig] = None
) -> VocabularyEntry:
    """
    Build a VocabularyEntry from an import record.

    next_review_at is re-derived from last_reviewed_at and the status,
    so stored values from another interval policy are not trusted.

    Raises:
        ValidationError: If the record does not describe a valid entry
    """
    data = _normalize_record(record)
    data.pop("next_review_at", None)
    entry = VocabularyEntry.model_validate(data)

    if entry.last_reviewed_at is not None and entry.status != WordStatus.EXCLUDED:
        next_review_at = compute_next_review(
            entry.status, entry.last_reviewed_at, entry.last_reviewed_at, config
        )
        entry = entry.model_copy(update={"next_review_at": next_review_at})

    return entry


def _entries_from_records(
    records: Iterable[dict],
    config: Optional[IntervalConfig]
) -> list[VocabularyEntry]:
    entries = []
    seen_ids: set[str] = set()
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ImportFormatError(f"Record {index}: expected an object, got {type(record).__name__}")
        try:
            entry = entry_from_record(record, config)
        except ValidationError as exc:
            error = exc.errors()[0]
            field_name = ".".join(str(part) for part in error["loc"])
            raise ImportFormatError(f"Record {index}: {field_name}: {error['msg']}") from exc
        if entry.id in seen_ids:
            raise ImportFormatError(f"Record {index}: duplicate id {entry.id}")
        seen_ids.add(entry.id)
        entries.append(entry)
    return entries


# ---- JSON ----

def export_entries_json(entries: Iterable[VocabularyEntry], indent: int = 2) -> str:
    """
    Serialize entries to a JSON array.
    """
    records = [entry.model_dump(mode="json") for entry in entries]
    return json.dumps(records, ensure_ascii=False, indent=indent)


def parse_entries_json(
    text: str | bytes,
    config: Optional[IntervalConfig] = None
) -> list[VocabularyEntry]:
    """
    Parse a JSON export (current or legacy format).

    Raises:
        ImportFormatError: If the data is not a list of valid entry records
    """
    try:
        records = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ImportFormatError(f"Invalid JSON: {exc.msg} (line {exc.lineno})") from exc

    if not isinstance(records, list):
        raise ImportFormatError("Expected a JSON array of entries")

    return _entries_from_records(records, config)


def export_filename(now: datetime) -> str:
    """Default download name for a JSON export."""
    return f"vocabulary-{now.date().isoformat()}.json"


# ---- CSV ----

def load_entries_csv(
    path: str | Path,
    config: Optional[IntervalConfig] = None
) -> list[VocabularyEntry]:
    """
    Load entries from a CSV file.

    Raises:
        ImportFormatError: If a row does not describe a valid entry
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    if "writing" not in df.columns:
        raise ImportFormatError("CSV must have a 'writing' column")
    return _entries_from_records(df.to_dict(orient="records"), config)
