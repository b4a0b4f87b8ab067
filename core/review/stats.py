"""
Collection statistics for the study and vocabulary pages.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Iterable, Optional

from core.review.constants import IntervalConfig
from core.review.scheduler import filter_due
from core.review.session import ReviewFilters
from core.schemas import Language, VocabularyEntry


def filter_entries(
    entries: Iterable[VocabularyEntry],
    filters: Optional[ReviewFilters] = None
) -> list[VocabularyEntry]:
    """Apply language / level filters, preserving order."""
    filters = filters or ReviewFilters()
    return [entry for entry in entries if filters.matches(entry)]


def language_counts(entries: Iterable[VocabularyEntry]) -> dict[Language, int]:
    """Count entries per language (every language present, zero if empty)."""
    counts = Counter(entry.language for entry in entries)
    return {language: counts.get(language, 0) for language in Language}


def unique_levels(entries: Iterable[VocabularyEntry]) -> list[str]:
    """Sorted distinct levels used in the collection."""
    return sorted({entry.level for entry in entries if entry.level})


def count_due(
    entries: Iterable[VocabularyEntry],
    now: datetime,
    filters: Optional[ReviewFilters] = None,
    config: Optional[IntervalConfig] = None
) -> int:
    """Number of entries a session built with the same arguments would hold."""
    return len(filter_due(filter_entries(entries, filters), now, config))
