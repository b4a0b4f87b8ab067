"""
Review - Spaced Repetition Scheduling

Main API for the vocabulary review engine.

Scheduling is a fixed status-to-interval table:
- unknown: short interval (minutes / an hour)
- partial: one day
- known: never again, or one week (KNOWN_REVIEW_POLICY)
- excluded: never scheduled

Quick start:
    from datetime import datetime, timezone
    from core import review

    now = datetime.now(timezone.utc)
    session = review.build_session(entries, now)

    entry = session.current_entry
    updated, session = review.record_answer(session, entry.id, review.WordStatus.PARTIAL, now)
    # persist `updated`
"""

# Scheduler API
from core.review.scheduler import (
    compute_next_review,
    filter_due,
    interval_for,
    is_due,
    reassign_status,
)

# Session API
from core.review.session import (
    ReviewFilters,
    ReviewSession,
    SessionStatus,
    build_session,
    previous_entry,
    record_answer,
    skip_entry,
)

# Statistics
from core.review.stats import (
    count_due,
    filter_entries,
    language_counts,
    unique_levels,
)

# Configuration
from core.review.constants import (
    DEFAULT_POLICY,
    INTERVAL_POLICIES,
    NEVER_AGAIN_INTERVALS,
    WEEKLY_INTERVALS,
    IntervalConfig,
    load_interval_config,
)

# Errors
from core.review.errors import (
    ConfigurationError,
    InvalidSessionState,
    NoEntriesDue,
    ReviewError,
)

from core.schemas import ReviewSchedule, VocabularyEntry, WordStatus


__all__ = [
    # Scheduler
    "compute_next_review",
    "filter_due",
    "interval_for",
    "is_due",
    "reassign_status",

    # Session
    "ReviewFilters",
    "ReviewSession",
    "SessionStatus",
    "build_session",
    "previous_entry",
    "record_answer",
    "skip_entry",

    # Statistics
    "count_due",
    "filter_entries",
    "language_counts",
    "unique_levels",

    # Configuration
    "DEFAULT_POLICY",
    "INTERVAL_POLICIES",
    "NEVER_AGAIN_INTERVALS",
    "WEEKLY_INTERVALS",
    "IntervalConfig",
    "load_interval_config",

    # Errors
    "ConfigurationError",
    "InvalidSessionState",
    "NoEntriesDue",
    "ReviewError",

    # Models
    "ReviewSchedule",
    "VocabularyEntry",
    "WordStatus",
]
