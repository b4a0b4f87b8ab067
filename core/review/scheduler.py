"""
Scheduler - Review Interval Logic

Pure scheduling functions (no database calls, no wall clock).

Every function takes the current instant as an argument; callers pass
datetime.now(timezone.utc) themselves. This keeps the results deterministic
for fixed inputs.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional, Union

from core.review.constants import IntervalConfig, load_interval_config
from core.schemas import ReviewSchedule, VocabularyEntry, WordStatus


def _resolve_config(config: Optional[IntervalConfig]) -> IntervalConfig:
    return config if config is not None else load_interval_config()


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def interval_for(status: WordStatus, config: Optional[IntervalConfig] = None):
    """
    Get the configured interval for a status.

    Raises:
        ConfigurationError: If status is excluded
    """
    return _resolve_config(config).interval_for(status)


def compute_next_review(
    status: WordStatus,
    last_reviewed_at: Optional[datetime],
    now: datetime,
    config: Optional[IntervalConfig] = None
) -> Union[datetime, ReviewSchedule]:
    """
    Compute when an entry becomes eligible for review again.

    Args:
        status: Status the entry was (re)assigned
        last_reviewed_at: Time of the review, or None if never reviewed
        now: Current instant
        config: Interval preset (defaults to the configured policy)

    Returns:
        now if never reviewed, last_reviewed_at + interval otherwise,
        or ReviewSchedule.NEVER when the interval is infinite

    Raises:
        ConfigurationError: If status is excluded
    """
    interval = interval_for(status, config)

    if last_reviewed_at is None:
        return _as_utc(now)

    if interval == ReviewSchedule.NEVER:
        return ReviewSchedule.NEVER

    return _as_utc(last_reviewed_at) + interval


def is_due(
    entry: VocabularyEntry,
    now: datetime,
    config: Optional[IntervalConfig] = None
) -> bool:
    """
    Check whether an entry is eligible for review at `now`.

    Excluded entries and entries whose status has an infinite interval are
    never due, whatever their next_review_at says. A stored NEVER left over
    from a policy where the status was retired is re-derived from
    last_reviewed_at under the current policy.
    """
    if entry.status == WordStatus.EXCLUDED:
        return False

    config = _resolve_config(config)
    if config.is_retired(entry.status):
        return False

    next_review_at = entry.next_review_at
    if next_review_at is None:
        return True
    if next_review_at == ReviewSchedule.NEVER:
        next_review_at = compute_next_review(entry.status, entry.last_reviewed_at, now, config)

    return _as_utc(next_review_at) <= _as_utc(now)


def filter_due(
    entries: Iterable[VocabularyEntry],
    now: datetime,
    config: Optional[IntervalConfig] = None
) -> list[VocabularyEntry]:
    """Return the due entries, preserving input order."""
    config = _resolve_config(config)
    return [entry for entry in entries if is_due(entry, now, config)]


def reassign_status(
    entry: VocabularyEntry,
    new_status: WordStatus,
    config: Optional[IntervalConfig] = None
) -> VocabularyEntry:
    """
    Change an entry's status outside a review (manual edit).

    The review history is kept: last_reviewed_at and review_count are
    unchanged, and next_review_at is re-derived for the new status.
    Excluded entries get no next review time.
    """
    new_status = WordStatus(new_status)
    if new_status == WordStatus.EXCLUDED:
        next_review_at = None
    elif entry.last_reviewed_at is None:
        next_review_at = None
    else:
        next_review_at = compute_next_review(
            new_status, entry.last_reviewed_at, entry.last_reviewed_at, config
        )
    return entry.model_copy(update={"status": new_status, "next_review_at": next_review_at})
