"""
Session Builder - Review Pass Creation and Progression

Creates a review session from the due subset of a filtered collection:
1. Filter by language / level
2. Keep due entries only
3. Unknown entries first, each tier shuffled

Progression:
- Answering an entry stamps it through the scheduler and advances the cursor
- At the end of the sequence, partial entries not yet answered in this pass
  are appended once more (requeue)
- Otherwise the session is complete

Sessions are immutable: every operation returns a new ReviewSession.
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from core.review.constants import IntervalConfig, load_interval_config
from core.review.errors import InvalidSessionState, NoEntriesDue
from core.review.scheduler import compute_next_review, is_due
from core.schemas import Language, VocabularyEntry, WordStatus

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Progression state of a review session."""
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class ReviewFilters:
    """
    Language / level restriction for a session. None means any.
    """
    language: Optional[Language] = None
    level: Optional[str] = None

    def matches(self, entry: VocabularyEntry) -> bool:
        if self.language is not None and entry.language != self.language:
            return False
        if self.level is not None and entry.level != self.level:
            return False
        return True

    def describe(self) -> str:
        language = self.language.value if self.language is not None else "any"
        level = self.level if self.level is not None else "any"
        return f"language={language}, level={level}"


@dataclass(frozen=True)
class ReviewSession:
    """
    One ordered pass over due entries.
    """
    entries: tuple[VocabularyEntry, ...]
    cursor: int = 0
    reviewed_ids: frozenset[str] = frozenset()
    filters: ReviewFilters = field(default_factory=ReviewFilters)
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    started_at: Optional[datetime] = None

    @property
    def status(self) -> SessionStatus:
        if self.cursor < len(self.entries):
            return SessionStatus.IN_PROGRESS
        return SessionStatus.COMPLETED

    @property
    def is_complete(self) -> bool:
        return self.status == SessionStatus.COMPLETED

    @property
    def current_entry(self) -> Optional[VocabularyEntry]:
        if self.is_complete:
            return None
        return self.entries[self.cursor]

    @property
    def position(self) -> int:
        """1-based position of the current entry (total + 1 once complete)."""
        return self.cursor + 1

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def remaining(self) -> int:
        return max(0, len(self.entries) - self.cursor)


def _order_by_priority(
    entries: list[VocabularyEntry],
    rng: random.Random
) -> list[VocabularyEntry]:
    """
    Unknown entries strictly first; order within each tier is shuffled.
    """
    unknown = [e for e in entries if e.status == WordStatus.UNKNOWN]
    others = [e for e in entries if e.status != WordStatus.UNKNOWN]
    rng.shuffle(unknown)
    rng.shuffle(others)
    return unknown + others


def build_session(
    entries: Iterable[VocabularyEntry],
    now: datetime,
    filters: Optional[ReviewFilters] = None,
    config: Optional[IntervalConfig] = None,
    rng: Optional[random.Random] = None
) -> ReviewSession:
    """
    Create a review session from the due subset of `entries`.

    Args:
        entries: Full entry collection (not modified)
        now: Current instant
        filters: Optional language / level restriction
        config: Interval preset (defaults to the configured policy)
        rng: Random source for shuffling within tiers

    Returns:
        ReviewSession positioned on its first entry

    Raises:
        NoEntriesDue: If nothing matches the filters and is due
    """
    filters = filters or ReviewFilters()
    config = config if config is not None else load_interval_config()
    rng = rng or random.Random()

    candidates = [e for e in entries if filters.matches(e)]
    due = [e for e in candidates if is_due(e, now, config)]

    if not due:
        logger.info("No entries due (%s, %d matched filters)", filters.describe(), len(candidates))
        raise NoEntriesDue(f"No entries due for review ({filters.describe()})")

    ordered = _order_by_priority(due, rng)
    logger.info(
        "Review session created: %d due of %d matched (%s)",
        len(ordered), len(candidates), filters.describe()
    )

    return ReviewSession(
        entries=tuple(ordered),
        filters=filters,
        started_at=now,
    )


def _advance(session: ReviewSession) -> ReviewSession:
    """
    Move past the current entry.

    1. More entries ahead: step forward
    2. End reached: requeue partial entries not yet answered in this pass
    3. Nothing to requeue: complete (cursor == len(entries))
    """
    next_cursor = session.cursor + 1
    if next_cursor < len(session.entries):
        return replace(session, cursor=next_cursor)

    to_repeat: list[VocabularyEntry] = []
    queued: set[str] = set()
    for entry in session.entries:
        if entry.status != WordStatus.PARTIAL:
            continue
        if entry.id in session.reviewed_ids or entry.id in queued:
            continue
        queued.add(entry.id)
        to_repeat.append(entry)

    if to_repeat:
        logger.debug("Requeueing %d partial entries", len(to_repeat))
        return replace(
            session,
            entries=session.entries + tuple(to_repeat),
            cursor=next_cursor,
        )

    logger.info(
        "Review session %s completed (%d answered)",
        session.session_id, len(session.reviewed_ids)
    )
    return replace(session, cursor=len(session.entries))


def _require_in_progress(session: ReviewSession) -> VocabularyEntry:
    current = session.current_entry
    if current is None:
        raise InvalidSessionState(
            f"Session {session.session_id} is completed; start a new session"
        )
    return current


def record_answer(
    session: ReviewSession,
    entry_id: str,
    new_status: WordStatus,
    now: datetime,
    config: Optional[IntervalConfig] = None
) -> tuple[VocabularyEntry, ReviewSession]:
    """
    Apply the learner's answer to the current entry and advance.

    Args:
        session: Session in progress
        entry_id: Id of the entry being answered (must be the current one)
        new_status: Status the learner picked
        now: Time of the answer
        config: Interval preset (defaults to the configured policy)

    Returns:
        Tuple of (updated_entry, advanced_session). The caller persists
        updated_entry into the store.

    Raises:
        InvalidSessionState: If the session is complete or entry_id is not current
        ConfigurationError: If new_status has no interval (excluded)
    """
    current = _require_in_progress(session)
    if current.id != entry_id:
        raise InvalidSessionState(
            f"Answered entry {entry_id} but the current entry is {current.id}"
        )

    new_status = WordStatus(new_status)
    next_review_at = compute_next_review(new_status, now, now, config)

    updated = current.model_copy(update={
        "status": new_status,
        "last_reviewed_at": now,
        "next_review_at": next_review_at,
        "review_count": current.review_count + 1,
    })

    entries = tuple(updated if e.id == entry_id else e for e in session.entries)
    answered = replace(
        session,
        entries=entries,
        reviewed_ids=session.reviewed_ids | {entry_id},
    )
    return updated, _advance(answered)


def skip_entry(session: ReviewSession) -> ReviewSession:
    """
    Advance without answering.

    The skipped entry is not marked reviewed, so a partial entry comes back
    at the end of the pass.

    Raises:
        InvalidSessionState: If the session is complete
    """
    _require_in_progress(session)
    return _advance(session)


def previous_entry(session: ReviewSession) -> ReviewSession:
    """
    Step back to the previous entry in the sequence.

    The reviewed set is left alone; answering the entry again stamps it a
    second time.

    Raises:
        InvalidSessionState: If the session is complete or at its first entry
    """
    _require_in_progress(session)
    if session.cursor == 0:
        raise InvalidSessionState("Already at the first entry of the session")
    return replace(session, cursor=session.cursor - 1)
