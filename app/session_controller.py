"""
Session lifecycle helpers for Streamlit app.

The review session lives in st.session_state.review_session; every answer is
written back to MongoDB immediately, so quitting mid-session loses nothing.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import streamlit as st

from core import lexicon_repo, review
from core.schemas import WordStatus

logger = logging.getLogger(__name__)


def current_filters() -> review.ReviewFilters:
    """Filters selected on the study page."""
    return review.ReviewFilters(
        language=st.session_state.filter_language,
        level=st.session_state.filter_level,
    )


def start_new_session() -> None:
    """
    Build a review session from the due entries matching the current filters.
    """
    entries = lexicon_repo.get_all_entries()
    now = datetime.now(timezone.utc)

    try:
        session = review.build_session(entries, now, current_filters())
    except review.NoEntriesDue:
        st.session_state.review_session = None
        _notify("success", "🎉 Nothing to review with these filters. Come back later!")
        return
    except review.ConfigurationError as exc:
        _notify("error", f"Error creating session: {exc}")
        return

    st.session_state.review_session = session
    st.session_state.show_answer = False
    st.session_state.session_count = 0
    st.session_state.session_status_counts = {}


def process_answer(new_status: WordStatus) -> None:
    """
    Record the learner's answer for the current entry and persist it.
    """
    session: review.ReviewSession = st.session_state.review_session
    entry = session.current_entry
    now = datetime.now(timezone.utc)

    try:
        updated, session = review.record_answer(session, entry.id, new_status, now)
    except review.ReviewError as exc:
        logger.warning("Answer rejected: %s", exc)
        _notify("error", f"Could not record answer: {exc}")
        return

    if not lexicon_repo.record_review(updated):
        _notify("warning", f"'{updated.writing}' was deleted, so this answer was not saved")

    counts = st.session_state.session_status_counts
    counts[new_status] = counts.get(new_status, 0) + 1
    st.session_state.session_count += 1
    st.session_state.show_answer = False
    _store_session(session)


def skip_current() -> None:
    """Move to the next card without answering."""
    session = review.skip_entry(st.session_state.review_session)
    st.session_state.show_answer = False
    _store_session(session)


def go_back() -> None:
    """Return to the previous card; answers already given are kept."""
    st.session_state.review_session = review.previous_entry(st.session_state.review_session)
    st.session_state.show_answer = False


def _store_session(session: review.ReviewSession) -> None:
    if session.is_complete:
        end_session(completed=True)
        return
    st.session_state.review_session = session


def end_session(completed: bool = False) -> None:
    """
    End the current session.

    The completion summary is only shown for sessions that ran to the end.
    """
    st.session_state.last_session_count = st.session_state.session_count if completed else 0
    st.session_state.review_session = None
    st.session_state.show_answer = False


def _notify(level: str, message: str) -> None:
    # Shown on the next run, since most callers rerun right away
    st.session_state.notices.append((level, message))


def show_notices() -> None:
    """Render and clear pending notices."""
    notices = st.session_state.notices
    st.session_state.notices = []
    for level, message in notices:
        getattr(st, level)(message)
