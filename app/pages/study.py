"""
Study page rendering.
"""

from __future__ import annotations

from datetime import datetime, timezone

import streamlit as st

from app.session_controller import (
    current_filters,
    end_session,
    go_back,
    process_answer,
    show_notices,
    skip_current,
    start_new_session,
)
from app.ui import (
    LANGUAGE_LABELS,
    render_entry_card,
    render_session_complete,
    render_session_stats,
    render_status_buttons,
)
from core import lexicon_repo, review


def render_study_page() -> None:
    """
    Render the study flow (intro or active session).
    """
    show_notices()
    if st.session_state.review_session is None:
        _render_intro_screen()
    else:
        _render_active_session()


def _render_intro_screen() -> None:
    st.title("📚 Vocabulary Trainer")
    if lexicon_repo.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using the test database (set TEST_MODE=false in .env for production)")

    if st.session_state.last_session_count > 0:
        render_session_complete()

    entries = lexicon_repo.get_all_entries()
    _render_filters(entries)

    filtered = review.filter_entries(entries, current_filters())
    due_count = review.count_due(entries, datetime.now(timezone.utc), current_filters())
    st.caption(
        f"{len(entries)} words total • {len(filtered)} filtered"
        + (f" • {due_count} due for review" if due_count else "")
    )

    label = f"🧠 Review ({due_count})" if due_count else "🧠 Review"
    if st.button(label, type="primary", use_container_width=True):
        start_new_session()
        st.rerun()


def _render_filters(entries: list) -> None:
    counts = review.language_counts(entries)
    language_options = [None] + list(LANGUAGE_LABELS)
    st.session_state.filter_language = st.radio(
        "🌐 Language",
        language_options,
        format_func=lambda lang: (
            f"All ({len(entries)})" if lang is None
            else f"{LANGUAGE_LABELS[lang]} ({counts[lang]})"
        ),
        index=language_options.index(st.session_state.filter_language),
        horizontal=True,
    )

    levels = review.unique_levels(entries)
    if not levels:
        st.session_state.filter_level = None
        return
    level_options = [None] + levels
    current = st.session_state.filter_level
    st.session_state.filter_level = st.radio(
        "📊 Level",
        level_options,
        format_func=lambda level: "All levels" if level is None else level,
        index=level_options.index(current) if current in level_options else 0,
        horizontal=True,
    )


def _render_active_session() -> None:
    session: review.ReviewSession = st.session_state.review_session
    entry = session.current_entry

    action = render_session_stats(session)
    if action == "quit":
        end_session()
        st.rerun()
    elif action == "restart":
        start_new_session()
        st.rerun()

    render_entry_card(entry, show_answer=st.session_state.show_answer)
    st.markdown("<br>", unsafe_allow_html=True)

    reveal_label = "🙈 Hide Answer" if st.session_state.show_answer else "👁️ Reveal Answer"
    if st.button(reveal_label, use_container_width=True, type="primary"):
        st.session_state.show_answer = not st.session_state.show_answer
        st.rerun()

    if st.session_state.show_answer:
        choice = render_status_buttons(key_suffix=f"{session.session_id}_{session.cursor}")
        if choice is not None:
            process_answer(choice)
            st.rerun()

    col_back, col_next = st.columns(2)
    with col_back:
        if st.button("← Back", use_container_width=True, disabled=session.cursor == 0):
            go_back()
            st.rerun()
    with col_next:
        if st.button("Next →", use_container_width=True, help="Skip without answering"):
            skip_current()
            st.rerun()
