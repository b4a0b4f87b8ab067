"""
Vocabulary page rendering: add, edit, delete, export and import entries.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pandas as pd
import streamlit as st

from app.session_controller import current_filters
from app.ui import LANGUAGE_LABELS, STATUS_LABELS, WORD_TYPE_LABELS, render_entry_form
from core import lexicon_io, lexicon_repo, review
from core.schemas import VocabularyEntry


def render_lexicon_page() -> None:
    entries = lexicon_repo.get_all_entries()

    _render_editor(entries)
    st.divider()
    _render_entry_table(review.filter_entries(entries, current_filters()))
    st.divider()
    _render_import_export(entries)


def _render_editor(entries: list[VocabularyEntry]) -> None:
    editing_id = st.session_state.editing_id
    existing = next((e for e in entries if e.id == editing_id), None)

    saved = render_entry_form(existing)
    if saved is not None:
        lexicon_repo.save_entry(saved)
        st.session_state.editing_id = None
        st.success(f"Saved '{saved.writing}'")
        st.rerun()

    if not entries:
        return

    by_id = {e.id: e for e in entries}
    selected = st.selectbox(
        "Select a word to edit or delete",
        [None] + list(by_id),
        format_func=lambda entry_id: "(none)" if entry_id is None else f"{by_id[entry_id].writing} ({by_id[entry_id].meaning})",
    )
    if selected is None:
        return

    col1, col2 = st.columns(2)
    with col1:
        if st.button("✏️ Edit", use_container_width=True):
            st.session_state.editing_id = selected
            st.rerun()
    with col2:
        if st.button("🗑️ Delete", use_container_width=True):
            lexicon_repo.delete_entry(selected)
            if st.session_state.editing_id == selected:
                st.session_state.editing_id = None
            st.rerun()


def _format_timestamp(value) -> str:
    if value is None:
        return "No date"
    if value == review.ReviewSchedule.NEVER:
        return "Never"
    return value.strftime("%Y-%m-%d %H:%M")


def _render_entry_table(entries: list[VocabularyEntry]) -> None:
    if not entries:
        st.info("No words match these filters. Try changing the filters or add new words.")
        return

    df = pd.DataFrame([
        {
            "Writing": e.writing,
            "Reading": e.reading,
            "Meaning": e.meaning,
            "Type": WORD_TYPE_LABELS[e.word_type],
            "Level": e.level,
            "Language": LANGUAGE_LABELS[e.language],
            "Status": STATUS_LABELS[e.status],
            "Reviews": e.review_count,
            "Next review": _format_timestamp(e.next_review_at),
        }
        for e in entries
    ])
    st.dataframe(df, hide_index=True, use_container_width=True)


def _render_import_export(entries: list[VocabularyEntry]) -> None:
    now = datetime.now(timezone.utc)
    st.download_button(
        "⬇️ Export JSON",
        data=lexicon_io.export_entries_json(entries),
        file_name=lexicon_io.export_filename(now),
        mime="application/json",
    )

    uploaded = st.file_uploader("Import JSON", type=["json"])
    if uploaded is None:
        return

    replace = st.checkbox("Replace the whole collection (otherwise merge by id)")
    if not st.button("⬆️ Import"):
        return

    try:
        imported = lexicon_io.parse_entries_json(uploaded.getvalue())
    except lexicon_io.ImportFormatError as exc:
        st.error(f"Import failed: {exc}")
        return

    if replace:
        lexicon_repo.replace_all(imported)
    else:
        for entry in imported:
            lexicon_repo.save_entry(entry)
    st.success(f"Imported {len(imported)} words")
