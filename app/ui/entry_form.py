"""
Entry Form UI

Add / edit form for a vocabulary entry.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from app.ui.labels import LANGUAGE_LABELS, STATUS_LABELS, WORD_TYPE_LABELS
from core import review
from core.schemas import (
    DEFAULT_LEVEL,
    LEVEL_OPTIONS,
    Language,
    VocabularyEntry,
    WordStatus,
    WordType,
)


def render_entry_form(existing: Optional[VocabularyEntry] = None) -> Optional[VocabularyEntry]:
    """
    Render the add / edit form.

    Args:
        existing: Entry being edited, or None to create a new one

    Returns:
        The entry to save when the form is submitted with valid data, else None
    """
    title = "✏️ Edit word" if existing else "➕ New word"
    level_options = list(LEVEL_OPTIONS)
    if existing and existing.level not in level_options:
        level_options.append(existing.level)

    with st.form(key=f"entry_form_{existing.id if existing else 'new'}", clear_on_submit=existing is None):
        st.markdown(f"**{title}**")
        language = st.selectbox(
            "Language",
            list(Language),
            format_func=LANGUAGE_LABELS.get,
            index=list(Language).index(existing.language) if existing else 0,
        )
        writing = st.text_input("Writing (kanji / hanzi / hangul)", value=existing.writing if existing else "")
        reading = st.text_input("Reading (kana / pinyin / romanization)", value=existing.reading if existing else "")
        meaning = st.text_input("Meaning", value=existing.meaning if existing else "")

        col1, col2, col3 = st.columns(3)
        with col1:
            word_type = st.selectbox(
                "Type",
                list(WordType),
                format_func=WORD_TYPE_LABELS.get,
                index=list(WordType).index(existing.word_type) if existing else 0,
            )
        with col2:
            level = st.selectbox(
                "Level",
                level_options,
                index=level_options.index(existing.level if existing else DEFAULT_LEVEL),
            )
        with col3:
            status = st.selectbox(
                "Status",
                list(WordStatus),
                format_func=STATUS_LABELS.get,
                index=list(WordStatus).index(existing.status) if existing else 0,
            )

        submitted = st.form_submit_button("Update" if existing else "Save", type="primary")

    if not submitted:
        return None

    if not writing.strip() or not reading.strip() or not meaning.strip():
        st.error("Please fill in writing, reading and meaning")
        return None

    content = {
        "language": language,
        "writing": writing.strip(),
        "reading": reading.strip(),
        "meaning": meaning.strip(),
        "word_type": word_type,
        "level": level,
    }

    if existing is None:
        return VocabularyEntry(status=status, **content)

    updated = existing.model_copy(update=content)
    if status != existing.status:
        updated = review.reassign_status(updated, status)
    return updated
