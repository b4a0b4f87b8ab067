"""
Flashcard UI Component

Renders a vocabulary entry as a flashcard.
"""

from __future__ import annotations

from html import escape

import streamlit as st

from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    ENTRY_BACK_STYLE,
    ENTRY_FRONT_STYLE,
    FlashcardStyle,
)
from app.ui.labels import LANGUAGE_LABELS, WORD_TYPE_LABELS
from core.schemas import VocabularyEntry


def render_flashcard(
    main_text: str,
    style: FlashcardStyle,
    subtitle_lines: list[str] | None = None,
    corner_text: str = "",
) -> None:
    """
    Render a flashcard.

    Args:
        main_text: Primary text (center, large)
        style: Style preset
        subtitle_lines: Optional lines below the main text
        corner_text: Optional text in top-right corner
    """
    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {style.corner_font_size}; color: {style.corner_color};">'
            f"{escape(corner_text)}</div>"
        )

    main_html = (
        f'<h1 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        'margin: 0; text-align: center; line-height: 1.4; max-width: 100%; '
        f'overflow-wrap: anywhere;">{escape(main_text)}</h1>'
    )

    subtitle_html = "".join(
        f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
        f'margin: 10px 0 0 0; text-align: center;">{escape(line)}</p>'
        for line in (subtitle_lines or [])
        if line
    )

    html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )

    st.markdown(html, unsafe_allow_html=True)


def render_entry_card(entry: VocabularyEntry, show_answer: bool) -> None:
    """
    Render the question or answer side of an entry.
    """
    corner = LANGUAGE_LABELS[entry.language]
    if not show_answer:
        render_flashcard(entry.writing, ENTRY_FRONT_STYLE, corner_text=corner)
        return

    render_flashcard(
        entry.writing,
        ENTRY_BACK_STYLE,
        subtitle_lines=[entry.reading, entry.meaning],
        corner_text=corner,
    )
    st.caption(
        f"{WORD_TYPE_LABELS[entry.word_type]} • {entry.level} • "
        f"Reviews: {entry.review_count}"
    )
