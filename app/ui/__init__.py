"""UI Components for the Vocabulary Trainer"""

from app.ui.entry_form import render_entry_form
from app.ui.flashcard import render_entry_card, render_flashcard
from app.ui.labels import LANGUAGE_LABELS, STATUS_LABELS, WORD_TYPE_LABELS
from app.ui.session_stats import render_session_stats, render_session_complete
from app.ui.status_buttons import render_status_buttons

__all__ = [
    "render_entry_form",
    "render_entry_card",
    "render_flashcard",
    "render_session_stats",
    "render_session_complete",
    "render_status_buttons",
    "LANGUAGE_LABELS",
    "STATUS_LABELS",
    "WORD_TYPE_LABELS",
]
