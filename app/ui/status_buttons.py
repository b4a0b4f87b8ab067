"""
Status Button UI

Renders the answer buttons shown once the card is revealed.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

import streamlit as st

from app.ui.labels import STATUS_LABELS
from core import review
from core.schemas import WordStatus


ANSWER_STATUSES = [WordStatus.UNKNOWN, WordStatus.PARTIAL, WordStatus.KNOWN]


def describe_interval(interval) -> str:
    """Human readable hint for when an answer brings the card back."""
    if interval == review.ReviewSchedule.NEVER:
        return "Don't review again"
    if interval < timedelta(hours=1):
        return f"Review in {int(interval.total_seconds() // 60)} min"
    if interval < timedelta(days=1):
        return f"Review in {int(interval.total_seconds() // 3600)} h"
    if interval == timedelta(days=1):
        return "Review tomorrow"
    return f"Review in {interval.days} days"


def render_status_buttons(key_suffix: str) -> Optional[WordStatus]:
    """
    Render one button per answer status.

    Returns:
        WordStatus selected by user, or None if no button clicked
    """
    st.markdown("**How well did you know it?**")
    config = review.load_interval_config()

    columns = st.columns(len(ANSWER_STATUSES))
    for column, status in zip(columns, ANSWER_STATUSES):
        with column:
            clicked = st.button(
                STATUS_LABELS[status],
                key=f"answer_{status.value}_{key_suffix}",
                use_container_width=True,
                help=describe_interval(config.interval_for(status)),
            )
            if clicked:
                return status
    return None
