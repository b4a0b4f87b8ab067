"""
Session Statistics UI

Renders progress metrics and controls.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from app.ui.labels import STATUS_LABELS
from core import review


def render_session_stats(session: review.ReviewSession) -> Optional[str]:
    """
    Render session progress metrics, restart and exit buttons.

    Returns:
        "quit", "restart", or None if no button was clicked
    """
    col1, col2, col3, col4 = st.columns([2, 2, 1, 1])

    with col1:
        st.metric("Progress", f"{session.position}/{session.total}")

    with col2:
        st.metric("Reviewed", st.session_state.session_count)

    with col3:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("🔄", help="Restart session", use_container_width=True):
            return "restart"

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("❌", help="Quit session", use_container_width=True):
            return "quit"

    st.divider()
    return None


def render_session_complete():
    """Render session completion message."""
    count = st.session_state.last_session_count
    st.success(f"🎉 Review complete! You reviewed {count} words.")
    counts = st.session_state.session_status_counts
    if counts:
        summary = " • ".join(
            f"{STATUS_LABELS[status]}: {n}" for status, n in counts.items()
        )
        st.info(summary)
