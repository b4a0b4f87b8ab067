"""
Streamlit session state helpers.
"""

from __future__ import annotations

import streamlit as st


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "review_session" not in st.session_state:
        st.session_state.review_session = None
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "session_count" not in st.session_state:
        st.session_state.session_count = 0
    if "session_status_counts" not in st.session_state:
        st.session_state.session_status_counts = {}
    if "last_session_count" not in st.session_state:
        st.session_state.last_session_count = 0
    if "filter_language" not in st.session_state:
        st.session_state.filter_language = None
    if "filter_level" not in st.session_state:
        st.session_state.filter_level = None
    if "editing_id" not in st.session_state:
        st.session_state.editing_id = None
    if "notices" not in st.session_state:
        st.session_state.notices = []
