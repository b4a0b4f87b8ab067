"""
Vocabulary Trainer - Main App

Streamlit UI for the vocabulary review scheduler.

Run with:
    streamlit run app/streamlit_app.py
"""

import logging
import os

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state


# ---- Page Setup ----

st.set_page_config(
    page_title="Vocabulary Trainer",
    page_icon="📚",
    layout="centered"
)


# ---- Logging ----

@st.cache_resource
def _configure_logging() -> None:
    """Configure logging once per server process."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


_configure_logging()


# ---- Main App ----

def main():
    """Main app entry point."""
    ensure_session_state()

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
