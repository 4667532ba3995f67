"""
English Trainer - Main App

Streamlit UI for the spaced-repetition vocabulary and grammar trainer.

Run with:
    streamlit run trainer_ui/streamlit_app.py
"""

import streamlit as st

from srs_trainer.logging_config import configure_logging
from trainer_ui.router import PAGES
from trainer_ui.state import ensure_session_state, init_database


configure_logging()


# ---- Page Setup ----

st.set_page_config(
    page_title="English Trainer",
    page_icon="📚",
    layout="centered"
)


# ---- Initialization ----

init_database()
ensure_session_state()


# ---- Navigation ----

# Tabs can't host the review loop (reruns reset the active tab), so use a radio
page_titles = [page.title for page in PAGES]
selected = st.sidebar.radio("Navigation", page_titles, label_visibility="collapsed")
next(page for page in PAGES if page.title == selected).render()
