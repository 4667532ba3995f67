"""
Streamlit session state and database initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from srs_trainer import content_repo, persistence, progress


def init_database() -> None:
    """
    Initialize the progress schema and starter content (cached per process).
    """
    @st.cache_resource
    def _init_database() -> None:
        persistence.init_db()
        content_repo.seed_if_empty()

    _init_database()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "user_id" not in st.session_state:
        st.session_state.user_id = persistence.get_default_user_id()
    if "profile" not in st.session_state:
        profile = persistence.load_profile(st.session_state.user_id)
        st.session_state.profile = progress.refresh_streak(profile)
    if "review_session" not in st.session_state:
        st.session_state.review_session = None
    if "answer_mode" not in st.session_state:
        st.session_state.answer_mode = "standard"
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "written_feedback" not in st.session_state:
        st.session_state.written_feedback = None
    if "last_session_summary" not in st.session_state:
        st.session_state.last_session_summary = None
    if "editing_item_id" not in st.session_state:
        st.session_state.editing_item_id = None
