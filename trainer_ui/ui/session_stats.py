"""
Session Statistics UI

Renders progress metrics and controls.
"""

import streamlit as st

from srs_trainer.review_session import ReviewSession


def render_session_stats(session: ReviewSession) -> bool:
    """
    Render session progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    col1, col2, col3 = st.columns([2, 2, 1])

    with col1:
        st.metric("Progress", f"{min(session.position + 1, session.total)}/{session.total}")

    with col2:
        if session.accuracy is not None:
            st.metric("Accuracy", f"{session.accuracy * 100:.0f}%")

    with col3:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit session", use_container_width=True):
            return True

    st.progress(session.progress)
    st.divider()
    return False


def render_session_complete(summary: dict) -> None:
    """Render session completion message."""
    st.success(f"🎉 Session complete! You reviewed {summary['reviewed']} items.")
    if summary.get("accuracy") is not None:
        st.info(f"Accuracy: {summary['accuracy'] * 100:.1f}%")
