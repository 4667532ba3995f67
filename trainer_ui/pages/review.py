"""
Review page rendering.
"""

from __future__ import annotations

import streamlit as st

from srs_trainer import persistence, srs
from srs_trainer.review_session import ReviewSession, check_written_answer
from srs_trainer.schemas import Card, Rule
from trainer_ui.session_controller import (
    answer_current,
    cancel_session,
    start_review_session,
)
from trainer_ui.ui import render_flashcard, render_session_complete, render_session_stats


def render_review_page() -> None:
    """
    Render the review flow (intro or active session).
    """
    session: ReviewSession | None = st.session_state.review_session
    if session is None:
        _render_intro_screen()
    else:
        _render_active_session(session)


def _render_intro_screen() -> None:
    st.subheader("Review")
    if persistence.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test_trainer_db (set TEST_MODE=false in .env for production)")

    if st.session_state.last_session_summary:
        render_session_complete(st.session_state.last_session_summary)

    if st.button("Start review", type="primary", use_container_width=True):
        if start_review_session() == 0:
            st.session_state.review_session = None
            st.info("🎉 All done! Nothing is due right now.")
        else:
            st.rerun()


def _corner_label(item: srs.ReviewableItem) -> str:
    if item.status == srs.ItemStatus.WEAK:
        return "Weak spot"
    if isinstance(item, Rule):
        return "Grammar"
    return "English"


def _render_active_session(session: ReviewSession) -> None:
    if render_session_stats(session):
        cancel_session()
        st.rerun()

    item = session.current
    if isinstance(item, Card) and st.session_state.answer_mode == "writing":
        _render_writing_step(item)
    else:
        _render_standard_step(item)


def _render_standard_step(item: srs.ReviewableItem) -> None:
    if isinstance(item, Rule):
        front, back, subtitle = item.title, item.explanation, "; ".join(item.examples)
    else:
        front, back, subtitle = item.front, item.back, item.example or ""

    if not st.session_state.show_answer:
        render_flashcard(front, corner_text=_corner_label(item))
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("Reveal Answer", use_container_width=True, type="primary"):
            st.session_state.show_answer = True
            st.rerun()
        return

    render_flashcard(back, subtitle=subtitle, corner_text=front, bg_color="#e8f4f8", main_font_size="1.8em")
    st.markdown("<br>", unsafe_allow_html=True)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("❌ Forgot", use_container_width=True):
            answer_current(False)
            st.rerun()
    with col2:
        if st.button("✅ Remembered", type="primary", use_container_width=True):
            answer_current(True)
            st.rerun()


def _render_writing_step(card: Card) -> None:
    render_flashcard(card.back, subtitle="Type the English word", corner_text=_corner_label(card))

    feedback = st.session_state.written_feedback
    if feedback is None:
        with st.form("writing_answer", clear_on_submit=True):
            answer = st.text_input("Your answer")
            if st.form_submit_button("Check", type="primary"):
                st.session_state.written_feedback = (
                    "correct" if check_written_answer(answer, card.front) else "wrong"
                )
                st.rerun()
        return

    if feedback == "correct":
        st.success(f"Correct: **{card.front}**")
        if st.button("Next", type="primary", use_container_width=True):
            answer_current(True)
            st.rerun()
    else:
        st.error(f"The answer was **{card.front}**")
        if st.button("Next", use_container_width=True):
            answer_current(False)
            st.rerun()
