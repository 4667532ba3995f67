"""
Review session lifecycle helpers for the Streamlit app.
"""

from __future__ import annotations

import logging
import uuid

import streamlit as st

from srs_trainer import content_repo, persistence, progress, srs
from srs_trainer.review_session import (
    ReviewSession,
    apply_review_results,
    build_review_events,
    choose_answer_mode,
)

logger = logging.getLogger(__name__)


def _reset_step_state() -> None:
    st.session_state.show_answer = False
    st.session_state.written_feedback = None
    session = st.session_state.review_session
    if session is not None and session.current is not None:
        st.session_state.answer_mode = choose_answer_mode(session.current)
    else:
        st.session_state.answer_mode = "standard"



def start_review_session(limit: int = srs.DEFAULT_BATCH_LIMIT) -> int:
    """
    Build today's batch from the full collection and start a session.

    Returns:
        Number of items in the batch (0 means nothing is due)
    """
    items = content_repo.get_all_items()
    batch = srs.select_due_batch(items, limit=limit)

    st.session_state.review_session = ReviewSession(items=batch, session_id=str(uuid.uuid4()))
    st.session_state.last_session_summary = None
    _reset_step_state()

    logger.info("Started review session with %d of %d items", len(batch), len(items))
    return len(batch)


def answer_current(remembered: bool) -> None:
    """
    Record the outcome for the current item and finish the session after the last one.
    """
    session: ReviewSession = st.session_state.review_session
    session.record(remembered, st.session_state.answer_mode)

    if session.is_complete:
        finish_session()
    else:
        _reset_step_state()


def finish_session() -> None:
    """
    Apply results, persist updated items, log events and update stats.

    Results are applied to the collection as stored now, not as it was when
    the session started: edits made meanwhile are kept and items deleted
    meanwhile stay deleted.
    """
    session: ReviewSession = st.session_state.review_session
    if session is None:
        return

    if session.results:
        current = content_repo.get_all_items()
        _, updated = apply_review_results(current, session.results)
        content_repo.save_items(updated)

        events = build_review_events(session.items, updated, session.results, session.session_id)
        persistence.batch_log_review_events(events, st.session_state.user_id)

        profile = progress.record_activity(st.session_state.profile, repeated=len(session.results))
        persistence.save_profile(profile, st.session_state.user_id)
        st.session_state.profile = profile

        st.session_state.last_session_summary = {
            "reviewed": len(session.results),
            "accuracy": session.accuracy,
        }
        logger.info("Finished review session: %d answers, %d items saved", len(session.results), len(updated))

    st.session_state.review_session = None
    _reset_step_state()


def cancel_session() -> None:
    """Leave the session without saving; answers given so far are discarded."""
    session = st.session_state.review_session
    if session is not None and session.results:
        logger.info("Cancelled review session, discarding %d answers", len(session.results))

    st.session_state.review_session = None
    _reset_step_state()


def record_added_items(count: int) -> None:
    """Count newly added items towards today's stats."""
    profile = progress.record_activity(st.session_state.profile, added=count)
    persistence.save_profile(profile, st.session_state.user_id)
    st.session_state.profile = profile
