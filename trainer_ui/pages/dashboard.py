"""
Dashboard page rendering.
"""

from __future__ import annotations

import streamlit as st

from srs_trainer import content_repo
from srs_trainer.analytics import build_dashboard


def render_dashboard_page() -> None:
    profile = st.session_state.profile
    items = content_repo.get_all_items()
    dashboard = build_dashboard(items, profile)

    st.subheader(f"Hello, {profile.name}!")
    st.caption(f"🔥 Streak: {dashboard.streak} day(s)")

    st.markdown("**Daily goal**")
    st.progress(dashboard.daily_goal_percent / 100, text=f"{dashboard.daily_goal_percent}%")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Due now", dashboard.due_count)
    with col2:
        st.metric("Reviewed today", dashboard.today_repeated)
    with col3:
        st.metric("Added today", dashboard.today_added)

    st.markdown("### Collection")
    status_cols = st.columns(len(dashboard.status_counts))
    for col, (status, count) in zip(status_cols, dashboard.status_counts.items()):
        with col:
            st.metric(status, count)
    st.caption(
        f"Words: {dashboard.kind_counts['Word']} · "
        f"Phrases: {dashboard.kind_counts['Phrase']} · "
        f"Rules: {dashboard.kind_counts['Rule']}"
    )

    st.markdown("### Last 7 days")
    st.bar_chart(dashboard.activity_daily)

    if dashboard.word_of_the_day is not None:
        card = dashboard.word_of_the_day
        st.markdown("### Word of the day")
        st.markdown(f"**{card.front}** - {card.back}")
        if card.example:
            st.caption(card.example)

    if dashboard.weak_cards:
        st.markdown("### Weak spots")
        for card in dashboard.weak_cards:
            st.markdown(f"- **{card.front}** - {card.back}")
