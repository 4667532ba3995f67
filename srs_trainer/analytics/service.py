"""
Service layer to assemble the dashboard.
"""

from __future__ import annotations

import random
from datetime import date, datetime
from typing import Optional, Sequence

from srs_trainer import progress, srs
from srs_trainer.analytics.metrics import (
    daily_activity_frame,
    items_frame,
    kind_counts,
    status_counts,
    weak_cards,
    word_of_the_day,
)
from srs_trainer.analytics.types import DashboardData
from srs_trainer.schemas import UserProfile


def build_dashboard(
    items: Sequence[srs.ReviewableItem],
    profile: UserProfile,
    today: Optional[date] = None,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None
) -> DashboardData:
    """
    Build all KPI values and series needed by the dashboard page.
    """
    today = today or progress.utc_today()
    frame = items_frame(items)
    stat = progress.today_stat(profile, today)

    return DashboardData(
        status_counts=status_counts(frame),
        kind_counts=kind_counts(frame),
        due_count=srs.count_due(items, now),
        streak=profile.streak,
        today_added=stat.added_count,
        today_repeated=stat.repeated_count,
        daily_goal_percent=progress.daily_goal_progress(profile, today),
        activity_daily=daily_activity_frame(profile, today),
        weak_cards=weak_cards(items),
        word_of_the_day=word_of_the_day(items, rng),
    )
