"""
Types for the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from srs_trainer.schemas import Card


@dataclass(frozen=True)
class DashboardData:
    """
    Precomputed metrics and series for the dashboard page.
    """
    status_counts: dict[str, int]
    kind_counts: dict[str, int]
    due_count: int
    streak: int
    today_added: int
    today_repeated: int
    daily_goal_percent: int
    activity_daily: pd.DataFrame
    weak_cards: list[Card]
    word_of_the_day: Optional[Card]
