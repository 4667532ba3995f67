"""
Learner progress: daily activity counters and the day streak.

All functions return new profiles and never modify their input.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from srs_trainer.schemas import DailyStat, UserProfile
from srs_trainer.srs.constants import DAILY_GOAL


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def today_stat(profile: UserProfile, today: Optional[date] = None) -> DailyStat:
    """Today's counters, or an empty stat if nothing happened yet."""
    today = today or utc_today()
    for stat in profile.stats:
        if stat.day == today:
            return stat
    return DailyStat(day=today)


def _next_streak(profile: UserProfile, today: date) -> int:
    last = profile.last_active_date
    if last == today:
        return profile.streak
    if last is None:
        return max(profile.streak, 1)
    return profile.streak + 1


def record_activity(
    profile: UserProfile,
    added: int = 0,
    repeated: int = 0,
    today: Optional[date] = None
) -> UserProfile:
    """
    Count added and reviewed items for today and update the streak.

    Streak rules:
    - Already active today: unchanged
    - Active on an earlier day: +1 (a gap does not break the streak)
    - First activity ever: at least 1

    Args:
        profile: Current profile
        added: Items added to the collection
        repeated: Items reviewed
        today: Calendar day of the activity (defaults to today, UTC)

    Returns:
        Updated copy of the profile
    """
    today = today or utc_today()

    stats = [stat.model_copy() for stat in profile.stats]
    for index, stat in enumerate(stats):
        if stat.day == today:
            stats[index] = stat.model_copy(update={
                "added_count": stat.added_count + added,
                "repeated_count": stat.repeated_count + repeated,
            })
            break
    else:
        stats.append(DailyStat(day=today, added_count=added, repeated_count=repeated))

    return profile.model_copy(update={
        "stats": stats,
        "last_active_date": today,
        "streak": _next_streak(profile, today),
    })


def refresh_streak(profile: UserProfile, today: Optional[date] = None) -> UserProfile:
    """
    Load-time streak check.

    A profile that missed days keeps a streak of at least 1; the next
    activity adds one to it.
    """
    today = today or utc_today()
    last = profile.last_active_date
    if last is None or last >= today - timedelta(days=1):
        return profile
    return profile.model_copy(update={"streak": max(profile.streak, 1)})


def daily_goal_progress(
    profile: UserProfile,
    today: Optional[date] = None,
    goal: int = DAILY_GOAL
) -> int:
    """Percent of today's review goal reached, capped at 100."""
    if goal <= 0:
        return 100
    repeated = today_stat(profile, today).repeated_count
    return min(100, round(repeated / goal * 100))
