"""
SRS Constants and Parameters

All configurable parameters for the review scheduler in one place.
"""

from datetime import timedelta
from enum import Enum


# ---- Item Status ----

class ItemStatus(str, Enum):
    """Coarse memory-state bucket of a reviewable item."""
    NEW = "New"            # Never reviewed
    LEARNING = "Learning"  # Recalled recently, streak below graduation
    KNOWN = "Known"        # Streak reached graduation
    WEAK = "Weak"          # Forgotten on the last review


# ---- Transition Parameters ----

GRADUATION_STREAK = 3  # Consecutive successes needed to become Known


# ---- Review Intervals ----
# Minimum time since last shown before an item is due again.
# New items have no interval: they are always due.

REVIEW_INTERVALS = {
    ItemStatus.WEAK: timedelta(hours=2),
    ItemStatus.LEARNING: timedelta(hours=24),
    ItemStatus.KNOWN: timedelta(hours=120),
}


# ---- Session Priority ----
# Higher value is reviewed first

PRIORITY = {
    ItemStatus.WEAK: 4,
    ItemStatus.LEARNING: 3,
    ItemStatus.NEW: 2,
    ItemStatus.KNOWN: 1,
}


# ---- Session Configuration ----

DEFAULT_BATCH_LIMIT = 15  # Items per review session
DAILY_GOAL = 15           # Reviews per day shown on the dashboard
