"""
SRS - Spaced Repetition Scheduling Core

Main API for the review scheduler.

This package implements a simple discrete-state review model with:
- Four memory buckets: New, Learning, Known, Weak
- Graduation to Known after three consecutive correct recalls
- Immediate demotion to Weak on any failure
- Status-based review intervals (2h, 24h, 120h)

Quick start:
    from srs_trainer import srs

    # Build today's review batch
    batch = srs.select_due_batch(items, limit=15)

    # Apply a recall outcome (pure, returns a new item)
    item = srs.apply_review_outcome(item, remembered=True)
"""

# Core scheduler API (algorithm logic)
from srs_trainer.srs.scheduler import (
    apply_review_outcome,
    priority_value,
    select_due_batch,
    count_due,
)

# Item state model
from srs_trainer.srs.review_state import (
    ReviewableItem,
    new_review_fields,
    elapsed_since_shown,
    is_due,
    next_due_at,
)

# Constants and parameters
from srs_trainer.srs.constants import (
    ItemStatus,
    GRADUATION_STREAK,
    REVIEW_INTERVALS,
    PRIORITY,
    DEFAULT_BATCH_LIMIT,
    DAILY_GOAL,
)


__all__ = [
    # Core algorithm
    "apply_review_outcome",
    "priority_value",
    "select_due_batch",
    "count_due",

    # Item state
    "ReviewableItem",
    "new_review_fields",
    "elapsed_since_shown",
    "is_due",
    "next_due_at",

    # Enums
    "ItemStatus",

    # Parameters
    "GRADUATION_STREAK",
    "REVIEW_INTERVALS",
    "PRIORITY",
    "DEFAULT_BATCH_LIMIT",
    "DAILY_GOAL",
]
