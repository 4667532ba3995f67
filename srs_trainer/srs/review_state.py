"""
Review State - Reviewable Item Model and Due-ness

Defines the review-state fields every learnable item carries (vocabulary
cards and grammar rules alike) and the time-based due-ness rules.

Key concepts:
- Status: coarse memory bucket (New, Learning, Known, Weak)
- Streak: consecutive correct recalls, reset by any failure
- Due: never shown, or shown longer ago than the status interval
"""

from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from srs_trainer.srs.constants import ItemStatus, REVIEW_INTERVALS


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReviewableItem(BaseModel):
    """
    Anything subject to spaced review.

    Subclasses add kind-specific content (card text, rule explanation);
    the scheduler only reads and writes the fields declared here.

    Accepts snake_case or camelCase keys, so records exported by the
    browser version of the trainer load without conversion.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Stable unique key")
    status: ItemStatus = ItemStatus.NEW

    # Review counters
    view_count: int = Field(default=0, ge=0)
    success_count: int = Field(default=0, ge=0)
    error_count: int = Field(default=0, ge=0)
    consecutive_successes: int = Field(default=0, ge=0)

    # Absent iff the item was never reviewed
    last_shown_date: Optional[datetime] = None

    @field_validator("last_shown_date", mode="before")
    @classmethod
    def _parse_epoch_millis(cls, value):
        # Browser exports store Date.now() values (milliseconds)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        return value

    @field_validator("last_shown_date")
    @classmethod
    def _normalize_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        return ensure_utc(value)

    @model_validator(mode="after")
    def _check_review_invariants(self) -> "ReviewableItem":
        if self.view_count != self.success_count + self.error_count:
            raise ValueError(
                f"view_count ({self.view_count}) must equal success_count + error_count "
                f"({self.success_count} + {self.error_count})"
            )
        if self.consecutive_successes > self.success_count:
            raise ValueError(
                f"consecutive_successes ({self.consecutive_successes}) "
                f"exceeds success_count ({self.success_count})"
            )
        never_shown = self.last_shown_date is None
        if never_shown != (self.view_count == 0):
            raise ValueError("last_shown_date must be absent exactly when view_count is 0")
        if never_shown != (self.status == ItemStatus.NEW):
            raise ValueError("status must be New exactly when the item was never reviewed")
        return self


def new_review_fields() -> dict:
    """Initial review-state values for a freshly created item."""
    return {
        "status": ItemStatus.NEW,
        "view_count": 0,
        "success_count": 0,
        "error_count": 0,
        "last_shown_date": None,
        "consecutive_successes": 0,
    }


def elapsed_since_shown(item: ReviewableItem, now: datetime) -> Optional[timedelta]:
    """Time since the item was last shown, or None if never shown."""
    if item.last_shown_date is None:
        return None
    return ensure_utc(now) - item.last_shown_date


def is_due(item: ReviewableItem, now: Optional[datetime] = None) -> bool:
    """
    Check whether an item should be reviewed at `now`.

    Thresholds are exact elapsed durations, not calendar days:
    - New (never shown): always due
    - Weak: 2 hours
    - Learning: 24 hours
    - Known: 120 hours

    Args:
        item: Item to check
        now: Reference instant (defaults to current UTC time)

    Returns:
        True if the item belongs in the next review batch
    """
    if now is None:
        now = utc_now()

    elapsed = elapsed_since_shown(item, now)
    if elapsed is None:
        return True

    interval = REVIEW_INTERVALS.get(item.status)
    if interval is None:
        return True
    return elapsed >= interval


def next_due_at(item: ReviewableItem) -> Optional[datetime]:
    """
    Instant at which the item becomes due.

    Returns None for never-shown items, which are due at any time.
    """
    if item.last_shown_date is None:
        return None
    interval = REVIEW_INTERVALS.get(item.status)
    if interval is None:
        return item.last_shown_date
    return item.last_shown_date + interval
