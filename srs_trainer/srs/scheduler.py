"""
Scheduler - Review State Transitions and Batch Selection

Pure scheduling logic (no database calls).

Main workflow:
1. Caller loads the full item collection
2. select_due_batch() filters, orders and caps the review batch
3. Caller runs the review loop and collects outcomes
4. apply_review_outcome() returns the updated item for each outcome
5. Caller saves the updated items

This module handles ONLY the algorithm logic.
Persistence is handled by the content repository and progress database.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Iterable, Optional, TypeVar

from srs_trainer.srs.constants import (
    DEFAULT_BATCH_LIMIT,
    GRADUATION_STREAK,
    PRIORITY,
    ItemStatus,
)
from srs_trainer.srs.review_state import ReviewableItem, ensure_utc, is_due, utc_now


ItemT = TypeVar("ItemT", bound=ReviewableItem)

# Never-shown items sort as if shown at the epoch
_NEVER_SHOWN = datetime(1970, 1, 1, tzinfo=timezone.utc)


def apply_review_outcome(
    item: ItemT,
    remembered: bool,
    now: Optional[datetime] = None
) -> ItemT:
    """
    Apply one recall outcome and return the updated item.

    The input item is left untouched; a new instance of the same class
    is returned with the review fields recomputed.

    Rules:
    - Every review: view_count += 1, last_shown_date = now
    - Remembered: success_count += 1, streak += 1;
      Known once the streak reaches GRADUATION_STREAK, otherwise Learning
    - Forgotten: error_count += 1, streak reset to 0, always Weak

    Args:
        item: Item in any valid state (card or rule)
        remembered: Whether the learner recalled the item
        now: Review instant (defaults to now, read once)

    Returns:
        Updated copy of the item
    """
    now = utc_now() if now is None else ensure_utc(now)

    changes = {
        "view_count": item.view_count + 1,
        "last_shown_date": now,
    }

    if remembered:
        streak = item.consecutive_successes + 1
        changes["success_count"] = item.success_count + 1
        changes["consecutive_successes"] = streak
        changes["status"] = (
            ItemStatus.KNOWN if streak >= GRADUATION_STREAK else ItemStatus.LEARNING
        )
    else:
        changes["error_count"] = item.error_count + 1
        changes["consecutive_successes"] = 0
        changes["status"] = ItemStatus.WEAK

    return item.model_copy(update=changes, deep=True)


def priority_value(status: ItemStatus) -> int:
    """
    Session priority for a status (Weak > Learning > New > Known).

    Raises:
        ValueError: If status is not one of the four item statuses
    """
    try:
        return PRIORITY[ItemStatus(status)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown item status: {status!r}") from None


def _batch_sort_key(item: ReviewableItem) -> tuple[int, datetime]:
    last_shown = item.last_shown_date or _NEVER_SHOWN
    return (-priority_value(item.status), last_shown)


def select_due_batch(
    items: Iterable[ItemT],
    limit: Optional[int] = DEFAULT_BATCH_LIMIT,
    now: Optional[datetime] = None
) -> list[ItemT]:
    """
    Select the next review batch.

    Order:
    1. Due items only (see review_state.is_due)
    2. Highest priority first: Weak, Learning, New, Known
    3. Within a status, least recently shown first (never shown first)

    The sort is stable, so exact ties keep their input order and the
    result is deterministic for the same (items, limit, now).

    Args:
        items: Full item collection (cards, rules or both)
        limit: Maximum batch size (None for every due item)
        now: Reference instant (defaults to now, read once)

    Returns:
        Ordered list of due items, possibly empty
    """
    now = utc_now() if now is None else ensure_utc(now)

    due_items = [item for item in items if is_due(item, now)]
    due_items.sort(key=_batch_sort_key)

    if limit is None:
        return due_items
    return due_items[:max(limit, 0)]


def count_due(items: Iterable[ReviewableItem], now: Optional[datetime] = None) -> int:
    """Number of items due at `now`."""
    now = utc_now() if now is None else ensure_utc(now)
    return sum(1 for item in items if is_due(item, now))
