"""
Metric computations for the dashboard.
"""

from __future__ import annotations

import random
from datetime import date
from typing import Optional, Sequence

import pandas as pd

from srs_trainer.schemas import Card, ItemKind, UserProfile
from srs_trainer.srs import ItemStatus, ReviewableItem


def items_frame(items: Sequence[ReviewableItem]) -> pd.DataFrame:
    """
    One row per item with its kind and status.
    """
    rows = [
        {
            "id": item.id,
            "kind": getattr(getattr(item, "kind", None), "value", None),
            "status": ItemStatus(item.status).value,
        }
        for item in items
    ]
    return pd.DataFrame(rows, columns=["id", "kind", "status"])


def status_counts(frame: pd.DataFrame) -> dict[str, int]:
    """
    Count items per status; every status is present, zero if unused.
    """
    labels = [status.value for status in ItemStatus]
    if frame.empty:
        return {label: 0 for label in labels}
    counts = frame["status"].value_counts().reindex(labels, fill_value=0)
    return {label: int(count) for label, count in counts.items()}


def kind_counts(frame: pd.DataFrame) -> dict[str, int]:
    """
    Count items per kind (Word, Phrase, Rule).
    """
    labels = [kind.value for kind in ItemKind]
    if frame.empty:
        return {label: 0 for label in labels}
    counts = frame["kind"].value_counts().reindex(labels, fill_value=0)
    return {label: int(count) for label, count in counts.items()}


def daily_activity_frame(
    profile: UserProfile,
    today: date,
    days: int = 7
) -> pd.DataFrame:
    """
    Added and repeated counts for the last `days` calendar days.

    Days without activity are filled with zeros.
    """
    day_index = pd.date_range(end=pd.Timestamp(today), periods=days, freq="D")
    if not profile.stats:
        return pd.DataFrame(
            {"added": 0, "repeated": 0},
            index=day_index,
            dtype="int64",
        )

    stats_df = pd.DataFrame(
        {
            "added": [stat.added_count for stat in profile.stats],
            "repeated": [stat.repeated_count for stat in profile.stats],
        },
        index=pd.to_datetime([stat.day for stat in profile.stats]),
    )
    stats_df = stats_df.groupby(level=0).sum()
    return stats_df.reindex(day_index, fill_value=0).astype("int64")


def weak_cards(items: Sequence[ReviewableItem], limit: int = 5) -> list[Card]:
    """
    First `limit` cards currently marked Weak.
    """
    weak = [item for item in items if isinstance(item, Card) and item.status == ItemStatus.WEAK]
    return weak[:limit]


def word_of_the_day(
    items: Sequence[ReviewableItem],
    rng: Optional[random.Random] = None
) -> Optional[Card]:
    """
    Random card to feature on the dashboard.
    """
    cards = [item for item in items if isinstance(item, Card)]
    if not cards:
        return None
    rng = rng or random.Random()
    return rng.choice(cards)
