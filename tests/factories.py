"""Builders for valid items in a given review state."""

from datetime import datetime, timedelta, timezone

from srs_trainer.schemas import Card, ItemKind, Rule
from srs_trainer.srs import ItemStatus


NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)

# Smallest valid counters for each status
_STATE_COUNTERS = {
    ItemStatus.NEW: dict(view_count=0, success_count=0, error_count=0, consecutive_successes=0),
    ItemStatus.LEARNING: dict(view_count=1, success_count=1, error_count=0, consecutive_successes=1),
    ItemStatus.KNOWN: dict(view_count=3, success_count=3, error_count=0, consecutive_successes=3),
    ItemStatus.WEAK: dict(view_count=1, success_count=0, error_count=1, consecutive_successes=0),
}


def _last_shown(status, shown_ago, now):
    if status == ItemStatus.NEW:
        return None
    return now - (shown_ago if shown_ago is not None else timedelta(days=30))


def make_card(
    item_id: str = "c1",
    status: ItemStatus = ItemStatus.NEW,
    shown_ago: timedelta | None = None,
    now: datetime = NOW,
    **fields,
) -> Card:
    """Build a valid card in `status`, last shown `shown_ago` before `now`."""
    values = dict(
        id=item_id,
        front=f"word {item_id}",
        back=f"слово {item_id}",
        kind=ItemKind.WORD,
        status=status,
        last_shown_date=_last_shown(status, shown_ago, now),
        **_STATE_COUNTERS[status],
    )
    values.update(fields)
    return Card(**values)


def make_rule(
    item_id: str = "r1",
    status: ItemStatus = ItemStatus.NEW,
    shown_ago: timedelta | None = None,
    now: datetime = NOW,
) -> Rule:
    return Rule(
        id=item_id,
        title=f"Rule {item_id}",
        explanation="Explanation",
        status=status,
        last_shown_date=_last_shown(status, shown_ago, now),
        **_STATE_COUNTERS[status],
    )
