"""
Review session - batch walking, answer checking and result application.

A session is a pre-computed batch of due items. The UI walks it one item
at a time, records whether each was remembered, and at the end the
results are folded back into the full collection with the scheduler's
transition function.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional, Sequence, TypeVar

from srs_trainer import srs
from srs_trainer.schemas import Card
from srs_trainer.srs.review_state import ReviewableItem, ensure_utc, utc_now


AnswerMode = Literal["standard", "writing"]

ItemT = TypeVar("ItemT", bound=ReviewableItem)

WRITING_MODE_THRESHOLD = 0.66  # rng.random() above this picks writing mode

_PUNCTUATION = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")


@dataclass(frozen=True)
class ReviewResult:
    """Outcome of one review step."""
    item_id: str
    remembered: bool
    answer_mode: AnswerMode = "standard"


@dataclass
class ReviewSession:
    """
    Launch-scoped state for one review session.
    """
    items: list[ReviewableItem]
    session_id: Optional[str] = None
    position: int = 0
    results: list[ReviewResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def is_complete(self) -> bool:
        return self.position >= len(self.items)

    @property
    def current(self) -> Optional[ReviewableItem]:
        if self.is_complete:
            return None
        return self.items[self.position]

    @property
    def progress(self) -> float:
        """Fraction of the batch already answered (0-1)."""
        if not self.items:
            return 1.0
        return min(self.position, len(self.items)) / len(self.items)

    @property
    def accuracy(self) -> Optional[float]:
        """Share of remembered answers, or None before the first answer."""
        if not self.results:
            return None
        correct = sum(1 for result in self.results if result.remembered)
        return correct / len(self.results)

    def record(self, remembered: bool, answer_mode: AnswerMode = "standard") -> ReviewResult:
        """
        Record the outcome for the current item and advance.

        Raises:
            IndexError: If the session is already complete
        """
        item = self.current
        if item is None:
            raise IndexError("Review session is already complete")

        result = ReviewResult(item_id=item.id, remembered=remembered, answer_mode=answer_mode)
        self.results.append(result)
        self.position += 1
        return result


def choose_answer_mode(item: ReviewableItem, rng: Optional[random.Random] = None) -> AnswerMode:
    """
    Pick how the learner answers this item.

    Writing mode (typing the English side) is only offered for cards the
    learner has already seen, about one time in three.
    """
    rng = rng or random.Random()
    if not isinstance(item, Card) or item.status == srs.ItemStatus.NEW:
        return "standard"
    return "writing" if rng.random() > WRITING_MODE_THRESHOLD else "standard"


def normalize_answer(text: str) -> str:
    """Lowercase, trim and drop punctuation for answer comparison."""
    return _PUNCTUATION.sub("", text.strip().lower())


def check_written_answer(answer: str, target: str) -> bool:
    """Check a typed answer against the expected English side."""
    return normalize_answer(answer) == normalize_answer(target)


def apply_review_results(
    items: Sequence[ItemT],
    results: Sequence[ReviewResult],
    now: Optional[datetime] = None
) -> tuple[list[ItemT], list[ItemT]]:
    """
    Fold session results back into the full collection.

    Each item with a result gets one transition; the first result recorded
    for an id is the one applied. Items without a result are returned as is.

    Args:
        items: Full item collection
        results: Results collected during the session
        now: Review instant shared by all updates (defaults to now)

    Returns:
        Tuple of (full updated collection, only the updated items)
    """
    now = utc_now() if now is None else ensure_utc(now)

    outcome_by_id: dict[str, bool] = {}
    for result in results:
        outcome_by_id.setdefault(result.item_id, result.remembered)

    all_items: list[ItemT] = []
    updated: list[ItemT] = []
    for item in items:
        if item.id in outcome_by_id:
            item = srs.apply_review_outcome(item, outcome_by_id[item.id], now)
            updated.append(item)
        all_items.append(item)

    return all_items, updated


def build_review_events(
    before: Sequence[ReviewableItem],
    after: Sequence[ReviewableItem],
    results: Sequence[ReviewResult],
    session_id: Optional[str] = None
) -> list[dict]:
    """
    Build event dicts for the progress database.

    Args:
        before: Items as they were when the session started
        after: Items returned by apply_review_results()
        results: Results collected during the session
        session_id: Optional session identifier

    Returns:
        List of dicts ready to pass to persistence.batch_log_review_events()
    """
    before_by_id = {item.id: item for item in before}
    after_by_id = {item.id: item for item in after}

    events = []
    seen: set[str] = set()
    for position, result in enumerate(results):
        if result.item_id in seen or result.item_id not in after_by_id:
            continue
        seen.add(result.item_id)

        old = before_by_id.get(result.item_id)
        new = after_by_id[result.item_id]
        events.append({
            'item_id': new.id,
            'item_kind': getattr(new, 'kind', None),
            'timestamp': new.last_shown_date,
            'remembered': result.remembered,
            'answer_mode': result.answer_mode,
            'status_before': old.status if old is not None else None,
            'status_after': new.status,
            'consecutive_successes_after': new.consecutive_successes,
            'session_id': session_id,
            'session_position': position,
        })
    return events
