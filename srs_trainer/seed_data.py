"""
Starter content for an empty collection.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from srs_trainer.schemas import CEFRLevel, Card, ItemKind, Rule
from srs_trainer.srs import ItemStatus
from srs_trainer.srs.review_state import ensure_utc, utc_now


LEVELS = [level.value for level in CEFRLevel]


def initial_cards(now: Optional[datetime] = None) -> list[Card]:
    now = utc_now() if now is None else ensure_utc(now)
    return [
        Card(
            id="1",
            front="Serendipity",
            back="Интуитивная прозорливость, счастливая случайность",
            example="It was serendipity that I found this shop.",
            tags=["vocabulary", "advanced"],
            level=CEFRLevel.C1,
            kind=ItemKind.WORD,
        ),
        Card(
            id="2",
            front="Piece of cake",
            back="Проще простого (пара пустяков)",
            example="The exam was a piece of cake.",
            tags=["idioms", "casual"],
            level=CEFRLevel.B1,
            kind=ItemKind.PHRASE,
            is_favorite=True,
            status=ItemStatus.LEARNING,
            view_count=2,
            success_count=1,
            error_count=1,
            last_shown_date=now - timedelta(days=1),
            consecutive_successes=1,
        ),
    ]


def initial_rules() -> list[Rule]:
    return [
        Rule(
            id="r1",
            title="Present Perfect",
            explanation="Используется для связи прошлого с настоящим. Важен результат, а не время.",
            examples=["I have already finished my work.", "Have you ever been to London?"],
            level=CEFRLevel.B1,
        ),
    ]
