import random
from datetime import date, timedelta

from srs_trainer.analytics import build_dashboard
from srs_trainer.analytics.metrics import (
    daily_activity_frame,
    items_frame,
    kind_counts,
    status_counts,
    weak_cards,
    word_of_the_day,
)
from srs_trainer.schemas import DailyStat, ItemKind, UserProfile
from srs_trainer.srs import ItemStatus
from tests.factories import NOW, make_card, make_rule


TODAY = NOW.date()


def _collection():
    return [
        make_card("new"),
        make_card("weak", ItemStatus.WEAK, timedelta(hours=5), kind=ItemKind.PHRASE),
        make_card("known", ItemStatus.KNOWN, timedelta(days=1)),
        make_rule("rule", ItemStatus.LEARNING, timedelta(days=2)),
    ]


def test_counts_cover_every_label():
    frame = items_frame(_collection())

    assert status_counts(frame) == {"New": 1, "Learning": 1, "Known": 1, "Weak": 1}
    assert kind_counts(frame) == {"Word": 2, "Phrase": 1, "Rule": 1}


def test_counts_on_empty_collection():
    frame = items_frame([])
    assert status_counts(frame) == {"New": 0, "Learning": 0, "Known": 0, "Weak": 0}
    assert sum(kind_counts(frame).values()) == 0


def test_daily_activity_fills_missing_days():
    profile = UserProfile(stats=[
        DailyStat(day=TODAY, added_count=2, repeated_count=5),
        DailyStat(day=TODAY - timedelta(days=2), repeated_count=3),
        DailyStat(day=TODAY - timedelta(days=30), repeated_count=9),
    ])

    frame = daily_activity_frame(profile, TODAY)

    assert len(frame) == 7
    assert frame.index[-1].date() == TODAY
    assert frame["repeated"].tolist() == [0, 0, 0, 0, 3, 0, 5]
    assert frame["added"].sum() == 2


def test_daily_activity_without_stats():
    frame = daily_activity_frame(UserProfile(), date(2026, 1, 1), days=3)
    assert frame["added"].tolist() == [0, 0, 0]


def test_weak_cards_and_word_of_the_day():
    items = _collection()
    assert [card.id for card in weak_cards(items)] == ["weak"]
    assert word_of_the_day(items, random.Random(0)).id in {"new", "weak", "known"}
    assert word_of_the_day([make_rule()]) is None


def test_build_dashboard():
    profile = UserProfile(
        streak=3,
        last_active_date=TODAY,
        stats=[DailyStat(day=TODAY, added_count=1, repeated_count=6)],
    )

    data = build_dashboard(_collection(), profile, today=TODAY, now=NOW, rng=random.Random(1))

    assert data.due_count == 3
    assert data.streak == 3
    assert (data.today_added, data.today_repeated) == (1, 6)
    assert data.daily_goal_percent == 40
    assert data.status_counts["Weak"] == 1
    assert len(data.activity_daily) == 7
