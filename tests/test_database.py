from datetime import date, timedelta

import pytest

from srs_trainer import persistence
from srs_trainer.persistence import database
from srs_trainer.review_session import ReviewResult, apply_review_results, build_review_events
from srs_trainer.schemas import DailyStat, UserProfile
from srs_trainer.srs import ItemStatus
from tests.factories import NOW, make_card, make_rule


def test_database_url_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValueError, match="DATABASE_URL"):
        database.get_database_url()


def test_test_mode_switches_database(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost:5432/trainer_db")
    monkeypatch.setenv("TEST_MODE", "true")
    assert database.get_database_url().endswith("/test_trainer_db")


def test_review_events_round_trip(sqlite_db):
    before = [make_card("c1"), make_rule("r1", ItemStatus.LEARNING, timedelta(days=2))]
    results = [ReviewResult("c1", False), ReviewResult("r1", True, "standard")]
    _, after = apply_review_results(before, results, NOW)

    persistence.batch_log_review_events(build_review_events(before, after, results, "s1"))
    events = persistence.get_recent_events()

    assert [event["item_id"] for event in events] == ["r1", "c1"]
    first = events[1]
    assert first["remembered"] is False
    assert first["status_before"] == "New"
    assert first["status_after"] == "Weak"
    assert first["item_kind"] == "Word"
    assert first["timestamp"] == NOW
    assert first["session_position"] == 0


def test_events_are_scoped_per_user(sqlite_db):
    event = {
        "item_id": "c1",
        "timestamp": NOW,
        "remembered": True,
        "status_after": "Learning",
        "consecutive_successes_after": 1,
    }
    persistence.batch_log_review_events([event], user_id="someone-else")

    assert persistence.get_recent_events() == []
    assert len(persistence.get_recent_events(user_id="someone-else")) == 1


def test_logging_no_events_is_a_no_op(sqlite_db):
    persistence.batch_log_review_events([])
    assert persistence.get_recent_events() == []


def test_unknown_profile_loads_defaults(sqlite_db):
    profile = persistence.load_profile()
    assert profile == UserProfile()


def test_profile_round_trip(sqlite_db):
    profile = UserProfile(
        name="Anna",
        level="C1",
        streak=4,
        last_active_date=date(2026, 3, 10),
        stats=[
            DailyStat(day=date(2026, 3, 9), added_count=1, repeated_count=2),
            DailyStat(day=date(2026, 3, 10), repeated_count=5),
        ],
    )

    persistence.save_profile(profile)
    assert persistence.load_profile() == profile

    changed = profile.model_copy(update={
        "streak": 5,
        "stats": [DailyStat(day=date(2026, 3, 10), repeated_count=9)],
    })
    persistence.save_profile(changed)
    loaded = persistence.load_profile()

    assert loaded.streak == 5
    assert [stat.repeated_count for stat in loaded.stats] == [2, 9]


def test_reset_db_clears_progress(sqlite_db):
    persistence.save_profile(UserProfile(streak=7))
    persistence.reset_db()
    assert persistence.load_profile().streak == 1
