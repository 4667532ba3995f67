from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from srs_trainer import progress
from srs_trainer.schemas import UserProfile
from srs_trainer.srs import ItemStatus
from tests.factories import make_card
from trainer_ui import session_controller


class InMemoryContentRepo:
    """Dict-backed stand-in for content_repo's load and bulk-save calls."""

    def __init__(self, items):
        self.items = {item.id: item for item in items}

    def get_all_items(self):
        return list(self.items.values())

    def save_items(self, items):
        for item in items:
            self.items[item.id] = item
        return len(items)


@pytest.fixture
def repo(monkeypatch):
    repo = InMemoryContentRepo([make_card("a"), make_card("b", front="old")])
    monkeypatch.setattr(session_controller, "content_repo", repo)
    return repo


@pytest.fixture
def store(monkeypatch):
    store = MagicMock()
    monkeypatch.setattr(session_controller, "persistence", store)
    return store


@pytest.fixture
def state(monkeypatch):
    session_state = SimpleNamespace(
        user_id="tester",
        profile=UserProfile(),
        review_session=None,
        answer_mode="standard",
        show_answer=False,
        written_feedback=None,
        last_session_summary=None,
    )
    monkeypatch.setattr(session_controller, "st", SimpleNamespace(session_state=session_state))
    return session_state


def test_start_builds_batch_from_collection(repo, store, state):
    assert session_controller.start_review_session() == 2
    assert [item.id for item in state.review_session.items] == ["a", "b"]
    assert state.answer_mode == "standard"


def test_finish_applies_results_to_current_collection(repo, store, state):
    session_controller.start_review_session()

    # Learner edits and deletes cards in the library while the session runs
    del repo.items["a"]
    repo.items["b"] = repo.items["b"].model_copy(update={"front": "edited"})

    session_controller.answer_current(True)
    session_controller.answer_current(True)

    assert list(repo.items) == ["b"]
    assert repo.items["b"].front == "edited"
    assert repo.items["b"].status == ItemStatus.LEARNING

    events = store.batch_log_review_events.call_args.args[0]
    assert [event["item_id"] for event in events] == ["b"]
    assert events[0]["status_before"] == ItemStatus.NEW

    store.save_profile.assert_called_once()
    assert progress.today_stat(state.profile).repeated_count == 2
    assert state.last_session_summary == {"reviewed": 2, "accuracy": 1.0}
    assert state.review_session is None


def test_finish_without_answers_saves_nothing(repo, store, state):
    session_controller.start_review_session()

    session_controller.finish_session()

    assert state.review_session is None
    assert state.last_session_summary is None
    store.batch_log_review_events.assert_not_called()
    store.save_profile.assert_not_called()
    assert all(item.status == ItemStatus.NEW for item in repo.items.values())


def test_cancel_discards_answers(repo, store, state):
    session_controller.start_review_session()
    session_controller.answer_current(False)

    session_controller.cancel_session()

    assert state.review_session is None
    assert repo.items["a"].status == ItemStatus.NEW
    assert repo.items["a"].view_count == 0
    store.batch_log_review_events.assert_not_called()
    store.save_profile.assert_not_called()
    assert state.profile == UserProfile()


def test_finish_when_no_session_is_a_no_op(repo, store, state):
    session_controller.finish_session()
    store.batch_log_review_events.assert_not_called()
