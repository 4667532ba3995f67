from unittest.mock import MagicMock

import pytest

from srs_trainer import content_repo
from srs_trainer.persistence import database
from tests.factories import NOW


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def mock_collections(monkeypatch):
    """Replace MongoDB collections with MagicMocks, one per collection name."""
    collections = {
        content_repo.CARDS_COLLECTION: MagicMock(name="cards"),
        content_repo.RULES_COLLECTION: MagicMock(name="rules"),
    }
    monkeypatch.setattr(content_repo, "get_collection", lambda name: collections[name])
    return collections


@pytest.fixture
def sqlite_db(tmp_path, monkeypatch):
    """Point the progress database at a temporary SQLite file."""
    db_path = tmp_path / "trainer_db.sqlite"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_path}")
    monkeypatch.setenv("TEST_MODE", "false")
    monkeypatch.setenv("DEFAULT_USER_ID", "tester")
    database.dispose_engines()
    database.init_db()
    yield db_path
    database.dispose_engines()
