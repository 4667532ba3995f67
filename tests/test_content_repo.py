from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError
from pymongo import ReplaceOne

from srs_trainer import content_repo
from srs_trainer.schemas import Card, Rule
from srs_trainer.srs import ItemStatus
from tests.factories import NOW, make_card, make_rule


def test_get_collection_requires_mongo_uri(monkeypatch):
    monkeypatch.setattr(content_repo, "_client", None)
    monkeypatch.delenv("MONGO_URI", raising=False)
    with pytest.raises(ValueError, match="MONGO_URI"):
        content_repo.get_collection(content_repo.CARDS_COLLECTION)


def test_get_all_items_validates_documents(mock_collections):
    card = make_card("c1", ItemStatus.WEAK, timedelta(hours=1))
    mock_collections["cards"].find.return_value = [card.model_dump(mode="json")]
    mock_collections["rules"].find.return_value = [make_rule("r1").model_dump(mode="json")]

    items = content_repo.get_all_items()

    assert items == [card, make_rule("r1")]
    mock_collections["cards"].find.assert_called_once_with({}, {"_id": 0})


def test_malformed_document_fails_at_load(mock_collections):
    broken = make_card().model_dump(mode="json")
    broken["view_count"] = 3
    mock_collections["cards"].find.return_value = [broken]

    with pytest.raises(ValidationError):
        content_repo.get_all_cards()


def test_get_item_falls_back_to_rules(mock_collections):
    mock_collections["cards"].find_one.return_value = None
    mock_collections["rules"].find_one.return_value = make_rule("r1").model_dump(mode="json")

    item = content_repo.get_item("r1")

    assert isinstance(item, Rule)
    mock_collections["rules"].find_one.assert_called_once_with({"id": "r1"}, {"_id": 0})


def test_get_item_missing(mock_collections):
    mock_collections["cards"].find_one.return_value = None
    mock_collections["rules"].find_one.return_value = None
    assert content_repo.get_item("nope") is None


def test_search_cards_builds_escaped_query(mock_collections):
    mock_collections["cards"].find.return_value = []

    content_repo.search_cards(" a.b ", favorites_only=True)

    query, projection = mock_collections["cards"].find.call_args.args
    pattern = {"$regex": r"a\.b", "$options": "i"}
    assert query == {"$or": [{"front": pattern}, {"back": pattern}], "is_favorite": True}
    assert projection == {"_id": 0}


def test_search_rules_without_filters_matches_everything(mock_collections):
    mock_collections["rules"].find.return_value = []
    content_repo.search_rules()
    assert mock_collections["rules"].find.call_args.args[0] == {}


def test_add_and_update_card(mock_collections):
    card = make_card("c9")
    mock_collections["cards"].replace_one.return_value = MagicMock(matched_count=0)

    content_repo.add_card(card)
    updated = content_repo.update_card(card)

    document = mock_collections["cards"].insert_one.call_args.args[0]
    assert document["id"] == "c9"
    assert document["status"] == "New"
    assert updated is False


def test_delete_rule(mock_collections):
    mock_collections["rules"].delete_one.return_value = MagicMock(deleted_count=1)
    assert content_repo.delete_rule("r1") is True
    mock_collections["rules"].delete_one.assert_called_once_with({"id": "r1"})


def test_save_items_splits_by_collection(mock_collections):
    items = [make_card("c1"), make_rule("r1"), make_card("c2")]

    saved = content_repo.save_items(items)

    assert saved == 3
    card_ops = mock_collections["cards"].bulk_write.call_args.args[0]
    rule_ops = mock_collections["rules"].bulk_write.call_args.args[0]
    assert len(card_ops) == 2 and len(rule_ops) == 1
    assert all(isinstance(op, ReplaceOne) for op in card_ops + rule_ops)


def test_save_items_empty(mock_collections):
    assert content_repo.save_items([]) == 0
    mock_collections["cards"].bulk_write.assert_not_called()


def test_seed_if_empty(mock_collections):
    mock_collections["cards"].count_documents.return_value = 0
    mock_collections["rules"].count_documents.return_value = 0

    assert content_repo.seed_if_empty(NOW) is True

    card_ops = mock_collections["cards"].bulk_write.call_args.args[0]
    assert len(card_ops) == 2
    assert mock_collections["rules"].bulk_write.called


def test_seed_skips_non_empty_collection(mock_collections):
    mock_collections["cards"].count_documents.return_value = 4
    mock_collections["rules"].count_documents.return_value = 0

    assert content_repo.seed_if_empty(NOW) is False
    mock_collections["cards"].bulk_write.assert_not_called()


def test_generate_item_id_is_unique():
    assert content_repo.generate_item_id() != content_repo.generate_item_id()
