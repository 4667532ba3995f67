"""
MongoDB repository for cards and grammar rules.

Holds the learner's collection: create, update, delete, bulk save and
full loads for the scheduler. Every document read back is validated
through the pydantic models, so malformed records fail at this boundary
instead of reaching the scheduler.
"""

from __future__ import annotations

import logging
import os
import re
import uuid
from datetime import datetime
from typing import Optional, Sequence

from dotenv import load_dotenv
from pymongo import MongoClient, ReplaceOne
from pymongo.collection import Collection

from srs_trainer import seed_data
from srs_trainer.schemas import Card, LearnableItem, Rule, parse_item

# Load environment
load_dotenv()

logger = logging.getLogger(__name__)

# Configuration
DB_NAME = "english_trainer"
CARDS_COLLECTION = "cards"
RULES_COLLECTION = "rules"

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None


# ---- Connection Management ----

def get_collection(name: str) -> Collection:
    """
    Get a MongoDB collection of the trainer database.

    Uses a persistent client that's reused across requests.

    Args:
        name: Collection name (CARDS_COLLECTION or RULES_COLLECTION)

    Returns:
        MongoDB collection object

    Raises:
        ValueError: If MONGO_URI is not set
    """
    global _client

    if _client is None:
        mongo_uri = os.getenv("MONGO_URI")
        if not mongo_uri:
            raise ValueError("MONGO_URI not found in environment variables")

        _client = MongoClient(
            mongo_uri,
            maxPoolSize=10,
            minPoolSize=1,
            maxIdleTimeMS=60000
        )
        logger.info("Connected to MongoDB database %s", DB_NAME)

    return _client[DB_NAME][name]


def _collection_for(item: LearnableItem) -> Collection:
    if isinstance(item, Rule):
        return get_collection(RULES_COLLECTION)
    return get_collection(CARDS_COLLECTION)


def _to_document(item: LearnableItem) -> dict:
    return item.model_dump(mode="json")


# ---- Query Functions ----

def get_all_cards() -> list[Card]:
    """Load every card in the collection."""
    collection = get_collection(CARDS_COLLECTION)
    return [Card.model_validate(doc) for doc in collection.find({}, {"_id": 0})]


def get_all_rules() -> list[Rule]:
    """Load every grammar rule in the collection."""
    collection = get_collection(RULES_COLLECTION)
    return [Rule.model_validate(doc) for doc in collection.find({}, {"_id": 0})]


def get_all_items() -> list[LearnableItem]:
    """
    Load the full reviewable collection (cards first, then rules).

    This is the input the scheduler works on.
    """
    return [*get_all_cards(), *get_all_rules()]


def get_item(item_id: str) -> Optional[LearnableItem]:
    """
    Get a card or rule by its id.

    Returns:
        The item, or None if not found
    """
    for name in (CARDS_COLLECTION, RULES_COLLECTION):
        doc = get_collection(name).find_one({"id": item_id}, {"_id": 0})
        if doc is not None:
            return parse_item(doc)
    return None


def _text_query(search: Optional[str], fields: Sequence[str], favorites_only: bool) -> dict:
    query: dict = {}
    if search:
        pattern = {"$regex": re.escape(search.strip()), "$options": "i"}
        query["$or"] = [{field: pattern} for field in fields]
    if favorites_only:
        query["is_favorite"] = True
    return query


def search_cards(search: Optional[str] = None, favorites_only: bool = False) -> list[Card]:
    """
    Find cards whose front or back contains `search` (case-insensitive).

    Args:
        search: Substring to look for (None or empty matches everything)
        favorites_only: If True, only return cards marked as favorite
    """
    collection = get_collection(CARDS_COLLECTION)
    query = _text_query(search, ["front", "back"], favorites_only)
    return [Card.model_validate(doc) for doc in collection.find(query, {"_id": 0})]


def search_rules(search: Optional[str] = None, favorites_only: bool = False) -> list[Rule]:
    """
    Find rules whose title or explanation contains `search` (case-insensitive).
    """
    collection = get_collection(RULES_COLLECTION)
    query = _text_query(search, ["title", "explanation"], favorites_only)
    return [Rule.model_validate(doc) for doc in collection.find(query, {"_id": 0})]


def count_items() -> int:
    """Total number of cards and rules."""
    return (
        get_collection(CARDS_COLLECTION).count_documents({})
        + get_collection(RULES_COLLECTION).count_documents({})
    )


# ---- Write Functions ----

def generate_item_id() -> str:
    """
    Generate a unique item ID (UUID).

    Returns:
        UUID string
    """
    return str(uuid.uuid4())


def add_card(card: Card) -> Card:
    """Insert a new card."""
    get_collection(CARDS_COLLECTION).insert_one(_to_document(card))
    logger.info("Added card %s (%s)", card.id, card.front)
    return card


def add_rule(rule: Rule) -> Rule:
    """Insert a new grammar rule."""
    get_collection(RULES_COLLECTION).insert_one(_to_document(rule))
    logger.info("Added rule %s (%s)", rule.id, rule.title)
    return rule


def update_card(card: Card) -> bool:
    """
    Replace a stored card with `card`.

    Returns:
        True if a card with that id existed
    """
    result = get_collection(CARDS_COLLECTION).replace_one({"id": card.id}, _to_document(card))
    return result.matched_count > 0


def update_rule(rule: Rule) -> bool:
    """
    Replace a stored rule with `rule`.

    Returns:
        True if a rule with that id existed
    """
    result = get_collection(RULES_COLLECTION).replace_one({"id": rule.id}, _to_document(rule))
    return result.matched_count > 0


def delete_card(card_id: str) -> bool:
    """Delete a card. Returns True if it existed."""
    result = get_collection(CARDS_COLLECTION).delete_one({"id": card_id})
    if result.deleted_count:
        logger.info("Deleted card %s", card_id)
    return result.deleted_count > 0


def delete_rule(rule_id: str) -> bool:
    """Delete a rule. Returns True if it existed."""
    result = get_collection(RULES_COLLECTION).delete_one({"id": rule_id})
    if result.deleted_count:
        logger.info("Deleted rule %s", rule_id)
    return result.deleted_count > 0


def save_items(items: Sequence[LearnableItem]) -> int:
    """
    Upsert many items in one bulk write per collection.

    Used after a review session to persist the updated review state.

    Args:
        items: Cards and/or rules to save

    Returns:
        Number of items written
    """
    if not items:
        return 0

    operations: dict[str, list[ReplaceOne]] = {CARDS_COLLECTION: [], RULES_COLLECTION: []}
    for item in items:
        name = RULES_COLLECTION if isinstance(item, Rule) else CARDS_COLLECTION
        operations[name].append(ReplaceOne({"id": item.id}, _to_document(item), upsert=True))

    for name, ops in operations.items():
        if ops:
            get_collection(name).bulk_write(ops, ordered=False)

    logger.info("Saved %d items", len(items))
    return len(items)


def seed_if_empty(now: Optional[datetime] = None) -> bool:
    """
    Insert the starter cards and rules when the collection is empty.

    Returns:
        True if starter content was inserted
    """
    if count_items() > 0:
        return False

    save_items([*seed_data.initial_cards(now), *seed_data.initial_rules()])
    logger.info("Seeded empty collection with starter content")
    return True
