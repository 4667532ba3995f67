"""
Parse data exported from the browser version of the trainer.

The browser app kept three localStorage keys, each a JSON string:
- lm_cards: list of cards (camelCase, lastShownDate in epoch milliseconds)
- lm_rules: list of grammar rules (no review fields)
- lm_profile: learner profile with daily stats
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from srs_trainer.schemas import Card, Rule, UserProfile


CARDS_KEY = "lm_cards"
RULES_KEY = "lm_rules"
PROFILE_KEY = "lm_profile"


@dataclass
class BrowserExport:
    """Validated content of one export."""
    cards: list[Card]
    rules: list[Rule]
    profile: Optional[UserProfile]


def _decode(value: Any) -> Any:
    # localStorage values are JSON strings; hand-made exports may already be decoded
    if isinstance(value, str):
        return json.loads(value)
    return value


def parse_browser_export(data: dict) -> BrowserExport:
    """
    Validate an export through the pydantic models.

    Args:
        data: Mapping of localStorage keys to their values

    Returns:
        BrowserExport with cards, rules and the profile (if present)

    Raises:
        pydantic.ValidationError: If any record breaks the review invariants
        json.JSONDecodeError: If a stored value is not valid JSON
    """
    cards = [Card.model_validate(doc) for doc in _decode(data.get(CARDS_KEY)) or []]
    rules = [Rule.model_validate(doc) for doc in _decode(data.get(RULES_KEY)) or []]

    raw_profile = _decode(data.get(PROFILE_KEY))
    profile = UserProfile.model_validate(raw_profile) if raw_profile else None

    return BrowserExport(cards=cards, rules=rules, profile=profile)
