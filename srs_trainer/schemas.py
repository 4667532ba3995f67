"""
Pydantic models for the English trainer content and progress.

These models define the structure of MongoDB documents, the learner
profile, and the structured outputs requested from the AI generator.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from srs_trainer.srs.review_state import ReviewableItem


# Configuration
MAX_SUGGESTED_WORDS = 20  # Upper bound for one AI vocabulary batch


class ItemKind(str, Enum):
    """Kind of learnable item."""
    WORD = "Word"      # Single word
    PHRASE = "Phrase"  # Multi-word expression or idiom
    RULE = "Rule"      # Grammar rule


class CEFRLevel(str, Enum):
    """Common European Framework of Reference for Languages levels."""
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


# ---- Learnable Items ----

class Card(ReviewableItem):
    """
    A vocabulary card (word or phrase).

    `front` is the English side, `back` the translation.
    """
    kind: ItemKind = Field(default=ItemKind.WORD, alias="type", description="Word or Phrase")
    front: str = Field(..., description="English word or phrase")
    back: str = Field(..., description="Translation")
    example: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    level: CEFRLevel = CEFRLevel.B1
    is_favorite: bool = False
    related_rule_ids: list[str] = Field(default_factory=list, description="Grammar rules this card illustrates")

    @field_validator("kind")
    @classmethod
    def _card_kind(cls, value: ItemKind) -> ItemKind:
        if value == ItemKind.RULE:
            raise ValueError("cards must be of kind Word or Phrase")
        return value


class Rule(ReviewableItem):
    """A grammar rule with explanation and examples."""
    kind: ItemKind = Field(default=ItemKind.RULE, alias="type")
    title: str = Field(..., description="Rule name, e.g. 'Present Perfect'")
    explanation: str = ""
    examples: list[str] = Field(default_factory=list)
    level: CEFRLevel = CEFRLevel.B1
    is_favorite: bool = False

    @field_validator("kind")
    @classmethod
    def _rule_kind(cls, value: ItemKind) -> ItemKind:
        if value != ItemKind.RULE:
            raise ValueError("rules must be of kind Rule")
        return value


LearnableItem = Union[Card, Rule]


def parse_item(document: dict) -> LearnableItem:
    """
    Build a Card or Rule from a stored document.

    The kind tag decides the class; legacy rule records without a tag are
    recognised by their `title` field.
    """
    kind = document.get("kind", document.get("type"))
    if kind == ItemKind.RULE.value or (kind is None and "title" in document):
        return Rule.model_validate(document)
    return Card.model_validate(document)


# ---- Learner Progress ----

class DailyStat(BaseModel):
    """Activity counters for one calendar day."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    day: date = Field(..., alias="date")
    added_count: int = Field(default=0, ge=0)
    repeated_count: int = Field(default=0, ge=0)


class UserProfile(BaseModel):
    """Learner profile with day streak and activity history."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = "Learner"
    level: CEFRLevel = CEFRLevel.B1
    streak: int = Field(default=1, ge=0)
    last_active_date: Optional[date] = None
    stats: list[DailyStat] = Field(default_factory=list)


# ---- AI Generation Response Models ----

class AICardSuggestion(BaseModel):
    """
    Structured output when the AI fills in a card for a given word.

    This is what the LLM returns; convert it with
    content_generator.suggestion_to_card().
    """
    translation: str = Field(..., description="Translation of the word or phrase")
    level: CEFRLevel = Field(..., description="CEFR level of the word")
    kind: Literal["Word", "Phrase"] = Field(..., description="Single word or multi-word phrase")
    example: str = Field(..., description="Short, simple English example sentence using the word")


class AIVocabularyItem(BaseModel):
    """One generated vocabulary entry."""
    front: str = Field(..., description="English word or phrase")
    back: str = Field(..., description="Translation")
    kind: Literal["Word", "Phrase"]
    example: str


class AIVocabularyBatch(BaseModel):
    """Structured output for a themed vocabulary list."""
    items: list[AIVocabularyItem] = Field(..., min_length=1, max_length=MAX_SUGGESTED_WORDS)
