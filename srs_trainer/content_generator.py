"""
AI-powered card content generation.

Fills in a card for a word the learner typed (translation, CEFR level,
word/phrase, example sentence) and generates themed vocabulary lists.
The scheduler never depends on this output being correct: generated
content always enters the collection as fresh New cards.

Usage:
    from srs_trainer.content_generator import suggest_card, suggestion_to_card

    suggestion = suggest_card("serendipity")
    card = suggestion_to_card("serendipity", suggestion, card_id)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from openai import OpenAI

from srs_trainer.schemas import (
    AICardSuggestion,
    AIVocabularyBatch,
    CEFRLevel,
    Card,
    ItemKind,
    MAX_SUGGESTED_WORDS,
)

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
TARGET_LANGUAGE = "Russian"

SYSTEM_PROMPT = (
    "You are an English teacher who writes concise, accurate flashcards "
    f"for {TARGET_LANGUAGE}-speaking learners."
)

# Initialize OpenAI client (module-level, reused across calls)
_client: Optional[OpenAI] = None


def get_client() -> OpenAI:
    """Get or create the OpenAI client."""
    global _client
    if _client is None:
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY not found in environment variables")
        _client = OpenAI(api_key=api_key)
    return _client


def get_model() -> str:
    return os.getenv("OPENAI_MODEL", DEFAULT_MODEL)


def _parse(prompt: str, response_format, model: Optional[str] = None):
    completion = get_client().beta.chat.completions.parse(
        model=model or get_model(),
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        response_format=response_format,
        temperature=0.7,
    )
    return completion.choices[0].message.parsed


def suggest_card(front: str, model: Optional[str] = None) -> AICardSuggestion:
    """
    Suggest the back side and metadata for an English word or phrase.

    Args:
        front: English word or phrase typed by the learner
        model: OpenAI model to use (defaults to OPENAI_MODEL)

    Returns:
        AICardSuggestion with translation, level, kind and example

    Raises:
        ValueError: If front is empty, OPENAI_API_KEY is not set,
            or the response could not be parsed
        openai.APIError: If the API call fails
    """
    front = front.strip()
    if not front:
        raise ValueError("Cannot suggest a card for an empty word")

    prompt = (
        f'Translate the English word or phrase "{front}" into {TARGET_LANGUAGE}.\n'
        "Determine its CEFR level (A1, A2, B1, B2, C1, C2).\n"
        'Determine if it is a single "Word" or a "Phrase".\n'
        "Provide a short, simple example sentence in English containing it."
    )

    suggestion = _parse(prompt, AICardSuggestion, model)
    if suggestion is None:
        raise ValueError(f"Failed to parse structured output for: {front}")

    logger.info("AI suggestion for %r: %s (%s)", front, suggestion.translation, suggestion.level)
    return suggestion


def generate_vocabulary(
    topic: str,
    level: CEFRLevel = CEFRLevel.B1,
    count: int = 10,
    model: Optional[str] = None
) -> AIVocabularyBatch:
    """
    Generate a themed vocabulary list.

    Args:
        topic: Theme of the list (e.g. "travel", "job interview")
        level: Target CEFR level
        count: Number of entries (1 to MAX_SUGGESTED_WORDS)
        model: OpenAI model to use

    Returns:
        AIVocabularyBatch with the generated entries

    Raises:
        ValueError: If count is out of range or the response could not be parsed
    """
    if not 1 <= count <= MAX_SUGGESTED_WORDS:
        raise ValueError(f"count must be between 1 and {MAX_SUGGESTED_WORDS}")

    level_value = CEFRLevel(level).value
    prompt = (
        f'List {count} useful English words or phrases about "{topic}" '
        f"for a learner at CEFR level {level_value}.\n"
        f"For each give the {TARGET_LANGUAGE} translation, whether it is a "
        '"Word" or a "Phrase", and a short example sentence in English.'
    )

    batch = _parse(prompt, AIVocabularyBatch, model)
    if batch is None:
        raise ValueError(f"Failed to parse structured output for topic: {topic}")

    logger.info("AI generated %d entries for topic %r", len(batch.items), topic)
    return batch


def suggestion_to_card(front: str, suggestion: AICardSuggestion, card_id: str) -> Card:
    """
    Convert an AI suggestion into a new card with fresh review state.
    """
    return Card(
        id=card_id,
        front=front.strip(),
        back=suggestion.translation,
        example=suggestion.example,
        level=suggestion.level,
        kind=ItemKind(suggestion.kind),
    )


def batch_to_cards(batch: AIVocabularyBatch, level: CEFRLevel, ids: list[str], tags: Optional[list[str]] = None) -> list[Card]:
    """
    Convert generated vocabulary into new cards.

    Args:
        batch: Generated entries
        level: Level to assign to every card
        ids: One id per entry
        tags: Tags to attach (e.g. the topic)
    """
    if len(ids) != len(batch.items):
        raise ValueError("Need exactly one id per generated entry")

    return [
        Card(
            id=card_id,
            front=entry.front,
            back=entry.back,
            example=entry.example,
            level=level,
            kind=ItemKind(entry.kind),
            tags=list(tags or []),
        )
        for card_id, entry in zip(ids, batch.items)
    ]


def friendly_error_message(error: BaseException) -> str:
    """
    Turn an API failure into a message the learner can act on.
    """
    message = str(error).lower()

    if "429" in message or "quota" in message or "rate limit" in message:
        return "Free quota exceeded. Wait a minute and try again."
    if "api_key" in message or "key" in message or "401" in message or "403" in message:
        return "API key error. Check OPENAI_API_KEY in your settings."
    if "location" in message or "region" in message or "country" in message:
        return "The AI service is not available in your region."
    if "connection" in message or "network" in message or "timed out" in message:
        return "Network error. Check your internet connection."
    if "parse" in message or "candidate" in message:
        return "The AI could not produce an answer. Try rephrasing the request."
    return "Something went wrong while contacting the AI. Please try again later."
