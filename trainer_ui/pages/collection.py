"""
Collection manager page: browse, add, edit and delete cards and rules.
"""

from __future__ import annotations

import streamlit as st

from srs_trainer import content_generator, content_repo
from srs_trainer.schemas import CEFRLevel, Card, ItemKind, Rule
from srs_trainer.seed_data import LEVELS
from trainer_ui.session_controller import record_added_items


def render_collection_page() -> None:
    st.subheader("Library")

    col1, col2 = st.columns([4, 1])
    with col1:
        search = st.text_input("Search", placeholder="Search...", label_visibility="collapsed")
    with col2:
        favorites_only = st.toggle("♥ Favorites")

    cards_tab, rules_tab, generate_tab = st.tabs(["Cards", "Rules", "AI vocabulary"])

    with cards_tab:
        _render_card_form()
        for card in content_repo.search_cards(search, favorites_only):
            _render_card_row(card)

    with rules_tab:
        _render_rule_form()
        for rule in content_repo.search_rules(search, favorites_only):
            _render_rule_row(rule)

    with generate_tab:
        _render_generate_form()


# ---- Cards ----

def _editing(item_id: str) -> bool:
    return st.session_state.editing_item_id == item_id


def _render_card_form(card: Card | None = None) -> None:
    key = card.id if card else "new_card"
    with st.expander("Edit card" if card else "➕ Add card", expanded=card is not None):
        front = st.text_input("English", value=card.front if card else "", key=f"front_{key}")

        if st.button("✨ Fill with AI", key=f"ai_{key}", disabled=not front):
            try:
                suggestion = content_generator.suggest_card(front)
            except Exception as exc:
                st.error(content_generator.friendly_error_message(exc))
            else:
                st.session_state[f"back_{key}"] = suggestion.translation
                st.session_state[f"example_{key}"] = suggestion.example
                st.session_state[f"level_{key}"] = CEFRLevel(suggestion.level).value
                st.session_state[f"kind_{key}"] = suggestion.kind

        back = st.text_input("Translation", value=card.back if card else "", key=f"back_{key}")
        example = st.text_input("Example", value=(card.example or "") if card else "", key=f"example_{key}")
        level = st.selectbox(
            "Level", LEVELS,
            index=LEVELS.index(CEFRLevel(card.level).value) if card else LEVELS.index("B1"),
            key=f"level_{key}",
        )
        kind = st.radio(
            "Type", ["Word", "Phrase"], horizontal=True,
            index=1 if card and card.kind == ItemKind.PHRASE else 0,
            key=f"kind_{key}",
        )

        if st.button("Save", type="primary", key=f"save_{key}", disabled=not (front and back)):
            fields = {
                "front": front.strip(),
                "back": back.strip(),
                "example": example.strip() or None,
                "level": CEFRLevel(level),
                "kind": ItemKind(kind),
            }
            if card:
                content_repo.update_card(card.model_copy(update=fields))
                st.session_state.editing_item_id = None
            else:
                content_repo.add_card(Card(id=content_repo.generate_item_id(), **fields))
                record_added_items(1)
            st.rerun()


def _render_card_row(card: Card) -> None:
    if _editing(card.id):
        _render_card_form(card)
        return

    col1, col2, col3, col4 = st.columns([6, 1, 1, 1])
    with col1:
        st.markdown(f"**{card.front}** - {card.back}  \n"
                    f"`{CEFRLevel(card.level).value}` · {card.status.value}")
    with col2:
        if st.button("♥" if card.is_favorite else "♡", key=f"fav_{card.id}"):
            content_repo.update_card(card.model_copy(update={"is_favorite": not card.is_favorite}))
            st.rerun()
    with col3:
        if st.button("✏️", key=f"edit_{card.id}"):
            st.session_state.editing_item_id = card.id
            st.rerun()
    with col4:
        if st.button("🗑️", key=f"del_{card.id}"):
            content_repo.delete_card(card.id)
            st.rerun()


# ---- Rules ----

def _render_rule_form(rule: Rule | None = None) -> None:
    key = rule.id if rule else "new_rule"
    with st.expander("Edit rule" if rule else "➕ Add rule", expanded=rule is not None):
        title = st.text_input("Title", value=rule.title if rule else "", key=f"title_{key}")
        explanation = st.text_area("Explanation", value=rule.explanation if rule else "", key=f"expl_{key}")
        example = st.text_input(
            "Example", value=rule.examples[0] if rule and rule.examples else "", key=f"rex_{key}"
        )
        level = st.selectbox(
            "Level", LEVELS,
            index=LEVELS.index(CEFRLevel(rule.level).value) if rule else LEVELS.index("B1"),
            key=f"rlevel_{key}",
        )

        if st.button("Save", type="primary", key=f"rsave_{key}", disabled=not title):
            fields = {
                "title": title.strip(),
                "explanation": explanation.strip(),
                "examples": [example.strip()] if example.strip() else [],
                "level": CEFRLevel(level),
            }
            if rule:
                content_repo.update_rule(rule.model_copy(update=fields))
                st.session_state.editing_item_id = None
            else:
                content_repo.add_rule(Rule(id=content_repo.generate_item_id(), **fields))
            st.rerun()


def _render_rule_row(rule: Rule) -> None:
    if _editing(rule.id):
        _render_rule_form(rule)
        return

    col1, col2, col3, col4 = st.columns([6, 1, 1, 1])
    with col1:
        st.markdown(f"**{rule.title}**  \n{rule.explanation}")
    with col2:
        if st.button("♥" if rule.is_favorite else "♡", key=f"fav_{rule.id}"):
            content_repo.update_rule(rule.model_copy(update={"is_favorite": not rule.is_favorite}))
            st.rerun()
    with col3:
        if st.button("✏️", key=f"edit_{rule.id}"):
            st.session_state.editing_item_id = rule.id
            st.rerun()
    with col4:
        if st.button("🗑️", key=f"del_{rule.id}"):
            content_repo.delete_rule(rule.id)
            st.rerun()


# ---- AI Vocabulary ----

def _render_generate_form() -> None:
    with st.form("generate_vocabulary"):
        topic = st.text_input("Topic", placeholder="e.g. travel, job interview")
        level = st.selectbox("Level", LEVELS, index=LEVELS.index("B1"))
        count = st.slider("Number of words", min_value=1, max_value=20, value=10)
        submitted = st.form_submit_button("Generate and add", type="primary")

    if not submitted or not topic:
        return

    try:
        with st.spinner("Generating vocabulary..."):
            batch = content_generator.generate_vocabulary(topic, CEFRLevel(level), count)
    except Exception as exc:
        st.error(content_generator.friendly_error_message(exc))
        return

    ids = [content_repo.generate_item_id() for _ in batch.items]
    cards = content_generator.batch_to_cards(batch, CEFRLevel(level), ids, tags=[topic.strip()])
    content_repo.save_items(cards)
    record_added_items(len(cards))
    st.success(f"Added {len(cards)} cards about {topic}.")
