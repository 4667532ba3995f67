"""
Flashcard UI Component
"""

from __future__ import annotations

import html

import streamlit as st


CARD_MIN_HEIGHT = "220px"
CARD_PADDING = "2.5rem 1.5rem"


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    bg_color: str = "#f0f2f6",
    main_font_size: str = "2.6em",
) -> None:
    """
    Render a flashcard.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main, smaller, italic)
        corner_text: Optional badge in the top-right corner (e.g. "Weak")
        bg_color: Background color of the card
        main_font_size: CSS font size for main text
    """
    corner_html = (
        f'<div style="position:absolute; top:0.8rem; right:1rem; font-size:0.8em; '
        f'color:#888; text-transform:uppercase; letter-spacing:0.1em;">{html.escape(corner_text)}</div>'
        if corner_text else ""
    )
    subtitle_html = (
        f'<div style="font-size:1.1em; color:#555; font-style:italic; margin-top:0.8rem;">'
        f'{html.escape(subtitle)}</div>'
        if subtitle else ""
    )

    st.markdown(
        f"""
        <div style="position:relative; background:{bg_color}; border-radius:16px;
                    min-height:{CARD_MIN_HEIGHT}; padding:{CARD_PADDING};
                    display:flex; flex-direction:column; align-items:center; justify-content:center;
                    text-align:center;">
            {corner_html}
            <div style="font-size:{main_font_size}; color:#1f1f1f;">{html.escape(main_text)}</div>
            {subtitle_html}
        </div>
        """,
        unsafe_allow_html=True
    )
