"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from trainer_ui.pages.collection import render_collection_page
from trainer_ui.pages.dashboard import render_dashboard_page
from trainer_ui.pages.review import render_review_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Overview", render=render_dashboard_page),
    AppPage(title="Review", render=render_review_page),
    AppPage(title="Library", render=render_collection_page),
]
