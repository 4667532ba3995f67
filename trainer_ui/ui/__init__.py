"""UI Components for the English Trainer"""

from trainer_ui.ui.flashcard import render_flashcard
from trainer_ui.ui.session_stats import render_session_stats, render_session_complete

__all__ = [
    "render_flashcard",
    "render_session_stats",
    "render_session_complete",
]
