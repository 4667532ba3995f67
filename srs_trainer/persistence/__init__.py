"""
Progress persistence: review-event log, daily stats and learner profile.

Quick start:
    from srs_trainer import persistence

    persistence.init_db()
    persistence.batch_log_review_events(events)
    profile = persistence.load_profile()
"""

from srs_trainer.persistence.database import (
    init_db,
    reset_db,
    is_test_mode,
    get_default_user_id,
    get_database_url,
    dispose_engines,
    batch_log_review_events,
    get_recent_events,
    load_profile,
    save_profile,
)

__all__ = [
    "init_db",
    "reset_db",
    "is_test_mode",
    "get_default_user_id",
    "get_database_url",
    "dispose_engines",
    "batch_log_review_events",
    "get_recent_events",
    "load_profile",
    "save_profile",
]
