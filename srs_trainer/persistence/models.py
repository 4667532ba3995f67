"""
SQLAlchemy ORM Models for the progress database.

Defines the review-event log, per-day activity counters and the learner
profile. Card and rule content lives in MongoDB (see content_repo).
"""

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ReviewEvent(Base):
    """
    Log entry for a single review of a card or rule.

    Captures the outcome and the status change it caused.
    """
    __tablename__ = 'review_events'

    # Primary key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # User scope and item identifiers
    user_id = Column(String(255), nullable=False, index=True)
    item_id = Column(String(255), nullable=False)
    item_kind = Column(String(50), nullable=True)  # "Word", "Phrase", "Rule"

    # Timing and outcome
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
    remembered = Column(Boolean, nullable=False)
    answer_mode = Column(String(50), nullable=True)  # "standard" or "writing"

    # State change
    status_before = Column(String(50), nullable=True)
    status_after = Column(String(50), nullable=False)
    consecutive_successes_after = Column(Integer, nullable=False)

    # Session context (optional, for analytics)
    session_id = Column(String(255), nullable=True)
    session_position = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<ReviewEvent(id={self.id}, {self.item_id}, remembered={self.remembered})>"


class DailyStatRow(Base):
    """
    Added and repeated counts for one user and calendar day.
    """
    __tablename__ = 'daily_stats'
    __table_args__ = (UniqueConstraint('user_id', 'day', name='uq_daily_stats_user_day'),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False)
    day = Column(Date, nullable=False)
    added_count = Column(Integer, nullable=False, default=0)
    repeated_count = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<DailyStatRow({self.user_id}, {self.day}, +{self.added_count}, x{self.repeated_count})>"


class ProfileRow(Base):
    """
    Learner profile: display name, target level and day streak.
    """
    __tablename__ = 'profiles'

    user_id = Column(String(255), primary_key=True, nullable=False)
    name = Column(String(255), nullable=False)
    level = Column(String(10), nullable=False)
    streak = Column(Integer, nullable=False, default=1)
    last_active_date = Column(Date, nullable=True)

    def __repr__(self):
        return f"<ProfileRow({self.user_id}, streak={self.streak})>"
