"""IncorrectAnswer ORM — legacy append-only log of wrong answers (table incorrect_answers).

Invariants:
    - Only incorrect answers are written here
    - Never linked to a game and never updated

Design Decisions:
    - Kept alongside all_answers for backward-compatible listing of older data
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from capital_quiz.db.base import Base


class IncorrectAnswer(Base):
    """Legacy wrong-answer row."""
    __tablename__ = "incorrect_answers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    user_answer: Mapped[str] = mapped_column(String(100), nullable=False)
    correct_answer: Mapped[str] = mapped_column(String(100), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
