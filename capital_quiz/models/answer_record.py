"""AnswerRecord ORM — every submitted answer (table all_answers).

Invariants:
    - game_id is NULL at insert time; set exactly once when the game is stored
    - question_number is 1-based within a game
    - is_correct stored as 0/1

Design Decisions:
    - Nullable FK to game_results: answers are recorded before the game total exists
      ("record now, link later")
    - Index on game_id: both linking (IS NULL) and per-game listing filter on it
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from capital_quiz.db.base import Base


class AnswerRecord(Base):
    """One answer event, optionally linked to a completed game."""
    __tablename__ = "all_answers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    game_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("game_results.id"), nullable=True, index=True,
    )
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    user_answer: Mapped[str] = mapped_column(String(100), nullable=False)
    correct_answer: Mapped[str] = mapped_column(String(100), nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    question_number: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
