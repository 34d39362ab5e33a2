"""GameResult ORM — one completed quiz game (table game_results).

Invariants:
    - id is an autoincrement integer assigned by the store
    - Immutable once created: no code path updates a row
    - wrong_answers = total_questions - correct_answers

Design Decisions:
    - score_percentage as Float (REAL) to match the legacy schema
    - No relationship() to answers: answers are read by game_id query, which keeps
      returned rows free of lazy loads after the session closes
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from capital_quiz.db.base import Base


class GameResult(Base):
    """Completed game — aggregate score and completion timestamp."""
    __tablename__ = "game_results"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    total_questions: Mapped[int] = mapped_column(Integer, nullable=False)
    correct_answers: Mapped[int] = mapped_column(Integer, nullable=False)
    wrong_answers: Mapped[int] = mapped_column(Integer, nullable=False)
    score_percentage: Mapped[float] = mapped_column(Float, nullable=False)
    game_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
