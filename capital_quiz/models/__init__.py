"""ORM Models — SQLAlchemy declarative models for the three quiz tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - GameResult is the aggregate root; AnswerRecord.game_id references it (nullable)

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from capital_quiz.models.game_result import GameResult  # noqa: F401
from capital_quiz.models.answer_record import AnswerRecord  # noqa: F401
from capital_quiz.models.incorrect_answer import IncorrectAnswer  # noqa: F401
