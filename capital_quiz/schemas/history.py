"""History Schemas — Pydantic response models for stored games and answers.

Invariants:
    - All models read straight from ORM rows (from_attributes)
    - is_correct serialized as bool, not 0/1

Design Decisions:
    - One response model per table; stats and clear summaries are plain shapes
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AnswerRecordResponse(BaseModel):
    """One row of all_answers."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    game_id: int | None
    country: str
    user_answer: str
    correct_answer: str
    is_correct: bool
    question_number: int
    timestamp: datetime


class IncorrectAnswerResponse(BaseModel):
    """One row of the legacy incorrect_answers table."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    country: str
    user_answer: str
    correct_answer: str
    timestamp: datetime


class GameResultResponse(BaseModel):
    """One completed game."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    total_questions: int
    correct_answers: int
    wrong_answers: int
    score_percentage: float
    game_date: datetime


class HistoryStatsResponse(BaseModel):
    total_games: int
    average_score: float
    best_score: float


class ClearHistoryResponse(BaseModel):
    """Rows deleted per table."""
    answers: int
    incorrect_answers: int
    game_results: int
