"""Game Schemas — Pydantic models for the active-game API.

Invariants:
    - AnswerSubmit.option: 1-100 chars, stripped, non-empty
    - The correct capital is only exposed once an answer was selected

Design Decisions:
    - Built from core GameSnapshot, never from GameState: responses can't alias live state
"""

from pydantic import BaseModel, Field, field_validator

from capital_quiz.core.domain_types import GamePhase
from capital_quiz.core.game_state import GameSnapshot


class AnswerSubmit(BaseModel):
    """Answer submission — one of the current question's options."""
    option: str = Field(min_length=1, max_length=100)

    @field_validator("option")
    @classmethod
    def strip_option(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("option cannot be empty or whitespace")
        return v


class QuestionResponse(BaseModel):
    """Question as shown to the player."""
    country: str
    options: list[str]
    question_number: int
    correct_answer: str | None = None


class GameStateResponse(BaseModel):
    """Public view of the active game."""
    phase: GamePhase
    game_number: int
    question: QuestionResponse | None
    selected_answer: str | None
    last_answer_correct: bool | None
    score: int
    question_count: int
    questions_per_game: int
    session_id: int | None

    @classmethod
    def from_snapshot(cls, snap: GameSnapshot) -> "GameStateResponse":
        question = None
        if snap.current_question is not None:
            revealed = snap.selected_answer is not None
            question = QuestionResponse(
                country=snap.current_question.country,
                options=list(snap.current_question.options),
                question_number=snap.current_question.presented_at,
                correct_answer=(
                    snap.current_question.capital if revealed else None
                ),
            )
        return cls(
            phase=snap.phase,
            game_number=snap.game_number,
            question=question,
            selected_answer=snap.selected_answer,
            last_answer_correct=snap.last_answer_correct,
            score=snap.score,
            question_count=snap.question_count,
            questions_per_game=snap.questions_per_game,
            session_id=snap.session_id,
        )
