"""Game State — in-memory state of the single active quiz game.

Invariants:
    - Owned exclusively by GameController; no ambient globals
    - selected_answer is None exactly while a fresh question awaits an answer
    - 0 <= score <= question_count <= questions per game
    - game_number increases on every new game (detects stale deferred work)

Design Decisions:
    - Mutable dataclass for the owner, frozen GameSnapshot for observers:
      listeners can never mutate controller state
"""

from dataclasses import dataclass, field

from capital_quiz.core.domain_types import GamePhase, GameId
from capital_quiz.core.question_generator import QuestionInstance


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of GameState handed to observers after each transition."""
    phase: GamePhase
    game_number: int
    current_question: QuestionInstance | None
    selected_answer: str | None
    last_answer_correct: bool | None
    score: int
    question_count: int
    questions_per_game: int
    used_countries: frozenset[str]
    session_id: GameId | None

    @property
    def is_complete(self) -> bool:
        return self.phase == GamePhase.COMPLETED


@dataclass
class GameState:
    """Per-game state — pure dataclass, no IO."""

    phase: GamePhase = GamePhase.LOADING
    current_question: QuestionInstance | None = None
    selected_answer: str | None = None

    # Result of the last submission, shown during FEEDBACK
    last_answer_correct: bool | None = None

    score: int = 0
    question_count: int = 0
    used_countries: frozenset[str] = field(default_factory=frozenset)

    # Assigned once the finished game is stored
    session_id: GameId | None = None

    game_number: int = 0

    @property
    def awaiting_answer(self) -> bool:
        return (
            self.phase == GamePhase.PRESENTING
            and self.current_question is not None
            and self.selected_answer is None
        )

    def reset_for_new_game(self) -> None:
        """Back to initial values, keeping game_number monotonic."""
        self.phase = GamePhase.LOADING
        self.current_question = None
        self.selected_answer = None
        self.last_answer_correct = None
        self.score = 0
        self.question_count = 0
        self.used_countries = frozenset()
        self.session_id = None
        self.game_number += 1

    def present(
        self, question: QuestionInstance, used_countries: frozenset[str],
    ) -> None:
        self.current_question = question
        self.used_countries = used_countries
        self.selected_answer = None
        self.last_answer_correct = None
        self.phase = GamePhase.PRESENTING

    def snapshot(self, questions_per_game: int) -> GameSnapshot:
        return GameSnapshot(
            phase=self.phase,
            game_number=self.game_number,
            current_question=self.current_question,
            selected_answer=self.selected_answer,
            last_answer_correct=self.last_answer_correct,
            score=self.score,
            question_count=self.question_count,
            questions_per_game=questions_per_game,
            used_countries=self.used_countries,
            session_id=self.session_id,
        )
