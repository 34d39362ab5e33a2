"""Boundary Protocols — contracts between the game controller and persistence.

Invariants:
    - The controller depends on these Protocols, never on concrete repositories
    - All IO operations accessed through Protocol types
    - Implementations provided by services/ via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO
    - clear(db) joins a caller-owned session so several tables can be reset in one
      transaction
"""

from typing import Any, Protocol

from capital_quiz.core.domain_types import AnswerId, GameId


class AnswerLedgerLike(Protocol):
    """Contract for per-answer persistence (all_answers)."""
    async def append(
        self,
        game_id: GameId | None,
        country: str,
        user_answer: str,
        correct_answer: str,
        is_correct: bool,
        question_number: int,
    ) -> AnswerId: ...
    async def link_unlinked(self, game_id: GameId) -> int: ...
    async def list_by_session(self, game_id: GameId) -> list[Any]: ...
    async def list_all(self) -> list[Any]: ...
    async def clear(self, db: Any | None = None) -> int: ...


class IncorrectAnswerLogLike(Protocol):
    """Contract for the legacy incorrect-answer table."""
    async def append(
        self, country: str, user_answer: str, correct_answer: str,
    ) -> int: ...
    async def list_all(self) -> list[Any]: ...
    async def clear(self, db: Any | None = None) -> int: ...


class SessionStoreLike(Protocol):
    """Contract for completed-game persistence (game_results)."""
    async def create(
        self,
        total_questions: int,
        correct_answers: int,
        wrong_answers: int,
        score_percentage: float,
    ) -> GameId: ...
    async def get(self, game_id: GameId) -> Any | None: ...
    async def list_all(self) -> list[Any]: ...
    async def clear(self, db: Any | None = None) -> int: ...


class SessionLinkerLike(Protocol):
    """Contract for binding unlinked answers to a just-created game."""
    async def link(self, game_id: GameId) -> int: ...
