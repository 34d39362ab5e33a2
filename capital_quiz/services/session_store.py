"""Session Store — durable record of completed games (game_results).

Invariants:
    - create() inserts exactly one immutable row and returns its store-assigned id
    - game_date generated at insert time (UTC)
    - list_all() ordered by game_date descending
    - Storage failures surface as PersistenceError; a failed create() returns no id,
      so nothing can be linked against it

Design Decisions:
    - Returns ORM rows (expire_on_commit=False) — routes convert via Pydantic from_attributes
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from capital_quiz.core.domain_types import GameId
from capital_quiz.infrastructure.database import SessionFactory
from capital_quiz.models.game_result import GameResult

logger = logging.getLogger(__name__)


class SessionStore:
    """Persistence for finished games."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    async def create(
        self,
        total_questions: int,
        correct_answers: int,
        wrong_answers: int,
        score_percentage: float,
    ) -> GameId:
        async with self._session_factory() as db:
            result = GameResult(
                total_questions=total_questions,
                correct_answers=correct_answers,
                wrong_answers=wrong_answers,
                score_percentage=score_percentage,
            )
            db.add(result)
            await db.commit()
            logger.info(
                f"Game result saved: {correct_answers}/{total_questions} "
                f"({score_percentage}%)",
                extra={"game_id": result.id},
            )
            return GameId(result.id)

    async def get(self, game_id: GameId) -> GameResult | None:
        async with self._session_factory() as db:
            result = await db.execute(
                select(GameResult).where(GameResult.id == game_id),
            )
            return result.scalar_one_or_none()

    async def list_all(self) -> list[GameResult]:
        async with self._session_factory() as db:
            result = await db.execute(
                select(GameResult).order_by(
                    GameResult.game_date.desc(), GameResult.id.desc(),
                ),
            )
            return list(result.scalars().all())

    async def clear(self, db: AsyncSession | None = None) -> int:
        if db is not None:
            result = await db.execute(delete(GameResult))
            return result.rowcount or 0
        async with self._session_factory() as db:
            deleted = await self.clear(db)
            await db.commit()
            return deleted
