"""Answer Ledger — durable log of every submitted answer (all_answers).

Invariants:
    - append() never needs a game id: answers are recorded the moment they are chosen
    - link_unlinked() is one UPDATE ... WHERE game_id IS NULL: atomic, and a second
      run affects zero rows; already-linked rows are never reassigned
    - list_by_session() ordered by question_number ascending
    - list_all() ordered newest first
    - Storage failures surface as PersistenceError (mapped by DatabaseSessionManager)

Design Decisions:
    - One short-lived session per operation: the controller outlives any request,
      so it never holds a session across the feedback delay
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from capital_quiz.core.domain_types import AnswerId, GameId
from capital_quiz.infrastructure.database import SessionFactory
from capital_quiz.models.answer_record import AnswerRecord

logger = logging.getLogger(__name__)


class AnswerLedger:
    """Append-mostly store of individual answer events."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    async def append(
        self,
        game_id: GameId | None,
        country: str,
        user_answer: str,
        correct_answer: str,
        is_correct: bool,
        question_number: int,
    ) -> AnswerId:
        async with self._session_factory() as db:
            record = AnswerRecord(
                game_id=game_id,
                country=country,
                user_answer=user_answer,
                correct_answer=correct_answer,
                is_correct=is_correct,
                question_number=question_number,
            )
            db.add(record)
            await db.commit()
            logger.debug(
                "Answer recorded",
                extra={"question_number": question_number, "country": country},
            )
            return AnswerId(record.id)

    async def link_unlinked(self, game_id: GameId) -> int:
        """Set game_id on every unlinked answer. Returns rows affected."""
        async with self._session_factory() as db:
            result = await db.execute(
                update(AnswerRecord)
                .where(AnswerRecord.game_id.is_(None))
                .values(game_id=game_id)
                .execution_options(synchronize_session=False),
            )
            await db.commit()
            return result.rowcount or 0

    async def list_by_session(self, game_id: GameId) -> list[AnswerRecord]:
        async with self._session_factory() as db:
            result = await db.execute(
                select(AnswerRecord)
                .where(AnswerRecord.game_id == game_id)
                .order_by(
                    AnswerRecord.question_number.asc(), AnswerRecord.id.asc(),
                ),
            )
            return list(result.scalars().all())

    async def list_all(self) -> list[AnswerRecord]:
        async with self._session_factory() as db:
            result = await db.execute(
                select(AnswerRecord).order_by(
                    AnswerRecord.timestamp.desc(), AnswerRecord.id.desc(),
                ),
            )
            return list(result.scalars().all())

    async def list_unlinked(self) -> list[AnswerRecord]:
        """Answers not yet bound to a game, in submission order."""
        async with self._session_factory() as db:
            result = await db.execute(
                select(AnswerRecord)
                .where(AnswerRecord.game_id.is_(None))
                .order_by(AnswerRecord.id.asc()),
            )
            return list(result.scalars().all())

    async def clear(self, db: AsyncSession | None = None) -> int:
        """Delete every answer. Not reversible.

        Given a session, the delete joins that transaction and the caller commits.
        """
        if db is not None:
            result = await db.execute(delete(AnswerRecord))
            return result.rowcount or 0
        async with self._session_factory() as db:
            deleted = await self.clear(db)
            await db.commit()
            return deleted
