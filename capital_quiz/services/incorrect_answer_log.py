"""Incorrect Answer Log — legacy wrong-answer table kept for backward-compatible listing.

Invariants:
    - Only the controller's incorrect submissions are appended
    - list_all() ordered newest first

Design Decisions:
    - Separate repository from AnswerLedger: the legacy table has no game linkage,
      so it never takes part in the link protocol
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from capital_quiz.infrastructure.database import SessionFactory
from capital_quiz.models.incorrect_answer import IncorrectAnswer


class IncorrectAnswerLog:
    """Append-only legacy log of wrong answers."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    async def append(
        self, country: str, user_answer: str, correct_answer: str,
    ) -> int:
        async with self._session_factory() as db:
            row = IncorrectAnswer(
                country=country,
                user_answer=user_answer,
                correct_answer=correct_answer,
            )
            db.add(row)
            await db.commit()
            return row.id

    async def list_all(self) -> list[IncorrectAnswer]:
        async with self._session_factory() as db:
            result = await db.execute(
                select(IncorrectAnswer).order_by(
                    IncorrectAnswer.timestamp.desc(), IncorrectAnswer.id.desc(),
                ),
            )
            return list(result.scalars().all())

    async def clear(self, db: AsyncSession | None = None) -> int:
        if db is not None:
            result = await db.execute(delete(IncorrectAnswer))
            return result.rowcount or 0
        async with self._session_factory() as db:
            deleted = await self.clear(db)
            await db.commit()
            return deleted
