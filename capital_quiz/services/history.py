"""History Service — browsing statistics and the explicit "reset history" action.

Invariants:
    - clear_history() is all or nothing: the three DELETEs share one session and one
      commit, so a failure leaves every table as it was
    - Answers are deleted before results (FK order)
    - Statistics computed by the pure core/scoring.compute_history_stats
    - Failures propagate as PersistenceError: history actions are user-requested,
      so the caller reports them instead of swallowing them

Design Decisions:
    - Separate from GameController: history screens work without an active game
"""

import logging

from capital_quiz.core.scoring import compute_history_stats
from capital_quiz.infrastructure.database import SessionFactory
from capital_quiz.services.answer_ledger import AnswerLedger
from capital_quiz.services.incorrect_answer_log import IncorrectAnswerLog
from capital_quiz.services.session_store import SessionStore

logger = logging.getLogger(__name__)


class HistoryService:
    """Read-side summaries and destructive reset over stored games."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory
        self.ledger = AnswerLedger(session_factory)
        self.incorrect_log = IncorrectAnswerLog(session_factory)
        self.store = SessionStore(session_factory)

    async def stats(self) -> dict:
        results = await self.store.list_all()
        return compute_history_stats(r.score_percentage for r in results)

    async def clear_history(self) -> dict[str, int]:
        """Delete every answer, legacy answer and game result. Not reversible."""
        async with self._session_factory() as db:
            deleted = {
                "answers": await self.ledger.clear(db),
                "incorrect_answers": await self.incorrect_log.clear(db),
                "game_results": await self.store.clear(db),
            }
            await db.commit()
        logger.info(f"History cleared: {deleted}")
        return deleted
