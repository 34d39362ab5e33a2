"""Session Linker — binds unlinked ledger answers to a just-created game.

Invariants:
    - Called only after SessionStore.create succeeded, with the id it returned
    - Never links against a game that does not exist (LinkingInconsistency)
    - Zero linked rows is reported as LinkingInconsistency (nothing was in flight)

Design Decisions:
    - Stateless coordinator: exists to encode the create-then-link ordering
    - Not one transaction with create: a failed link leaves answers with NULL
      game_id, which still list under "all answers" and link on the next game
"""

import logging

from capital_quiz.core.domain_types import GameId
from capital_quiz.core.errors import LinkingInconsistency
from capital_quiz.core.repository_protocols import (
    AnswerLedgerLike, SessionStoreLike,
)

logger = logging.getLogger(__name__)


class SessionLinker:
    """Phase 2 of record-now-link-later: batch update by NULL predicate."""

    def __init__(self, ledger: AnswerLedgerLike, store: SessionStoreLike):
        self.ledger = ledger
        self.store = store

    async def link(self, game_id: GameId) -> int:
        if await self.store.get(game_id) is None:
            raise LinkingInconsistency(
                f"Cannot link answers: game {game_id} does not exist", game_id,
            )
        linked = await self.ledger.link_unlinked(game_id)
        if linked == 0:
            raise LinkingInconsistency(
                f"No unlinked answers found for game {game_id}", game_id,
            )
        logger.info(
            f"Linked {linked} answer(s) to game {game_id}",
            extra={"game_id": game_id, "linked": linked},
        )
        return linked
