"""History Routes — stored games, per-game details, answers, and history reset.

Invariants:
    - Read-only except DELETE /history, which empties all three tables
    - Storage failures surface as 503 through the global QuizError handler
    - Missing game ids return 404

Design Decisions:
    - Repositories built per request from the shared session manager
"""

import logging

from fastapi import APIRouter, Depends

from capital_quiz.core.domain_types import GameId
from capital_quiz.core.errors import ResourceNotFoundError
from capital_quiz.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from capital_quiz.schemas.history import (
    AnswerRecordResponse, ClearHistoryResponse, GameResultResponse,
    HistoryStatsResponse, IncorrectAnswerResponse,
)
from capital_quiz.services.answer_ledger import AnswerLedger
from capital_quiz.services.history import HistoryService
from capital_quiz.services.incorrect_answer_log import IncorrectAnswerLog
from capital_quiz.services.session_store import SessionStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["history"])


def get_answer_ledger(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> AnswerLedger:
    return AnswerLedger(manager.session)


def get_session_store(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> SessionStore:
    return SessionStore(manager.session)


def get_history_service(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> HistoryService:
    return HistoryService(manager.session)


@router.get("/results", response_model=list[GameResultResponse])
async def list_results(store: SessionStore = Depends(get_session_store)):
    """Completed games, newest first."""
    return await store.list_all()


@router.get("/results/stats", response_model=HistoryStatsResponse)
async def get_results_stats(
    history: HistoryService = Depends(get_history_service),
):
    """Total games, average and best score percentage."""
    return await history.stats()


@router.get("/results/{game_id}", response_model=GameResultResponse)
async def get_result(
    game_id: int, store: SessionStore = Depends(get_session_store),
):
    result = await store.get(GameId(game_id))
    if result is None:
        raise ResourceNotFoundError("Game", str(game_id))
    return result


@router.get(
    "/results/{game_id}/answers", response_model=list[AnswerRecordResponse],
)
async def list_result_answers(
    game_id: int,
    store: SessionStore = Depends(get_session_store),
    ledger: AnswerLedger = Depends(get_answer_ledger),
):
    """Per-question details of one game, in question order."""
    if await store.get(GameId(game_id)) is None:
        raise ResourceNotFoundError("Game", str(game_id))
    return await ledger.list_by_session(GameId(game_id))


@router.get("/answers", response_model=list[AnswerRecordResponse])
async def list_answers(ledger: AnswerLedger = Depends(get_answer_ledger)):
    """Every recorded answer, newest first (includes not-yet-linked ones)."""
    return await ledger.list_all()


@router.get(
    "/answers/incorrect", response_model=list[IncorrectAnswerResponse],
)
async def list_incorrect_answers(
    manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """Legacy list of wrong answers, newest first."""
    return await IncorrectAnswerLog(manager.session).list_all()


@router.delete("/history", response_model=ClearHistoryResponse)
async def clear_history(
    history: HistoryService = Depends(get_history_service),
):
    """Delete all games and answers. Cannot be undone."""
    return await history.clear_history()
