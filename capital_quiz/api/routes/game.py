"""Game Routes — the UI layer's entry points into the active quiz game.

Invariants:
    - One GameController per process (single player, no concurrent games)
    - POST /answer returns the FEEDBACK snapshot; advancing runs after the response
    - Options outside the current question are rejected before reaching the controller

Design Decisions:
    - _controller as module-level singleton: deliberate exception to the no-global-state
      rule (single-process uvicorn, one player, state lost on restart)
    - Advance as a BackgroundTask: the feedback delay never holds the request open
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends

from capital_quiz.core.errors import InvalidOptionError
from capital_quiz.schemas.game import AnswerSubmit, GameStateResponse
from capital_quiz.services.game_controller import GameController

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/game", tags=["game"])

_controller: GameController | None = None


def set_game_controller(controller: GameController | None) -> None:
    global _controller
    _controller = controller


def current_game_controller() -> GameController | None:
    return _controller


def get_game_controller() -> GameController:
    """FastAPI dependency for the active game."""
    if not _controller:
        raise RuntimeError("Game controller not initialized")
    return _controller


@router.get("", response_model=GameStateResponse)
async def get_game(controller: GameController = Depends(get_game_controller)):
    """Current game snapshot."""
    return GameStateResponse.from_snapshot(controller.snapshot())


@router.post("/new", response_model=GameStateResponse)
async def start_new_game(
    controller: GameController = Depends(get_game_controller),
):
    """Abandon the current game (if any) and present a fresh first question."""
    return GameStateResponse.from_snapshot(controller.start_new_game())


@router.post("/answer", response_model=GameStateResponse)
async def submit_answer(
    body: AnswerSubmit,
    background_tasks: BackgroundTasks,
    controller: GameController = Depends(get_game_controller),
):
    """Submit an answer. Repeated submissions for one question are no-ops."""
    state = controller.state
    if state.awaiting_answer and body.option not in state.current_question.options:
        raise InvalidOptionError(body.option)

    before = state.question_count
    snap = await controller.submit_answer(body.option)
    if snap.question_count != before:
        background_tasks.add_task(controller.advance)
    return GameStateResponse.from_snapshot(snap)
