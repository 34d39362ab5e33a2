"""Health & Readiness — is the quiz process up, and can it serve a game?

Invariants:
    - GET /health/ returns 200 whenever the process is up
    - GET /health/ready returns 200 only when the data file answers queries AND a
      game controller is loaded; otherwise 503 listing every failing check
    - Readiness reports the current game phase so a stuck LOADING game is visible

Design Decisions:
    - db_manager and the controller are read at call time, never bound at import
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from capital_quiz import __version__
from capital_quiz.api.routes.game import current_game_controller
from capital_quiz.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": "capital-quiz-api", "version": __version__}


@router.get("/ready")
async def readiness_check():
    manager = database.db_manager
    controller = current_game_controller()

    checks = {
        "database": (
            "healthy" if manager and await manager.health_check() else "unavailable"
        ),
        "game": controller.snapshot().phase.value if controller else "not_started",
    }
    failing = [
        name for name, ok in (
            ("database", checks["database"] == "healthy"),
            ("game", controller is not None),
        ) if not ok
    ]
    if failing:
        logger.warning(f"Readiness failed: {', '.join(failing)}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "failing": failing, "checks": checks},
        )
    return {"status": "ready", "checks": checks}
