"""Capital Quiz API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map QuizError → structured JSON responses
    - Database, schema, reference data and the game are ready before the first request
    - Malformed reference data (ConfigurationError) aborts startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables created on startup for the local data file; Alembic handles upgrades
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from capital_quiz import __version__
from capital_quiz.infrastructure.database import init_db
from capital_quiz.infrastructure.observability import setup_logging
from capital_quiz.config import get_settings
from capital_quiz.services.game_controller import create_game_controller
from capital_quiz.api.error_handlers import register_error_handlers
from capital_quiz.api.routes import game, health, history

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.database_url)
    await manager.create_schema()

    controller = create_game_controller(
        manager.session,
        questions_per_game=settings.questions_per_game,
        feedback_delay_seconds=settings.feedback_delay_seconds,
    )
    controller.start_new_game()
    game.set_game_controller(controller)
    logger.info("Capital Quiz API started")
    yield
    logger.info("Capital Quiz API shutting down")
    game.set_game_controller(None)
    await manager.dispose()


app = FastAPI(
    title="Capital Quiz API", version=__version__, lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(game.router)
app.include_router(history.router)

register_error_handlers(app)
