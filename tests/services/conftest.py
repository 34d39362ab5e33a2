"""Service test fixtures — async in-memory DB, repositories, controller, API client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Repositories use a real DatabaseSessionManager (so SQLAlchemy errors map
      to PersistenceError exactly as in production)
    - The controller runs with zero feedback delay and a seeded RNG

Design Decisions:
    - SQLite in-memory: fast, no external dependency, same driver as production
    - db_manager patched on the module: routes resolve it at call time
"""

import random

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from capital_quiz.db.base import Base
from capital_quiz.infrastructure.database import DatabaseSessionManager
import capital_quiz.infrastructure.database as db_module
from capital_quiz.api.routes import game as game_routes
from capital_quiz.services.answer_ledger import AnswerLedger
from capital_quiz.services.incorrect_answer_log import IncorrectAnswerLog
from capital_quiz.services.session_store import SessionStore
from capital_quiz.services.session_linker import SessionLinker
from capital_quiz.services.game_controller import create_game_controller
from capital_quiz.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def db_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def ledger(db_manager):
    return AnswerLedger(db_manager.session)


@pytest.fixture
def store(db_manager):
    return SessionStore(db_manager.session)


@pytest.fixture
def incorrect_log(db_manager):
    return IncorrectAnswerLog(db_manager.session)


@pytest.fixture
def linker(ledger, store):
    return SessionLinker(ledger, store)


@pytest.fixture
def controller(db_manager):
    return create_game_controller(
        db_manager.session,
        feedback_delay_seconds=0,
        rng=random.Random(1234),
    )


@pytest.fixture
async def client(db_manager, controller):
    """FastAPI test client wired to the fixture controller and in-memory db_manager."""
    game_routes.set_game_controller(controller)

    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    game_routes.set_game_controller(None)
    db_module.db_manager = original_manager


@pytest.fixture
def drop_table(test_engine):
    """Simulate a broken data file by dropping one table."""
    async def _drop(model) -> None:
        async with test_engine.begin() as conn:
            await conn.run_sync(model.__table__.drop)
    return _drop
