"""History Service — tests for statistics and the full reset.

Invariants:
    - clear_history() empties all three tables and reports per-table counts
    - A failed reset rolls back: no table is partially wiped
"""

import pytest

from capital_quiz.core.errors import PersistenceError
from capital_quiz.models.game_result import GameResult
from capital_quiz.services.history import HistoryService


async def test_stats_empty_history(db_manager):
    history = HistoryService(db_manager.session)
    assert await history.stats() == {
        "total_games": 0, "average_score": 0.0, "best_score": 0.0,
    }


async def test_stats_over_stored_games(db_manager, store):
    await store.create(10, 6, 4, 60)
    await store.create(10, 9, 1, 90)
    history = HistoryService(db_manager.session)
    stats = await history.stats()
    assert stats["total_games"] == 2
    assert stats["average_score"] == 75.0
    assert stats["best_score"] == 90.0


async def test_clear_history_empties_all_three_tables(
    controller, db_manager, ledger, incorrect_log, store,
):
    controller.start_new_game()
    snap = controller.snapshot()
    for correct in (True, False) * 5:
        q = snap.current_question
        option = q.capital if correct else next(
            o for o in q.options if o != q.capital
        )
        snap = await controller.answer(option)

    history = HistoryService(db_manager.session)
    deleted = await history.clear_history()

    assert deleted == {"answers": 10, "incorrect_answers": 5, "game_results": 1}
    assert await ledger.list_all() == []
    assert await incorrect_log.list_all() == []
    assert await store.list_all() == []


async def test_failed_clear_leaves_every_table_intact(
    db_manager, ledger, incorrect_log, drop_table,
):
    await ledger.append(None, "France", "Lyon", "Paris", False, 1)
    await incorrect_log.append("France", "Lyon", "Paris")
    await drop_table(GameResult)

    with pytest.raises(PersistenceError):
        await HistoryService(db_manager.session).clear_history()

    assert len(await ledger.list_all()) == 1
    assert len(await incorrect_log.list_all()) == 1
