"""Answer Ledger — tests for append, linking, ordering and clearing.

Invariants:
    - Answers are stored unlinked
    - link_unlinked links every NULL row once; second call affects zero rows
    - Already-linked rows are never reassigned
    - list_by_session ordered by question_number, list_all newest first
    - clear(db) joins the caller's transaction; nothing is deleted until it commits
    - Storage failures surface as PersistenceError

Design Decisions:
    - Failures injected by dropping the table (drop_table fixture), so the real
      DatabaseSessionManager error mapping is exercised
"""

import pytest

from capital_quiz.core.errors import PersistenceError
from capital_quiz.models.answer_record import AnswerRecord


async def _append(ledger, n, correct=True, country="France"):
    return await ledger.append(
        None, country, "Paris" if correct else "Rome", "Paris", correct, n,
    )


async def test_append_returns_id_and_stores_unlinked(ledger):
    answer_id = await _append(ledger, 1)
    records = await ledger.list_all()
    assert len(records) == 1
    assert records[0].id == answer_id
    assert records[0].game_id is None
    assert records[0].is_correct is True
    assert records[0].question_number == 1


async def test_append_stores_incorrect_flag(ledger):
    await _append(ledger, 1, correct=False)
    record = (await ledger.list_all())[0]
    assert record.is_correct is False
    assert record.user_answer == "Rome"
    assert record.correct_answer == "Paris"


async def test_link_unlinked_links_all_null_rows(ledger, store):
    for n in range(1, 4):
        await _append(ledger, n)
    game_id = await store.create(3, 3, 0, 100)

    assert await ledger.link_unlinked(game_id) == 3
    assert all(r.game_id == game_id for r in await ledger.list_all())


async def test_link_unlinked_twice_affects_zero_rows(ledger, store):
    await _append(ledger, 1)
    game_id = await store.create(1, 1, 0, 100)
    assert await ledger.link_unlinked(game_id) == 1
    assert await ledger.link_unlinked(game_id) == 0


async def test_link_never_reassigns_linked_rows(ledger, store):
    await _append(ledger, 1)
    first = await store.create(1, 1, 0, 100)
    await ledger.link_unlinked(first)

    await _append(ledger, 1, country="Italy")
    second = await store.create(1, 1, 0, 100)
    assert await ledger.link_unlinked(second) == 1

    assert [r.country for r in await ledger.list_by_session(first)] == ["France"]
    assert [r.country for r in await ledger.list_by_session(second)] == ["Italy"]


async def test_list_by_session_sorted_by_question_number(ledger, store):
    for n in (3, 1, 2):
        await _append(ledger, n)
    game_id = await store.create(3, 3, 0, 100)
    await ledger.link_unlinked(game_id)

    records = await ledger.list_by_session(game_id)
    assert [r.question_number for r in records] == [1, 2, 3]


async def test_list_by_session_excludes_other_games(ledger, store):
    await _append(ledger, 1)
    game_id = await store.create(1, 1, 0, 100)
    assert await ledger.list_by_session(game_id) == []


async def test_list_all_newest_first(ledger):
    for n, country in enumerate(("France", "Italy", "Spain"), start=1):
        await _append(ledger, n, country=country)
    assert [r.country for r in await ledger.list_all()] == [
        "Spain", "Italy", "France",
    ]


async def test_list_unlinked_in_submission_order(ledger, store):
    await _append(ledger, 1, country="France")
    game_id = await store.create(1, 1, 0, 100)
    await ledger.link_unlinked(game_id)
    await _append(ledger, 1, country="Italy")
    await _append(ledger, 2, country="Spain")

    assert [r.country for r in await ledger.list_unlinked()] == ["Italy", "Spain"]


async def test_clear_deletes_everything(ledger):
    await _append(ledger, 1)
    await _append(ledger, 2)
    assert await ledger.clear() == 2
    assert await ledger.list_all() == []


async def test_clear_in_caller_session_is_undone_by_rollback(ledger, db_manager):
    await _append(ledger, 1)
    async with db_manager.session() as db:
        assert await ledger.clear(db) == 1
        await db.rollback()
    assert len(await ledger.list_all()) == 1


async def test_append_failure_raises_persistence_error(ledger, drop_table):
    await drop_table(AnswerRecord)
    with pytest.raises(PersistenceError):
        await _append(ledger, 1)


async def test_list_failure_raises_persistence_error(ledger, drop_table):
    await drop_table(AnswerRecord)
    with pytest.raises(PersistenceError):
        await ledger.list_all()
