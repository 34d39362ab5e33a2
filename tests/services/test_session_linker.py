"""Session Linker — tests for create-then-link ordering guarantees."""

import pytest

from capital_quiz.core.errors import LinkingInconsistency


async def _append(ledger, n):
    await ledger.append(None, "France", "Paris", "Paris", True, n)


async def test_link_binds_unlinked_answers(ledger, store, linker):
    for n in (1, 2):
        await _append(ledger, n)
    game_id = await store.create(2, 2, 0, 100)

    assert await linker.link(game_id) == 2
    assert len(await ledger.list_by_session(game_id)) == 2


async def test_link_to_missing_game_raises_and_links_nothing(ledger, linker):
    await _append(ledger, 1)
    with pytest.raises(LinkingInconsistency) as exc:
        await linker.link(404)
    assert exc.value.game_id == 404
    assert (await ledger.list_all())[0].game_id is None


async def test_link_with_no_unlinked_answers_raises(store, linker):
    game_id = await store.create(10, 0, 10, 0)
    with pytest.raises(LinkingInconsistency, match="No unlinked answers"):
        await linker.link(game_id)


async def test_second_link_reports_inconsistency(ledger, store, linker):
    await _append(ledger, 1)
    game_id = await store.create(1, 1, 0, 100)
    await linker.link(game_id)
    with pytest.raises(LinkingInconsistency):
        await linker.link(game_id)
    assert len(await ledger.list_by_session(game_id)) == 1
