"""Incorrect Answer Log — tests for the legacy wrong-answer table."""

async def test_append_and_list_newest_first(incorrect_log):
    await incorrect_log.append("France", "Rome", "Paris")
    await incorrect_log.append("Italy", "Paris", "Rome")
    rows = await incorrect_log.list_all()
    assert [r.country for r in rows] == ["Italy", "France"]
    assert rows[1].user_answer == "Rome"
    assert rows[1].correct_answer == "Paris"


async def test_clear_returns_deleted_count(incorrect_log):
    await incorrect_log.append("France", "Rome", "Paris")
    assert await incorrect_log.clear() == 1
    assert await incorrect_log.list_all() == []
