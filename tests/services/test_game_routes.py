"""Game Routes — tests for the active-game API.

Invariants:
    - POST /answer returns the FEEDBACK snapshot; the advance runs as a background
      task, which the httpx test client completes before returning
    - The correct answer is hidden until an option was selected
"""

from capital_quiz.core.domain_types import GamePhase


async def test_get_game_before_start_is_loading(client):
    res = await client.get("/api/v1/game")
    assert res.status_code == 200
    assert res.json()["phase"] == GamePhase.LOADING.value
    assert res.json()["question"] is None


async def test_new_game_presents_question_without_answer(client):
    res = await client.post("/api/v1/game/new")
    body = res.json()
    assert res.status_code == 200
    assert body["phase"] == "presenting"
    assert len(body["question"]["options"]) == 4
    assert body["question"]["correct_answer"] is None
    assert body["question"]["question_number"] == 1


async def test_answer_returns_feedback_and_advances(client, controller):
    await client.post("/api/v1/game/new")
    capital = controller.state.current_question.capital

    res = await client.post("/api/v1/game/answer", json={"option": capital})
    body = res.json()
    assert res.status_code == 200
    assert body["phase"] == "feedback"
    assert body["last_answer_correct"] is True
    assert body["question"]["correct_answer"] == capital

    state = (await client.get("/api/v1/game")).json()
    assert state["phase"] == "presenting"
    assert state["question_count"] == 1
    assert state["question"]["question_number"] == 2


async def test_answer_not_in_options_rejected(client):
    await client.post("/api/v1/game/new")
    res = await client.post("/api/v1/game/answer", json={"option": "Atlantis"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_OPTION"


async def test_blank_answer_rejected_by_validation(client):
    await client.post("/api/v1/game/new")
    res = await client.post("/api/v1/game/answer", json={"option": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert res.json()["error"]["details"][0]["field"] == "option"


async def test_full_game_over_http_completes_and_links(client):
    body = (await client.post("/api/v1/game/new")).json()
    for _ in range(10):
        question = body["question"]
        res = await client.post(
            "/api/v1/game/answer", json={"option": question["options"][0]},
        )
        assert res.status_code == 200
        body = (await client.get("/api/v1/game")).json()

    assert body["phase"] == "completed"
    game_id = body["session_id"]
    assert game_id is not None

    answers = (await client.get(f"/api/v1/results/{game_id}/answers")).json()
    assert [a["question_number"] for a in answers] == list(range(1, 11))
    assert all(a["game_id"] == game_id for a in answers)


async def test_answer_after_completion_is_noop(client, controller):
    controller.start_new_game()
    for _ in range(10):
        question = controller.state.current_question
        await controller.answer(question.capital)

    res = await client.post("/api/v1/game/answer", json={"option": "Paris"})
    assert res.status_code == 200
    assert res.json()["phase"] == "completed"
    assert res.json()["question_count"] == 10
