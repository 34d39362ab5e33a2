"""Game State — tests for the in-memory quiz state.

Tests cover:
    - Initial values and awaiting_answer guard
    - present() clears the previous selection
    - reset_for_new_game() restores defaults and bumps game_number
    - Snapshots are frozen copies
"""

import dataclasses

import pytest

from capital_quiz.core.countries import Question
from capital_quiz.core.domain_types import GamePhase, GameId
from capital_quiz.core.game_state import GameState
from capital_quiz.core.question_generator import QuestionInstance


def _instance(n=1):
    return QuestionInstance(
        question=Question("France", "Paris"),
        options=("Paris", "Rome", "Berlin", "Madrid"),
        presented_at=n,
    )


def test_new_state_is_loading_with_zero_counts():
    state = GameState()
    assert state.phase == GamePhase.LOADING
    assert state.score == 0
    assert state.question_count == 0
    assert state.used_countries == frozenset()
    assert state.session_id is None
    assert not state.awaiting_answer


def test_present_enters_presenting_and_awaits_answer():
    state = GameState()
    state.present(_instance(), frozenset({"France"}))
    assert state.phase == GamePhase.PRESENTING
    assert state.awaiting_answer
    assert state.used_countries == {"France"}


def test_selected_answer_blocks_awaiting():
    state = GameState()
    state.present(_instance(), frozenset({"France"}))
    state.selected_answer = "Rome"
    assert not state.awaiting_answer


def test_present_clears_previous_selection():
    state = GameState()
    state.present(_instance(1), frozenset({"France"}))
    state.selected_answer = "Paris"
    state.last_answer_correct = True
    state.present(_instance(2), frozenset({"France"}))
    assert state.selected_answer is None
    assert state.last_answer_correct is None


def test_reset_restores_defaults_and_bumps_game_number():
    state = GameState()
    state.present(_instance(), frozenset({"France"}))
    state.score = 4
    state.question_count = 6
    state.session_id = GameId(3)
    state.reset_for_new_game()
    assert state.phase == GamePhase.LOADING
    assert state.score == 0
    assert state.question_count == 0
    assert state.used_countries == frozenset()
    assert state.session_id is None
    assert state.current_question is None
    assert state.game_number == 1


def test_snapshot_is_frozen_copy():
    state = GameState()
    state.present(_instance(), frozenset({"France"}))
    snap = state.snapshot(10)
    state.score = 5
    assert snap.score == 0
    assert snap.questions_per_game == 10
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 3  # type: ignore[misc]


def test_snapshot_is_complete_only_when_completed():
    state = GameState()
    assert not state.snapshot(10).is_complete
    state.phase = GamePhase.COMPLETED
    assert state.snapshot(10).is_complete
