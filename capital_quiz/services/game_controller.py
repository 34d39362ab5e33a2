"""Game Controller — owns the quiz state machine and drives persistence.

Invariants:
    - Phases: LOADING -> PRESENTING -> FEEDBACK -> (PRESENTING | COMPLETED)
    - Exactly one answer accepted per presented question (double-submit is a no-op)
    - Answers written with game_id=None at submission; linked only after the game
      result was created, with the id that create returned
    - Persistence failures never interrupt the game: logged, then play continues
    - Work deferred across the feedback delay is dropped if a new game started meanwhile,
      including finalization: a game abandoned during its last feedback pause is not
      stored, and its answers stay unlinked like any other abandoned game
    - Answer writes and the create+link pair never interleave (_persist_lock), so an
      answer from a game started during finalization is never linked to the old game

Design Decisions:
    - Impureim sandwich: pure state mutation (core/) first, then awaited IO
    - Single best-effort write per answer/result, no retry loop
    - Observers receive frozen GameSnapshots after every transition
"""

import asyncio
import logging
import random
from typing import Callable

from capital_quiz.core.countries import Question, list_countries
from capital_quiz.core.domain_types import (
    DEFAULT_FEEDBACK_DELAY_SECONDS, DEFAULT_QUESTIONS_PER_GAME, GameId, GamePhase,
)
from capital_quiz.core.errors import LinkingInconsistency, PersistenceError
from capital_quiz.core.game_state import GameSnapshot, GameState
from capital_quiz.core.question_generator import QuestionGenerator, QuestionInstance
from capital_quiz.core.repository_protocols import (
    AnswerLedgerLike, IncorrectAnswerLogLike, SessionLinkerLike, SessionStoreLike,
)
from capital_quiz.core.scoring import FinalScore, compute_final_score
from capital_quiz.infrastructure.database import SessionFactory
from capital_quiz.services.answer_ledger import AnswerLedger
from capital_quiz.services.incorrect_answer_log import IncorrectAnswerLog
from capital_quiz.services.session_linker import SessionLinker
from capital_quiz.services.session_store import SessionStore

logger = logging.getLogger(__name__)

Listener = Callable[[GameSnapshot], None]


class GameController:
    """Single-player quiz orchestration over generator, ledger, store and linker."""

    def __init__(
        self,
        generator: QuestionGenerator,
        ledger: AnswerLedgerLike,
        store: SessionStoreLike,
        linker: SessionLinkerLike,
        incorrect_log: IncorrectAnswerLogLike | None = None,
        questions_per_game: int = DEFAULT_QUESTIONS_PER_GAME,
        feedback_delay_seconds: float = DEFAULT_FEEDBACK_DELAY_SECONDS,
    ):
        if questions_per_game < 1:
            raise ValueError("questions_per_game must be at least 1")
        self.generator = generator
        self.ledger = ledger
        self.store = store
        self.linker = linker
        self.incorrect_log = incorrect_log
        self.questions_per_game = questions_per_game
        self.feedback_delay_seconds = feedback_delay_seconds
        self.state = GameState()
        self._listeners: list[Listener] = []
        self._advancing_game: int | None = None
        self._persist_lock = asyncio.Lock()

    # ─── Observation ────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot(self.questions_per_game)

    def _notify(self) -> None:
        snap = self.snapshot()
        logger.debug(
            f"Game transitioned to {snap.phase.value}",
            extra={"phase": snap.phase.value, "game_number": snap.game_number},
        )
        for listener in self._listeners:
            listener(snap)

    # ─── Transitions ────────────────────────────────────────────

    def start_new_game(self) -> GameSnapshot:
        """Reset from any phase, then LOADING -> PRESENTING."""
        self.state.reset_for_new_game()
        self._notify()
        self._present_next_question()
        logger.info(
            "New game started",
            extra={"game_number": self.state.game_number},
        )
        return self.snapshot()

    async def submit_answer(self, option: str) -> GameSnapshot:
        """Accept one answer for the current question and enter FEEDBACK."""
        state = self.state
        if not state.awaiting_answer:
            logger.debug(
                "Answer ignored: no question awaiting an answer",
                extra={"phase": state.phase.value},
            )
            return self.snapshot()

        # ── PURE: state mutation before any await (blocks re-entrant submits) ──
        question = state.current_question
        is_correct = option == question.capital
        question_number = state.question_count + 1
        state.selected_answer = option
        state.last_answer_correct = is_correct
        if is_correct:
            state.score += 1
        state.question_count = question_number
        state.phase = GamePhase.FEEDBACK
        self._notify()

        # ── IMPURE: record now, link later ──
        async with self._persist_lock:
            await self._record_answer(
                question, option, is_correct, question_number,
            )
        return self.snapshot()

    async def advance(self) -> GameSnapshot:
        """After the feedback delay: next question, or finalize the game."""
        game_number = self.state.game_number
        if (
            self.state.phase != GamePhase.FEEDBACK
            or self._advancing_game == game_number
        ):
            return self.snapshot()

        self._advancing_game = game_number
        try:
            await asyncio.sleep(self.feedback_delay_seconds)
            if (
                self.state.game_number != game_number
                or self.state.phase != GamePhase.FEEDBACK
            ):
                logger.debug(
                    "Stale advance dropped",
                    extra={"game_number": game_number},
                )
                return self.snapshot()

            if self.state.question_count >= self.questions_per_game:
                game_id = await self._finalize()
                if self.state.game_number == game_number:
                    self.state.session_id = game_id
                    self.state.phase = GamePhase.COMPLETED
                    self._notify()
            else:
                self._present_next_question()
        finally:
            if self._advancing_game == game_number:
                self._advancing_game = None
        return self.snapshot()

    async def answer(self, option: str) -> GameSnapshot:
        """Submit and, when accepted, wait out the feedback and advance."""
        before = self.state.question_count
        snap = await self.submit_answer(option)
        if snap.question_count == before:
            return snap
        return await self.advance()

    # ─── Internals ──────────────────────────────────────────────

    def _present_next_question(self) -> QuestionInstance:
        instance, used = self.generator.next(
            self.state.used_countries,
            presented_at=self.state.question_count + 1,
        )
        self.state.present(instance, used)
        self._notify()
        return instance

    async def _record_answer(
        self,
        question: QuestionInstance,
        option: str,
        is_correct: bool,
        question_number: int,
    ) -> None:
        try:
            await self.ledger.append(
                None,
                question.country,
                option,
                question.capital,
                is_correct,
                question_number,
            )
        except PersistenceError as e:
            logger.error(
                f"Failed to record answer: {e.message}",
                extra={"error_code": e.code, "question_number": question_number},
            )

        if is_correct or self.incorrect_log is None:
            return
        try:
            await self.incorrect_log.append(
                question.country, option, question.capital,
            )
        except PersistenceError as e:
            logger.error(
                f"Failed to record incorrect answer: {e.message}",
                extra={"error_code": e.code, "question_number": question_number},
            )

    async def _finalize(self) -> GameId | None:
        """Create the game result, then link in-flight answers to it.

        Holds _persist_lock across both writes: the NULL-predicate link must only
        see answers recorded before the result existed.
        """
        score = compute_final_score(self.state.score, self.questions_per_game)
        async with self._persist_lock:
            return await self._store_and_link(score)

    async def _store_and_link(self, score: FinalScore) -> GameId | None:
        try:
            game_id = await self.store.create(
                score.total_questions,
                score.correct_answers,
                score.wrong_answers,
                score.score_percentage,
            )
        except PersistenceError as e:
            logger.error(
                f"Failed to save game result, answers stay unlinked: {e.message}",
                extra={"error_code": e.code},
            )
            return None

        try:
            await self.linker.link(game_id)
        except LinkingInconsistency as e:
            logger.warning(
                e.message, extra={"error_code": e.code, "game_id": game_id},
            )
        except PersistenceError as e:
            logger.error(
                f"Failed to link answers: {e.message}",
                extra={"error_code": e.code, "game_id": game_id},
            )
        return game_id


def create_game_controller(
    session_factory: SessionFactory,
    questions_per_game: int = DEFAULT_QUESTIONS_PER_GAME,
    feedback_delay_seconds: float = DEFAULT_FEEDBACK_DELAY_SECONDS,
    countries: tuple[Question, ...] | None = None,
    rng: random.Random | None = None,
) -> GameController:
    """Wire repositories and the generator. Raises ConfigurationError on bad data."""
    generator = QuestionGenerator(
        countries if countries is not None else list_countries(), rng=rng,
    )
    ledger = AnswerLedger(session_factory)
    store = SessionStore(session_factory)
    return GameController(
        generator=generator,
        ledger=ledger,
        store=store,
        linker=SessionLinker(ledger, store),
        incorrect_log=IncorrectAnswerLog(session_factory),
        questions_per_game=questions_per_game,
        feedback_delay_seconds=feedback_delay_seconds,
    )
