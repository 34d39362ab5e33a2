"""Scoring — pure computation of final game scores and history statistics.

Invariants:
    - score_percentage = round(correct / total * 100); wrong = total - correct
    - History stats never raise — an empty history yields zeros

Design Decisions:
    - Pure functions, not methods on GameState (state is enforcement, stats are presentation)
"""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class FinalScore:
    """Aggregate numbers persisted as one game result."""
    total_questions: int
    correct_answers: int
    wrong_answers: int
    score_percentage: int


def compute_final_score(correct_answers: int, total_questions: int) -> FinalScore:
    """Final score for a finished game. Pure, no IO."""
    if total_questions <= 0:
        raise ValueError("total_questions must be positive")
    if not 0 <= correct_answers <= total_questions:
        raise ValueError(
            f"correct_answers must be within 0..{total_questions}, "
            f"got {correct_answers}",
        )
    return FinalScore(
        total_questions=total_questions,
        correct_answers=correct_answers,
        wrong_answers=total_questions - correct_answers,
        score_percentage=round(correct_answers / total_questions * 100),
    )


def compute_history_stats(percentages: Iterable[float]) -> dict:
    """Summary over stored games: count, average (1 decimal), best."""
    values = [float(p) for p in percentages]
    if not values:
        return {"total_games": 0, "average_score": 0.0, "best_score": 0.0}
    return {
        "total_games": len(values),
        "average_score": round(sum(values) / len(values), 1),
        "best_score": max(values),
    }
