"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - GameId and AnswerId wrap store-assigned integer identities
    - Every quiz question has exactly OPTIONS_PER_QUESTION options
    - All valid game phases encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

GameId = NewType("GameId", int)
AnswerId = NewType("AnswerId", int)


# ─── Policy Constants ────────────────────────────────────────────

OPTIONS_PER_QUESTION = 4
DEFAULT_QUESTIONS_PER_GAME = 10
DEFAULT_FEEDBACK_DELAY_SECONDS = 2.0


# ─── Enums ───────────────────────────────────────────────────────

class GamePhase(str, Enum):
    """GameController states. COMPLETED is terminal for one game."""
    LOADING = "loading"
    PRESENTING = "presenting"
    FEEDBACK = "feedback"
    COMPLETED = "completed"
