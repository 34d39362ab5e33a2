"""Question Generator — non-repeating quiz questions with shuffled distractors.

Invariants:
    - Options are exactly OPTIONS_PER_QUESTION distinct capitals, the correct one exactly once
    - Distractors come from other countries' capitals, drawn without replacement
    - No country repeats until used_countries covers the whole reference set,
      at which point it is reset to empty before selecting
    - Never mutates the caller's used_countries (returns a new frozenset)

Design Decisions:
    - Injected random.Random: deterministic in tests, module-level random never touched
    - random.Random.shuffle is Fisher-Yates: correct answer position uniformly distributed
"""

import random
from collections.abc import Sequence, Set
from dataclasses import dataclass

from capital_quiz.core.countries import (
    Question, list_capitals, validate_reference_set,
)
from capital_quiz.core.domain_types import OPTIONS_PER_QUESTION
from capital_quiz.core.errors import ConfigurationError


@dataclass(frozen=True)
class QuestionInstance:
    """A question as presented: the pair, its ordered options, and its ordinal."""
    question: Question
    options: tuple[str, ...]
    presented_at: int

    @property
    def country(self) -> str:
        return self.question.country

    @property
    def capital(self) -> str:
        return self.question.capital


def get_multiple_choice_options(
    capital: str, countries: Sequence[Question], rng: random.Random,
) -> tuple[str, ...]:
    """Correct capital plus 3 distinct distractors, shuffled."""
    distractor_pool = sorted(set(list_capitals(countries)) - {capital})
    needed = OPTIONS_PER_QUESTION - 1
    if len(distractor_pool) < needed:
        raise ConfigurationError(
            f"Only {len(distractor_pool)} distractors available for "
            f"'{capital}', need {needed}",
        )
    options = rng.sample(distractor_pool, needed) + [capital]
    rng.shuffle(options)
    return tuple(options)


class QuestionGenerator:
    """Draws questions from a validated reference set."""

    def __init__(
        self, countries: Sequence[Question], rng: random.Random | None = None,
    ):
        self.countries = validate_reference_set(countries)
        self.rng = rng or random.Random()

    @property
    def size(self) -> int:
        return len(self.countries)

    def next(
        self, used_countries: Set[str], presented_at: int = 1,
    ) -> tuple[QuestionInstance, frozenset[str]]:
        """Pick an unused country and build its options. Pure w.r.t. used_countries."""
        all_names = {q.country for q in self.countries}
        used = frozenset(used_countries) & all_names
        if used >= all_names:
            used = frozenset()

        available = [q for q in self.countries if q.country not in used]
        question = self.rng.choice(available)
        options = get_multiple_choice_options(
            question.capital, self.countries, self.rng,
        )
        instance = QuestionInstance(
            question=question, options=options, presented_at=presented_at,
        )
        return instance, used | {question.country}
