"""Reference Data — the fixed (country, capital) set quiz questions are drawn from.

Invariants:
    - The reference set is immutable (tuple of frozen dataclasses)
    - Country names are unique; capitals are non-blank
    - A usable set has at least OPTIONS_PER_QUESTION entries and distinct capitals

Design Decisions:
    - Static data in core/: no IO, loaded once at startup and validated eagerly so
      malformed data fails before the first question (ConfigurationError)
"""

from dataclasses import dataclass
from typing import Iterable

from capital_quiz.core.domain_types import OPTIONS_PER_QUESTION
from capital_quiz.core.errors import ConfigurationError


@dataclass(frozen=True)
class Question:
    """One (country, capital) pair."""
    country: str
    capital: str


_EUROPEAN_CAPITALS: tuple[tuple[str, str], ...] = (
    ("France", "Paris"),
    ("Germany", "Berlin"),
    ("Italy", "Rome"),
    ("Spain", "Madrid"),
    ("Portugal", "Lisbon"),
    ("Netherlands", "Amsterdam"),
    ("Belgium", "Brussels"),
    ("Switzerland", "Bern"),
    ("Austria", "Vienna"),
    ("Poland", "Warsaw"),
    ("Czech Republic", "Prague"),
    ("Hungary", "Budapest"),
    ("Romania", "Bucharest"),
    ("Bulgaria", "Sofia"),
    ("Greece", "Athens"),
    ("Croatia", "Zagreb"),
    ("Slovakia", "Bratislava"),
    ("Slovenia", "Ljubljana"),
    ("Estonia", "Tallinn"),
    ("Latvia", "Riga"),
)


def list_countries() -> tuple[Question, ...]:
    """Return the built-in reference set, in declaration order."""
    return tuple(
        Question(country=country, capital=capital)
        for country, capital in _EUROPEAN_CAPITALS
    )


def list_capitals(countries: Iterable[Question]) -> list[str]:
    return [q.capital for q in countries]


def validate_reference_set(countries: Iterable[Question]) -> tuple[Question, ...]:
    """Check the reference set can build 4 distinct options. Pure.

    Raises ConfigurationError on blank values, duplicate countries, or fewer
    than OPTIONS_PER_QUESTION entries / distinct capitals.
    """
    questions = tuple(countries)
    seen: set[str] = set()
    for q in questions:
        if not q.country.strip() or not q.capital.strip():
            raise ConfigurationError(
                f"Reference entry has a blank field: {q!r}",
            )
        if q.country in seen:
            raise ConfigurationError(
                f"Duplicate country in reference set: {q.country}",
            )
        seen.add(q.country)

    if len(questions) < OPTIONS_PER_QUESTION:
        raise ConfigurationError(
            f"Reference set needs at least {OPTIONS_PER_QUESTION} entries, "
            f"got {len(questions)}",
        )
    distinct_capitals = {q.capital for q in questions}
    if len(distinct_capitals) < OPTIONS_PER_QUESTION:
        raise ConfigurationError(
            f"Reference set needs at least {OPTIONS_PER_QUESTION} distinct "
            f"capitals, got {len(distinct_capitals)}",
        )
    return questions
