"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Quiz policy constants (questions per game, feedback delay) are settings, not literals
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box with a local SQLite file
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from capital_quiz.core.domain_types import (
    DEFAULT_FEEDBACK_DELAY_SECONDS, DEFAULT_QUESTIONS_PER_GAME,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database — single local data file
    database_url: str = "sqlite+aiosqlite:///./capital_quiz.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sqlite_url(cls, v: str) -> str:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    # Quiz policy
    questions_per_game: int = Field(DEFAULT_QUESTIONS_PER_GAME, ge=1)
    feedback_delay_seconds: float = Field(DEFAULT_FEEDBACK_DELAY_SECONDS, ge=0)

    # API — no bundled UI; set CORS_ORIGINS to the origin of whichever browser client
    # drives the game (JSON list, e.g. '["http://localhost:8080"]')
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
