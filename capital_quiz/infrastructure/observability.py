"""Structured Logging — game-aware log formatting and one-shot setup.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Game context passed via `extra=` (game_id, game_number, question_number, phase,
      country, linked, error_code) is emitted as JSON keys, or appended as
      ``[game_number=2 question_number=7]`` in text mode
    - setup_logging() is idempotent: calling it again replaces its own handler
    - Driver chatter (aiosqlite, sqlalchemy.engine) never drops below WARNING

Design Decisions:
    - Stdlib logging with a small JSON formatter, no logging library
"""

import json
import logging
from datetime import datetime, timezone

GAME_CONTEXT_FIELDS = (
    "game_id", "game_number", "question_number", "phase",
    "country", "linked", "error_code",
)

_NOISY_LOGGERS = ("aiosqlite", "sqlalchemy.engine")
_HANDLER_NAME = "capital_quiz"


def game_context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in GAME_CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **game_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines with the game context appended."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        ctx = game_context(record)
        if ctx:
            line += " [" + " ".join(f"{k}={v}" for k, v in ctx.items()) + "]"
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the quiz handler on the root logger (replacing a previous one)."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)

    root_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(root_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))
    return handler
