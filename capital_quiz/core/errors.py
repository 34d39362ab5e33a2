"""Error Hierarchy — typed, categorized exceptions for all quiz failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ConfigurationError is fatal at startup; PersistenceError and LinkingInconsistency
      are recovered locally during gameplay
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with QuizError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    CONSISTENCY = "consistency"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    game_id: int | None = None
    question_number: int | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class QuizError(Exception):
    """Base exception for all quiz errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "game_id": self.context.game_id,
                    "question_number": self.context.question_number,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ConfigurationError(QuizError):
    """Reference data or settings are malformed. Fatal at startup."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class InvalidOptionError(QuizError):
    """Submitted answer is not one of the presented options."""
    def __init__(self, option: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{option}' is not one of the current question's options",
            "INVALID_OPTION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.option = option


class ResourceNotFoundError(QuizError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class LinkingInconsistency(QuizError):
    """Linking found no unlinked answers, or the target session does not exist."""
    def __init__(self, message: str, game_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.game_id = game_id
        super().__init__(
            message, "LINKING_INCONSISTENCY", ErrorCategory.CONSISTENCY,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.game_id = game_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(QuizError):
    """Storage read or write failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
