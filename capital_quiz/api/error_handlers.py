"""Error Handlers — map quiz failures onto the REST error envelope.

Invariants:
    - QuizError → its own code and status via to_response()
    - PersistenceError reaches the client only for user-requested reads/resets, so it
      is answered with a "history unavailable" message and a Retry-After hint;
      gameplay writes never raise here (the controller logs and carries on)
    - RequestValidationError → 400 VALIDATION_ERROR with one entry per bad field
    - Anything else → 500 INTERNAL_ERROR without internal details

Design Decisions:
    - Handlers registered from one function called by main.py
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from capital_quiz.core.errors import ErrorSeverity, PersistenceError, QuizError

logger = logging.getLogger(__name__)

HISTORY_UNAVAILABLE_MESSAGE = (
    "Game history is unavailable right now. The current game is not affected."
)
RETRY_AFTER_SECONDS = 5


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuizError, handle_quiz_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_quiz_error(request: Request, exc: QuizError) -> JSONResponse:
    headers = None
    if isinstance(exc, PersistenceError):
        if exc.context.user_message is None:
            exc.context.user_message = HISTORY_UNAVAILABLE_MESSAGE
        headers = {"Retry-After": str(RETRY_AFTER_SECONDS)}

    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{request.method} {request.url.path} failed: {exc.message}",
        extra={"error_code": exc.code, "game_id": exc.context.game_id},
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(), headers=headers,
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [_field_error(e) for e in exc.errors()]
    logger.warning(
        f"Rejected {request.method} {request.url.path}: "
        + "; ".join(f"{d['field']}: {d['message']}" for d in details),
        extra={"error_code": "VALIDATION_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": "validation",
                "severity": ErrorSeverity.ERROR.value,
                "details": details,
            },
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _field_error(error: dict) -> dict:
    # ("body", "option") -> "option"; path parameters keep their location
    loc = [str(part) for part in error["loc"]]
    if loc and loc[0] == "body":
        loc = loc[1:]
    return {
        "field": ".".join(loc) or "body",
        "message": error["msg"],
        "type": error["type"],
    }
