"""Error Handlers — global exception handlers for the Users API.

Invariants:
    - UserServiceError → its http_status + envelope (to_response)
    - RequestValidationError → 400 "Validation failed" envelope, one "field: message" per error
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (UserServiceError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from user_service.api.respond import envelope_response
from user_service.core.errors import UserServiceError
from user_service.schemas.envelope import fail_envelope
from user_service.services.request_dispatch import (
    VALIDATION_FAILED_MESSAGE, UNEXPECTED_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)

# Leading loc segment names the request part, not the field
_REQUEST_PARTS = frozenset({"body", "query", "path", "header", "cookie"})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserServiceError)
    async def service_error_handler(request: Request, exc: UserServiceError):
        """Handle all domain/infrastructure errors raised outside the dispatcher."""
        logger.warning(
            f"UserServiceError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies and wrongly typed parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return envelope_response(
            status.HTTP_400_BAD_REQUEST,
            fail_envelope(
                VALIDATION_FAILED_MESSAGE, format_validation_errors(exc),
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            fail_envelope(UNEXPECTED_ERROR_MESSAGE, [UNEXPECTED_ERROR_MESSAGE]),
        )


def format_validation_errors(exc: RequestValidationError) -> list[str]:
    """Render pydantic errors as "field: message" strings."""
    formatted = []
    for e in exc.errors():
        loc = [str(part) for part in e.get("loc", ())]
        if loc and loc[0] in _REQUEST_PARTS:
            loc = loc[1:]
        field = ".".join(loc) or "request"
        formatted.append(f"{field}: {e.get('msg', 'Invalid value')}")
    return formatted or ["request: Invalid request data"]
