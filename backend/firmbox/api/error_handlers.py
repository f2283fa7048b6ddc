"""Error Handlers — global exception handlers rendering the callable error envelope.

Invariants:
    - FirmboxError → its own envelope and HTTP status
    - RequestValidationError (malformed JSON, non-object data, non-string fields) → invalid-argument
    - Exception (catch-all) → internal, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (FirmboxError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from firmbox.core.domain_types import ErrorStatus
from firmbox.core.errors import FirmboxError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_firmbox_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_firmbox_error_handler(app: FastAPI) -> None:

    @app.exception_handler(FirmboxError)
    async def firmbox_error_handler(request: Request, exc: FirmboxError):
        """Handle all FirmBox domain/infrastructure errors."""
        logger.warning(
            f"FirmboxError: {exc.message}",
            extra={"error_code": exc.code.value, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors as invalid-argument."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(ErrorStatus.INTERNAL, "An unexpected error occurred"),
        )


def _envelope(code: ErrorStatus, message: str) -> dict:
    return {"error": {"status": code.canonical, "code": code.value, "message": message}}


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build invalid-argument envelope with field-level details."""
    body = _envelope(ErrorStatus.INVALID_ARGUMENT, "Invalid request data")
    body["error"]["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return body
