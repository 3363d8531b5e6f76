"""Error Handlers: global exception handlers for the Nexuscore API.

Invariants:
    - NexuscoreError → exc.http_status with exc.to_response(); the one status rule
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500 carrying the exception text in "error";
      api/middleware.py builds the same response inside the CORS layer
    - Every body has a top-level "error" string
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from nexuscore.core.errors import NexuscoreError, ErrorCategory

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_nexuscore_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_nexuscore_error_handler(app: FastAPI) -> None:

    @app.exception_handler(NexuscoreError)
    async def nexuscore_error_handler(request: Request, exc: NexuscoreError):
        """Handle all Nexuscore domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"NexuscoreError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "video_id": exc.context.video_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
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
        """Catch-all: 500 with the underlying error text."""
        return internal_error_response(request, exc)


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and build its 500 envelope."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": str(exc) or exc.__class__.__name__,
            "code": "INTERNAL_ERROR",
            "category": ErrorCategory.INTERNAL.value,
        },
    )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": "Invalid request data",
        "code": "VALIDATION_ERROR",
        "category": ErrorCategory.VALIDATION.value,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
