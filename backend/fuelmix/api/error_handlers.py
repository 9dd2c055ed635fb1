"""Error Handlers — global exception handlers for the fuel mixture API.

Invariants:
    - FuelMixError → exc.http_status with flat {"error": message}
    - RequestValidationError → 400 with code REQUEST_INVALID and field-level details
    - Exception (catch-all) → 500 with code INTERNAL_ERROR, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (FuelMixError), validation (Pydantic), catch-all (Exception)
    - Parse failures reuse the "error" key so clients read one field for every 4xx
    - Framework-level bodies add "code"; the domain body stays {"error": message}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from fuelmix.core.errors import FuelMixError

logger = logging.getLogger(__name__)

REQUEST_INVALID = "REQUEST_INVALID"
INTERNAL_ERROR = "INTERNAL_ERROR"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_fuelmix_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_fuelmix_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(FuelMixError)
    async def fuelmix_error_handler(request: Request, exc: FuelMixError):
        """Handle all fuel mixture domain errors."""
        logger.error(
            f"FuelMixError: {exc.log_message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed JSON and missing/mistyped fields."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": REQUEST_INVALID, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": INTERNAL_ERROR, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "An unexpected error occurred",
                "code": INTERNAL_ERROR,
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured parse-failure response."""
    return {
        "error": "Invalid request data",
        "code": REQUEST_INVALID,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
