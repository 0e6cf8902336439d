"""
Exception handlers.

Maps BlueTaskError subclasses to HTTP status codes with a consistent JSON
body, and turns anything unhandled into a logged 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    BlueTaskError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; first match wins
STATUS_CODES: list[tuple[type[BlueTaskError], int]] = [
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (ConflictError, 409),
    (ExternalServiceError, 502),
]


def status_code_for(exc: BlueTaskError) -> int:
    """HTTP status for a BlueTaskError (500 if unmapped)."""
    for exc_type, status_code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def bluetask_error_handler(request: Request, exc: BlueTaskError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    message = str(exc) if get_settings().debug else "Internal server error"
    body = ErrorResponse(error="INTERNAL_ERROR", message=message)
    return JSONResponse(status_code=500, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an app."""
    app.add_exception_handler(BlueTaskError, bluetask_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
