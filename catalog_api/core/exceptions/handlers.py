"""Exception handlers for FastAPI application.

Provides centralized exception handling with standardized error responses.
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from .http_exceptions import AppError, ConflictError, InternalServerError, UnprocessableEntityError

logger = logging.getLogger(__name__)


def _error_json(exc: AppError, request: Request) -> JSONResponse:
    error_response = exc.to_error_response(path=request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(exclude_none=True),
    )


async def app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle custom AppError and its subclasses.

    Args:
        request: FastAPI request
        exc: Application exception

    Returns:
        JSON response with standardized error format
    """
    if exc.status_code >= 500:
        logger.error("Application error: %s", exc.message)
    else:
        logger.info("Client error %s: %s", exc.error_code, exc.message)
    return _error_json(exc, request)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors (422).

    Only the JSON-safe parts of each error are returned; the raw ``ctx``
    may hold exception objects.
    """
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    error = UnprocessableEntityError(
        message="Request validation failed",
        error_code="ValidationError",
        detail={"errors": errors},
    )
    return _error_json(error, request)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Handle SQLAlchemy IntegrityError (database constraints), e.g. a duplicate slug."""
    logger.error(f"Database integrity error: {exc}", exc_info=True)

    error = ConflictError(
        message="Database constraint violation",
        error_code="IntegrityError",
        detail={"database_error": str(exc.orig) if hasattr(exc, "orig") else str(exc)},
    )
    return _error_json(error, request)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions (500)."""
    logger.error(f"Unexpected error: {exc}", exc_info=True)

    internal_exc = InternalServerError(
        message="An unexpected error occurred",
        detail={"error": str(exc)} if logger.isEnabledFor(logging.DEBUG) else None,
    )
    return _error_json(internal_exc, request)


def register_exception_handlers(app: Any) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppError, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
