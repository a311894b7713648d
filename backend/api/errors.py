"""
API exception handlers.

Every error leaves the API in the ErrorResponse shape. Module exceptions
are mapped to status codes by their base class; anything unclassified
becomes a generic 500 whose details stay in the server log.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    MediashareError,
    NotFoundError,
    ValidationError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins
STATUS_BY_ERROR: list[tuple[type[MediashareError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_for(exc: MediashareError) -> int:
    """Map a module exception to its HTTP status code."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    request: Request,
    status_code: int,
    error: str,
    messages: list[str],
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build an ErrorResponse and log it."""
    body = ErrorResponse(
        status_code=status_code,
        timestamp=datetime.now(timezone.utc),
        path=request.url.path,
        method=request.method,
        error=error,
        message=messages,
    )
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(level, "%s %s - %d - %s", request.method, request.url.path, status_code, messages)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


def _format_validation_error(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    message = error.get("msg", "Invalid value")
    return f"{'.'.join(location)}: {message}" if location else message


async def handle_mediashare_error(request: Request, exc: MediashareError) -> JSONResponse:
    status_code = status_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return error_response(request, status_code, exc.code, [exc.message], headers)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [_format_validation_error(e) for e in exc.errors()] or ["Invalid input"]
    return error_response(request, status.HTTP_400_BAD_REQUEST, "INVALID_INPUT", messages)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail
    messages = [str(m) for m in detail] if isinstance(detail, list) else [str(detail)]
    return error_response(
        request,
        exc.status_code,
        "HTTP_ERROR",
        messages,
        getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        ["Internal server error"],
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(MediashareError, handle_mediashare_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
