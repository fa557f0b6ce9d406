"""Custom exceptions and exception handlers."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chat_gateway.core.config import DEFAULT_ALLOWED_ORIGIN, get_settings
from chat_gateway.core.cors import cors_headers

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized"
INTERNAL_ERROR_MESSAGE = "Internal error"
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"


class AppError(Exception):
    """Base application error."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ConfigurationError(AppError):
    """A required secret is missing from the environment."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)


class AuthenticationError(AppError):
    """Missing, malformed or rejected bearer token.

    The reason is never exposed to the caller.
    """

    def __init__(self):
        super().__init__(UNAUTHORIZED_MESSAGE, status_code=401)


class ValidationError(AppError):
    """Validation error."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class MethodNotAllowedError(AppError):
    """The gateway resource only accepts POST (and OPTIONS preflight)."""

    def __init__(self):
        super().__init__(METHOD_NOT_ALLOWED_MESSAGE, status_code=405)


class UpstreamError(AppError):
    """The completion provider answered with a non-success status."""

    def __init__(self, provider: str, status_code: int):
        self.provider = provider
        super().__init__(f"{provider} API error: {status_code}", status_code=status_code)


class InternalError(AppError):
    """Anything not covered by the other categories."""

    def __init__(self):
        super().__init__(INTERNAL_ERROR_MESSAGE, status_code=500)


def _allowed_origin() -> str:
    try:
        return get_settings().allowed_origin
    except Exception:
        logger.exception("Settings unavailable while rendering an error response")
        return DEFAULT_ALLOWED_ORIGIN


def error_response(exc: AppError, allowed_origin: str) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=cors_headers(allowed_origin),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(InternalError(), _allowed_origin())


async def app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle custom application exceptions."""
    return error_response(exc, _allowed_origin())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, unlisted method) in the gateway's error shape."""
    error = MethodNotAllowedError() if exc.status_code == 405 else AppError(str(exc.detail), exc.status_code)
    response = error_response(error, _allowed_origin())
    if exc.headers:
        response.headers.update(exc.headers)
    return response
