"""API error taxonomy and the handlers that render it as JSON."""

from __future__ import annotations

import logging
from typing import ClassVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_backend.database import StoreError

logger = logging.getLogger(__name__)

ERROR_KIND_HEADER = "X-Error-Kind"


class ApiError(Exception):
    """Base class for errors that end a request with a JSON error body."""

    kind: ClassVar[str] = "internal"
    status_code: ClassVar[int] = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: ClassVar[str] = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UserNotFoundError(ApiError):
    """Raised when no user matches the requested identifier."""

    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class BadRequestError(ApiError):
    """Raised when the request payload or parameters are unusable."""

    kind = "bad_request"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class InternalError(ApiError):
    """Opaque failure; hides the underlying cause from clients."""


def error_response(error: ApiError) -> JSONResponse:
    """Render an :class:`ApiError` as ``{"error": message}``."""
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.message},
        headers={ERROR_KIND_HEADER: error.kind},
    )


async def _handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc)


async def _handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    return error_response(InternalError())


async def _handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    field = next(
        (str(error["loc"][-1]) for error in errors if error.get("loc")),
        None,
    )
    message = f"Invalid value for {field}" if field else "Invalid request"
    return error_response(BadRequestError(message))


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(InternalError())


def register_error_handlers(app: FastAPI) -> None:
    """Attach handlers mapping every failure onto the JSON error body."""
    app.add_exception_handler(ApiError, _handle_api_error)
    app.add_exception_handler(StoreError, _handle_store_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


__all__ = [
    "ERROR_KIND_HEADER",
    "ApiError",
    "BadRequestError",
    "InternalError",
    "UserNotFoundError",
    "error_response",
    "register_error_handlers",
]
