"""Dependency providers for FastAPI routers."""

from __future__ import annotations

import time
from typing import Any
from uuid import UUID

from fastapi import Body, Depends, Request
from pydantic import ValidationError

from users_backend.api.errors import BadRequestError, UserNotFoundError
from users_backend.api.models import UserUpdateRequest
from users_backend.api.services import Sanitizer
from users_backend.settings import BackendSettings


def get_sanitizer(request: Request) -> Sanitizer:
    """Return the sanitizer the application was built with."""

    return request.app.state.sanitizer


def get_app_settings(request: Request) -> BackendSettings:
    """Return the settings the application was built with."""

    return request.app.state.settings


def get_uptime(request: Request) -> float:
    """Seconds elapsed since the application was created."""

    return max(time.monotonic() - request.app.state.started_at, 0.0)


def parse_user_id(user_id: str) -> UUID:
    """Resolve the ``user_id`` path parameter; malformed IDs match no user."""

    try:
        return UUID(user_id)
    except ValueError as exc:
        raise UserNotFoundError() from exc


def sanitized_update(
    payload: dict[str, Any] | None = Body(None),
    sanitizer: Sanitizer = Depends(get_sanitizer),
) -> UserUpdateRequest:
    """Clean the raw update body, then coerce it into an update request.

    A missing body is treated as an empty patch.
    """

    cleaned = sanitizer.transform(payload or {})
    try:
        return UserUpdateRequest.model_validate(cleaned)
    except ValidationError as exc:
        field = next((str(err["loc"][-1]) for err in exc.errors() if err["loc"]), None)
        message = f"Invalid value for {field}" if field else "Invalid request"
        raise BadRequestError(message) from exc


__all__ = [
    "get_app_settings",
    "get_sanitizer",
    "get_uptime",
    "parse_user_id",
    "sanitized_update",
]
