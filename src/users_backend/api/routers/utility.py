"""Endpoints that do not touch the store."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from users_backend.api.dependencies import get_app_settings, get_uptime
from users_backend.api.errors import BadRequestError
from users_backend.api.models import EchoRequest, EchoResponse, ServerInfoResponse
from users_backend.settings import BackendSettings

router = APIRouter(tags=["utility"])

MISSING_ECHO_DATA = "Data is missing in the request body"


def _is_falsy(value: Any) -> bool:
    # Empty containers still count as data.
    if isinstance(value, (list, dict)):
        return False
    return not value


@router.get("/server-info", response_model=ServerInfoResponse)
def server_info(
    settings: Annotated[BackendSettings, Depends(get_app_settings)],
    uptime: Annotated[float, Depends(get_uptime)],
) -> ServerInfoResponse:
    """Report the server's name, version and uptime in seconds."""

    return ServerInfoResponse(
        name=settings.server_name,
        version=settings.server_version,
        uptime=uptime,
    )


@router.post("/echo", response_model=EchoResponse, response_model_by_alias=True)
def echo(payload: EchoRequest | None = None) -> EchoResponse:
    """Return the ``data`` field of the request body unchanged."""

    data = payload.data if payload is not None else None
    if _is_falsy(data):
        raise BadRequestError(MISSING_ECHO_DATA)
    return EchoResponse(echoed_data=data)
