"""Pydantic models for the utility endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServerInfoResponse(BaseModel):
    """Static identity of the running server and its uptime in seconds."""

    name: str
    version: str
    uptime: float = Field(ge=0)


class EchoRequest(BaseModel):
    """Arbitrary data to be echoed back."""

    data: Any = None


class EchoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    echoed_data: Any = Field(alias="echoedData")
