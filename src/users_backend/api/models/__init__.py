"""Models used for API request and response payloads."""

from users_backend.api.models.user import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from users_backend.api.models.utility import (
    EchoRequest,
    EchoResponse,
    ServerInfoResponse,
)

__all__ = [
    "EchoRequest",
    "EchoResponse",
    "ServerInfoResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
