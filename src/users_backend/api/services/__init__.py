"""Service layer for API-specific logic."""

from users_backend.api.services.sanitizer import (
    OperatorKeySanitizer,
    Payload,
    Sanitizer,
)

__all__ = ["OperatorKeySanitizer", "Payload", "Sanitizer"]
