"""Database connectivity helpers and persistence objects."""

from users_backend.database.base import BaseSchema
from users_backend.database.dependencies import (
    get_database,
    get_session,
    get_user_repository,
)
from users_backend.database.errors import StoreError
from users_backend.database.repositories import UserRepository
from users_backend.database.schemas import UserSchema
from users_backend.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "StoreError",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
    "get_user_repository",
]
