"""Repositories wrapping persistence operations."""

from users_backend.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
