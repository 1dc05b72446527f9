"""Repository helpers for working with users."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from users_backend.database.errors import StoreError
from users_backend.database.schemas import UserSchema

UPDATABLE_FIELDS = frozenset({"username", "email", "age"})


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`.

    Writes are committed before the method returns, so a caller only sees
    a result once it is durable.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        """Roll back and re-raise any SQLAlchemy failure as :class:`StoreError`."""
        try:
            yield
        except SQLAlchemyError as exc:
            self._session.rollback()
            msg = f"Failed to {operation}"
            raise StoreError(msg) from exc

    def insert(self, user: UserSchema) -> UserSchema:
        """Add a new user to the database and return it with its ID."""
        with self._store_errors("insert user"):
            self._session.add(user)
            self._session.commit()
        return user

    def find_all(self) -> list[UserSchema]:
        """Return every stored user."""
        with self._store_errors("list users"):
            return list(self._session.scalars(select(UserSchema)))

    def find_by_age_range(self, min_age: float, max_age: float) -> list[UserSchema]:
        """Return users whose age lies within ``[min_age, max_age]``."""
        stmt = select(UserSchema).where(
            UserSchema.age >= min_age,
            UserSchema.age <= max_age,
        )
        with self._store_errors("filter users by age"):
            return list(self._session.scalars(stmt))

    def find_by_id(self, user_id: UUID) -> UserSchema | None:
        """Return user entity by user's ID."""
        with self._store_errors("fetch user"):
            return self._session.get(UserSchema, user_id)

    def update_by_id(self, user_id: UUID, patch: Mapping[str, Any]) -> UserSchema | None:
        """Overwrite the given fields of a user and return the updated entity."""
        with self._store_errors("update user"):
            user = self._session.get(UserSchema, user_id)
            if user is None:
                return None
            for field, value in patch.items():
                if field in UPDATABLE_FIELDS:
                    setattr(user, field, value)
            self._session.commit()
        return user

    def delete_by_id(self, user_id: UUID) -> bool:
        """Permanently remove a user; return ``False`` when it does not exist."""
        with self._store_errors("delete user"):
            user = self._session.get(UserSchema, user_id)
            if user is None:
                return False
            self._session.delete(user)
            self._session.commit()
        return True
