"""FastAPI dependencies for database access."""

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from users_backend.database.repositories import UserRepository
from users_backend.database.service import DatabaseService


def get_database(request: Request) -> DatabaseService:
    """Return the database service the application was built with."""
    return request.app.state.database


def get_session(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> Iterator[Session]:
    """Yield a SQLAlchemy session managed by :class:`DatabaseService`."""
    with db.session() as session:
        yield session


def get_user_repository(
    session: Annotated[Session, Depends(get_session)],
) -> UserRepository:
    """Return a :class:`UserRepository` bound to the request session."""
    return UserRepository(session)
