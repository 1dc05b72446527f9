"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from users_backend.api import create_api
from users_backend.database import DatabaseService, UserRepository
from users_backend.settings import BackendSettings, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fastapi import FastAPI
    from sqlalchemy.orm import Session

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", SQLITE_MEMORY_URL)
    monkeypatch.setenv("SERVER_NAME", "Test Users API")
    monkeypatch.setenv("SERVER_VERSION", "9.9.9")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """In-memory SQLite database shared across threads through one connection."""
    db = DatabaseService(
        SQLITE_MEMORY_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def session(database: DatabaseService) -> Iterator[Session]:
    with database.session() as db_session:
        yield db_session


@pytest.fixture
def repository(session: Session) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
def app(database: DatabaseService) -> FastAPI:
    return create_api(settings=BackendSettings(), database=database)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
