"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from users_backend.api.errors import register_error_handlers
from users_backend.api.routers import users_router, utility_router
from users_backend.api.services import OperatorKeySanitizer, Sanitizer
from users_backend.database import DatabaseService
from users_backend.settings import BackendSettings, get_settings


def create_api(
    *,
    settings: BackendSettings | None = None,
    database: DatabaseService | None = None,
    sanitizer: Sanitizer | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    The database service is created once here and shared by every request;
    pass ``database`` to inject a preconfigured one.
    """
    config = settings or get_settings()
    store = database or DatabaseService(settings=config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store.create_schema()
        try:
            yield
        finally:
            store.dispose()

    app = FastAPI(
        title=config.server_name,
        version=config.server_version,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.database = store
    app.state.sanitizer = sanitizer or OperatorKeySanitizer()
    app.state.started_at = time.monotonic()

    register_error_handlers(app)
    app.include_router(users_router)
    app.include_router(utility_router)
    return app
