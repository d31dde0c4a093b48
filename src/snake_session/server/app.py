"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from snake_session.config import ServerConfig
from snake_session.server.registry import SessionRegistry
from snake_session.server.routes import router
from snake_session.server.websocket import ws_router


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config if config is not None else ServerConfig()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.registry = SessionRegistry(config)
        yield
        await app.state.registry.cleanup()

    app = FastAPI(
        title="Snake Session API", version="0.1.0", lifespan=_lifespan,
    )
    app.state.config = config
    app.include_router(router)
    app.include_router(ws_router)
    return app
