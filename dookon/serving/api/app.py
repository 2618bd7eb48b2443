"""
FastAPI Application Factory

Creates the API application around an explicit database handle.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from dookon.config import Settings, get_settings
from dookon.database.connection import Database
from dookon.serving.api.errors import register_exception_handlers
from dookon.serving.api.middleware import RequestLoggingMiddleware
from dookon.serving.api.routes import health_router

logger = structlog.get_logger(__name__)


def create_app(database: Database, settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        database: Handle shared by every request; disposed on shutdown
        settings: Application settings (cached settings if omitted)

    Returns:
        Configured FastAPI app instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Dookon API", environment=settings.app_env)
        yield
        logger.info("Shutting down...")
        await database.dispose()

    app = FastAPI(
        title="Dookon API",
        version=settings.version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router, tags=["Health"])

    return app
