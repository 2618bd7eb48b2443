"""
Database Connection Management

Explicit async database handle built on SQLAlchemy 2.0. A `Database` is
created once at process start, passed to whatever needs it, and disposed
exactly once when the unit of work is over.
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from dookon.config.settings import DatabaseSettings, Settings, get_settings

logger = structlog.get_logger(__name__)


class Database:
    """
    Handle owning one async engine and its session factory.

    Example:
        database = Database.from_settings()
        try:
            async with database.session() as session:
                result = await session.execute(query)
        finally:
            await database.dispose()
    """

    def __init__(self, engine: AsyncEngine):
        self._engine: Optional[AsyncEngine] = engine
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "Database":
        """
        Create a handle for the given async database URL.

        Engines are created lazily by SQLAlchemy, so no connection is opened
        until the first query.
        """
        # AsyncPG pools connections itself
        engine = create_async_engine(
            url,
            echo=echo,
            future=True,
            pool_pre_ping=True,
            poolclass=NullPool,
        )
        return cls(engine)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Database":
        """Create a handle from application settings."""
        db_settings: DatabaseSettings = (settings or get_settings()).database
        logger.debug("Creating database handle", host=db_settings.host, database=db_settings.db)
        return cls.from_url(db_settings.async_url, echo=db_settings.echo)

    @property
    def is_disposed(self) -> bool:
        return self._engine is None

    @property
    def engine(self) -> AsyncEngine:
        """
        Get the database engine.

        Raises:
            RuntimeError: If the handle was already disposed
        """
        if self._engine is None:
            raise RuntimeError("Database handle already disposed.")
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get a database session.

        Context manager that provides a database session and handles
        commit/rollback/close automatically.

        Yields:
            AsyncSession: Database session
        """
        if self._session_factory is None:
            logger.error("Session requested from a disposed database handle")
            raise RuntimeError("Database handle already disposed.")

        logger.debug("Creating new database session")
        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception as e:
            logger.debug("Database session error, rolling back", error=str(e), error_type=type(e).__name__)
            await session.rollback()
            raise
        finally:
            await session.close()
            logger.debug("Database session closed")

    async def ping(self) -> None:
        """Round trip a trivial query; raises on connectivity errors."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def check_health(self) -> dict:
        """
        Check database health status.

        Returns:
            dict: Health status with latency information
        """
        try:
            start = time.perf_counter()
            await self.ping()
            latency_ms = (time.perf_counter() - start) * 1000

            return {
                "status": "healthy",
                "latency_ms": round(latency_ms, 2),
            }
        except Exception as e:
            return {
                "status": "unhealthy",
                "error": str(e),
            }

    async def dispose(self) -> None:
        """
        Release the engine and every pooled connection.

        Only the first call does any work.
        """
        if self._engine is None:
            logger.warning("Database handle already disposed")
            return

        engine = self._engine
        self._engine = None
        self._session_factory = None
        await engine.dispose()
        logger.debug("Database connections released")
