"""
Script Runner

Runs one read-only unit of work against a database handle. Failures are
logged once and turned into an exit status; the handle is released exactly
once whatever happens.
"""

import asyncio
from typing import Awaitable, Callable, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from dookon.database.connection import Database

logger = structlog.get_logger(__name__)

Work = Callable[[AsyncSession], Awaitable[object]]


async def run_inspection(database: Database, work: Work) -> int:
    """
    Await `work` inside a single session.

    Returns:
        int: 0 on success, 1 if the work raised
    """
    try:
        async with database.session() as session:
            await work(session)
    except Exception as e:
        logger.error("Inspection failed", error=str(e), error_type=type(e).__name__)
        return 1
    finally:
        await database.dispose()
    return 0


def run(work: Work, database: Optional[Database] = None) -> int:
    """
    Synchronous entry point for console scripts.

    Builds the handle from settings unless one is given; a URL SQLAlchemy
    cannot load is reported like any other failure.
    """
    if database is None:
        try:
            database = Database.from_settings()
        except Exception as e:
            logger.error("Could not create database handle", error=str(e), error_type=type(e).__name__)
            return 1
    return asyncio.run(run_inspection(database, work))
