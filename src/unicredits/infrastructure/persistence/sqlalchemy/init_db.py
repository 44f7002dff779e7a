"""Schema creation for startup, the CLI and tests."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Registers every table on Base.metadata
import unicredits.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from unicredits.infrastructure.persistence.sqlalchemy.models.base import Base
from unicredits_config.settings import get_settings

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """Create missing tables. Existing tables and rows are left alone."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


async def drop_tables(engine: AsyncEngine) -> None:
    logger.warning("Dropping all UniCredits tables on %s", engine.url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def init_database(reset: bool = False, database_url: str | None = None) -> None:
    """Bring the schema up on ``database_url`` (default: from settings).

    ``reset`` drops every table first, deleting all users, categories and
    courses.
    """
    engine = create_async_engine(database_url or get_settings().database_url)
    try:
        if reset:
            await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()
