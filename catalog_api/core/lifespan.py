"""
Application lifespan management for FastAPI.

Startup initialises the database pool (and creates the schema for local
SQLite databases); shutdown disposes of it.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from catalog_api.core.database import AsyncDBPool
from catalog_api.main_config import database_config, settings
from catalog_api.models import Base

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def app_lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle events."""
    await AsyncDBPool.init(database_config)

    if settings.is_local and database_config.is_sqlite:
        async with AsyncDBPool.engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("schema_created", url=database_config.url)

    yield

    await AsyncDBPool.dispose()
