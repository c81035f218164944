"""
Async SQLAlchemy connection pool and database session management.

This module provides a singleton connection pool manager for async SQLAlchemy operations.

Usage:
    # Initialize once at application startup (in lifespan)
    await AsyncDBPool.init(database_config)

    # Use in route handlers or services
    async with AsyncDBPool.get_session() as session:
        service = ProductService(session)
        await service.delete_product(product_id)
        await session.commit()

    # Cleanup at shutdown (in lifespan)
    await AsyncDBPool.dispose()
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from catalog_api.main_config import DatabaseConfig


class AsyncDBPool:
    """Async-only SQLAlchemy engine + session manager."""

    _engine: AsyncEngine | None = None
    _maker: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    async def init(cls, config: DatabaseConfig) -> None:
        """Initialize async engine and sessionmaker.

        Args:
            config: DatabaseConfig instance with credentials and pool settings
        """
        if cls._engine is not None:
            return  # already initialized

        engine_kwargs: dict[str, Any] = {"echo": config.echo}
        # SQLite pools do not take sizing arguments
        if not config.is_sqlite:
            engine_kwargs.update(
                pool_size=config.pool_size,
                max_overflow=config.max_overflow,
                pool_timeout=config.pool_timeout,
                pool_recycle=config.pool_recycle,
                pool_pre_ping=config.pool_pre_ping,
            )

        cls._engine = create_async_engine(config.url, **engine_kwargs)
        cls._maker = async_sessionmaker(cls._engine, expire_on_commit=False, class_=AsyncSession)

    @classmethod
    def engine(cls) -> AsyncEngine:
        if cls._engine is None:
            raise RuntimeError("AsyncDBPool not initialized. Call await AsyncDBPool.init() first.")
        return cls._engine

    @classmethod
    async def dispose(cls) -> None:
        """Dispose engine and clear session maker."""
        if cls._engine is not None:
            await cls._engine.dispose()
            cls._engine = None
            cls._maker = None

    @classmethod
    @asynccontextmanager
    async def get_session(cls) -> AsyncIterator[AsyncSession]:
        """Yield a session; rollback on exceptions.

        Raises:
            RuntimeError: If pool not initialized
        """
        if cls._maker is None:
            raise RuntimeError("AsyncDBPool not initialized. Call await AsyncDBPool.init() first.")

        async with cls._maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
