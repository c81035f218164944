"""
FastAPI dependency injection functions for database sessions.

Usage in FastAPI Routes:
    @router.get("/{product_id}")
    async def get_product(product_id: int, session: AsyncSession = Depends(get_db)):
        return await ProductService(session).get_product_by_id(product_id)

Testing with Dependency Override:
    async def override_get_db():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
"""

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from .database import AsyncDBPool


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency for async database session.

    Provides a database session that automatically handles cleanup
    and rollback on errors. Handlers commit explicitly.
    """
    async with AsyncDBPool.get_session() as session:
        yield session
