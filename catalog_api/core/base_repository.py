"""
Generic repository base class for SQLAlchemy models with async CRUD operations.

Features:
    - Type-safe operations: BaseRepository[ModelType, IDType]
    - Lookups: get_by_id, find_all_by_ids (bulk, returns only matches), get_by
    - Persistence: save (add + flush), delete
    - Counting
    - Automatic rollback on database errors

Repositories never commit; the caller owns the transaction.

Usage:
    class SellerRepository(BaseRepository[Seller, int]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(Seller, session)

    async with AsyncDBPool.get_session() as session:
        repo = SellerRepository(session)
        sellers = await repo.find_all_by_ids([1, 2, 3])
"""

from abc import ABC
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

__all__ = ["BaseRepository"]

# Type variables for SQLAlchemy model and ID type
ModelType = TypeVar("ModelType")
IDType = TypeVar("IDType", int, str)


class BaseRepository(Generic[ModelType, IDType], ABC):
    """Base repository with async CRUD operations for SQLAlchemy models."""

    def __init__(self, model: type[ModelType], session: AsyncSession) -> None:
        """Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def get_by_id(self, id: IDType) -> ModelType | None:
        """Get record by ID.

        Args:
            id: Primary key

        Returns:
            Instance or None
        """
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.unique().scalar_one_or_none()

    async def find_all_by_ids(self, ids: Iterable[IDType]) -> Sequence[ModelType]:
        """Get every record whose ID is in ``ids``.

        Unknown IDs are simply absent from the result; this never raises
        for a miss.

        Args:
            ids: Primary keys (duplicates are ignored)

        Returns:
            Matching instances ordered by ID
        """
        wanted = list(dict.fromkeys(ids))
        if not wanted:
            return []
        result = await self.session.execute(
            select(self.model).where(self.model.id.in_(wanted)).order_by(self.model.id)
        )
        return result.unique().scalars().all()

    async def get_by(self, **filters: Any) -> ModelType | None:
        """Get single record by filters.

        Args:
            **filters: Field-value pairs

        Returns:
            Instance or None
        """
        query = select(self.model)
        for field, value in filters.items():
            query = query.where(getattr(self.model, field) == value)
        result = await self.session.execute(query)
        return result.unique().scalar_one_or_none()

    async def save(self, instance: ModelType) -> ModelType:
        """Add an instance to the session and flush it.

        Works for new and already persistent instances alike; after the
        flush the primary key is populated.

        Args:
            instance: Model instance

        Returns:
            The same instance, now persistent
        """
        try:
            self.session.add(instance)
            await self.session.flush()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        else:
            return instance

    async def delete(self, instance: ModelType) -> None:
        """Delete an instance (hard delete) and flush.

        Args:
            instance: Persistent model instance
        """
        try:
            await self.session.delete(instance)
            await self.session.flush()
        except SQLAlchemyError:
            await self.session.rollback()
            raise

    async def count(self, **filters: Any) -> int:
        """Count records.

        Args:
            **filters: Optional filters

        Returns:
            Total count
        """
        query = select(func.count()).select_from(self.model)

        for field, value in filters.items():
            query = query.where(getattr(self.model, field) == value)

        result = await self.session.execute(query)
        return result.scalar_one()
