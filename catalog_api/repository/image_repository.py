"""Image repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.base_repository import BaseRepository
from catalog_api.models import ProductImage


class ImageRepository(BaseRepository[ProductImage, int]):
    """Repository for ProductImage entity operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize ImageRepository with database session.

        Args:
            session: Async SQLAlchemy session
        """
        super().__init__(ProductImage, session)

    async def find_by_option(self, option_id: int) -> list[ProductImage]:
        """Images picturing the given option, in display order."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.option_id == option_id)
            .order_by(self.model.display_order, self.model.id)
        )
        return list(result.unique().scalars().all())
