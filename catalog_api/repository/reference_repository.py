"""Repositories for reference entities owned outside the catalog.

The catalog only resolves these by id (single or bulk) and never writes them,
apart from the seeding script.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.base_repository import BaseRepository
from catalog_api.models import Brand, Category, Seller, Tag


class SellerRepository(BaseRepository[Seller, int]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Seller, session)


class BrandRepository(BaseRepository[Brand, int]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Brand, session)


class CategoryRepository(BaseRepository[Category, int]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Category, session)


class TagRepository(BaseRepository[Tag, int]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Tag, session)
