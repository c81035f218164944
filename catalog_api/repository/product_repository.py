"""Product repository for database operations."""

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.base_repository import BaseRepository
from catalog_api.models import Category, Product, ProductPrice, ProductStatus


@dataclass
class ProductFilter:
    """Filter parameters for product search.

    Attributes:
        status: Only products in this status.
        exclude_deleted: Hide DELETED products (ignored when status is given).
        min_price: Minimum base price (inclusive).
        max_price: Maximum base price (inclusive).
        category_id: Products linked to this category.
        seller_id: Products of this seller.
        brand_id: Products of this brand.
        search: Case-insensitive match on the product name.
    """

    status: ProductStatus | None = None
    exclude_deleted: bool = True
    min_price: float | None = None
    max_price: float | None = None
    category_id: int | None = None
    seller_id: int | None = None
    brand_id: int | None = None
    search: str | None = None


class ProductRepository(BaseRepository[Product, int]):
    """Repository for Product aggregate roots.

    Every query loads the full aggregate through the relationship loaders
    declared on the models.
    """

    SORT_COLUMNS = {
        "created_at": Product.created_at,
        "updated_at": Product.updated_at,
        "name": Product.name,
        "base_price": ProductPrice.base_price,
    }

    def __init__(self, session: AsyncSession) -> None:
        """Initialize ProductRepository with database session.

        Args:
            session: Async SQLAlchemy session
        """
        super().__init__(Product, session)

    def _apply_filter(self, query, product_filter: ProductFilter):
        if product_filter.status is not None:
            query = query.where(Product.status == product_filter.status)
        elif product_filter.exclude_deleted:
            query = query.where(Product.status != ProductStatus.DELETED)

        if product_filter.min_price is not None:
            query = query.where(ProductPrice.base_price >= product_filter.min_price)
        if product_filter.max_price is not None:
            query = query.where(ProductPrice.base_price <= product_filter.max_price)

        if product_filter.category_id is not None:
            query = query.where(Product.categories.any(Category.id == product_filter.category_id))
        if product_filter.seller_id is not None:
            query = query.where(Product.seller_id == product_filter.seller_id)
        if product_filter.brand_id is not None:
            query = query.where(Product.brand_id == product_filter.brand_id)

        if product_filter.search:
            pattern = (
                product_filter.search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            )
            query = query.where(Product.name.ilike(f"%{pattern}%", escape="\\"))

        return query

    async def search(
        self,
        product_filter: ProductFilter,
        sort_by: str = "created_at",
        descending: bool = True,
        limit: int | None = None,
        offset: int | None = None,
    ) -> tuple[Sequence[Product], int]:
        """Search products.

        Args:
            product_filter: Filter conditions
            sort_by: One of SORT_COLUMNS
            descending: Sort direction
            limit: Maximum number of results to return
            offset: Number of records to skip

        Returns:
            The page of products and the total number of matches
        """
        count_query = self._apply_filter(
            select(func.count(Product.id)).select_from(Product).outerjoin(ProductPrice),
            product_filter,
        )
        total = (await self.session.execute(count_query)).scalar_one()

        sort_column = self.SORT_COLUMNS.get(sort_by, Product.created_at)
        order = sort_column.desc() if descending else sort_column.asc()
        query = self._apply_filter(select(Product).outerjoin(ProductPrice), product_filter)
        query = query.order_by(order, Product.id)

        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return result.unique().scalars().all(), total
