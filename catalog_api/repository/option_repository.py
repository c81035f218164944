"""Option group and option repositories."""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.base_repository import BaseRepository
from catalog_api.models import ProductOption, ProductOptionGroup


class OptionGroupRepository(BaseRepository[ProductOptionGroup, int]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ProductOptionGroup, session)


class OptionRepository(BaseRepository[ProductOption, int]):
    """Options are loaded together with their group, which carries the product id."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ProductOption, session)
