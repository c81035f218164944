"""Product catalog service.

Builds and mutates the product aggregate (product, detail, price, option
groups, options, images and the category/tag links) from request payloads.

The service only flushes; the caller owns the transaction and commits once
per operation (see the routes), so a failure anywhere in an operation leaves
nothing behind.

Example usage:
    async with AsyncDBPool.get_session() as session:
        service = ProductService(session)
        created = await service.create_product(request)
        await session.commit()
"""

import math
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.exceptions import ResourceNotFoundError
from catalog_api.main_config import catalog_config
from catalog_api.models import (
    Brand,
    Product,
    ProductDetail,
    ProductImage,
    ProductOption,
    ProductOptionGroup,
    ProductPrice,
    ProductStatus,
    Seller,
)
from catalog_api.repository import (
    BrandRepository,
    CategoryRepository,
    ImageRepository,
    OptionGroupRepository,
    OptionRepository,
    ProductFilter,
    ProductRepository,
    SellerRepository,
    TagRepository,
)
from catalog_api.schemas import (
    ImageCreate,
    ImageResponse,
    OptionCreate,
    OptionGroupCreate,
    OptionResponse,
    OptionUpdateRequest,
    Pagination,
    ProductCreateRequest,
    ProductCreateResponse,
    ProductDetailPayload,
    ProductPage,
    ProductPricePayload,
    ProductSummary,
    ProductUpdateRequest,
    ProductUpdateResponse,
    ProductView,
)
from catalog_api.services.ownership import belongs_to, ensure_belongs_to

logger = structlog.get_logger(__name__)


class ProductService:
    """Service for product aggregate operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.products = ProductRepository(session)
        self.sellers = SellerRepository(session)
        self.brands = BrandRepository(session)
        self.categories = CategoryRepository(session)
        self.tags = TagRepository(session)
        self.option_groups = OptionGroupRepository(session)
        self.options = OptionRepository(session)
        self.images = ImageRepository(session)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def _get_product(self, product_id: int) -> Product:
        product = await self.products.get_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", product_id)
        return product

    async def _get_seller(self, seller_id: int) -> Seller:
        seller = await self.sellers.get_by_id(seller_id)
        if seller is None:
            raise ResourceNotFoundError("Seller", seller_id)
        return seller

    async def _get_brand(self, brand_id: int) -> Brand:
        brand = await self.brands.get_by_id(brand_id)
        if brand is None:
            raise ResourceNotFoundError("Brand", brand_id)
        return brand

    async def _get_option(self, option_id: int) -> ProductOption:
        option = await self.options.get_by_id(option_id)
        if option is None:
            raise ResourceNotFoundError("Option", option_id)
        return option

    async def _find_image_option(self, option_id: int | None, product_id: int) -> ProductOption | None:
        """Lenient option lookup used while creating a product.

        An id that does not resolve, or resolves to another product's option,
        leaves the image without an option.
        """
        if option_id is None:
            return None
        option = await self.options.get_by_id(option_id)
        if option is None:
            logger.info("image_option_dropped", option_id=option_id, reason="not_found")
            return None
        if not belongs_to(option, product_id):
            logger.info("image_option_dropped", option_id=option_id, reason="other_product")
            return None
        return option

    # ------------------------------------------------------------------
    # Entity builders
    # ------------------------------------------------------------------

    @staticmethod
    def _build_detail(payload: ProductDetailPayload) -> ProductDetail:
        values = payload.model_dump()
        return ProductDetail(**values)

    @staticmethod
    def _build_price(payload: ProductPricePayload) -> ProductPrice:
        values = payload.model_dump()
        values["currency"] = values["currency"] or catalog_config.default_currency
        return ProductPrice(**values)

    @staticmethod
    def _build_option(payload: OptionCreate, group: ProductOptionGroup) -> ProductOption:
        return ProductOption(option_group=group, **payload.model_dump(exclude={"option_group_id"}))

    def _build_option_group(self, payload: OptionGroupCreate) -> ProductOptionGroup:
        group = ProductOptionGroup(name=payload.name, display_order=payload.display_order)
        for option_payload in payload.options:
            self._build_option(option_payload, group)
        return group

    @staticmethod
    def _build_image(payload: ImageCreate, option: ProductOption | None) -> ProductImage:
        return ProductImage(option=option, **payload.model_dump(exclude={"option_id"}))

    # ------------------------------------------------------------------
    # Product aggregate
    # ------------------------------------------------------------------

    async def create_product(self, request: ProductCreateRequest) -> ProductCreateResponse:
        """Create a product together with its detail, price, options and images.

        Raises:
            ResourceNotFoundError: seller_id or brand_id does not exist
        """
        product = Product(
            name=request.name,
            slug=request.slug,
            short_description=request.short_description,
            full_description=request.full_description,
            status=request.status,
        )

        if request.seller_id is not None:
            product.seller = await self._get_seller(request.seller_id)
        if request.brand_id is not None:
            product.brand = await self._get_brand(request.brand_id)

        product = await self.products.save(product)

        if request.detail is not None:
            product.detail = self._build_detail(request.detail)
        if request.price is not None:
            product.price = self._build_price(request.price)

        # Bulk lookups return only the ids that exist
        if request.category_ids:
            product.categories.extend(await self.categories.find_all_by_ids(request.category_ids))
        if request.tag_ids:
            product.tags.extend(await self.tags.find_all_by_ids(request.tag_ids))

        for group_payload in request.option_groups:
            product.option_groups.append(self._build_option_group(group_payload))

        for image_payload in request.images:
            option = await self._find_image_option(image_payload.option_id, product.id)
            product.images.append(self._build_image(image_payload, option))

        product = await self.products.save(product)
        logger.info(
            "product_created",
            product_id=product.id,
            categories=len(product.categories),
            tags=len(product.tags),
            option_groups=len(product.option_groups),
            images=len(product.images),
        )
        return ProductCreateResponse.model_validate(product)

    async def get_product_by_id(self, product_id: int) -> ProductView:
        """Return the full aggregate; soft-deleted products are returned too."""
        product = await self._get_product(product_id)
        return ProductView.model_validate(product)

    async def list_products(
        self,
        product_filter: ProductFilter | None = None,
        page: int = 1,
        per_page: int | None = None,
        sort_by: str = "created_at",
        descending: bool = True,
    ) -> ProductPage:
        """Return one page of product summaries."""
        product_filter = product_filter or ProductFilter(
            exclude_deleted=catalog_config.hide_deleted_in_listing
        )
        per_page = min(per_page or catalog_config.default_page_size, catalog_config.max_page_size)
        page = max(page, 1)

        products, total = await self.products.search(
            product_filter,
            sort_by=sort_by,
            descending=descending,
            limit=per_page,
            offset=(page - 1) * per_page,
        )
        return ProductPage(
            items=[ProductSummary.model_validate(p.to_summary_dict()) for p in products],
            pagination=Pagination(
                total_items=total,
                total_pages=math.ceil(total / per_page) if total else 0,
                current_page=page,
                per_page=per_page,
            ),
        )

    async def update_product(self, product_id: int, request: ProductUpdateRequest) -> ProductUpdateResponse:
        """Apply a partial update to a product.

        Only fields present in the request change. Category and tag lists are
        replaced wholesale when present. Detail and price are merged into the
        existing rows and skipped when the product has none.

        Raises:
            ResourceNotFoundError: product, seller or brand does not exist
        """
        product = await self._get_product(product_id)

        scalar_fields = request.changes(
            exclude={"seller_id", "brand_id", "detail", "price", "category_ids", "tag_ids"}
        )
        for field, value in scalar_fields.items():
            setattr(product, field, value)

        if request.seller_id is not None:
            product.seller = await self._get_seller(request.seller_id)
        if request.brand_id is not None:
            product.brand = await self._get_brand(request.brand_id)

        if request.detail is not None:
            if product.detail is not None:
                self._merge(product.detail, request.detail.changes())
            else:
                logger.debug("product_detail_update_skipped", product_id=product_id)
        if request.price is not None:
            if product.price is not None:
                self._merge(product.price, request.price.changes())
            else:
                logger.debug("product_price_update_skipped", product_id=product_id)

        if request.category_ids is not None:
            product.categories.clear()
            product.categories.extend(await self.categories.find_all_by_ids(request.category_ids))
        if request.tag_ids is not None:
            product.tags.clear()
            product.tags.extend(await self.tags.find_all_by_ids(request.tag_ids))

        product = await self.products.save(product)
        logger.info("product_updated", product_id=product.id, fields=sorted(request.model_fields_set))
        return ProductUpdateResponse.model_validate(product)

    async def delete_product(self, product_id: int) -> None:
        """Soft delete: the product stays readable with status DELETED."""
        product = await self._get_product(product_id)
        if product.is_deleted:
            logger.debug("product_already_deleted", product_id=product_id)
            return
        product.status = ProductStatus.DELETED
        await self.products.save(product)
        logger.info("product_deleted", product_id=product_id)

    @staticmethod
    def _merge(entity: Any, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            if hasattr(value, "model_dump"):
                value = value.model_dump()
            setattr(entity, field, value)

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    async def add_product_option(self, product_id: int, option_group_id: int, request: OptionCreate) -> OptionResponse:
        """Add an option to one of the product's option groups.

        Raises:
            ResourceNotFoundError: the option group does not exist
            InvalidReferenceError: the group belongs to another product
        """
        group = await self.option_groups.get_by_id(option_group_id)
        if group is None:
            raise ResourceNotFoundError("OptionGroup", option_group_id)
        ensure_belongs_to(group, product_id, "OptionGroup")

        option = await self.options.save(self._build_option(request, group))
        logger.info("product_option_added", product_id=product_id, option_id=option.id)
        return OptionResponse.model_validate(option)

    async def update_product_option(
        self, product_id: int, option_id: int, request: OptionUpdateRequest
    ) -> OptionResponse:
        """Merge the fields present in the request into the option.

        Raises:
            ResourceNotFoundError: the option does not exist
            InvalidReferenceError: the option belongs to another product
        """
        option = await self._get_option(option_id)
        ensure_belongs_to(option, product_id, "Option")

        self._merge(option, request.changes())
        option = await self.options.save(option)
        logger.info("product_option_updated", product_id=product_id, option_id=option_id)
        return OptionResponse.model_validate(option)

    async def delete_product_option(self, product_id: int, option_id: int) -> None:
        """Hard delete an option; images showing it lose their option reference.

        Raises:
            ResourceNotFoundError: the option does not exist
            InvalidReferenceError: the option belongs to another product
        """
        option = await self._get_option(option_id)
        ensure_belongs_to(option, product_id, "Option")

        for image in await self.images.find_by_option(option_id):
            image.option = None
        await self.options.delete(option)
        logger.info("product_option_deleted", product_id=product_id, option_id=option_id)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    async def add_product_image(self, product_id: int, request: ImageCreate) -> ImageResponse:
        """Attach a new image to the product.

        Unlike creation, an option reference here must resolve and belong to
        the product.

        Raises:
            ResourceNotFoundError: the product or the option does not exist
            InvalidReferenceError: the option belongs to another product
        """
        product = await self._get_product(product_id)

        option = None
        if request.option_id is not None:
            option = await self._get_option(request.option_id)
            ensure_belongs_to(option, product_id, "Option")

        image = self._build_image(request, option)
        product.images.append(image)
        image = await self.images.save(image)
        logger.info("product_image_added", product_id=product_id, image_id=image.id)
        return ImageResponse.model_validate(image)
