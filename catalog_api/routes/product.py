"""Product routes: the catalog aggregate and its option/image sub-resources.

Every handler runs one service operation and commits the request session
once, which makes the operation atomic.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.dependencies import get_db
from catalog_api.main_config import catalog_config
from catalog_api.models import ProductStatus
from catalog_api.repository import ProductFilter
from catalog_api.schemas import (
    ImageCreate,
    ImageResponse,
    OptionAddRequest,
    OptionResponse,
    OptionUpdateRequest,
    ProductCreateRequest,
    ProductCreateResponse,
    ProductPage,
    ProductUpdateRequest,
    ProductUpdateResponse,
    ProductView,
)
from catalog_api.services.product_service import ProductService

router = APIRouter(
    prefix="/api/products",
    tags=["product"],
)

SORT_FIELDS = "created_at|updated_at|name|base_price"


@router.post("", response_model=ProductCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_product(request: ProductCreateRequest, session: AsyncSession = Depends(get_db)):
    """Create a product with its detail, price, options, images, categories and tags."""
    created = await ProductService(session).create_product(request)
    await session.commit()
    return created


@router.get("", response_model=ProductPage)
async def list_products(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    per_page: int | None = Query(None, ge=1, le=catalog_config.max_page_size, description="Items per page"),
    sort: str = Query("created_at:desc", pattern=rf"^({SORT_FIELDS})(:(asc|desc))?$"),
    status_filter: ProductStatus | None = Query(None, alias="status"),
    min_price: float | None = Query(None, description="Minimum base price"),
    max_price: float | None = Query(None, description="Maximum base price"),
    category: int | None = Query(None, description="Category id"),
    seller: int | None = Query(None, description="Seller id"),
    brand: int | None = Query(None, description="Brand id"),
    search: str | None = Query(None, description="Search term for product name"),
    session: AsyncSession = Depends(get_db),
):
    """List products, newest first unless ``sort`` says otherwise."""
    sort_by, _, direction = sort.partition(":")
    product_filter = ProductFilter(
        status=status_filter,
        exclude_deleted=catalog_config.hide_deleted_in_listing,
        min_price=min_price,
        max_price=max_price,
        category_id=category,
        seller_id=seller,
        brand_id=brand,
        search=search,
    )
    return await ProductService(session).list_products(
        product_filter,
        page=page,
        per_page=per_page,
        sort_by=sort_by,
        descending=direction != "asc",
    )


@router.get("/{product_id}", response_model=ProductView)
async def get_product(product_id: int, session: AsyncSession = Depends(get_db)):
    """Get the full product aggregate by ID."""
    return await ProductService(session).get_product_by_id(product_id)


@router.api_route("/{product_id}", methods=["PUT", "PATCH"], response_model=ProductUpdateResponse)
async def update_product(
    product_id: int, request: ProductUpdateRequest, session: AsyncSession = Depends(get_db)
):
    """Update only the fields sent in the body."""
    updated = await ProductService(session).update_product(product_id, request)
    await session.commit()
    return updated


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, session: AsyncSession = Depends(get_db)):
    """Soft delete a product."""
    await ProductService(session).delete_product(product_id)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{product_id}/options",
    response_model=OptionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_product_option(
    product_id: int, request: OptionAddRequest, session: AsyncSession = Depends(get_db)
):
    """Add an option to one of the product's option groups."""
    option = await ProductService(session).add_product_option(
        product_id, request.option_group_id, request
    )
    await session.commit()
    return option


@router.api_route(
    "/{product_id}/options/{option_id}",
    methods=["PUT", "PATCH"],
    response_model=OptionResponse,
)
async def update_product_option(
    product_id: int,
    option_id: int,
    request: OptionUpdateRequest,
    session: AsyncSession = Depends(get_db),
):
    """Update only the option fields sent in the body."""
    option = await ProductService(session).update_product_option(product_id, option_id, request)
    await session.commit()
    return option


@router.delete("/{product_id}/options/{option_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product_option(
    product_id: int, option_id: int, session: AsyncSession = Depends(get_db)
):
    """Delete an option of the product."""
    await ProductService(session).delete_product_option(product_id, option_id)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{product_id}/images",
    response_model=ImageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_product_image(
    product_id: int, request: ImageCreate, session: AsyncSession = Depends(get_db)
):
    """Attach an image to the product, optionally tied to one of its options."""
    image = await ProductService(session).add_product_image(product_id, request)
    await session.commit()
    return image
