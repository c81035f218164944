"""Pydantic request/response models for the product catalog.

Requests come in two flavours:

* Create payloads: plain models with defaults.
* Patch payloads (``PatchModel`` subclasses): every field is optional and the
  set of fields the client actually sent (``model_fields_set``) decides what
  changes. An absent field is left alone, an explicit value replaces the
  stored one, and an explicit ``null`` clears a nullable column. Fields listed
  in ``__null_unchanged__`` treat an explicit ``null`` as absent.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from catalog_api.models import ProductStatus


class PatchModel(BaseModel):
    """Base for partial-update payloads."""

    __null_unchanged__: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _drop_ignored_nulls(self) -> "PatchModel":
        nulled = {
            name
            for name in self.model_fields_set & self.__null_unchanged__
            if getattr(self, name) is None
        }
        self.__pydantic_fields_set__.difference_update(nulled)
        return self

    def is_set(self, name: str) -> bool:
        """True when the client sent ``name`` (even as an explicit null)."""
        return name in self.model_fields_set

    def changes(self, *, exclude: set[str] | None = None) -> dict[str, Any]:
        """Sent fields and their values, nested models left as models."""
        exclude = exclude or set()
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name not in exclude
        }


# =============================================================================
# Shared payload parts
# =============================================================================


class Dimensions(BaseModel):
    width: float | None = None
    height: float | None = None
    depth: float | None = None


class ProductDetailPayload(BaseModel):
    """Detail section of a create request."""

    weight: float | None = None
    dimensions: Dimensions | None = None
    materials: str | None = None
    country_of_origin: str | None = Field(None, max_length=100)
    warranty_info: str | None = None
    care_instructions: str | None = None
    additional_info: dict[str, Any] | None = None


class ProductPricePayload(BaseModel):
    """Price section of a create request."""

    base_price: float
    sale_price: float | None = None
    cost_price: float | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    tax_rate: float | None = None


class OptionCreate(BaseModel):
    """An option, either nested in a create request or added on its own."""

    name: str = Field(..., min_length=1, max_length=100)
    additional_price: float = 0
    sku: str | None = Field(None, max_length=100)
    stock: int = 0
    display_order: int = 0


class OptionGroupCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    display_order: int = 0
    options: list[OptionCreate] = Field(default_factory=list)


class ImageCreate(BaseModel):
    """An image; ``option_id`` names an already persisted option of the product."""

    url: str = Field(..., min_length=1, max_length=255)
    alt_text: str | None = Field(None, max_length=255)
    is_primary: bool = False
    display_order: int = 0
    option_id: int | None = None


# =============================================================================
# Requests
# =============================================================================


class ProductCreateRequest(BaseModel):
    """Schema for creating a product together with its whole aggregate."""

    name: str = Field(..., min_length=1, max_length=255, description="Name of the product")
    slug: str = Field(..., min_length=1, max_length=255, description="Unique URL key")
    short_description: str | None = Field(None, max_length=500)
    full_description: str | None = None
    status: ProductStatus = ProductStatus.ACTIVE
    seller_id: int | None = None
    brand_id: int | None = None
    detail: ProductDetailPayload | None = None
    price: ProductPricePayload | None = None
    category_ids: list[int] = Field(default_factory=list)
    tag_ids: list[int] = Field(default_factory=list)
    option_groups: list[OptionGroupCreate] = Field(default_factory=list)
    images: list[ImageCreate] = Field(default_factory=list)

    @field_validator("category_ids", "tag_ids", "option_groups", "images", mode="before")
    @classmethod
    def _null_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ProductDetailPatch(PatchModel):
    weight: float | None = None
    dimensions: Dimensions | None = None
    materials: str | None = None
    country_of_origin: str | None = Field(None, max_length=100)
    warranty_info: str | None = None
    care_instructions: str | None = None
    additional_info: dict[str, Any] | None = None


class ProductPricePatch(PatchModel):
    __null_unchanged__ = frozenset({"base_price", "currency"})

    base_price: float | None = None
    sale_price: float | None = None
    cost_price: float | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    tax_rate: float | None = None


class ProductUpdateRequest(PatchModel):
    """Schema for partially updating a product.

    ``category_ids``/``tag_ids`` replace the whole association when sent,
    so ``[]`` clears it. A ``null`` seller, brand or non-nullable field
    leaves the stored value as it is.
    """

    __null_unchanged__ = frozenset(
        {
            "name", "slug", "status", "seller_id", "brand_id",
            "detail", "price", "category_ids", "tag_ids",
        }
    )

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    short_description: str | None = Field(None, max_length=500)
    full_description: str | None = None
    status: ProductStatus | None = None
    seller_id: int | None = None
    brand_id: int | None = None
    detail: ProductDetailPatch | None = None
    price: ProductPricePatch | None = None
    category_ids: list[int] | None = None
    tag_ids: list[int] | None = None


class OptionAddRequest(OptionCreate):
    """Body of ``POST /products/{id}/options``."""

    option_group_id: int


class OptionUpdateRequest(PatchModel):
    __null_unchanged__ = frozenset({"name", "additional_price", "stock", "display_order"})

    name: str | None = Field(None, min_length=1, max_length=100)
    additional_price: float | None = None
    sku: str | None = Field(None, max_length=100)
    stock: int | None = None
    display_order: int | None = None


# =============================================================================
# Responses
# =============================================================================


class ProductCreateResponse(BaseModel):
    id: int
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProductUpdateResponse(BaseModel):
    id: int
    name: str
    slug: str
    updated_at: datetime

    model_config = {"from_attributes": True}


class OptionResponse(BaseModel):
    id: int
    option_group_id: int
    name: str
    additional_price: float
    sku: str | None
    stock: int
    display_order: int

    model_config = {"from_attributes": True}


class ImageResponse(BaseModel):
    id: int
    url: str
    alt_text: str | None
    is_primary: bool
    display_order: int
    option_id: int | None

    model_config = {"from_attributes": True}


class SellerView(BaseModel):
    id: int
    name: str
    description: str | None = None
    logo_url: str | None = None
    rating: float | None = None
    contact_email: str | None = None
    contact_phone: str | None = None

    model_config = {"from_attributes": True}


class BrandView(BaseModel):
    id: int
    name: str
    description: str | None = None
    logo_url: str | None = None
    website: str | None = None

    model_config = {"from_attributes": True}


class ParentCategoryView(BaseModel):
    id: int
    name: str
    slug: str

    model_config = {"from_attributes": True}


class CategoryView(BaseModel):
    id: int
    name: str
    slug: str
    parent: ParentCategoryView | None = None

    model_config = {"from_attributes": True}


class TagView(BaseModel):
    id: int
    name: str
    slug: str

    model_config = {"from_attributes": True}


class ProductDetailView(BaseModel):
    weight: float | None = None
    dimensions: Dimensions | None = None
    materials: str | None = None
    country_of_origin: str | None = None
    warranty_info: str | None = None
    care_instructions: str | None = None
    additional_info: dict[str, Any] | None = None

    model_config = {"from_attributes": True}


class ProductPriceView(BaseModel):
    base_price: float
    sale_price: float | None = None
    cost_price: float | None = None
    currency: str
    tax_rate: float | None = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def discount_percentage(self) -> int | None:
        if self.sale_price is None or not self.base_price:
            return None
        return round((self.base_price - self.sale_price) / self.base_price * 100)


class OptionGroupView(BaseModel):
    id: int
    name: str
    display_order: int
    options: list[OptionResponse]

    model_config = {"from_attributes": True}


class ProductView(BaseModel):
    """Full aggregate of a single product."""

    id: int
    name: str
    slug: str
    short_description: str | None
    full_description: str | None
    status: ProductStatus
    seller: SellerView | None
    brand: BrandView | None
    detail: ProductDetailView | None
    price: ProductPriceView | None
    categories: list[CategoryView]
    tags: list[TagView]
    option_groups: list[OptionGroupView]
    images: list[ImageResponse]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProductSummary(BaseModel):
    """Schema for product list entries."""

    id: int
    name: str
    slug: str
    short_description: str | None
    base_price: float | None
    sale_price: float | None
    currency: str | None
    primary_image: dict[str, Any] | None
    brand: dict[str, Any] | None
    seller: dict[str, Any] | None
    status: ProductStatus
    created_at: datetime


class Pagination(BaseModel):
    total_items: int
    total_pages: int
    current_page: int
    per_page: int


class ProductPage(BaseModel):
    items: list[ProductSummary]
    pagination: Pagination
