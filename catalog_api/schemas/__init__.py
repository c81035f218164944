"""Request and response schemas."""

from .product import (
    Dimensions,
    ImageCreate,
    ImageResponse,
    OptionAddRequest,
    OptionCreate,
    OptionGroupCreate,
    OptionResponse,
    OptionUpdateRequest,
    Pagination,
    PatchModel,
    ProductCreateRequest,
    ProductCreateResponse,
    ProductDetailPatch,
    ProductDetailPayload,
    ProductPage,
    ProductPricePatch,
    ProductPricePayload,
    ProductSummary,
    ProductUpdateRequest,
    ProductUpdateResponse,
    ProductView,
)

__all__ = [
    "Dimensions",
    "ImageCreate",
    "ImageResponse",
    "OptionAddRequest",
    "OptionCreate",
    "OptionGroupCreate",
    "OptionResponse",
    "OptionUpdateRequest",
    "Pagination",
    "PatchModel",
    "ProductCreateRequest",
    "ProductCreateResponse",
    "ProductDetailPatch",
    "ProductDetailPayload",
    "ProductPage",
    "ProductPricePatch",
    "ProductPricePayload",
    "ProductSummary",
    "ProductUpdateRequest",
    "ProductUpdateResponse",
    "ProductView",
]
