"""Repository layer for database operations.

This module contains concrete repository implementations for
data access operations.
"""

from .image_repository import ImageRepository
from .option_repository import OptionGroupRepository, OptionRepository
from .product_repository import ProductFilter, ProductRepository
from .reference_repository import BrandRepository, CategoryRepository, SellerRepository, TagRepository

__all__ = [
    "BrandRepository",
    "CategoryRepository",
    "ImageRepository",
    "OptionGroupRepository",
    "OptionRepository",
    "ProductFilter",
    "ProductRepository",
    "SellerRepository",
    "TagRepository",
]
