"""
SQLAlchemy models for the product catalog.
"""

from .base import Base
from .brand import Brand
from .category import Category
from .image import ProductImage
from .option import ProductOption, ProductOptionGroup
from .product import Product, ProductDetail, ProductPrice, ProductStatus
from .seller import Seller
from .tag import Tag

__all__: list[str] = [
    "Base",
    "Brand",
    "Category",
    "Product",
    "ProductDetail",
    "ProductImage",
    "ProductOption",
    "ProductOptionGroup",
    "ProductPrice",
    "ProductStatus",
    "Seller",
    "Tag",
]
