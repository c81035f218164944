"""Business logic for the product catalog."""

from .ownership import belongs_to, ensure_belongs_to, owning_product_id
from .product_service import ProductService

__all__ = [
    "ProductService",
    "belongs_to",
    "ensure_belongs_to",
    "owning_product_id",
]
