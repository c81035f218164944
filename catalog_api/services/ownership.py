"""Ownership checks for entities inside a product aggregate.

Sub-resource operations receive a product id in the request path and an
entity id in the path or body; the entity must hang off that product.
"""

from typing import Any

from catalog_api.core.exceptions import InvalidReferenceError
from catalog_api.models import (
    Product,
    ProductDetail,
    ProductImage,
    ProductOption,
    ProductOptionGroup,
    ProductPrice,
)


def owning_product_id(entity: Any) -> int | None:
    """Walk up the ownership chain of ``entity`` to its product id."""
    if isinstance(entity, Product):
        return entity.id
    if isinstance(entity, ProductOption):
        group = entity.option_group
        return group.product_id if group is not None else None
    if isinstance(entity, (ProductOptionGroup, ProductImage, ProductDetail, ProductPrice)):
        return entity.product_id
    raise TypeError(f"{type(entity).__name__} is not part of a product aggregate")


def belongs_to(entity: Any, product_id: int) -> bool:
    return owning_product_id(entity) == product_id


def ensure_belongs_to(entity: Any, product_id: int, resource: str) -> None:
    """Raise InvalidReferenceError unless ``entity`` belongs to ``product_id``."""
    if not belongs_to(entity, product_id):
        raise InvalidReferenceError(resource, entity.id, product_id)
