"""Ownership checks on transient entities (no database needed)."""

import pytest

from catalog_api.core.exceptions import InvalidReferenceError
from catalog_api.models import (
    Product,
    ProductDetail,
    ProductImage,
    ProductOption,
    ProductOptionGroup,
    ProductPrice,
    Seller,
)
from catalog_api.services import belongs_to, ensure_belongs_to, owning_product_id


@pytest.fixture
def size_group() -> ProductOptionGroup:
    return ProductOptionGroup(id=1, product_id=10, name="Size")


def test_product_owns_itself() -> None:
    assert owning_product_id(Product(id=10, name="Shirt", slug="shirt")) == 10


def test_option_is_owned_through_its_group(size_group: ProductOptionGroup) -> None:
    option = ProductOption(id=5, name="M", option_group=size_group)

    assert owning_product_id(option) == 10
    assert belongs_to(option, 10)
    assert not belongs_to(option, 11)


def test_option_without_group_belongs_to_nothing() -> None:
    option = ProductOption(id=5, name="M")

    assert owning_product_id(option) is None
    assert not belongs_to(option, 10)


@pytest.mark.parametrize(
    "entity",
    [
        ProductOptionGroup(id=2, product_id=10, name="Color"),
        ProductImage(id=3, product_id=10, url="https://img.example/a.jpg"),
        ProductDetail(id=4, product_id=10),
        ProductPrice(id=6, product_id=10, base_price=1000),
    ],
    ids=["option_group", "image", "detail", "price"],
)
def test_direct_children_are_owned_by_product_id(entity) -> None:
    assert belongs_to(entity, 10)
    assert not belongs_to(entity, 99)


def test_entities_outside_the_aggregate_are_rejected() -> None:
    with pytest.raises(TypeError):
        owning_product_id(Seller(id=1, name="Hanbit Store"))


def test_ensure_belongs_to_passes_for_owner(size_group: ProductOptionGroup) -> None:
    ensure_belongs_to(size_group, 10, "OptionGroup")


def test_ensure_belongs_to_raises_invalid_reference(size_group: ProductOptionGroup) -> None:
    option = ProductOption(id=5, name="M", option_group=size_group)

    with pytest.raises(InvalidReferenceError) as exc_info:
        ensure_belongs_to(option, 11, "Option")

    error = exc_info.value
    assert error.status_code == 400
    assert error.resource == "Option"
    assert error.resource_id == 5
    assert error.product_id == 11
