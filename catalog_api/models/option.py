"""
Option groups and options of a product (e.g. "Color" -> "Red", "Blue").
"""

from typing import Any

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class ProductOptionGroup(Base):
    """
    Named group of options owned by exactly one product.

    Attributes:
        id: Unique identifier for the group
        product_id: Owning product
        name: Group name, e.g. "Size"
        display_order: Position among the product's groups
    """

    __tablename__ = "product_option_groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    display_order = Column(Integer, nullable=False, default=0)

    product = relationship("Product", back_populates="option_groups")
    options = relationship(
        "ProductOption",
        back_populates="option_group",
        cascade="all, delete-orphan",
        order_by="ProductOption.display_order",
        lazy="selectin",
    )

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("options", [])
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<ProductOptionGroup(id={self.id}, name='{self.name}', product_id={self.product_id})>"


class ProductOption(Base):
    """
    Purchasable option inside a group.

    Attributes:
        id: Unique identifier for the option
        option_group_id: Owning group
        name: Option name, e.g. "Red"
        additional_price: Amount added to the product price
        sku: Stock keeping unit
        stock: Units in stock
        display_order: Position within the group
    """

    __tablename__ = "product_options"

    id = Column(Integer, primary_key=True, autoincrement=True)
    option_group_id = Column(
        Integer, ForeignKey("product_option_groups.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    additional_price = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    sku = Column(String(100), nullable=True, index=True)
    stock = Column(Integer, nullable=False, default=0)
    display_order = Column(Integer, nullable=False, default=0)

    option_group = relationship("ProductOptionGroup", back_populates="options", lazy="joined")

    def __init__(self, **kwargs: Any) -> None:
        if "option_group_id" not in kwargs:
            kwargs.setdefault("option_group", None)
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<ProductOption(id={self.id}, name='{self.name}', sku='{self.sku}')>"
