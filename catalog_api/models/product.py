"""
Product aggregate root plus its 1:1 detail and price rows.
"""

from enum import Enum
from typing import Any

from sqlalchemy import JSON, Column, ForeignKey, Integer, Numeric, String, Table, Text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin


class ProductStatus(str, Enum):
    """Lifecycle status of a product."""

    ACTIVE = "ACTIVE"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    DELETED = "DELETED"


product_categories = Table(
    "product_categories",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)

product_tags = Table(
    "product_tags",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Product(Base, TimestampMixin):
    """
    Product model, the root of the catalog aggregate.

    Loading a product loads the whole aggregate: detail, price, option groups
    with their options, images, categories, tags, seller and brand.

    Attributes:
        id: Unique identifier for the product
        name: Name of the product
        slug: Unique URL-safe key
        short_description: One-line summary
        full_description: Long description
        status: ProductStatus; DELETED marks a soft-deleted product
        seller_id: Optional seller reference
        brand_id: Optional brand reference
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    slug = Column(String(255), nullable=False, unique=True)
    short_description = Column(String(500), nullable=True)
    full_description = Column(Text, nullable=True)
    status = Column(
        SAEnum(ProductStatus, native_enum=False, length=20),
        nullable=False,
        default=ProductStatus.ACTIVE,
        index=True,
    )
    seller_id = Column(Integer, ForeignKey("sellers.id"), nullable=True, index=True)
    brand_id = Column(Integer, ForeignKey("brands.id"), nullable=True, index=True)

    seller = relationship("Seller", lazy="joined")
    brand = relationship("Brand", lazy="joined")
    detail = relationship(
        "ProductDetail",
        back_populates="product",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    price = relationship(
        "ProductPrice",
        back_populates="product",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    option_groups = relationship(
        "ProductOptionGroup",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductOptionGroup.display_order",
        lazy="selectin",
    )
    images = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.display_order",
        lazy="selectin",
    )
    categories = relationship("Category", secondary=product_categories, lazy="selectin")
    tags = relationship("Tag", secondary=product_tags, lazy="selectin")

    def __init__(self, **kwargs: Any) -> None:
        # Start with every association in the instance dict so that nothing
        # is lazily loaded once the product has been flushed.
        kwargs.setdefault("status", ProductStatus.ACTIVE)
        for key in ("seller", "brand", "detail", "price"):
            kwargs.setdefault(key, None)
        for key in ("option_groups", "images", "categories", "tags"):
            kwargs.setdefault(key, [])
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, slug='{self.slug}', status={self.status})>"

    @property
    def is_deleted(self) -> bool:
        return self.status == ProductStatus.DELETED

    @property
    def primary_image(self):
        """The image flagged primary, else the first image by display order."""
        for image in self.images:
            if image.is_primary:
                return image
        return self.images[0] if self.images else None

    def to_summary_dict(self) -> dict:
        """Convert product object to summary dictionary (for list views)."""
        primary = self.primary_image
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "short_description": self.short_description,
            "base_price": self.price.base_price if self.price else None,
            "sale_price": self.price.sale_price if self.price else None,
            "currency": self.price.currency if self.price else None,
            "primary_image": {"url": primary.url, "alt_text": primary.alt_text} if primary else None,
            "brand": {"id": self.brand.id, "name": self.brand.name} if self.brand else None,
            "seller": {"id": self.seller.id, "name": self.seller.name} if self.seller else None,
            "status": self.status,
            "created_at": self.created_at,
        }


class ProductDetail(Base):
    """
    Physical and descriptive details of a product (1:1 with Product).

    ``dimensions`` holds ``{"width": .., "height": .., "depth": ..}`` and
    ``additional_info`` an arbitrary JSON object.
    """

    __tablename__ = "product_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    weight = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    dimensions = Column(JSON, nullable=True)
    materials = Column(Text, nullable=True)
    country_of_origin = Column(String(100), nullable=True)
    warranty_info = Column(Text, nullable=True)
    care_instructions = Column(Text, nullable=True)
    additional_info = Column(JSON, nullable=True)

    product = relationship("Product", back_populates="detail")

    def __repr__(self) -> str:
        return f"<ProductDetail(id={self.id}, product_id={self.product_id})>"


class ProductPrice(Base):
    """Pricing of a product (1:1 with Product)."""

    __tablename__ = "product_prices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    base_price = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    sale_price = Column(Numeric(12, 2, asdecimal=False), nullable=True)
    cost_price = Column(Numeric(12, 2, asdecimal=False), nullable=True)
    currency = Column(String(3), nullable=False, default="KRW")
    tax_rate = Column(Numeric(5, 2, asdecimal=False), nullable=True)

    product = relationship("Product", back_populates="price")

    def __repr__(self) -> str:
        return f"<ProductPrice(id={self.id}, base_price={self.base_price} {self.currency})>"

