"""
Product image model.
"""

from typing import Any

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class ProductImage(Base):
    """
    Image owned by a product, optionally showing one of its options.

    Attributes:
        id: Unique identifier for the image
        product_id: Owning product
        url: Image location
        alt_text: Alternative text
        is_primary: Whether this is the product's main image
        display_order: Position among the product's images
        option_id: Option pictured by the image, if any (reference, not ownership)
    """

    __tablename__ = "product_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    url = Column(String(255), nullable=False)
    alt_text = Column(String(255), nullable=True)
    is_primary = Column(Boolean, nullable=False, default=False)
    display_order = Column(Integer, nullable=False, default=0)
    option_id = Column(
        Integer, ForeignKey("product_options.id", ondelete="SET NULL"), nullable=True, index=True
    )

    product = relationship("Product", back_populates="images")
    option = relationship("ProductOption", lazy="joined")

    def __init__(self, **kwargs: Any) -> None:
        if "option_id" not in kwargs:
            kwargs.setdefault("option", None)
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<ProductImage(id={self.id}, url='{self.url}', option_id={self.option_id})>"
