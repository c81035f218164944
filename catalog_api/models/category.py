"""
Category model with an optional parent category.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base


class Category(Base):
    """
    Product category.

    Attributes:
        id: Unique identifier for the category
        name: Display name
        slug: URL-safe unique key
        description: Free-form description
        parent_id: Parent category, None for top-level categories
        level: Depth in the tree (1 for top-level)
        image_url: Category image location
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    parent_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    level = Column(Integer, nullable=False, default=1)
    image_url = Column(String(255), nullable=True)

    # Only the direct parent is loaded with a category
    parent = relationship("Category", remote_side=[id], lazy="joined", join_depth=1)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, slug='{self.slug}')>"
