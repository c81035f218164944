"""
Tag model.
"""

from sqlalchemy import Column, Integer, String

from .base import Base


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, slug='{self.slug}')>"
