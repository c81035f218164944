"""
Brand model.
"""

from sqlalchemy import Column, Integer, String, Text

from .base import Base, TimestampMixin


class Brand(Base, TimestampMixin):
    __tablename__ = "brands"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    slug = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    logo_url = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Brand(id={self.id}, name='{self.name}')>"
