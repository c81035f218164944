"""
Seller model. Sellers are managed outside the catalog; products only reference them.
"""

from sqlalchemy import Column, Integer, Numeric, String, Text

from .base import Base, TimestampMixin


class Seller(Base, TimestampMixin):
    """
    Seller offering products in the catalog.

    Attributes:
        id: Unique identifier for the seller
        name: Display name
        description: Free-form description
        logo_url: Logo location
        rating: Average rating (0.00-5.00)
        contact_email: Contact email address
        contact_phone: Contact phone number
    """

    __tablename__ = "sellers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    logo_url = Column(String(255), nullable=True)
    rating = Column(Numeric(3, 2, asdecimal=False), nullable=True)
    contact_email = Column(String(100), nullable=True)
    contact_phone = Column(String(20), nullable=True)

    def __repr__(self) -> str:
        return f"<Seller(id={self.id}, name='{self.name}')>"
