"""Listing Domain Entity

A product or service published on the marketplace by a business owner.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, Text
from src.domain.base import BaseModel, generate_uuid, utc_column, utcnow


class Listing(BaseModel, table=True):
    """
    Listing - Marketplace product published by a business owner

    Domain Rules:
    - owner_id never changes; only the owner may edit or delete it
    - Creating or editing requires the owner to pass the catalog guard
    - price is non-negative
    """

    __tablename__ = "listings"
    __table_args__ = (
        Index('ix_listings_owner_id', 'owner_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Listing identifier"
    )

    owner_id: str = Field(
        description="Publishing business account ID"
    )

    name: str = Field(
        description="Listing title"
    )

    category: str = Field(
        description="Category name"
    )

    description: str = Field(
        sa_column=Column(Text, nullable=False, default=""),
        description="Free-text description"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(14, 2), nullable=False),
        description="Asking price"
    )

    phone_number: str = Field(
        description="Seller contact number"
    )

    district: str = Field(description="Location district")
    sector: str = Field(description="Location sector")
    village: Optional[str] = Field(default=None, description="Location village")

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=utc_column(),
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=utc_column(),
        description="Last update timestamp"
    )

    def matches_location(self, query: str) -> bool:
        query = query.lower()
        return (
            query in self.district.lower()
            or query in self.sector.lower()
            or (self.village is not None and query in self.village.lower())
        )
