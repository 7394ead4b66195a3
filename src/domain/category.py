"""Category Domain Entity"""

from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid

DEFAULT_CATEGORY_NAMES = [
    "Electronics",
    "Clothes & Fashion",
    "Food & Beverages",
    "Furniture & Home Decor",
    "Vehicles",
    "Services",
    "Books & Stationery",
    "Health & Beauty",
]


class Category(BaseModel, table=True):
    """
    Category - Listing classification managed by admins

    Domain Rules:
    - Names are unique, compared case-insensitively
    """

    __tablename__ = "categories"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Category identifier"
    )

    name: str = Field(
        description="Display name"
    )
