"""Account Domain Entity

Registered marketplace users. Only business owners carry an approval flag.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Index
from src.domain.base import BaseModel, generate_uuid, utc_column, utcnow


class AccountRole(str, Enum):
    """Marketplace roles"""
    CUSTOMER = "customer"
    BUSINESS_OWNER = "business_owner"
    ADMIN = "admin"


class Account(BaseModel, table=True):
    """
    Account - A registered marketplace user

    Domain Rules:
    - id is opaque and never changes once issued
    - is_approved is only meaningful for business owners:
      None/False = not approved, True = approved
    - is_approved changes only through admin approve/reject actions
    - email and phone are unique across accounts
    - Accounts are never deleted
    """

    __tablename__ = "accounts"
    __table_args__ = (
        Index('ix_accounts_role', 'role'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque account identifier"
    )

    role: AccountRole = Field(
        description="Account role (customer, business_owner, admin)"
    )

    email: str = Field(
        unique=True,
        description="Login email (unique)"
    )

    phone: str = Field(
        unique=True,
        description="Contact phone number (unique)"
    )

    is_approved: Optional[bool] = Field(
        default=None,
        description="Admin approval flag (business owners only)"
    )

    business_name: Optional[str] = Field(
        default=None,
        description="Trading name (business owners only)"
    )

    district: Optional[str] = Field(default=None)
    sector: Optional[str] = Field(default=None)
    village: Optional[str] = Field(default=None)

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=utc_column(),
        description="Registration timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=utc_column(),
        description="Last update timestamp"
    )

    @property
    def is_business_owner(self) -> bool:
        return self.role == AccountRole.BUSINESS_OWNER

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "3f0c6d1e-9a4b-4f7e-8c1d-2b5a6e7f8a90",
                "role": "business_owner",
                "email": "business@example.com",
                "phone": "0787654321",
                "is_approved": True,
                "business_name": "My Awesome Shop",
                "district": "Gasabo",
                "sector": "Remera",
                "village": "Kagugu",
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
