"""Data Transfer Objects for Marketplace Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field
from src.domain.account import AccountRole
from src.domain.eligibility import EligibilityReason
from src.domain.subscription import PaymentMethod, SubscriptionStatus


class RegisterAccountCommandDTO(BaseModel):
    """
    Command DTO for registering an account

    Business owners start unapproved; the location and business name are
    only kept for them.
    """

    email: str = Field(
        ...,
        min_length=3,
        description="Login email (unique)"
    )

    phone: str = Field(
        ...,
        min_length=1,
        description="Contact phone number (unique)"
    )

    role: AccountRole = Field(
        ...,
        description="Requested role"
    )

    business_name: Optional[str] = Field(default=None)
    district: Optional[str] = Field(default=None)
    sector: Optional[str] = Field(default=None)
    village: Optional[str] = Field(default=None)

    class Config:
        json_schema_extra = {
            "example": {
                "email": "shop@example.com",
                "phone": "0787654321",
                "role": "business_owner",
                "business_name": "My Awesome Shop",
                "district": "Gasabo",
                "sector": "Remera",
                "village": "Kagugu"
            }
        }


class AccountResponseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    role: AccountRole
    email: str
    phone: str
    is_approved: Optional[bool] = None
    business_name: Optional[str] = None
    district: Optional[str] = None
    sector: Optional[str] = None
    village: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class StartSubscriptionRequestDTO(BaseModel):
    payment_method: PaymentMethod = Field(
        ...,
        description="Simulated payment channel"
    )


class SubscriptionPeriodResponseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: str
    status: SubscriptionStatus
    start_date: datetime
    end_date: datetime
    amount: Decimal
    currency: str
    payment_method: PaymentMethod
    transaction_id: str
    created_at: datetime


class SubscriptionStatusResponseDTO(BaseModel):
    """Latest period for an owner plus its computed standing at `checked_at`"""

    owner_id: str
    is_active: bool
    checked_at: datetime
    period: Optional[SubscriptionPeriodResponseDTO] = None


class EligibilityResponseDTO(BaseModel):
    owner_id: str
    eligible: bool
    reason: EligibilityReason
    checked_at: datetime


class CreateListingCommandDTO(BaseModel):
    """Command DTO for publishing a listing"""

    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    description: str = Field(default="")
    price: Decimal = Field(
        ...,
        ge=0,
        description="Asking price (must be >= 0)"
    )
    phone_number: str = Field(..., min_length=1)
    district: str = Field(..., min_length=1)
    sector: str = Field(..., min_length=1)
    village: Optional[str] = Field(default=None)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Smart TV 4K UHD 55\"",
                "category": "Electronics",
                "description": "Vibrant 4K UHD display with smart features.",
                "price": "350000",
                "phone_number": "0787654321",
                "district": "Gasabo",
                "sector": "Remera",
                "village": "Kagugu"
            }
        }


class UpdateListingCommandDTO(BaseModel):
    """Partial update; only fields that are set are applied"""

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    phone_number: Optional[str] = Field(default=None, min_length=1)
    district: Optional[str] = Field(default=None, min_length=1)
    sector: Optional[str] = Field(default=None, min_length=1)
    village: Optional[str] = None


class ListingSearchQueryDTO(BaseModel):
    owner_id: Optional[str] = None
    query: Optional[str] = Field(
        default=None,
        description="Matched against name and description, case-insensitive"
    )
    category: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    location: Optional[str] = Field(
        default=None,
        description="Matched against district, sector and village"
    )
    only_approved_businesses: bool = False


class ListingResponseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    name: str
    category: str
    description: str
    price: Decimal
    phone_number: str
    district: str
    sector: str
    village: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CategoryCommandDTO(BaseModel):
    name: str = Field(..., min_length=1)


class CategoryResponseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class LedgerFindingDTO(BaseModel):
    """One invariant violation found by the ledger audit"""

    owner_id: str
    period_ids: List[int]
    issue: str = Field(
        ...,
        description="MULTIPLE_ACTIVE or NON_POSITIVE_DURATION"
    )


class LedgerAuditResultDTO(BaseModel):
    total_periods_checked: int
    owners_checked: int
    expired_active_periods: int = Field(
        ...,
        description="ACTIVE periods whose end_date has passed (reported, never rewritten)"
    )
    findings: List[LedgerFindingDTO]
    audited_at: datetime
    execution_time_ms: int
