"""Subscription Period Domain Entity

Tracks paid coverage windows for business owners.
"""

from calendar import monthrange
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Integer, Numeric, String, text
from src.domain.base import BaseModel, generate_uuid, utc_column, utcnow


class SubscriptionStatus(str, Enum):
    """Subscription period status types"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class PaymentMethod(str, Enum):
    """Supported (simulated) payment channels"""
    MTN_MOBILE_MONEY = "MTN Mobile Money"
    AIRTEL_MONEY = "Airtel Money"
    BANK_TRANSFER = "Bank Transfer"


class SubscriptionInvariantError(RuntimeError):
    """Raised when a period that breaks ledger invariants reaches storage"""


def add_one_month(moment: datetime) -> datetime:
    """
    Add one calendar month, clamping to the last day of the target month

    Jan 31 -> Feb 28 (Feb 29 in leap years), Mar 31 -> Apr 30,
    Dec 15 -> Jan 15 of the following year. Time of day is preserved.
    """
    year = moment.year + moment.month // 12
    month = moment.month % 12 + 1
    _, last_day = monthrange(year, month)
    return moment.replace(year=year, month=month, day=min(moment.day, last_day))


def generate_transaction_id() -> str:
    return f"TXN-{generate_uuid().split('-')[0].upper()}"


class SubscriptionPeriod(BaseModel, table=True):
    """
    SubscriptionPeriod - One paid coverage window for an owner

    Domain Rules:
    - end_date must be strictly after start_date
    - At most one ACTIVE period per owner (partial unique index)
    - Payment metadata never changes after creation
    - Expiry is computed from end_date, never written back to status
    - id grows with creation order and breaks end_date ties
    """

    __tablename__ = "subscription_periods"
    __table_args__ = (
        Index('ix_subscription_periods_owner_id', 'owner_id'),
        Index(
            'uq_subscription_periods_owner_active',
            'owner_id',
            unique=True,
            sqlite_where=text("status = 'ACTIVE'"),
            postgresql_where=text("status = 'ACTIVE'"),
        ),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        description="Period identifier (auto-increment, creation order)"
    )

    owner_id: str = Field(
        description="Owning business account ID"
    )

    status: SubscriptionStatus = Field(
        description="Period status (active, inactive, pending)"
    )

    start_date: datetime = Field(
        sa_column=utc_column(),
        description="Coverage start"
    )

    end_date: datetime = Field(
        sa_column=utc_column(),
        description="Coverage end (exclusive)"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Amount paid for the period"
    )

    currency: str = Field(
        sa_column=Column(String(3), nullable=False),
        description="ISO currency code"
    )

    payment_method: PaymentMethod = Field(
        description="Payment channel used"
    )

    transaction_id: str = Field(
        description="Payment transaction reference"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=utc_column(),
        description="Period creation timestamp"
    )

    def check_invariants(self) -> None:
        if self.end_date <= self.start_date:
            raise SubscriptionInvariantError(
                f"Subscription period for owner {self.owner_id} ends at "
                f"{self.end_date.isoformat()}, not after its start "
                f"{self.start_date.isoformat()}"
            )

    def is_current(self, now: datetime) -> bool:
        """True when the period is ACTIVE and has not yet ended at `now`"""
        return self.status == SubscriptionStatus.ACTIVE and self.end_date > now

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "owner_id": "business1",
                "status": "active",
                "start_date": "2024-01-31T10:00:00Z",
                "end_date": "2024-02-29T10:00:00Z",
                "amount": "2000.00",
                "currency": "RWF",
                "payment_method": "MTN Mobile Money",
                "transaction_id": "TXN-1A2B3C4D",
                "created_at": "2024-01-31T10:00:00Z"
            }
        }
