from .base import BaseModel, generate_uuid
from .account import Account, AccountRole
from .subscription import (
    SubscriptionPeriod,
    SubscriptionStatus,
    PaymentMethod,
    SubscriptionInvariantError,
    add_one_month,
)
from .eligibility import EligibilityDecision, EligibilityReason, Authorization, CatalogAction
from .listing import Listing
from .category import Category, DEFAULT_CATEGORY_NAMES

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Account",
    "AccountRole",
    "SubscriptionPeriod",
    "SubscriptionStatus",
    "PaymentMethod",
    "SubscriptionInvariantError",
    "add_one_month",
    "EligibilityDecision",
    "EligibilityReason",
    "Authorization",
    "CatalogAction",
    "Listing",
    "Category",
    "DEFAULT_CATEGORY_NAMES",
]
