from .account_repository import AccountRepository
from .subscription_period_repository import SubscriptionPeriodRepository
from .listing_repository import ListingRepository
from .category_repository import CategoryRepository

__all__ = [
    "AccountRepository",
    "SubscriptionPeriodRepository",
    "ListingRepository",
    "CategoryRepository",
]
