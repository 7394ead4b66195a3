from .account_repository import SqlAlchemyAccountRepository
from .subscription_period_repository import SqlAlchemySubscriptionPeriodRepository
from .listing_repository import SqlAlchemyListingRepository
from .category_repository import SqlAlchemyCategoryRepository
from .in_memory import (
    InMemoryAccountRepository,
    InMemorySubscriptionPeriodRepository,
    InMemoryListingRepository,
    InMemoryCategoryRepository,
    InMemoryUnitOfWork,
)

__all__ = [
    "SqlAlchemyAccountRepository",
    "SqlAlchemySubscriptionPeriodRepository",
    "SqlAlchemyListingRepository",
    "SqlAlchemyCategoryRepository",
    "InMemoryAccountRepository",
    "InMemorySubscriptionPeriodRepository",
    "InMemoryListingRepository",
    "InMemoryCategoryRepository",
    "InMemoryUnitOfWork",
]
