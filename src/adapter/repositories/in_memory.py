"""In-memory repository implementations

Process-local storage used by the default `memory` backend and by tests.
Every repository keeps private copies of its entities and guards them with
a re-entrant lock, so readers never observe a half-applied mutation.
"""

import itertools
import threading
from typing import Dict, List, Optional, TypeVar
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.category_repository import CategoryRepository
from src.app.repositories.listing_repository import ListingRepository
from src.app.repositories.subscription_period_repository import SubscriptionPeriodRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.account import Account, AccountRole
from src.domain.category import Category
from src.domain.listing import Listing
from src.domain.subscription import SubscriptionPeriod, SubscriptionStatus

E = TypeVar("E")


def _clone(entity: E) -> E:
    return type(entity)(**entity.model_dump())


class InMemoryUnitOfWork(UnitOfWork):
    """
    No-op unit of work

    In-memory repositories apply each mutation atomically, so there is
    nothing to commit or roll back.
    """

    async def commit(self):
        pass

    async def rollback(self):
        pass


class InMemoryAccountRepository(AccountRepository):

    def __init__(self):
        self._lock = threading.RLock()
        self._accounts: Dict[str, Account] = {}

    async def get_by_id(self, account_id: str) -> Optional[Account]:
        with self._lock:
            account = self._accounts.get(account_id)
            return _clone(account) if account else None

    async def get_by_email_or_phone(self, email: str, phone: str) -> Optional[Account]:
        with self._lock:
            for account in self._accounts.values():
                if account.email == email or account.phone == phone:
                    return _clone(account)
            return None

    async def list(self, role: Optional[AccountRole] = None) -> List[Account]:
        with self._lock:
            return [
                _clone(a) for a in self._accounts.values()
                if role is None or a.role == role
            ]

    async def create(self, account: Account) -> Account:
        with self._lock:
            if account.id in self._accounts:
                raise ValueError(f"Account {account.id} already exists")
            self._accounts[account.id] = _clone(account)
            return _clone(account)

    async def update(self, account: Account) -> Account:
        with self._lock:
            if account.id not in self._accounts:
                raise KeyError(account.id)
            self._accounts[account.id] = _clone(account)
            return _clone(account)


class InMemorySubscriptionPeriodRepository(SubscriptionPeriodRepository):

    def __init__(self):
        self._lock = threading.RLock()
        self._periods: List[SubscriptionPeriod] = []
        self._ids = itertools.count(1)

    async def get_latest_for_owner(self, owner_id: str) -> Optional[SubscriptionPeriod]:
        with self._lock:
            owned = [p for p in self._periods if p.owner_id == owner_id]
            if not owned:
                return None
            return _clone(max(owned, key=lambda p: (p.end_date, p.id)))

    async def get_active_for_owner(self, owner_id: str) -> Optional[SubscriptionPeriod]:
        with self._lock:
            for period in self._periods:
                if period.owner_id == owner_id and period.status == SubscriptionStatus.ACTIVE:
                    return _clone(period)
            return None

    async def list(self, owner_id: Optional[str] = None) -> List[SubscriptionPeriod]:
        with self._lock:
            return [
                _clone(p) for p in reversed(self._periods)
                if owner_id is None or p.owner_id == owner_id
            ]

    async def activate(self, period: SubscriptionPeriod) -> SubscriptionPeriod:
        period.check_invariants()
        with self._lock:
            for stored in self._periods:
                if stored.owner_id == period.owner_id and stored.status == SubscriptionStatus.ACTIVE:
                    stored.status = SubscriptionStatus.INACTIVE
            created = _clone(period)
            created.id = next(self._ids)
            self._periods.append(created)
            return _clone(created)


class InMemoryListingRepository(ListingRepository):

    def __init__(self):
        self._lock = threading.RLock()
        self._listings: Dict[str, Listing] = {}

    async def get_by_id(self, listing_id: str) -> Optional[Listing]:
        with self._lock:
            listing = self._listings.get(listing_id)
            return _clone(listing) if listing else None

    async def list(self, owner_id: Optional[str] = None) -> List[Listing]:
        with self._lock:
            return [
                _clone(l) for l in self._listings.values()
                if owner_id is None or l.owner_id == owner_id
            ]

    async def create(self, listing: Listing) -> Listing:
        with self._lock:
            self._listings[listing.id] = _clone(listing)
            return _clone(listing)

    async def update(self, listing: Listing) -> Listing:
        with self._lock:
            if listing.id not in self._listings:
                raise KeyError(listing.id)
            self._listings[listing.id] = _clone(listing)
            return _clone(listing)

    async def delete(self, listing_id: str) -> bool:
        with self._lock:
            return self._listings.pop(listing_id, None) is not None


class InMemoryCategoryRepository(CategoryRepository):

    def __init__(self):
        self._lock = threading.RLock()
        self._categories: Dict[str, Category] = {}

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        with self._lock:
            category = self._categories.get(category_id)
            return _clone(category) if category else None

    async def get_by_name(self, name: str) -> Optional[Category]:
        with self._lock:
            for category in self._categories.values():
                if category.name.lower() == name.lower():
                    return _clone(category)
            return None

    async def list(self) -> List[Category]:
        with self._lock:
            return sorted(
                (_clone(c) for c in self._categories.values()),
                key=lambda c: c.name.lower(),
            )

    async def create(self, category: Category) -> Category:
        with self._lock:
            self._categories[category.id] = _clone(category)
            return _clone(category)

    async def update(self, category: Category) -> Category:
        with self._lock:
            if category.id not in self._categories:
                raise KeyError(category.id)
            self._categories[category.id] = _clone(category)
            return _clone(category)

    async def delete(self, category_id: str) -> bool:
        with self._lock:
            return self._categories.pop(category_id, None) is not None
