from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.adapter.repositories.in_memory import (
    InMemoryAccountRepository,
    InMemoryCategoryRepository,
    InMemoryListingRepository,
    InMemorySubscriptionPeriodRepository,
    InMemoryUnitOfWork,
)
from src.app.services.owner_locks import OwnerLocks
from src.depends import Marketplace
from src.domain.account import Account, AccountRole
from src.domain.subscription import PaymentMethod, SubscriptionPeriod, SubscriptionStatus


@pytest.fixture
def now():
    """Fixed reference time (a month-end, to exercise month clamping)"""
    return datetime(2024, 1, 31, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def marketplace():
    """Marketplace wired over fresh in-memory repositories"""
    return Marketplace(
        uow=InMemoryUnitOfWork(),
        account_repo=InMemoryAccountRepository(),
        period_repo=InMemorySubscriptionPeriodRepository(),
        listing_repo=InMemoryListingRepository(),
        category_repo=InMemoryCategoryRepository(),
        locks=OwnerLocks(),
    )


@pytest.fixture
def account_factory(marketplace):
    """Persist an account directly in the marketplace's account repository"""

    async def create(
        account_id: str,
        role: AccountRole = AccountRole.BUSINESS_OWNER,
        is_approved=None,
    ) -> Account:
        if role == AccountRole.BUSINESS_OWNER and is_approved is None:
            is_approved = False
        return await marketplace.account_repo.create(
            Account(
                id=account_id,
                role=role,
                email=f"{account_id}@example.com",
                phone=f"phone-{account_id}",
                is_approved=is_approved,
            )
        )

    return create


@pytest.fixture
def period_factory(marketplace):
    """Insert a subscription period with arbitrary dates and status"""

    async def create(
        owner_id: str,
        start_date: datetime,
        end_date: datetime,
        status: SubscriptionStatus = SubscriptionStatus.ACTIVE,
    ) -> SubscriptionPeriod:
        return await marketplace.period_repo.activate(
            SubscriptionPeriod(
                owner_id=owner_id,
                status=status,
                start_date=start_date,
                end_date=end_date,
                amount=Decimal("2000"),
                currency="RWF",
                payment_method=PaymentMethod.MTN_MOBILE_MONEY,
                transaction_id=f"TXN-{owner_id}",
                created_at=start_date,
            )
        )

    return create
