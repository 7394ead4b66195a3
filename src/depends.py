"""Composition root

Wires repositories, unit of work and marketplace components for the
configured storage backend. One backend instance is shared per process
(API app or worker); each request/job opens its own Marketplace from it.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from decimal import Decimal
from typing import AsyncContextManager, AsyncIterator, Optional
from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.account_repository import SqlAlchemyAccountRepository
from src.adapter.repositories.category_repository import SqlAlchemyCategoryRepository
from src.adapter.repositories.in_memory import (
    InMemoryAccountRepository,
    InMemoryCategoryRepository,
    InMemoryListingRepository,
    InMemorySubscriptionPeriodRepository,
    InMemoryUnitOfWork,
)
from src.adapter.repositories.listing_repository import SqlAlchemyListingRepository
from src.adapter.repositories.subscription_period_repository import SqlAlchemySubscriptionPeriodRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.category_repository import CategoryRepository
from src.app.repositories.listing_repository import ListingRepository
from src.app.repositories.subscription_period_repository import SubscriptionPeriodRepository
from src.app.services.owner_locks import OwnerLocks
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.marketplace import (
    AccountDirectory,
    AddCategory,
    CatalogGuard,
    EligibilityEvaluator,
    SubscriptionLedger,
)
from src.domain.category import DEFAULT_CATEGORY_NAMES

logger = logging.getLogger(__name__)


class Marketplace:
    """Repositories and core components bound to one unit of work"""

    def __init__(
        self,
        uow: UnitOfWork,
        account_repo: AccountRepository,
        period_repo: SubscriptionPeriodRepository,
        listing_repo: ListingRepository,
        category_repo: CategoryRepository,
        locks: OwnerLocks,
        config=ApplicationConfig,
    ):
        self.uow = uow
        self.account_repo = account_repo
        self.period_repo = period_repo
        self.listing_repo = listing_repo
        self.category_repo = category_repo

        self.accounts = AccountDirectory(uow, account_repo)
        self.ledger = SubscriptionLedger(
            uow=uow,
            period_repo=period_repo,
            account_directory=self.accounts,
            locks=locks,
            amount=Decimal(str(config.SUBSCRIPTION_AMOUNT)),
            currency=config.SUBSCRIPTION_CURRENCY,
        )
        self.evaluator = EligibilityEvaluator(self.accounts, self.ledger)
        self.guard = CatalogGuard(self.evaluator)


class StorageBackend(ABC):
    """Opens Marketplace instances over a storage engine"""

    def __init__(self, config=ApplicationConfig):
        self.config = config
        self.locks = OwnerLocks()

    @abstractmethod
    def marketplace(self) -> AsyncContextManager[Marketplace]:
        """Async context manager yielding a Marketplace bound to one unit of work"""

    async def init(self):
        """Prepare storage and seed default data"""
        if not self.config.SEED_DEFAULT_CATEGORIES:
            return

        async with self.marketplace() as marketplace:
            if await marketplace.category_repo.list():
                return
            add_category = AddCategory(marketplace.uow, marketplace.category_repo)
            for name in DEFAULT_CATEGORY_NAMES:
                await add_category.execute(name)
            logger.info(f"Seeded {len(DEFAULT_CATEGORY_NAMES)} default categories")

    async def dispose(self):
        pass


class InMemoryBackend(StorageBackend):
    """Process-local storage; contents are lost on restart"""

    def __init__(self, config=ApplicationConfig):
        super().__init__(config)
        self.account_repo = InMemoryAccountRepository()
        self.period_repo = InMemorySubscriptionPeriodRepository()
        self.listing_repo = InMemoryListingRepository()
        self.category_repo = InMemoryCategoryRepository()

    @asynccontextmanager
    async def marketplace(self) -> AsyncIterator[Marketplace]:
        yield Marketplace(
            uow=InMemoryUnitOfWork(),
            account_repo=self.account_repo,
            period_repo=self.period_repo,
            listing_repo=self.listing_repo,
            category_repo=self.category_repo,
            locks=self.locks,
            config=self.config,
        )


class SqlBackend(StorageBackend):
    """SQLModel/SQLAlchemy async storage, one session per Marketplace"""

    def __init__(self, config=ApplicationConfig, db_uri: Optional[str] = None):
        super().__init__(config)
        self.db_uri = db_uri or config.DB_URI
        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    async def init(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        await super().init()

    @asynccontextmanager
    async def marketplace(self) -> AsyncIterator[Marketplace]:
        async with self.async_session_factory() as session:
            yield Marketplace(
                uow=SqlAlchemyUnitOfWork(session),
                account_repo=SqlAlchemyAccountRepository(session),
                period_repo=SqlAlchemySubscriptionPeriodRepository(session),
                listing_repo=SqlAlchemyListingRepository(session),
                category_repo=SqlAlchemyCategoryRepository(session),
                locks=self.locks,
                config=self.config,
            )

    async def dispose(self):
        await self.engine.dispose()


def create_backend(config=ApplicationConfig) -> StorageBackend:
    if config.STORAGE_BACKEND == "sql":
        return SqlBackend(config)
    if config.STORAGE_BACKEND == "memory":
        return InMemoryBackend(config)
    raise ValueError(f"Unknown STORAGE_BACKEND: {config.STORAGE_BACKEND}")


async def get_marketplace(request: Request) -> AsyncIterator[Marketplace]:
    async with request.app.state.backend.marketplace() as marketplace:
        yield marketplace


def get_clock() -> datetime:
    return datetime.now(timezone.utc)
