"""SQLAlchemy Subscription Period Repository Implementation

The partial unique index on (owner_id) WHERE status = 'ACTIVE' backs the
one-active-period rule; activate() demotes and inserts inside the caller's
transaction.
"""

from typing import Optional, List
from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.subscription_period_repository import SubscriptionPeriodRepository
from src.domain.subscription import SubscriptionPeriod, SubscriptionStatus


class SqlAlchemySubscriptionPeriodRepository(SubscriptionPeriodRepository):
    """
    SQLAlchemy implementation of SubscriptionPeriodRepository

    Commit/rollback belongs to the unit of work.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_latest_for_owner(self, owner_id: str) -> Optional[SubscriptionPeriod]:
        statement = (
            select(SubscriptionPeriod)
            .where(SubscriptionPeriod.owner_id == owner_id)
            .order_by(SubscriptionPeriod.end_date.desc(), SubscriptionPeriod.id.desc())
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_active_for_owner(self, owner_id: str) -> Optional[SubscriptionPeriod]:
        statement = select(SubscriptionPeriod).where(
            SubscriptionPeriod.owner_id == owner_id,
            SubscriptionPeriod.status == SubscriptionStatus.ACTIVE,
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(self, owner_id: Optional[str] = None) -> List[SubscriptionPeriod]:
        statement = select(SubscriptionPeriod).order_by(SubscriptionPeriod.id.desc())

        if owner_id:
            statement = statement.where(SubscriptionPeriod.owner_id == owner_id)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def activate(self, period: SubscriptionPeriod) -> SubscriptionPeriod:
        period.check_invariants()

        # Demote first and flush so the partial unique index never sees two ACTIVE rows
        demote = (
            update(SubscriptionPeriod)
            .where(
                SubscriptionPeriod.owner_id == period.owner_id,
                SubscriptionPeriod.status == SubscriptionStatus.ACTIVE,
            )
            .values(status=SubscriptionStatus.INACTIVE)
        )
        await self.session.execute(demote)

        self.session.add(period)
        await self.session.flush()
        await self.session.refresh(period)
        return period
