"""Subscription Ledger

Owns subscription periods: current-coverage lookup and activation of new
paid periods for business owners.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from libs.result import Result, Return, Error
from src.app.services.owner_locks import OwnerLocks
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.subscription_period_repository import SubscriptionPeriodRepository
from src.domain.account import AccountRole
from src.domain.subscription import (
    PaymentMethod,
    SubscriptionInvariantError,
    SubscriptionPeriod,
    SubscriptionStatus,
    add_one_month,
    generate_transaction_id,
)
from .account_directory import AccountDirectory

logger = logging.getLogger(__name__)


class SubscriptionLedger:
    """
    Subscription ledger for business owners

    Business Rules:
    1. Latest period = greatest end_date, ties to the most recently created
    2. An owner is currently active only if the latest period is ACTIVE and
       its end_date is after `now`; expiry is never written back
    3. Only approved business owners may start a period
    4. Starting a period demotes the previous ACTIVE one in the same atomic
       step, so at most one ACTIVE period exists per owner
    5. A period lasts one calendar month, clamped to the end of short months
    6. A new period never ends before the latest recorded one, so the
       period just paid for is always the latest

    Flow (start_period):
    1. Check account exists, is a business owner, and is approved
    2. Acquire the owner's lock
    3. Build the new ACTIVE period, ending one month out or at the
       latest recorded end_date, whichever is later
    4. Demote + insert atomically
    5. Commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        period_repo: SubscriptionPeriodRepository,
        account_directory: AccountDirectory,
        locks: OwnerLocks,
        amount: Decimal,
        currency: str,
    ):
        self.uow = uow
        self.period_repo = period_repo
        self.account_directory = account_directory
        self.locks = locks
        self.amount = amount
        self.currency = currency

    async def latest_period(self, owner_id: str) -> Optional[SubscriptionPeriod]:
        return await self.period_repo.get_latest_for_owner(owner_id)

    async def is_currently_active(self, owner_id: str, now: datetime) -> bool:
        period = await self.latest_period(owner_id)
        return period is not None and period.is_current(now)

    async def list_periods(self, owner_id: Optional[str] = None) -> List[SubscriptionPeriod]:
        """All recorded periods (payments), newest first"""
        return await self.period_repo.list(owner_id)

    async def start_period(
        self, owner_id: str, payment_method: PaymentMethod, now: datetime
    ) -> Result[SubscriptionPeriod]:
        """
        Start a new one-month subscription period for an owner

        Payment is simulated: the period is recorded as paid immediately.

        Args:
            owner_id: Business owner account identifier
            payment_method: Simulated payment channel
            now: Current time supplied by the caller

        Returns:
            Result[SubscriptionPeriod]: The new ACTIVE period or an error

        Errors:
            ACCOUNT_NOT_FOUND: Unknown owner
            INVALID_ROLE: Account is not a business owner
            NOT_APPROVED: Owner lacks admin approval
            SUBSCRIBE_FAILED: Storage failure (rolled back)

        Raises:
            SubscriptionInvariantError: The computed period is malformed
        """
        lookup = await self.account_directory.get_account(owner_id)
        if lookup.is_err():
            return lookup

        account = lookup.value
        if account.role != AccountRole.BUSINESS_OWNER:
            return Return.err(
                Error(
                    code="INVALID_ROLE",
                    message="Only business owners can subscribe",
                    reason=account.role.value,
                )
            )

        if account.is_approved is not True:
            return Return.err(
                Error(
                    code="NOT_APPROVED",
                    message=f"Business owner {owner_id} must be approved before subscribing",
                )
            )

        async with self.locks.for_owner(owner_id):
            end_date = add_one_month(now)
            latest = await self.period_repo.get_latest_for_owner(owner_id)
            if latest and latest.end_date > end_date:
                end_date = latest.end_date

            period = SubscriptionPeriod(
                owner_id=owner_id,
                status=SubscriptionStatus.ACTIVE,
                start_date=now,
                end_date=end_date,
                amount=self.amount,
                currency=self.currency,
                payment_method=payment_method,
                transaction_id=generate_transaction_id(),
                created_at=now,
            )

            try:
                previous = await self.period_repo.get_active_for_owner(owner_id)
                created = await self.period_repo.activate(period)
                await self.uow.commit()
            except SubscriptionInvariantError:
                await self.uow.rollback()
                raise
            except Exception as e:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="SUBSCRIBE_FAILED",
                        message="Failed to start subscription period",
                        reason=str(e),
                    )
                )

        if previous:
            logger.info(f"Demoted subscription period {previous.id} for owner {owner_id}")
        logger.info(
            f"Activated subscription period {created.id} for owner {owner_id} "
            f"via {payment_method.value} until {created.end_date.isoformat()} "
            f"({created.transaction_id})"
        )
        return Return.ok(created)
