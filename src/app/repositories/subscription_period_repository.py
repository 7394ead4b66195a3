"""Subscription Period Repository Interface

Defines the contract for subscription period persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.subscription import SubscriptionPeriod


class SubscriptionPeriodRepository(ABC):
    """
    Repository interface for SubscriptionPeriod persistence

    Implementations must keep at most one ACTIVE period per owner.
    """

    @abstractmethod
    async def get_latest_for_owner(self, owner_id: str) -> Optional[SubscriptionPeriod]:
        """
        Retrieve the period with the greatest end_date for an owner

        Ties are broken by the most recently created period (highest id).

        Args:
            owner_id: Owning account identifier

        Returns:
            SubscriptionPeriod if the owner has any, None otherwise
        """
        pass

    @abstractmethod
    async def get_active_for_owner(self, owner_id: str) -> Optional[SubscriptionPeriod]:
        """
        Retrieve the period currently stored as ACTIVE for an owner

        The stored status is returned as-is; expiry is not considered.
        """
        pass

    @abstractmethod
    async def list(self, owner_id: Optional[str] = None) -> List[SubscriptionPeriod]:
        """
        List periods, newest first

        Args:
            owner_id: Optional owner filter

        Returns:
            List of periods
        """
        pass

    @abstractmethod
    async def activate(self, period: SubscriptionPeriod) -> SubscriptionPeriod:
        """
        Demote the owner's ACTIVE period (if any) to INACTIVE and insert `period`

        Both steps happen atomically: no reader may observe two ACTIVE
        periods, or none, for the owner in between.

        Args:
            period: New ACTIVE period

        Returns:
            Persisted period with generated ID

        Raises:
            SubscriptionInvariantError: period ends at or before its start
        """
        pass
