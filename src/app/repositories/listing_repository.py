"""Listing Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.listing import Listing


class ListingRepository(ABC):
    """Repository interface for Listing persistence"""

    @abstractmethod
    async def get_by_id(self, listing_id: str) -> Optional[Listing]:
        pass

    @abstractmethod
    async def list(self, owner_id: Optional[str] = None) -> List[Listing]:
        """
        List listings in creation order

        Args:
            owner_id: Optional owner filter
        """
        pass

    @abstractmethod
    async def create(self, listing: Listing) -> Listing:
        pass

    @abstractmethod
    async def update(self, listing: Listing) -> Listing:
        pass

    @abstractmethod
    async def delete(self, listing_id: str) -> bool:
        """
        Delete a listing

        Returns:
            True if a listing was removed, False if none matched
        """
        pass
