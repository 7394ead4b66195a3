"""DeleteListing / AdminDeleteListing Use Cases

Removing a listing never requires an active subscription.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.listing_repository import ListingRepository

logger = logging.getLogger(__name__)


def _not_found(listing_id: str) -> Result:
    return Return.err(
        Error(
            code="LISTING_NOT_FOUND",
            message=f"No listing found with id {listing_id}",
        )
    )


class DeleteListing:
    """Use Case: Owner removes one of their own listings (FORBIDDEN otherwise)"""

    def __init__(self, uow: UnitOfWork, listing_repo: ListingRepository):
        self.uow = uow
        self.listing_repo = listing_repo

    async def execute(self, owner_id: str, listing_id: str) -> Result[bool]:
        listing = await self.listing_repo.get_by_id(listing_id)
        if not listing:
            return _not_found(listing_id)

        if listing.owner_id != owner_id:
            return Return.err(
                Error(
                    code="FORBIDDEN",
                    message="Listings can only be deleted by their owner",
                )
            )

        await self.listing_repo.delete(listing_id)
        await self.uow.commit()
        return Return.ok(True)


class AdminDeleteListing:
    """Use Case: Admin takes down any listing (moderation)"""

    def __init__(self, uow: UnitOfWork, listing_repo: ListingRepository):
        self.uow = uow
        self.listing_repo = listing_repo

    async def execute(self, listing_id: str) -> Result[bool]:
        if not await self.listing_repo.delete(listing_id):
            return _not_found(listing_id)

        await self.uow.commit()
        logger.info(f"Listing {listing_id} taken down by admin")
        return Return.ok(True)
