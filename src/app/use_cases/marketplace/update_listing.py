"""UpdateListing / AdminUpdateListing Use Cases"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.listing_repository import ListingRepository
from src.domain.eligibility import CatalogAction
from src.domain.listing import Listing
from .catalog_guard import CatalogGuard
from .dtos import UpdateListingCommandDTO

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"village"}


def _not_found(listing_id: str) -> Result:
    return Return.err(
        Error(
            code="LISTING_NOT_FOUND",
            message=f"No listing found with id {listing_id}",
        )
    )


async def _apply_update(
    uow: UnitOfWork,
    listing_repo: ListingRepository,
    listing: Listing,
    command: UpdateListingCommandDTO,
    now: datetime,
) -> Result[Listing]:
    """Apply the fields that were set, bump updated_at and persist"""
    for field, value in command.model_dump(exclude_unset=True).items():
        if value is None and field not in NULLABLE_FIELDS:
            continue
        setattr(listing, field, value)
    listing.updated_at = now

    try:
        updated = await listing_repo.update(listing)
        await uow.commit()
    except Exception as e:
        await uow.rollback()
        return Return.err(
            Error(
                code="UPDATE_LISTING_FAILED",
                message="Failed to update listing",
                reason=str(e),
            )
        )

    return Return.ok(updated)


class UpdateListing:
    """
    Use Case: Edit an existing listing

    Flow:
    1. Load listing (LISTING_NOT_FOUND)
    2. Guard: ownership, then eligibility (FORBIDDEN / DENIED)
    3. Check the authorization covers this owner and action
    4. Apply the fields that were set, bump updated_at
    """

    def __init__(self, uow: UnitOfWork, guard: CatalogGuard, listing_repo: ListingRepository):
        self.uow = uow
        self.guard = guard
        self.listing_repo = listing_repo

    async def execute(
        self, owner_id: str, listing_id: str, command: UpdateListingCommandDTO, now: datetime
    ) -> Result[Listing]:
        listing = await self.listing_repo.get_by_id(listing_id)
        if not listing:
            return _not_found(listing_id)

        authorization = await self.guard.authorize_edit(owner_id, listing.owner_id, now)
        if authorization.is_err():
            return authorization

        if not authorization.value.permits(listing.owner_id, CatalogAction.EDIT):
            return Return.err(
                Error(
                    code="FORBIDDEN",
                    message="Authorization does not cover editing this listing",
                )
            )

        return await _apply_update(self.uow, self.listing_repo, listing, command, now)


class AdminUpdateListing:
    """
    Use Case: Admin edits any listing (moderation)

    Skips the catalog guard: neither ownership nor the owner's eligibility
    is required.
    """

    def __init__(self, uow: UnitOfWork, listing_repo: ListingRepository):
        self.uow = uow
        self.listing_repo = listing_repo

    async def execute(
        self, listing_id: str, command: UpdateListingCommandDTO, now: datetime
    ) -> Result[Listing]:
        listing = await self.listing_repo.get_by_id(listing_id)
        if not listing:
            return _not_found(listing_id)

        result = await _apply_update(self.uow, self.listing_repo, listing, command, now)
        if result.is_ok():
            logger.info(f"Listing {listing_id} edited by admin")
        return result
