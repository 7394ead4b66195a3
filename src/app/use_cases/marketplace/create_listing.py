"""CreateListing Use Case

Publishes a new listing for a business owner after the catalog guard
approves it.
"""

from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.listing_repository import ListingRepository
from src.domain.eligibility import CatalogAction
from src.domain.listing import Listing
from .catalog_guard import CatalogGuard
from .dtos import CreateListingCommandDTO


class CreateListing:
    """
    Use Case: Publish a listing

    Business Rules:
    1. The guard is consulted first; a DENIED error is returned unchanged
    2. The returned authorization must cover this owner and CREATE
    3. The listing is owned by the requesting owner
    """

    def __init__(self, uow: UnitOfWork, guard: CatalogGuard, listing_repo: ListingRepository):
        self.uow = uow
        self.guard = guard
        self.listing_repo = listing_repo

    async def execute(
        self, owner_id: str, command: CreateListingCommandDTO, now: datetime
    ) -> Result[Listing]:
        authorization = await self.guard.authorize_create(owner_id, now)
        if authorization.is_err():
            return authorization

        if not authorization.value.permits(owner_id, CatalogAction.CREATE):
            return Return.err(
                Error(
                    code="FORBIDDEN",
                    message="Authorization does not cover creating listings for this owner",
                )
            )

        listing = Listing(
            owner_id=owner_id,
            name=command.name,
            category=command.category,
            description=command.description,
            price=command.price,
            phone_number=command.phone_number,
            district=command.district,
            sector=command.sector,
            village=command.village,
            created_at=now,
            updated_at=now,
        )

        try:
            created = await self.listing_repo.create(listing)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_LISTING_FAILED",
                    message="Failed to create listing",
                    reason=str(e),
                )
            )

        return Return.ok(created)
