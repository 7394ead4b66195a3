"""GetListing / SearchListings Use Cases

Read-only catalog queries.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.listing_repository import ListingRepository
from src.domain.account import AccountRole
from src.domain.listing import Listing
from .dtos import ListingSearchQueryDTO


class GetListing:

    def __init__(self, listing_repo: ListingRepository):
        self.listing_repo = listing_repo

    async def execute(self, listing_id: str) -> Result[Listing]:
        listing = await self.listing_repo.get_by_id(listing_id)
        if not listing:
            return Return.err(
                Error(
                    code="LISTING_NOT_FOUND",
                    message=f"No listing found with id {listing_id}",
                )
            )
        return Return.ok(listing)


class SearchListings:
    """
    Use Case: Filter the catalog

    All filters are optional and combined with AND. Text, category and
    location matching ignore case. only_approved_businesses hides listings
    whose owner is not (or no longer) an approved business owner.
    """

    def __init__(self, listing_repo: ListingRepository, account_repo: AccountRepository):
        self.listing_repo = listing_repo
        self.account_repo = account_repo

    async def execute(self, query: ListingSearchQueryDTO) -> List[Listing]:
        listings = await self.listing_repo.list(query.owner_id)

        if query.query:
            text = query.query.lower()
            listings = [
                l for l in listings
                if text in l.name.lower() or text in l.description.lower()
            ]

        if query.category:
            category = query.category.lower()
            listings = [l for l in listings if l.category.lower() == category]

        if query.min_price is not None:
            listings = [l for l in listings if l.price >= query.min_price]

        if query.max_price is not None:
            listings = [l for l in listings if l.price <= query.max_price]

        if query.location:
            listings = [l for l in listings if l.matches_location(query.location)]

        if query.only_approved_businesses:
            owners = await self.account_repo.list(AccountRole.BUSINESS_OWNER)
            approved_ids = {a.id for a in owners if a.is_approved}
            listings = [l for l in listings if l.owner_id in approved_ids]

        return listings
