"""Listing API Routes

Owner mutations go through the catalog guard. The acting owner is taken
from the X-Owner-Id header set by the identity provider.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from fastapi import APIRouter, Depends, Header, Response, status

from src.api.error import ClientError
from src.app.use_cases.marketplace import (
    AdminDeleteListing,
    AdminUpdateListing,
    CreateListing,
    DeleteListing,
    GetListing,
    SearchListings,
    UpdateListing,
)
from src.app.use_cases.marketplace.dtos import (
    CreateListingCommandDTO,
    ListingResponseDTO,
    ListingSearchQueryDTO,
    UpdateListingCommandDTO,
)
from src.depends import Marketplace, get_clock, get_marketplace

router = APIRouter(tags=["Listings"])

DENIED_EXAMPLE = {
    "description": "Owner not eligible or not the listing owner",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "DENIED",
                    "message": "Owner business1 is not eligible to create listings",
                    "reason": "SUBSCRIPTION_EXPIRED"
                }
            }
        }
    }
}


@router.post(
    "/listings",
    response_model=ListingResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={403: DENIED_EXAMPLE},
)
async def create_listing(
    command: CreateListingCommandDTO,
    owner_id: str = Header(..., alias="X-Owner-Id"),
    marketplace: Marketplace = Depends(get_marketplace),
    now: datetime = Depends(get_clock),
):
    """
    Publish a listing.

    **Returns:**
    - 201: Listing created
    - 403: DENIED with reason NOT_APPROVED, NO_ACTIVE_SUBSCRIPTION or SUBSCRIPTION_EXPIRED
    """
    use_case = CreateListing(marketplace.uow, marketplace.guard, marketplace.listing_repo)
    result = await use_case.execute(owner_id, command, now)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ListingResponseDTO.model_validate(result.value)


@router.get("/listings", response_model=List[ListingResponseDTO])
async def search_listings(
    owner_id: Optional[str] = None,
    query: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    location: Optional[str] = None,
    only_approved_businesses: bool = False,
    marketplace: Marketplace = Depends(get_marketplace),
):
    use_case = SearchListings(marketplace.listing_repo, marketplace.account_repo)
    listings = await use_case.execute(
        ListingSearchQueryDTO(
            owner_id=owner_id,
            query=query,
            category=category,
            min_price=min_price,
            max_price=max_price,
            location=location,
            only_approved_businesses=only_approved_businesses,
        )
    )
    return [ListingResponseDTO.model_validate(l) for l in listings]


@router.get("/listings/{listing_id}", response_model=ListingResponseDTO)
async def get_listing(
    listing_id: str,
    marketplace: Marketplace = Depends(get_marketplace),
):
    result = await GetListing(marketplace.listing_repo).execute(listing_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ListingResponseDTO.model_validate(result.value)


@router.patch(
    "/listings/{listing_id}",
    response_model=ListingResponseDTO,
    responses={403: DENIED_EXAMPLE},
)
async def update_listing(
    listing_id: str,
    command: UpdateListingCommandDTO,
    owner_id: str = Header(..., alias="X-Owner-Id"),
    marketplace: Marketplace = Depends(get_marketplace),
    now: datetime = Depends(get_clock),
):
    """
    Edit one of the caller's listings.

    **Returns:**
    - 200: Listing updated
    - 403: FORBIDDEN (not the owner) or DENIED (not eligible)
    - 404: Listing not found
    """
    use_case = UpdateListing(marketplace.uow, marketplace.guard, marketplace.listing_repo)
    result = await use_case.execute(owner_id, listing_id, command, now)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ListingResponseDTO.model_validate(result.value)


@router.delete("/listings/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_listing(
    listing_id: str,
    owner_id: str = Header(..., alias="X-Owner-Id"),
    marketplace: Marketplace = Depends(get_marketplace),
):
    result = await DeleteListing(marketplace.uow, marketplace.listing_repo).execute(owner_id, listing_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/admin/listings/{listing_id}", response_model=ListingResponseDTO)
async def admin_update_listing(
    listing_id: str,
    command: UpdateListingCommandDTO,
    marketplace: Marketplace = Depends(get_marketplace),
    now: datetime = Depends(get_clock),
):
    """
    Edit any listing as an admin (moderation).

    Ownership and subscription checks do not apply.

    **Returns:**
    - 200: Listing updated
    - 404: Listing not found
    """
    use_case = AdminUpdateListing(marketplace.uow, marketplace.listing_repo)
    result = await use_case.execute(listing_id, command, now)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return ListingResponseDTO.model_validate(result.value)


@router.delete("/admin/listings/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_listing(
    listing_id: str,
    marketplace: Marketplace = Depends(get_marketplace),
):
    result = await AdminDeleteListing(marketplace.uow, marketplace.listing_repo).execute(listing_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
