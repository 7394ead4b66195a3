"""Account API Routes

Registration, lookup and admin moderation (approve/reject).
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, status

from src.api.error import ClientError
from src.app.use_cases.marketplace.dtos import AccountResponseDTO, RegisterAccountCommandDTO
from src.depends import Marketplace, get_marketplace
from src.domain.account import AccountRole

router = APIRouter(tags=["Accounts"])


@router.post(
    "/accounts",
    response_model=AccountResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def register_account(
    command: RegisterAccountCommandDTO,
    marketplace: Marketplace = Depends(get_marketplace),
):
    """
    Register a customer, business owner or admin account.

    Business owners start unapproved and cannot subscribe or publish
    listings until an admin approves them.

    **Returns:**
    - 201: Account created
    - 409: Email or phone already registered
    """
    result = await marketplace.accounts.register(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return AccountResponseDTO.model_validate(result.value)


@router.get("/accounts", response_model=List[AccountResponseDTO])
async def list_accounts(
    role: Optional[AccountRole] = None,
    marketplace: Marketplace = Depends(get_marketplace),
):
    accounts = await marketplace.accounts.list_accounts(role)
    return [AccountResponseDTO.model_validate(a) for a in accounts]


@router.get("/accounts/{account_id}", response_model=AccountResponseDTO)
async def get_account(
    account_id: str,
    marketplace: Marketplace = Depends(get_marketplace),
):
    result = await marketplace.accounts.get_account(account_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return AccountResponseDTO.model_validate(result.value)


@router.post("/admin/accounts/{account_id}/approve", response_model=AccountResponseDTO)
async def approve_business_owner(
    account_id: str,
    marketplace: Marketplace = Depends(get_marketplace),
):
    """
    Approve a business owner. Approving an approved owner is a no-op.

    **Returns:**
    - 200: Owner approved
    - 400: Account is not a business owner (INVALID_ROLE)
    - 404: Account not found
    """
    result = await marketplace.accounts.approve(account_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return AccountResponseDTO.model_validate(result.value)


@router.post("/admin/accounts/{account_id}/reject", response_model=AccountResponseDTO)
async def reject_business_owner(
    account_id: str,
    marketplace: Marketplace = Depends(get_marketplace),
):
    result = await marketplace.accounts.reject(account_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return AccountResponseDTO.model_validate(result.value)
