"""Subscription API Routes

Simulated subscription checkout and the admin payments view.
"""

from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, status

from src.api.error import ClientError
from src.app.use_cases.marketplace.dtos import (
    StartSubscriptionRequestDTO,
    SubscriptionPeriodResponseDTO,
    SubscriptionStatusResponseDTO,
)
from src.depends import Marketplace, get_clock, get_marketplace

router = APIRouter(tags=["Subscriptions"])


@router.post(
    "/subscriptions/{owner_id}",
    response_model=SubscriptionPeriodResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        403: {
            "description": "Owner not approved",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "NOT_APPROVED",
                            "message": "Business owner business1 must be approved before subscribing",
                            "reason": None
                        }
                    }
                }
            }
        }
    }
)
async def start_subscription(
    owner_id: str,
    request: StartSubscriptionRequestDTO,
    marketplace: Marketplace = Depends(get_marketplace),
    now: datetime = Depends(get_clock),
):
    """
    Pay for (simulated) and start a one-month subscription period.

    Any previously active period of the owner is demoted.

    **Returns:**
    - 201: New active period
    - 400: Account is not a business owner
    - 403: Owner not approved
    - 404: Owner not found
    """
    result = await marketplace.ledger.start_period(owner_id, request.payment_method, now)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return SubscriptionPeriodResponseDTO.model_validate(result.value)


@router.get("/subscriptions/{owner_id}/latest", response_model=SubscriptionStatusResponseDTO)
async def get_latest_subscription(
    owner_id: str,
    marketplace: Marketplace = Depends(get_marketplace),
    now: datetime = Depends(get_clock),
):
    period = await marketplace.ledger.latest_period(owner_id)
    return SubscriptionStatusResponseDTO(
        owner_id=owner_id,
        is_active=period is not None and period.is_current(now),
        checked_at=now,
        period=SubscriptionPeriodResponseDTO.model_validate(period) if period else None,
    )


@router.get("/admin/payments", response_model=List[SubscriptionPeriodResponseDTO])
async def list_payments(
    owner_id: Optional[str] = None,
    marketplace: Marketplace = Depends(get_marketplace),
):
    periods = await marketplace.ledger.list_periods(owner_id)
    return [SubscriptionPeriodResponseDTO.model_validate(p) for p in periods]
