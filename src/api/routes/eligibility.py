"""Eligibility API Route"""

from datetime import datetime
from fastapi import APIRouter, Depends

from src.app.use_cases.marketplace.dtos import EligibilityResponseDTO
from src.depends import Marketplace, get_clock, get_marketplace

router = APIRouter(tags=["Eligibility"])


@router.get("/eligibility/{owner_id}", response_model=EligibilityResponseDTO)
async def get_eligibility(
    owner_id: str,
    marketplace: Marketplace = Depends(get_marketplace),
    now: datetime = Depends(get_clock),
):
    """
    Whether the owner may publish or edit listings right now.

    Always 200; unknown owners are reported as NOT_APPROVED.
    """
    decision = await marketplace.evaluator.evaluate(owner_id, now)
    return EligibilityResponseDTO(
        owner_id=owner_id,
        eligible=decision.eligible,
        reason=decision.reason,
        checked_at=now,
    )
