"""Catalog Guard

Gate that every listing create/update must pass before mutating the
catalog.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.domain.eligibility import Authorization, CatalogAction
from .eligibility_evaluator import EligibilityEvaluator

logger = logging.getLogger(__name__)


class CatalogGuard:
    """
    Authorizes listing mutations for an owner

    Business Rules:
    1. Create requires the owner to be eligible right now
    2. Edit additionally requires the owner to own the listing; ownership
       is checked before eligibility
    3. Read-only: no state changes, the returned Authorization is not stored

    Errors:
        DENIED: Owner not eligible; `reason` holds the EligibilityReason value
        FORBIDDEN: Owner tried to edit someone else's listing
    """

    def __init__(self, evaluator: EligibilityEvaluator):
        self.evaluator = evaluator

    async def authorize_create(self, owner_id: str, now: datetime) -> Result[Authorization]:
        return await self._authorize(owner_id, CatalogAction.CREATE, now)

    async def authorize_edit(
        self, owner_id: str, listing_owner_id: str, now: datetime
    ) -> Result[Authorization]:
        if owner_id != listing_owner_id:
            logger.info(f"Owner {owner_id} forbidden from editing listing of {listing_owner_id}")
            return Return.err(
                Error(
                    code="FORBIDDEN",
                    message="Listings can only be edited by their owner",
                )
            )
        return await self._authorize(owner_id, CatalogAction.EDIT, now)

    async def _authorize(
        self, owner_id: str, action: CatalogAction, now: datetime
    ) -> Result[Authorization]:
        decision = await self.evaluator.evaluate(owner_id, now)
        if not decision.eligible:
            logger.info(f"Denied {action.value} for owner {owner_id}: {decision.reason.value}")
            return Return.err(
                Error(
                    code="DENIED",
                    message=f"Owner {owner_id} is not eligible to {action.value} listings",
                    reason=decision.reason.value,
                )
            )
        return Return.ok(Authorization(owner_id=owner_id, action=action, issued_at=now))
