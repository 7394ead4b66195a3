"""Eligibility value objects

Derived, never stored. Produced by the eligibility evaluator and the
catalog guard.
"""

from datetime import datetime
from enum import Enum
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid


class EligibilityReason(str, Enum):
    OK = "OK"
    NOT_APPROVED = "NOT_APPROVED"
    NO_ACTIVE_SUBSCRIPTION = "NO_ACTIVE_SUBSCRIPTION"
    SUBSCRIPTION_EXPIRED = "SUBSCRIPTION_EXPIRED"


class EligibilityDecision(BaseModel):
    """Whether an owner may publish or edit listings right now, and why"""

    eligible: bool
    reason: EligibilityReason

    @classmethod
    def allow(cls) -> "EligibilityDecision":
        return cls(eligible=True, reason=EligibilityReason.OK)

    @classmethod
    def deny(cls, reason: EligibilityReason) -> "EligibilityDecision":
        return cls(eligible=False, reason=reason)


class CatalogAction(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class Authorization(BaseModel):
    """
    Capability for a single listing mutation

    Scoped to one owner and one action. Not persisted; callers use it for
    the operation at hand and drop it.
    """

    token: str = Field(default_factory=generate_uuid)
    owner_id: str
    action: CatalogAction
    issued_at: datetime

    def permits(self, owner_id: str, action: CatalogAction) -> bool:
        return self.owner_id == owner_id and self.action == action
