"""Eligibility Evaluator

Single source of truth for "may this owner publish or edit listings now".
"""

from datetime import datetime
from src.domain.account import AccountRole
from src.domain.eligibility import EligibilityDecision, EligibilityReason
from .account_directory import AccountDirectory
from .subscription_ledger import SubscriptionLedger


class EligibilityEvaluator:
    """
    Combines directory and ledger state into one decision

    Checks run in priority order, so an unapproved owner is always told
    about approval first, whatever their subscription history:
    1. Unknown account or not a business owner -> NOT_APPROVED
    2. Not approved -> NOT_APPROVED
    3. No period at all -> NO_ACTIVE_SUBSCRIPTION
    4. Latest period not ACTIVE or ended -> SUBSCRIPTION_EXPIRED
    5. Otherwise -> OK

    Holds no state and never fails for business conditions.
    """

    def __init__(self, account_directory: AccountDirectory, ledger: SubscriptionLedger):
        self.account_directory = account_directory
        self.ledger = ledger

    async def evaluate(self, owner_id: str, now: datetime) -> EligibilityDecision:
        lookup = await self.account_directory.get_account(owner_id)
        if lookup.is_err() or lookup.value.role != AccountRole.BUSINESS_OWNER:
            return EligibilityDecision.deny(EligibilityReason.NOT_APPROVED)

        if not lookup.value.is_approved:
            return EligibilityDecision.deny(EligibilityReason.NOT_APPROVED)

        period = await self.ledger.latest_period(owner_id)
        if period is None:
            return EligibilityDecision.deny(EligibilityReason.NO_ACTIVE_SUBSCRIPTION)

        if not period.is_current(now):
            return EligibilityDecision.deny(EligibilityReason.SUBSCRIPTION_EXPIRED)

        return EligibilityDecision.allow()
