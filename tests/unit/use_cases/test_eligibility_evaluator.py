"""Unit tests for EligibilityEvaluator

Checks run in priority order: approval, then subscription presence,
then subscription standing.
"""

import pytest
from datetime import timedelta

from src.domain.account import AccountRole
from src.domain.eligibility import EligibilityReason
from src.domain.subscription import SubscriptionStatus


@pytest.mark.asyncio
class TestEligibilityEvaluator:

    async def test_approved_owner_with_current_period_is_eligible(
        self, marketplace, account_factory, period_factory, now
    ):
        """
        Given: Approved owner whose latest period is ACTIVE and ends in the future
        When: evaluate is called
        Then: Eligible with reason OK
        """
        # Arrange
        await account_factory("owner1", is_approved=True)
        await period_factory("owner1", now - timedelta(days=5), now + timedelta(days=25))

        # Act
        decision = await marketplace.evaluator.evaluate("owner1", now)

        # Assert
        assert decision.eligible is True
        assert decision.reason == EligibilityReason.OK

    async def test_approved_owner_without_periods(self, marketplace, account_factory, now):
        await account_factory("owner1", is_approved=True)

        decision = await marketplace.evaluator.evaluate("owner1", now)

        assert decision.eligible is False
        assert decision.reason == EligibilityReason.NO_ACTIVE_SUBSCRIPTION

    async def test_approved_owner_with_ended_period(
        self, marketplace, account_factory, period_factory, now
    ):
        await account_factory("owner1", is_approved=True)
        await period_factory("owner1", now - timedelta(days=40), now - timedelta(days=10))

        decision = await marketplace.evaluator.evaluate("owner1", now)

        assert decision.eligible is False
        assert decision.reason == EligibilityReason.SUBSCRIPTION_EXPIRED

    async def test_latest_period_not_active(self, marketplace, account_factory, period_factory, now):
        await account_factory("owner1", is_approved=True)
        await period_factory(
            "owner1", now - timedelta(days=5), now + timedelta(days=25),
            status=SubscriptionStatus.INACTIVE,
        )

        decision = await marketplace.evaluator.evaluate("owner1", now)

        assert decision.reason == EligibilityReason.SUBSCRIPTION_EXPIRED

    async def test_unapproved_owner_with_current_period(
        self, marketplace, account_factory, period_factory, now
    ):
        """
        Given: Owner with a current ACTIVE period whose approval was revoked
        When: evaluate is called
        Then: Approval wins, reason is NOT_APPROVED
        """
        # Arrange
        await account_factory("owner1", is_approved=False)
        await period_factory("owner1", now - timedelta(days=5), now + timedelta(days=25))

        # Act
        decision = await marketplace.evaluator.evaluate("owner1", now)

        # Assert
        assert decision.eligible is False
        assert decision.reason == EligibilityReason.NOT_APPROVED

    async def test_unapproved_owner_without_periods(self, marketplace, account_factory, now):
        await account_factory("owner1", is_approved=False)

        decision = await marketplace.evaluator.evaluate("owner1", now)

        assert decision.reason == EligibilityReason.NOT_APPROVED

    async def test_unknown_account(self, marketplace, now):
        decision = await marketplace.evaluator.evaluate("ghost", now)

        assert decision.eligible is False
        assert decision.reason == EligibilityReason.NOT_APPROVED

    @pytest.mark.parametrize("role", [AccountRole.CUSTOMER, AccountRole.ADMIN])
    async def test_non_owner_roles(self, marketplace, account_factory, now, role):
        await account_factory("someone", role=role)

        decision = await marketplace.evaluator.evaluate("someone", now)

        assert decision.reason == EligibilityReason.NOT_APPROVED

    async def test_decision_follows_clock(self, marketplace, account_factory, period_factory, now):
        await account_factory("owner1", is_approved=True)
        period = await period_factory("owner1", now, now + timedelta(days=29))

        before_end = await marketplace.evaluator.evaluate("owner1", period.end_date - timedelta(seconds=1))
        at_end = await marketplace.evaluator.evaluate("owner1", period.end_date)

        assert before_end.eligible is True
        assert at_end.reason == EligibilityReason.SUBSCRIPTION_EXPIRED
