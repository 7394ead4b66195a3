"""Unit tests for AuditSubscriptionLedger

The audit is read-only: it reports ledger invariant violations and
expired-but-ACTIVE periods without rewriting anything.
"""

import pytest
from datetime import timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.marketplace import AuditSubscriptionLedger
from src.domain.subscription import PaymentMethod, SubscriptionPeriod, SubscriptionStatus


@pytest.fixture
def mock_period_repo():
    """Mock subscription period repository"""
    return MagicMock()


def make_period(period_id, owner_id, start, end, status=SubscriptionStatus.ACTIVE):
    return SubscriptionPeriod(
        id=period_id,
        owner_id=owner_id,
        status=status,
        start_date=start,
        end_date=end,
        amount=Decimal("2000"),
        currency="RWF",
        payment_method=PaymentMethod.MTN_MOBILE_MONEY,
        transaction_id=f"TXN-{period_id}",
    )


@pytest.mark.asyncio
class TestAuditSubscriptionLedger:

    async def test_clean_ledger(self, mock_period_repo, now):
        """
        Given: One ACTIVE current period and one INACTIVE past period per owner
        When: The audit runs
        Then: No findings
        """
        # Arrange
        mock_period_repo.list = AsyncMock(return_value=[
            make_period(2, "owner1", now, now + timedelta(days=29)),
            make_period(1, "owner1", now - timedelta(days=31), now, SubscriptionStatus.INACTIVE),
            make_period(3, "owner2", now, now + timedelta(days=29)),
        ])

        # Act
        result = await AuditSubscriptionLedger(mock_period_repo).execute(now)

        # Assert
        assert result.is_ok()
        report = result.value
        assert report.total_periods_checked == 3
        assert report.owners_checked == 2
        assert report.expired_active_periods == 0
        assert report.findings == []
        assert report.audited_at == now

    async def test_multiple_active_periods_flagged(self, mock_period_repo, now):
        # Arrange
        mock_period_repo.list = AsyncMock(return_value=[
            make_period(5, "owner1", now, now + timedelta(days=29)),
            make_period(4, "owner1", now - timedelta(days=10), now + timedelta(days=19)),
        ])

        # Act
        result = await AuditSubscriptionLedger(mock_period_repo).execute(now)

        # Assert
        findings = result.value.findings
        assert len(findings) == 1
        assert findings[0].issue == "MULTIPLE_ACTIVE"
        assert findings[0].owner_id == "owner1"
        assert findings[0].period_ids == [4, 5]

    async def test_non_positive_duration_flagged(self, mock_period_repo, now):
        mock_period_repo.list = AsyncMock(return_value=[
            make_period(1, "owner1", now, now, SubscriptionStatus.INACTIVE),
        ])

        result = await AuditSubscriptionLedger(mock_period_repo).execute(now)

        assert [f.issue for f in result.value.findings] == ["NON_POSITIVE_DURATION"]

    async def test_expired_active_periods_counted_not_flagged(self, mock_period_repo, now):
        mock_period_repo.list = AsyncMock(return_value=[
            make_period(1, "owner1", now - timedelta(days=40), now - timedelta(days=10)),
            make_period(2, "owner2", now - timedelta(days=29), now),
        ])

        result = await AuditSubscriptionLedger(mock_period_repo).execute(now)

        assert result.value.expired_active_periods == 2
        assert result.value.findings == []

    async def test_repository_failure(self, mock_period_repo, now):
        mock_period_repo.list = AsyncMock(side_effect=Exception("connection lost"))

        result = await AuditSubscriptionLedger(mock_period_repo).execute(now)

        assert result.is_err()
        assert result.error.code == "LEDGER_AUDIT_FAILED"
