"""Unit tests for SubscriptionPeriod domain entity and month arithmetic"""

import pytest
from datetime import datetime, timedelta
from decimal import Decimal

from src.domain.subscription import (
    PaymentMethod,
    SubscriptionInvariantError,
    SubscriptionPeriod,
    SubscriptionStatus,
    add_one_month,
    generate_transaction_id,
)


def _period(start, end, status=SubscriptionStatus.ACTIVE):
    return SubscriptionPeriod(
        owner_id="owner_1",
        status=status,
        start_date=start,
        end_date=end,
        amount=Decimal("2000"),
        currency="RWF",
        payment_method=PaymentMethod.AIRTEL_MONEY,
        transaction_id="TXN-1",
    )


class TestAddOneMonth:
    """Month rollover clamps to the last day of the target month"""

    @pytest.mark.parametrize(
        "start, expected",
        [
            (datetime(2024, 1, 31, 10, 0), datetime(2024, 2, 29, 10, 0)),
            (datetime(2023, 1, 31, 10, 0), datetime(2023, 2, 28, 10, 0)),
            (datetime(2024, 3, 31, 8, 30), datetime(2024, 4, 30, 8, 30)),
            (datetime(2024, 12, 15, 23, 59, 59), datetime(2025, 1, 15, 23, 59, 59)),
            (datetime(2024, 2, 29, 0, 0), datetime(2024, 3, 29, 0, 0)),
            (datetime(2024, 6, 1), datetime(2024, 7, 1)),
        ],
    )
    def test_add_one_month(self, start, expected):
        assert add_one_month(start) == expected

    def test_never_skips_into_following_month(self):
        """Jan 31 must not roll over into March"""
        assert add_one_month(datetime(2023, 1, 31)).month == 2

    def test_result_is_always_after_start(self):
        start = datetime(2024, 1, 1)
        for offset in range(366):
            moment = start + timedelta(days=offset)
            assert add_one_month(moment) > moment


class TestSubscriptionPeriodIsCurrent:

    def test_active_and_unexpired_is_current(self):
        now = datetime(2024, 1, 10)
        period = _period(now - timedelta(days=1), now + timedelta(days=29))
        assert period.is_current(now)

    def test_active_but_ended_is_not_current(self):
        """Expiry is computed; stored status stays ACTIVE"""
        now = datetime(2024, 1, 10)
        period = _period(now - timedelta(days=31), now - timedelta(days=1))
        assert not period.is_current(now)
        assert period.status == SubscriptionStatus.ACTIVE

    def test_end_date_equal_to_now_is_not_current(self):
        now = datetime(2024, 1, 10)
        period = _period(now - timedelta(days=30), now)
        assert not period.is_current(now)

    @pytest.mark.parametrize("status", [SubscriptionStatus.INACTIVE, SubscriptionStatus.PENDING])
    def test_non_active_status_is_not_current(self, status):
        now = datetime(2024, 1, 10)
        period = _period(now - timedelta(days=1), now + timedelta(days=29), status=status)
        assert not period.is_current(now)


class TestSubscriptionPeriodInvariants:

    def test_valid_period_passes(self):
        start = datetime(2024, 1, 1)
        _period(start, add_one_month(start)).check_invariants()

    def test_end_before_start_raises(self):
        start = datetime(2024, 1, 1)
        with pytest.raises(SubscriptionInvariantError):
            _period(start, start - timedelta(seconds=1)).check_invariants()

    def test_zero_length_raises(self):
        start = datetime(2024, 1, 1)
        with pytest.raises(SubscriptionInvariantError):
            _period(start, start).check_invariants()


def test_transaction_ids_are_prefixed_and_unique():
    ids = {generate_transaction_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(i.startswith("TXN-") for i in ids)
