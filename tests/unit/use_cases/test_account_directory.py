"""Unit tests for AccountDirectory

Tests cover:
- Account lookup
- Approval / rejection of business owners (idempotent)
- Registration rules
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.marketplace import AccountDirectory, RegisterAccountCommandDTO
from src.domain.account import Account, AccountRole


@pytest.fixture
def mock_account_repo():
    """Mock account repository"""
    return MagicMock()


@pytest.fixture
def approved_owner():
    return Account(
        id="owner1",
        role=AccountRole.BUSINESS_OWNER,
        email="owner1@example.com",
        phone="0781",
        is_approved=True,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.mark.asyncio
class TestGetAccount:

    async def test_found(self, marketplace, account_factory):
        await account_factory("owner1")

        result = await marketplace.accounts.get_account("owner1")

        assert result.is_ok()
        assert result.value.id == "owner1"

    async def test_not_found(self, marketplace):
        result = await marketplace.accounts.get_account("ghost")

        assert result.is_err()
        assert result.error.code == "ACCOUNT_NOT_FOUND"


@pytest.mark.asyncio
class TestSetApproval:

    async def test_approve_owner(self, marketplace, account_factory):
        """
        Given: Unapproved business owner
        When: approve is called
        Then: Owner is approved and the change is persisted
        """
        # Arrange
        await account_factory("owner1", is_approved=False)

        # Act
        result = await marketplace.accounts.approve("owner1")

        # Assert
        assert result.is_ok()
        assert result.value.is_approved is True
        stored = await marketplace.account_repo.get_by_id("owner1")
        assert stored.is_approved is True

    async def test_reject_revokes_approval(self, marketplace, account_factory):
        await account_factory("owner1", is_approved=True)

        result = await marketplace.accounts.reject("owner1")

        assert result.is_ok()
        assert (await marketplace.account_repo.get_by_id("owner1")).is_approved is False

    async def test_approving_approved_owner_is_noop(self, mock_uow, mock_account_repo, approved_owner):
        """
        Given: Owner already approved
        When: approve is called again
        Then: Success without touching storage
        """
        # Arrange
        mock_account_repo.get_by_id = AsyncMock(return_value=approved_owner)
        mock_account_repo.update = AsyncMock()
        directory = AccountDirectory(mock_uow, mock_account_repo)

        # Act
        result = await directory.approve("owner1")

        # Assert
        assert result.is_ok()
        assert result.value.is_approved is True
        mock_account_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_customer_cannot_be_approved(self, marketplace, account_factory):
        await account_factory("customer1", role=AccountRole.CUSTOMER)

        result = await marketplace.accounts.approve("customer1")

        assert result.is_err()
        assert result.error.code == "INVALID_ROLE"
        assert (await marketplace.account_repo.get_by_id("customer1")).is_approved is None

    async def test_unknown_account(self, marketplace):
        result = await marketplace.accounts.reject("ghost")

        assert result.error.code == "ACCOUNT_NOT_FOUND"

    async def test_storage_failure_rolls_back(self, mock_uow, mock_account_repo, approved_owner):
        # Arrange
        mock_account_repo.get_by_id = AsyncMock(return_value=approved_owner)
        mock_account_repo.update = AsyncMock(side_effect=Exception("db down"))
        directory = AccountDirectory(mock_uow, mock_account_repo)

        # Act
        result = await directory.reject("owner1")

        # Assert
        assert result.is_err()
        assert result.error.code == "SET_APPROVAL_FAILED"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestRegister:

    async def test_owner_registers_unapproved(self, marketplace):
        command = RegisterAccountCommandDTO(
            email="shop@example.com",
            phone="0787654321",
            role=AccountRole.BUSINESS_OWNER,
            business_name="My Shop",
            district="Gasabo",
            sector="Remera",
        )

        result = await marketplace.accounts.register(command)

        assert result.is_ok()
        account = result.value
        assert account.is_approved is False
        assert account.business_name == "My Shop"
        assert account.district == "Gasabo"

    async def test_customer_has_no_approval_flag_or_profile(self, marketplace):
        command = RegisterAccountCommandDTO(
            email="buyer@example.com",
            phone="0780000000",
            role=AccountRole.CUSTOMER,
            business_name="Ignored",
        )

        result = await marketplace.accounts.register(command)

        assert result.value.is_approved is None
        assert result.value.business_name is None

    async def test_duplicate_email_or_phone(self, marketplace):
        first = RegisterAccountCommandDTO(email="a@example.com", phone="0781", role=AccountRole.CUSTOMER)
        await marketplace.accounts.register(first)

        same_email = await marketplace.accounts.register(
            RegisterAccountCommandDTO(email="a@example.com", phone="0782", role=AccountRole.CUSTOMER)
        )
        same_phone = await marketplace.accounts.register(
            RegisterAccountCommandDTO(email="b@example.com", phone="0781", role=AccountRole.CUSTOMER)
        )

        assert same_email.error.code == "ACCOUNT_EXISTS"
        assert same_phone.error.code == "ACCOUNT_EXISTS"
        assert len(await marketplace.accounts.list_accounts()) == 1

    async def test_list_by_role(self, marketplace, account_factory):
        await account_factory("owner1")
        await account_factory("customer1", role=AccountRole.CUSTOMER)

        owners = await marketplace.accounts.list_accounts(AccountRole.BUSINESS_OWNER)

        assert [a.id for a in owners] == ["owner1"]
