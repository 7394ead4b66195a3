"""Account Directory

Owns account records: registration, lookup and the admin approval flag.
"""

import logging
from typing import Optional, List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.account_repository import AccountRepository
from src.domain.account import Account, AccountRole
from src.domain.base import utcnow
from .dtos import RegisterAccountCommandDTO

logger = logging.getLogger(__name__)


class AccountDirectory:
    """
    Account directory for the marketplace

    Business Rules:
    1. Email and phone are unique across accounts
    2. Business owners register unapproved (is_approved=False); other roles
       carry no approval flag
    3. Only business owners can be approved or rejected
    4. Setting approval to its current value is a no-op, not an error

    Errors:
        ACCOUNT_NOT_FOUND: No account with the given ID
        INVALID_ROLE: Approval attempted on a non business owner
        ACCOUNT_EXISTS: Email or phone already registered
    """

    def __init__(self, uow: UnitOfWork, account_repo: AccountRepository):
        self.uow = uow
        self.account_repo = account_repo

    async def get_account(self, account_id: str) -> Result[Account]:
        """
        Look up an account by ID

        Args:
            account_id: Account identifier

        Returns:
            Result[Account]: The account, or ACCOUNT_NOT_FOUND
        """
        account = await self.account_repo.get_by_id(account_id)
        if not account:
            return Return.err(
                Error(
                    code="ACCOUNT_NOT_FOUND",
                    message=f"No account found with id {account_id}",
                )
            )
        return Return.ok(account)

    async def set_approval(self, account_id: str, approved: bool) -> Result[Account]:
        """
        Set the admin approval flag of a business owner

        Args:
            account_id: Business owner account identifier
            approved: New approval state

        Returns:
            Result[Account]: Account with the requested approval state
        """
        lookup = await self.get_account(account_id)
        if lookup.is_err():
            return lookup

        account = lookup.value
        if account.role != AccountRole.BUSINESS_OWNER:
            return Return.err(
                Error(
                    code="INVALID_ROLE",
                    message=f"Account {account_id} is not a business owner",
                    reason=account.role.value,
                )
            )

        if bool(account.is_approved) == approved:
            return Return.ok(account)

        try:
            account.is_approved = approved
            account.updated_at = utcnow()
            updated = await self.account_repo.update(account)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="SET_APPROVAL_FAILED",
                    message="Failed to update approval",
                    reason=str(e),
                )
            )

        logger.info(
            f"Business owner {account_id} {'approved' if approved else 'rejected'}"
        )
        return Return.ok(updated)

    async def approve(self, account_id: str) -> Result[Account]:
        return await self.set_approval(account_id, True)

    async def reject(self, account_id: str) -> Result[Account]:
        return await self.set_approval(account_id, False)

    async def register(self, command: RegisterAccountCommandDTO) -> Result[Account]:
        """
        Register a new account

        Args:
            command: RegisterAccountCommandDTO

        Returns:
            Result[Account]: Created account, or ACCOUNT_EXISTS
        """
        existing = await self.account_repo.get_by_email_or_phone(command.email, command.phone)
        if existing:
            return Return.err(
                Error(
                    code="ACCOUNT_EXISTS",
                    message="An account with this email or phone already exists",
                )
            )

        is_owner = command.role == AccountRole.BUSINESS_OWNER
        account = Account(
            role=command.role,
            email=command.email,
            phone=command.phone,
            is_approved=False if is_owner else None,
            business_name=command.business_name if is_owner else None,
            district=command.district if is_owner else None,
            sector=command.sector if is_owner else None,
            village=command.village if is_owner else None,
        )

        try:
            created = await self.account_repo.create(account)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="REGISTER_FAILED",
                    message="Failed to register account",
                    reason=str(e),
                )
            )

        logger.info(f"Registered {created.role.value} account {created.id}")
        return Return.ok(created)

    async def list_accounts(self, role: Optional[AccountRole] = None) -> List[Account]:
        return await self.account_repo.list(role)
