"""Account Repository Interface

Defines the contract for account persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.account import Account, AccountRole


class AccountRepository(ABC):
    """Repository interface for Account persistence"""

    @abstractmethod
    async def get_by_id(self, account_id: str) -> Optional[Account]:
        """
        Retrieve account by ID

        Args:
            account_id: Account identifier

        Returns:
            Account if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email_or_phone(self, email: str, phone: str) -> Optional[Account]:
        """
        Retrieve the first account using either the email or the phone

        Used to enforce registration uniqueness.
        """
        pass

    @abstractmethod
    async def list(self, role: Optional[AccountRole] = None) -> List[Account]:
        """
        List accounts, optionally filtered by role

        Args:
            role: Optional role filter

        Returns:
            Accounts in registration order
        """
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        pass
