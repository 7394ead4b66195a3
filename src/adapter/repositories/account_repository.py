"""SQLAlchemy Account Repository Implementation"""

from typing import Optional, List
from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.account_repository import AccountRepository
from src.domain.account import Account, AccountRole


class SqlAlchemyAccountRepository(AccountRepository):
    """
    SQLAlchemy implementation of AccountRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: str) -> Optional[Account]:
        statement = select(Account).where(Account.id == account_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_email_or_phone(self, email: str, phone: str) -> Optional[Account]:
        statement = select(Account).where(
            or_(Account.email == email, Account.phone == phone)
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def list(self, role: Optional[AccountRole] = None) -> List[Account]:
        statement = select(Account).order_by(Account.created_at)

        if role:
            statement = statement.where(Account.role == role)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create(self, account: Account) -> Account:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account
