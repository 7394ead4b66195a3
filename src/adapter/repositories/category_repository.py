"""SQLAlchemy Category Repository Implementation"""

from typing import Optional, List
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.category_repository import CategoryRepository
from src.domain.category import Category


class SqlAlchemyCategoryRepository(CategoryRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        statement = select(Category).where(Category.id == category_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Category]:
        statement = select(Category).where(func.lower(Category.name) == name.lower())
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def list(self) -> List[Category]:
        statement = select(Category).order_by(func.lower(Category.name))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create(self, category: Category) -> Category:
        self.session.add(category)
        await self.session.flush()
        await self.session.refresh(category)
        return category

    async def update(self, category: Category) -> Category:
        self.session.add(category)
        await self.session.flush()
        await self.session.refresh(category)
        return category

    async def delete(self, category_id: str) -> bool:
        category = await self.get_by_id(category_id)
        if not category:
            return False
        await self.session.delete(category)
        await self.session.flush()
        return True
