"""Category management use cases (admin)"""

from typing import List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.category_repository import CategoryRepository
from src.domain.category import Category


def _exists(name: str) -> Result:
    return Return.err(
        Error(
            code="CATEGORY_EXISTS",
            message=f"Category '{name}' already exists",
        )
    )


def _not_found(category_id: str) -> Result:
    return Return.err(
        Error(
            code="CATEGORY_NOT_FOUND",
            message=f"No category found with id {category_id}",
        )
    )


class ListCategories:

    def __init__(self, category_repo: CategoryRepository):
        self.category_repo = category_repo

    async def execute(self) -> List[Category]:
        return await self.category_repo.list()


class AddCategory:
    """Names are unique ignoring case"""

    def __init__(self, uow: UnitOfWork, category_repo: CategoryRepository):
        self.uow = uow
        self.category_repo = category_repo

    async def execute(self, name: str) -> Result[Category]:
        name = name.strip()
        if await self.category_repo.get_by_name(name):
            return _exists(name)

        created = await self.category_repo.create(Category(name=name))
        await self.uow.commit()
        return Return.ok(created)


class RenameCategory:

    def __init__(self, uow: UnitOfWork, category_repo: CategoryRepository):
        self.uow = uow
        self.category_repo = category_repo

    async def execute(self, category_id: str, new_name: str) -> Result[Category]:
        category = await self.category_repo.get_by_id(category_id)
        if not category:
            return _not_found(category_id)

        new_name = new_name.strip()
        clash = await self.category_repo.get_by_name(new_name)
        if clash and clash.id != category_id:
            return _exists(new_name)

        category.name = new_name
        updated = await self.category_repo.update(category)
        await self.uow.commit()
        return Return.ok(updated)


class DeleteCategory:

    def __init__(self, uow: UnitOfWork, category_repo: CategoryRepository):
        self.uow = uow
        self.category_repo = category_repo

    async def execute(self, category_id: str) -> Result[bool]:
        if not await self.category_repo.delete(category_id):
            return _not_found(category_id)

        await self.uow.commit()
        return Return.ok(True)
