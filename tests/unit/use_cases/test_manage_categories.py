"""Unit tests for category management use cases"""

import pytest

from src.app.use_cases.marketplace import AddCategory, DeleteCategory, ListCategories, RenameCategory


@pytest.fixture
def add_category(marketplace):
    return AddCategory(marketplace.uow, marketplace.category_repo)


@pytest.mark.asyncio
class TestAddCategory:

    async def test_name_is_stripped(self, add_category):
        result = await add_category.execute("  Books  ")

        assert result.is_ok()
        assert result.value.name == "Books"

    async def test_duplicate_ignores_case(self, add_category, marketplace):
        await add_category.execute("Books")

        result = await add_category.execute("BOOKS")

        assert result.is_err()
        assert result.error.code == "CATEGORY_EXISTS"
        assert len(await ListCategories(marketplace.category_repo).execute()) == 1


@pytest.mark.asyncio
class TestRenameCategory:

    async def test_rename(self, add_category, marketplace):
        books = (await add_category.execute("Books")).value

        result = await RenameCategory(marketplace.uow, marketplace.category_repo).execute(books.id, "Novels")

        assert result.value.name == "Novels"
        assert (await marketplace.category_repo.get_by_id(books.id)).name == "Novels"

    async def test_rename_to_own_name_with_different_case(self, add_category, marketplace):
        books = (await add_category.execute("books")).value

        result = await RenameCategory(marketplace.uow, marketplace.category_repo).execute(books.id, "Books")

        assert result.is_ok()
        assert result.value.name == "Books"

    async def test_rename_clash(self, add_category, marketplace):
        books = (await add_category.execute("Books")).value
        await add_category.execute("Toys")

        result = await RenameCategory(marketplace.uow, marketplace.category_repo).execute(books.id, "toys")

        assert result.error.code == "CATEGORY_EXISTS"

    async def test_unknown_category(self, marketplace):
        result = await RenameCategory(marketplace.uow, marketplace.category_repo).execute("missing", "X")

        assert result.error.code == "CATEGORY_NOT_FOUND"


@pytest.mark.asyncio
class TestDeleteCategory:

    async def test_delete_then_missing(self, add_category, marketplace):
        books = (await add_category.execute("Books")).value
        use_case = DeleteCategory(marketplace.uow, marketplace.category_repo)

        assert (await use_case.execute(books.id)).is_ok()
        assert (await use_case.execute(books.id)).error.code == "CATEGORY_NOT_FOUND"
