"""Category API Routes (admin management, public listing)"""

from typing import List
from fastapi import APIRouter, Depends, Response, status

from src.api.error import ClientError
from src.app.use_cases.marketplace import AddCategory, DeleteCategory, ListCategories, RenameCategory
from src.app.use_cases.marketplace.dtos import CategoryCommandDTO, CategoryResponseDTO
from src.depends import Marketplace, get_marketplace

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryResponseDTO])
async def list_categories(marketplace: Marketplace = Depends(get_marketplace)):
    categories = await ListCategories(marketplace.category_repo).execute()
    return [CategoryResponseDTO.model_validate(c) for c in categories]


@router.post("", response_model=CategoryResponseDTO, status_code=status.HTTP_201_CREATED)
async def add_category(
    command: CategoryCommandDTO,
    marketplace: Marketplace = Depends(get_marketplace),
):
    result = await AddCategory(marketplace.uow, marketplace.category_repo).execute(command.name)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return CategoryResponseDTO.model_validate(result.value)


@router.patch("/{category_id}", response_model=CategoryResponseDTO)
async def rename_category(
    category_id: str,
    command: CategoryCommandDTO,
    marketplace: Marketplace = Depends(get_marketplace),
):
    use_case = RenameCategory(marketplace.uow, marketplace.category_repo)
    result = await use_case.execute(category_id, command.name)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return CategoryResponseDTO.model_validate(result.value)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    marketplace: Marketplace = Depends(get_marketplace),
):
    result = await DeleteCategory(marketplace.uow, marketplace.category_repo).execute(category_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
