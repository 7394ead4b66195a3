"""Category Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.category import Category


class CategoryRepository(ABC):
    """Repository interface for Category persistence"""

    @abstractmethod
    async def get_by_id(self, category_id: str) -> Optional[Category]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Category]:
        """Retrieve a category by name, ignoring case"""
        pass

    @abstractmethod
    async def list(self) -> List[Category]:
        pass

    @abstractmethod
    async def create(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def update(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def delete(self, category_id: str) -> bool:
        pass
