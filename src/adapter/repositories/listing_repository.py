"""SQLAlchemy Listing Repository Implementation"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.listing_repository import ListingRepository
from src.domain.listing import Listing


class SqlAlchemyListingRepository(ListingRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, listing_id: str) -> Optional[Listing]:
        statement = select(Listing).where(Listing.id == listing_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(self, owner_id: Optional[str] = None) -> List[Listing]:
        statement = select(Listing).order_by(Listing.created_at)

        if owner_id:
            statement = statement.where(Listing.owner_id == owner_id)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create(self, listing: Listing) -> Listing:
        self.session.add(listing)
        await self.session.flush()
        await self.session.refresh(listing)
        return listing

    async def update(self, listing: Listing) -> Listing:
        self.session.add(listing)
        await self.session.flush()
        await self.session.refresh(listing)
        return listing

    async def delete(self, listing_id: str) -> bool:
        listing = await self.get_by_id(listing_id)
        if not listing:
            return False
        await self.session.delete(listing)
        await self.session.flush()
        return True
