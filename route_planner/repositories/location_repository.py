"""Location repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.models import Location
from route_planner.repositories.base import BaseRepository


class LocationRepository(BaseRepository[Location]):
    """Repository for Location model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Location, session)

    async def get_by_name(self, name: str) -> Location | None:
        """Get location by exact name."""
        result = await self.session.execute(select(Location).where(Location.name == name))
        return result.scalar_one_or_none()

    async def get_many(self, ids: list[int]) -> list[Location]:
        """Get locations by ID, ordered by ID. Unknown IDs are skipped."""
        if not ids:
            return []
        result = await self.session.execute(
            select(Location).where(Location.id.in_(ids)).order_by(Location.id)
        )
        return list(result.scalars().all())

    async def get_ordered(self, skip: int = 0, limit: int = 100) -> list[Location]:
        """Get locations ordered by name."""
        result = await self.session.execute(
            select(Location).order_by(Location.name).offset(skip).limit(limit)
        )
        return list(result.scalars().all())
