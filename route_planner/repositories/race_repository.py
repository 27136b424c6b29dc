"""Race repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from route_planner.models import Location, Race, Route
from route_planner.repositories.base import BaseRepository


class RaceRepository(BaseRepository[Race]):
    """Repository for Race model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Race, session)

    async def get_with_locations(self, race_id: int) -> Race | None:
        """Get race with its pool, start and finish loaded."""
        result = await self.session.execute(
            select(Race)
            .options(
                selectinload(Race.locations),
                selectinload(Race.start),
                selectinload(Race.finish),
            )
            .where(Race.id == race_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_ordered(self, skip: int = 0, limit: int = 100) -> list[Race]:
        """Get races ordered by name, with pools loaded."""
        result = await self.session.execute(
            select(Race)
            .options(selectinload(Race.locations))
            .order_by(Race.name)
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def set_locations(self, race: Race, locations: list[Location]) -> Race:
        """Replace the race's location pool. ``race.locations`` must be loaded."""
        race.locations = list(locations)
        await self.session.flush()
        return race

    async def get_complete_route_count(self, race_id: int) -> int:
        """Get the number of complete routes for a race."""
        result = await self.session.execute(
            select(func.count())
            .select_from(Route)
            .where(Route.race_id == race_id, Route.complete.is_(True))
        )
        return result.scalar_one()
