"""Location service."""

from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.repositories import LocationRepository
from route_planner.schemas import LocationCreate, LocationResponse, LocationUpdate


class LocationService:
    """Service for location operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.location_repo = LocationRepository(session)

    async def get_location(self, location_id: int) -> LocationResponse | None:
        location = await self.location_repo.get(location_id)
        if not location:
            return None
        return LocationResponse.model_validate(location)

    async def get_locations(
        self, skip: int = 0, limit: int = 100
    ) -> tuple[list[LocationResponse], int]:
        """Get locations ordered by name, with the total count."""
        locations = await self.location_repo.get_ordered(skip=skip, limit=limit)
        total = await self.location_repo.count()
        return [LocationResponse.model_validate(loc) for loc in locations], total

    async def create_location(self, data: LocationCreate) -> LocationResponse:
        location = await self.location_repo.create(data.model_dump())
        return LocationResponse.model_validate(location)

    async def update_location(
        self, location_id: int, data: LocationUpdate
    ) -> LocationResponse | None:
        location = await self.location_repo.update(
            location_id, data.model_dump(exclude_unset=True)
        )
        if not location:
            return None
        return LocationResponse.model_validate(location)

    async def delete_location(self, location_id: int) -> bool:
        return await self.location_repo.delete(location_id)

    async def name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        """Whether another location already uses ``name``."""
        existing = await self.location_repo.get_by_name(name)
        return existing is not None and existing.id != exclude_id
