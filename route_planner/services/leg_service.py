"""Leg service."""

import random
from collections.abc import Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.clients import DistanceMatrixClient
from route_planner.exceptions import LegError, NotFoundError
from route_planner.logging_utils import log_event
from route_planner.models import Leg, Location
from route_planner.repositories import LegRepository, LocationRepository
from route_planner.schemas import LegResponse, LocationBrief

ProgressCallback = Callable[[int, int], Awaitable[None]]


def location_query(location: Location) -> str:
    """Address text sent to the distance service."""
    return location.full_address or location.lat_lng or location.name


class LegService:
    """Service for leg operations."""

    def __init__(
        self,
        session: AsyncSession,
        client_factory: Callable[[], DistanceMatrixClient] = DistanceMatrixClient,
    ):
        self.session = session
        self.leg_repo = LegRepository(session)
        self.location_repo = LocationRepository(session)
        self.client_factory = client_factory

    async def get_legs(
        self,
        location_ids: list[int] | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[list[LegResponse], int]:
        """Get legs, optionally only those inside a location pool."""
        if location_ids is not None:
            legs = await self.leg_repo.get_within_with_locations(
                location_ids, skip=skip, limit=limit
            )
            total = await self.leg_repo.count_within(location_ids)
        else:
            legs = await self.leg_repo.get_all_with_locations(skip=skip, limit=limit)
            total = await self.leg_repo.count()
        return [self._to_response(leg) for leg in legs], total

    async def create_leg(
        self,
        start_id: int,
        finish_id: int,
        distance: float | None = None,
    ) -> LegResponse:
        """
        Create a leg and its mirror.

        When ``distance`` is omitted it is looked up with the distance
        service. An existing pair is returned unchanged.

        Raises:
            LegError: start and finish are the same location
            NotFoundError: unknown location
            DistanceLookupError: the distance could not be resolved
        """
        if start_id == finish_id:
            raise LegError(f"Cannot connect location {start_id} to itself")
        start = await self.location_repo.get_required(start_id)
        finish = await self.location_repo.get_required(finish_id)

        existing = await self.leg_repo.get_by_pair(start_id, finish_id)
        if existing is not None:
            return self._to_response(await self.leg_repo.get_with_locations(existing.id))

        if distance is None:
            async with self.client_factory() as client:
                distance = await client.fetch_distance(
                    location_query(start), location_query(finish)
                )

        leg = await self.leg_repo.create_with_mirror(start_id, finish_id, distance)
        return self._to_response(await self.leg_repo.get_with_locations(leg.id))

    async def generate_legs(
        self,
        location_ids: list[int],
        mock_bounds: tuple[float, float] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> int:
        """
        Connect every pair of the given locations that has no leg yet.

        One distance request is made per origin covering all of its missing
        destinations. With ``mock_bounds`` (meters) random distances inside
        the bounds are used and no request is made.

        Args:
            location_ids: Locations to connect
            mock_bounds: Optional (min, max) distance range for random legs
            on_progress: Awaited with (origins done, origin count)

        Returns:
            Number of directed legs created
        """
        locations = await self.location_repo.get_many(location_ids)
        found = {loc.id for loc in locations}
        missing = [i for i in location_ids if i not in found]
        if missing:
            raise NotFoundError("Location", missing[0])

        before = await self.leg_repo.count()
        client: DistanceMatrixClient | None = None
        try:
            for index, origin in enumerate(locations, start=1):
                existing = await self.leg_repo.get_finish_ids(origin.id)
                destinations = [
                    loc for loc in locations if loc.id != origin.id and loc.id not in existing
                ]
                if destinations:
                    if mock_bounds is not None:
                        low, high = mock_bounds
                        distances = [random.uniform(low, high) for _ in destinations]
                    else:
                        if client is None:
                            client = self.client_factory()
                        distances = await client.fetch_distances(
                            location_query(origin),
                            [location_query(dest) for dest in destinations],
                        )
                    for dest, distance in zip(destinations, distances):
                        await self.leg_repo.create_with_mirror(origin.id, dest.id, distance)

                if on_progress is not None:
                    await on_progress(index, len(locations))
        finally:
            if client is not None:
                await client.close()

        created = await self.leg_repo.count() - before
        log_event(
            "leg_generation_finished",
            locations=len(locations),
            legs_created=created,
            mock=mock_bounds is not None,
        )
        return created

    async def delete_leg(self, leg_id: int) -> bool:
        """Delete a leg together with its mirror."""
        leg = await self.leg_repo.get(leg_id)
        if leg is None:
            return False
        await self.leg_repo.delete_pair(leg)
        return True

    async def delete_all_legs(self) -> int:
        return await self.leg_repo.delete_all()

    def _to_response(self, leg: Leg) -> LegResponse:
        """Convert Leg model to LegResponse. Start and finish must be loaded."""
        return LegResponse(
            id=leg.id,
            start=LocationBrief.model_validate(leg.start),
            finish=LocationBrief.model_validate(leg.finish),
            distance=leg.distance,
            created_at=leg.created_at,
        )
