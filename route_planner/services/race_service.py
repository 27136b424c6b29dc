"""Race service."""

from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.exceptions import NotFoundError, RaceConfigurationError
from route_planner.models import Race
from route_planner.repositories import LegRepository, LocationRepository, RaceRepository
from route_planner.schemas import (
    LocationBrief,
    RaceCreate,
    RaceDetailResponse,
    RaceResponse,
    RaceUpdate,
)


class RaceService:
    """Service for race operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.race_repo = RaceRepository(session)
        self.location_repo = LocationRepository(session)
        self.leg_repo = LegRepository(session)

    async def get_race(self, race_id: int) -> RaceDetailResponse | None:
        """Get a race by ID with its pool."""
        race = await self.race_repo.get_with_locations(race_id)
        if not race:
            return None

        route_count = await self.race_repo.get_complete_route_count(race_id)
        pool_ids = {loc.id for loc in race.locations}
        leg_count = await self.leg_repo.count_within(pool_ids)
        base = self._to_response(race, route_count)
        return RaceDetailResponse(
            **base.model_dump(),
            start=LocationBrief.model_validate(race.start) if race.start else None,
            finish=LocationBrief.model_validate(race.finish) if race.finish else None,
            locations=[
                LocationBrief.model_validate(loc)
                for loc in sorted(race.locations, key=lambda loc: loc.name)
            ],
            leg_count=leg_count,
        )

    async def get_races(
        self, skip: int = 0, limit: int = 100
    ) -> tuple[list[RaceResponse], int]:
        """Get races with pagination."""
        races = await self.race_repo.get_ordered(skip=skip, limit=limit)
        total = await self.race_repo.count()

        responses = []
        for race in races:
            route_count = await self.race_repo.get_complete_route_count(race.id)
            responses.append(self._to_response(race, route_count))
        return responses, total

    async def create_race(self, data: RaceCreate) -> RaceResponse:
        """Create a new race with its location pool."""
        values = data.model_dump(exclude={"location_ids"})
        values["distance_unit"] = data.distance_unit.value
        race = await self.race_repo.create(values)
        race = await self.race_repo.get_with_locations(race.id)
        await self._assign_locations(race, data.location_ids)
        return self._to_response(race, 0)

    async def update_race(self, race_id: int, data: RaceUpdate) -> RaceResponse | None:
        """Update a race. ``location_ids`` replaces the pool when given."""
        race = await self.race_repo.get_with_locations(race_id)
        if not race:
            return None

        values = data.model_dump(exclude_unset=True, exclude={"location_ids"})
        if values.get("distance_unit") is not None:
            values["distance_unit"] = data.distance_unit.value
        for key, value in values.items():
            setattr(race, key, value)
        self._check_bounds(race)

        if "location_ids" in data.model_fields_set:
            await self._assign_locations(race, data.location_ids or [])
        await self.session.flush()

        race = await self.race_repo.get_with_locations(race_id)
        route_count = await self.race_repo.get_complete_route_count(race_id)
        return self._to_response(race, route_count)

    async def duplicate_race(self, race_id: int) -> RaceResponse | None:
        """Copy a race's settings and pool (routes are not copied)."""
        source = await self.race_repo.get_with_locations(race_id)
        if not source:
            return None

        copy = await self.race_repo.create({
            "name": f"Copy of {source.name}",
            "num_stops": source.num_stops,
            "max_teams": source.max_teams,
            "people_per_team": source.people_per_team,
            "min_total_distance": source.min_total_distance,
            "max_total_distance": source.max_total_distance,
            "min_leg_distance": source.min_leg_distance,
            "max_leg_distance": source.max_leg_distance,
            "distance_unit": source.distance_unit,
            "start_id": source.start_id,
            "finish_id": source.finish_id,
        })
        copy = await self.race_repo.get_with_locations(copy.id)
        await self.race_repo.set_locations(copy, list(source.locations))
        return self._to_response(copy, 0)

    async def delete_race(self, race_id: int) -> bool:
        """Delete a race and its routes."""
        return await self.race_repo.delete(race_id)

    async def _assign_locations(self, race: Race, location_ids: list[int]) -> None:
        locations = await self.location_repo.get_many(location_ids)
        missing = set(location_ids) - {loc.id for loc in locations}
        if missing:
            raise NotFoundError("Location", min(missing))
        await self.race_repo.set_locations(race, locations)

    @staticmethod
    def _check_bounds(race: Race) -> None:
        if race.min_total_distance > race.max_total_distance:
            raise RaceConfigurationError("min_total_distance must not exceed max_total_distance")
        if race.min_leg_distance > race.max_leg_distance:
            raise RaceConfigurationError("min_leg_distance must not exceed max_leg_distance")

    def _to_response(self, race: Race, route_count: int) -> RaceResponse:
        """Convert Race model to RaceResponse. ``race.locations`` must be loaded."""
        return RaceResponse(
            id=race.id,
            name=race.name,
            num_stops=race.num_stops,
            max_teams=race.max_teams,
            people_per_team=race.people_per_team,
            min_total_distance=race.min_total_distance,
            max_total_distance=race.max_total_distance,
            min_leg_distance=race.min_leg_distance,
            max_leg_distance=race.max_leg_distance,
            distance_unit=race.distance_unit,
            start_id=race.start_id,
            finish_id=race.finish_id,
            location_ids=sorted(loc.id for loc in race.locations),
            route_count=route_count,
            created_at=race.created_at,
            updated_at=race.updated_at,
        )
