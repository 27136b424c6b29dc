"""Route service."""

from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.distances import from_meters, m_to_s
from route_planner.exceptions import NotFoundError, RouteValidationError
from route_planner.models import Race, Route
from route_planner.planning import Edge, RaceConstraints, RouteBuilder, RouteState
from route_planner.repositories import LegRepository, RaceRepository, RouteRepository
from route_planner.schemas import (
    LegDistance,
    LocationBrief,
    RouteDetailResponse,
    RouteLegResponse,
    RouteResponse,
    RouteUpdate,
)


class RouteService:
    """Service for route operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.race_repo = RaceRepository(session)
        self.leg_repo = LegRepository(session)
        self.route_repo = RouteRepository(session)

    async def _get_race(self, race_id: int) -> Race:
        race = await self.race_repo.get_with_locations(race_id)
        if race is None:
            raise NotFoundError("Race", race_id)
        return race

    async def get_routes(
        self, race_id: int, selected: bool | None = None
    ) -> list[RouteResponse]:
        """Get a race's complete routes, optionally by selection state."""
        race = await self._get_race(race_id)
        routes = await self.route_repo.get_by_race(race_id, with_locations=True)
        if selected is not None:
            routes = [route for route in routes if route.selected == selected]
        return [self._to_response(route, race) for route in routes]

    async def get_route(self, race_id: int, route_id: int) -> RouteDetailResponse | None:
        """Get one route of a race with its legs."""
        race = await self._get_race(race_id)
        route = await self.route_repo.get_with_legs(route_id, race_id=race_id)
        if route is None:
            return None
        return self._to_detail_response(route, race)

    async def create_custom_route(
        self,
        race_id: int,
        location_ids: list[int],
        name: str | None = None,
    ) -> RouteDetailResponse:
        """
        Build a route by hand through the given checkpoints.

        The race start and finish are added around ``location_ids``. Distance
        bounds do not apply and fewer than ``num_stops`` checkpoints are
        allowed, but every location must be in the race pool and each
        consecutive pair needs a leg.

        Raises:
            NotFoundError: unknown race
            RaceConfigurationError: race has no start or finish
            RouteValidationError: a leg is missing or breaks a route rule
        """
        race = await self._get_race(race_id)
        constraints = RaceConstraints.from_race(race)
        stops = [constraints.start_id, *location_ids, constraints.finish_id]

        builder = RouteBuilder(constraints, custom=True)
        for start_id, finish_id in zip(stops, stops[1:]):
            leg = await self.leg_repo.get_by_pair(start_id, finish_id)
            if leg is None:
                raise RouteValidationError(
                    [f"No leg from location {start_id} to location {finish_id}"]
                )
            builder.append(
                Edge(
                    start_id=leg.start_id,
                    finish_id=leg.finish_id,
                    distance=leg.distance,
                    leg_id=leg.id,
                )
            )

        route = await self.route_repo.add_route(
            race_id,
            builder.legs,
            complete=builder.state is RouteState.COMPLETE,
            custom=True,
            name=name,
        )
        route = await self.route_repo.get_with_legs(route.id)
        return self._to_detail_response(route, race)

    async def update_route(
        self, race_id: int, route_id: int, data: RouteUpdate
    ) -> RouteDetailResponse | None:
        """Update a route's name, notes or selection."""
        race = await self._get_race(race_id)
        route = await self.route_repo.get_with_legs(route_id, race_id=race_id)
        if route is None:
            return None

        for key, value in data.model_dump(exclude_unset=True).items():
            if key == "selected" and value is None:
                continue
            setattr(route, key, value)
        await self.session.flush()

        route = await self.route_repo.get_with_legs(route_id, race_id=race_id)
        return self._to_detail_response(route, race)

    async def bulk_select(self, race_id: int, route_ids: list[int]) -> list[int]:
        """Make exactly ``route_ids`` the race's selected routes."""
        await self._get_race(race_id)
        return await self.route_repo.set_selected(race_id, route_ids)

    async def delete_route(self, race_id: int, route_id: int) -> bool:
        return await self.route_repo.delete_by_race(race_id, [route_id]) > 0

    async def delete_routes(self, race_id: int, route_ids: list[int] | None = None) -> int:
        """Delete the given routes of a race, or all of them."""
        await self._get_race(race_id)
        return await self.route_repo.delete_by_race(race_id, route_ids)

    def _to_response(self, route: Route, race: Race) -> RouteResponse:
        """Convert Route model to RouteResponse.

        Legs and their locations must be loaded.
        """
        legs = route.legs
        stops = [leg.start for leg in legs] + ([legs[-1].finish] if legs else [])
        return RouteResponse(
            id=route.id,
            name=route.name,
            race_id=route.race_id,
            complete=route.complete,
            custom=route.custom,
            distance=round(from_meters(route.distance, race.distance_unit), 2),
            distance_unit=race.distance_unit,
            leg_count=len(legs),
            target_leg_count=race.target_leg_count,
            rarity_score=route.rarity_score,
            selected=route.selected,
            notes=route.notes,
            created_at=route.created_at,
            location_sequence=[LocationBrief.model_validate(loc) for loc in stops],
            leg_distances=[
                LegDistance(
                    distance=leg.distance,
                    distance_display=m_to_s(leg.distance, race.distance_unit),
                )
                for leg in legs
            ],
        )

    def _to_detail_response(self, route: Route, race: Race) -> RouteDetailResponse:
        base = self._to_response(route, race)
        return RouteDetailResponse(
            **base.model_dump(),
            legs=[
                RouteLegResponse(
                    id=leg.id,
                    start=LocationBrief.model_validate(leg.start),
                    finish=LocationBrief.model_validate(leg.finish),
                    distance=leg.distance,
                    distance_display=m_to_s(leg.distance, race.distance_unit),
                )
                for leg in route.legs
            ],
        )
