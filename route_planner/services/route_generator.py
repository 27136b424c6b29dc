"""Route generation service."""

from collections.abc import Awaitable, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.exceptions import NotFoundError, RoutePersistenceError
from route_planner.logging_utils import log_event
from route_planner.planning import (
    DistanceGraph,
    RaceConstraints,
    RouteBuilder,
    SearchStats,
    iter_paths,
)
from route_planner.repositories import LegRepository, RaceRepository, RouteRepository

ProgressCallback = Callable[[int], Awaitable[None]]


class RouteGenerator:
    """
    Enumerates and stores every valid route of a race.

    Each discovered route is committed on its own, so a failure part way
    through leaves the routes found before it in place. Existing routes are
    never touched; running twice stores the same paths twice.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.race_repo = RaceRepository(session)
        self.leg_repo = LegRepository(session)
        self.route_repo = RouteRepository(session)

    async def generate(self, race_id: int, on_progress: ProgressCallback | None = None) -> int:
        """
        Generate all routes for a race.

        Args:
            race_id: Race to plan
            on_progress: Awaited with the running count after each stored route

        Returns:
            Number of routes created

        Raises:
            NotFoundError: unknown race
            RaceConfigurationError: race cannot be planned as configured
            RoutePersistenceError: a route could not be committed
        """
        race = await self.race_repo.get_with_locations(race_id)
        if race is None:
            raise NotFoundError("Race", race_id)

        constraints = RaceConstraints.from_race(race)
        legs = await self.leg_repo.get_within(constraints.pool_ids)
        graph = DistanceGraph.from_legs(legs)
        stats = SearchStats()

        log_event(
            "route_generation_started",
            race_id=race_id,
            num_stops=constraints.num_stops,
            pool_size=len(constraints.pool_ids),
            edge_count=len(graph),
        )

        created = 0
        for edges in iter_paths(graph, constraints, stats):
            builder = RouteBuilder(constraints)
            builder.extend(list(edges))

            try:
                route = await self.route_repo.add_route(race_id, builder.legs, complete=True)
                await self.session.commit()
            except SQLAlchemyError as e:
                await self.session.rollback()
                log_event(
                    "route_generation_failed",
                    race_id=race_id,
                    routes_created=created,
                    error=str(e),
                )
                raise RoutePersistenceError(
                    f"Failed to store route {created + 1} for race {race_id}: {e}"
                ) from e

            # Keep the identity map small on large races
            self.session.expunge(route)
            created += 1
            if on_progress is not None:
                await on_progress(created)

        log_event(
            "route_generation_finished",
            race_id=race_id,
            routes_created=created,
            expanded=stats.expanded,
            pruned=stats.pruned,
        )
        return created
