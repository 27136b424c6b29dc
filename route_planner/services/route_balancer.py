"""Balanced route selection service."""

from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.exceptions import NotFoundError
from route_planner.logging_utils import log_event
from route_planner.planning import Candidate, intermediate_sequence, select_balanced
from route_planner.repositories import RaceRepository, RouteRepository


class RouteBalancer:
    """Picks routes that spread teams evenly across checkpoints."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.race_repo = RaceRepository(session)
        self.route_repo = RouteRepository(session)

    async def available_count(self, race_id: int) -> int:
        """Complete routes the selector can choose from."""
        return await self.route_repo.count_by_race(race_id, complete_only=True)

    async def select(self, race_id: int, count: int) -> list[int]:
        """
        Select ``count`` complete routes with the most even checkpoint usage.

        Nothing is written; callers decide whether to mark the result selected.

        Returns:
            Route IDs in selection order
        """
        race = await self.race_repo.get(race_id)
        if race is None:
            raise NotFoundError("Race", race_id)
        if count <= 0:
            return []

        routes = await self.route_repo.get_by_race(race_id, complete_only=True)
        candidates = [
            Candidate(
                route_id=route.id,
                sequence=tuple(intermediate_sequence(route.location_ids, race.num_stops)),
            )
            for route in routes
        ]
        selected = select_balanced(candidates, count, race.num_stops)

        log_event(
            "balanced_selection_finished",
            race_id=race_id,
            requested=count,
            candidates=len(candidates),
            selected=len(selected),
        )
        return selected
