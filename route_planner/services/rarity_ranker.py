"""Rarity ranking service."""

from collections.abc import Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.exceptions import NotFoundError
from route_planner.logging_utils import log_event
from route_planner.planning import intermediate_sequence, rarity_scores
from route_planner.repositories import RaceRepository, RouteRepository


class RarityRanker:
    """Scores a race's complete routes by how unusual their checkpoints are."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.race_repo = RaceRepository(session)
        self.route_repo = RouteRepository(session)

    async def rank(
        self,
        race_id: int,
        on_progress: Callable[[int, int], Awaitable[None]] | None = None,
    ) -> int:
        """
        Compute and store a rarity score for every complete route.

        Scores are relative to the routes present at the time of the call,
        so ranking again after generating more routes changes them.
        ``on_progress(scored, total)`` is awaited after each stored score.

        Returns:
            Number of routes scored
        """
        race = await self.race_repo.get(race_id)
        if race is None:
            raise NotFoundError("Race", race_id)

        routes = await self.route_repo.get_by_race(race_id, complete_only=True)
        if not routes:
            log_event("rarity_ranking_skipped", race_id=race_id, reason="no complete routes")
            return 0

        sequences = [
            intermediate_sequence(route.location_ids, race.num_stops) for route in routes
        ]
        scores = rarity_scores(sequences, race.num_stops)
        for scored, (route, score) in enumerate(zip(routes, scores), start=1):
            await self.route_repo.set_rarity_scores({route.id: score})
            if on_progress is not None:
                await on_progress(scored, len(routes))

        log_event(
            "rarity_ranking_finished",
            race_id=race_id,
            scored=len(routes),
            max_score=max(scores),
        )
        return len(routes)
