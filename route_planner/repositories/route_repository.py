"""Route repository."""

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from route_planner.models import Leg, Route, RouteLeg
from route_planner.planning.graph import Edge
from route_planner.repositories.base import BaseRepository


def _with_legs():
    return selectinload(Route.route_legs).selectinload(RouteLeg.leg)


def _with_leg_locations():
    return (
        selectinload(Route.route_legs)
        .selectinload(RouteLeg.leg)
        .options(selectinload(Leg.start), selectinload(Leg.finish))
    )


class RouteRepository(BaseRepository[Route]):
    """Repository for Route model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Route, session)

    async def get_with_legs(self, route_id: int, race_id: int | None = None) -> Route | None:
        """Get a route with ordered legs and their locations loaded."""
        query = select(Route).options(_with_leg_locations()).where(Route.id == route_id)
        if race_id is not None:
            query = query.where(Route.race_id == race_id)
        result = await self.session.execute(query.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def get_by_race(
        self,
        race_id: int,
        complete_only: bool = True,
        with_locations: bool = False,
    ) -> list[Route]:
        """Get a race's routes with ordered legs, ordered by ID."""
        query = (
            select(Route)
            .options(_with_leg_locations() if with_locations else _with_legs())
            .where(Route.race_id == race_id)
            .order_by(Route.id)
            .execution_options(populate_existing=True)
        )
        if complete_only:
            query = query.where(Route.complete.is_(True))
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_ids(self, race_id: int, route_ids: list[int]) -> list[Route]:
        """Get routes of a race by ID, with legs and locations loaded."""
        if not route_ids:
            return []
        result = await self.session.execute(
            select(Route)
            .options(_with_leg_locations())
            .where(Route.race_id == race_id, Route.id.in_(route_ids))
            .order_by(Route.id)
        )
        return list(result.scalars().all())

    async def add_route(
        self,
        race_id: int,
        edges: list[Edge],
        complete: bool,
        custom: bool = False,
        name: str | None = None,
    ) -> Route:
        """Insert a route and its legs, numbering them 1..n in path order."""
        route = Route(
            race_id=race_id,
            name=name,
            custom=custom,
            complete=complete,
            distance=sum(edge.distance for edge in edges),
        )
        route.route_legs = [
            RouteLeg(leg_id=edge.leg_id, order=order)
            for order, edge in enumerate(edges, start=1)
        ]
        self.session.add(route)
        await self.session.flush()
        return route

    async def set_rarity_scores(self, scores: dict[int, float]) -> None:
        """Write rarity scores keyed by route ID."""
        for route_id, score in scores.items():
            await self.session.execute(
                update(Route).where(Route.id == route_id).values(rarity_score=score)
            )
        await self.session.flush()

    async def set_selected(self, race_id: int, route_ids: list[int]) -> list[int]:
        """Mark exactly ``route_ids`` of the race as selected."""
        await self.session.execute(
            update(Route)
            .where(Route.race_id == race_id, Route.selected.is_(True), Route.id.not_in(route_ids))
            .values(selected=False)
        )
        if route_ids:
            await self.session.execute(
                update(Route)
                .where(Route.race_id == race_id, Route.id.in_(route_ids))
                .values(selected=True)
            )
        await self.session.flush()
        result = await self.session.execute(
            select(Route.id)
            .where(Route.race_id == race_id, Route.selected.is_(True))
            .order_by(Route.id)
        )
        return list(result.scalars().all())

    async def delete_by_race(self, race_id: int, route_ids: list[int] | None = None) -> int:
        """Delete a race's routes (all, or only ``route_ids``). Returns the count."""
        route_filter = [Route.race_id == race_id]
        if route_ids is not None:
            route_filter.append(Route.id.in_(route_ids))

        ids = list(
            (await self.session.execute(select(Route.id).where(*route_filter))).scalars().all()
        )
        if not ids:
            return 0
        await self.session.execute(delete(RouteLeg).where(RouteLeg.route_id.in_(ids)))
        await self.session.execute(delete(Route).where(Route.id.in_(ids)))
        await self.session.flush()
        return len(ids)

    async def count_by_race(self, race_id: int, complete_only: bool = True) -> int:
        query = select(func.count()).select_from(Route).where(Route.race_id == race_id)
        if complete_only:
            query = query.where(Route.complete.is_(True))
        result = await self.session.execute(query)
        return result.scalar_one()
