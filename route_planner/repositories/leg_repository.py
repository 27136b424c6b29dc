"""Leg repository."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from route_planner.exceptions import LegError
from route_planner.models import Leg
from route_planner.repositories.base import BaseRepository


class LegRepository(BaseRepository[Leg]):
    """Repository for Leg model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Leg, session)

    async def get_by_pair(self, start_id: int, finish_id: int) -> Leg | None:
        """Get the directed leg start -> finish."""
        result = await self.session.execute(
            select(Leg).where(Leg.start_id == start_id, Leg.finish_id == finish_id)
        )
        return result.scalar_one_or_none()

    async def create_with_mirror(self, start_id: int, finish_id: int, distance: float) -> Leg:
        """Create start -> finish and its mirror finish -> start.

        Either direction that already exists is left as it is, so calling this
        twice for the same pair creates nothing the second time.
        """
        if start_id == finish_id:
            raise LegError(f"Cannot connect location {start_id} to itself")
        if distance is None or distance < 0:
            raise LegError(f"Invalid leg distance: {distance}")

        leg = await self.get_by_pair(start_id, finish_id)
        if leg is None:
            leg = Leg(start_id=start_id, finish_id=finish_id, distance=distance)
            self.session.add(leg)

        mirror = await self.get_by_pair(finish_id, start_id)
        if mirror is None:
            self.session.add(Leg(start_id=finish_id, finish_id=start_id, distance=leg.distance))

        await self.session.flush()
        return leg

    async def get_within(self, location_ids: set[int] | list[int]) -> list[Leg]:
        """Legs whose start and finish are both in ``location_ids``."""
        ids = list(location_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(Leg)
            .where(Leg.start_id.in_(ids), Leg.finish_id.in_(ids))
            .order_by(Leg.id)
        )
        return list(result.scalars().all())

    async def get_within_with_locations(
        self, location_ids: set[int] | list[int], skip: int = 0, limit: int = 100
    ) -> list[Leg]:
        """Same as get_within, with start/finish loaded, for listing."""
        ids = list(location_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(Leg)
            .options(selectinload(Leg.start), selectinload(Leg.finish))
            .where(Leg.start_id.in_(ids), Leg.finish_id.in_(ids))
            .order_by(Leg.id)
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_within(self, location_ids: set[int] | list[int]) -> int:
        ids = list(location_ids)
        if not ids:
            return 0
        result = await self.session.execute(
            select(func.count())
            .select_from(Leg)
            .where(Leg.start_id.in_(ids), Leg.finish_id.in_(ids))
        )
        return result.scalar_one()

    async def get_all_with_locations(self, skip: int = 0, limit: int = 100) -> list[Leg]:
        """Get legs with start/finish loaded."""
        result = await self.session.execute(
            select(Leg)
            .options(selectinload(Leg.start), selectinload(Leg.finish))
            .order_by(Leg.id)
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_finish_ids(self, start_id: int) -> set[int]:
        """Locations already reachable from ``start_id``."""
        result = await self.session.execute(
            select(Leg.finish_id).where(Leg.start_id == start_id)
        )
        return set(result.scalars().all())

    async def delete_all(self) -> int:
        """Delete every leg. Returns the number removed."""
        total = await self.count()
        await self.session.execute(delete(Leg))
        await self.session.flush()
        return total

    async def get_with_locations(self, leg_id: int) -> Leg | None:
        """Get a leg with start/finish loaded."""
        result = await self.session.execute(
            select(Leg)
            .options(selectinload(Leg.start), selectinload(Leg.finish))
            .where(Leg.id == leg_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def delete_pair(self, leg: Leg) -> int:
        """Delete a leg and its mirror. Returns the number removed."""
        result = await self.session.execute(
            delete(Leg).where(
                ((Leg.start_id == leg.start_id) & (Leg.finish_id == leg.finish_id))
                | ((Leg.start_id == leg.finish_id) & (Leg.finish_id == leg.start_id))
            )
        )
        await self.session.flush()
        return result.rowcount
