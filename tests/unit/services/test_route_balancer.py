"""Tests for balanced route selection."""

import pytest

from route_planner.exceptions import NotFoundError
from route_planner.services import RouteBalancer, RouteGenerator

from tests.fixtures.factories import create_route_through


class TestRouteBalancer:
    """Tests for RouteBalancer.select."""

    @pytest.mark.asyncio
    async def test_zero_count(self, db_session, test_race, test_legs):
        await RouteGenerator(db_session).generate(test_race.id)

        assert await RouteBalancer(db_session).select(test_race.id, 0) == []

    @pytest.mark.asyncio
    async def test_returns_requested_count(self, db_session, test_race, test_legs):
        await RouteGenerator(db_session).generate(test_race.id)

        selected = await RouteBalancer(db_session).select(test_race.id, 3)

        assert len(selected) == 3
        assert len(set(selected)) == 3

    @pytest.mark.asyncio
    async def test_all_routes_when_count_matches(self, db_session, test_race, test_legs):
        await RouteGenerator(db_session).generate(test_race.id)
        balancer = RouteBalancer(db_session)
        available = await balancer.available_count(test_race.id)

        selected = await balancer.select(test_race.id, available)

        assert available == 6
        assert len(set(selected)) == 6

    @pytest.mark.asyncio
    async def test_prefers_even_usage(self, db_session, test_race, test_legs, test_locations):
        """A repeated checkpoint order loses to one that spreads usage."""
        start, a, b, c, finish = (loc.id for loc in test_locations)
        race_id = test_race.id
        ab = await create_route_through(db_session, race_id, [start, a, b, finish])
        ba = await create_route_through(db_session, race_id, [start, b, a, finish])
        await create_route_through(db_session, race_id, [start, a, b, finish])
        ca = await create_route_through(db_session, race_id, [start, c, a, finish])

        selected = await RouteBalancer(db_session).select(race_id, 3)

        assert selected == [ab.id, ba.id, ca.id]

    @pytest.mark.asyncio
    async def test_only_complete_routes(self, db_session, test_race, test_legs, test_locations):
        start, a, b, c, finish = (loc.id for loc in test_locations)
        complete = await create_route_through(db_session, test_race.id, [start, a, b, finish])
        await create_route_through(db_session, test_race.id, [start, c], complete=False)

        selected = await RouteBalancer(db_session).select(test_race.id, 1)

        assert selected == [complete.id]

    @pytest.mark.asyncio
    async def test_nothing_written(self, db_session, test_race, test_legs):
        """Selection leaves the routes' selected flags alone."""
        from route_planner.repositories import RouteRepository

        await RouteGenerator(db_session).generate(test_race.id)
        await RouteBalancer(db_session).select(test_race.id, 2)

        routes = await RouteRepository(db_session).get_by_race(test_race.id)
        assert not any(route.selected for route in routes)

    @pytest.mark.asyncio
    async def test_unknown_race(self, db_session):
        with pytest.raises(NotFoundError):
            await RouteBalancer(db_session).select(99999, 1)
