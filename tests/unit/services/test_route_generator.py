"""Tests for route generation."""

import pytest
from sqlalchemy.exc import OperationalError

from route_planner.exceptions import (
    NotFoundError,
    RaceConfigurationError,
    RoutePersistenceError,
)
from route_planner.repositories import RouteRepository
from route_planner.services import RouteGenerator


class TestRouteGenerator:
    """Tests for RouteGenerator.generate."""

    @pytest.mark.asyncio
    async def test_generates_every_route(self, db_session, test_race, test_legs):
        """Three checkpoints taken two at a time give six routes."""
        generator = RouteGenerator(db_session)

        created = await generator.generate(test_race.id)

        assert created == 6
        routes = await RouteRepository(db_session).get_by_race(test_race.id)
        assert len(routes) == 6

    @pytest.mark.asyncio
    async def test_logs_finish_counts(self, db_session, test_race, test_legs, log_records):
        await RouteGenerator(db_session).generate(test_race.id)

        finished = [r for r in log_records if r.getMessage() == "route_generation_finished"]
        assert len(finished) == 1
        assert finished[0].routes_created == 6
        assert finished[0].race_id == test_race.id

    @pytest.mark.asyncio
    async def test_routes_satisfy_race_rules(
        self, db_session, test_race, test_legs, test_locations
    ):
        """Every stored route is complete and within bounds."""
        await RouteGenerator(db_session).generate(test_race.id)

        routes = await RouteRepository(db_session).get_by_race(test_race.id)
        start_id, finish_id = test_locations[0].id, test_locations[-1].id
        for route in routes:
            assert route.complete is True
            assert route.custom is False
            assert len(route.legs) == 3
            assert route.location_ids[0] == start_id
            assert route.location_ids[-1] == finish_id
            assert len(set(route.location_ids)) == 4
            assert all(100.0 <= leg.distance <= 2000.0 for leg in route.legs)
            assert 500.0 <= route.distance <= 5000.0

    @pytest.mark.asyncio
    async def test_reports_progress(self, db_session, test_race, test_legs):
        seen = []

        async def on_progress(created: int) -> None:
            seen.append(created)

        await RouteGenerator(db_session).generate(test_race.id, on_progress)

        assert seen == [1, 2, 3, 4, 5, 6]

    @pytest.mark.asyncio
    async def test_rerun_adds_same_set(self, db_session, test_race, test_legs):
        """Regenerating keeps existing routes and finds the same sequences."""
        generator = RouteGenerator(db_session)
        await generator.generate(test_race.id)
        await generator.generate(test_race.id)

        routes = await RouteRepository(db_session).get_by_race(test_race.id)
        first = sorted(tuple(r.location_ids) for r in routes[:6])
        second = sorted(tuple(r.location_ids) for r in routes[6:])
        assert len(routes) == 12
        assert first == second

    @pytest.mark.asyncio
    async def test_no_legs_gives_no_routes(self, db_session, test_race):
        """A pool without legs is not an error."""
        assert await RouteGenerator(db_session).generate(test_race.id) == 0

    @pytest.mark.asyncio
    async def test_unknown_race(self, db_session):
        with pytest.raises(NotFoundError):
            await RouteGenerator(db_session).generate(99999)

    @pytest.mark.asyncio
    async def test_race_without_finish(self, db_session, test_race, test_legs):
        """Configuration errors are raised before any route is stored."""
        test_race.finish_id = None
        await db_session.flush()

        with pytest.raises(RaceConfigurationError):
            await RouteGenerator(db_session).generate(test_race.id)

        assert await RouteRepository(db_session).count_by_race(test_race.id) == 0

    @pytest.mark.asyncio
    async def test_persistence_failure_keeps_earlier_routes(
        self, db_session, test_race, test_legs
    ):
        """Routes committed before a failed insert stay stored."""
        race_id = test_race.id
        generator = RouteGenerator(db_session)
        add_route = generator.route_repo.add_route
        calls = 0

        async def flaky_add_route(*args, **kwargs):
            nonlocal calls
            calls += 1
            if calls == 3:
                raise OperationalError("INSERT INTO routes", {}, Exception("disk I/O error"))
            return await add_route(*args, **kwargs)

        generator.route_repo.add_route = flaky_add_route

        with pytest.raises(RoutePersistenceError):
            await generator.generate(race_id)

        assert await RouteRepository(db_session).count_by_race(race_id) == 2
