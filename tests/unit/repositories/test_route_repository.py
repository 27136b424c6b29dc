"""Tests for route repository."""

import pytest

from route_planner.planning import Edge
from route_planner.repositories import LegRepository, RouteRepository


async def path_edges(db_session, location_ids: list[int]) -> list[Edge]:
    legs = LegRepository(db_session)
    edges = []
    for start_id, finish_id in zip(location_ids, location_ids[1:]):
        leg = await legs.get_by_pair(start_id, finish_id)
        edges.append(Edge(leg.start_id, leg.finish_id, leg.distance, leg.id))
    return edges


@pytest.fixture
def ids(test_locations) -> list[int]:
    return [loc.id for loc in test_locations]


class TestRouteRepository:
    """Tests for RouteRepository."""

    @pytest.mark.asyncio
    async def test_add_route_orders_legs(self, db_session, test_race, test_legs, ids):
        """Legs are numbered 1..n in path order."""
        repo = RouteRepository(db_session)
        edges = await path_edges(db_session, [ids[0], ids[2], ids[1], ids[4]])

        route = await repo.add_route(test_race.id, edges, complete=True)

        loaded = await repo.get_with_legs(route.id)
        assert [rl.order for rl in loaded.route_legs] == [1, 2, 3]
        assert loaded.location_ids == [ids[0], ids[2], ids[1], ids[4]]
        assert loaded.distance == 3000.0
        assert loaded.rarity_score is None
        assert loaded.selected is False

    @pytest.mark.asyncio
    async def test_get_with_legs_checks_race(self, db_session, test_race, test_legs, ids):
        repo = RouteRepository(db_session)
        edges = await path_edges(db_session, [ids[0], ids[1], ids[2], ids[4]])
        route = await repo.add_route(test_race.id, edges, complete=True)

        assert await repo.get_with_legs(route.id, race_id=test_race.id + 1) is None

    @pytest.mark.asyncio
    async def test_get_by_race_complete_only(self, db_session, test_race, test_legs, ids):
        repo = RouteRepository(db_session)
        full = await path_edges(db_session, [ids[0], ids[1], ids[2], ids[4]])
        done = await repo.add_route(test_race.id, full, complete=True)
        await repo.add_route(test_race.id, full[:1], complete=False)

        complete = await repo.get_by_race(test_race.id)
        everything = await repo.get_by_race(test_race.id, complete_only=False)

        assert [route.id for route in complete] == [done.id]
        assert len(everything) == 2
        assert await repo.count_by_race(test_race.id) == 1

    @pytest.mark.asyncio
    async def test_set_rarity_scores(self, db_session, test_race, test_legs, ids):
        repo = RouteRepository(db_session)
        edges = await path_edges(db_session, [ids[0], ids[1], ids[2], ids[4]])
        route = await repo.add_route(test_race.id, edges, complete=True)

        await repo.set_rarity_scores({route.id: 42.5})

        loaded = await repo.get_with_legs(route.id)
        assert loaded.rarity_score == 42.5

    @pytest.mark.asyncio
    async def test_set_selected_is_exact(self, db_session, test_race, test_legs, ids):
        """Exactly the given routes end up selected."""
        repo = RouteRepository(db_session)
        first = await repo.add_route(
            test_race.id, await path_edges(db_session, [ids[0], ids[1], ids[2], ids[4]]), True
        )
        second = await repo.add_route(
            test_race.id, await path_edges(db_session, [ids[0], ids[2], ids[1], ids[4]]), True
        )

        assert await repo.set_selected(test_race.id, [first.id]) == [first.id]
        assert await repo.set_selected(test_race.id, [second.id]) == [second.id]
        assert await repo.set_selected(test_race.id, []) == []

    @pytest.mark.asyncio
    async def test_delete_by_race(self, db_session, test_race, test_legs, ids):
        repo = RouteRepository(db_session)
        edges = await path_edges(db_session, [ids[0], ids[1], ids[2], ids[4]])
        first = await repo.add_route(test_race.id, edges, complete=True)
        await repo.add_route(test_race.id, edges, complete=True)

        assert await repo.delete_by_race(test_race.id, [first.id]) == 1
        assert await repo.delete_by_race(test_race.id) == 1
        assert await repo.count_by_race(test_race.id, complete_only=False) == 0
