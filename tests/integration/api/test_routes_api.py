"""Tests for routes API endpoints."""

import pytest

from tests.fixtures.factories import create_route_through


@pytest.fixture
async def test_routes(db_session, test_race, test_legs, test_locations):
    """Two complete routes and one partial route."""
    ids = [loc.id for loc in test_locations]
    start, a, b, c, finish = ids
    routes = [
        await create_route_through(db_session, test_race.id, [start, a, b, finish]),
        await create_route_through(db_session, test_race.id, [start, c, a, finish]),
        await create_route_through(db_session, test_race.id, [start, b], complete=False),
    ]
    await db_session.commit()
    return routes


class TestRoutesAPI:
    """Tests for /api/races/{race_id}/routes endpoints."""

    @pytest.mark.asyncio
    async def test_get_routes(self, client, test_race, test_routes):
        """GET lists only complete routes, in the race's unit."""
        response = await client.get(f"/api/races/{test_race.id}/routes")

        assert response.status_code == 200
        data = response.json()
        assert [route["id"] for route in data] == [test_routes[0].id, test_routes[1].id]
        assert data[0]["distance"] == 3.0
        assert data[0]["distance_unit"] == "km"
        assert data[0]["leg_count"] == 3
        assert [loc["name"] for loc in data[0]["location_sequence"]] == [
            "Start Plaza",
            "Art Museum",
            "Bakery",
            "Finish Park",
        ]

    @pytest.mark.asyncio
    async def test_get_routes_unknown_race(self, client, db_session):
        response = await client.get("/api/races/99999/routes")

        assert response.status_code == 404
        assert response.json()["detail"] == "Race not found"

    @pytest.mark.asyncio
    async def test_get_route(self, client, test_race, test_routes):
        response = await client.get(f"/api/races/{test_race.id}/routes/{test_routes[1].id}")

        assert response.status_code == 200
        data = response.json()
        assert len(data["legs"]) == 3
        assert data["legs"][0]["start"]["name"] == "Start Plaza"
        assert data["legs"][0]["finish"]["name"] == "City Hall"

    @pytest.mark.asyncio
    async def test_get_route_not_found(self, client, test_race):
        response = await client.get(f"/api/races/{test_race.id}/routes/99999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Route not found"

    @pytest.mark.asyncio
    async def test_create_custom_route(self, client, test_race, test_legs, test_locations):
        """POST builds a custom route between the race start and finish."""
        response = await client.post(
            f"/api/races/{test_race.id}/routes",
            json={"location_ids": [test_locations[2].id], "name": "Short cut"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["custom"] is True
        assert data["complete"] is True
        assert data["name"] == "Short cut"
        assert data["leg_count"] == 2
        assert data["distance"] == 2.0

    @pytest.mark.asyncio
    async def test_create_custom_route_missing_leg(self, client, test_race, test_legs):
        response = await client.post(
            f"/api/races/{test_race.id}/routes", json={"location_ids": [99999]}
        )

        assert response.status_code == 422
        assert response.json()["detail"] == [
            f"No leg from location {test_race.start_id} to location 99999"
        ]

    @pytest.mark.asyncio
    async def test_update_route(self, client, test_race, test_routes):
        response = await client.patch(
            f"/api/races/{test_race.id}/routes/{test_routes[0].id}",
            json={"selected": True, "notes": "Hilly"},
        )

        assert response.status_code == 200
        assert response.json()["selected"] is True
        assert response.json()["notes"] == "Hilly"

    @pytest.mark.asyncio
    async def test_bulk_select(self, client, test_race, test_routes):
        """POST /select makes exactly the given routes selected."""
        url = f"/api/races/{test_race.id}/routes"

        response = await client.post(f"{url}/select", json={"ids": [test_routes[1].id]})

        assert response.status_code == 200
        assert response.json()["selected_ids"] == [test_routes[1].id]
        selected = (await client.get(url, params={"selected": True})).json()
        assert [route["id"] for route in selected] == [test_routes[1].id]

    @pytest.mark.asyncio
    async def test_delete_route(self, client, test_race, test_routes):
        url = f"/api/races/{test_race.id}/routes/{test_routes[0].id}"

        response = await client.delete(url)

        assert response.status_code == 204
        assert (await client.get(url)).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_routes(self, client, test_race, test_routes):
        response = await client.delete(f"/api/races/{test_race.id}/routes")

        assert response.status_code == 200
        assert response.json()["count"] == 3
        assert (await client.get(f"/api/races/{test_race.id}/routes")).json() == []
