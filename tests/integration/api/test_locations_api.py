"""Tests for locations API endpoints."""

import pytest


class TestLocationsAPI:
    """Tests for /api/locations endpoints."""

    @pytest.mark.asyncio
    async def test_create_location(self, client):
        """POST /api/locations creates a location."""
        response = await client.post(
            "/api/locations",
            json={"name": "Coit Tower", "street_address": "1 Telegraph Hill Blvd", "city": "SF"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Coit Tower"
        assert data["full_address"] == "1 Telegraph Hill Blvd SF"

    @pytest.mark.asyncio
    async def test_create_requires_address_or_coordinates(self, client):
        """POST /api/locations rejects a location without address or lat/lng."""
        response = await client.post("/api/locations", json={"name": "Nowhere", "lat": 37.7})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_duplicate_name(self, client, test_locations):
        response = await client.post(
            "/api/locations", json={"name": "Bakery", "street_address": "9 Side St"}
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_get_locations(self, client, test_locations):
        """GET /api/locations lists locations by name."""
        response = await client.get("/api/locations")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        assert [item["name"] for item in data["items"]] == sorted(
            loc.name for loc in test_locations
        )

    @pytest.mark.asyncio
    async def test_get_location_not_found(self, client, db_session):
        response = await client.get("/api/locations/99999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Location not found"

    @pytest.mark.asyncio
    async def test_update_location(self, client, test_locations):
        response = await client.patch(
            f"/api/locations/{test_locations[1].id}", json={"max_capacity": 6}
        )

        assert response.status_code == 200
        assert response.json()["max_capacity"] == 6

    @pytest.mark.asyncio
    async def test_delete_location(self, client, test_locations):
        location_id = test_locations[1].id

        response = await client.delete(f"/api/locations/{location_id}")

        assert response.status_code == 204
        assert (await client.get(f"/api/locations/{location_id}")).status_code == 404
