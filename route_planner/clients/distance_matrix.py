"""Distance Matrix API client."""

import httpx

from route_planner.config import get_settings
from route_planner.exceptions import DistanceLookupError


class DistanceMatrixClient:
    """
    Resolves walking distances between addresses.

    Talks to the Google Distance Matrix JSON API. One request covers one
    origin and any number of destinations.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        mode: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.api_key = api_key or settings.google_api_key
        if not self.api_key:
            raise DistanceLookupError("GOOGLE_API_KEY is not configured")
        self.base_url = base_url or settings.distance_matrix_url
        self.mode = mode or settings.distance_matrix_mode
        self.client = httpx.AsyncClient(
            timeout=settings.distance_matrix_timeout,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def fetch_distances(self, origin: str, destinations: list[str]) -> list[float]:
        """
        Fetch distances from one origin to each destination.

        Args:
            origin: Origin address or "lat,lng"
            destinations: Destination addresses or "lat,lng" strings

        Returns:
            Distances in meters, in destination order

        Raises:
            DistanceLookupError: request failed or an element has no distance
        """
        if not destinations:
            return []

        params = {
            "origins": origin,
            "destinations": "|".join(destinations),
            "mode": self.mode,
            "units": "imperial",
            "avoid": "tolls",
            "language": "en-US",
            "key": self.api_key,
        }
        try:
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise DistanceLookupError(f"Distance lookup failed: {e}") from e

        if payload.get("status", "OK") != "OK":
            detail = f"{payload.get('status')} {payload.get('error_message', '')}".strip()
            raise DistanceLookupError(f"Distance lookup failed: {detail}")

        rows = payload.get("rows") or []
        elements = rows[0].get("elements", []) if rows else []
        if len(elements) != len(destinations):
            raise DistanceLookupError(
                f"Expected {len(destinations)} distances, got {len(elements)}"
            )

        distances = []
        for destination, element in zip(destinations, elements):
            value = (element.get("distance") or {}).get("value")
            if element.get("status", "OK") != "OK" or value is None:
                raise DistanceLookupError(f"No distance from {origin} to {destination}")
            distances.append(float(value))
        return distances

    async def fetch_distance(self, origin: str, destination: str) -> float:
        """Fetch one distance in meters."""
        return (await self.fetch_distances(origin, [destination]))[0]
