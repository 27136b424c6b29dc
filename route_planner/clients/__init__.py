"""External service clients."""

from route_planner.clients.distance_matrix import DistanceMatrixClient

__all__ = [
    "DistanceMatrixClient",
]
