"""Data access repositories."""

from route_planner.repositories.base import BaseRepository
from route_planner.repositories.job_status_repository import JobStatusRepository
from route_planner.repositories.leg_repository import LegRepository
from route_planner.repositories.location_repository import LocationRepository
from route_planner.repositories.race_repository import RaceRepository
from route_planner.repositories.route_repository import RouteRepository

__all__ = [
    "BaseRepository",
    "LocationRepository",
    "LegRepository",
    "RaceRepository",
    "RouteRepository",
    "JobStatusRepository",
]
