"""SQLAlchemy models."""

from route_planner.models.job_status import JOB_STATUSES, JobStatus
from route_planner.models.leg import Leg
from route_planner.models.location import Location
from route_planner.models.race import Race, race_locations
from route_planner.models.route import Route, RouteLeg

__all__ = [
    "Location",
    "Leg",
    "Race",
    "Route",
    "RouteLeg",
    "JobStatus",
    "JOB_STATUSES",
    "race_locations",
]
