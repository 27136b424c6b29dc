"""API routers."""

from route_planner.api.job_statuses import router as job_statuses_router
from route_planner.api.legs import router as legs_router
from route_planner.api.locations import router as locations_router
from route_planner.api.operations import router as operations_router
from route_planner.api.races import router as races_router
from route_planner.api.routes import router as routes_router

__all__ = [
    "locations_router",
    "races_router",
    "legs_router",
    "routes_router",
    "operations_router",
    "job_statuses_router",
]
