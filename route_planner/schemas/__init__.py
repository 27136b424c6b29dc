"""Pydantic schemas."""

from route_planner.schemas.common import (
    BaseSchema,
    DistanceUnitEnum,
    JobStateEnum,
    LocationBrief,
    MessageResponse,
    TimestampSchema,
)
from route_planner.schemas.leg import LegCreate, LegListResponse, LegResponse
from route_planner.schemas.location import (
    LocationCreate,
    LocationListResponse,
    LocationResponse,
    LocationUpdate,
)
from route_planner.schemas.operations import (
    AutoSelectRequest,
    AutoSelectResponse,
    GenerateLegsRequest,
    JobAcceptedResponse,
    JobStatusResponse,
)
from route_planner.schemas.race import (
    RaceCreate,
    RaceDetailResponse,
    RaceListResponse,
    RaceResponse,
    RaceUpdate,
)
from route_planner.schemas.route import (
    BulkSelectRequest,
    BulkSelectResponse,
    CustomRouteCreate,
    LegDistance,
    RouteDetailResponse,
    RouteLegResponse,
    RouteResponse,
    RouteUpdate,
)

__all__ = [
    # Common
    "BaseSchema",
    "TimestampSchema",
    "DistanceUnitEnum",
    "JobStateEnum",
    "LocationBrief",
    "MessageResponse",
    # Location
    "LocationCreate",
    "LocationUpdate",
    "LocationResponse",
    "LocationListResponse",
    # Race
    "RaceCreate",
    "RaceUpdate",
    "RaceResponse",
    "RaceDetailResponse",
    "RaceListResponse",
    # Leg
    "LegCreate",
    "LegResponse",
    "LegListResponse",
    # Route
    "RouteResponse",
    "RouteDetailResponse",
    "RouteLegResponse",
    "LegDistance",
    "CustomRouteCreate",
    "RouteUpdate",
    "BulkSelectRequest",
    "BulkSelectResponse",
    # Operations
    "JobAcceptedResponse",
    "GenerateLegsRequest",
    "AutoSelectRequest",
    "AutoSelectResponse",
    "JobStatusResponse",
]
