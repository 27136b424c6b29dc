"""Route schemas."""

from datetime import datetime

from pydantic import Field

from route_planner.schemas.common import BaseSchema, DistanceUnitEnum, LocationBrief


class LegDistance(BaseSchema):
    """Leg distance in meters and as display text."""

    distance: float
    distance_display: str


class RouteLegResponse(LegDistance):
    """Leg of a route."""

    id: int
    start: LocationBrief
    finish: LocationBrief


class RouteResponse(BaseSchema):
    """Route summary. ``distance`` is in the race's unit."""

    id: int
    name: str | None = None
    race_id: int
    complete: bool
    custom: bool
    distance: float
    distance_unit: DistanceUnitEnum
    leg_count: int
    target_leg_count: int
    rarity_score: float | None = None
    selected: bool
    notes: str | None = None
    created_at: datetime
    location_sequence: list[LocationBrief] = Field(default_factory=list)
    leg_distances: list[LegDistance] = Field(default_factory=list)


class RouteDetailResponse(RouteResponse):
    """Route with full leg detail."""

    legs: list[RouteLegResponse] = Field(default_factory=list)


class CustomRouteCreate(BaseSchema):
    """Hand-built route through the given checkpoints."""

    location_ids: list[int] = Field(default_factory=list, description="Checkpoints, in order")
    name: str | None = Field(None, max_length=100)


class RouteUpdate(BaseSchema):
    """Schema for updating a route."""

    name: str | None = Field(None, max_length=100)
    selected: bool | None = None
    notes: str | None = None


class BulkSelectRequest(BaseSchema):
    """Route IDs that should end up selected."""

    ids: list[int] = Field(default_factory=list)


class BulkSelectResponse(BaseSchema):
    """Route IDs now selected."""

    selected_ids: list[int]
