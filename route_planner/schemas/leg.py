"""Leg schemas."""

from datetime import datetime

from pydantic import Field

from route_planner.schemas.common import BaseSchema, LocationBrief


class LegCreate(BaseSchema):
    """Schema for creating a leg (and its mirror)."""

    start_id: int
    finish_id: int
    distance: float | None = Field(None, ge=0, description="Meters; looked up when omitted")


class LegResponse(BaseSchema):
    """Leg response schema."""

    id: int
    start: LocationBrief
    finish: LocationBrief
    distance: float
    created_at: datetime


class LegListResponse(BaseSchema):
    """Leg list response schema."""

    count: int
    legs: list[LegResponse]
