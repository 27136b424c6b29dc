"""Race schemas."""

from pydantic import Field, model_validator

from route_planner.schemas.common import (
    BaseSchema,
    DistanceUnitEnum,
    LocationBrief,
    TimestampSchema,
)


class RaceBase(BaseSchema):
    """Base race schema. Distances are in ``distance_unit``."""

    name: str = Field(..., min_length=1, max_length=100)
    num_stops: int = Field(..., ge=0, description="Checkpoints per route")
    max_teams: int = Field(0, ge=0)
    people_per_team: int = Field(0, ge=0)
    min_total_distance: float = Field(..., ge=0)
    max_total_distance: float = Field(..., ge=0)
    min_leg_distance: float = Field(..., ge=0)
    max_leg_distance: float = Field(..., ge=0)
    distance_unit: DistanceUnitEnum = DistanceUnitEnum.MILES
    start_id: int | None = None
    finish_id: int | None = None


class RaceCreate(RaceBase):
    """Schema for creating a race."""

    location_ids: list[int] = Field(default_factory=list, description="Location pool")

    @model_validator(mode="after")
    def check_bounds(self):
        if self.min_total_distance > self.max_total_distance:
            raise ValueError("min_total_distance must not exceed max_total_distance")
        if self.min_leg_distance > self.max_leg_distance:
            raise ValueError("min_leg_distance must not exceed max_leg_distance")
        return self


class RaceUpdate(BaseSchema):
    """Schema for updating a race."""

    name: str | None = Field(None, min_length=1, max_length=100)
    num_stops: int | None = Field(None, ge=0)
    max_teams: int | None = Field(None, ge=0)
    people_per_team: int | None = Field(None, ge=0)
    min_total_distance: float | None = Field(None, ge=0)
    max_total_distance: float | None = Field(None, ge=0)
    min_leg_distance: float | None = Field(None, ge=0)
    max_leg_distance: float | None = Field(None, ge=0)
    distance_unit: DistanceUnitEnum | None = None
    start_id: int | None = None
    finish_id: int | None = None
    location_ids: list[int] | None = None


class RaceResponse(RaceBase, TimestampSchema):
    """Race response schema."""

    id: int
    location_ids: list[int] = Field(default_factory=list)
    route_count: int = Field(0, description="Complete routes")


class RaceDetailResponse(RaceResponse):
    """Race response with pool details."""

    start: LocationBrief | None = None
    finish: LocationBrief | None = None
    locations: list[LocationBrief] = Field(default_factory=list)
    leg_count: int = 0


class RaceListResponse(BaseSchema):
    """Race list response schema."""

    items: list[RaceResponse]
    total: int
