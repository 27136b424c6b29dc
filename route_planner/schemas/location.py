"""Location schemas."""

from pydantic import Field, model_validator

from route_planner.schemas.common import BaseSchema, TimestampSchema


class LocationBase(BaseSchema):
    """Base location schema."""

    name: str = Field(..., min_length=1, max_length=100)
    street_address: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=50)
    zip: str | None = Field(None, max_length=20)
    lat: float | None = Field(None, ge=-90, le=90)
    lng: float | None = Field(None, ge=-180, le=180)
    max_capacity: int = Field(0, ge=0)
    ideal_capacity: int = Field(0, ge=0)


class LocationCreate(LocationBase):
    """Schema for creating a location."""

    @model_validator(mode="after")
    def require_address_or_coordinates(self):
        if not self.street_address and (self.lat is None or self.lng is None):
            raise ValueError("A street address or both lat and lng are required")
        return self


class LocationUpdate(BaseSchema):
    """Schema for updating a location."""

    name: str | None = Field(None, min_length=1, max_length=100)
    street_address: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=50)
    zip: str | None = Field(None, max_length=20)
    lat: float | None = Field(None, ge=-90, le=90)
    lng: float | None = Field(None, ge=-180, le=180)
    max_capacity: int | None = Field(None, ge=0)
    ideal_capacity: int | None = Field(None, ge=0)


class LocationResponse(LocationBase, TimestampSchema):
    """Location response schema."""

    id: int
    full_address: str


class LocationListResponse(BaseSchema):
    """Location list response schema."""

    items: list[LocationResponse]
    total: int
