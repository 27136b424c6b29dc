"""Common schema types."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class DistanceUnitEnum(str, Enum):
    """Race display unit."""

    MILES = "mi"
    KILOMETERS = "km"


class JobStateEnum(str, Enum):
    """Background job state."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class TimestampSchema(BaseSchema):
    """Schema with timestamp fields."""

    created_at: datetime
    updated_at: datetime


class LocationBrief(BaseSchema):
    """Location reference embedded in other responses."""

    id: int
    name: str
    lat: float | None = None
    lng: float | None = None


class MessageResponse(BaseSchema):
    """Plain acknowledgement."""

    message: str
    count: int | None = None
