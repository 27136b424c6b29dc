"""Operation and job schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field

from route_planner.schemas.common import BaseSchema, JobStateEnum


class JobAcceptedResponse(BaseSchema):
    """Background job handle."""

    job_status_id: int


class GenerateLegsRequest(BaseSchema):
    """Leg generation options."""

    mock: bool = Field(False, description="Random distances within the race's leg bounds")


class AutoSelectRequest(BaseSchema):
    """Balanced selection request."""

    count: int


class AutoSelectResponse(BaseSchema):
    """Balanced selection, in selection order."""

    route_ids: list[int]


class JobStatusResponse(BaseSchema):
    """Job status response schema."""

    id: int
    job_type: str
    status: JobStateEnum
    progress: int
    total: int
    percent_complete: float
    message: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict, validation_alias="job_metadata")
    created_at: datetime
    updated_at: datetime
