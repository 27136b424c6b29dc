"""Job status API routes."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.database import get_db
from route_planner.repositories import JobStatusRepository
from route_planner.schemas import JobStatusResponse

router = APIRouter(prefix="/job_statuses", tags=["job_statuses"])


@router.get("/{job_status_id}", response_model=JobStatusResponse)
async def get_job_status(
    job_status_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get the progress of a background job."""
    job = await JobStatusRepository(db).get_fresh(job_status_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job status not found")
    return JobStatusResponse.model_validate(job)
