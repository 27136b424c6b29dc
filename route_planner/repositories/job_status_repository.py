"""Job status repository."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from route_planner.models import JobStatus
from route_planner.repositories.base import BaseRepository


class JobStatusRepository(BaseRepository[JobStatus]):
    """Repository for JobStatus model."""

    def __init__(self, session: AsyncSession):
        super().__init__(JobStatus, session)

    async def start(
        self,
        job_type: str,
        metadata: dict[str, Any] | None = None,
        total: int = 0,
    ) -> JobStatus:
        """Create a running job record."""
        return await self.create({
            "job_type": job_type,
            "status": "running",
            "total": total,
            "job_metadata": metadata or {},
        })

    async def queue(self, job_type: str, metadata: dict[str, Any] | None = None) -> JobStatus:
        """Create a pending job record."""
        return await self.create({"job_type": job_type, "job_metadata": metadata or {}})

    async def mark_running(self, job: JobStatus, total: int = 0) -> JobStatus:
        job.status = "running"
        job.total = total
        await self.session.flush()
        return job

    async def tick(self, job: JobStatus, message: str | None = None, step: int = 1) -> JobStatus:
        """Advance progress by ``step``."""
        job.progress += step
        if message is not None:
            job.message = message
        await self.session.flush()
        return job

    async def complete(self, job: JobStatus, message: str | None = None) -> JobStatus:
        """Mark the job completed with progress at total."""
        job.status = "completed"
        job.progress = job.total
        job.message = message
        await self.session.flush()
        return job

    async def fail(self, job: JobStatus, message: str) -> JobStatus:
        """Mark the job failed."""
        job.status = "failed"
        job.message = message
        await self.session.flush()
        return job

    async def get_fresh(self, job_id: int) -> JobStatus | None:
        """Get a job, re-reading it even if this session holds a copy."""
        result = await self.session.execute(
            select(JobStatus)
            .where(JobStatus.id == job_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
