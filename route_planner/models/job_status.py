"""Job status model."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.dialects.sqlite import JSON
from sqlalchemy.orm import Mapped, mapped_column

from route_planner.database import Base
from route_planner.models.base import TimestampMixin

JOB_STATUSES = ("pending", "running", "completed", "failed")


class JobStatus(Base, TimestampMixin):
    """Progress record for a background operation."""

    __tablename__ = "job_statuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    job_type: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    # "metadata" is reserved on declarative classes
    job_metadata: Mapped[dict] = mapped_column("metadata", JSON, nullable=False, default=dict)

    @property
    def percent_complete(self) -> float:
        if not self.total:
            return 0
        return round(self.progress / self.total * 100, 1)

    def __repr__(self) -> str:
        return f"<JobStatus(id={self.id}, job_type='{self.job_type}', status='{self.status}')>"
