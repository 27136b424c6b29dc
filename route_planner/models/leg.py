"""Leg model."""

from sqlalchemy import CheckConstraint, Float, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from route_planner.database import Base
from route_planner.models.base import TimestampMixin


class Leg(Base, TimestampMixin):
    """Directed leg between two locations; always stored with its mirror."""

    __tablename__ = "legs"
    __table_args__ = (
        UniqueConstraint("start_id", "finish_id", name="uq_legs_start_finish"),
        CheckConstraint("start_id <> finish_id", name="ck_legs_not_self"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    start_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    finish_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    distance: Mapped[float] = mapped_column(Float, nullable=False)  # meters

    # Relationships
    start = relationship("Location", foreign_keys=[start_id])
    finish = relationship("Location", foreign_keys=[finish_id])

    def __repr__(self) -> str:
        return (
            f"<Leg(id={self.id}, start_id={self.start_id}, "
            f"finish_id={self.finish_id}, distance={self.distance})>"
        )
