"""Race model."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from route_planner.database import Base
from route_planner.distances import UNIT_MILES, to_meters
from route_planner.models.base import TimestampMixin

race_locations = Table(
    "race_locations",
    Base.metadata,
    Column("race_id", Integer, ForeignKey("races.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "location_id",
        Integer,
        ForeignKey("locations.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Race(Base, TimestampMixin):
    """Race table model: the constraint envelope for route generation."""

    __tablename__ = "races"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    num_stops: Mapped[int] = mapped_column(Integer, nullable=False)
    max_teams: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    people_per_team: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Bounds in distance_unit
    min_total_distance: Mapped[float] = mapped_column(Float, nullable=False)
    max_total_distance: Mapped[float] = mapped_column(Float, nullable=False)
    min_leg_distance: Mapped[float] = mapped_column(Float, nullable=False)
    max_leg_distance: Mapped[float] = mapped_column(Float, nullable=False)
    distance_unit: Mapped[str] = mapped_column(String(2), nullable=False, default=UNIT_MILES)

    start_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("locations.id", ondelete="SET NULL"), nullable=True
    )
    finish_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("locations.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    start = relationship("Location", foreign_keys=[start_id])
    finish = relationship("Location", foreign_keys=[finish_id])
    locations = relationship(
        "Location", secondary=race_locations, back_populates="races", passive_deletes=True
    )
    routes = relationship(
        "Route", back_populates="race", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def min_total_distance_m(self) -> float:
        return to_meters(self.min_total_distance, self.distance_unit)

    @property
    def max_total_distance_m(self) -> float:
        return to_meters(self.max_total_distance, self.distance_unit)

    @property
    def min_leg_distance_m(self) -> float:
        return to_meters(self.min_leg_distance, self.distance_unit)

    @property
    def max_leg_distance_m(self) -> float:
        return to_meters(self.max_leg_distance, self.distance_unit)

    @property
    def target_leg_count(self) -> int:
        return self.num_stops + 1

    def __repr__(self) -> str:
        return f"<Race(id={self.id}, name='{self.name}', num_stops={self.num_stops})>"
