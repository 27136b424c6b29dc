"""Location model."""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from route_planner.database import Base
from route_planner.models.base import TimestampMixin


class Location(Base, TimestampMixin):
    """Location table model (a checkpoint candidate)."""

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    # Street address or lat/lng, at least one
    street_address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    zip: Mapped[str | None] = mapped_column(String(20), nullable=True)
    lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    lng: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Capacity (teams a checkpoint can hold)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    ideal_capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    races = relationship(
        "Race", secondary="race_locations", back_populates="locations", passive_deletes=True
    )

    @property
    def full_address(self) -> str:
        parts = [self.street_address, self.city, self.state, self.zip]
        return " ".join(str(p) for p in parts if p)

    @property
    def lat_lng(self) -> str | None:
        if self.lat is None or self.lng is None:
            return None
        return f"{self.lat},{self.lng}"

    def __repr__(self) -> str:
        return f"<Location(id={self.id}, name='{self.name}')>"
