"""Route model."""

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from route_planner.database import Base
from route_planner.models.base import TimestampMixin


class Route(Base, TimestampMixin):
    """Route table model: one candidate path for a race."""

    __tablename__ = "routes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    race_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("races.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    distance: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)  # meters
    complete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    custom: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    selected: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    rarity_score: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Relationships
    race = relationship("Race", back_populates="routes")
    route_legs = relationship(
        "RouteLeg",
        back_populates="route",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="RouteLeg.order",
    )

    @property
    def legs(self) -> list:
        """Legs in path order."""
        return [rl.leg for rl in self.route_legs]

    @property
    def location_ids(self) -> list[int]:
        """Visited location ids, start through finish."""
        legs = self.legs
        if not legs:
            return []
        return [leg.start_id for leg in legs] + [legs[-1].finish_id]

    def __repr__(self) -> str:
        return f"<Route(id={self.id}, race_id={self.race_id}, complete={self.complete})>"


class RouteLeg(Base):
    """Ordered membership of a leg in a route (order starts at 1)."""

    __tablename__ = "route_legs"
    __table_args__ = (UniqueConstraint("route_id", "order", name="uq_route_legs_order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    route_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("routes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    leg_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("legs.id", ondelete="CASCADE"), nullable=False
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    route = relationship("Route", back_populates="route_legs")
    leg = relationship("Leg")

    def __repr__(self) -> str:
        return f"<RouteLeg(route_id={self.route_id}, leg_id={self.leg_id}, order={self.order})>"
