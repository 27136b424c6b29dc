"""Route invariants and the incremental route builder."""

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from route_planner.exceptions import RaceConfigurationError, RouteValidationError
from route_planner.planning.graph import Edge

if TYPE_CHECKING:
    from route_planner.models import Race


class RouteState(str, enum.Enum):
    """Lifecycle of a route while legs are appended."""

    BUILDING = "BUILDING"
    COMPLETE = "COMPLETE"


@dataclass(frozen=True)
class RaceConstraints:
    """Everything route validation needs from a race, in meters."""

    start_id: int
    finish_id: int
    num_stops: int
    pool_ids: frozenset[int]
    min_leg: float
    max_leg: float
    min_total: float
    max_total: float

    @property
    def target_leg_count(self) -> int:
        return self.num_stops + 1

    @property
    def intermediate_ids(self) -> frozenset[int]:
        """Pool locations that may be used as checkpoints."""
        return self.pool_ids - {self.start_id, self.finish_id}

    @classmethod
    def from_race(cls, race: "Race") -> "RaceConstraints":
        """Snapshot a race. ``race.locations`` must be loaded.

        The start and finish always count as part of the pool.

        Raises:
            RaceConfigurationError: missing start/finish, negative stop count,
                or inverted distance bounds.
        """
        if race.start_id is None or race.finish_id is None:
            raise RaceConfigurationError(f"Race {race.id} needs both a start and a finish")
        if race.num_stops is None or race.num_stops < 0:
            raise RaceConfigurationError(
                f"Race {race.id} has an invalid number of stops: {race.num_stops}"
            )

        constraints = cls(
            start_id=race.start_id,
            finish_id=race.finish_id,
            num_stops=race.num_stops,
            pool_ids=frozenset(
                [loc.id for loc in race.locations] + [race.start_id, race.finish_id]
            ),
            min_leg=race.min_leg_distance_m,
            max_leg=race.max_leg_distance_m,
            min_total=race.min_total_distance_m,
            max_total=race.max_total_distance_m,
        )
        if constraints.min_leg > constraints.max_leg:
            raise RaceConfigurationError(
                f"Race {race.id} minimum leg distance exceeds the maximum"
            )
        if constraints.min_total > constraints.max_total:
            raise RaceConfigurationError(
                f"Race {race.id} minimum total distance exceeds the maximum"
            )
        return constraints

    def leg_in_bounds(self, distance: float) -> bool:
        return self.min_leg <= distance <= self.max_leg

    def total_in_bounds(self, distance: float) -> bool:
        return self.min_total <= distance <= self.max_total


def validate_legs(
    constraints: RaceConstraints,
    legs: list[Edge],
    custom: bool = False,
) -> list[str]:
    """Check a leg sequence against the route invariants.

    Custom routes skip both distance bounds and may finish with fewer than
    ``num_stops + 1`` legs.

    Returns:
        List of error messages; empty when the sequence is valid.
    """
    errors: list[str] = []
    target = constraints.target_leg_count

    if len(legs) > target:
        errors.append(f"Route has {len(legs)} legs but the race allows at most {target}")

    for i, leg in enumerate(legs):
        for location_id in (leg.start_id, leg.finish_id):
            if location_id not in constraints.pool_ids:
                errors.append(f"Location {location_id} is not allowed in this race")
        if not custom and not constraints.leg_in_bounds(leg.distance):
            errors.append(
                f"Leg {i + 1} distance {leg.distance:.1f} m is outside "
                f"[{constraints.min_leg:.1f}, {constraints.max_leg:.1f}]"
            )
        if i > 0 and legs[i - 1].finish_id != leg.start_id:
            errors.append(f"Leg {i + 1} does not start where leg {i} finished")

    if legs and legs[0].start_id != constraints.start_id:
        errors.append(f"The first leg needs to start at location {constraints.start_id}")

    complete = bool(legs) and is_complete(constraints, legs, custom)

    # Finish may only close a complete route
    for i, leg in enumerate(legs):
        closing = complete and i == len(legs) - 1
        if leg.finish_id == constraints.finish_id and not closing:
            errors.append(
                f"Finish location {constraints.finish_id} cannot be used "
                f"until the end (leg {i + 1})"
            )

    if complete:
        if legs[-1].finish_id != constraints.finish_id:
            errors.append(f"The last leg needs to finish at location {constraints.finish_id}")
        total = sum(leg.distance for leg in legs)
        if not custom and not constraints.total_in_bounds(total):
            errors.append(
                f"Route distance {total:.1f} m is outside "
                f"[{constraints.min_total:.1f}, {constraints.max_total:.1f}]"
            )

    return errors


def is_complete(constraints: RaceConstraints, legs: list[Edge], custom: bool = False) -> bool:
    """Generated routes are complete at ``num_stops + 1`` legs; custom ones at the finish."""
    if custom:
        return bool(legs) and legs[-1].finish_id == constraints.finish_id
    return len(legs) == constraints.target_leg_count


@dataclass
class RouteBuilder:
    """A route growing one leg at a time.

    Each append is validated against the race; a rejected leg leaves the
    builder unchanged. Once complete the builder takes no more legs.
    """

    constraints: RaceConstraints
    custom: bool = False
    legs: list[Edge] = field(default_factory=list)

    @property
    def state(self) -> RouteState:
        if is_complete(self.constraints, self.legs, self.custom):
            return RouteState.COMPLETE
        return RouteState.BUILDING

    @property
    def distance(self) -> float:
        return sum(leg.distance for leg in self.legs)

    @property
    def legs_needed(self) -> int:
        return self.constraints.target_leg_count - len(self.legs)

    def append(self, leg: Edge) -> RouteState:
        """Append a leg, returning the new state.

        Raises:
            RouteValidationError: the leg would break an invariant.
        """
        if self.state is RouteState.COMPLETE:
            raise RouteValidationError(["Route is already complete"])

        errors = validate_legs(self.constraints, [*self.legs, leg], self.custom)
        if errors:
            raise RouteValidationError(errors)

        self.legs.append(leg)
        return self.state

    def extend(self, legs: list[Edge]) -> RouteState:
        for leg in legs:
            self.append(leg)
        return self.state
