"""Bounded depth-first enumeration of race paths."""

from collections.abc import Iterator
from dataclasses import dataclass

from route_planner.planning.graph import DistanceGraph, Edge
from route_planner.planning.route_rules import RaceConstraints


@dataclass(frozen=True)
class SearchFrame:
    """One partial path on the search stack."""

    location_id: int
    edges: tuple[Edge, ...]
    visited: frozenset[int]
    distance: float

    @property
    def stops_placed(self) -> int:
        return len(self.edges)


@dataclass
class SearchStats:
    """Counters for one enumeration run."""

    expanded: int = 0
    pruned: int = 0
    emitted: int = 0


def iter_paths(
    graph: DistanceGraph,
    constraints: RaceConstraints,
    stats: SearchStats | None = None,
) -> Iterator[tuple[Edge, ...]]:
    """
    Yield every valid path for a race, one edge tuple per path.

    A path runs start -> ``num_stops`` distinct intermediates -> finish. Every
    edge is within the leg bounds and the path total within the total bounds.
    Paths come out in depth-first order with neighbours visited by ascending
    location id, so the sequence is stable for an unchanged graph.

    Args:
        graph: Distance graph holding the race's legs
        constraints: Race snapshot in meters
        stats: Optional counters updated while searching

    Returns:
        Iterator of edge tuples
    """
    stats = stats if stats is not None else SearchStats()
    intermediates = constraints.intermediate_ids
    if constraints.num_stops > len(intermediates):
        return

    stack = [
        SearchFrame(
            location_id=constraints.start_id,
            edges=(),
            visited=frozenset([constraints.start_id]),
            distance=0.0,
        )
    ]

    while stack:
        frame = stack.pop()
        stats.expanded += 1
        remaining = constraints.num_stops - frame.stops_placed

        if remaining == 0:
            closing = graph.edge(frame.location_id, constraints.finish_id)
            if closing is None or not constraints.leg_in_bounds(closing.distance):
                continue
            # Finish may repeat a visited node only on loop races
            if (
                constraints.finish_id in frame.visited
                and constraints.finish_id != constraints.start_id
            ):
                continue
            total = frame.distance + closing.distance
            if not constraints.total_in_bounds(total):
                continue
            stats.emitted += 1
            yield (*frame.edges, closing)
            continue

        children = []
        for edge in graph.neighbors(frame.location_id, intermediates - frame.visited):
            if not constraints.leg_in_bounds(edge.distance):
                continue
            distance = frame.distance + edge.distance
            # ``remaining`` legs are left after this one, each at least min_leg
            if distance + remaining * constraints.min_leg > constraints.max_total:
                stats.pruned += 1
                continue
            children.append(
                SearchFrame(
                    location_id=edge.finish_id,
                    edges=(*frame.edges, edge),
                    visited=frame.visited | {edge.finish_id},
                    distance=distance,
                )
            )

        if not children:
            stats.pruned += 1
            continue

        # Reversed so the lowest location id is expanded first
        stack.extend(reversed(children))
