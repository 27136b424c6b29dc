"""Distance graph over race locations."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from route_planner.exceptions import LegError


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge (distance in meters)."""

    start_id: int
    finish_id: int
    distance: float
    leg_id: int | None = None


class LegLike(Protocol):
    id: int
    start_id: int
    finish_id: int
    distance: float


class DistanceGraph:
    """Adjacency map keyed by location id.

    Every edge is stored as a mirrored pair of directed edges so the graph
    behaves as undirected. Adding a pair that already exists is a no-op.
    """

    def __init__(self) -> None:
        self._adjacency: dict[int, dict[int, Edge]] = {}

    @classmethod
    def from_legs(cls, legs: Iterable[LegLike]) -> "DistanceGraph":
        """Build a graph from persisted legs, keeping their ids.

        Legs are already stored in mirrored pairs, so each one is added as a
        single directed edge.
        """
        graph = cls()
        for leg in legs:
            graph._add_directed(
                Edge(
                    start_id=leg.start_id,
                    finish_id=leg.finish_id,
                    distance=float(leg.distance),
                    leg_id=leg.id,
                )
            )
        return graph

    def add_edge(self, start_id: int, finish_id: int, distance: float) -> Edge:
        """Add an edge and its mirror. Returns the start -> finish edge."""
        if start_id == finish_id:
            raise LegError(f"Cannot connect location {start_id} to itself")
        if distance < 0:
            raise LegError(f"Leg distance must not be negative: {distance}")

        existing = self.edge(start_id, finish_id)
        if existing is None:
            existing = self._add_directed(Edge(start_id, finish_id, float(distance)))
        if self.edge(finish_id, start_id) is None:
            self._add_directed(Edge(finish_id, start_id, existing.distance))
        return existing

    def _add_directed(self, edge: Edge) -> Edge:
        if edge.start_id == edge.finish_id:
            raise LegError(f"Cannot connect location {edge.start_id} to itself")
        return self._adjacency.setdefault(edge.start_id, {}).setdefault(edge.finish_id, edge)

    def edge(self, start_id: int, finish_id: int) -> Edge | None:
        return self._adjacency.get(start_id, {}).get(finish_id)

    def neighbors(
        self,
        location_id: int,
        candidates: Iterable[int] | None = None,
    ) -> list[Edge]:
        """Outgoing edges from ``location_id``, ordered by finish id.

        Args:
            location_id: Location to expand.
            candidates: When given, only edges finishing in this set are returned.

        Returns:
            List of edges
        """
        outgoing = self._adjacency.get(location_id, {})
        if candidates is None:
            finish_ids = outgoing.keys()
        else:
            allowed = candidates if isinstance(candidates, (set, frozenset)) else set(candidates)
            finish_ids = (fid for fid in outgoing if fid in allowed)
        return [outgoing[fid] for fid in sorted(finish_ids)]

    @property
    def node_ids(self) -> set[int]:
        nodes = set(self._adjacency)
        for outgoing in self._adjacency.values():
            nodes.update(outgoing)
        return nodes

    def __len__(self) -> int:
        """Number of directed edges."""
        return sum(len(outgoing) for outgoing in self._adjacency.values())

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.edge(*pair) is not None
