"""Route planning algorithms (no database access)."""

from route_planner.planning.balance import Candidate, imbalance, select_balanced
from route_planner.planning.graph import DistanceGraph, Edge
from route_planner.planning.path_search import SearchStats, iter_paths
from route_planner.planning.rarity import (
    intermediate_sequence,
    position_frequencies,
    rarity_scores,
)
from route_planner.planning.route_rules import (
    RaceConstraints,
    RouteBuilder,
    RouteState,
    is_complete,
    validate_legs,
)

__all__ = [
    # Graph
    "DistanceGraph",
    "Edge",
    # Route rules
    "RaceConstraints",
    "RouteBuilder",
    "RouteState",
    "is_complete",
    "validate_legs",
    # Path search
    "iter_paths",
    "SearchStats",
    # Rarity
    "intermediate_sequence",
    "position_frequencies",
    "rarity_scores",
    # Balance
    "Candidate",
    "imbalance",
    "select_balanced",
]
