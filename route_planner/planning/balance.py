"""Greedy balanced route selection."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """A route offered to the selector."""

    route_id: int
    sequence: tuple[int, ...]


def imbalance(freq: list[dict[int, int]]) -> int:
    """Sum over positions of (most used - least used) location count."""
    return sum(max(counts.values()) - min(counts.values()) for counts in freq if counts)


def _score_addition(freq: list[dict[int, int]], sequence: tuple[int, ...]) -> int:
    """Imbalance after adding ``sequence``."""
    simulated = [dict(counts) for counts in freq]
    for position, location_id in enumerate(sequence):
        simulated[position][location_id] = simulated[position].get(location_id, 0) + 1
    return imbalance(simulated)


def select_balanced(
    candidates: Sequence[Candidate],
    count: int,
    num_stops: int,
) -> list[int]:
    """
    Greedily pick ``count`` routes that keep checkpoint usage even.

    The frequency table starts empty and only counts locations already
    placed, so the first pick is always the first candidate. Each round takes
    the candidate with the lowest simulated imbalance; ties go to the earliest
    in input order.

    Args:
        candidates: Routes with their checkpoint sequences
        count: Number of routes wanted
        num_stops: Checkpoints per route

    Returns:
        Selected route ids in selection order (fewer than ``count`` when the
        candidates run out)
    """
    if count <= 0 or not candidates:
        return []

    freq: list[dict[int, int]] = [{} for _ in range(num_stops)]

    selected: list[int] = []
    remaining = [
        Candidate(c.route_id, tuple(c.sequence[:num_stops])) for c in candidates
    ]

    while len(selected) < count and remaining:
        best_index = 0
        best_score: int | None = None
        for index, candidate in enumerate(remaining):
            score = _score_addition(freq, candidate.sequence)
            if best_score is None or score < best_score:
                best_score = score
                best_index = index

        chosen = remaining.pop(best_index)
        for position, location_id in enumerate(chosen.sequence):
            freq[position][location_id] = freq[position].get(location_id, 0) + 1
        selected.append(chosen.route_id)

    return selected
