"""Checkpoint rarity scoring."""

from collections import Counter
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal


def intermediate_sequence(location_ids: Sequence[int], num_stops: int) -> list[int]:
    """Checkpoints of a route: positions 1..num_stops, endpoints excluded."""
    return list(location_ids[1 : num_stops + 1])


def position_frequencies(
    sequences: Sequence[Sequence[int]],
    num_stops: int,
) -> list[Counter[int]]:
    """Count how many sequences place each location at each position."""
    freq: list[Counter[int]] = [Counter() for _ in range(num_stops)]
    for sequence in sequences:
        for position, location_id in enumerate(sequence[:num_stops]):
            freq[position][location_id] += 1
    return freq


def round_score(value: float, places: int = 1) -> float:
    """Round half away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def rarity_scores(sequences: Sequence[Sequence[int]], num_stops: int) -> list[float]:
    """
    Score each sequence by how uncommon its checkpoint placements are.

    For ``n`` sequences, a sequence scores
    ``sum(1 - freq[p][loc_p] / n) / num_stops * 100`` rounded to one place.

    Args:
        sequences: Intermediate location ids per route
        num_stops: Checkpoints per route

    Returns:
        Scores in input order. Routes without checkpoints score 0.0.
    """
    n = len(sequences)
    if n == 0:
        return []
    if num_stops == 0:
        return [0.0] * n

    freq = position_frequencies(sequences, num_stops)
    scores = []
    for sequence in sequences:
        raw = sum(
            1.0 - freq[position][location_id] / n
            for position, location_id in enumerate(sequence[:num_stops])
        )
        scores.append(round_score(raw / num_stops * 100))
    return scores
