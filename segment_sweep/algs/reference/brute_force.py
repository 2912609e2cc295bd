"""Reference all-pairs solver used as an oracle for the sweep."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, List, Tuple

from segment_sweep.algs.geometry import Point, Segment, intersect

__all__ = ["brute_force_intersections", "brute_force_pairs"]


def brute_force_pairs(segments: Iterable[Segment]) -> List[Tuple[Segment, Segment, Point]]:
    """Return ``(a, b, point)`` for every intersecting pair, in input order."""
    hits: List[Tuple[Segment, Segment, Point]] = []
    for a, b in combinations(list(segments), 2):
        point = intersect(a, b)
        if point is not None:
            hits.append((a, b, point))
    return hits


def brute_force_intersections(segments: Iterable[Segment]) -> List[Point]:
    """O(n^2) counterpart of the sweep: one point per intersecting pair."""
    return [point for _, _, point in brute_force_pairs(segments)]
