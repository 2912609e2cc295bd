"""Exhaustive reference solvers for segment intersection."""

from __future__ import annotations

from segment_sweep.algs.reference.brute_force import (
    brute_force_intersections,
    brute_force_pairs,
)

brute_force = brute_force_intersections

__all__ = [
    "brute_force",
    "brute_force_intersections",
    "brute_force_pairs",
]
