"""Algorithm package: geometry, the sweep's data structures and the engine."""

from __future__ import annotations

import segment_sweep.algs.reference as reference
from segment_sweep.algs.avl import AVLTree, AVLTreeIterator, AVLTreeNode
from segment_sweep.algs.bentley_ottmann import (
    BentleyOttmann,
    Event,
    EventType,
    as_segments,
    find_intersections,
)
from segment_sweep.algs.geometry import Point, Segment, Vector, collinear_overlap, intersect
from segment_sweep.algs.priority_queue import PriorityQueue
from segment_sweep.algs.reference import brute_force

__all__ = [
    "Point",
    "Vector",
    "Segment",
    "intersect",
    "collinear_overlap",
    "PriorityQueue",
    "AVLTree",
    "AVLTreeNode",
    "AVLTreeIterator",
    "BentleyOttmann",
    "Event",
    "EventType",
    "as_segments",
    "find_intersections",
    "brute_force",
    "reference",
]
