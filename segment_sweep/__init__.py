# Sweep engine – default exports
from .algs.bentley_ottmann import (
    BentleyOttmann,
    Event,
    EventType,
    as_segments,
    find_intersections,
)

# Geometry & data structures
from .algs.geometry import Point, Segment, Vector, collinear_overlap, intersect, VERBOSE
from .algs.avl import AVLTree
from .algs.priority_queue import PriorityQueue
from .common.constants import (
    DEFAULT_SEED,
    RNG_SEEDS,
    TOL_NUM,
    seed_everywhere,
)

# Reference solvers – available under .reference.*
from .algs import reference as reference

__all__ = [
    # geometry
    "Point",
    "Vector",
    "Segment",
    "intersect",
    "collinear_overlap",
    "VERBOSE",
    # data structures
    "AVLTree",
    "PriorityQueue",
    # sweep
    "BentleyOttmann",
    "Event",
    "EventType",
    "as_segments",
    "find_intersections",
    # config
    "TOL_NUM",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
    # namespaced access to reference solvers
    "reference",
]
