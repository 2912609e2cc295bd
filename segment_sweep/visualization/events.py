"""Shared event schema for sweep-line visualizations."""

from __future__ import annotations

from typing import Dict, Iterable, List, Literal, Tuple, TypedDict

from segment_sweep.algs.geometry import Segment


class SetSceneEvent(TypedDict):
    type: Literal["set_scene"]
    x_min: float
    x_max: float
    y_min: float
    y_max: float


class AddSegmentEvent(TypedDict):
    type: Literal["add_segment"]
    id: str
    x1: float
    y1: float
    x2: float
    y2: float


class AlgoInfoEvent(TypedDict):
    type: Literal["algo_info"]
    name: str
    segments: int


class SweepEvent(TypedDict):
    type: Literal["sweep"]
    step_idx: int
    kind: Literal["left_endpoint", "right_endpoint", "intersection"]
    x: float
    y: float
    segments: List[str]


class StatusEvent(TypedDict):
    type: Literal["status"]
    order: List[str]


class MarkIntersectionEvent(TypedDict):
    type: Literal["mark_intersection"]
    x: float
    y: float
    segments: List[str]


class ScheduleEvent(TypedDict):
    type: Literal["schedule"]
    x: float
    y: float
    segments: List[str]


class CancelEvent(TypedDict):
    type: Literal["cancel"]
    segments: List[str]


class DoneEvent(TypedDict):
    type: Literal["done"]
    intersections: int


EventDict = Dict[str, object]


def compute_scene_bounds(
    segments: Iterable[Segment],
    margin: float = 0.1,
) -> Tuple[float, float, float, float]:
    """Compute ``(x_min, x_max, y_min, y_max)`` with a fractional margin."""
    seg_list = list(segments)
    if not seg_list:
        return -1.0, 1.0, -1.0, 1.0

    xs = [c for seg in seg_list for c in (seg.start.x, seg.end.x)]
    ys = [c for seg in seg_list for c in (seg.start.y, seg.end.y)]
    bounds = []
    for lo, hi in ((min(xs), max(xs)), (min(ys), max(ys))):
        span = max(hi - lo, 1e-6)
        pad = max(span * margin, 0.5)
        bounds.append((lo - pad, hi + pad))
    (x_min, x_max), (y_min, y_max) = bounds
    return x_min, x_max, y_min, y_max


__all__ = [
    "EventDict",
    "SetSceneEvent",
    "AddSegmentEvent",
    "AlgoInfoEvent",
    "SweepEvent",
    "StatusEvent",
    "MarkIntersectionEvent",
    "ScheduleEvent",
    "CancelEvent",
    "DoneEvent",
    "compute_scene_bounds",
]
