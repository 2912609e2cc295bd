"""Bentley–Ottmann plane sweep reporting all pairwise segment intersections.

The sweep line moves left to right.  The event queue yields endpoint and
crossing events in ascending x order; the status tree holds the
segments currently crossed by the sweep line, ordered by their cached
``Segment.value`` (the y-coordinate at the last refresh).

Key maintenance
---------------
* Segments compare by cached key, then by slope, then by id, so two distinct
  segments never compare equal.  Equal keys mean the segments meet at the
  sweep line and the slope puts them in their order just right of it.
* Events at one x run crossings first, then left endpoints, then right
  endpoints.  On a left-endpoint event every active key is recomputed at the
  new x.  All crossings up to and including that x have already been
  swapped, so the recomputation keeps the tree's relative order and may
  happen in place.
* On a crossing event the two segments are removed, their keys exchanged and
  both reinserted; a key never changes while its segment is in the tree
  outside of the refresh pass.

Output
------
Every detection is recorded, so the same point can appear more than once
(once per adjacency that rediscovers it).  A crossing event is only scheduled
when the point lies strictly ahead of the current event and no event for that
pair is pending.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from segment_sweep.algs.avl import AVLTree
from segment_sweep.algs.geometry import Point, Segment, intersect, log
from segment_sweep.algs.priority_queue import PriorityQueue

__all__ = ["EventType", "Event", "BentleyOttmann", "find_intersections", "as_segments"]


class EventType(IntEnum):
    LEFT_ENDPOINT = 0
    RIGHT_ENDPOINT = 1
    INTERSECTION = 2


# Same-x order: swap crossings first, then activate, then retire.
_KIND_RANK = {
    EventType.INTERSECTION: 0,
    EventType.LEFT_ENDPOINT: 1,
    EventType.RIGHT_ENDPOINT: 2,
}

SortKey = Tuple[float, int, float, Tuple[str, ...]]


@dataclass(eq=False)
class Event:
    point: Point
    segments: Tuple[Segment, ...]
    kind: EventType
    sort_key: SortKey = field(init=False)

    def __post_init__(self) -> None:
        self.sort_key = (
            self.point.x,
            _KIND_RANK[self.kind],
            self.point.y,
            tuple(seg.id for seg in self.segments),
        )

    def __repr__(self) -> str:
        ids = ",".join(seg.id for seg in self.segments)
        return f"Event({self.kind.name}, {self.point!r}, [{ids}])"


def _compare_events(a: Event, b: Event) -> int:
    ka, kb = a.sort_key, b.sort_key
    return (ka > kb) - (ka < kb)


def _compare_segments(a: Segment, b: Segment) -> float:
    if a.value != b.value:
        return a.value - b.value
    if a.slope != b.slope:
        return a.slope - b.slope
    return (a.id > b.id) - (a.id < b.id)


def _pair(a: Segment, b: Segment) -> FrozenSet[Segment]:
    return frozenset((a, b))


def as_segments(items: Iterable[Any]) -> List[Segment]:
    """Accept ``Segment`` objects or ``((x1, y1), (x2, y2))`` pairs."""
    segments: List[Segment] = []
    for idx, item in enumerate(items):
        if isinstance(item, Segment):
            segments.append(item)
            continue
        try:
            (x1, y1), (x2, y2) = item
        except (TypeError, ValueError) as exc:
            raise ValueError(f"segment #{idx} must be ((x1, y1), (x2, y2)), got {item!r}") from exc
        segments.append(Segment.from_coords(f"s{idx + 1}", (x1, y1), (x2, y2)))
    return segments


class BentleyOttmann:
    """Sweep engine owning one event queue and one status tree for a single run."""

    def __init__(self, segments: Sequence[Segment], *, trace: bool = False) -> None:
        self.segments: List[Segment] = list(segments)
        if len({id(seg) for seg in self.segments}) != len(self.segments):
            raise ValueError("segments must be distinct objects")
        if len({seg.id for seg in self.segments}) != len(self.segments):
            raise ValueError("segment ids must be unique")

        self._queue: PriorityQueue[Event] = PriorityQueue(_compare_events)
        self._tree: AVLTree[Segment] = AVLTree(_compare_segments)
        self._pending: Dict[FrozenSet[Segment], Event] = {}
        self._active: Set[Segment] = set()
        self._intersections: List[Point] = []
        self._current: Optional[Event] = None

        self.trace_enabled = trace
        self.trace: List[Dict[str, Any]] = []
        self._step_record: Optional[Dict[str, Any]] = None

        self._initialize()

    # ------------------------------------------------------------------ state views
    @property
    def status(self) -> AVLTree[Segment]:
        return self._tree

    @property
    def queue(self) -> PriorityQueue[Event]:
        return self._queue

    @property
    def intersections(self) -> List[Point]:
        return list(self._intersections)

    @property
    def sweep_point(self) -> Optional[Point]:
        return self._current.point if self._current is not None else None

    def active_segments(self) -> List[Segment]:
        """Active segments, bottom to top."""
        return list(self._tree)

    def pending_intersection(self, a: Segment, b: Segment) -> Optional[Event]:
        return self._pending.get(_pair(a, b))

    # ------------------------------------------------------------------ setup
    def _initialize(self) -> None:
        for seg in self.segments:
            seg.value = seg.start.y
            self._queue.enqueue(Event(seg.start, (seg,), EventType.LEFT_ENDPOINT))
            self._queue.enqueue(Event(seg.end, (seg,), EventType.RIGHT_ENDPOINT))

    # ------------------------------------------------------------------ bookkeeping
    def _update_segments(self, x: float) -> None:
        iterator = self._tree.iterator()
        while iterator.has_next():
            iterator.next().update_value(x)

    def _is_ahead(self, point: Point) -> bool:
        """True when a crossing at ``point`` would dequeue after the current event."""
        if self._current is None:
            return True
        key = (point.x, _KIND_RANK[EventType.INTERSECTION], point.y)
        return key > self._current.sort_key[:3]

    def _record(self, point: Point, a: Segment, b: Segment) -> None:
        self._intersections.append(point)
        log(f"[sweep]   detected {a.id} x {b.id} at ({point.x:.6g}, {point.y:.6g})")
        if self._step_record is not None:
            self._step_record["detected"].append(
                {"x": float(point.x), "y": float(point.y), "segments": [a.id, b.id]}
            )

    def _schedule(self, point: Point, a: Segment, b: Segment) -> None:
        key = _pair(a, b)
        if key in self._pending or not self._is_ahead(point):
            return
        event = Event(point, (a, b), EventType.INTERSECTION)
        self._pending[key] = event
        self._queue.enqueue(event)
        log(f"[sweep]   scheduled {a.id} x {b.id} at x={point.x:.6g}")
        if self._step_record is not None:
            self._step_record["scheduled"].append(
                {"x": float(point.x), "y": float(point.y), "segments": [a.id, b.id]}
            )

    def _remove_event(self, a: Segment, b: Segment) -> None:
        event = self._pending.pop(_pair(a, b), None)
        if event is None:
            return
        self._queue.remove(event)
        log(f"[sweep]   cancelled {a.id} x {b.id}")
        if self._step_record is not None:
            self._step_record["cancelled"].append([a.id, b.id])

    def _check_pair(self, a: Segment, b: Segment) -> None:
        point = intersect(a, b)
        if point is not None:
            self._record(point, a, b)
            self._schedule(point, a, b)

    def _swap(self, s: Segment, t: Segment) -> None:
        self._tree.remove(s)
        self._tree.remove(t)
        s.value, t.value = t.value, s.value
        self._tree.insert(s)
        self._tree.insert(t)

    # ------------------------------------------------------------------ handlers
    def _handle_left_event(self, event: Event) -> None:
        s = event.segments[0]
        self._update_segments(s.start.x)
        s.value = s.start.y
        self._tree.insert(s)
        self._active.add(s)

        r = self._tree.find_successor(s)
        t = self._tree.find_predecessor(s)
        if r is not None and t is not None:
            # s now separates r and t
            self._remove_event(r, t)
        if r is not None:
            self._check_pair(s, r)
        if t is not None:
            self._check_pair(s, t)

    def _handle_right_event(self, event: Event) -> None:
        s = event.segments[0]
        r = self._tree.find_successor(s)
        t = self._tree.find_predecessor(s)
        self._tree.remove(s)
        self._active.discard(s)
        if r is not None and t is not None:
            self._check_pair(r, t)

    def _handle_intersection_event(self, event: Event) -> None:
        a, b = event.segments
        self._pending.pop(_pair(a, b), None)
        if a not in self._active or b not in self._active:
            log(f"[sweep]   stale crossing {a.id} x {b.id} skipped")
            return

        # left of the crossing the smaller slope is on top
        s, t = (a, b) if a.slope < b.slope else (b, a)
        self._swap(s, t)

        r = self._tree.find_successor(t)
        u = self._tree.find_predecessor(s)
        if r is not None:
            self._remove_event(r, s)
            self._check_pair(r, t)
        if u is not None:
            self._remove_event(u, t)
            self._check_pair(u, s)

    # ------------------------------------------------------------------ driver
    def step(self) -> Optional[Event]:
        """Process the next event and return it, or ``None`` when the queue is empty."""
        event = self._queue.dequeue()
        if event is None:
            return None
        self._current = event
        ids = [seg.id for seg in event.segments]
        log(f"[sweep] {event.kind.name} {ids} at ({event.point.x:.6g}, {event.point.y:.6g})")

        if self.trace_enabled:
            self._step_record = {
                "step_idx": len(self.trace),
                "kind": event.kind.name.lower(),
                "x": float(event.point.x),
                "y": float(event.point.y),
                "segments": ids,
                "detected": [],
                "scheduled": [],
                "cancelled": [],
            }

        if event.kind is EventType.LEFT_ENDPOINT:
            self._handle_left_event(event)
        elif event.kind is EventType.RIGHT_ENDPOINT:
            self._handle_right_event(event)
        else:
            self._handle_intersection_event(event)

        if self._step_record is not None:
            self._step_record["status"] = [seg.id for seg in self._tree]
            self.trace.append(self._step_record)
            self._step_record = None
        return event

    def find_intersections(self) -> List[Point]:
        while self.step() is not None:
            pass
        return self.intersections


def find_intersections(segments: Iterable[Any]) -> List[Point]:
    """Convenience wrapper: run a fresh sweep over ``segments``."""
    return BentleyOttmann(as_segments(segments)).find_intersections()
