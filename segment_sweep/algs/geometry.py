"""
Light-weight 2-D geometry shared by the sweep engine and the reference solver.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

# Global debug switch
VERBOSE: bool = False


def log(*args, **kwargs) -> None:            # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)


# --------------------------------------------------------------------------- #
#  Points & vectors                                                           #
# --------------------------------------------------------------------------- #
@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_vector(self) -> "Vector":
        return Vector(self.x, self.y)

    def __repr__(self) -> str:
        return f"Point({self.x:g}, {self.y:g})"


@dataclass(frozen=True, slots=True)
class Vector:
    dx: float
    dy: float

    def add(self, other: "Vector") -> "Vector":
        return Vector(self.dx + other.dx, self.dy + other.dy)

    def sub(self, other: "Vector") -> "Vector":
        return Vector(self.dx - other.dx, self.dy - other.dy)

    def scale(self, factor: float) -> "Vector":
        return Vector(self.dx * factor, self.dy * factor)

    def dot(self, other: "Vector") -> float:
        return self.dx * other.dx + self.dy * other.dy

    def cross(self, other: "Vector") -> float:
        """z-component of the 3-D cross product."""
        return self.dx * other.dy - self.dy * other.dx

    __add__ = add
    __sub__ = sub
    __mul__ = scale

    def to_point(self) -> Point:
        return Point(self.dx, self.dy)


# --------------------------------------------------------------------------- #
#  Segments                                                                   #
# --------------------------------------------------------------------------- #
@dataclass(eq=False)
class Segment:
    """A non-vertical segment oriented left to right.

    ``value`` is the segment's y-coordinate at the sweep line's current x.  It
    is a cache owned by the sweep engine and is only ever refreshed from the
    outside; the status tree orders segments by it.
    """

    id: str
    start: Point
    end: Point
    value: float = field(init=False)

    def __post_init__(self) -> None:
        coords = (self.start.x, self.start.y, self.end.x, self.end.y)
        if not all(math.isfinite(c) for c in coords):
            raise ValueError(f"segment {self.id!r}: endpoints must be finite")
        if self.start.x > self.end.x:
            self.start, self.end = self.end, self.start
        if self.start.x == self.end.x:
            # also covers zero-length segments
            raise ValueError(f"segment {self.id!r}: vertical segments are not supported")
        self.value = self.start.y

    @classmethod
    def from_coords(
        cls,
        seg_id: str,
        p: Tuple[float, float],
        q: Tuple[float, float],
    ) -> "Segment":
        return cls(seg_id, Point(float(p[0]), float(p[1])), Point(float(q[0]), float(q[1])))

    @property
    def direction(self) -> Vector:
        return Vector(self.end.x - self.start.x, self.end.y - self.start.y)

    @property
    def slope(self) -> float:
        return (self.end.y - self.start.y) / (self.end.x - self.start.x)

    def y_at(self, x: float) -> float:
        """Return the y-coordinate of the supporting line at ``x``, clamped left of start."""
        x1, y1 = self.start.x, self.start.y
        x2, y2 = self.end.x, self.end.y
        if x < x1:
            return y1
        return y1 + ((y2 - y1) / (x2 - x1)) * (x - x1)

    def update_value(self, x: float) -> None:
        self.value = self.y_at(x)

    def intersect(self, other: "Segment") -> Optional[Point]:
        return intersect(self, other)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"Segment({self.id!r}, {self.start!r}, {self.end!r})"


# --------------------------------------------------------------------------- #
#  Intersection                                                               #
# --------------------------------------------------------------------------- #
def _collinear_params(a: Segment, b: Segment) -> Tuple[float, float, float]:
    p = a.start.to_vector()
    q = b.start.to_vector()
    r = a.direction
    s = b.direction
    rr = r.dot(r)
    sr = s.dot(r)
    t0 = q.sub(p).dot(r) / rr
    t1 = t0 + sr / rr
    return t0, t1, sr


def _overlapping(t0: float, t1: float, sr: float) -> bool:
    if sr >= 0:
        return t0 < t1 and ((t0 < 0 <= t1) or (0 <= t0 < 1 and t1 > 0))
    return t1 < t0 and ((t1 < 0 <= t0) or (0 <= t1 < 1 and t0 > 0))


def collinear_overlap(a: Segment, b: Segment) -> bool:
    """True when ``a`` and ``b`` lie on one line and their parameter ranges overlap."""
    r = a.direction
    s = b.direction
    qp = b.start.to_vector().sub(a.start.to_vector())
    if r.cross(s) != 0 or qp.cross(r) != 0:
        return False
    return _overlapping(*_collinear_params(a, b))


def intersect(a: Segment, b: Segment) -> Optional[Point]:
    """Return the single crossing point of ``a`` and ``b`` or ``None``.

    ``a`` is parametrised as ``p + t*r`` and ``b`` as ``q + u*s`` with
    ``t, u`` in ``[0, 1]``.  Comparisons are exact.  Overlapping collinear
    segments share infinitely many points; no point is reported for them.
    """
    p = a.start.to_vector()
    q = b.start.to_vector()
    r = a.direction
    s = b.direction

    rxs = r.cross(s)
    qp = q.sub(p)
    qpr = qp.cross(r)

    if rxs == 0:
        if qpr == 0 and _overlapping(*_collinear_params(a, b)):
            log(f"[geometry] collinear overlap {a.id}/{b.id}: no point reported")
        return None

    t = qp.cross(s) / rxs
    u = qpr / rxs
    if 0 <= t <= 1 and 0 <= u <= 1:
        return p.add(r.scale(t)).to_point()
    return None


__all__ = [
    "VERBOSE",
    "log",
    "Point",
    "Vector",
    "Segment",
    "intersect",
    "collinear_overlap",
]
