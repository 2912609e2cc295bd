from __future__ import annotations

import math

import pytest

from segment_sweep.algs.geometry import Point, Segment, Vector, collinear_overlap, intersect


def seg(seg_id: str, x1: float, y1: float, x2: float, y2: float) -> Segment:
    return Segment(seg_id, Point(x1, y1), Point(x2, y2))


# ---------------------------------------------------------------------------
#  Vector algebra
# ---------------------------------------------------------------------------
def test_vector_operations() -> None:
    a = Vector(1.0, 2.0)
    b = Vector(3.0, -1.0)
    assert a.add(b) == Vector(4.0, 1.0)
    assert a.sub(b) == Vector(-2.0, 3.0)
    assert a.scale(2.5) == Vector(2.5, 5.0)
    assert a.dot(b) == 1.0
    assert a.cross(b) == -7.0
    assert b.cross(a) == 7.0
    assert a + b == a.add(b)
    assert a - b == a.sub(b)
    assert a * 2.0 == a.scale(2.0)


def test_point_is_immutable() -> None:
    p = Point(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 3.0  # type: ignore[misc]
    assert p.as_tuple() == (1.0, 2.0)
    assert p.to_vector() == Vector(1.0, 2.0)


# ---------------------------------------------------------------------------
#  Segment invariants
# ---------------------------------------------------------------------------
def test_segment_orients_left_to_right() -> None:
    s = seg("s", 5.0, 1.0, 1.0, 3.0)
    assert s.start == Point(1.0, 3.0)
    assert s.end == Point(5.0, 1.0)
    assert s.value == 3.0


@pytest.mark.parametrize(
    "coords",
    [
        (1.0, 0.0, 1.0, 5.0),
        (2.0, 2.0, 2.0, 2.0),
        (0.0, 0.0, math.inf, 1.0),
        (0.0, math.nan, 1.0, 1.0),
    ],
    ids=["vertical", "zero-length", "infinite", "nan"],
)
def test_segment_rejects_degenerate_input(coords) -> None:
    with pytest.raises(ValueError):
        seg("bad", *coords)


def test_y_at_follows_line_and_clamps_left_of_start() -> None:
    s = seg("s", 2.0, 1.0, 4.0, 5.0)
    assert s.y_at(0.0) == 1.0
    assert s.y_at(2.0) == 1.0
    assert s.y_at(3.0) == 3.0
    assert s.y_at(4.0) == 5.0
    s.update_value(3.5)
    assert s.value == 4.0


# ---------------------------------------------------------------------------
#  Intersection
# ---------------------------------------------------------------------------
def test_exact_crossing() -> None:
    a = seg("a", 0.0, 0.0, 2.0, 2.0)
    b = seg("b", 0.0, 2.0, 2.0, 0.0)
    assert intersect(a, b) == Point(1.0, 1.0)
    assert intersect(b, a) == Point(1.0, 1.0)
    assert a.intersect(b) == Point(1.0, 1.0)


def test_parallel_segments_do_not_intersect() -> None:
    a = seg("a", 0.0, 0.0, 1.0, 0.0)
    b = seg("b", 0.0, 1.0, 1.0, 1.0)
    assert intersect(a, b) is None
    assert not collinear_overlap(a, b)


def test_collinear_overlap_reports_no_point() -> None:
    a = seg("a", 0.0, 0.0, 2.0, 0.0)
    b = seg("b", 1.0, 0.0, 3.0, 0.0)
    assert collinear_overlap(a, b)
    assert collinear_overlap(b, a)
    assert intersect(a, b) is None
    assert intersect(b, a) is None


def test_collinear_disjoint_segments() -> None:
    a = seg("a", 0.0, 0.0, 1.0, 1.0)
    b = seg("b", 2.0, 2.0, 3.0, 3.0)
    assert not collinear_overlap(a, b)
    assert intersect(a, b) is None


def test_shared_endpoint_is_reported() -> None:
    a = seg("a", 0.0, 0.0, 1.0, 1.0)
    b = seg("b", 1.0, 1.0, 2.0, 0.0)
    assert intersect(a, b) == Point(1.0, 1.0)


def test_lines_cross_outside_segments() -> None:
    a = seg("a", 0.0, 0.0, 1.0, 1.0)
    b = seg("b", 2.0, 0.0, 3.0, -1.0)
    assert intersect(a, b) is None


def test_t_junction_inside_segment() -> None:
    a = seg("a", 0.0, 0.0, 4.0, 0.0)
    b = seg("b", 2.0, 0.0, 3.0, 2.0)
    assert intersect(a, b) == Point(2.0, 0.0)


def test_slope_follows_orientation() -> None:
    assert seg("s", 0.0, 0.0, 2.0, 1.0).slope == 0.5
    assert seg("s", 2.0, 1.0, 0.0, 0.0).slope == 0.5
    assert seg("s", 0.0, 4.0, 2.0, 0.0).slope == -2.0
