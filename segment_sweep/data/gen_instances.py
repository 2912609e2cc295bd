"""Synthetic segment-set generation.

``FamilyConfig`` declares the geometric ranges of a family and
``draw_segments`` samples a list of :class:`~segment_sweep.algs.geometry.Segment`
from it.  Sampling only goes through the supplied ``numpy.random.Generator``,
so instances regenerate exactly from a seed.

Families
--------
``uniform``  both endpoints uniform in the box.
``short``    a uniform anchor plus a short random offset; few crossings.
``fan``      every segment spans the full width; crossings are dense.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from segment_sweep.algs.geometry import Point, Segment

FloatRange = Tuple[float, float]

MAX_RESAMPLE = 100


@dataclass(frozen=True)
class FamilyConfig:
    """Configuration bundle for instance families."""

    x_range: FloatRange = (0.0, 100.0)
    y_range: FloatRange = (0.0, 100.0)
    length_range: FloatRange = (2.0, 10.0)
    min_dx: float = 1e-3

    def __post_init__(self) -> None:
        for name in ("x_range", "y_range", "length_range"):
            lo, hi = getattr(self, name)
            if not (math.isfinite(lo) and math.isfinite(hi)) or hi <= lo:
                raise ValueError(f"{name} must contain finite ascending bounds")
        if self.length_range[0] <= 0.0:
            raise ValueError("length_range must be positive")
        if self.min_dx <= 0.0:
            raise ValueError("min_dx must be positive")
        if self.x_range[1] - self.x_range[0] <= self.min_dx:
            raise ValueError("x_range must be wider than min_dx")


FAMILY_CONFIGS: Dict[str, FamilyConfig] = {
    "uniform": FamilyConfig(),
    "short": FamilyConfig(length_range=(1.0, 8.0)),
    "fan": FamilyConfig(),
}


def _rng_float(rng: np.random.Generator, lo: float, hi: float) -> float:
    return float(rng.uniform(lo, hi))


def _draw_uniform(rng: np.random.Generator, cfg: FamilyConfig) -> Tuple[Point, Point]:
    p = Point(_rng_float(rng, *cfg.x_range), _rng_float(rng, *cfg.y_range))
    q = Point(_rng_float(rng, *cfg.x_range), _rng_float(rng, *cfg.y_range))
    return p, q


def _draw_short(rng: np.random.Generator, cfg: FamilyConfig) -> Tuple[Point, Point]:
    p = Point(_rng_float(rng, *cfg.x_range), _rng_float(rng, *cfg.y_range))
    length = _rng_float(rng, *cfg.length_range)
    angle = _rng_float(rng, -0.45 * math.pi, 0.45 * math.pi)
    q = Point(p.x + length * math.cos(angle), p.y + length * math.sin(angle))
    return p, q


def _draw_fan(rng: np.random.Generator, cfg: FamilyConfig) -> Tuple[Point, Point]:
    x_lo, x_hi = cfg.x_range
    p = Point(x_lo + _rng_float(rng, 0.0, 0.05) * (x_hi - x_lo), _rng_float(rng, *cfg.y_range))
    q = Point(x_hi - _rng_float(rng, 0.0, 0.05) * (x_hi - x_lo), _rng_float(rng, *cfg.y_range))
    return p, q


_DRAWERS = {
    "uniform": _draw_uniform,
    "short": _draw_short,
    "fan": _draw_fan,
}


def draw_segments(
    rng: np.random.Generator,
    count: int,
    family: str = "uniform",
    config: FamilyConfig | None = None,
) -> List[Segment]:
    """Sample ``count`` non-vertical segments with ids ``s1..sN``."""
    if count < 0:
        raise ValueError("count must be non-negative")
    if family not in _DRAWERS:
        raise ValueError(f"unknown family {family!r}; expected one of {sorted(_DRAWERS)}")
    cfg = config if config is not None else FAMILY_CONFIGS[family]
    drawer = _DRAWERS[family]

    segments: List[Segment] = []
    for idx in range(count):
        for _ in range(MAX_RESAMPLE):
            p, q = drawer(rng, cfg)
            if abs(q.x - p.x) >= cfg.min_dx:
                break
        else:
            raise RuntimeError(f"could not draw a non-vertical segment for family {family!r}")
        segments.append(Segment(f"s{idx + 1}", p, q))
    return segments


__all__ = ["FamilyConfig", "FAMILY_CONFIGS", "draw_segments"]
