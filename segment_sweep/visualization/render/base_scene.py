"""Utility primitives for pygame visualization scenes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - pygame should be installed by demos
    raise ImportError("pygame is required for the visualization renderer") from exc

BACKGROUND_COLOR = (18, 18, 24)
AXIS_COLOR = (70, 70, 90)
SEGMENT_COLOR = (200, 200, 210)
SEGMENT_ACTIVE_COLOR = (90, 200, 255)
SWEEP_COLOR = (255, 215, 0)
INTERSECTION_COLOR = (255, 90, 90)
SCHEDULED_COLOR = (200, 120, 40)
CANCELLED_COLOR = (120, 120, 140)

MARGIN_RATIO = 0.05
HUD_WIDTH = 260


@dataclass
class SegmentState:
    seg_id: str
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass
class PointMarker:
    x: float
    y: float
    color: Tuple[int, int, int]
    size: int = 8


class BaseScene:
    """World-to-screen transforms and draw helpers for the sweep renderer."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.margin = int(min(width, height) * MARGIN_RATIO)
        self.plot_width = max(1, self.width - HUD_WIDTH - 2 * self.margin)
        self.plot_height = max(1, self.height - 2 * self.margin)
        self.x_min, self.x_max = -1.0, 1.0
        self.y_min, self.y_max = -1.0, 1.0
        self.x_scale = 1.0
        self.y_scale = 1.0
        self.segments: Dict[str, SegmentState] = {}

    # ------------------------------------------------------------------ transforms
    def set_scene(self, *, x_min: float, x_max: float, y_min: float, y_max: float) -> None:
        if x_min >= x_max:
            x_max = x_min + 1.0
        if y_min >= y_max:
            y_max = y_min + 1.0
        self.x_min, self.x_max = x_min, x_max
        self.y_min, self.y_max = y_min, y_max
        self.x_scale = self.plot_width / (self.x_max - self.x_min)
        self.y_scale = self.plot_height / (self.y_max - self.y_min)

    def world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        px = HUD_WIDTH + self.margin + int((x - self.x_min) * self.x_scale)
        py = self.height - self.margin - int((y - self.y_min) * self.y_scale)
        px = max(0, min(self.width - 1, px))
        py = max(0, min(self.height - 1, py))
        return px, py

    # ------------------------------------------------------------------ scene content
    def add_segment(self, seg_id: str, x1: float, y1: float, x2: float, y2: float) -> None:
        self.segments[seg_id] = SegmentState(seg_id, float(x1), float(y1), float(x2), float(y2))

    def reset(self) -> None:
        self.segments.clear()

    # ------------------------------------------------------------------ drawing helpers
    def draw_background(self, surface: "pygame.Surface") -> None:
        surface.fill(BACKGROUND_COLOR)
        top_left = self.world_to_screen(self.x_min, self.y_max)
        bottom_right = self.world_to_screen(self.x_max, self.y_min)
        rect = pygame.Rect(top_left, (bottom_right[0] - top_left[0], bottom_right[1] - top_left[1]))
        pygame.draw.rect(surface, AXIS_COLOR, rect, 1)

    def draw_segments(
        self,
        surface: "pygame.Surface",
        active: Sequence[str] = (),
    ) -> None:
        active_ids = set(active)
        for seg in self.segments.values():
            color = SEGMENT_ACTIVE_COLOR if seg.seg_id in active_ids else SEGMENT_COLOR
            width = 3 if seg.seg_id in active_ids else 1
            start = self.world_to_screen(seg.x1, seg.y1)
            end = self.world_to_screen(seg.x2, seg.y2)
            pygame.draw.line(surface, color, start, end, width)

    def draw_sweep_line(self, surface: "pygame.Surface", x: Optional[float]) -> None:
        if x is None:
            return
        top = self.world_to_screen(x, self.y_max)
        bottom = self.world_to_screen(x, self.y_min)
        pygame.draw.line(surface, SWEEP_COLOR, top, bottom, 1)

    def draw_markers(self, surface: "pygame.Surface", markers: Iterable[PointMarker]) -> None:
        for marker in markers:
            sx, sy = self.world_to_screen(marker.x, marker.y)
            pygame.draw.circle(surface, marker.color, (sx, sy), marker.size // 2)


def segment_labels(segments: Dict[str, SegmentState], order: Sequence[str]) -> List[str]:
    """Top-to-bottom status labels for the HUD (``order`` is bottom to top)."""
    return [seg_id for seg_id in reversed(order) if seg_id in segments]


__all__ = [
    "BaseScene",
    "SegmentState",
    "PointMarker",
    "segment_labels",
    "BACKGROUND_COLOR",
    "AXIS_COLOR",
    "SEGMENT_COLOR",
    "SEGMENT_ACTIVE_COLOR",
    "SWEEP_COLOR",
    "INTERSECTION_COLOR",
    "SCHEDULED_COLOR",
    "CANCELLED_COLOR",
]
