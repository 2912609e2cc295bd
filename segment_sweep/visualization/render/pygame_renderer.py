"""Pygame renderer that consumes sweep visualization events."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - ensure pygame is available
    raise ImportError("pygame is required for the visualization renderer") from exc

from segment_sweep.visualization.render.base_scene import (
    INTERSECTION_COLOR,
    SCHEDULED_COLOR,
    BaseScene,
    PointMarker,
    segment_labels,
)


class PygameRenderer:
    """Render Bentley–Ottmann event streams."""

    SPEED_LEVELS = [0.25, 0.5, 1.0, 2.0, 4.0]
    EVENTS_PER_SECOND = 4.0

    def __init__(self, width: int = 1200, height: int = 700, fps: int = 60) -> None:
        self.width = width
        self.height = height
        self.fps = fps
        pygame.font.init()
        self.font = pygame.font.SysFont("consolas", 18)
        self.small_font = pygame.font.SysFont("consolas", 14)
        self.scene = BaseScene(width, height)
        self.events: List[Dict[str, object]] = []
        self.cursor = 0
        self.total_events = 0
        self.autoplay = True
        self.speed_index = 2
        self.autoplay_accumulator = 0.0
        self.clock: Optional["pygame.time.Clock"] = None
        self.screen: Optional["pygame.Surface"] = None
        self.running = False
        self.algorithm_name = "unknown"
        self.sweep_x: Optional[float] = None
        self.current_kind: Optional[str] = None
        self.current_segments: List[str] = []
        self.status_order: List[str] = []
        self.found: List[Tuple[float, float]] = []
        self.scheduled: Dict[Tuple[str, ...], Tuple[float, float]] = {}
        self.scene_initialized = False
        self.completed = False
        self.last_event_type: Optional[str] = None

    # ------------------------------------------------------------------ public API
    def load_events(self, events: List[Dict[str, object]]) -> None:
        self.events = list(events)
        self.total_events = len(self.events)
        self.cursor = 0
        self.autoplay_accumulator = 0.0
        self.scene.reset()
        self.scene_initialized = False
        self.algorithm_name = "unknown"
        self.sweep_x = None
        self.current_kind = None
        self.current_segments = []
        self.status_order = []
        self.found = []
        self.scheduled.clear()
        self.completed = False
        self.last_event_type = None
        if self.events:
            self._bootstrap_scene()

    def run(self, autoplay: bool = True) -> None:
        if not self.events:
            raise RuntimeError("No events loaded. Call load_events() first.")

        self.autoplay = autoplay
        if not self.scene_initialized:
            self._bootstrap_scene()

        pygame.display.init()
        pygame.display.set_caption("Segment Sweep Visualization")
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.running = True

        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self._handle_input()
            if self.autoplay and not self.completed:
                self._autoplay_advance(dt)
            self._draw_frame()

        pygame.display.quit()

    def process_all_events(self) -> None:
        """Advance through all events without opening a window (testing helper)."""
        while self.cursor < self.total_events:
            self._advance_event()

    def step_once(self) -> None:
        """Advance a single event."""
        self._advance_event()

    # ------------------------------------------------------------------ internals
    def _bootstrap_scene(self) -> None:
        """Consume initial scene setup events (scene + segments + algo info)."""
        while self.cursor < self.total_events:
            event_type = self.events[self.cursor].get("type")
            if event_type in {"set_scene", "add_segment", "algo_info"}:
                self._advance_event()
                self.scene_initialized = True
                continue
            break

    def _handle_input(self) -> None:
        for py_event in pygame.event.get():
            if py_event.type == pygame.QUIT:
                self.running = False
                return
            if py_event.type == pygame.KEYDOWN:
                if py_event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                    return
                if py_event.key == pygame.K_SPACE:
                    self.autoplay = not self.autoplay
                elif py_event.key == pygame.K_RIGHT:
                    self.autoplay = False
                    self._advance_step()
                elif py_event.key == pygame.K_LEFT:
                    self.autoplay = False
                    self._rewind_step()
                elif py_event.key == pygame.K_UP:
                    self.speed_index = min(len(self.SPEED_LEVELS) - 1, self.speed_index + 1)
                elif py_event.key == pygame.K_DOWN:
                    self.speed_index = max(0, self.speed_index - 1)
                elif py_event.key == pygame.K_r:
                    current_autoplay = self.autoplay
                    self.load_events(self.events)
                    self.autoplay = current_autoplay

    def _autoplay_advance(self, dt: float) -> None:
        interval = 1.0 / (self.EVENTS_PER_SECOND * self.SPEED_LEVELS[self.speed_index])
        self.autoplay_accumulator += dt
        while self.autoplay_accumulator >= interval and not self.completed:
            self.autoplay_accumulator -= interval
            self._advance_step()

    def _advance_event(self) -> None:
        if self.cursor >= self.total_events:
            self.completed = True
            return
        event = self.events[self.cursor]
        self.cursor += 1
        self.last_event_type = event.get("type")
        self._apply_event(event)
        if self.cursor >= self.total_events:
            self.completed = True

    def _advance_step(self) -> None:
        """Advance through one sweep step: up to and including its status event."""
        while self.cursor < self.total_events:
            self._advance_event()
            if self.last_event_type in {"status", "done"}:
                return

    def _rewind_step(self) -> None:
        starts = [
            idx for idx, ev in enumerate(self.events[: self.cursor]) if ev.get("type") == "sweep"
        ]
        target = starts[-2] if len(starts) >= 2 else 0
        self.load_events(list(self.events))
        while self.cursor < target:
            self._advance_event()
        if target:
            self._advance_step()

    # ------------------------------------------------------------------ event application
    def _apply_event(self, event: Dict[str, object]) -> None:
        event_type = event.get("type")
        if event_type == "set_scene":
            self.scene.set_scene(
                x_min=float(event.get("x_min", -1.0)),
                x_max=float(event.get("x_max", 1.0)),
                y_min=float(event.get("y_min", -1.0)),
                y_max=float(event.get("y_max", 1.0)),
            )
            self.scene_initialized = True
        elif event_type == "add_segment":
            self.scene.add_segment(
                str(event.get("id")),
                float(event.get("x1", 0.0)),
                float(event.get("y1", 0.0)),
                float(event.get("x2", 0.0)),
                float(event.get("y2", 0.0)),
            )
        elif event_type == "algo_info":
            self.algorithm_name = str(event.get("name", "unknown"))
        elif event_type == "sweep":
            self.sweep_x = float(event.get("x", 0.0))
            self.current_kind = str(event.get("kind"))
            self.current_segments = [str(s) for s in event.get("segments", [])]
            if self.current_kind == "intersection":
                self.scheduled.pop(tuple(sorted(self.current_segments)), None)
        elif event_type == "status":
            self.status_order = [str(s) for s in event.get("order", [])]
        elif event_type == "mark_intersection":
            self.found.append((float(event.get("x", 0.0)), float(event.get("y", 0.0))))
        elif event_type == "schedule":
            key = tuple(sorted(str(s) for s in event.get("segments", [])))
            self.scheduled[key] = (float(event.get("x", 0.0)), float(event.get("y", 0.0)))
        elif event_type == "cancel":
            key = tuple(sorted(str(s) for s in event.get("segments", [])))
            self.scheduled.pop(key, None)
        elif event_type == "done":
            self.completed = True
            self.sweep_x = None
        else:
            print(f"[Renderer] Unhandled event type: {event_type}")

    # ------------------------------------------------------------------ drawing
    def _collect_markers(self) -> List[PointMarker]:
        markers = [PointMarker(x, y, SCHEDULED_COLOR, size=6) for x, y in self.scheduled.values()]
        markers.extend(PointMarker(x, y, INTERSECTION_COLOR) for x, y in self.found)
        return markers

    def _draw_frame(self) -> None:
        assert self.screen is not None
        self.scene.draw_background(self.screen)
        self.scene.draw_segments(self.screen, active=self.status_order)
        self.scene.draw_sweep_line(self.screen, self.sweep_x)
        self.scene.draw_markers(self.screen, self._collect_markers())
        self._draw_hud(self.screen)
        pygame.display.flip()

    def _draw_hud(self, surface: "pygame.Surface") -> None:
        lines = [
            f"Algo: {self.algorithm_name}",
            f"Event: {self.cursor}/{self.total_events}",
            f"Autoplay: {'on' if self.autoplay else 'off'} x{self.SPEED_LEVELS[self.speed_index]:.2f}",
            f"Found: {len(self.found)}  Pending: {len(self.scheduled)}",
        ]
        if self.sweep_x is not None:
            lines.append(f"x={self.sweep_x:.3f} {self.current_kind}")
            lines.append(f"  [{', '.join(self.current_segments)}]")
        lines.append("Status (top first):")
        lines.extend(f"  {label}" for label in segment_labels(self.scene.segments, self.status_order))

        x = 10
        y = 10
        for idx, line in enumerate(lines):
            font = self.font if idx < 4 else self.small_font
            text_surface = font.render(line, True, (230, 230, 230))
            surface.blit(text_surface, (x, y))
            y += text_surface.get_height() + 2


__all__ = ["PygameRenderer"]
