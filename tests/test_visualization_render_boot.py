import os
import time

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # type: ignore  # noqa: E402

from segment_sweep.visualization.adapters import build_sweep_events
from segment_sweep.visualization.render import PygameRenderer
from tests.test_utils import demo_segments, gen_segments


def test_renderer_process_all_events():
    events = build_sweep_events(demo_segments())

    renderer = PygameRenderer(width=640, height=360, fps=30)
    renderer.load_events(events)
    assert renderer.algorithm_name == "bentley_ottmann"
    assert set(renderer.scene.segments) == {"s1", "s2", "s3"}
    renderer.process_all_events()

    assert renderer.cursor == renderer.total_events
    assert renderer.completed
    assert len(renderer.found) == 5
    assert renderer.scheduled == {}
    assert renderer.status_order == []


def test_renderer_step_and_rewind():
    events = build_sweep_events(demo_segments())
    renderer = PygameRenderer(width=640, height=360, fps=30)
    renderer.load_events(events)

    renderer._advance_step()
    renderer._advance_step()
    assert renderer.last_event_type == "status"
    assert renderer.status_order == ["s1", "s2"]
    assert renderer.current_kind == "left_endpoint"
    assert list(renderer.scheduled) == [("s1", "s2")]
    second_cursor = renderer.cursor

    renderer._advance_step()
    renderer._rewind_step()
    assert renderer.cursor == second_cursor
    assert renderer.status_order == ["s1", "s2"]


def test_renderer_draws_offscreen():
    events = build_sweep_events(demo_segments())
    renderer = PygameRenderer(width=640, height=360, fps=30)
    renderer.load_events(events)
    for _ in range(4):
        renderer._advance_step()

    surface = pygame.Surface((640, 360))
    renderer.scene.draw_background(surface)
    renderer.scene.draw_segments(surface, active=renderer.status_order)
    renderer.scene.draw_sweep_line(surface, renderer.sweep_x)
    renderer.scene.draw_markers(surface, renderer._collect_markers())
    renderer._draw_hud(surface)
    assert renderer.sweep_x is not None


def test_renderer_perf_budget():
    events = build_sweep_events(gen_segments(5, 60, family="short"))
    assert len(events) >= 200

    renderer = PygameRenderer(width=640, height=360, fps=30)
    start = time.perf_counter()
    renderer.load_events(events)
    renderer.process_all_events()
    elapsed = time.perf_counter() - start

    assert elapsed < 0.5

    pygame.quit()
