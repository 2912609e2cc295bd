from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from segment_sweep.algs.bentley_ottmann import BentleyOttmann, as_segments
from segment_sweep.algs.geometry import Segment
from segment_sweep.visualization.events import (
    AddSegmentEvent,
    AlgoInfoEvent,
    CancelEvent,
    DoneEvent,
    MarkIntersectionEvent,
    ScheduleEvent,
    SetSceneEvent,
    StatusEvent,
    SweepEvent,
    compute_scene_bounds,
)

SCENE_MARGIN = 0.1


def build_scene_events(
    segments: Sequence[Segment],
    *,
    margin: float = SCENE_MARGIN,
) -> List[dict]:
    x_min, x_max, y_min, y_max = compute_scene_bounds(segments, margin=margin)
    events: List[dict] = [
        SetSceneEvent(
            type="set_scene",
            x_min=float(x_min),
            x_max=float(x_max),
            y_min=float(y_min),
            y_max=float(y_max),
        )
    ]
    for seg in segments:
        events.append(
            AddSegmentEvent(
                type="add_segment",
                id=seg.id,
                x1=float(seg.start.x),
                y1=float(seg.start.y),
                x2=float(seg.end.x),
                y2=float(seg.end.y),
            )
        )
    return events


def trace_to_events(trace: Iterable[Dict[str, Any]]) -> List[dict]:
    """Flatten engine trace steps into renderer events, in processing order."""
    events: List[dict] = []
    for step in trace:
        events.append(
            SweepEvent(
                type="sweep",
                step_idx=int(step["step_idx"]),
                kind=step["kind"],
                x=float(step["x"]),
                y=float(step["y"]),
                segments=list(step["segments"]),
            )
        )
        for ids in step["cancelled"]:
            events.append(CancelEvent(type="cancel", segments=list(ids)))
        for hit in step["detected"]:
            events.append(
                MarkIntersectionEvent(
                    type="mark_intersection",
                    x=float(hit["x"]),
                    y=float(hit["y"]),
                    segments=list(hit["segments"]),
                )
            )
        for hit in step["scheduled"]:
            events.append(
                ScheduleEvent(
                    type="schedule",
                    x=float(hit["x"]),
                    y=float(hit["y"]),
                    segments=list(hit["segments"]),
                )
            )
        events.append(StatusEvent(type="status", order=list(step["status"])))
    return events


def build_sweep_events(segments: Iterable[Any]) -> List[dict]:
    seg_list = as_segments(segments)
    events: List[dict] = build_scene_events(seg_list)
    events.append(AlgoInfoEvent(type="algo_info", name="bentley_ottmann", segments=len(seg_list)))

    engine = BentleyOttmann(seg_list, trace=True)
    points = engine.find_intersections()
    events.extend(trace_to_events(engine.trace))

    events.append(DoneEvent(type="done", intersections=len(points)))
    return events


__all__ = ["build_scene_events", "build_sweep_events", "trace_to_events", "SCENE_MARGIN"]
