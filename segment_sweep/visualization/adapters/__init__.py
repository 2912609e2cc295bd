"""Adapters converting sweep traces into renderer-friendly events."""

from .sweep_adapter import build_scene_events, build_sweep_events, trace_to_events

__all__ = [
    "build_scene_events",
    "build_sweep_events",
    "trace_to_events",
]
