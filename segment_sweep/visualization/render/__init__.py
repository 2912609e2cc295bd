"""Pygame playback of sweep event streams."""

from .pygame_renderer import PygameRenderer

__all__ = ["PygameRenderer"]
