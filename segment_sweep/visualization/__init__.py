"""Visualization subsystem package."""

from . import adapters
from .events import compute_scene_bounds
from .tree_text import render_tree

__version__ = "0.1"

__all__ = ["__version__", "adapters", "compute_scene_bounds", "render_tree"]
