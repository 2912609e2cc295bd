"""Instance generation and (de)serialisation for segment sets."""

from .gen_instances import FAMILY_CONFIGS, FamilyConfig, draw_segments
from .io_utils import load_segments_json, parse_segments, write_points_jsonl, write_segments_json
from .schemas import compute_instance_hash, point_to_dict, segment_from_dict, segment_to_dict

__all__ = [
    "FamilyConfig",
    "FAMILY_CONFIGS",
    "draw_segments",
    "parse_segments",
    "load_segments_json",
    "write_segments_json",
    "write_points_jsonl",
    "segment_to_dict",
    "segment_from_dict",
    "point_to_dict",
    "compute_instance_hash",
]
