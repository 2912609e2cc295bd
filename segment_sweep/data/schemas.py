from __future__ import annotations

import hashlib
import json
import math
from typing import Any, Dict, List, Mapping, Sequence

from segment_sweep.algs.geometry import Point, Segment

SCHEMA_VERSION = "1.0"
HASH_PRECISION = 12


def _round_float(value: float, precision: int = HASH_PRECISION) -> float:
    rounded = round(value, precision)
    # Coerce -0.0 to +0.0 for stability
    if rounded == 0.0:
        return 0.0
    return rounded


def point_to_dict(point: Point) -> Dict[str, float]:
    return {"x": float(point.x), "y": float(point.y)}


def segment_to_dict(segment: Segment) -> Dict[str, Any]:
    return {
        "id": segment.id,
        "start": [float(segment.start.x), float(segment.start.y)],
        "end": [float(segment.end.x), float(segment.end.y)],
    }


def segment_from_dict(payload: Mapping[str, Any], default_id: str = "") -> Segment:
    try:
        x1, y1 = payload["start"]
        x2, y2 = payload["end"]
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"segment payload needs 'start' and 'end' pairs: {payload!r}") from exc
    seg_id = str(payload.get("id") or default_id)
    if not seg_id:
        raise ValueError("segment payload needs an 'id'")
    return Segment.from_coords(seg_id, (x1, y1), (x2, y2))


def canonical_segments_payload(
    segments: Sequence[Segment],
    precision: int = HASH_PRECISION,
) -> List[List[float]]:
    rows = []
    for seg in segments:
        row = [
            _round_float(seg.start.x, precision),
            _round_float(seg.start.y, precision),
            _round_float(seg.end.x, precision),
            _round_float(seg.end.y, precision),
        ]
        if not all(math.isfinite(v) for v in row):
            raise ValueError(f"segment {seg.id!r} has non-finite coordinates")
        rows.append(row)
    return sorted(rows)


def compute_instance_hash(segments: Sequence[Segment], precision: int = HASH_PRECISION) -> str:
    """Order- and id-independent SHA-256 of a segment set."""
    payload = {"segments": canonical_segments_payload(segments, precision)}
    serialized = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(serialized).hexdigest()


__all__ = [
    "SCHEMA_VERSION",
    "HASH_PRECISION",
    "point_to_dict",
    "segment_to_dict",
    "segment_from_dict",
    "canonical_segments_payload",
    "compute_instance_hash",
]
