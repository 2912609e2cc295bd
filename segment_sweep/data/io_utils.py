from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from segment_sweep.algs.geometry import Point, Segment
from segment_sweep.data.schemas import (
    SCHEMA_VERSION,
    compute_instance_hash,
    point_to_dict,
    segment_from_dict,
    segment_to_dict,
)


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _segments_from_entries(entries: Any) -> List[Segment]:
    if not isinstance(entries, list):
        raise ValueError("segments must be a JSON list")
    segments: List[Segment] = []
    for idx, entry in enumerate(entries):
        default_id = f"s{idx + 1}"
        if isinstance(entry, dict):
            segments.append(segment_from_dict(entry, default_id=default_id))
            continue
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError("segments must be [[[x1, y1], [x2, y2]], ...]")
        p, q = entry
        if not isinstance(p, (list, tuple)) or not isinstance(q, (list, tuple)) or len(p) != 2 or len(q) != 2:
            raise ValueError("segments must be [[[x1, y1], [x2, y2]], ...]")
        segments.append(Segment.from_coords(default_id, p, q))
    return segments


def parse_segments(seg_string: str) -> List[Segment]:
    """Parse a JSON list of ``[[x1, y1], [x2, y2]]`` pairs or segment objects."""
    return _segments_from_entries(json.loads(seg_string))


def load_segments_json(path: str | Path) -> List[Segment]:
    with Path(path).open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if isinstance(data, dict):
        data = data.get("segments")
    return _segments_from_entries(data)


def write_segments_json(
    path: str | Path,
    segments: Sequence[Segment],
    meta: Optional[Dict[str, Any]] = None,
) -> None:
    target = Path(path)
    _ensure_parent(target)
    payload: Dict[str, Any] = dict(meta or {})
    payload.setdefault("generated_at", datetime.now(timezone.utc).isoformat())
    payload["schema_version"] = SCHEMA_VERSION
    payload["instance_hash"] = compute_instance_hash(segments)
    payload["segments"] = [segment_to_dict(seg) for seg in segments]
    with target.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True, allow_nan=False)


def write_points_jsonl(path: str | Path, points: Iterable[Point]) -> None:
    target = Path(path)
    _ensure_parent(target)
    with target.open("w", encoding="utf-8") as handle:
        for point in points:
            handle.write(json.dumps(point_to_dict(point), sort_keys=True, separators=(",", ":"), allow_nan=False))
            handle.write("\n")


__all__ = [
    "parse_segments",
    "load_segments_json",
    "write_segments_json",
    "write_points_jsonl",
]
