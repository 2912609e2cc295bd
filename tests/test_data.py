from __future__ import annotations

import json

import pytest

from segment_sweep.algs.geometry import Point, Segment
from segment_sweep.data import (
    FAMILY_CONFIGS,
    FamilyConfig,
    compute_instance_hash,
    draw_segments,
    load_segments_json,
    parse_segments,
    segment_from_dict,
    segment_to_dict,
    write_points_jsonl,
    write_segments_json,
)
from tests.test_utils import demo_segments, rng


@pytest.mark.parametrize("family", sorted(FAMILY_CONFIGS))
def test_draw_segments_is_seeded(family) -> None:
    first = draw_segments(rng(7), 10, family=family)
    second = draw_segments(rng(7), 10, family=family)
    assert [seg.id for seg in first] == [f"s{i}" for i in range(1, 11)]
    assert [(s.start, s.end) for s in first] == [(s.start, s.end) for s in second]
    cfg = FAMILY_CONFIGS[family]
    for seg in first:
        assert seg.end.x - seg.start.x >= cfg.min_dx


def test_draw_segments_rejects_bad_arguments() -> None:
    with pytest.raises(ValueError):
        draw_segments(rng(0), -1)
    with pytest.raises(ValueError):
        draw_segments(rng(0), 3, family="spiral")
    assert draw_segments(rng(0), 0) == []


def test_family_config_validation() -> None:
    with pytest.raises(ValueError):
        FamilyConfig(x_range=(1.0, 1.0))
    with pytest.raises(ValueError):
        FamilyConfig(length_range=(0.0, 1.0))
    with pytest.raises(ValueError):
        FamilyConfig(min_dx=0.0)


def test_segment_dict_roundtrip_keeps_id() -> None:
    seg = Segment("edge", Point(1.0, 2.0), Point(3.0, -1.0))
    payload = segment_to_dict(seg)
    assert payload == {"id": "edge", "start": [1.0, 2.0], "end": [3.0, -1.0]}
    back = segment_from_dict(payload)
    assert back.id == "edge"
    assert (back.start, back.end) == (seg.start, seg.end)


def test_segment_from_dict_errors() -> None:
    with pytest.raises(ValueError):
        segment_from_dict({"id": "x", "start": [0, 0]})
    with pytest.raises(ValueError):
        segment_from_dict({"start": [0, 0], "end": [1, 1]})
    assert segment_from_dict({"start": [0, 0], "end": [1, 1]}, default_id="s9").id == "s9"


def test_instance_hash_ignores_order_and_ids() -> None:
    segments = demo_segments()
    renamed = [Segment(f"z{i}", s.start, s.end) for i, s in enumerate(reversed(segments))]
    assert compute_instance_hash(segments) == compute_instance_hash(renamed)
    moved = [Segment("s1", Point(0, 4), Point(14, 5.5))] + segments[1:]
    assert compute_instance_hash(moved) != compute_instance_hash(segments)


def test_parse_segments_accepts_pairs_and_objects() -> None:
    segments = parse_segments('[[[0, 0], [2, 2]], {"id": "b", "start": [2, 0], "end": [0, 2]}]')
    assert [seg.id for seg in segments] == ["s1", "b"]
    assert segments[1].start == Point(0.0, 2.0)
    with pytest.raises(ValueError):
        parse_segments('{"segments": []}')
    with pytest.raises(ValueError):
        parse_segments("[[0, 0, 1, 1]]")


def test_write_and_load_segments(tmp_path) -> None:
    path = tmp_path / "nested" / "demo.json"
    write_segments_json(path, demo_segments(), meta={"family": "demo"})
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["family"] == "demo"
    assert payload["instance_hash"] == compute_instance_hash(demo_segments())
    assert "generated_at" in payload

    loaded = load_segments_json(path)
    assert [seg.id for seg in loaded] == ["s1", "s2", "s3"]
    assert [(s.start, s.end) for s in loaded] == [(s.start, s.end) for s in demo_segments()]


def test_load_bare_list(tmp_path) -> None:
    path = tmp_path / "bare.json"
    path.write_text("[[[0, 0], [1, 1]], [[0, 1], [1, 0]]]", encoding="utf-8")
    assert len(load_segments_json(path)) == 2


def test_write_points_jsonl(tmp_path) -> None:
    path = tmp_path / "points.jsonl"
    write_points_jsonl(path, [Point(1.0, 1.0), Point(2.5, -3.0)])
    rows = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert rows == [{"x": 1.0, "y": 1.0}, {"x": 2.5, "y": -3.0}]
