from __future__ import annotations

import json

import pytest

import segment_sweep.algs.geometry as geometry
from segment_sweep.visualization.demo_sweep import PRESETS, main, preset_segments, run_text


@pytest.fixture(autouse=True)
def _restore_verbose():
    previous = geometry.VERBOSE
    yield
    geometry.VERBOSE = previous


def test_presets_build_segments() -> None:
    for name, coords in PRESETS.items():
        segments = preset_segments(name)
        assert len(segments) == len(coords)
        assert segments[0].id == "s1"


def test_text_mode_prints_all_detections(capsys) -> None:
    main(["--text"])
    out = capsys.readouterr().out
    assert "Segments:" in out
    assert "Intersections (5):" in out


def test_step_mode_prints_events_and_tree(capsys) -> None:
    points = run_text(preset_segments("cross"), step=True)
    out = capsys.readouterr().out
    assert len(points) == 1
    assert "LEFT_ENDPOINT" in out
    assert "INTERSECTION" in out
    assert "<empty>" in out
    assert "(1.0000, 1.0000)" in out


def test_segments_argument(capsys) -> None:
    main(["--text", "--segments", json.dumps([[[0, 0], [2, 2]], [[0, 2], [2, 0]]])])
    out = capsys.readouterr().out
    assert "Intersections (1):" in out


def test_random_argument_is_seeded(capsys) -> None:
    main(["--text", "--random", "short", "--count", "8", "--seed", "3"])
    first = capsys.readouterr().out
    main(["--text", "--random", "short", "--count", "8", "--seed", "3"])
    assert capsys.readouterr().out == first


def test_file_argument(tmp_path, capsys) -> None:
    path = tmp_path / "segs.json"
    path.write_text(json.dumps({"segments": [[[0, 0], [2, 2]], [[0, 2], [2, 0]]]}), encoding="utf-8")
    main(["--text", "--file", str(path)])
    assert "Intersections (1):" in capsys.readouterr().out


def test_verbose_logs_engine_bookkeeping(capsys) -> None:
    main(["--text", "--verbose", "--preset", "cross"])
    out = capsys.readouterr().out
    assert "[sweep]" in out
    assert "scheduled" in out


def test_sources_are_mutually_exclusive() -> None:
    with pytest.raises(SystemExit):
        main(["--text", "--preset", "cross", "--random", "fan"])
