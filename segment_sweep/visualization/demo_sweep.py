from __future__ import annotations

import argparse
from typing import Iterable, List

import segment_sweep.algs.geometry as geometry
from segment_sweep.algs.bentley_ottmann import BentleyOttmann
from segment_sweep.algs.geometry import Point, Segment
from segment_sweep.common.constants import DEFAULT_SEED, make_rng
from segment_sweep.data.gen_instances import FAMILY_CONFIGS, draw_segments
from segment_sweep.data.io_utils import load_segments_json, parse_segments
from segment_sweep.visualization.adapters import build_sweep_events
from segment_sweep.visualization.render import PygameRenderer
from segment_sweep.visualization.tree_text import render_tree

PRESETS = {
    "demo": [
        ((0.0, 4.0), (14.0, 5.0)),
        ((2.0, 7.0), (12.0, 0.0)),
        ((5.0, 0.0), (11.0, 6.0)),
    ],
    "cross": [
        ((0.0, 0.0), (2.0, 2.0)),
        ((0.0, 2.0), (2.0, 0.0)),
    ],
    "ladder": [
        ((0.0, 0.0), (10.0, 5.0)),
        ((0.0, 5.0), (10.0, 0.0)),
        ((1.0, 1.0), (9.0, 1.5)),
        ((1.0, 4.0), (9.0, 3.5)),
        ((3.0, 2.2), (7.0, 2.9)),
    ],
}


def preset_segments(name: str) -> List[Segment]:
    return [
        Segment.from_coords(f"s{idx + 1}", p, q)
        for idx, (p, q) in enumerate(PRESETS[name])
    ]


def _fmt_point(x: float, y: float) -> str:
    return f"({x:.4f}, {y:.4f})"


def run_text(segments: List[Segment], *, step: bool = False) -> List[Point]:
    """Run the sweep and print the result; with ``step`` dump the status tree per event."""
    print("Segments:")
    for seg in segments:
        print(f"   {seg.id}: {_fmt_point(seg.start.x, seg.start.y)} -> {_fmt_point(seg.end.x, seg.end.y)}")
    print()

    engine = BentleyOttmann(segments)
    if step:
        while True:
            event = engine.step()
            if event is None:
                break
            ids = ",".join(seg.id for seg in event.segments)
            print(f"{event.kind.name:<15} [{ids}] at {_fmt_point(event.point.x, event.point.y)}")
            tree_text = render_tree(engine.status.root, fmt=lambda s: f"{s.id} ({s.value:.3f})")
            print(tree_text if tree_text else "   <empty>")
        points = engine.intersections
    else:
        points = engine.find_intersections()

    print(f"\nIntersections ({len(points)}):")
    for point in points:
        print(f"   {_fmt_point(point.x, point.y)}")
    return points


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Bentley-Ottmann sweep-line demo")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--preset", choices=PRESETS.keys(), default="demo")
    source.add_argument("--segments", type=str, help="JSON list of [[x1, y1], [x2, y2]] pairs")
    source.add_argument("--file", type=str, help="JSON file written by scripts/gen_segments.py")
    source.add_argument("--random", choices=sorted(FAMILY_CONFIGS), help="Draw a random instance family")
    parser.add_argument("--count", type=int, default=12, help="Segment count for --random")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for --random")
    parser.add_argument("--text", action="store_true", help="Print results instead of opening a window")
    parser.add_argument("--step", action="store_true", help="Print the status tree after every event")
    parser.add_argument("--verbose", action="store_true", help="Log engine bookkeeping")
    parser.add_argument("--manual", action="store_true", help="Start with autoplay disabled")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.segments:
        segments = parse_segments(args.segments)
    elif args.file:
        segments = load_segments_json(args.file)
    elif args.random:
        segments = draw_segments(make_rng(args.seed), args.count, family=args.random)
    else:
        segments = preset_segments(args.preset)

    geometry.VERBOSE = args.verbose

    if args.text or args.step:
        run_text(segments, step=args.step)
        return

    events = build_sweep_events(segments)
    renderer = PygameRenderer()
    renderer.load_events(events)
    renderer.run(autoplay=not args.manual)


if __name__ == "__main__":
    main()
