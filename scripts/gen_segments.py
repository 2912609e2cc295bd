#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from segment_sweep.algs.bentley_ottmann import BentleyOttmann
from segment_sweep.common.constants import RNG_SEEDS, make_rng
from segment_sweep.data.gen_instances import FAMILY_CONFIGS, draw_segments
from segment_sweep.data.io_utils import write_points_jsonl, write_segments_json


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate random segment instances")
    parser.add_argument("--out", type=Path, required=True, help="Output directory")
    parser.add_argument("--family", choices=sorted(FAMILY_CONFIGS), default="uniform")
    parser.add_argument("--count", type=int, default=20, help="Segments per instance")
    parser.add_argument("--instances", type=int, default=5, help="Number of instances")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["data"])
    parser.add_argument("--solve", action="store_true", help="Also write the sweep's points as JSONL")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.count <= 0 or args.instances <= 0:
        print("--count and --instances must be positive", file=sys.stderr)
        return 2

    rng = make_rng(args.seed)
    for idx in range(args.instances):
        segments = draw_segments(rng, args.count, family=args.family)
        stem = f"{args.family}_{idx:04d}"
        meta = {"family": args.family, "seed": args.seed, "index": idx}
        write_segments_json(args.out / f"{stem}.json", segments, meta=meta)
        if args.solve:
            points = BentleyOttmann(segments).find_intersections()
            write_points_jsonl(args.out / f"{stem}.points.jsonl", points)
        print(f"[gen] wrote {stem} ({len(segments)} segments)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
