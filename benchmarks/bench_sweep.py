from __future__ import annotations

import argparse
import math
import statistics
import time
from typing import List, Sequence, Set, Tuple

try:
    from segment_sweep.algs.bentley_ottmann import BentleyOttmann
    from segment_sweep.algs.geometry import Point
    from segment_sweep.algs.reference import brute_force_intersections
    from segment_sweep.common.constants import RNG_SEEDS, make_rng
    from segment_sweep.data.gen_instances import FAMILY_CONFIGS, draw_segments
except ImportError:  # pragma: no cover - layout fallback
    import sys
    from pathlib import Path

    REPO_ROOT = Path(__file__).resolve().parents[1]
    if str(REPO_ROOT) not in sys.path:
        sys.path.append(str(REPO_ROOT))
    from segment_sweep.algs.bentley_ottmann import BentleyOttmann
    from segment_sweep.algs.geometry import Point
    from segment_sweep.algs.reference import brute_force_intersections
    from segment_sweep.common.constants import RNG_SEEDS, make_rng
    from segment_sweep.data.gen_instances import FAMILY_CONFIGS, draw_segments


ROUND_DIGITS = 6


def parse_sizes(value: str) -> Tuple[int, ...]:
    sizes = tuple(int(p.strip()) for p in value.split(",") if p.strip())
    if not sizes or any(n <= 0 for n in sizes):
        raise argparse.ArgumentTypeError(f"expected positive comma-separated sizes, got {value!r}")
    return sizes


def percentile(sorted_values: Sequence[float], pct: float) -> float:
    if not sorted_values:
        return float("nan")
    if pct <= 0:
        return sorted_values[0]
    if pct >= 1:
        return sorted_values[-1]
    idx = (len(sorted_values) - 1) * pct
    lo = math.floor(idx)
    hi = math.ceil(idx)
    if lo == hi:
        return sorted_values[int(idx)]
    weight = idx - lo
    return sorted_values[lo] * (1.0 - weight) + sorted_values[hi] * weight


def distinct(points: Sequence[Point]) -> Set[Tuple[float, float]]:
    return {(round(p.x, ROUND_DIGITS), round(p.y, ROUND_DIGITS)) for p in points}


def run_size(args: argparse.Namespace, count: int) -> None:
    rng = make_rng(args.seed + count)
    sweep_times: List[float] = []
    brute_times: List[float] = []
    found: List[int] = []
    mismatches = 0

    for iteration in range(args.warmup + args.n):
        segments = draw_segments(rng, count, family=args.family)

        start = time.perf_counter()
        points = BentleyOttmann(segments).find_intersections()
        sweep_elapsed = time.perf_counter() - start

        start = time.perf_counter()
        oracle = brute_force_intersections(segments)
        brute_elapsed = time.perf_counter() - start

        if distinct(points) != distinct(oracle):
            mismatches += 1

        if iteration >= args.warmup:
            sweep_times.append(sweep_elapsed)
            brute_times.append(brute_elapsed)
            found.append(len(oracle))

    sweep_times.sort()
    brute_times.sort()
    print(
        f"n={count},family={args.family},"
        f"sweep_mean={statistics.fmean(sweep_times):.6f},"
        f"sweep_p50={percentile(sweep_times, 0.5):.6f},"
        f"sweep_p95={percentile(sweep_times, 0.95):.6f},"
        f"brute_mean={statistics.fmean(brute_times):.6f},"
        f"crossings_mean={statistics.fmean(found):.1f},"
        f"mismatches={mismatches}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the sweep against the all-pairs reference.")
    parser.add_argument("--n", type=int, default=50, help="Number of timed iterations per size.")
    parser.add_argument("--warmup", type=int, default=5, help="Number of warmup iterations per size.")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["bench"], help="Deterministic RNG seed.")
    parser.add_argument("--sizes", type=parse_sizes, default=parse_sizes("10,50,200"), help="Segment counts.")
    parser.add_argument("--family", choices=sorted(FAMILY_CONFIGS), default="short")
    args = parser.parse_args()

    for count in args.sizes:
        run_size(args, count)


if __name__ == "__main__":
    main()
