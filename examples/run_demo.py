#!/usr/bin/env python3
"""examples/run_demo.py – the three-segment Bentley–Ottmann walkthrough.

Run this file directly, or execute `python -m examples.run_demo` from the project
root.  It builds three crossing segments, runs the sweep with verbose engine
logging and prints every recorded intersection point.
"""

from __future__ import annotations

import time

import segment_sweep.algs.geometry as geometry
from segment_sweep import BentleyOttmann, Point, Segment

# Activate verbose internal logging so the user can see the sweep's bookkeeping.
geometry.VERBOSE = True

SEP = "=" * 80


def main() -> None:
    print(f"\n{SEP}\nBentley–Ottmann – three segments\n{SEP}\n")
    s1 = Segment("s1", Point(0, 4), Point(14, 5))
    s2 = Segment("s2", Point(2, 7), Point(12, 0))
    s3 = Segment("s3", Point(5, 0), Point(11, 6))

    t0 = time.perf_counter()
    intersections = BentleyOttmann([s1, s2, s3]).find_intersections()
    dt = time.perf_counter() - t0

    print(f"\nResult: {len(intersections)} recorded point(s)")
    for point in intersections:
        print(f"   ({point.x:.4f}, {point.y:.4f})")
    print(f"Elapsed: {dt * 1e3:.3f} ms")


if __name__ == "__main__":
    main()
