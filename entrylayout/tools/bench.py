#!/usr/bin/env python3
from __future__ import annotations

import argparse
import random
import statistics
import sys
import time
from typing import Callable, List, Tuple

from entrylayout.geometry import OverlapStrategy, resolve_day
from entrylayout.model import TemporalEntry, identity_for
from entrylayout.order import dragged_last
from entrylayout.viewport import DayViewport, HeightPolicy

BASE_DAY_MS = 1577836800000  # 2020-01-01T00:00:00Z
MIN_MS = 60_000


def _die(msg: str, rc: int = 2) -> int:
    print(f"[entrylayout-bench] ERROR: {msg}", file=sys.stderr)
    return rc


def _now_ns() -> int:
    return time.perf_counter_ns()


def make_day_entries(n: int, *, seed: int = 1) -> List[TemporalEntry]:
    """Deterministic synthetic day: meetings on a 5 minute grid, a few full-day
    entries, an occasional drag ghost and some hidden entries."""
    rng = random.Random(seed)
    out: List[TemporalEntry] = []
    for i in range(max(0, n)):
        key = f"bench-{seed}-{i:05d}"
        if i % 17 == 0:
            out.append(
                TemporalEntry(
                    start=BASE_DAY_MS,
                    end=BASE_DAY_MS + 1439 * MIN_MS,
                    is_full_span=True,
                    identity=identity_for(key),
                    key=key,
                )
            )
            continue
        start_min = rng.randrange(0, 22 * 60, 5)
        dur_min = rng.choice([15, 30, 30, 45, 60, 90, 120])
        e = TemporalEntry(
            start=BASE_DAY_MS + start_min * MIN_MS,
            end=BASE_DAY_MS + (start_min + dur_min) * MIN_MS,
            identity=identity_for(key),
            visible=(i % 23 != 0),
            key=key,
            label=f"bench {i}",
            pref_height=float(rng.choice([20, 40, 80])),
        )
        out.append(e)
        if i % 29 == 0:
            shift = rng.choice([-30, 15, 45]) * MIN_MS
            out.append(e.ghost(e.start + shift, e.end + shift))
    return out


def _time_one(fn: Callable[[], object], *, repeats: int, warmup: int) -> Tuple[float, float, float]:
    for _ in range(max(0, warmup)):
        fn()

    samples_ms: List[float] = []
    for _ in range(max(1, repeats)):
        t0 = _now_ns()
        fn()
        t1 = _now_ns()
        samples_ms.append((t1 - t0) / 1_000_000.0)

    return (min(samples_ms), statistics.fmean(samples_ms), max(samples_ms))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="entrylayout-bench", description="Micro-benchmark overlap resolution.")
    ap.add_argument("--n", type=int, default=200, help="Number of entries in the synthetic day")
    ap.add_argument("--seed", type=int, default=1, help="RNG seed for the synthetic day")
    ap.add_argument("--repeats", type=int, default=5, help="Measurement repeats (min/avg/max over repeats)")
    ap.add_argument("--warmup", type=int, default=1, help="Warmup runs per strategy before measuring")
    ns = ap.parse_args(argv)

    if ns.n < 0:
        return _die(f"--n must be >= 0, got {ns.n}")

    entries = make_day_entries(int(ns.n), seed=int(ns.seed))
    viewport = DayViewport(day_start_ms=BASE_DAY_MS, px_per_min=1.5, height_policy=HeightPolicy.COMPUTE_PREF_SIZE)

    print(f"[entrylayout-bench] n={ns.n} entries={len(entries)} seed={ns.seed} repeats={ns.repeats} warmup={ns.warmup}")

    for strategy in (OverlapStrategy.TIME_BOUNDS, OverlapStrategy.VISUAL_BOUNDS, OverlapStrategy.OFF):

        def _run(strategy: OverlapStrategy = strategy) -> None:
            placements = resolve_day(entries, strategy=strategy, viewport=viewport, tie_break=dragged_last)
            if len(placements) != sum(1 for e in entries if e.visible):
                raise RuntimeError(f"{strategy.value}: placement count mismatch")

        mn, av, mx = _time_one(_run, repeats=int(ns.repeats), warmup=int(ns.warmup))
        print(f"[entrylayout-bench] {strategy.value:<7} {mn:.2f}/{av:.2f}/{mx:.2f} ms (min/avg/max)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
