#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List

from entrylayout.adapters import LogicalBoundsAdapter
from entrylayout.geometry import OverlapStrategy, resolve_day
from entrylayout.io import dumps, load_entries, placements_to_doc
from entrylayout.order import by_label, chain, dragged_last
from entrylayout.resolver import resolve
from entrylayout.util.timeparse import parse_date_yyyy_mm_dd, parse_workhours
from entrylayout.util.tz import date_from_ms, normalize_tz_name, resolve_tz
from entrylayout.viewport import DayViewport, HeightPolicy

_STRATEGIES = ("time", "visual", "off", "logical")


def _die(msg: str, rc: int = 2) -> int:
    print(f"[entrylayout-resolve] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="entrylayout-resolve",
        description="Resolve overlapping calendar entries into side-by-side columns.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Entries JSON path (entrylayout.entries.v1)")
    ap.add_argument("--out", default="-", help="Output JSON path, '-' for stdout (default: -)")
    ap.add_argument("--strategy", choices=_STRATEGIES, default="time", help="Overlap strategy (default: time)")
    ap.add_argument(
        "--tz",
        default=os.getenv("ENTRYLAYOUT_TZ", "UTC"),
        help="Timezone for day boundaries (default: env ENTRYLAYOUT_TZ or 'UTC')",
    )
    ap.add_argument("--day", default=None, help="Day YYYY-MM-DD for the visual view (default: day of first entry)")
    ap.add_argument("--workhours", default="00:00-24:00", help="Visible window, e.g. 06:00-23:00")
    ap.add_argument("--px-per-min", type=float, default=1.0, help="Vertical scale in pixels per minute (default: 1.0)")
    ap.add_argument("--pref-size", action="store_true", help="Use entries' pref_height_px for their rendered height")
    ap.add_argument("--content-width", type=float, default=1.0, help="Width used for x/width output (default: 1.0)")
    ap.add_argument("--no-tie-break", action="store_true", help="Keep input order for equal starts")
    ns = ap.parse_args(argv)

    in_path = Path(ns.in_json)
    if not in_path.exists():
        return _die(f"Missing input JSON: {in_path}")
    try:
        entries = load_entries(in_path)
    except ValueError as e:
        return _die(str(e))

    tie_break = None if ns.no_tie_break else chain(by_label, dragged_last)
    tz_name = normalize_tz_name(ns.tz)

    try:
        if ns.strategy == "logical":
            placements = resolve(entries, LogicalBoundsAdapter(), tie_break)
        elif ns.strategy == "visual":
            tzinfo = resolve_tz(tz_name)
            if ns.day:
                day = parse_date_yyyy_mm_dd(ns.day)
            elif entries:
                day = date_from_ms(min(int(e.start) for e in entries), tzinfo)
            else:
                return _die("--day is required when the input has no entries")
            work_start, work_end = parse_workhours(ns.workhours)
            cfg = {
                "tz": tz_name,
                "work_start_min": work_start,
                "work_end_min": work_end,
                "px_per_min": ns.px_per_min,
            }
            policy = HeightPolicy.COMPUTE_PREF_SIZE if ns.pref_size else HeightPolicy.FIXED
            viewport = DayViewport.from_cfg(cfg, day, height_policy=policy)
            placements = resolve_day(
                entries,
                strategy=OverlapStrategy.VISUAL_BOUNDS,
                viewport=viewport,
                tz=tz_name,
                tie_break=tie_break,
            )
        else:
            placements = resolve_day(
                entries,
                strategy=OverlapStrategy(ns.strategy),
                tz=tz_name,
                tie_break=tie_break,
            )
    except ValueError as e:
        return _die(str(e))

    text = dumps(placements_to_doc(placements, content_width=float(ns.content_width)))
    if ns.out == "-":
        print(text)
    else:
        out_path = Path(ns.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        print(str(out_path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
