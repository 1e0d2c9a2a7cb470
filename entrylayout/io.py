"""Load entries / dump placements as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .geometry import horizontal_slot, summarize
from .model import Placement, TemporalEntry, identity_for
from .util.console import warn
from .validate import ENTRIES_SCHEMA, validate_entries_doc

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

PLACEMENTS_SCHEMA = "entrylayout.placements.v1"


def entries_from_doc(obj: Any) -> List[TemporalEntry]:
    errs = validate_entries_doc(obj)
    if errs:
        raise ValueError("Invalid entries document:\n" + "\n".join(f"  - {e}" for e in errs))

    out: List[TemporalEntry] = []
    for raw in obj["entries"]:
        eid = raw["id"]
        start_ms = int(raw["start_ms"])
        end_ms = int(raw["end_ms"])
        full_day = bool(raw.get("full_day", False))
        if full_day and start_ms == end_ms:
            warn("entrylayout.io", f"full-day entry with empty interval id={eid!r}")
        pref = raw.get("pref_height_px")
        out.append(
            TemporalEntry(
                start=start_ms,
                end=end_ms,
                is_full_span=full_day,
                identity=identity_for(eid, raw.get("drag_of")),
                visible=bool(raw.get("visible", True)),
                key=eid,
                label=raw.get("title"),
                dragged=bool(raw.get("dragged", "drag_of" in raw)),
                pref_height=float(pref) if pref is not None else None,
            )
        )
    return out


def load_entries(path: Path) -> List[TemporalEntry]:
    obj = json.loads(Path(path).read_text(encoding="utf-8", errors="replace"))
    return entries_from_doc(obj)


def _placement_to_dict(p: Placement, *, content_width: float = 1.0) -> Dict[str, Any]:
    x, width = horizontal_slot(p, 0.0, content_width)
    return {
        "id": p.entry.key,
        "cluster_index": p.cluster_index,
        "column_index": p.column_index,
        "column_count": p.column_count,
        "x": x,
        "width": width,
    }


def placements_to_doc(placements: Sequence[Placement], *, content_width: float = 1.0) -> Dict[str, Any]:
    s = summarize(placements)
    return {
        "schema": PLACEMENTS_SCHEMA,
        "placements": [_placement_to_dict(p, content_width=content_width) for p in placements],
        "summary": {
            "entry_count": s.entry_count,
            "cluster_count": s.cluster_count,
            "max_columns": s.max_columns,
            "overlap_count": s.overlap_count,
        },
    }


def dumps(doc: Dict[str, Any]) -> str:
    if orjson is not None:
        return orjson.dumps(doc, option=orjson.OPT_SORT_KEYS).decode("utf-8")
    return json.dumps(doc, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


__all__ = [
    "ENTRIES_SCHEMA",
    "PLACEMENTS_SCHEMA",
    "dumps",
    "entries_from_doc",
    "load_entries",
    "placements_to_doc",
]
