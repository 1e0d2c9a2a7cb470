"""Argument and input validation helpers (library-facing).

The layout engine trusts its input; these checks are for callers and for the
JSON/tool boundary.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .model import TemporalEntry

ENTRIES_SCHEMA = "entrylayout.entries.v1"


class LayoutArgumentError(ValueError):
    """Raised when a call receives an argument it cannot work with."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def require_positive(value: Any, name: str) -> float:
    if not _is_number(value) or value <= 0:
        raise LayoutArgumentError(f"{name} must be a positive number, got {value!r}")
    return float(value)


def validate_entries(entries: Sequence[Any], *, label: str = "entries") -> List[str]:
    errs: List[str] = []
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        return [f"{label} must be a sequence"]

    for i, e in enumerate(entries):
        if not isinstance(e, TemporalEntry):
            errs.append(f"{label}[{i}] must be TemporalEntry, got {type(e).__name__}")
            continue
        _require(isinstance(e.is_full_span, bool), f"{label}[{i}].is_full_span must be bool", errs)
        _require(isinstance(e.visible, bool), f"{label}[{i}].visible must be bool", errs)
        if e.is_full_span:
            continue
        try:
            ordered = e.start <= e.end
        except TypeError:
            errs.append(f"{label}[{i}] start/end are not comparable")
            continue
        _require(ordered, f"{label}[{i}] start must be <= end", errs)
        if e.pref_height is not None:
            _require(
                _is_number(e.pref_height) and e.pref_height >= 0,
                f"{label}[{i}].pref_height must be a non-negative number",
                errs,
            )

    return errs


def assert_valid_entries(entries: Sequence[Any]) -> None:
    errs = validate_entries(entries)
    if errs:
        raise LayoutArgumentError(errs[0])


def validate_entries_doc(obj: Any) -> List[str]:
    """Validate an entries JSON document (see entrylayout.io)."""
    if not isinstance(obj, dict):
        return ["document must be a JSON object"]

    errs: List[str] = []
    schema = obj.get("schema", ENTRIES_SCHEMA)
    _require(schema == ENTRIES_SCHEMA, f"schema must be {ENTRIES_SCHEMA!r}, got {schema!r}", errs)

    raw = obj.get("entries")
    if not isinstance(raw, list):
        errs.append("entries must be a list")
        return errs

    seen: Dict[str, int] = {}
    for i, e in enumerate(raw):
        if not isinstance(e, dict):
            errs.append(f"entries[{i}] must be an object")
            continue
        eid = e.get("id")
        if not isinstance(eid, str) or not eid.strip():
            errs.append(f"entries[{i}].id must be non-empty string")
        elif eid in seen:
            errs.append(f"entries[{i}].id duplicates entries[{seen[eid]}]: {eid!r}")
        else:
            seen[eid] = i

        s = e.get("start_ms")
        t = e.get("end_ms")
        _require(isinstance(s, int) and not isinstance(s, bool), f"entries[{i}].start_ms must be int", errs)
        _require(isinstance(t, int) and not isinstance(t, bool), f"entries[{i}].end_ms must be int", errs)
        if isinstance(s, int) and isinstance(t, int) and t < s:
            errs.append(f"entries[{i}] end_ms must be >= start_ms")

        for k in ("full_day", "visible", "dragged"):
            if k in e:
                _require(isinstance(e[k], bool), f"entries[{i}].{k} must be bool", errs)
        if e.get("title") is not None:
            _require(isinstance(e["title"], str), f"entries[{i}].title must be string", errs)
        if e.get("pref_height_px") is not None:
            ph = e["pref_height_px"]
            _require(_is_number(ph) and ph >= 0, f"entries[{i}].pref_height_px must be a non-negative number", errs)
        if "drag_of" in e:
            _require(e.get("dragged", True) is True, f"entries[{i}].drag_of requires dragged=true", errs)

    # drag_of may point forward, so links are checked once every id is known
    for i, e in enumerate(raw):
        if not isinstance(e, dict) or "drag_of" not in e:
            continue
        src = e["drag_of"]
        if not isinstance(src, str) or src not in seen:
            errs.append(f"entries[{i}].drag_of must name an entry id, got {src!r}")
        elif src == e.get("id"):
            errs.append(f"entries[{i}].drag_of must not name the entry itself")
        elif "drag_of" in raw[seen[src]]:
            errs.append(f"entries[{i}].drag_of names another drag copy: {src!r}")

    return errs


__all__ = [
    "ENTRIES_SCHEMA",
    "LayoutArgumentError",
    "assert_valid_entries",
    "require_positive",
    "validate_entries",
    "validate_entries_doc",
]
