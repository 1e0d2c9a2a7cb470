# entrylayout/model.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Hashable, Optional


@dataclass(frozen=True)
class TemporalEntry:
    """Read-only view of what one calendar entry occupies on an axis.

    start/end are points on the comparison axis: epoch milliseconds for the
    time axis, pixels for the visual axis. The engine never mutates entries;
    placements refer back to the exact object passed in.

    identity is an opaque key for the "same logical entry" check. Two entries
    with equal (non-None) identity never collide with each other, which lets
    a dragged ghost share a column with its frozen original.
    """

    start: Any
    end: Any
    is_full_span: bool = False
    identity: Optional[Hashable] = None
    visible: bool = True

    key: Optional[str] = None
    label: Optional[str] = None
    dragged: bool = False
    pref_height: Optional[float] = None  # pixels, COMPUTE_PREF_SIZE only

    def ghost(self, start: Any, end: Any) -> "TemporalEntry":
        """Transient drag copy of this entry at new bounds."""
        key = f"{self.key}:ghost" if self.key is not None else None
        return replace(self, start=start, end=end, dragged=True, key=key)


@dataclass(frozen=True)
class Span:
    start: Any
    end: Any


@dataclass(frozen=True)
class Placement:
    entry: TemporalEntry
    column_index: int
    column_count: int
    cluster_index: int = 0

    @property
    def width_fraction(self) -> float:
        return 1.0 / self.column_count

    @property
    def offset_fraction(self) -> float:
        return self.column_index / self.column_count


@dataclass(frozen=True)
class LayoutSummary:
    entry_count: int
    cluster_count: int
    max_columns: int
    overlap_count: int


def identity_for(entry_id: Optional[Hashable], drag_of: Optional[Hashable] = None) -> Optional[Hashable]:
    """Identity of a calendar entry.

    A drag copy takes the identity of the entry it was dragged from. Every
    other entry, including each instance of a recurring series, is its own
    id, so overlapping instances of one series still collide.
    """
    if drag_of is not None:
        return ("entry", drag_of)
    if entry_id is None:
        return None
    return ("entry", entry_id)


def same_entry(a: TemporalEntry, b: TemporalEntry) -> bool:
    if a.identity is None or b.identity is None:
        return False
    return a.identity == b.identity


__all__ = [
    "TemporalEntry",
    "Span",
    "Placement",
    "LayoutSummary",
    "identity_for",
    "same_entry",
]
