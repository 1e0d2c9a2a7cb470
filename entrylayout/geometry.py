# entrylayout/geometry.py
from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import Iterable, List, Optional, Sequence, Tuple

from .adapters import IntervalAdapter, TimeBoundsAdapter, VisualBoundsAdapter
from .model import LayoutSummary, Placement, TemporalEntry
from .order import TieBreak
from .resolver import resolve
from .viewport import DayViewport
from .validate import LayoutArgumentError


class OverlapStrategy(Enum):
    TIME_BOUNDS = "time"
    VISUAL_BOUNDS = "visual"
    OFF = "off"


def adapter_for(
    strategy: OverlapStrategy,
    *,
    viewport: Optional[DayViewport] = None,
    tz: Optional[str] = "UTC",
) -> IntervalAdapter:
    if strategy is OverlapStrategy.VISUAL_BOUNDS:
        if viewport is None:
            raise LayoutArgumentError("VISUAL_BOUNDS needs a viewport")
        return VisualBoundsAdapter(viewport.height, extent=viewport.extent)
    return TimeBoundsAdapter(tz)


def resolve_day(
    entries: Iterable[TemporalEntry],
    *,
    strategy: OverlapStrategy = OverlapStrategy.TIME_BOUNDS,
    viewport: Optional[DayViewport] = None,
    tz: Optional[str] = "UTC",
    tie_break: Optional[TieBreak] = None,
) -> List[Placement]:
    """Resolve one day column of a calendar view.

    OFF skips overlap resolution: every visible entry gets the full width
    (column 0 of 1) and its own cluster, in time order.
    """
    adapter = adapter_for(strategy, viewport=viewport, tz=tz)
    if strategy is not OverlapStrategy.OFF:
        return resolve(entries, adapter, tie_break)

    visible = [e for e in entries if e.visible]
    starts = {id(e): adapter.span(e).start for e in visible}

    def _cmp(a: TemporalEntry, b: TemporalEntry) -> int:
        sa, sb = starts[id(a)], starts[id(b)]
        if sa != sb:
            return -1 if sa < sb else 1
        return tie_break(a, b) if tie_break is not None else 0

    visible.sort(key=cmp_to_key(_cmp))
    return [Placement(e, 0, 1, i) for i, e in enumerate(visible)]


def horizontal_slot(placement: Placement, content_x: float, content_width: float) -> Tuple[float, float]:
    """(x, width) of a placement inside a content area."""
    width = content_width / placement.column_count
    return content_x + placement.column_index * width, width


def row_count(placements: Sequence[Placement]) -> int:
    """Rows needed when placements are stacked vertically (full-day strip)."""
    if not placements:
        return 0
    return max(p.column_index for p in placements) + 1


def summarize(placements: Sequence[Placement]) -> LayoutSummary:
    clusters = {p.cluster_index for p in placements}
    return LayoutSummary(
        entry_count=len(placements),
        cluster_count=len(clusters),
        max_columns=max((p.column_count for p in placements), default=0),
        overlap_count=sum(1 for p in placements if p.column_count > 1),
    )


__all__ = [
    "OverlapStrategy",
    "adapter_for",
    "horizontal_slot",
    "resolve_day",
    "row_count",
    "summarize",
]
