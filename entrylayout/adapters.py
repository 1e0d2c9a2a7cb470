"""Interval adapters: how an entry maps onto the comparison axis.

Clustering and column assignment are written once against IntervalAdapter;
the adapters below supply the three notions of overlap used by calendar
views:

  LogicalBoundsAdapter  raw start/end, whatever the axis
  TimeBoundsAdapter     epoch ms, full-day entries cover their whole days
  VisualBoundsAdapter   rendered pixels, full-day entries cover the view
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Callable, Optional, Protocol, Tuple

from .model import Span, TemporalEntry, same_entry
from .util.tz import day_bounds_ms, normalize_tz_name, resolve_tz
from .validate import LayoutArgumentError, require_positive

Extent = Callable[[TemporalEntry], Tuple[float, float]]


class IntervalAdapter(Protocol):
    def span(self, entry: TemporalEntry) -> Span:
        """Effective interval of entry for overlap purposes."""

    def same_entry(self, a: TemporalEntry, b: TemporalEntry) -> bool:
        """True when a and b represent one logical entry."""


class BoundsAdapter:
    """Base adapter: full-span entries get full_span_bounds(), others bounds()."""

    def bounds(self, entry: TemporalEntry) -> Tuple[Any, Any]:
        return entry.start, entry.end

    def full_span_bounds(self, entry: TemporalEntry) -> Tuple[Any, Any]:
        return self.bounds(entry)

    def span(self, entry: TemporalEntry) -> Span:
        if entry.is_full_span:
            lo, hi = self.full_span_bounds(entry)
        else:
            lo, hi = self.bounds(entry)
        return Span(lo, hi)

    def same_entry(self, a: TemporalEntry, b: TemporalEntry) -> bool:
        return same_entry(a, b)


class LogicalBoundsAdapter(BoundsAdapter):
    """Entries already carry their full logical bounds; is_full_span is ignored."""


class TimeBoundsAdapter(BoundsAdapter):
    def __init__(self, tz: Optional[str] = "UTC") -> None:
        self.tz_name = normalize_tz_name(tz)
        try:
            self.tzinfo: dt.tzinfo = resolve_tz(self.tz_name)
        except ValueError as ex:
            raise LayoutArgumentError(str(ex)) from ex

    def full_span_bounds(self, entry: TemporalEntry) -> Tuple[int, int]:
        return day_bounds_ms(int(entry.start), int(entry.end), self.tzinfo)

    def __repr__(self) -> str:
        return f"TimeBoundsAdapter(tz={self.tz_name!r})"


class VisualBoundsAdapter(BoundsAdapter):
    """Pixel axis of a rendered day view.

    extent maps an entry to its rendered (y1, y2); without it the entry's own
    start/end are taken as pixels. Full-span entries cover [0, view_height].
    """

    def __init__(self, view_height: Any, extent: Optional[Extent] = None) -> None:
        self.view_height = require_positive(view_height, "view_height")
        self.extent = extent

    def bounds(self, entry: TemporalEntry) -> Tuple[Any, Any]:
        if self.extent is not None:
            return self.extent(entry)
        return entry.start, entry.end

    def full_span_bounds(self, entry: TemporalEntry) -> Tuple[float, float]:
        return 0.0, self.view_height

    def __repr__(self) -> str:
        return f"VisualBoundsAdapter(view_height={self.view_height!r})"


LOGICAL_BOUNDS = LogicalBoundsAdapter()


__all__ = [
    "BoundsAdapter",
    "Extent",
    "IntervalAdapter",
    "LOGICAL_BOUNDS",
    "LogicalBoundsAdapter",
    "TimeBoundsAdapter",
    "VisualBoundsAdapter",
]
