"""entrylayout.api

Stable *library* entrypoint.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from entrylayout.adapters import (
    BoundsAdapter,
    IntervalAdapter,
    LogicalBoundsAdapter,
    TimeBoundsAdapter,
    VisualBoundsAdapter,
)
from entrylayout.geometry import (
    OverlapStrategy,
    adapter_for,
    horizontal_slot,
    resolve_day,
    row_count,
    summarize,
)
from entrylayout.interval import intersects
from entrylayout.io import dumps, entries_from_doc, load_entries, placements_to_doc
from entrylayout.model import (
    LayoutSummary,
    Placement,
    Span,
    TemporalEntry,
    identity_for,
    same_entry,
)
from entrylayout.order import by_label, chain, dragged_last
from entrylayout.resolver import build_clusters, resolve
from entrylayout.validate import LayoutArgumentError, assert_valid_entries, validate_entries
from entrylayout.viewport import DayViewport, HeightPolicy

__all__ = [
    "BoundsAdapter",
    "DayViewport",
    "HeightPolicy",
    "IntervalAdapter",
    "LayoutArgumentError",
    "LayoutSummary",
    "LogicalBoundsAdapter",
    "OverlapStrategy",
    "Placement",
    "Span",
    "TemporalEntry",
    "TimeBoundsAdapter",
    "VisualBoundsAdapter",
    "adapter_for",
    "assert_valid_entries",
    "build_clusters",
    "by_label",
    "chain",
    "dragged_last",
    "dumps",
    "entries_from_doc",
    "horizontal_slot",
    "identity_for",
    "intersects",
    "load_entries",
    "placements_to_doc",
    "resolve",
    "resolve_day",
    "row_count",
    "same_entry",
    "summarize",
    "validate_entries",
]
