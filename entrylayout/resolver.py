"""Overlap resolution: entries in, placements out.

resolve() is a pure function of its arguments. It sorts the visible entries
by effective start, groups them into clusters of transitively overlapping
entries and lets every cluster assign its members to columns.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List, Optional

from .adapters import LOGICAL_BOUNDS, IntervalAdapter
from .cluster import Cluster
from .column import Member
from .model import Placement, TemporalEntry
from .order import TieBreak


def _sorted_members(
    entries: Iterable[TemporalEntry],
    adapter: IntervalAdapter,
    tie_break: Optional[TieBreak],
) -> List[Member]:
    members = [Member(e, adapter.span(e)) for e in entries if e.visible]

    def _cmp(a: Member, b: Member) -> int:
        if a.span.start < b.span.start:
            return -1
        if a.span.start > b.span.start:
            return 1
        if tie_break is not None:
            return tie_break(a.entry, b.entry)
        return 0

    # list.sort is stable, so ties without a tie-break keep input order
    members.sort(key=cmp_to_key(_cmp))
    return members


def build_clusters(
    entries: Iterable[TemporalEntry],
    adapter: Optional[IntervalAdapter] = None,
    tie_break: Optional[TieBreak] = None,
) -> List[Cluster]:
    adapter = adapter or LOGICAL_BOUNDS
    clusters: List[Cluster] = []
    current: Optional[Cluster] = None
    for m in _sorted_members(entries, adapter, tie_break):
        if current is None or not current.intersects(m):
            current = Cluster(adapter, index=len(clusters))
            clusters.append(current)
        current.add(m)
    return clusters


def resolve(
    entries: Iterable[TemporalEntry],
    adapter: Optional[IntervalAdapter] = None,
    tie_break: Optional[TieBreak] = None,
) -> List[Placement]:
    """Assign every visible entry a column inside its overlap cluster.

    adapter decides what an entry occupies (default: raw start/end).
    tie_break orders entries with equal effective start.

    Returns one Placement per visible entry, cluster by cluster, and within
    a cluster column by column.
    """
    placements: List[Placement] = []
    for c in build_clusters(entries, adapter, tie_break):
        placements.extend(c.resolve())
    return placements
