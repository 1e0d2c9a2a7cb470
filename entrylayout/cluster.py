# entrylayout/cluster.py
from __future__ import annotations

from typing import Any, List, Optional

from .adapters import IntervalAdapter
from .column import Column, Member
from .interval import envelope_overlaps
from .model import Placement


class Cluster:
    """Entries connected through overlap, laid out in greedy columns.

    Membership is tested against the running [start, end] envelope rather
    than pairwise, so entries linked only through an intermediate entry end
    up in the same cluster.
    """

    def __init__(self, adapter: IntervalAdapter, index: int = 0) -> None:
        self.index = index
        self._adapter = adapter
        self._members: List[Member] = []
        self._start: Optional[Any] = None
        self._end: Optional[Any] = None
        self.columns: List[Column] = []

    @property
    def envelope(self) -> Optional[tuple]:
        if not self._members:
            return None
        return self._start, self._end

    @property
    def column_count(self) -> int:
        if not self.columns:
            return -1
        return len(self.columns)

    def members(self) -> List[Member]:
        return list(self._members)

    def intersects(self, candidate: Member) -> bool:
        if not self._members:
            # an empty cluster is seeded by whatever comes first
            return True
        return envelope_overlaps(candidate.span, self._start, self._end)

    def add(self, candidate: Member) -> None:
        self._members.append(candidate)
        span = candidate.span
        if self._start is None or span.start < self._start:
            self._start = span.start
        if self._end is None or span.end > self._end:
            self._end = span.end

    def resolve(self) -> List[Placement]:
        if not self._members:
            return []

        columns = [Column(self._adapter)]
        for m in self._members:
            for col in columns:
                if col.has_room_for(m):
                    col.add(m)
                    break
            else:
                col = Column(self._adapter)
                col.add(m)
                columns.append(col)
        self.columns = columns

        count = len(columns)
        out: List[Placement] = []
        for col_index, col in enumerate(columns):
            for m in col.members():
                out.append(Placement(m.entry, col_index, count, self.index))
        return out
