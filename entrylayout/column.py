# entrylayout/column.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .adapters import IntervalAdapter
from .interval import spans_intersect
from .model import Span, TemporalEntry


@dataclass(frozen=True)
class Member:
    """An entry together with its effective span, computed once per resolve."""

    entry: TemporalEntry
    span: Span


class Column:
    """Entries sharing one horizontal slot; different entries never collide."""

    def __init__(self, adapter: IntervalAdapter) -> None:
        self._adapter = adapter
        self._members: List[Member] = []

    def has_room_for(self, candidate: Member) -> bool:
        for other in self._members:
            if self._adapter.same_entry(candidate.entry, other.entry):
                continue
            if spans_intersect(candidate.span, other.span):
                return False
        return True

    def add(self, candidate: Member) -> None:
        self._members.append(candidate)

    def members(self) -> Tuple[Member, ...]:
        return tuple(self._members)

    def __len__(self) -> int:
        return len(self._members)
