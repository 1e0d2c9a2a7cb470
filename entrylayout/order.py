# entrylayout/order.py
from __future__ import annotations

from typing import Callable, Optional

from .model import TemporalEntry

# cmp-style: negative when a sorts first, 0 when tied, positive otherwise
TieBreak = Callable[[TemporalEntry, TemporalEntry], int]


def dragged_last(a: TemporalEntry, b: TemporalEntry) -> int:
    """Keep a drag ghost after its equal-start peers (drawn on top)."""
    return int(a.dragged) - int(b.dragged)


def by_label(a: TemporalEntry, b: TemporalEntry) -> int:
    la = a.label or ""
    lb = b.label or ""
    if la < lb:
        return -1
    if la > lb:
        return 1
    return 0


def chain(*comparators: Optional[TieBreak]) -> TieBreak:
    cmps = [c for c in comparators if c is not None]

    def _cmp(a: TemporalEntry, b: TemporalEntry) -> int:
        for c in cmps:
            r = c(a, b)
            if r:
                return r
        return 0

    return _cmp


__all__ = ["TieBreak", "by_label", "chain", "dragged_last"]
