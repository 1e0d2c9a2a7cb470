# entrylayout/interval.py
from __future__ import annotations

from typing import Any

from .model import Span


def intersects(a_start: Any, a_end: Any, b_start: Any, b_end: Any) -> bool:
    """Overlap test used for column collisions.

    Two intervals sharing an exact start or an exact end always intersect,
    even when one of them has zero length; otherwise the half-open test
    applies, so back-to-back intervals (a_end == b_start) do not.
    """
    if a_start == b_start or a_end == b_end:
        return True
    return a_start < b_end and a_end > b_start


def spans_intersect(a: Span, b: Span) -> bool:
    return intersects(a.start, a.end, b.start, b.end)


def envelope_overlaps(span: Span, lo: Any, hi: Any) -> bool:
    # strict test against an accumulated envelope, no endpoint special case
    return span.start < hi and span.end > lo
