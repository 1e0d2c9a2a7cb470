# entrylayout/viewport.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .model import TemporalEntry
from .util.tz import midnight_epoch_ms, normalize_tz_name, resolve_tz
from .validate import LayoutArgumentError, require_positive

MIN_MS = 60_000


class HeightPolicy(Enum):
    FIXED = "fixed"
    COMPUTE_PREF_SIZE = "compute_pref_size"


@dataclass(frozen=True)
class DayViewport:
    """Vertical projection of one day's visible window onto pixels.

    The window runs from work_start_min to work_end_min (minutes after
    day_start_ms) at px_per_min pixels per minute. Instants outside the
    window project outside [0, height].
    """

    day_start_ms: int
    work_start_min: int = 0
    work_end_min: int = 1440
    px_per_min: float = 1.0
    height_policy: HeightPolicy = HeightPolicy.FIXED

    def __post_init__(self) -> None:
        require_positive(self.px_per_min, "px_per_min")
        if not (0 <= self.work_start_min < self.work_end_min <= 1440):
            raise LayoutArgumentError(
                f"visible window must satisfy 0 <= start < end <= 1440, "
                f"got {self.work_start_min}-{self.work_end_min}"
            )

    @property
    def window_start_ms(self) -> int:
        return int(self.day_start_ms) + int(self.work_start_min) * MIN_MS

    @property
    def height(self) -> float:
        return (self.work_end_min - self.work_start_min) * float(self.px_per_min)

    def location(self, ms: int) -> float:
        return (int(ms) - self.window_start_ms) / MIN_MS * float(self.px_per_min)

    def extent(self, entry: TemporalEntry) -> Tuple[float, float]:
        """Rendered (y1, y2) of an entry whose start/end are epoch ms."""
        y1 = self.location(entry.start)
        y2 = self.location(entry.end)
        if self.height_policy is HeightPolicy.COMPUTE_PREF_SIZE and entry.pref_height is not None:
            y2 = y1 + float(entry.pref_height)
        return y1, y2

    @classmethod
    def from_cfg(
        cls,
        cfg: Dict[str, Any],
        day: dt.date,
        *,
        height_policy: Optional[HeightPolicy] = None,
    ) -> "DayViewport":
        """Build a viewport from calendar cfg keys (tz, work_*_min, px_per_min)."""
        tz_name = normalize_tz_name(cfg.get("tz"))
        try:
            tzinfo = resolve_tz(tz_name)
        except ValueError as ex:
            raise LayoutArgumentError(str(ex)) from ex

        work_start_min = int(cfg.get("work_start_min", 0) or 0)
        work_end_min = int(cfg.get("work_end_min", 1440) or 1440)
        px_per_min = cfg.get("px_per_min", 1.0)

        policy = height_policy
        if policy is None:
            raw = cfg.get("height_policy")
            try:
                policy = HeightPolicy(raw) if raw else HeightPolicy.FIXED
            except ValueError as ex:
                raise LayoutArgumentError(f"unknown height_policy: {raw!r}") from ex

        return cls(
            day_start_ms=midnight_epoch_ms(day, tzinfo),
            work_start_min=work_start_min,
            work_end_min=work_end_min,
            px_per_min=px_per_min,
            height_policy=policy,
        )


__all__ = ["DayViewport", "HeightPolicy", "MIN_MS"]
