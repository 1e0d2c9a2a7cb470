# entrylayout/util/tz.py
from __future__ import annotations

import datetime as dt
import re
from typing import Optional, Tuple

try:
    from zoneinfo import ZoneInfo  # py3.9+
except Exception:  # pragma: no cover
    ZoneInfo = None  # type: ignore

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def normalize_tz_name(name: Optional[str]) -> str:
    """Normalize a timezone identifier.

    Supported forms:
      - None/"" -> "UTC" (layout is reproducible across machines by default)
      - "local" / "system" -> "local" (the machine's local timezone)
      - "UTC" / "Z" / "GMT" -> "UTC"
      - IANA names, e.g. "Europe/Bucharest"
      - Fixed offsets: "+02:00", "+0200", "-05:00"
    """
    if name is None:
        return "UTC"
    s = str(name).strip()
    if not s:
        return "UTC"

    low = s.lower()
    if low in {"local", "system", "native"}:
        return "local"
    if low in {"utc", "z", "gmt", "utc0", "utc+0"}:
        return "UTC"

    return s


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Resolve a timezone name into a tzinfo.

    Raises ValueError for invalid timezone identifiers.
    """
    tz_name = normalize_tz_name(name)

    if tz_name == "UTC":
        return dt.timezone.utc

    if tz_name == "local":
        tz = dt.datetime.now().astimezone().tzinfo
        return tz or dt.timezone.utc

    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh = int(hh_s)
        mm = int(mm_s)
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        return dt.timezone(dt.timedelta(minutes=sign * (hh * 60 + mm)))

    if ZoneInfo is not None:
        try:
            return ZoneInfo(tz_name)  # type: ignore[misc]
        except Exception as ex:
            raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex

    raise ValueError(f"Invalid timezone identifier: {tz_name!r} (zoneinfo unavailable)")


def midnight_epoch_ms(d: dt.date, tz: dt.tzinfo) -> int:
    aware = dt.datetime(d.year, d.month, d.day, 0, 0, 0, tzinfo=tz)
    return int(aware.timestamp() * 1000)


def date_from_ms(ms: int, tz: dt.tzinfo) -> dt.date:
    return dt.datetime.fromtimestamp(int(ms) / 1000.0, tz=tz).date()


def day_bounds_ms(start_ms: int, end_ms: int, tz: dt.tzinfo) -> Tuple[int, int]:
    """First and last millisecond of the days touched by [start_ms, end_ms].

    The end bound is inclusive (one millisecond before the next midnight), so
    DST days keep their real length.
    """
    first = date_from_ms(start_ms, tz)
    last = date_from_ms(end_ms, tz)
    lo = midnight_epoch_ms(first, tz)
    hi = midnight_epoch_ms(last + dt.timedelta(days=1), tz) - 1
    return lo, hi
