from __future__ import annotations

import datetime as dt
import unittest

from entrylayout.util.timeparse import parse_date_yyyy_mm_dd, parse_hhmm, parse_workhours
from entrylayout.util.tz import (
    date_from_ms,
    day_bounds_ms,
    midnight_epoch_ms,
    normalize_tz_name,
    resolve_tz,
)

BASE = 1577836800000
MS_PER_DAY = 86_400_000


class TestTimezoneResolution(unittest.TestCase):
    def test_normalize(self) -> None:
        self.assertEqual(normalize_tz_name(None), "UTC")
        self.assertEqual(normalize_tz_name("  "), "UTC")
        self.assertEqual(normalize_tz_name("z"), "UTC")
        self.assertEqual(normalize_tz_name("System"), "local")
        self.assertEqual(normalize_tz_name("Europe/Bucharest"), "Europe/Bucharest")

    def test_resolve_offsets(self) -> None:
        self.assertIs(resolve_tz("UTC"), dt.timezone.utc)
        self.assertEqual(resolve_tz("+0230").utcoffset(None), dt.timedelta(hours=2, minutes=30))
        self.assertEqual(resolve_tz("-05:00").utcoffset(None), dt.timedelta(hours=-5))
        with self.assertRaises(ValueError):
            resolve_tz("+24:00")
        with self.assertRaises(ValueError):
            resolve_tz("Not/AZone")

    def test_day_helpers(self) -> None:
        utc = dt.timezone.utc
        self.assertEqual(midnight_epoch_ms(dt.date(2020, 1, 1), utc), BASE)
        self.assertEqual(date_from_ms(BASE + MS_PER_DAY - 1, utc), dt.date(2020, 1, 1))
        self.assertEqual(day_bounds_ms(BASE + 1, BASE + MS_PER_DAY, utc), (BASE, BASE + 2 * MS_PER_DAY - 1))


class TestTimeParse(unittest.TestCase):
    def test_hhmm(self) -> None:
        self.assertEqual(parse_hhmm("6:05"), (6, 5))
        self.assertEqual(parse_hhmm("24:00"), (24, 0))
        for bad in ("24:01", "7", "07:60", "ab:cd"):
            with self.assertRaises(ValueError):
                parse_hhmm(bad)

    def test_workhours(self) -> None:
        self.assertEqual(parse_workhours("06:00-23:00"), (360, 1380))
        self.assertEqual(parse_workhours("00:00-24:00"), (0, 1440))
        with self.assertRaises(ValueError):
            parse_workhours("10:00-09:00")
        with self.assertRaises(ValueError):
            parse_workhours("10:00")

    def test_date(self) -> None:
        self.assertEqual(parse_date_yyyy_mm_dd(" 2020-01-31 "), dt.date(2020, 1, 31))
        with self.assertRaises(ValueError):
            parse_date_yyyy_mm_dd("2020/01/31")


if __name__ == "__main__":
    unittest.main(verbosity=2)
