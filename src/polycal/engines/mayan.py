"""
polycal.engines.mayan
---------------------
Tzolkʼin and Long Count converters. Both are plain day counts from the GMT
correlation epoch; the Haabʼ runs on the cyclic engine (see specs.py).

Field encodings on CalendarDate:
  Tzolkʼin:   year = 260-day cycle number (cycle 1 starts at the epoch),
              month = day name 1..20, day = day number 1..13
  Long Count: year = baktun, month = katun 0..19,
              day = tun*400 + uinal*20 + kin (tun 0..19, uinal 0..17, kin 0..19)
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from ..core.errors import DateRangeError
from ..core.jdn import check_year
from ..core.types import Calendar, CalendarDate
from ..formatting import DEFAULT_PATTERN
from .base import BaseConverter

TZOLKIN_DAYS = 260

KIN = 1
UINAL = 20
TUN = 360
KATUN = 7200
BAKTUN = 144000


# ============================================================
# TZOLKʼIN
# ============================================================

class TzolkinConverter(BaseConverter):
    def __init__(self) -> None:
        super().__init__(Calendar.MAYAN_TZOLKIN)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        check_year(year)
        if not (1 <= month <= 20):
            raise DateRangeError(f"Tzolkʼin day name {month} outside 1..20")
        if not (1 <= day <= 13):
            raise DateRangeError(f"Tzolkʼin day number {day} outside 1..13")
        # p = month-1 (mod 20) and p = day-1 (mod 13); 2 is the inverse of 20 mod 13
        k = (2 * (day - month)) % 13
        p = month - 1 + 20 * k
        return self.epoch + (year - 1) * TZOLKIN_DAYS + p

    def from_jdn(self, jdn: int) -> CalendarDate:
        q, p = divmod(jdn - self.epoch, TZOLKIN_DAYS)
        year = q + 1
        check_year(year)
        return self.make_date(year, p % 20 + 1, p % 13 + 1)

    def is_leap_year(self, year: int) -> bool:
        return False

    def months_in_year(self, year: int) -> int:
        return 20

    def days_in_month(self, year: int, month: int) -> int:
        if not (1 <= month <= 20):
            raise DateRangeError(f"Tzolkʼin day name {month} outside 1..20")
        return 13

    def days_in_year(self, year: int) -> int:
        return TZOLKIN_DAYS


# ============================================================
# LONG COUNT
# ============================================================

def split_long_count(days: int) -> Tuple[int, int, int, int, int]:
    """(baktun, katun, tun, uinal, kin) for a signed day count from the epoch."""
    baktun, r = divmod(days, BAKTUN)
    katun, r = divmod(r, KATUN)
    tun, r = divmod(r, TUN)
    uinal, kin = divmod(r, UINAL)
    return baktun, katun, tun, uinal, kin


def pack_day(tun: int, uinal: int, kin: int) -> int:
    return tun * 400 + uinal * 20 + kin


def unpack_day(day: int) -> Tuple[int, int, int]:
    tun, r = divmod(day, 400)
    uinal, kin = divmod(r, 20)
    return tun, uinal, kin


# the packed tun/uinal/kin day runs up to 7959
_LONG_COUNT_RE = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2,4})$", re.ASCII)


class LongCountConverter(BaseConverter):
    def __init__(self) -> None:
        super().__init__(Calendar.MAYAN_LONGCOUNT)

    def _check(self, year: int, month: int, day: int) -> Tuple[int, int, int]:
        check_year(year)
        if not (0 <= month <= 19):
            raise DateRangeError(f"katun {month} outside 0..19")
        if day < 0:
            raise DateRangeError(f"packed tun/uinal/kin {day} is negative")
        tun, uinal, kin = unpack_day(day)
        if tun > 19:
            raise DateRangeError(f"tun {tun} outside 0..19")
        if uinal > 17:
            raise DateRangeError(f"uinal {uinal} outside 0..17")
        return tun, uinal, kin

    def to_jdn(self, year: int, month: int, day: int) -> int:
        tun, uinal, kin = self._check(year, month, day)
        return self.epoch + year * BAKTUN + month * KATUN + tun * TUN + uinal * UINAL + kin * KIN

    def from_jdn(self, jdn: int) -> CalendarDate:
        baktun, katun, tun, uinal, kin = split_long_count(jdn - self.epoch)
        check_year(baktun)
        return self.make_date(baktun, katun, pack_day(tun, uinal, kin))

    def parse_date(self, text: str) -> Optional[CalendarDate]:
        m = _LONG_COUNT_RE.fullmatch(text) if isinstance(text, str) else None
        if m is None:
            return None
        ymd = int(m.group(1)), int(m.group(2)), int(m.group(3))
        try:
            self._check(*ymd)
        except DateRangeError:
            return None
        return self.make_date(*ymd)

    def format_date(self, date: CalendarDate, pattern: Optional[str] = None) -> str:
        """Canonical `[-]YYYY-MM-DD` for the default pattern, positional `b.k.t.u.k` for any other."""
        if pattern is None or pattern == DEFAULT_PATTERN:
            return super().format_date(date)
        if date.calendar != self.calendar:
            raise ValueError(f"{self.calendar.value} converter cannot format a {date.calendar.value} date")
        tun, uinal, kin = self._check(date.year, date.month, date.day)
        return f"{date.year}.{date.month}.{tun}.{uinal}.{kin}"

    def is_leap_year(self, year: int) -> bool:
        return False

    def months_in_year(self, year: int) -> int:
        return 20

    def days_in_month(self, year: int, month: int) -> int:
        if not (0 <= month <= 19):
            raise DateRangeError(f"katun {month} outside 0..19")
        return KATUN

    def days_in_year(self, year: int) -> int:
        return BAKTUN
