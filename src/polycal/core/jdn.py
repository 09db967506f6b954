"""
polycal.core.jdn
----------------
Gregorian and Julian calendar arithmetic on Julian Day Numbers.

Years use astronomical numbering (year 0 = 1 BCE). Every division is a floor
division, so the formulas run through year 0 and into negative years without
a discontinuity.
"""

from __future__ import annotations

from .errors import DateRangeError
from .types import Calendar, CalendarDate

MIN_YEAR = -9999
MAX_YEAR = 9999

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def check_year(year: int) -> None:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise DateRangeError(f"year {year} outside supported range {MIN_YEAR}..{MAX_YEAR}")


def era_for(year: int, era_name: str) -> str:
    """Display era: BCE before year 1, otherwise the calendar's own era name."""
    return "BCE" if year <= 0 else era_name


# ---------------------------------------------------------------------------
# Leap rules
# ---------------------------------------------------------------------------

def is_gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_julian_leap(year: int) -> bool:
    return year % 4 == 0


def days_in_gregorian_month(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _MONTH_DAYS[month - 1]


def days_in_julian_month(year: int, month: int) -> int:
    if month == 2 and is_julian_leap(year):
        return 29
    return _MONTH_DAYS[month - 1]


def _check_ymd(year: int, month: int, day: int, month_len) -> None:
    check_year(year)
    if not (1 <= month <= 12):
        raise DateRangeError(f"month {month} outside 1..12")
    n = month_len(year, month)
    if not (1 <= day <= n):
        raise DateRangeError(f"day {day} outside 1..{n} for {year}-{month:02d}")


# ---------------------------------------------------------------------------
# Unchecked arithmetic (used internally, e.g. by astronomy helpers)
# ---------------------------------------------------------------------------

def gregorian_jdn(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def julian_jdn(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083


def gregorian_ymd(jdn: int) -> tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def julian_ymd(jdn: int) -> tuple[int, int, int]:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


# ---------------------------------------------------------------------------
# Checked public conversions
# ---------------------------------------------------------------------------

def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to its Julian Day Number."""
    _check_ymd(year, month, day, days_in_gregorian_month)
    return gregorian_jdn(year, month, day)


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Julian date to its Julian Day Number."""
    _check_ymd(year, month, day, days_in_julian_month)
    return julian_jdn(year, month, day)


def jdn_to_gregorian(jdn: int) -> CalendarDate:
    y, m, d = gregorian_ymd(jdn)
    check_year(y)
    return CalendarDate(Calendar.GREGORIAN, y, m, d, era_for(y, "CE"))


def jdn_to_julian(jdn: int) -> CalendarDate:
    y, m, d = julian_ymd(jdn)
    check_year(y)
    return CalendarDate(Calendar.JULIAN, y, m, d, era_for(y, "CE"))


def day_of_week(jdn: int) -> int:
    """Day of week, 0 = Sunday .. 6 = Saturday."""
    return (jdn + 1) % 7
