"""
polycal.formatting
------------------
Token formatter and strict parser shared by every converter.

Tokens (matched longest first):
  YYYY  astronomical year, signed and zero-padded to 4 digits (-0005)
  YY    last two digits of the display year
  Y     display year, unpadded (year 0 is 1 BCE, year -5 is 6 BCE)
  MMMM  full month name          MMM  abbreviated month name
  MM    2-digit month number     M    month number
  DD    2-digit day              D    day number
  EEEE  full weekday name        EEE  abbreviated weekday   E  weekday initial
  ERA   era label (BCE for years <= 0)
Any other character is copied as-is. The default pattern `YYYY-MM-DD` gives
the canonical form that `parse_ymd` reads back.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .core.types import Calendar, CalendarDate
from .names import DAY_NAMES, DAY_NAMES_SHORT, era_name, month_name

DEFAULT_PATTERN = "YYYY-MM-DD"

_DATE_RE = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})$", re.ASCII)

_TOKENS = ("YYYY", "EEEE", "MMMM", "MMM", "EEE", "ERA", "YY", "DD", "MM", "M", "D", "E", "Y")


def parse_ymd(text: str) -> Optional[Tuple[int, int, int]]:
    """Split strict `[-]YYYY-MM-DD` text into integers, or None if malformed."""
    m = _DATE_RE.fullmatch(text) if isinstance(text, str) else None
    if m is None:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def display_year(year: int, calendar: Calendar) -> Tuple[int, str]:
    """(display year, era label): year 0 is 1 BCE, year -1 is 2 BCE."""
    if year <= 0:
        return abs(year) + 1, "BCE"
    return year, era_name(calendar)


def format_year(year: int) -> str:
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}"


def format_fields(
    date: CalendarDate,
    pattern: str = DEFAULT_PATTERN,
    *,
    weekday: int,
    leap_year: bool = False,
) -> str:
    """Render `date` with `pattern`; `weekday` is 0 = Sunday."""
    year, era = display_year(date.year, date.calendar)
    year_str = str(year)
    values = {
        "YYYY": format_year(date.year),
        "YY": year_str[-2:].zfill(2),
        "Y": year_str,
        "MMMM": month_name(date.calendar, date.month, leap_year=leap_year),
        "MMM": month_name(date.calendar, date.month, short=True, leap_year=leap_year),
        "MM": f"{date.month:02d}",
        "M": str(date.month),
        "DD": f"{date.day:02d}",
        "D": str(date.day),
        "EEEE": DAY_NAMES[weekday],
        "EEE": DAY_NAMES_SHORT[weekday],
        "E": DAY_NAMES_SHORT[weekday][0],
        "ERA": era,
    }

    out = []
    i = 0
    n = len(pattern)
    while i < n:
        for tok in _TOKENS:
            if pattern.startswith(tok, i):
                out.append(values[tok])
                i += len(tok)
                break
        else:
            out.append(pattern[i])
            i += 1
    return "".join(out)


def format_iso(year: int, month: int, day: int) -> str:
    """Canonical persisted form `[-]YYYY-MM-DD`."""
    return f"{format_year(year)}-{month:02d}-{day:02d}"
