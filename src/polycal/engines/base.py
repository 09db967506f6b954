"""
polycal.engines.base
--------------------
Behavior shared by every converter: date construction, strict parsing,
formatting and the static calendar description.
"""

from __future__ import annotations

from typing import Optional

from ..core.errors import DateRangeError
from ..core.jdn import day_of_week, era_for
from ..core.types import Calendar, CalendarDate, CalendarInfo
from ..epochs import EPOCHS
from ..formatting import format_fields, format_iso, parse_ymd
from ..names import CALENDAR_TABLE


class BaseConverter:
    """
    Subclasses provide to_jdn/from_jdn and the year structure queries
    (is_leap_year, months_in_year, days_in_month, days_in_year).
    """
    calendar: Calendar

    def __init__(self, calendar: Calendar):
        self.calendar = calendar
        self.epoch = EPOCHS[calendar]

    # ---------------------------------------------------------
    # Contract (overridden)
    # ---------------------------------------------------------

    def to_jdn(self, year: int, month: int, day: int) -> int:
        raise NotImplementedError

    def from_jdn(self, jdn: int) -> CalendarDate:
        raise NotImplementedError

    def is_leap_year(self, year: int) -> bool:
        raise NotImplementedError

    def months_in_year(self, year: int) -> int:
        raise NotImplementedError

    def days_in_month(self, year: int, month: int) -> int:
        raise NotImplementedError

    def days_in_year(self, year: int) -> int:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Shared behavior
    # ---------------------------------------------------------

    @property
    def info(self) -> CalendarInfo:
        name, native, kind, months, days, era = CALENDAR_TABLE[self.calendar]
        return CalendarInfo(
            calendar=self.calendar,
            name=name,
            native_name=native,
            kind=kind,
            months=months,
            days_in_year=days,
            era_name=era,
            epoch_jdn=self.epoch,
        )

    def make_date(self, year: int, month: int, day: int) -> CalendarDate:
        return CalendarDate(self.calendar, year, month, day, era_for(year, self.info.era_name))

    def parse_date(self, text: str) -> Optional[CalendarDate]:
        """Strict `[-]YYYY-MM-DD`; None for malformed or out-of-range input."""
        ymd = parse_ymd(text)
        if ymd is None:
            return None
        try:
            self.to_jdn(*ymd)
        except DateRangeError:
            return None
        return self.make_date(*ymd)

    def format_date(self, date: CalendarDate, pattern: Optional[str] = None) -> str:
        """
        Render a date. Without a pattern the canonical `[-]YYYY-MM-DD` form is
        produced (astronomical year), which parse_date reads back.
        """
        if date.calendar != self.calendar:
            raise ValueError(f"{self.calendar.value} converter cannot format a {date.calendar.value} date")
        if pattern is None:
            self.to_jdn(date.year, date.month, date.day)
            return format_iso(date.year, date.month, date.day)
        jdn = self.to_jdn(date.year, date.month, date.day)
        return format_fields(
            date,
            pattern,
            weekday=day_of_week(jdn),
            leap_year=self.is_leap_year(date.year),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.calendar.value!r})"
