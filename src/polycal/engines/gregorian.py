"""Gregorian and Julian converters, the foundation every other calendar is checked against."""

from __future__ import annotations

from ..core import jdn as J
from ..core.errors import DateRangeError
from ..core.types import Calendar, CalendarDate
from .base import BaseConverter


class GregorianConverter(BaseConverter):
    def __init__(self) -> None:
        super().__init__(Calendar.GREGORIAN)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        return J.gregorian_to_jdn(year, month, day)

    def from_jdn(self, jdn: int) -> CalendarDate:
        return J.jdn_to_gregorian(jdn)

    def is_leap_year(self, year: int) -> bool:
        return J.is_gregorian_leap(year)

    def months_in_year(self, year: int) -> int:
        return 12

    def days_in_month(self, year: int, month: int) -> int:
        if not (1 <= month <= 12):
            raise DateRangeError(f"month {month} outside 1..12")
        return J.days_in_gregorian_month(year, month)

    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365


class JulianConverter(BaseConverter):
    def __init__(self) -> None:
        super().__init__(Calendar.JULIAN)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        return J.julian_to_jdn(year, month, day)

    def from_jdn(self, jdn: int) -> CalendarDate:
        return J.jdn_to_julian(jdn)

    def is_leap_year(self, year: int) -> bool:
        return J.is_julian_leap(year)

    def months_in_year(self, year: int) -> int:
        return 12

    def days_in_month(self, year: int, month: int) -> int:
        if not (1 <= month <= 12):
            raise DateRangeError(f"month {month} outside 1..12")
        return J.days_in_julian_month(year, month)

    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365
