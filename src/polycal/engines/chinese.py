"""
polycal.engines.chinese
-----------------------
Astronomical Chinese calendar, reckoned in Beijing time.

A sui runs from the month containing one winter solstice (month 11) to the
month containing the next. A sui with 13 new moons is a leap sui, and its first
month (after month 11) without a major solar term is the leap month, which
takes the number of the month before it.

Year numbers are the Gregorian year in which the new year (month 1) falls.
Leap months are encoded as month + 12, so a leap second month is 14.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from ..astro.lunisolar import major_term, new_moon_before, new_moon_on_or_after, winter_solstice_day
from ..core.jdn import check_year, gregorian_ymd
from ..core.types import Calendar, CalendarDate
from .base import BaseConverter
from .epoch_based import YearLayout

LEAP_OFFSET = 12


def is_leap_month(month: int) -> bool:
    return month > LEAP_OFFSET


def base_month(month: int) -> int:
    return month - LEAP_OFFSET if month > LEAP_OFFSET else month


@dataclass(frozen=True)
class Sui:
    """Months from the month-11 preceding Gregorian year `year` to the next month 11."""
    year: int
    starts: Tuple[int, ...]     # month start days, plus the next month 11 as sentinel
    months: Tuple[int, ...]     # encoded month numbers
    leap_index: Optional[int]

    def index_of_new_year(self) -> int:
        return self.months.index(1)


@lru_cache(maxsize=512)
def sui(year: int) -> Sui:
    s1 = winter_solstice_day(year - 1)
    s2 = winter_solstice_day(year)
    first = new_moon_before(s1 + 1)
    end = new_moon_before(s2 + 1)

    starts = [first]
    while starts[-1] < end:
        starts.append(new_moon_on_or_after(starts[-1] + 1))
    n = len(starts) - 1

    leap_index = None
    if n == 13:
        leap_index = next(
            i for i in range(1, n) if major_term(starts[i]) == major_term(starts[i + 1])
        )

    months = []
    number = 10
    for i in range(n):
        if i == leap_index:
            months.append(number + LEAP_OFFSET)
        else:
            number = number % 12 + 1
            months.append(number)
    return Sui(year=year, starts=tuple(starts), months=tuple(months), leap_index=leap_index)


@dataclass(frozen=True)
class ChineseYear:
    year: int
    new_year: int
    layout: YearLayout

    @property
    def leap_month(self) -> Optional[int]:
        return next((m for m in self.layout.months if is_leap_month(m)), None)


@lru_cache(maxsize=512)
def chinese_year(year: int) -> ChineseYear:
    """Month structure of the Chinese year starting in Gregorian `year`."""
    this, following = sui(year), sui(year + 1)
    i = this.index_of_new_year()
    j = following.index_of_new_year()
    starts = this.starts[i:-1] + following.starts[:j + 1]
    months = this.months[i:] + following.months[:j]
    lengths = tuple(b - a for a, b in zip(starts, starts[1:]))
    return ChineseYear(year=year, new_year=starts[0], layout=YearLayout.build(months, lengths))


def new_year_day(year: int) -> int:
    """JDN of the first day of Chinese year `year`."""
    return chinese_year(year).new_year


class ChineseConverter(BaseConverter):
    def __init__(self) -> None:
        super().__init__(Calendar.CHINESE)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        check_year(year)
        cy = chinese_year(year)
        return cy.new_year + cy.layout.day_of_year(month, day)

    def from_jdn(self, jdn: int) -> CalendarDate:
        year = gregorian_ymd(jdn)[0]
        if jdn < new_year_day(year):
            year -= 1
        check_year(year)
        cy = chinese_year(year)
        month, day = cy.layout.split(jdn - cy.new_year)
        return self.make_date(year, month, day)

    def is_leap_year(self, year: int) -> bool:
        check_year(year)
        return chinese_year(year).leap_month is not None

    def months_in_year(self, year: int) -> int:
        check_year(year)
        return len(chinese_year(year).layout.months)

    def days_in_month(self, year: int, month: int) -> int:
        check_year(year)
        lay = chinese_year(year).layout
        return lay.lengths[lay.index_of(month)]

    def days_in_year(self, year: int) -> int:
        check_year(year)
        return chinese_year(year).layout.length
