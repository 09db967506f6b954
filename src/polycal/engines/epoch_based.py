"""
polycal.engines.epoch_based
---------------------------
Generic day-counting engine for calendars anchored to a fixed epoch.

A calendar plugs in two things:
  * a year offset: days from the epoch to the first day of a year, split into a
    forward routine (years >= 1) and a backward routine (years <= 0), and
  * a per-year layout: the months of the year in chronological order with
    their lengths.

Everything else (validation, the reverse search for the year and the month/day
decomposition) lives here once.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..core.errors import DateRangeError
from ..core.jdn import check_year
from ..core.types import Calendar, CalendarDate
from .base import BaseConverter


@dataclass(frozen=True)
class YearLayout:
    """Months of one year in chronological order, with cumulative day offsets."""
    months: Tuple[int, ...]
    lengths: Tuple[int, ...]
    starts: Tuple[int, ...]   # len(months) + 1 entries; starts[-1] is the year length

    @classmethod
    def build(cls, months: Tuple[int, ...], lengths: Tuple[int, ...]) -> "YearLayout":
        if len(months) != len(lengths):
            raise ValueError("months and lengths must have the same size")
        starts = [0]
        for n in lengths:
            starts.append(starts[-1] + n)
        return cls(months=months, lengths=lengths, starts=tuple(starts))

    @property
    def length(self) -> int:
        return self.starts[-1]

    def index_of(self, month: int) -> int:
        try:
            return self.months.index(month)
        except ValueError:
            raise DateRangeError(f"month {month} does not exist in this year") from None

    def day_of_year(self, month: int, day: int) -> int:
        """0-based day of year."""
        i = self.index_of(month)
        if not (1 <= day <= self.lengths[i]):
            raise DateRangeError(f"day {day} outside 1..{self.lengths[i]} for month {month}")
        return self.starts[i] + day - 1

    def split(self, doy: int) -> Tuple[int, int]:
        """Inverse of day_of_year: (month, day)."""
        i = bisect_right(self.starts, doy) - 1
        return self.months[i], doy - self.starts[i] + 1


class EpochCalendar(BaseConverter):
    """
    Base for epoch-relative calendars. Subclasses implement
    `_forward_offset`, `_backward_span`, `layout` and set `mean_year`.
    """
    mean_year: float

    # ---------------------------------------------------------
    # Hooks
    # ---------------------------------------------------------

    def _forward_offset(self, year: int) -> int:
        """Days from the epoch to day 1 of `year` (year >= 1)."""
        raise NotImplementedError

    def _backward_span(self, year: int) -> int:
        """Total length of the years `year..0` (year <= 0)."""
        raise NotImplementedError

    def layout(self, year: int) -> YearLayout:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Year boundaries
    # ---------------------------------------------------------

    def year_start(self, year: int) -> int:
        """JDN of the first day of `year`."""
        if year >= 1:
            return self.epoch + self._forward_offset(year)
        return self.epoch - self._backward_span(year)

    def _locate_forward(self, days: int) -> Tuple[int, int]:
        """(year, day-of-year) for a day count `days >= 0` after the epoch."""
        year = int(days // self.mean_year) + 1
        while year > 1 and self._forward_offset(year) > days:
            year -= 1
        while self._forward_offset(year + 1) <= days:
            year += 1
        return year, days - self._forward_offset(year)

    def _locate_backward(self, before: int) -> Tuple[int, int]:
        """
        (year, day-of-year) for the day `before >= 1` days ahead of the epoch.

        before == backward_span(year) is day 1 of that year; before == 1 is the
        last day of year 0.
        """
        year = -int(before // self.mean_year)
        while self._backward_span(year) < before:
            year -= 1
        while year < 0 and self._backward_span(year + 1) >= before:
            year += 1
        span = self._backward_span(year)
        if before == span:
            return year, 0
        return year, span - before

    # ---------------------------------------------------------
    # Converter contract
    # ---------------------------------------------------------

    def to_jdn(self, year: int, month: int, day: int) -> int:
        check_year(year)
        doy = self.layout(year).day_of_year(month, day)
        return self.year_start(year) + doy

    def from_jdn(self, jdn: int) -> CalendarDate:
        days = jdn - self.epoch
        if days >= 0:
            year, doy = self._locate_forward(days)
        else:
            year, doy = self._locate_backward(-days)
        check_year(year)
        month, day = self.layout(year).split(doy)
        return self.make_date(year, month, day)

    def months_in_year(self, year: int) -> int:
        return len(self.layout(year).months)

    def days_in_month(self, year: int, month: int) -> int:
        lay = self.layout(year)
        return lay.lengths[lay.index_of(month)]

    def days_in_year(self, year: int) -> int:
        return self.layout(year).length


# ---------------------------------------------------------------------------
# Calendars whose leap rule repeats with a fixed cycle of years
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CyclicParams:
    """
    A calendar with fixed month lengths where leap years add one day to a
    single month, and the leap rule repeats every `cycle_years` years.
    """
    calendar: Calendar
    cycle_years: int
    month_lengths: Tuple[int, ...]
    leap_month: Optional[int]                  # 1-based month receiving the leap day
    is_leap: Callable[[int], bool]

    def __post_init__(self) -> None:
        if self.cycle_years <= 0:
            raise ValueError("cycle_years must be positive")
        if not self.month_lengths:
            raise ValueError("month_lengths must not be empty")
        if self.leap_month is not None and not (1 <= self.leap_month <= len(self.month_lengths)):
            raise ValueError("leap_month must index month_lengths")


def never_leap(year: int) -> bool:
    return False


class CyclicCalendar(EpochCalendar):
    """
    Epoch calendar with a periodic leap rule. Elapsed days are closed-form:
    whole cycles times the cycle length plus a prefix table over one cycle.
    """

    def __init__(self, params: CyclicParams):
        super().__init__(params.calendar)
        self.p = params

        months = tuple(range(1, len(params.month_lengths) + 1))
        self._layouts: Dict[bool, YearLayout] = {False: YearLayout.build(months, params.month_lengths)}
        if params.leap_month is not None:
            lengths = list(params.month_lengths)
            lengths[params.leap_month - 1] += 1
            self._layouts[True] = YearLayout.build(months, tuple(lengths))
        else:
            self._layouts[True] = self._layouts[False]

        # prefix[i] = length of years 1..i
        prefix = [0]
        for y in range(1, params.cycle_years + 1):
            prefix.append(prefix[-1] + self.days_in_year(y))
        self._prefix = tuple(prefix)
        self._cycle_days = prefix[-1]
        self.mean_year = self._cycle_days / params.cycle_years

    def is_leap_year(self, year: int) -> bool:
        return self.p.leap_month is not None and self.p.is_leap(year)

    def layout(self, year: int) -> YearLayout:
        return self._layouts[self.is_leap_year(year)]

    def _forward_offset(self, year: int) -> int:
        q, r = divmod(year - 1, self.p.cycle_years)
        return q * self._cycle_days + self._prefix[r]

    def _backward_span(self, year: int) -> int:
        # years 1-r..0 repeat the last r years of a cycle
        q, r = divmod(1 - year, self.p.cycle_years)
        return q * self._cycle_days + self._cycle_days - self._prefix[self.p.cycle_years - r]
