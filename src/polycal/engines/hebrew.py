"""
polycal.engines.hebrew
----------------------
Arithmetic Hebrew calendar: molad of Tishrei, the postponement rules and the
six possible year lengths (353-355 days, 383-385 in leap years).

Months are numbered from Nisan = 1; the year begins with Tishrei = 7 and runs
7, 8, ..., 12, (13), 1, ..., 6. Day counting is anchored at the epoch
registry entry, which is taken as 1 Tishrei AM 1.
"""

from __future__ import annotations

from functools import lru_cache

from ..core.types import Calendar
from .epoch_based import EpochCalendar, YearLayout

PARTS_PER_DAY = 25920          # 24 h * 1080 parts
MOLAD_BAHARAD_PARTS = 12084    # molad of Tishrei AM 1, measured from the evening before day 0

TISHREI, MARHESHVAN, KISLEV, ADAR, ADAR_II = 7, 8, 9, 12, 13


def is_hebrew_leap(year: int) -> bool:
    """Leap years are positions 3, 6, 8, 11, 14, 17, 19 of the 19-year cycle."""
    return (7 * year + 1) % 19 < 7


def _elapsed_days(year: int) -> int:
    """Days from the epoch to the molad-based new year, with the weekday rule applied."""
    months_elapsed = (235 * year - 234) // 19
    parts = MOLAD_BAHARAD_PARTS + 13753 * months_elapsed
    days = 29 * months_elapsed + parts // PARTS_PER_DAY
    # Rosh Hashanah never falls on Sunday, Wednesday or Friday
    if (3 * (days + 1)) % 7 < 3:
        days += 1
    return days


def _year_length_correction(year: int) -> int:
    ny0 = _elapsed_days(year - 1)
    ny1 = _elapsed_days(year)
    ny2 = _elapsed_days(year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0


@lru_cache(maxsize=4096)
def new_year_offset(year: int) -> int:
    """Days from the epoch to 1 Tishrei of `year` (negative for years before AM 1)."""
    return _elapsed_days(year) + _year_length_correction(year)


def year_length(year: int) -> int:
    return new_year_offset(year + 1) - new_year_offset(year)


@lru_cache(maxsize=16)
def _layout_for(leap: bool, length: int) -> YearLayout:
    long_heshvan = length % 10 == 5
    short_kislev = length % 10 == 3
    lengths = {
        1: 30, 2: 29, 3: 30, 4: 29, 5: 30, 6: 29,
        TISHREI: 30,
        MARHESHVAN: 30 if long_heshvan else 29,
        KISLEV: 29 if short_kislev else 30,
        10: 29,
        11: 30,
        ADAR: 30 if leap else 29,
        ADAR_II: 29,
    }
    order = (7, 8, 9, 10, 11, 12) + ((ADAR_II,) if leap else ()) + (1, 2, 3, 4, 5, 6)
    return YearLayout.build(order, tuple(lengths[m] for m in order))


class HebrewCalendar(EpochCalendar):
    mean_year = 35975351 / 98496

    def __init__(self) -> None:
        super().__init__(Calendar.HEBREW)

    def is_leap_year(self, year: int) -> bool:
        return is_hebrew_leap(year)

    def layout(self, year: int) -> YearLayout:
        return _layout_for(is_hebrew_leap(year), year_length(year))

    def _forward_offset(self, year: int) -> int:
        return new_year_offset(year)

    def _backward_span(self, year: int) -> int:
        return -new_year_offset(year)
