"""
polycal.engines.specs
---------------------
Parameter sets for the calendars that run on the cyclic epoch engine.
"""

from __future__ import annotations

from typing import Dict

from ..core.jdn import is_gregorian_leap
from ..core.types import Calendar
from .epoch_based import CyclicParams, never_leap


# ============================================================
# LEAP RULES
# ============================================================

def islamic_leap(year: int) -> bool:
    """Tabular 30-year cycle: leap years 2,5,7,10,13,16,18,21,24,26,29."""
    return (11 * year + 14) % 30 < 11


PERSIAN_LEAP_POSITIONS = frozenset({1, 5, 9, 13, 17, 22, 26, 30})


def persian_leap(year: int) -> bool:
    """33-year arithmetic cycle; `%` keeps negative years on the same cycle."""
    return ((year - 1) % 33) + 1 in PERSIAN_LEAP_POSITIONS


def alexandrian_leap(year: int) -> bool:
    """Ethiopian and Coptic: the year before a Julian leap year gets the sixth epagomenal day."""
    return year % 4 == 3


def bahai_leap(year: int) -> bool:
    # year Y runs from 21 March (1843+Y) to 20 March (1844+Y) and so contains February of 1844+Y
    return is_gregorian_leap(year + 1844)


def thai_leap(year: int) -> bool:
    return is_gregorian_leap(year - 543)


# ============================================================
# MONTH TABLES (common years)
# ============================================================

GREGORIAN_MONTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
ISLAMIC_MONTHS = (30, 29) * 6
PERSIAN_MONTHS = (31,) * 6 + (30,) * 5 + (29,)
ALEXANDRIAN_MONTHS = (30,) * 12 + (5,)
SAKA_MONTHS = (30,) + (31,) * 5 + (30,) * 6
BAHAI_MONTHS = (19,) * 18 + (4,) + (19,)          # month 19 is Ayyám-i-Há, month 20 is ʻAláʼ
IROQUOIS_MONTHS = (28,) * 12 + (29,)
VEINTENA_MONTHS = (20,) * 18 + (5,)                # Haab' and Xiuhpohualli


# ============================================================
# SPECS
# ============================================================

ALL_SPECS: Dict[Calendar, CyclicParams] = {
    Calendar.ISLAMIC: CyclicParams(
        calendar=Calendar.ISLAMIC, cycle_years=30,
        month_lengths=ISLAMIC_MONTHS, leap_month=12, is_leap=islamic_leap,
    ),
    Calendar.PERSIAN: CyclicParams(
        calendar=Calendar.PERSIAN, cycle_years=33,
        month_lengths=PERSIAN_MONTHS, leap_month=12, is_leap=persian_leap,
    ),
    Calendar.ETHIOPIAN: CyclicParams(
        calendar=Calendar.ETHIOPIAN, cycle_years=4,
        month_lengths=ALEXANDRIAN_MONTHS, leap_month=13, is_leap=alexandrian_leap,
    ),
    Calendar.COPTIC: CyclicParams(
        calendar=Calendar.COPTIC, cycle_years=4,
        month_lengths=ALEXANDRIAN_MONTHS, leap_month=13, is_leap=alexandrian_leap,
    ),
    Calendar.INDIAN_SAKA: CyclicParams(
        calendar=Calendar.INDIAN_SAKA, cycle_years=400,
        month_lengths=SAKA_MONTHS, leap_month=1, is_leap=is_gregorian_leap,
    ),
    Calendar.BAHAI: CyclicParams(
        calendar=Calendar.BAHAI, cycle_years=400,
        month_lengths=BAHAI_MONTHS, leap_month=19, is_leap=bahai_leap,
    ),
    Calendar.THAI_BUDDHIST: CyclicParams(
        calendar=Calendar.THAI_BUDDHIST, cycle_years=400,
        month_lengths=GREGORIAN_MONTHS, leap_month=2, is_leap=thai_leap,
    ),
    Calendar.CHEROKEE: CyclicParams(
        calendar=Calendar.CHEROKEE, cycle_years=400,
        month_lengths=GREGORIAN_MONTHS, leap_month=2, is_leap=is_gregorian_leap,
    ),
    Calendar.IROQUOIS: CyclicParams(
        calendar=Calendar.IROQUOIS, cycle_years=400,
        month_lengths=IROQUOIS_MONTHS, leap_month=13, is_leap=is_gregorian_leap,
    ),
    Calendar.MAYAN_HAAB: CyclicParams(
        calendar=Calendar.MAYAN_HAAB, cycle_years=1,
        month_lengths=VEINTENA_MONTHS, leap_month=None, is_leap=never_leap,
    ),
    Calendar.AZTEC_XIUHPOHUALLI: CyclicParams(
        calendar=Calendar.AZTEC_XIUHPOHUALLI, cycle_years=1,
        month_lengths=VEINTENA_MONTHS, leap_month=None, is_leap=never_leap,
    ),
}
