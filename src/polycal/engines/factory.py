"""
polycal.engines.factory
-----------------------
Builds the live converter for each member of the closed Calendar catalog.
"""

from __future__ import annotations

from ..core.engine import CalendarConverter
from ..core.types import Calendar
from .chinese import ChineseConverter
from .epoch_based import CyclicCalendar
from .gregorian import GregorianConverter, JulianConverter
from .hebrew import HebrewCalendar
from .mayan import LongCountConverter, TzolkinConverter
from .specs import ALL_SPECS


def make_converter(calendar: Calendar | str) -> CalendarConverter:
    """The universal entry point: one converter per catalog member."""
    cal = Calendar.parse(calendar)
    if cal is Calendar.GREGORIAN:
        return GregorianConverter()
    if cal is Calendar.JULIAN:
        return JulianConverter()
    if cal is Calendar.HEBREW:
        return HebrewCalendar()
    if cal is Calendar.CHINESE:
        return ChineseConverter()
    if cal is Calendar.MAYAN_TZOLKIN:
        return TzolkinConverter()
    if cal is Calendar.MAYAN_LONGCOUNT:
        return LongCountConverter()
    if cal in ALL_SPECS:
        return CyclicCalendar(ALL_SPECS[cal])
    raise TypeError(f"No converter implementation for calendar: {cal!r}")
