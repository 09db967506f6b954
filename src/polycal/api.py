from __future__ import annotations

from typing import List, Optional

from .astro import events as _events
from .astro.events import AstroEvent
from .core.engine import CalendarConverter, ConverterRegistry
from .core.errors import VerificationError
from .core.jdn import day_of_week as _day_of_week
from .core.types import Calendar, CalendarDate, CalendarInfo, TierNames
from .cycles import MacroCycles
from .cycles import macro_cycles as _macro_cycles
from .epochs import epoch_jdn as _epoch_jdn
from .names import TIER_NAMES
from .names import month_name as _month_name
from .verification import VerificationReport, run_all

_registry: Optional[ConverterRegistry] = None

def set_registry(reg: ConverterRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ConverterRegistry:
    if _registry is None:
        raise RuntimeError("Converter registry not initialized")
    return _registry

def _as_jdn(date: CalendarDate | int) -> int:
    if isinstance(date, CalendarDate):
        return _reg().get(date.calendar).to_jdn(date.year, date.month, date.day)
    return date

def get_converter(calendar: Calendar | str) -> CalendarConverter:
    return _reg().get(calendar)

def register_converter(converter: CalendarConverter, *, overwrite: bool = False) -> None:
    _reg().register(converter, overwrite=overwrite)

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: Calendar | str) -> CalendarInfo:
    return _reg().get(calendar).info

def epoch_jdn(calendar: Calendar | str) -> int:
    return _epoch_jdn(calendar)

# ============================================================
# Conversion
# ============================================================

def to_jdn(calendar: Calendar | str, year: int, month: int, day: int) -> int:
    return _reg().get(calendar).to_jdn(year, month, day)

def from_jdn(jdn: int, calendar: Calendar | str = Calendar.GREGORIAN) -> CalendarDate:
    return _reg().get(calendar).from_jdn(jdn)

def convert(date: CalendarDate, target: Calendar | str) -> CalendarDate:
    """Convert a date to another calendar through its JDN."""
    jdn = _reg().get(date.calendar).to_jdn(date.year, date.month, date.day)
    return _reg().get(target).from_jdn(jdn)

def parse_date(text: str, calendar: Calendar | str = Calendar.GREGORIAN) -> Optional[CalendarDate]:
    return _reg().get(calendar).parse_date(text)

def format_date(date: CalendarDate, pattern: Optional[str] = None) -> str:
    return _reg().get(date.calendar).format_date(date, pattern)

def day_of_week(date: CalendarDate | int) -> int:
    """0 = Sunday .. 6 = Saturday, for a JDN or a date in any calendar."""
    return _day_of_week(_as_jdn(date))

# ============================================================
# Year structure
# ============================================================

def months_in_year(calendar: Calendar | str, year: int) -> int:
    return _reg().get(calendar).months_in_year(year)

def days_in_month(calendar: Calendar | str, year: int, month: int) -> int:
    return _reg().get(calendar).days_in_month(year, month)

def days_in_year(calendar: Calendar | str, year: int) -> int:
    return _reg().get(calendar).days_in_year(year)

def is_leap_year(calendar: Calendar | str, year: int) -> bool:
    return _reg().get(calendar).is_leap_year(year)

def new_year_day(calendar: Calendar | str, year: int) -> int:
    """JDN of the first day of `year`."""
    conv = _reg().get(calendar)
    cal = conv.calendar
    if cal is Calendar.HEBREW:
        return conv.to_jdn(year, 7, 1)
    if cal is Calendar.MAYAN_LONGCOUNT:
        return conv.to_jdn(year, 0, 0)
    return conv.to_jdn(year, 1, 1)

# ============================================================
# Names and cycles
# ============================================================

def month_name(calendar: Calendar | str, month: int, *, short: bool = False, year: Optional[int] = None) -> str:
    """Display name of `month`; pass `year` to resolve Adar I in Hebrew leap years."""
    cal = Calendar.parse(calendar)
    leap = year is not None and _reg().get(cal).is_leap_year(year)
    return _month_name(cal, month, short=short, leap_year=leap)

def tier_names(calendar: Calendar | str) -> TierNames:
    return TIER_NAMES[Calendar.parse(calendar)]

def macro_cycles(jdn: int, calendar: Calendar | str, year: Optional[int] = None) -> MacroCycles:
    return _macro_cycles(jdn, calendar, year)

# ============================================================
# Astronomical events
# ============================================================

def solstices_equinoxes(year: int) -> List[AstroEvent]:
    """Solstices and equinoxes of Gregorian `year`, each with its UT day."""
    return list(_events.seasons(year))

def moon_phase(date: CalendarDate | int) -> str:
    return _events.moon_phase(_as_jdn(date))

def moon_phases(start: CalendarDate | int, end: CalendarDate | int) -> List[AstroEvent]:
    return _events.moon_phases(_as_jdn(start), _as_jdn(end))

def astronomical_events(start: CalendarDate | int, end: Optional[CalendarDate | int] = None) -> List[AstroEvent]:
    """Solstices, equinoxes and principal moon phases from `start` to `end` (inclusive, UT days)."""
    first = _as_jdn(start)
    return _events.events_between(first, first if end is None else _as_jdn(end))

def verify(*, strict: bool = False) -> VerificationReport:
    """Run every documented check; with strict=True any failure raises VerificationError."""
    report = run_all()
    if strict and not report.all_passed:
        raise VerificationError(report.summary())
    return report
