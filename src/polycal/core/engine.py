from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

from .types import Calendar, CalendarDate, CalendarInfo


class CalendarConverter(Protocol):
    calendar: Calendar

    @property
    def info(self) -> CalendarInfo: ...
    def to_jdn(self, year: int, month: int, day: int) -> int: ...
    def from_jdn(self, jdn: int) -> CalendarDate: ...
    def parse_date(self, text: str) -> Optional[CalendarDate]: ...
    def format_date(self, date: CalendarDate, pattern: Optional[str] = None) -> str: ...
    def is_leap_year(self, year: int) -> bool: ...
    def months_in_year(self, year: int) -> int: ...
    def days_in_month(self, year: int, month: int) -> int: ...
    def days_in_year(self, year: int) -> int: ...


@dataclass
class ConverterRegistry:
    _converters: Dict[Calendar, CalendarConverter]

    def get(self, calendar: Calendar | str) -> CalendarConverter:
        cal = Calendar.parse(calendar)
        if cal not in self._converters:
            raise KeyError(f"No converter registered for '{cal.value}'. Available: {self.list()}")
        return self._converters[cal]

    def list(self) -> List[str]:
        return [c.value for c in Calendar if c in self._converters]

    def register(self, converter: CalendarConverter, *, overwrite: bool = False) -> None:
        cal = converter.calendar
        if (not overwrite) and (cal in self._converters):
            raise KeyError(f"Converter for '{cal.value}' already exists. Use overwrite=True to replace.")
        self._converters[cal] = converter
