from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from .errors import UnsupportedCalendarError


class Calendar(str, Enum):
    """The closed catalog of supported calendar systems."""
    GREGORIAN = "gregorian"
    JULIAN = "julian"
    ISLAMIC = "islamic"
    HEBREW = "hebrew"
    PERSIAN = "persian"
    CHINESE = "chinese"
    ETHIOPIAN = "ethiopian"
    COPTIC = "coptic"
    INDIAN_SAKA = "indian-saka"
    BAHAI = "bahai"
    THAI_BUDDHIST = "thai-buddhist"
    MAYAN_TZOLKIN = "mayan-tzolkin"
    MAYAN_HAAB = "mayan-haab"
    MAYAN_LONGCOUNT = "mayan-longcount"
    CHEROKEE = "cherokee"
    IROQUOIS = "iroquois"
    AZTEC_XIUHPOHUALLI = "aztec-xiuhpohualli"

    @classmethod
    def parse(cls, tag: "Calendar | str") -> "Calendar":
        if isinstance(tag, Calendar):
            return tag
        try:
            return cls(tag)
        except ValueError:
            known = ", ".join(c.value for c in cls)
            raise UnsupportedCalendarError(f"Unknown calendar '{tag}'. Available: {known}") from None


@dataclass(frozen=True)
class CalendarDate:
    calendar: Calendar
    year: int    # astronomical numbering, year 0 exists
    month: int
    day: int
    era: str = ""

    def ymd(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class CalendarInfo:
    """Static description of a calendar system."""
    calendar: Calendar
    name: str
    native_name: str
    kind: Literal["solar", "lunar", "lunisolar", "other"]
    months: int
    days_in_year: int
    era_name: str
    epoch_jdn: int


@dataclass(frozen=True)
class TierNames:
    decade: str
    year: str
    month: str
    week: str
    day: str
