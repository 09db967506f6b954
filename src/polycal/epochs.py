"""
polycal.epochs
--------------
Fixed table of calendar epochs: the JDN of day 1 of month 1 of year 1 in each
calendar. Converters count days relative to their entry here.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .core.types import Calendar

# Goodman-Martinez-Thompson correlation: Long Count 0.0.0.0.0 = Gregorian -3113-08-11
MAYAN_EPOCH = 584283

EPOCHS: Mapping[Calendar, int] = MappingProxyType({
    Calendar.GREGORIAN: 1721426,          # Gregorian 1-01-01
    Calendar.JULIAN: 1721424,             # Julian 1-01-01
    Calendar.ISLAMIC: 1948439,            # Julian 622-07-15, astronomical (Thursday) epoch
    Calendar.HEBREW: 347997,              # Julian -3760-10-06, approximate
    Calendar.PERSIAN: 1948318,            # Gregorian 622-03-19
    Calendar.CHINESE: 2415051,            # reference new year, Gregorian 1900-01-31
    Calendar.ETHIOPIAN: 1724221,          # Julian 8-08-29
    Calendar.COPTIC: 1825030,             # Julian 284-08-29
    Calendar.INDIAN_SAKA: 1749630,        # Gregorian 78-03-22
    Calendar.BAHAI: 2394647,              # Gregorian 1844-03-21
    Calendar.THAI_BUDDHIST: 1523099,      # Gregorian -542-01-01
    Calendar.MAYAN_TZOLKIN: MAYAN_EPOCH,
    Calendar.MAYAN_HAAB: MAYAN_EPOCH,
    Calendar.MAYAN_LONGCOUNT: MAYAN_EPOCH,
    Calendar.CHEROKEE: 1721426,           # Gregorian 1-01-01
    Calendar.IROQUOIS: 1721426,           # Gregorian 1-01-01
    Calendar.AZTEC_XIUHPOHUALLI: MAYAN_EPOCH,
})

# Year number of the Chinese reference entry (the Chinese calendar is
# astronomical and does not count days from a fixed epoch).
CHINESE_REFERENCE_YEAR = 1900


def epoch_jdn(calendar: Calendar | str) -> int:
    return EPOCHS[Calendar.parse(calendar)]
