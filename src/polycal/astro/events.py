"""
polycal.astro.events
--------------------
Solstices, equinoxes and the principal moon phases.

Unlike the Chinese calendar helpers in lunisolar.py, events here are reduced
to civil days in UT: the day of a moment is the JDN of its UT date,
floor(jd_ut + 0.5).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Literal, Tuple

from ..core.jdn import check_year, gregorian_jdn, gregorian_ymd
from .astro_args import MEAN_SYNODIC_MONTH, NEW_MOON_EPOCH_JDE, wrap_deg
from .deltat import ut_to_tt
from .lunar import lunar_position
from .lunisolar import lunar_phase_ut, solar_longitude_moment
from .solar import solar_longitude

EventKind = Literal["season", "moon-phase"]

# (event, apparent solar longitude, Gregorian month and day it falls near)
SEASONS: Tuple[Tuple[str, float, int, int], ...] = (
    ("vernal-equinox", 0.0, 3, 20),
    ("summer-solstice", 90.0, 6, 21),
    ("autumnal-equinox", 180.0, 9, 22),
    ("winter-solstice", 270.0, 12, 21),
)

# principal phases, by quarter of the lunation
MOON_PHASES = ("new", "first-quarter", "full", "last-quarter")

# 45-degree elongation sectors centred on the principal phases
MOON_PHASE_NAMES = (
    "new",
    "waxing-crescent",
    "first-quarter",
    "waxing-gibbous",
    "full",
    "waning-gibbous",
    "last-quarter",
    "waning-crescent",
)

EVENT_LABELS = {
    "vernal-equinox": "Vernal Equinox",
    "summer-solstice": "Summer Solstice",
    "autumnal-equinox": "Autumnal Equinox",
    "winter-solstice": "Winter Solstice",
    "new": "New Moon",
    "first-quarter": "First Quarter",
    "full": "Full Moon",
    "last-quarter": "Last Quarter",
}

_SEASON_TABLE = {name: (lon, month, day) for name, lon, month, day in SEASONS}


@dataclass(frozen=True)
class AstroEvent:
    kind: EventKind
    name: str
    jd_ut: float
    jdn: int           # UT civil day

    @property
    def label(self) -> str:
        return EVENT_LABELS[self.name]


def ut_day(jd_ut: float) -> int:
    return math.floor(jd_ut + 0.5)


# ------------------------------------------------------------
# Solstices and equinoxes
# ------------------------------------------------------------

def season_moment(year: int, name: str) -> float:
    """UT moment of a solstice or equinox (`name` from SEASONS) in Gregorian `year`."""
    check_year(year)
    if name not in _SEASON_TABLE:
        raise ValueError(f"unknown solstice/equinox {name!r}")
    lon, month, day = _SEASON_TABLE[name]
    guess = gregorian_jdn(year, month, day)
    return solar_longitude_moment(lon, guess - 20.0, guess + 20.0)


def season_day(year: int, name: str) -> int:
    return ut_day(season_moment(year, name))


@lru_cache(maxsize=256)
def seasons(year: int) -> Tuple[AstroEvent, ...]:
    """The four solstices and equinoxes of Gregorian `year`, in date order."""
    out = []
    for name, _lon, _month, _day in SEASONS:
        t = season_moment(year, name)
        out.append(AstroEvent("season", name, t, ut_day(t)))
    return tuple(out)


# ------------------------------------------------------------
# Moon phases
# ------------------------------------------------------------

def elongation(jd_ut: float) -> float:
    """Apparent lunar minus solar longitude in degrees, [0, 360)."""
    t = ut_to_tt(jd_ut)
    return wrap_deg(lunar_position(t).L_app_deg - solar_longitude(t).L_app_deg)


def moon_phase(jdn: int) -> str:
    """Phase name (MOON_PHASE_NAMES) at noon UT of day `jdn`."""
    return MOON_PHASE_NAMES[math.floor((elongation(float(jdn)) + 22.5) / 45.0) % 8]


def moon_phases(start: int, end: int) -> List[AstroEvent]:
    """Principal moon phases whose UT day lies in [start, end], in order."""
    events: List[AstroEvent] = []
    if end < start:
        return events
    # one lunation early, so a last quarter just before `start` is not skipped
    k = math.floor((start - NEW_MOON_EPOCH_JDE) / MEAN_SYNODIC_MONTH) - 1
    while True:
        moments = [lunar_phase_ut(k, q) for q in range(4)]
        if ut_day(moments[0]) > end:
            break
        for name, t in zip(MOON_PHASES, moments):
            day = ut_day(t)
            if start <= day <= end:
                events.append(AstroEvent("moon-phase", name, t, day))
        k += 1
    return events


# ------------------------------------------------------------
# Ranges
# ------------------------------------------------------------

def events_between(start: int, end: int) -> List[AstroEvent]:
    """Solstices, equinoxes and principal moon phases with UT day in [start, end]."""
    if end < start:
        return []
    out = []
    for year in range(gregorian_ymd(start)[0], gregorian_ymd(end)[0] + 1):
        out.extend(e for e in seasons(year) if start <= e.jdn <= end)
    out.extend(moon_phases(start, end))
    out.sort(key=lambda e: e.jd_ut)
    return out


def events_on(jdn: int) -> List[AstroEvent]:
    return events_between(jdn, jdn)
