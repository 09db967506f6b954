"""
polycal.astro.lunisolar
-----------------------
Events the Chinese calendar is built from: new moons, the winter solstice
and the major solar terms, all reduced to civil days in Beijing time.

Moments are Julian Dates in UT; a civil day is the JDN of the local date,
floor(jd_local + 0.5).
"""

from __future__ import annotations

import math
from functools import lru_cache

from ..core.jdn import gregorian_jdn
from .astro_args import MEAN_SYNODIC_MONTH, NEW_MOON_EPOCH_JDE, T_centuries, jde_mean_new_moon, synodic_month_days, wrap180
from .deltat import tt_to_ut, ut_to_tt
from .lunar import lunar_position
from .solar import solar_longitude

# Beijing: 116°25' E local mean time until 1928, UT+8 afterwards
BEIJING_LMT_HOURS = 1397.0 / 180.0
BEIJING_STANDARD_HOURS = 8.0
_STANDARD_TIME_FROM = gregorian_jdn(1929, 1, 1)


# ------------------------------------------------------------
# Civil days
# ------------------------------------------------------------

def beijing_offset_days(jd_ut: float) -> float:
    hours = BEIJING_STANDARD_HOURS if jd_ut >= _STANDARD_TIME_FROM - 0.5 else BEIJING_LMT_HOURS
    return hours / 24.0


def local_day(jd_ut: float) -> int:
    """Civil day (JDN) in Beijing containing the moment `jd_ut`."""
    return math.floor(jd_ut + beijing_offset_days(jd_ut) + 0.5)


def local_midnight(day: int) -> float:
    """UT moment of Beijing midnight starting civil day `day`."""
    t = day - 0.5
    return t - beijing_offset_days(t)


def solar_longitude_ut(jd_ut: float) -> float:
    """Apparent solar longitude (degrees) at a UT moment."""
    return solar_longitude(ut_to_tt(jd_ut)).L_app_deg


# ------------------------------------------------------------
# Solar terms
# ------------------------------------------------------------

def major_term(day: int) -> int:
    """Major solar term (zhongqi) in effect at the start of civil day `day`, 1..12."""
    lon = solar_longitude_ut(local_midnight(day))
    return (2 + math.floor(lon / 30.0) - 1) % 12 + 1


def solar_longitude_moment(target_deg: float, lo: float, hi: float) -> float:
    """
    UT moment in [lo, hi] when the apparent solar longitude reaches
    `target_deg`; the bracket must contain exactly one crossing.
    """
    f_lo = wrap180(solar_longitude_ut(lo) - target_deg)
    for _ in range(48):
        mid = 0.5 * (lo + hi)
        f_mid = wrap180(solar_longitude_ut(mid) - target_deg)
        if (f_mid < 0.0) == (f_lo < 0.0):
            lo, f_lo = mid, f_mid
        else:
            hi = mid
    return 0.5 * (lo + hi)


@lru_cache(maxsize=1024)
def winter_solstice_day(year: int) -> int:
    """Civil day in Beijing on which the December solstice of Gregorian `year` falls."""
    guess = gregorian_jdn(year, 12, 21)
    t = solar_longitude_moment(270.0, guess - 20.0, guess + 20.0)
    day = local_day(t)
    # align with the midnight sampling used by major_term
    while wrap180(solar_longitude_ut(local_midnight(day + 1)) - 270.0) < 0.0:
        day += 1
    while wrap180(solar_longitude_ut(local_midnight(day)) - 270.0) >= 0.0:
        day -= 1
    return day


# ------------------------------------------------------------
# Lunar phases
# ------------------------------------------------------------

def lunar_phase_ut(k: int, quarter: int) -> float:
    """
    UT moment of a principal phase of lunation k (k = 0 is the new moon of
    2000 January 6): quarter 0 new, 1 first quarter, 2 full, 3 last quarter.
    """
    target = 90.0 * quarter
    t = jde_mean_new_moon(k + quarter / 4.0)
    for _ in range(12):
        elong = wrap180(lunar_position(t).L_app_deg - solar_longitude(t).L_app_deg - target)
        step = elong * synodic_month_days(T_centuries(t)) / 360.0
        t -= step
        if abs(step) < 1e-7:
            break
    return tt_to_ut(t)


def new_moon_ut(k: int) -> float:
    """UT moment of the k-th new moon (k = 0 is 2000 January 6)."""
    return lunar_phase_ut(k, 0)


@lru_cache(maxsize=8192)
def new_moon_day(k: int) -> int:
    return local_day(new_moon_ut(k))


def _lunation_near(day: int) -> int:
    return math.floor((day - NEW_MOON_EPOCH_JDE) / MEAN_SYNODIC_MONTH)


def new_moon_on_or_after(day: int) -> int:
    """First civil day >= `day` on which a new moon falls."""
    k = _lunation_near(day)
    while new_moon_day(k - 1) >= day:
        k -= 1
    while new_moon_day(k) < day:
        k += 1
    return new_moon_day(k)


def new_moon_before(day: int) -> int:
    """Last civil day < `day` on which a new moon falls."""
    k = _lunation_near(day)
    while new_moon_day(k) >= day:
        k -= 1
    while new_moon_day(k + 1) < day:
        k += 1
    return new_moon_day(k)
