# astro/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import astro_args as aa


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar longitude (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd_tt: float) -> SolarCoordinates:
    """
    True and apparent solar longitude for a given JD(TT) from the mean
    longitude plus the equation of center (accurate to ~0.01 deg).
    """
    T = aa.T_centuries(jd_tt)
    sm = aa.solar_mean_elements(T)
    fa = aa.fundamental_args(T)

    M_rad = math.radians(sm.M_deg)

    # Equation of center
    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )

    L_true = aa.wrap_deg(sm.L0_deg + C_sun)

    # aberration and leading nutation term
    Omega_rad = math.radians(fa.Omega_deg)
    L_app = aa.wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)
