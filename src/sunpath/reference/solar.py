# reference/solar.py

from __future__ import annotations

import math
from datetime import datetime

from ..core.angles import clamp, deg_to_rad, normalize_degrees, rad_to_deg, wrap180
from ..core.types import SolarAngles, SolarPosition
from . import time_scales as ts


def solar_declination_and_eot(jc: float) -> SolarAngles:
    """
    Solar declination (degrees) and Equation of Time (minutes) for a given
    Julian century, using the NOAA low-precision series.

    This is the only place the seasonal terms are evaluated; position and
    event computations both go through it.
    """
    # Geometric mean longitude and mean anomaly
    L0 = normalize_degrees(280.46646 + jc * (36000.76983 + jc * 0.0003032))
    M = 357.52911 + jc * (35999.05029 - 0.0001537 * jc)
    e = 0.016708634 - jc * (0.000042037 + 0.0000001267 * jc)

    M_rad = deg_to_rad(M)

    # Equation of centre
    C = (
        math.sin(M_rad) * (1.914602 - jc * (0.004817 + 0.000014 * jc))
        + math.sin(2.0 * M_rad) * (0.019993 - 0.000101 * jc)
        + math.sin(3.0 * M_rad) * 0.000289
    )

    L_true = L0 + C

    # Apparent longitude with aberration and leading nutation (lunar node)
    omega_rad = deg_to_rad(125.04 - 1934.136 * jc)
    L_app = L_true - 0.00569 - 0.00478 * math.sin(omega_rad)

    # Mean and corrected obliquity
    eps0 = 23.0 + (26.0 + (21.448 - jc * (46.815 + jc * (0.00059 - jc * 0.001813))) / 60.0) / 60.0
    eps = eps0 + 0.00256 * math.cos(omega_rad)
    eps_rad = deg_to_rad(eps)

    declination = rad_to_deg(math.asin(math.sin(eps_rad) * math.sin(deg_to_rad(L_app))))

    y = math.tan(eps_rad / 2.0)
    y2 = y * y
    L0_rad = deg_to_rad(L0)

    eot = 4.0 * rad_to_deg(
        y2 * math.sin(2.0 * L0_rad)
        - 2.0 * e * math.sin(M_rad)
        + 4.0 * e * y2 * math.sin(M_rad) * math.cos(2.0 * L0_rad)
        - 0.5 * y2 * y2 * math.sin(4.0 * L0_rad)
        - 1.25 * e * e * math.sin(2.0 * M_rad)
    )

    return SolarAngles(declination_deg=declination, equation_of_time_min=eot)


def solar_position(lat_deg: float, lon_deg: float, instant_utc: datetime) -> SolarPosition:
    """
    NOAA-style horizontal coordinates of the Sun.

    Altitude in [-90, 90]; azimuth in [0, 360) measured from north through east.
    """
    jc = ts.to_julian_date(instant_utc).jc
    angles = solar_declination_and_eot(jc)
    decl = angles.declination_deg
    eot = angles.equation_of_time_min

    utc_minutes = ts.utc_minutes_of_day(instant_utc)

    # True solar time in [0, 1440)
    true_solar_time = (utc_minutes + eot + 4.0 * lon_deg) % 1440.0
    if true_solar_time >= 1440.0:
        true_solar_time -= 1440.0

    hour_angle = wrap180(true_solar_time / 4.0 - 180.0)

    lat_rad = deg_to_rad(lat_deg)
    decl_rad = deg_to_rad(decl)
    ha_rad = deg_to_rad(hour_angle)

    cos_zenith = (
        math.sin(lat_rad) * math.sin(decl_rad)
        + math.cos(lat_rad) * math.cos(decl_rad) * math.cos(ha_rad)
    )
    zenith = rad_to_deg(math.acos(clamp(cos_zenith, -1.0, 1.0)))
    altitude = 90.0 - zenith

    # atan2 gives the angle from south; shift by 180 to count from north
    azimuth = normalize_degrees(
        rad_to_deg(
            math.atan2(
                math.sin(ha_rad),
                math.cos(ha_rad) * math.sin(lat_rad) - math.tan(decl_rad) * math.cos(lat_rad),
            )
        )
        + 180.0
    )

    return SolarPosition(
        altitude_deg=altitude,
        azimuth_deg=azimuth,
        declination_deg=decl,
        equation_of_time_min=eot,
    )
