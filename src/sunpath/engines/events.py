"""
sunpath.engines.events
----------------------
Sunrise, sunset, solar noon and twilight bands for a civil date.

Every event is solved by the same hour-angle construction: the Sun's
declination and the Equation of Time are taken at UTC midnight of the civil
date, and the event is placed symmetrically around solar noon at the hour
angle where the Sun's centre crosses the target altitude.

All outputs are minutes from local midnight and are NOT wrapped into
[0, 1440); a value of -12 means 23:48 on the previous day.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Tuple

from ..core.angles import clamp, deg_to_rad, rad_to_deg
from ..core.types import SunEventTimes, TwilightBand, TwilightTimes
from ..geo.time import MINUTES_PER_DAY, parse_civil_date
from ..reference import solar
from ..reference import time_scales as ts
from .specs import (
    ASTRONOMICAL_ALTITUDE,
    CIVIL_ALTITUDE,
    NAUTICAL_ALTITUDE,
    SUNRISE_ALTITUDE,
)

logger = logging.getLogger(__name__)

UNPARSEABLE = SunEventTimes(
    sunrise_min=None,
    sunset_min=None,
    solar_noon_min=None,
    daylight_min=None,
    status="normal",
    valid=False,
)


def solve_event(
    lat_deg: float,
    lon_deg: float,
    date_string: str,
    tz_offset_min: float,
    sun_altitude_deg: float,
) -> SunEventTimes:
    """
    Generic hour-angle solver.

    cos H = cos(z) / (cos φ cos δ) - tan φ tan δ,   z = 90° - h0

    cos H > 1  -> the Sun never climbs to h0 ("polar-night", daylight 0)
    cos H < -1 -> the Sun never drops to h0 ("polar-day", daylight 1440)
    """
    d = parse_civil_date(date_string)
    if d is None:
        return UNPARSEABLE

    midnight_utc = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    angles = solar.solar_declination_and_eot(ts.to_julian_date(midnight_utc).jc)

    noon_utc = 720.0 - 4.0 * lon_deg - angles.equation_of_time_min
    noon_local = noon_utc + tz_offset_min

    lat_rad = deg_to_rad(lat_deg)
    decl_rad = deg_to_rad(angles.declination_deg)
    zenith_rad = deg_to_rad(90.0 - sun_altitude_deg)

    cos_H = (
        math.cos(zenith_rad) / (math.cos(lat_rad) * math.cos(decl_rad))
        - math.tan(lat_rad) * math.tan(decl_rad)
    )

    if cos_H > 1.0:
        logger.debug("polar-night at lat=%s on %s for h0=%s", lat_deg, date_string, sun_altitude_deg)
        return SunEventTimes(
            sunrise_min=None,
            sunset_min=None,
            solar_noon_min=noon_local,
            daylight_min=0.0,
            status="polar-night",
        )

    if cos_H < -1.0:
        logger.debug("polar-day at lat=%s on %s for h0=%s", lat_deg, date_string, sun_altitude_deg)
        return SunEventTimes(
            sunrise_min=None,
            sunset_min=None,
            solar_noon_min=noon_local,
            daylight_min=float(MINUTES_PER_DAY),
            status="polar-day",
        )

    # 1 degree of hour angle = 4 minutes
    H_deg = rad_to_deg(math.acos(clamp(cos_H, -1.0, 1.0)))

    return SunEventTimes(
        sunrise_min=noon_utc - 4.0 * H_deg + tz_offset_min,
        sunset_min=noon_utc + 4.0 * H_deg + tz_offset_min,
        solar_noon_min=noon_local,
        daylight_min=8.0 * H_deg,
        status="normal",
    )


def sunrise_sunset(
    lat_deg: float,
    lon_deg: float,
    date_string: str,
    tz_offset_min: float,
    sun_altitude_deg: float = SUNRISE_ALTITUDE,
) -> SunEventTimes:
    """Sunrise, sunset, solar noon and day length (upper limb at the horizon by default)."""
    return solve_event(lat_deg, lon_deg, date_string, tz_offset_min, sun_altitude_deg)


def twilight_band(
    lat_deg: float,
    lon_deg: float,
    date_string: str,
    tz_offset_min: float,
    sun_altitude_deg: float,
) -> TwilightBand:
    """Morning start and evening end of a twilight band; both None if it never occurs."""
    ev = solve_event(lat_deg, lon_deg, date_string, tz_offset_min, sun_altitude_deg)
    return TwilightBand(start_min=ev.sunrise_min, end_min=ev.sunset_min)


def twilight_times(
    lat_deg: float,
    lon_deg: float,
    date_string: str,
    tz_offset_min: float,
    altitudes: Tuple[float, float, float] = (CIVIL_ALTITUDE, NAUTICAL_ALTITUDE, ASTRONOMICAL_ALTITUDE),
) -> TwilightTimes:
    civil, nautical, astronomical = (
        twilight_band(lat_deg, lon_deg, date_string, tz_offset_min, h0) for h0 in altitudes
    )
    return TwilightTimes(civil=civil, nautical=nautical, astronomical=astronomical)
