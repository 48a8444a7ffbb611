from __future__ import annotations

import calendar
from typing import Iterable, List, Optional, Tuple

from ..core.types import AltitudeSample, PathPoint, YearCurve, YearSummary
from ..geo.time import MINUTES_PER_DAY, get_utc_instant
from ..reference.solar import solar_position
from .events import sunrise_sunset
from .specs import DEFAULT_SPEC


def _date_string(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def sun_path(
    lat_deg: float,
    lon_deg: float,
    date_string: str,
    tz_offset_min: float,
    step_min: int = DEFAULT_SPEC.path_step_min,
) -> Tuple[PathPoint, ...]:
    """
    Sun altitude/azimuth every ``step_min`` minutes over a local day,
    endpoints included (0 and 1440). Empty when the date cannot be parsed.
    """
    if step_min <= 0:
        raise ValueError("step_min must be positive")
    points: List[PathPoint] = []
    for minute in range(0, MINUTES_PER_DAY + 1, step_min):
        instant = get_utc_instant(date_string, minute, tz_offset_min)
        if instant is None:
            continue
        pos = solar_position(lat_deg, lon_deg, instant)
        points.append(PathPoint(minute=minute, altitude_deg=pos.altitude_deg, azimuth_deg=pos.azimuth_deg))
    return tuple(points)


def altitude_series(path: Iterable[PathPoint]) -> Tuple[AltitudeSample, ...]:
    return tuple(AltitudeSample(minute=p.minute, altitude_deg=p.altitude_deg) for p in path)


def year_curves(
    lat_deg: float,
    lon_deg: float,
    year: int,
    tz_offset_min: float,
    *,
    step_min: int = DEFAULT_SPEC.year_curve_step_min,
    reference_day: int = DEFAULT_SPEC.year_reference_day,
    emphasized_month: Optional[int] = None,
) -> Tuple[YearCurve, ...]:
    """One sampled sun path per month, on ``reference_day`` of each month."""
    curves = []
    for month in range(1, 13):
        ref = _date_string(year, month, reference_day)
        curves.append(
            YearCurve(
                month=month,
                reference_date=ref,
                points=sun_path(lat_deg, lon_deg, ref, tz_offset_min, step_min),
                emphasized=(month == emphasized_month),
            )
        )
    return tuple(curves)


def year_summary(
    lat_deg: float,
    lon_deg: float,
    year: int,
    tz_offset_min: float,
    sun_altitude_deg: float = DEFAULT_SPEC.sunrise_altitude_deg,
) -> YearSummary:
    """
    Longest/shortest daylight and highest/lowest noon altitude over every
    civil day of ``year``. Ties keep the earliest date.
    """
    longest, longest_date = -1.0, ""
    shortest, shortest_date = float("inf"), ""
    max_noon: Optional[float] = None
    min_noon: Optional[float] = None
    max_noon_date: Optional[str] = None
    min_noon_date: Optional[str] = None

    for month in range(1, 13):
        _, days_in_month = calendar.monthrange(year, month)
        for day in range(1, days_in_month + 1):
            ds = _date_string(year, month, day)
            ev = sunrise_sunset(lat_deg, lon_deg, ds, tz_offset_min, sun_altitude_deg)
            daylight = ev.daylight_min if ev.daylight_min is not None else 0.0

            if daylight > longest:
                longest, longest_date = daylight, ds
            if daylight < shortest:
                shortest, shortest_date = daylight, ds

            if ev.solar_noon_min is None:
                continue
            noon = get_utc_instant(ds, ev.solar_noon_min, tz_offset_min)
            if noon is None:
                continue
            alt = solar_position(lat_deg, lon_deg, noon).altitude_deg
            if max_noon is None or alt > max_noon:
                max_noon, max_noon_date = alt, ds
            if min_noon is None or alt < min_noon:
                min_noon, min_noon_date = alt, ds

    return YearSummary(
        year=year,
        longest_daylight_min=longest,
        longest_date=longest_date,
        shortest_daylight_min=shortest,
        shortest_date=shortest_date,
        max_noon_altitude_deg=max_noon,
        max_noon_date=max_noon_date,
        min_noon_altitude_deg=min_noon,
        min_noon_date=min_noon_date,
    )
