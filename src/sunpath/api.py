from __future__ import annotations

import logging
from typing import Optional, Tuple

from .core.types import DayReport, Location, SolarPosition, YearCurve, YearSummary
from .engines import sampling
from .engines.events import sunrise_sunset, twilight_times
from .engines.photography import compute_photo_windows
from .engines.specs import DEFAULT_SPEC, SamplingSpec
from .geo.time import get_utc_instant, parse_civil_date
from .reference.solar import solar_position

logger = logging.getLogger(__name__)


def position_at(
    lat_deg: float,
    lon_deg: float,
    date_string: str,
    local_minutes: float,
    tz_offset_min: float,
) -> Optional[SolarPosition]:
    """Sun position at a local clock time; None if the date cannot be parsed."""
    instant = get_utc_instant(date_string, local_minutes, tz_offset_min)
    if instant is None:
        return None
    return solar_position(lat_deg, lon_deg, instant)


def day_report(
    lat_deg: float,
    lon_deg: float,
    date_string: str,
    local_minutes: float,
    tz_offset_min: int,
    *,
    spec: SamplingSpec = DEFAULT_SPEC,
) -> Optional[DayReport]:
    """
    Position at the selected time, events, twilight, sampled path and
    photo windows for one day. None when the civil date cannot be parsed.
    """
    d = parse_civil_date(date_string)
    if d is None:
        logger.debug("day_report: cannot compute for %r", date_string)
        return None

    path = sampling.sun_path(lat_deg, lon_deg, date_string, tz_offset_min, spec.path_step_min)
    windows = compute_photo_windows(
        sampling.altitude_series(path),
        golden_range=spec.golden_range,
        blue_range=spec.blue_range,
    )

    return DayReport(
        civil_date=d,
        location=Location(lat_deg=lat_deg, lon_deg=lon_deg),
        tz_offset_min=tz_offset_min,
        local_minutes=local_minutes,
        position=position_at(lat_deg, lon_deg, date_string, local_minutes, tz_offset_min),
        events=sunrise_sunset(lat_deg, lon_deg, date_string, tz_offset_min, spec.sunrise_altitude_deg),
        twilight=twilight_times(lat_deg, lon_deg, date_string, tz_offset_min, spec.twilight_altitudes),
        path=path,
        photo_windows=windows,
    )


def year_overview(
    lat_deg: float,
    lon_deg: float,
    year: int,
    tz_offset_min: int,
    *,
    emphasized_month: Optional[int] = None,
    spec: SamplingSpec = DEFAULT_SPEC,
) -> Tuple[Tuple[YearCurve, ...], YearSummary]:
    curves = sampling.year_curves(
        lat_deg,
        lon_deg,
        year,
        tz_offset_min,
        step_min=spec.year_curve_step_min,
        reference_day=spec.year_reference_day,
        emphasized_month=emphasized_month,
    )
    summary = sampling.year_summary(lat_deg, lon_deg, year, tz_offset_min, spec.sunrise_altitude_deg)
    return curves, summary
