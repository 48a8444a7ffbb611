"""sunpath public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import day_report, position_at, year_overview
from .core.angles import clamp, deg_to_rad, normalize_degrees, rad_to_deg
from .core.types import (
    AltitudeSample,
    DayReport,
    PhotoWindows,
    SolarPosition,
    SolarWindow,
    SunEventTimes,
    TimezoneOffset,
    TwilightBand,
    TwilightTimes,
)
from .engines.events import sunrise_sunset, twilight_band, twilight_times
from .engines.photography import compute_photo_windows, find_windows
from .engines.sampling import altitude_series, sun_path, year_curves, year_summary
from .geo.time import (
    format_duration,
    format_minutes,
    format_time_with_offset,
    get_utc_instant,
)
from .geo.timezone import format_timezone_offset, parse_timezone_offset
from .reference.solar import solar_declination_and_eot, solar_position
from .reference.time_scales import instant_from_ms, to_julian_date

__all__ = [
    "day_report",
    "position_at",
    "year_overview",
    "clamp",
    "deg_to_rad",
    "rad_to_deg",
    "normalize_degrees",
    "to_julian_date",
    "instant_from_ms",
    "solar_declination_and_eot",
    "solar_position",
    "sunrise_sunset",
    "twilight_band",
    "twilight_times",
    "compute_photo_windows",
    "find_windows",
    "sun_path",
    "altitude_series",
    "year_curves",
    "year_summary",
    "get_utc_instant",
    "format_minutes",
    "format_time_with_offset",
    "format_duration",
    "parse_timezone_offset",
    "format_timezone_offset",
    "AltitudeSample",
    "DayReport",
    "PhotoWindows",
    "SolarPosition",
    "SolarWindow",
    "SunEventTimes",
    "TimezoneOffset",
    "TwilightBand",
    "TwilightTimes",
]
