from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Literal, Optional, Tuple

SunStatus = Literal["normal", "polar-day", "polar-night"]


@dataclass(frozen=True)
class Location:
    """Observer position in degrees (positive north / east). Not validated here."""
    lat_deg: float
    lon_deg: float

@dataclass(frozen=True)
class JulianMoment:
    jd: float
    jc: float

@dataclass(frozen=True)
class SolarAngles:
    """Location-independent part of the solar coordinates."""
    declination_deg: float
    equation_of_time_min: float

@dataclass(frozen=True)
class SolarPosition:
    altitude_deg: float
    azimuth_deg: float  # 0 = north, clockwise
    declination_deg: float
    equation_of_time_min: float

@dataclass(frozen=True)
class SunEventTimes:
    """
    Event times in minutes from local midnight.

    Values may lie outside [0, 1440) when the UTC event falls on a
    neighbouring civil day. ``valid`` is False only when the civil date
    could not be parsed; the other fields are then all None.
    """
    sunrise_min: Optional[float]
    sunset_min: Optional[float]
    solar_noon_min: Optional[float]
    daylight_min: Optional[float]
    status: SunStatus = "normal"
    valid: bool = True

@dataclass(frozen=True)
class TwilightBand:
    start_min: Optional[float] = None
    end_min: Optional[float] = None

    @property
    def defined(self) -> bool:
        return self.start_min is not None and self.end_min is not None

@dataclass(frozen=True)
class TwilightTimes:
    civil: TwilightBand
    nautical: TwilightBand
    astronomical: TwilightBand

@dataclass(frozen=True)
class AltitudeSample:
    minute: float
    altitude_deg: float

@dataclass(frozen=True)
class SolarWindow:
    start_min: float
    end_min: float

@dataclass(frozen=True)
class PhotoWindows:
    golden: Tuple[SolarWindow, ...]
    blue: Tuple[SolarWindow, ...]

@dataclass(frozen=True)
class TimezoneOffset:
    """Parsed offset. Branch on ``is_valid``; ``minutes`` is 0 when invalid."""
    minutes: int
    is_valid: bool

@dataclass(frozen=True)
class PathPoint:
    minute: float
    altitude_deg: float
    azimuth_deg: float

@dataclass(frozen=True)
class YearCurve:
    month: int
    reference_date: str
    points: Tuple[PathPoint, ...]
    emphasized: bool = False

@dataclass(frozen=True)
class YearSummary:
    year: int
    longest_daylight_min: float
    longest_date: str
    shortest_daylight_min: float
    shortest_date: str
    max_noon_altitude_deg: Optional[float]
    max_noon_date: Optional[str]
    min_noon_altitude_deg: Optional[float]
    min_noon_date: Optional[str]

@dataclass(frozen=True)
class DayReport:
    """Everything computed for one location, civil date and selected local time."""
    civil_date: date
    location: Location
    tz_offset_min: int
    local_minutes: float
    position: Optional[SolarPosition]
    events: SunEventTimes
    twilight: TwilightTimes
    path: Tuple[PathPoint, ...]
    photo_windows: PhotoWindows
