from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ..core.types import JulianMoment


# ============================================================
# Epochs
# ============================================================

_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC
_JD_J2000 = 2451545.0       # J2000.0
_MS_PER_DAY = 86400000.0

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ============================================================
# Instants
# ============================================================

def instant_from_ms(ms: float) -> datetime:
    """Milliseconds since the Unix epoch -> timezone-aware UTC datetime."""
    return _UNIX_EPOCH + timedelta(milliseconds=ms)


def ms_since_epoch(instant: datetime) -> float:
    """
    Timezone-aware datetime -> milliseconds since the Unix epoch.

    Computed from the timedelta rather than ``timestamp()`` so that the
    result is exact for the whole datetime range.
    """
    if instant.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return (instant - _UNIX_EPOCH) / timedelta(milliseconds=1)


def utc_minutes_of_day(instant: datetime) -> float:
    """Minutes elapsed since 00:00 UTC of the instant's UTC day."""
    if instant.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    u = instant.astimezone(timezone.utc)
    return (
        u.hour * 60
        + u.minute
        + u.second / 60.0
        + u.microsecond / 60000000.0
    )


# ============================================================
# datetime(UTC) <-> JD(UTC)
# ============================================================

def datetime_utc_to_jd(dt: datetime) -> float:
    """
    datetime -> JD (UTC). Requires timezone-aware datetime.
      JD = ms / 86400000 + 2440587.5
    """
    return ms_since_epoch(dt) / _MS_PER_DAY + _JD_UNIX_EPOCH


# ============================================================
# Julian centuries from J2000.0
# ============================================================

def julian_century(jd: float) -> float:
    """
    T = (JD - 2451545.0) / 36525
    """
    return (jd - _JD_J2000) / 36525.0


def to_julian_date(instant: datetime) -> JulianMoment:
    """Instant -> (JD, Julian centuries since J2000.0). Never fails for aware datetimes."""
    jd = datetime_utc_to_jd(instant)
    return JulianMoment(jd=jd, jc=julian_century(jd))
