from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Optional, Tuple

from .core.errors import InvalidInputError, SunpathError
from .core.types import SunEventTimes, TwilightBand
from .geo.format import format_degrees
from .geo.time import format_duration, format_time_with_offset, parse_civil_date
from .geo.timezone import format_timezone_offset, parse_timezone_offset

logger = logging.getLogger(__name__)

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

DASH = "—"


# ============================================================
# Caller-side validation
# ============================================================

def require_coordinates(lat: float, lon: float) -> Tuple[float, float]:
    if not -90.0 <= lat <= 90.0:
        raise InvalidInputError(f"latitude must be within [-90, 90], got {lat}")
    if not -180.0 <= lon <= 180.0:
        raise InvalidInputError(f"longitude must be within [-180, 180], got {lon}")
    return lat, lon


def require_timezone(text: str, *, dst: bool = False) -> int:
    """Parse the offset text; daylight saving adds one hour."""
    tz = parse_timezone_offset(text)
    if not tz.is_valid:
        raise InvalidInputError(f"invalid timezone offset {text!r} (expected e.g. +08:00, UTC-5, Z)")
    return tz.minutes + (60 if dst else 0)


def require_date(text: str) -> str:
    if parse_civil_date(text) is None:
        raise InvalidInputError(f"invalid date {text!r} (expected YYYY-MM-DD)")
    return text


def parse_clock_time(text: str) -> int:
    """"HH:MM" -> minutes from midnight (24:00 allowed)."""
    m = _CLOCK_RE.match(text.strip())
    if not m:
        raise InvalidInputError(f"invalid time {text!r} (expected HH:MM)")
    h, mi = int(m.group(1)), int(m.group(2))
    if mi >= 60 or h > 24 or (h == 24 and mi > 0):
        raise InvalidInputError(f"invalid time {text!r}")
    return h * 60 + mi


# ============================================================
# Output helpers
# ============================================================

def _fmt_opt(minutes: Optional[float]) -> str:
    return format_time_with_offset(minutes) if minutes is not None else DASH


def _fmt_band(band: TwilightBand) -> str:
    if not band.defined:
        return DASH
    return f"{format_time_with_offset(band.start_min)}–{format_time_with_offset(band.end_min)}"


def _fmt_windows(windows) -> str:
    if not windows:
        return DASH
    return " / ".join(
        f"{format_time_with_offset(w.start_min)}–{format_time_with_offset(w.end_min)}" for w in windows
    )


def _status_note(ev: SunEventTimes) -> str:
    if ev.status == "polar-day":
        return "  (polar day: the Sun stays above the horizon)"
    if ev.status == "polar-night":
        return "  (polar night: the Sun stays below the horizon)"
    return ""


def _add_site_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, required=True, help="Latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, required=True, help="Longitude in degrees (positive East)")
    p.add_argument("--tz", default="UTC", help="UTC offset, e.g. +08:00, -05:00, UTC+5:30 (default: UTC)")
    p.add_argument("--dst", action="store_true", help="Add one hour of daylight saving time")
    p.add_argument("--profile", default="default", help="Sampling profile (default, fine, coarse)")


def _site(args) -> Tuple[float, float, int]:
    lat, lon = require_coordinates(args.lat, args.lon)
    return lat, lon, require_timezone(args.tz, dst=args.dst)


def _print_header(date_string: str, lat: float, lon: float, tz: int) -> None:
    print(f"Date     : {date_string}")
    print(f"Location : {format_degrees(lat, 'N', 'S')} {format_degrees(lon, 'E', 'W')}")
    print(f"Timezone : {format_timezone_offset(tz)}")
    print()


# ============================================================
# Commands
# ============================================================

def cmd_position(argv: list[str]) -> int:
    from .api import position_at

    p = argparse.ArgumentParser(prog="sunpath position", description="Sun altitude and azimuth at a local time.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--time", default="12:00", help="Local clock time HH:MM (default: 12:00)")
    _add_site_args(p)
    args = p.parse_args(argv)

    date_string = require_date(args.date)
    lat, lon, tz = _site(args)
    minutes = parse_clock_time(args.time)

    pos = position_at(lat, lon, date_string, minutes, tz)
    if pos is None:
        raise InvalidInputError(f"cannot compute a UTC instant for {date_string} {args.time}")

    _print_header(date_string, lat, lon, tz)
    print(f"Solar Position at {args.time}:")
    print(f"  Altitude          = {pos.altitude_deg:.1f}°")
    print(f"  Azimuth           = {pos.azimuth_deg:.1f}°")
    print(f"  Declination       = {pos.declination_deg:.4f}°")
    print(f"  Equation of Time  = {pos.equation_of_time_min:.2f} min")
    return 0


def cmd_events(argv: list[str]) -> int:
    from .engines.events import sunrise_sunset, twilight_times
    from .engines.specs import get_spec

    p = argparse.ArgumentParser(prog="sunpath events", description="Sunrise, sunset, solar noon and twilight.")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_site_args(p)
    args = p.parse_args(argv)

    date_string = require_date(args.date)
    lat, lon, tz = _site(args)
    spec = get_spec(args.profile)

    ev = sunrise_sunset(lat, lon, date_string, tz, spec.sunrise_altitude_deg)
    tw = twilight_times(lat, lon, date_string, tz, spec.twilight_altitudes)

    _print_header(date_string, lat, lon, tz)
    print(f"Sunrise      : {_fmt_opt(ev.sunrise_min)}{_status_note(ev)}")
    print(f"Solar noon   : {_fmt_opt(ev.solar_noon_min)}")
    print(f"Sunset       : {_fmt_opt(ev.sunset_min)}")
    print(f"Daylight     : {format_duration(ev.daylight_min) if ev.daylight_min is not None else DASH}")
    print()
    print("Twilight (dawn–dusk):")
    print(f"  Civil        (-6°) : {_fmt_band(tw.civil)}")
    print(f"  Nautical    (-12°) : {_fmt_band(tw.nautical)}")
    print(f"  Astronomical(-18°) : {_fmt_band(tw.astronomical)}")
    return 0


def cmd_windows(argv: list[str]) -> int:
    from .engines.photography import compute_photo_windows
    from .engines.sampling import altitude_series, sun_path
    from .engines.specs import get_spec

    p = argparse.ArgumentParser(prog="sunpath windows", description="Golden-hour and blue-hour windows.")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_site_args(p)
    p.add_argument("--step", type=int, default=None, help="Sampling step in minutes (overrides profile)")
    args = p.parse_args(argv)

    date_string = require_date(args.date)
    lat, lon, tz = _site(args)
    spec = get_spec(args.profile)
    step = args.step if args.step is not None else spec.path_step_min
    if step <= 0:
        raise InvalidInputError("--step must be positive")

    series = altitude_series(sun_path(lat, lon, date_string, tz, step))
    windows = compute_photo_windows(series, spec.golden_range, spec.blue_range)

    _print_header(date_string, lat, lon, tz)
    lo, hi = spec.golden_range
    print(f"Golden hour ({lo:g}° to {hi:g}°) : {_fmt_windows(windows.golden)}")
    lo, hi = spec.blue_range
    print(f"Blue hour   ({lo:g}° to {hi:g}°) : {_fmt_windows(windows.blue)}")
    return 0


def cmd_day(argv: list[str]) -> int:
    from .api import day_report
    from .engines.specs import get_spec

    p = argparse.ArgumentParser(prog="sunpath day", description="Full solar report for one day.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--time", default="12:00", help="Local clock time HH:MM (default: 12:00)")
    _add_site_args(p)
    args = p.parse_args(argv)

    date_string = require_date(args.date)
    lat, lon, tz = _site(args)
    minutes = parse_clock_time(args.time)

    report = day_report(lat, lon, date_string, minutes, tz, spec=get_spec(args.profile))
    if report is None:
        raise InvalidInputError(f"cannot compute for {date_string}")

    ev, tw, pw = report.events, report.twilight, report.photo_windows
    _print_header(date_string, lat, lon, tz)
    print(f"Sunrise      : {_fmt_opt(ev.sunrise_min)}{_status_note(ev)}")
    print(f"Solar noon   : {_fmt_opt(ev.solar_noon_min)}")
    print(f"Sunset       : {_fmt_opt(ev.sunset_min)}")
    print(f"Daylight     : {format_duration(ev.daylight_min) if ev.daylight_min is not None else DASH}")
    print(f"Civil        : {_fmt_band(tw.civil)}")
    print(f"Nautical     : {_fmt_band(tw.nautical)}")
    print(f"Astronomical : {_fmt_band(tw.astronomical)}")
    print(f"Golden hour  : {_fmt_windows(pw.golden)}")
    print(f"Blue hour    : {_fmt_windows(pw.blue)}")
    if report.position is not None:
        print(f"Azimuth      : {report.position.azimuth_deg:.1f}° at {args.time}")
        print(f"Altitude     : {report.position.altitude_deg:.1f}° at {args.time}")
    return 0


def cmd_year(argv: list[str]) -> int:
    from .api import year_overview
    from .engines.specs import get_spec

    p = argparse.ArgumentParser(prog="sunpath year", description="Year overview: day length and noon altitude extremes.")
    p.add_argument("year", type=int, help="Gregorian year")
    p.add_argument("--curves", action="store_true", help="Also print the monthly reference-day noon altitude")
    _add_site_args(p)
    args = p.parse_args(argv)

    if not 1 <= args.year <= 9999:
        raise InvalidInputError(f"year out of range: {args.year}")
    lat, lon, tz = _site(args)

    curves, s = year_overview(lat, lon, args.year, tz, spec=get_spec(args.profile))

    print(f"Year     : {s.year}")
    print(f"Location : {format_degrees(lat, 'N', 'S')} {format_degrees(lon, 'E', 'W')}")
    print(f"Timezone : {format_timezone_offset(tz)}")
    print()
    print(f"Longest daylight   : {format_duration(s.longest_daylight_min)}  ({s.longest_date})")
    print(f"Shortest daylight  : {format_duration(s.shortest_daylight_min)}  ({s.shortest_date})")
    if s.max_noon_altitude_deg is not None:
        print(f"Highest noon Sun   : {s.max_noon_altitude_deg:.1f}°  ({s.max_noon_date})")
        print(f"Lowest noon Sun    : {s.min_noon_altitude_deg:.1f}°  ({s.min_noon_date})")

    if args.curves:
        print()
        print("Monthly reference days (peak sampled altitude):")
        for c in curves:
            peak = max((pt.altitude_deg for pt in c.points), default=None)
            peak_s = f"{peak:.1f}°" if peak is not None else DASH
            print(f"  {c.reference_date} : {peak_s}")
    return 0


# options whose values may start with "-" but are not plain negative numbers
_SIGNED_VALUE_OPTIONS = ("--lat", "--lon", "--tz")


def _join_signed_values(argv: list[str]) -> list[str]:
    """
    ["--tz", "-05:00"] -> ["--tz=-05:00"]

    argparse reads "-05:00" as an option flag, so the space-separated form
    would otherwise fail with "expected one argument".
    """
    out: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in _SIGNED_VALUE_OPTIONS and i + 1 < len(argv) and argv[i + 1].startswith("-"):
            out.append(f"{arg}={argv[i + 1]}")
            i += 2
            continue
        out.append(arg)
        i += 1
    return out


_COMMANDS = {
    "position": cmd_position,
    "events": cmd_events,
    "windows": cmd_windows,
    "day": cmd_day,
    "year": cmd_year,
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="sunpath", description="Solar position, sun events and photography windows.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("position", help="Sun altitude/azimuth at a local time")
    sub.add_parser("events", help="Sunrise, sunset, solar noon and twilight")
    sub.add_parser("windows", help="Golden-hour and blue-hour windows")
    sub.add_parser("day", help="Full solar report for one day")
    sub.add_parser("year", help="Year overview statistics")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _COMMANDS[args.cmd](_join_signed_values(rest))
    except SunpathError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"sunpath {args.cmd}: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
