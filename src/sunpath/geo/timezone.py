from __future__ import annotations

import re

from ..core.types import TimezoneOffset

_TZ_RE = re.compile(r"^([+-])?(\d{1,2})(?::?(\d{2}))?$")
_ZERO_NAMES = ("Z", "UTC", "GMT")

MAX_OFFSET_HOURS = 14

INVALID = TimezoneOffset(minutes=0, is_valid=False)


def parse_timezone_offset(text: str) -> TimezoneOffset:
    """
    Free-text UTC offset -> signed minutes.

    Accepts "Z", "UTC", "GMT", or an optional sign, 1-2 digit hours and
    optional 2-digit minutes ("+8", "-05:30", "+0545"), optionally prefixed
    by "UTC" or "GMT". Invalid input gives minutes=0 with is_valid=False.
    """
    raw = (text or "").strip().upper()
    if not raw:
        return INVALID
    if raw in _ZERO_NAMES:
        return TimezoneOffset(minutes=0, is_valid=True)

    for prefix in ("UTC", "GMT"):
        if raw.startswith(prefix):
            raw = raw[len(prefix):]
            break

    m = _TZ_RE.match(raw)
    if not m:
        return INVALID

    sign = -1 if m.group(1) == "-" else 1
    hours = int(m.group(2))
    minutes = int(m.group(3) or 0)

    if hours > MAX_OFFSET_HOURS or minutes >= 60:
        return INVALID

    return TimezoneOffset(minutes=sign * (hours * 60 + minutes), is_valid=True)


def format_timezone_offset(total_minutes: int) -> str:
    """Signed minutes -> "UTC+08:00"."""
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(int(total_minutes)), 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"
