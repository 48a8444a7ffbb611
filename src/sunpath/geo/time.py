from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\s*(\d{1,4})-(\d{1,2})-(\d{1,2})\s*$")

MINUTES_PER_DAY = 1440


def parse_civil_date(text: str) -> Optional[date]:
    """
    "YYYY-MM-DD" -> date, or None when the components are not integers.

    Out-of-range months and days roll over like a calendar counter:
    "2024-02-30" is 2024-03-01, "2024-13-01" is 2025-01-01 and
    "2024-03-00" is 2024-02-29. None is also returned when the result
    leaves the representable date range.
    """
    m = _DATE_RE.match(text or "")
    if not m:
        logger.debug("unparseable civil date %r", text)
        return None
    y, mo, d = (int(g) for g in m.groups())
    year, month0 = divmod(y * 12 + mo - 1, 12)
    try:
        return date(year, month0 + 1, 1) + timedelta(days=d - 1)
    except (OverflowError, ValueError):
        logger.debug("out-of-range civil date %r", text)
        return None


def get_utc_instant(date_string: str, local_minutes: float, tz_offset_minutes: float) -> Optional[datetime]:
    """
    Local civil time -> UTC instant.

    UTC midnight of the civil date plus (local_minutes - tz_offset_minutes).
    Returns None when the date cannot be parsed or the result leaves the
    representable datetime range.
    """
    d = parse_civil_date(date_string)
    if d is None:
        return None
    base = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    try:
        return base + timedelta(minutes=local_minutes - tz_offset_minutes)
    except (OverflowError, ValueError):
        logger.debug("local time %r on %s does not map to a UTC instant", local_minutes, date_string)
        return None


# ============================================================
# Display helpers
# ============================================================

def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def format_minutes(total_minutes: float) -> str:
    """Minutes from midnight -> "HH:MM" (no day rollover)."""
    minutes = _round_half_up(total_minutes)
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def format_time_with_offset(total_minutes: float) -> str:
    """
    Minutes from local midnight -> "HH:MM", with a "(+1)" / "(-1)" suffix
    when the value belongs to a neighbouring day.
    """
    day_offset, minutes = divmod(_round_half_up(total_minutes), MINUTES_PER_DAY)
    hours, mins = divmod(minutes, 60)
    base = f"{hours:02d}:{mins:02d}"
    if day_offset == 0:
        return base
    sign = "+" if day_offset > 0 else ""
    return f"{base} ({sign}{day_offset})"


def format_duration(total_minutes: float) -> str:
    """Minutes -> "Hh Mm"; negative durations show as 0h 0m."""
    minutes = max(0, _round_half_up(total_minutes))
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"
