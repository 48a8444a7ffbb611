from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..core.types import AltitudeSample, PhotoWindows, SolarWindow
from .specs import BLUE_RANGE, GOLDEN_RANGE


def find_windows(
    samples: Iterable[AltitudeSample],
    min_alt: float,
    max_alt: float,
) -> Tuple[SolarWindow, ...]:
    """
    Maximal runs of consecutive samples with min_alt <= altitude <= max_alt.

    Each run is reported as (first in-range minute, last in-range minute).
    Samples are taken in the given order; the caller sorts them by minute.
    """
    windows: List[SolarWindow] = []
    start: Optional[float] = None
    last: Optional[float] = None

    for s in samples:
        if min_alt <= s.altitude_deg <= max_alt:
            if start is None:
                start = s.minute
            last = s.minute
        elif start is not None:
            windows.append(SolarWindow(start_min=start, end_min=last))
            start = None
            last = None

    if start is not None:
        windows.append(SolarWindow(start_min=start, end_min=last))

    return tuple(windows)


def compute_photo_windows(
    samples: Iterable[AltitudeSample],
    golden_range: Tuple[float, float] = GOLDEN_RANGE,
    blue_range: Tuple[float, float] = BLUE_RANGE,
) -> PhotoWindows:
    """Golden-hour and blue-hour windows of a sampled altitude curve."""
    series = tuple(samples)
    return PhotoWindows(
        golden=find_windows(series, golden_range[0], golden_range[1]),
        blue=find_windows(series, blue_range[0], blue_range[1]),
    )
