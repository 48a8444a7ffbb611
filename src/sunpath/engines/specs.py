from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Tuple

from ..core.errors import UnknownProfileError


# ============================================================
# ALTITUDE THRESHOLDS (sun centre, degrees)
# ============================================================

# Refraction + solar semi-diameter
SUNRISE_ALTITUDE = -0.833

CIVIL_ALTITUDE = -6.0
NAUTICAL_ALTITUDE = -12.0
ASTRONOMICAL_ALTITUDE = -18.0

GOLDEN_RANGE: Tuple[float, float] = (0.0, 6.0)
BLUE_RANGE: Tuple[float, float] = (-6.0, 0.0)


# ============================================================
# SAMPLING PROFILES
# ============================================================

@dataclass(frozen=True)
class SamplingSpec:
    """Pure data payload describing how days and years are sampled."""
    name: str
    path_step_min: int = 5
    year_curve_step_min: int = 10
    year_reference_day: int = 21
    sunrise_altitude_deg: float = SUNRISE_ALTITUDE
    golden_range: Tuple[float, float] = GOLDEN_RANGE
    blue_range: Tuple[float, float] = BLUE_RANGE
    twilight_altitudes: Tuple[float, float, float] = (
        CIVIL_ALTITUDE,
        NAUTICAL_ALTITUDE,
        ASTRONOMICAL_ALTITUDE,
    )

    def tweak(self, **kwargs) -> "SamplingSpec":
        return replace(self, **kwargs)


DEFAULT_SPEC = SamplingSpec(name="default")

ALL_SPECS: Dict[str, SamplingSpec] = {
    "default": DEFAULT_SPEC,
    "fine": DEFAULT_SPEC.tweak(name="fine", path_step_min=1, year_curve_step_min=5),
    "coarse": DEFAULT_SPEC.tweak(name="coarse", path_step_min=15, year_curve_step_min=30),
}


def get_spec(name: str) -> SamplingSpec:
    if name not in ALL_SPECS:
        raise UnknownProfileError(f"Unknown sampling profile '{name}'. Available: {sorted(ALL_SPECS)}")
    return ALL_SPECS[name]
