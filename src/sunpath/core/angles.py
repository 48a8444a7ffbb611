from __future__ import annotations

import math
from math import fmod


DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi


def deg_to_rad(deg: float) -> float:
    return deg * DEG2RAD

def rad_to_deg(rad: float) -> float:
    return rad * RAD2DEG

def clamp(value: float, lo: float, hi: float) -> float:
    """Bound value to [lo, hi]."""
    return min(hi, max(lo, value))

def normalize_degrees(angle: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(angle, 360.0)
    if y < 0:
        y += 360.0
    # -1e-15 + 360.0 rounds to 360.0
    if y >= 360.0:
        y = 0.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return normalize_degrees(deg + 180.0) - 180.0
