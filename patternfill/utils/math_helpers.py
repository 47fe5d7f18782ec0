"""Math helpers — clamping, degree/radian conversion. No engine imports."""

from __future__ import annotations

import math


def limit(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def positive_degrees(radians: float) -> float:
    """Convert to degrees, folding negative results into [0, 360).

    Positive angles are returned as-is, so 450° stays 450°.
    """
    degrees = radians_to_degrees(radians)
    if degrees < 0:
        degrees %= 360.0
    return degrees
