"""topocalc.core.geometry.angles

Angle helpers shared by every component.

Conventions:
  - Bearing: North = 0, clockwise positive, degrees in [0, 360)
  - Math angle: East = 0, counter-clockwise positive, degrees
  - DMS: sign carried by the degrees component only

The two angle conventions never mix silently: functions that take or return
one of them say so in their name.
"""

from __future__ import annotations

import math
from typing import NamedTuple


FULL_CIRCLE = 360.0
HALF_CIRCLE = 180.0


class DMS(NamedTuple):
    """Degrees, minutes, seconds.

    ``degrees`` is a whole number held as float so that angles in (-1°, 0)
    keep their sign as ``-0.0``. ``minutes`` and ``seconds`` are magnitudes.
    """

    degrees: float
    minutes: int
    seconds: float


def normalize_bearing(angle: float) -> float:
    """Normalize angle in degrees to [0, 360)."""
    a = angle % FULL_CIRCLE
    # -1e-17 % 360 rounds to 360.0
    if a >= FULL_CIRCLE:
        a -= FULL_CIRCLE
    return a


def normalize_signed(angle: float) -> float:
    """Normalize angle in degrees to (-180, 180]."""
    a = (angle + HALF_CIRCLE) % FULL_CIRCLE - HALF_CIRCLE
    # Force +180 instead of -180 for deterministic behavior.
    if a <= -HALF_CIRCLE:
        a += FULL_CIRCLE
    return a


def bearing_to_math_angle(bearing: float) -> float:
    """Convert a surveyor bearing to a counter-clockwise-from-east angle in [0, 360)."""
    return normalize_bearing(90.0 - bearing)


def math_angle_to_bearing(math_angle: float) -> float:
    """Convert a counter-clockwise-from-east angle to a surveyor bearing in [0, 360)."""
    return normalize_bearing(90.0 - math_angle)


def back_bearing(bearing: float) -> float:
    """Reverse direction of a bearing."""
    return normalize_bearing(bearing + HALF_CIRCLE)


def clockwise_angle(from_bearing: float, to_bearing: float) -> float:
    """Angle turned clockwise from one bearing to another, in [0, 360)."""
    return normalize_bearing(to_bearing - from_bearing)


def decimal_degrees_to_dms(decimal_degrees: float) -> DMS:
    """Convert decimal degrees to a DMS tuple.

    NaN and infinities are returned in the degrees component unchanged.
    """
    if not math.isfinite(decimal_degrees):
        return DMS(decimal_degrees, 0, 0.0)
    magnitude = abs(decimal_degrees)
    degrees = math.floor(magnitude)
    minutes_float = (magnitude - degrees) * 60.0
    minutes = math.floor(minutes_float)
    seconds = (minutes_float - minutes) * 60.0
    return DMS(math.copysign(float(degrees), decimal_degrees), int(minutes), seconds)


def dms_to_decimal_degrees(degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> float:
    """Convert degrees-minutes-seconds to decimal degrees.

    The sign is taken from ``degrees``; a ``-0.0`` degrees value gives a
    negative result. NaN in any component yields NaN.
    """
    sign = math.copysign(1.0, degrees)
    return sign * (abs(degrees) + minutes / 60.0 + seconds / 3600.0)
