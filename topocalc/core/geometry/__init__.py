"""Geometry primitives and angle utilities (UI-free)."""

from .angles import (
    DMS,
    normalize_bearing,
    normalize_signed,
    bearing_to_math_angle,
    math_angle_to_bearing,
    back_bearing,
    clockwise_angle,
    decimal_degrees_to_dms,
    dms_to_decimal_degrees,
)
from .primitives import (
    distance,
    bearing,
    polygon_area,
    segment_distances,
    perimeter,
    centroid,
    line_intersection,
    radiate,
    alignment_points,
    angle_between_points,
    mappe_sheet,
    MAPPE_SCALES,
)

__all__ = [
    # Angles
    "DMS",
    "normalize_bearing",
    "normalize_signed",
    "bearing_to_math_angle",
    "math_angle_to_bearing",
    "back_bearing",
    "clockwise_angle",
    "decimal_degrees_to_dms",
    "dms_to_decimal_degrees",

    # Primitives
    "distance",
    "bearing",
    "polygon_area",
    "segment_distances",
    "perimeter",
    "centroid",
    "line_intersection",
    "radiate",
    "alignment_points",
    "angle_between_points",
    "mappe_sheet",
    "MAPPE_SCALES",
]
