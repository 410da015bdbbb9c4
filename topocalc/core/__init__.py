"""
Core module for topographic computations.

This module contains pure Python implementations with no UI dependencies.
It can be used standalone or embedded in a surveying application.
"""

from .models import (
    Point,
    Coordinate,
    CoordinateSystem,
    TraverseLeg,
    HelmertControlPoint,
    ComputationOptions,
)

from .results import (
    DistanceResult,
    ClosingError,
    AngularError,
    TraverseResult,
    HelmertParameters,
    HelmertResidual,
    HelmertResult,
)

from .geometry import (
    DMS,
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
    decimal_degrees_to_dms,
    dms_to_decimal_degrees,
)

from .solver import (
    compensated_traverse,
    traverse_walk,
    orientation_bearing,
    helmert_fit,
    helmert_apply,
    helmert_apply_many,
    resection,
)

from .validation import InvalidInputError

__all__ = [
    # Models
    "Point",
    "Coordinate",
    "CoordinateSystem",
    "TraverseLeg",
    "HelmertControlPoint",
    "ComputationOptions",

    # Results
    "DistanceResult",
    "ClosingError",
    "AngularError",
    "TraverseResult",
    "HelmertParameters",
    "HelmertResidual",
    "HelmertResult",

    # Geometry
    "DMS",
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
    "decimal_degrees_to_dms",
    "dms_to_decimal_degrees",

    # Solvers
    "compensated_traverse",
    "traverse_walk",
    "orientation_bearing",
    "helmert_fit",
    "helmert_apply",
    "helmert_apply_many",
    "resection",

    # Errors
    "InvalidInputError",
]
