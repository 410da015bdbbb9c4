"""
topocalc - Topographic Computation Engine

Deterministic computations behind a land-surveying application: polygon
area and perimeter, bearings and distances, compensated traverses, Helmert
transformations and three-point resection.

Conventions:
- Coordinates: Easting (x), Northing (y) in meters for planar systems;
  longitude (x), latitude (y) in decimal degrees for WGS84
- Bearing: North = 0, clockwise positive, degrees in [0, 360)
- Angles: Degrees at every public boundary
- WGS84: Spherical earth, R = 6 371 000 m (small parcels only)
- Failures: Insufficient or degenerate input returns 0, [] or None
"""

import logging

__version__ = "1.0.0"

from .core.models import (
    Point,
    Coordinate,
    CoordinateSystem,
    TraverseLeg,
    HelmertControlPoint,
    ComputationOptions,
)
from .core.results import TraverseResult, HelmertResult, HelmertParameters, DistanceResult
from .core.validation import InvalidInputError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",

    # Models
    "Point",
    "Coordinate",
    "CoordinateSystem",
    "TraverseLeg",
    "HelmertControlPoint",
    "ComputationOptions",

    # Results
    "TraverseResult",
    "HelmertResult",
    "HelmertParameters",
    "DistanceResult",

    # Errors
    "InvalidInputError",
]
