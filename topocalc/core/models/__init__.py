"""
Data models for topographic computations.

This module provides the value objects passed into the engine:
- Point / Coordinate: Identified survey points and computed locations
- CoordinateSystem: Planar vs. geodetic coordinate models
- TraverseLeg, HelmertControlPoint: Field observations
- ComputationOptions: Configuration shared by all operations
"""

from .point import Point, Coordinate, CoordinateSystem, as_coordinate
from .observation import TraverseLeg, HelmertControlPoint
from .options import ComputationOptions, EARTH_RADIUS_M, DEFAULT_TOLERANCE

__all__ = [
    # Points
    "Point",
    "Coordinate",
    "CoordinateSystem",
    "as_coordinate",

    # Observations
    "TraverseLeg",
    "HelmertControlPoint",

    # Options
    "ComputationOptions",
    "EARTH_RADIUS_M",
    "DEFAULT_TOLERANCE",
]
