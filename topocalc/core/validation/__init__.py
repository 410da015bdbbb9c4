"""Input validation for topographic computations."""

from .inputs import (
    InvalidInputError,
    require_finite,
    require_finite_point,
    require_finite_points,
)

__all__ = [
    "InvalidInputError",
    "require_finite",
    "require_finite_point",
    "require_finite_points",
]
