"""Optional numeric input hardening.

By default the engine trusts its caller: NaN and infinite values propagate
through the arithmetic. With ``ComputationOptions(validate_inputs=True)``
each operation runs the checks in this module first and fails fast.
"""

from __future__ import annotations

import math
from typing import Any, Iterable


class InvalidInputError(ValueError):
    """A numeric input is NaN or infinite."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a finite number, got {value!r}")


def require_finite(field: str, value: Any) -> float:
    """Return ``value`` as float, raising InvalidInputError if it is not finite."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(field, value) from None
    if not math.isfinite(number):
        raise InvalidInputError(field, value)
    return number


def require_finite_point(field: str, point: Any) -> None:
    """Check both coordinates of a point-like object or an (x, y) pair."""
    if hasattr(point, "x") and hasattr(point, "y"):
        x, y = point.x, point.y
    else:
        x, y = point
    require_finite(f"{field}.x", x)
    require_finite(f"{field}.y", y)


def require_finite_points(field: str, points: Iterable[Any]) -> None:
    """Check every point of a sequence; the index is reported on failure."""
    for i, point in enumerate(points):
        require_finite_point(f"{field}[{i}]", point)
