"""topocalc.core.solver.traverse

Compensated traverse: unadjusted walk, optional angular closure, then
linear misclosure distribution.

Conventions:
  - Planar coordinates only (Easting = x, Northing = y)
  - Bearing: North = 0, clockwise positive, degrees
  - Leg angles: right-hand angle measured at the occupied station from the
    backsight (previous station) to the foresight (next station)

The linear correction of each station is the closing error scaled by the
distance travelled from the start up to that station divided by the total
length of the traverse.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Optional, Sequence, Tuple

from ..geometry.angles import back_bearing, normalize_bearing, normalize_signed
from ..geometry.primitives import bearing, radiate
from ..models.observation import TraverseLeg
from ..models.options import ComputationOptions
from ..models.point import Coordinate, CoordinateSystem, as_coordinate
from ..results.computation_result import AngularError, ClosingError, TraverseResult
from ..validation import require_finite, require_finite_point


logger = logging.getLogger(__name__)


def orientation_bearing(start: Any, orientation_point: Any) -> float:
    """Initial bearing of a traverse from its start towards a known orientation point."""
    return bearing(start, orientation_point, CoordinateSystem.LOCAL)


def traverse_walk(
    start: Any,
    initial_bearing: float,
    legs: Sequence[TraverseLeg],
) -> Tuple[List[Coordinate], List[float]]:
    """Walk the legs from ``start`` without any adjustment.

    Returns:
        (stations, bearings): one station per leg and the bearing used to
        reach it
    """
    stations: List[Coordinate] = []
    bearings: List[float] = []
    current = as_coordinate(start)
    current_bearing = initial_bearing

    for leg in legs:
        bearings.append(current_bearing)
        current = radiate(current, current_bearing, leg.distance)
        stations.append(current)
        current_bearing = normalize_bearing(current_bearing + 180.0 + leg.angle)

    return stations, bearings


def _check_inputs(
    start: Any,
    end: Any,
    initial_bearing: float,
    legs: Sequence[TraverseLeg],
    closing_reference: Optional[Any],
    measured_closing_angle: Optional[float],
) -> None:
    require_finite_point("start", start)
    require_finite_point("end", end)
    require_finite("initial_bearing", initial_bearing)
    for i, leg in enumerate(legs):
        require_finite(f"legs[{i}].angle", leg.angle)
        require_finite(f"legs[{i}].distance", leg.distance)
    if closing_reference is not None:
        require_finite_point("closing_reference", closing_reference)
    if measured_closing_angle is not None:
        require_finite("measured_closing_angle", measured_closing_angle)


def compensated_traverse(
    start: Any,
    end: Any,
    initial_bearing: float,
    legs: Sequence[TraverseLeg],
    closing_reference: Optional[Any] = None,
    measured_closing_angle: Optional[float] = None,
    *,
    options: Optional[ComputationOptions] = None,
) -> Optional[TraverseResult]:
    """Compute and adjust a traverse from ``start`` closing on ``end``.

    Args:
        start: Known starting station
        end: Known closing station
        initial_bearing: Bearing of the first leg, degrees
        legs: Measured angles and distances, in walking order
        closing_reference: Known point sighted from the end station for the
            angular closure check
        measured_closing_angle: Right-hand angle measured at the end station
            from the last backsight to ``closing_reference``, degrees

    Returns:
        TraverseResult, or None when there are no legs or the traverse has
        zero length.

    The angular closure step only runs when both ``closing_reference`` and
    ``measured_closing_angle`` are given.
    """
    options = options or ComputationOptions.default()

    if not legs:
        logger.debug("compensated_traverse: no legs, nothing to compute")
        return None
    if options.validate_inputs:
        _check_inputs(start, end, initial_bearing, legs, closing_reference, measured_closing_angle)

    end = as_coordinate(end)
    total_distance = sum(leg.distance for leg in legs)
    if abs(total_distance) < options.tolerance:
        logger.warning("compensated_traverse: zero total distance, misclosure cannot be distributed")
        return None

    stations, bearings = traverse_walk(start, initial_bearing, legs)

    angular_error: Optional[AngularError] = None
    if closing_reference is not None and measured_closing_angle is not None:
        theoretical = bearing(end, as_coordinate(closing_reference), CoordinateSystem.LOCAL)
        measured = normalize_bearing(back_bearing(bearings[-1]) + measured_closing_angle)
        error = normalize_signed(theoretical - measured)
        correction = -error / len(legs)
        angular_error = AngularError(degrees=error, per_station=correction)

        legs = [leg.with_angle(leg.angle + correction) for leg in legs]
        stations, bearings = traverse_walk(start, initial_bearing, legs)
        logger.debug(
            "compensated_traverse: angular misclosure %.6f deg, %.6f deg per station",
            error, correction,
        )
    elif closing_reference is not None or measured_closing_angle is not None:
        logger.warning(
            "compensated_traverse: angular closure needs both a reference point "
            "and a measured angle; skipping it"
        )

    computed_end = stations[-1]
    dx = end.x - computed_end.x
    dy = end.y - computed_end.y
    total_error = math.sqrt(dx * dx + dy * dy)
    if total_error > options.tolerance:
        relative_precision = total_distance / total_error
    else:
        relative_precision = math.inf

    adjusted: List[Coordinate] = []
    cumulative = 0.0
    last = len(stations) - 1
    for i, (station, leg) in enumerate(zip(stations, legs)):
        cumulative += leg.distance
        if i == last:
            # Closes on the known end point
            adjusted.append(Coordinate(float(end.x), float(end.y)))
            continue
        ratio = cumulative / total_distance
        adjusted.append(Coordinate(station.x + ratio * dx, station.y + ratio * dy))

    logger.debug(
        "compensated_traverse: %d legs, length %.3f m, misclosure %.4f m (1:%s)",
        len(legs), total_distance, total_error,
        "inf" if math.isinf(relative_precision) else f"{relative_precision:.0f}",
    )

    return TraverseResult(
        unadjusted_points=stations,
        adjusted_points=adjusted,
        closing_error=ClosingError(dx=dx, dy=dy, total=total_error),
        angular_error=angular_error,
        total_distance=total_distance,
        relative_precision=relative_precision,
        bearings=bearings,
    )
