"""topocalc.core.solver.helmert

Closed-form least-squares 2D conformal (4-parameter Helmert) transformation.

Model:
  X = tx + a*x - b*y
  Y = ty + b*x + a*y
with a = scale*cos(rotation), b = scale*sin(rotation).

Centering both point sets on their centroids decouples the translation, and
the normal equations for (a, b) reduce to two scalar quotients of sums over
the centered coordinates. With two control points the fit is exact.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Optional, Sequence

import numpy as np

from ..models.observation import HelmertControlPoint
from ..models.options import ComputationOptions
from ..models.point import Coordinate, as_coordinate
from ..results.computation_result import HelmertParameters, HelmertResidual, HelmertResult
from ..validation import require_finite, require_finite_point


logger = logging.getLogger(__name__)


def _transform_arrays(xy: "np.ndarray", parameters: HelmertParameters) -> "np.ndarray":
    """Apply the forward transform to an (n, 2) array."""
    theta = parameters.rotation_radians
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    x = xy[:, 0]
    y = xy[:, 1]
    out = np.empty_like(xy)
    out[:, 0] = parameters.tx + parameters.scale * (x * cos_t - y * sin_t)
    out[:, 1] = parameters.ty + parameters.scale * (x * sin_t + y * cos_t)
    return out


def helmert_fit(
    control_points: Sequence[HelmertControlPoint],
    *,
    options: Optional[ComputationOptions] = None,
) -> Optional[HelmertResult]:
    """Fit Helmert parameters mapping source coordinates onto targets.

    Args:
        control_points: Pairs of coordinates known in both frames

    Returns:
        HelmertResult, or None with fewer than two control points or when
        the source points are coincident.
    """
    options = options or ComputationOptions.default()

    n = len(control_points)
    if n < 2:
        logger.debug("helmert_fit: %d control points, at least 2 required", n)
        return None
    if options.validate_inputs:
        for i, cp in enumerate(control_points):
            require_finite_point(f"control_points[{i}].source", cp.source)
            require_finite_point(f"control_points[{i}].target", cp.target)

    src = np.array([[cp.source.x, cp.source.y] for cp in control_points], dtype=float)
    tgt = np.array([[cp.target.x, cp.target.y] for cp in control_points], dtype=float)

    src_mean = src.mean(axis=0)
    tgt_mean = tgt.mean(axis=0)
    dx, dy = (src - src_mean).T
    dX, dY = (tgt - tgt_mean).T

    denominator = float(np.sum(dx * dx) + np.sum(dy * dy))
    if abs(denominator) < options.tolerance:
        logger.warning("helmert_fit: source control points are coincident, cannot fit")
        return None

    a = float(np.sum(dx * dX) + np.sum(dy * dY)) / denominator
    b = float(np.sum(dx * dY) - np.sum(dy * dX)) / denominator

    x_mean, y_mean = float(src_mean[0]), float(src_mean[1])
    X_mean, Y_mean = float(tgt_mean[0]), float(tgt_mean[1])
    tx = X_mean - a * x_mean + b * y_mean
    ty = Y_mean - b * x_mean - a * y_mean

    parameters = HelmertParameters(
        tx=tx,
        ty=ty,
        scale=math.hypot(a, b),
        rotation=math.degrees(math.atan2(b, a)),
    )

    diff = tgt - _transform_arrays(src, parameters)
    totals = np.hypot(diff[:, 0], diff[:, 1])
    residuals = [
        HelmertResidual(dx=float(rx), dy=float(ry), total=float(t))
        for (rx, ry), t in zip(diff, totals)
    ]
    rmse = float(np.sqrt(np.mean(totals ** 2)))

    logger.debug(
        "helmert_fit: n=%d scale=%.9f rotation=%.6f deg rmse=%.4f",
        n, parameters.scale, parameters.rotation, rmse,
    )
    return HelmertResult(parameters=parameters, residuals=residuals, rmse=rmse)


def helmert_apply(
    point: Any,
    parameters: HelmertParameters,
    *,
    options: Optional[ComputationOptions] = None,
) -> Coordinate:
    """Transform one point from the source frame into the target frame."""
    options = options or ComputationOptions.default()
    if options.validate_inputs:
        require_finite_point("point", point)
        for name, value in parameters.to_dict().items():
            require_finite(f"parameters.{name}", value)

    point = as_coordinate(point)
    theta = parameters.rotation_radians
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return Coordinate(
        parameters.tx + parameters.scale * (point.x * cos_t - point.y * sin_t),
        parameters.ty + parameters.scale * (point.x * sin_t + point.y * cos_t),
    )


def helmert_apply_many(
    points: Iterable[Any],
    parameters: HelmertParameters,
    *,
    options: Optional[ComputationOptions] = None,
) -> List[Coordinate]:
    """Transform a sequence of points, preserving order."""
    return [helmert_apply(p, parameters, options=options) for p in points]
