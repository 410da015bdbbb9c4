"""topocalc.core.solver.resection

Analytic three-point resection (cotangent method).

Given known points A, B (central) and C and the angles APB and BPC observed
at the unknown station P, each angle places P on a circle through B:

  |p|^2 = p . g,    g = u + s * cot(angle) * perp(u)

where p = P - B, u = A - B (or C - B), perp(u) = (-u_y, u_x) and s = +/-1
selects the side of the chord on which P stands. Inverting about B
(q = p / |p|^2) turns both circles into straight lines,

  q . g1 = 1
  q . g2 = 1

a 2x2 linear system. Its determinant vanishes when the two circles coincide,
i.e. when P lies on the circle through A, B and C (the danger circle).

Observed angles are unsigned, so the side of each chord is unknown. The
side combinations are tried in turn, starting with A, B, C seen clockwise
from the station, and the first station that reproduces both observed
angles is returned.

Planar coordinates only.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Tuple

from ..geometry.primitives import angle_between_points
from ..models.options import ComputationOptions
from ..models.point import Coordinate, as_coordinate
from ..validation import require_finite, require_finite_point


logger = logging.getLogger(__name__)

# (side of chord BA, side of chord BC). (+1, -1) is the clockwise sweep A -> B -> C.
_SIDE_COMBINATIONS: Tuple[Tuple[int, int], ...] = ((1, -1), (-1, 1), (1, 1), (-1, -1))


def _circle_vector(ux: float, uy: float, cot_angle: float, side: int) -> Tuple[float, float]:
    """Twice the centre of the circle through B and B + u seeing u under the angle."""
    return ux - side * cot_angle * uy, uy + side * cot_angle * ux


def resection(
    a: Any,
    b: Any,
    c: Any,
    angle_apb: float,
    angle_bpc: float,
    *,
    options: Optional[ComputationOptions] = None,
) -> Optional[Coordinate]:
    """Locate a station from the angles it observes to three known points.

    Args:
        a: First known point
        b: Central known point
        c: Third known point
        angle_apb: Angle at the station between A and B, degrees in (0, 180)
        angle_bpc: Angle at the station between B and C, degrees in (0, 180)

    Returns:
        Station coordinates, or None when the station is on the danger
        circle, no station reproduces the observed angles, or an input is
        NaN or infinite (unless ``options.validate_inputs`` is set, which
        raises InvalidInputError instead).

    The angles are taken as measured clockwise A -> B -> C from the station.
    When several stations reproduce the same unsigned angles, the one that
    sees A, B, C clockwise is returned, so a station that actually sees them
    counter-clockwise usually comes back as its clockwise mirror.

    A, B, C must be distinct and the angles inside (0, 180); these
    preconditions are not checked.
    """
    options = options or ComputationOptions.default()
    if options.validate_inputs:
        require_finite_point("a", a)
        require_finite_point("b", b)
        require_finite_point("c", c)
        require_finite("angle_apb", angle_apb)
        require_finite("angle_bpc", angle_bpc)

    a, b, c = as_coordinate(a), as_coordinate(b), as_coordinate(c)
    values = (a.x, a.y, b.x, b.y, c.x, c.y, angle_apb, angle_bpc)
    if not all(math.isfinite(v) for v in values):
        logger.warning("resection: non-finite coordinate or angle, no solution")
        return None

    # Work relative to B for numerical stability with large projected coordinates
    ax, ay = a.x - b.x, a.y - b.y
    cx, cy = c.x - b.x, c.y - b.y
    cot1 = 1.0 / math.tan(math.radians(angle_apb))
    cot2 = 1.0 / math.tan(math.radians(angle_bpc))

    systems = []
    for side1, side2 in _SIDE_COMBINATIONS:
        g1x, g1y = _circle_vector(ax, ay, cot1, side1)
        g2x, g2y = _circle_vector(cx, cy, cot2, side2)
        det = g1x * g2y - g1y * g2x
        if abs(det) < options.tolerance:
            scale = max(math.hypot(g1x, g1y), math.hypot(g2x, g2y), 1.0)
            if math.hypot(g1x - g2x, g1y - g2y) < options.tolerance * scale:
                logger.warning("resection: station lies on the danger circle through A, B, C")
                return None
            # Circles tangent at B: no second intersection for this side pair
            continue
        systems.append((g1x, g1y, g2x, g2y, det))

    origin = Coordinate(0.0, 0.0)
    a_local = Coordinate(ax, ay)
    c_local = Coordinate(cx, cy)

    for g1x, g1y, g2x, g2y, det in systems:
        qx = (g2y - g1y) / det
        qy = (g1x - g2x) / det
        q2 = qx * qx + qy * qy
        if q2 == 0.0:
            continue
        candidate = Coordinate(qx / q2, qy / q2)

        observed_apb = angle_between_points(a_local, candidate, origin)
        observed_bpc = angle_between_points(origin, candidate, c_local)
        if (abs(observed_apb - angle_apb) <= options.angle_tolerance
                and abs(observed_bpc - angle_bpc) <= options.angle_tolerance):
            return Coordinate(candidate.x + b.x, candidate.y + b.y)

    logger.warning("resection: no station reproduces the observed angles")
    return None
