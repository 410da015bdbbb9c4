"""topocalc.core.geometry.primitives

Planar and spherical geometry primitives.

Conventions:
  - Coordinates: x = Easting / longitude, y = Northing / latitude
  - Bearing: North = 0, clockwise positive, degrees in [0, 360)
  - WGS84 is treated as a sphere of radius ``options.earth_radius``; this is
    an approximation intended for parcels small relative to the earth

Implementation detail:
  - Planar bearing is computed using ``atan2(dx, dy)``.
  - WGS84 area projects the ring onto an equirectangular plane centred on
    its mean latitude before applying the shoelace formula.

Every function accepts any object exposing ``.x`` and ``.y``.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Optional, Sequence, Tuple, Union

from ..models.options import ComputationOptions
from ..models.point import Coordinate, CoordinateSystem
from ..results.computation_result import DistanceResult
from ..validation import require_finite, require_finite_point, require_finite_points
from .angles import normalize_bearing


logger = logging.getLogger(__name__)

SystemLike = Union[CoordinateSystem, str]


def _options(options: Optional[ComputationOptions]) -> ComputationOptions:
    return options or ComputationOptions.default()


def _point_id(point: Any) -> Any:
    return getattr(point, "id", None)


def distance(
    p1: Any,
    p2: Any,
    system: SystemLike = CoordinateSystem.LOCAL,
    *,
    options: Optional[ComputationOptions] = None,
) -> float:
    """Distance in meters between two points.

    Planar systems use the Euclidean distance; WGS84 uses the Haversine
    great-circle distance.
    """
    options = _options(options)
    if options.validate_inputs:
        require_finite_points("points", (p1, p2))

    if CoordinateSystem.coerce(system).is_geodetic:
        lat1 = math.radians(p1.y)
        lat2 = math.radians(p2.y)
        d_lat = math.radians(p2.y - p1.y)
        d_lon = math.radians(p2.x - p1.x)

        a = (math.sin(d_lat / 2) ** 2
             + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2)
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return options.earth_radius * c

    return math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)


def bearing(
    p1: Any,
    p2: Any,
    system: SystemLike = CoordinateSystem.LOCAL,
    *,
    options: Optional[ComputationOptions] = None,
) -> float:
    """Bearing from p1 to p2 in degrees, [0, 360), North = 0, clockwise.

    For WGS84 this is the initial great-circle bearing. Coincident planar
    points return 0 by convention; the value carries no meaning.
    """
    options = _options(options)
    if options.validate_inputs:
        require_finite_points("points", (p1, p2))

    if CoordinateSystem.coerce(system).is_geodetic:
        lat1 = math.radians(p1.y)
        lat2 = math.radians(p2.y)
        d_lon = math.radians(p2.x - p1.x)

        y = math.sin(d_lon) * math.cos(lat2)
        x = (math.cos(lat1) * math.sin(lat2)
             - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon))
        return normalize_bearing(math.degrees(math.atan2(y, x)))

    dx = p2.x - p1.x
    dy = p2.y - p1.y
    if dx == 0 and dy == 0:
        return 0.0
    return normalize_bearing(math.degrees(math.atan2(dx, dy)))


def _projected_ring(
    points: Sequence[Any], system: CoordinateSystem, earth_radius: float
) -> List[Tuple[float, float]]:
    """Planar (x, y) pairs for the shoelace formula."""
    if system.is_planar:
        return [(p.x, p.y) for p in points]

    mean_lat = sum(p.y for p in points) / len(points)
    cos_mean_lat = math.cos(math.radians(mean_lat))
    return [
        (math.radians(p.x) * earth_radius * cos_mean_lat, math.radians(p.y) * earth_radius)
        for p in points
    ]


def polygon_area(
    points: Sequence[Any],
    system: SystemLike = CoordinateSystem.LOCAL,
    *,
    options: Optional[ComputationOptions] = None,
) -> float:
    """Unsigned polygon area in square meters (shoelace formula).

    Fewer than three vertices give 0. The ring is implicitly closed; do not
    repeat the first vertex.
    """
    options = _options(options)
    n = len(points)
    if n < 3:
        logger.debug("polygon_area: %d vertices, area is 0", n)
        return 0.0
    if options.validate_inputs:
        require_finite_points("points", points)

    ring = _projected_ring(points, CoordinateSystem.coerce(system), options.earth_radius)

    area = 0.0
    for i in range(n):
        x1, y1 = ring[i]
        x2, y2 = ring[(i + 1) % n]
        area += x1 * y2 - x2 * y1

    return abs(area / 2.0)


def segment_distances(
    points: Sequence[Any],
    system: SystemLike = CoordinateSystem.LOCAL,
    *,
    options: Optional[ComputationOptions] = None,
) -> List[DistanceResult]:
    """Edge lengths of a ring, in vertex order, closing edge last.

    Fewer than two points give an empty list.
    """
    n = len(points)
    if n < 2:
        return []

    results = []
    for i in range(n):
        p1 = points[i]
        p2 = points[(i + 1) % n]
        results.append(DistanceResult(
            from_id=_point_id(p1),
            to_id=_point_id(p2),
            distance=distance(p1, p2, system, options=options),
        ))
    return results


def perimeter(
    points: Sequence[Any],
    system: SystemLike = CoordinateSystem.LOCAL,
    *,
    options: Optional[ComputationOptions] = None,
) -> float:
    """Perimeter of a ring in meters, closing edge included."""
    return sum(d.distance for d in segment_distances(points, system, options=options))


def centroid(
    points: Sequence[Any],
    *,
    options: Optional[ComputationOptions] = None,
) -> Optional[Coordinate]:
    """Area-weighted centroid of a polygon.

    Returns None for fewer than three vertices. A ring with (near) zero area
    falls back to the arithmetic mean of its vertices.
    """
    options = _options(options)
    n = len(points)
    if n < 3:
        logger.debug("centroid: %d vertices, no centroid", n)
        return None
    if options.validate_inputs:
        require_finite_points("points", points)

    area = 0.0
    cx = 0.0
    cy = 0.0
    for i in range(n):
        p1 = points[i]
        p2 = points[(i + 1) % n]
        cross = p1.x * p2.y - p2.x * p1.y
        area += cross
        cx += (p1.x + p2.x) * cross
        cy += (p1.y + p2.y) * cross
    area /= 2.0

    if abs(area) < options.tolerance:
        # Collinear or degenerate ring
        return Coordinate(sum(p.x for p in points) / n, sum(p.y for p in points) / n)

    return Coordinate(cx / (6.0 * area), cy / (6.0 * area))


def line_intersection(
    p1: Any,
    p2: Any,
    p3: Any,
    p4: Any,
    *,
    options: Optional[ComputationOptions] = None,
) -> Optional[Coordinate]:
    """Intersection of the infinite lines p1-p2 and p3-p4 (planar only).

    Returns None when the lines are parallel or coincident.
    """
    options = _options(options)
    if options.validate_inputs:
        require_finite_points("points", (p1, p2, p3, p4))

    den = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    if abs(den) < options.tolerance:
        logger.warning("line_intersection: lines are parallel or coincident")
        return None

    t = ((p1.x - p3.x) * (p3.y - p4.y) - (p1.y - p3.y) * (p3.x - p4.x)) / den
    return Coordinate(p1.x + t * (p2.x - p1.x), p1.y + t * (p2.y - p1.y))


def radiate(
    station: Any,
    bearing_degrees: float,
    horizontal_distance: float,
    *,
    options: Optional[ComputationOptions] = None,
) -> Coordinate:
    """Point at a bearing and distance from a station (planar only)."""
    options = _options(options)
    if options.validate_inputs:
        require_finite_point("station", station)
        require_finite("bearing", bearing_degrees)
        require_finite("distance", horizontal_distance)

    az = math.radians(bearing_degrees)
    return Coordinate(
        station.x + horizontal_distance * math.sin(az),
        station.y + horizontal_distance * math.cos(az),
    )


def alignment_points(start: Any, end: Any, count: int) -> List[Coordinate]:
    """``count`` equally spaced points strictly between start and end (planar only)."""
    segments = count + 1
    points = []
    for i in range(1, count + 1):
        fraction = i / segments
        points.append(Coordinate(
            start.x + fraction * (end.x - start.x),
            start.y + fraction * (end.y - start.y),
        ))
    return points


def angle_between_points(a: Any, vertex: Any, c: Any) -> float:
    """Unsigned angle a-vertex-c at ``vertex``, degrees in [0, 180] (planar only).

    Returns NaN when the vertex coincides with either end point.
    """
    ux, uy = a.x - vertex.x, a.y - vertex.y
    vx, vy = c.x - vertex.x, c.y - vertex.y
    if (ux == 0 and uy == 0) or (vx == 0 and vy == 0):
        return math.nan
    return math.degrees(math.atan2(abs(ux * vy - uy * vx), ux * vx + uy * vy))


# Cadastral map-sheet ("mappe") grid
MAPPE_BLOCK_WIDTH = 18000.0
MAPPE_BLOCK_HEIGHT = 12000.0
MAPPE_SCALES = ("1/20000", "1/2000", "1/1000", "1/500")

_MAPPE_1000_LETTERS = "ABCD"
_MAPPE_500_LETTERS = "abcdefghijklmnop"


def _grid_cell(offset: float, size: float, count: int) -> int:
    """1-based cell index of ``offset`` in a row of ``count`` cells of ``size``."""
    return min(max(math.ceil(offset / size), 1), count)


def _coerce_mappe_scale(scale: Union[str, int]) -> str:
    if isinstance(scale, int) and not isinstance(scale, bool):
        scale = f"1/{scale}"
    normalized = str(scale).replace(" ", "")
    if normalized not in MAPPE_SCALES:
        raise ValueError(f"Unknown map scale: {scale!r} (expected one of {', '.join(MAPPE_SCALES)})")
    return normalized


def mappe_sheet(
    x: float,
    y: float,
    scale: Union[str, int],
    *,
    options: Optional[ComputationOptions] = None,
) -> Optional[str]:
    """Label of the cadastral map sheet containing a projected point.

    The 1/20000 sheets are 18000 m x 12000 m blocks labelled ``row-col``
    with ``row = ceil(y / 12000)`` and ``col = ceil(x / 18000)``. Each block
    holds a 10 x 10 grid of 1/2000 sheets numbered 1..100 row by row from the
    top-left corner. A 1/2000 sheet splits into 2 x 2 sheets ``A``-``D`` at
    1/1000 or 4 x 4 sheets ``a``-``p`` at 1/500, also from the top-left.

    Examples: ``32-7``, ``32-7-37``, ``32-7-37-B``, ``32-7-37-g``.

    Args:
        x: Easting in meters (planar system)
        y: Northing in meters
        scale: ``"1/20000"``, ``"1/2000"``, ``"1/1000"``, ``"1/500"`` or the
            denominator as an int

    Returns:
        The sheet label, or None when the point is outside the grid
        (non-positive or non-finite coordinates).

    Raises:
        ValueError: If ``scale`` is not one of the supported scales
    """
    scale = _coerce_mappe_scale(scale)
    options = _options(options)
    if options.validate_inputs:
        require_finite("x", x)
        require_finite("y", y)

    if not (math.isfinite(x) and math.isfinite(y)) or x <= 0 or y <= 0:
        logger.debug("mappe_sheet: (%s, %s) is outside the map-sheet grid", x, y)
        return None

    block_row = math.ceil(y / MAPPE_BLOCK_HEIGHT)
    block_col = math.ceil(x / MAPPE_BLOCK_WIDTH)
    label = f"{block_row}-{block_col}"
    if scale == "1/20000":
        return label

    # Offsets from the top-left corner of the block
    dx = x - (block_col - 1) * MAPPE_BLOCK_WIDTH
    dy = block_row * MAPPE_BLOCK_HEIGHT - y

    sheet_width = MAPPE_BLOCK_WIDTH / 10
    sheet_height = MAPPE_BLOCK_HEIGHT / 10
    col = _grid_cell(dx, sheet_width, 10)
    row = _grid_cell(dy, sheet_height, 10)
    label = f"{label}-{(row - 1) * 10 + col}"
    if scale == "1/2000":
        return label

    dx -= (col - 1) * sheet_width
    dy -= (row - 1) * sheet_height

    if scale == "1/1000":
        sub_col = _grid_cell(dx, sheet_width / 2, 2)
        sub_row = _grid_cell(dy, sheet_height / 2, 2)
        return f"{label}-{_MAPPE_1000_LETTERS[(sub_row - 1) * 2 + sub_col - 1]}"

    sub_col = _grid_cell(dx, sheet_width / 4, 4)
    sub_row = _grid_cell(dy, sheet_height / 4, 4)
    return f"{label}-{_MAPPE_500_LETTERS[(sub_row - 1) * 4 + sub_col - 1]}"
