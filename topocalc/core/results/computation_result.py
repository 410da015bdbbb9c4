"""
Result classes for topographic computations.

This module defines the output data structures of the engine: polygon edge
lengths, traverse closure results and Helmert transformation results.
Every result is created fresh by its operation and never mutated.
"""

import json
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.point import Coordinate


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


def _coordinate_dict(c: Coordinate) -> Dict[str, float]:
    return {"x": c.x, "y": c.y}


@dataclass(frozen=True)
class DistanceResult:
    """
    Length of one polygon edge.

    Attributes:
        from_id: ID of the edge's first vertex
        to_id: ID of the edge's second vertex
        distance: Edge length in meters
    """

    from_id: Any
    to_id: Any
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.from_id, "to": self.to_id, "distance": self.distance}


@dataclass(frozen=True)
class ClosingError:
    """
    Linear misclosure of a traverse: known end point minus computed end point.

    Attributes:
        dx: Easting component in meters
        dy: Northing component in meters
        total: Magnitude in meters
    """

    dx: float
    dy: float
    total: float

    def to_dict(self) -> Dict[str, Any]:
        return {"dx": self.dx, "dy": self.dy, "total": self.total}


@dataclass(frozen=True)
class AngularError:
    """
    Angular misclosure of a traverse.

    Attributes:
        degrees: Theoretical minus measured closing bearing, in [-180, 180]
        per_station: Correction added to every leg angle (-degrees / legs)
    """

    degrees: float
    per_station: float

    def to_dict(self) -> Dict[str, Any]:
        return {"degrees": self.degrees, "per_station": self.per_station}


@dataclass(frozen=True)
class TraverseResult:
    """
    Complete results of a compensated traverse.

    Attributes:
        unadjusted_points: Stations from the (angle-corrected) walk, one per leg
        adjusted_points: Stations after linear misclosure distribution
        closing_error: Linear misclosure vector
        angular_error: Angular misclosure, None when no closing angle was used
        total_distance: Sum of leg distances in meters
        relative_precision: total_distance / |closing error|, inf for a
            perfect closure
        bearings: Bearing used for each leg of the final walk, degrees
    """

    unadjusted_points: List[Coordinate]
    adjusted_points: List[Coordinate]
    closing_error: ClosingError
    angular_error: Optional[AngularError]
    total_distance: float
    relative_precision: float
    bearings: List[float] = field(default_factory=list)

    @property
    def is_perfect_closure(self) -> bool:
        """True when the misclosure was below the tolerance."""
        return math.isinf(self.relative_precision)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize traverse result to dictionary.

        Infinite relative precision is written as null.
        """
        return {
            "unadjusted_points": [_coordinate_dict(c) for c in self.unadjusted_points],
            "adjusted_points": [_coordinate_dict(c) for c in self.adjusted_points],
            "closing_error": self.closing_error.to_dict(),
            "angular_error": self.angular_error.to_dict() if self.angular_error else None,
            "total_distance": self.total_distance,
            "relative_precision": _json_safe_value(self.relative_precision),
            "bearings": list(self.bearings),
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize traverse result to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"TraverseResult(stations={len(self.adjusted_points)}, "
            f"misclosure={self.closing_error.total:.4f}m, "
            f"length={self.total_distance:.3f}m)"
        )


@dataclass(frozen=True)
class HelmertParameters:
    """
    Parameters of a 2D conformal (4-parameter Helmert) transformation.

    x' = tx + scale * (x cos(rotation) - y sin(rotation))
    y' = ty + scale * (x sin(rotation) + y cos(rotation))

    Attributes:
        tx: Translation along x
        ty: Translation along y
        scale: Uniform scale factor
        rotation: Rotation in degrees, counter-clockwise (math convention)
    """

    tx: float
    ty: float
    scale: float
    rotation: float

    @property
    def rotation_radians(self) -> float:
        return math.radians(self.rotation)

    @property
    def scale_ppm(self) -> float:
        """Scale deviation from unity in parts per million."""
        return (self.scale - 1.0) * 1e6

    def to_dict(self) -> Dict[str, Any]:
        return {"tx": self.tx, "ty": self.ty, "scale": self.scale, "rotation": self.rotation}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HelmertParameters':
        """Create HelmertParameters from dictionary."""
        return cls(
            tx=float(data["tx"]),
            ty=float(data["ty"]),
            scale=float(data["scale"]),
            rotation=float(data["rotation"]),
        )


@dataclass(frozen=True)
class HelmertResidual:
    """
    Residual of one control point: target minus transformed source.

    Attributes:
        dx: x component
        dy: y component
        total: Magnitude
    """

    dx: float
    dy: float
    total: float

    def to_dict(self) -> Dict[str, Any]:
        return {"dx": self.dx, "dy": self.dy, "total": self.total}


@dataclass(frozen=True)
class HelmertResult:
    """
    Results of a Helmert fit.

    Attributes:
        parameters: Fitted transformation parameters
        residuals: One residual per control point, input order
        rmse: Root mean square of the residual magnitudes
    """

    parameters: HelmertParameters
    residuals: List[HelmertResidual]
    rmse: float

    @property
    def max_residual(self) -> float:
        """Largest residual magnitude."""
        return max((r.total for r in self.residuals), default=0.0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize Helmert result to dictionary."""
        return {
            "parameters": self.parameters.to_dict(),
            "residuals": [r.to_dict() for r in self.residuals],
            "rmse": _json_safe_value(self.rmse),
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize Helmert result to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        p = self.parameters
        return (
            f"HelmertResult(scale={p.scale:.8f}, rotation={p.rotation:.6f}deg, "
            f"rmse={self.rmse:.4f}, n={len(self.residuals)})"
        )
