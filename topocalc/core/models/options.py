"""
Computation options.

This module defines the configuration shared by every engine operation:
the spherical earth radius, the degeneracy threshold and the optional
input hardening.
"""

from dataclasses import dataclass
from typing import Any, Dict


EARTH_RADIUS_M = 6_371_000.0
DEFAULT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class ComputationOptions:
    """
    Configuration options for topographic computations.

    Attributes:
        earth_radius: Sphere radius for WGS84 distance, bearing and area
            (default: 6 371 000 m)
        tolerance: Threshold below which a determinant, area or misclosure
            is treated as zero (default: 1e-9)
        angle_tolerance: Maximum disagreement, in degrees, between an
            observed resection angle and the angle recomputed at a candidate
            station (default: 1e-6)
        validate_inputs: If True, every operation rejects NaN and infinite
            inputs with InvalidInputError instead of propagating them
            (default: False)
    """

    earth_radius: float = EARTH_RADIUS_M
    tolerance: float = DEFAULT_TOLERANCE
    angle_tolerance: float = 1e-6
    validate_inputs: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        if not self.earth_radius > 0:
            raise ValueError("earth_radius must be positive")

        if not self.tolerance > 0:
            raise ValueError("tolerance must be positive")

        if not self.angle_tolerance > 0:
            raise ValueError("angle_tolerance must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "earth_radius": self.earth_radius,
            "tolerance": self.tolerance,
            "angle_tolerance": self.angle_tolerance,
            "validate_inputs": self.validate_inputs,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ComputationOptions':
        """
        Create ComputationOptions from a dictionary.

        Missing keys fall back to the defaults.
        """
        return cls(
            earth_radius=float(data.get("earth_radius", EARTH_RADIUS_M)),
            tolerance=float(data.get("tolerance", DEFAULT_TOLERANCE)),
            angle_tolerance=float(data.get("angle_tolerance", 1e-6)),
            validate_inputs=bool(data.get("validate_inputs", False)),
        )

    @classmethod
    def default(cls) -> 'ComputationOptions':
        """Create options with default values."""
        return cls()

    @classmethod
    def strict(cls) -> 'ComputationOptions':
        """Create options that reject non-finite input."""
        return cls(validate_inputs=True)

    def __repr__(self) -> str:
        return (
            f"ComputationOptions("
            f"R={self.earth_radius}, "
            f"tol={self.tolerance}, "
            f"validate={self.validate_inputs})"
        )
