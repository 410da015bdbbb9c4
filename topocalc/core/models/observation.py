"""
Field observation models.

Conventions:
- Angles: decimal degrees at this boundary
- Traverse angles: right-hand (clockwise) interior angle measured at the
  occupied station, from the backsight to the foresight
- Distances: horizontal, meters
"""

from dataclasses import dataclass
from typing import Any, Dict

from .point import Coordinate, as_coordinate


@dataclass(frozen=True)
class TraverseLeg:
    """
    One traverse leg: the angle turned at the current station and the
    distance to the next one.

    Attributes:
        angle: Measured right-hand angle at the station, degrees
        distance: Horizontal distance to the next station, meters
    """

    angle: float
    distance: float

    def __post_init__(self):
        object.__setattr__(self, "angle", float(self.angle))
        object.__setattr__(self, "distance", float(self.distance))

    def with_angle(self, angle: float) -> "TraverseLeg":
        """Return a copy of this leg with a different angle."""
        return TraverseLeg(angle=angle, distance=self.distance)

    def to_dict(self) -> Dict[str, Any]:
        return {"angle": self.angle, "distance": self.distance}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TraverseLeg":
        """Create TraverseLeg from dictionary."""
        return cls(angle=data["angle"], distance=data["distance"])

    def __repr__(self) -> str:
        return f"TraverseLeg({self.angle:.4f}deg, {self.distance:.3f}m)"


@dataclass(frozen=True)
class HelmertControlPoint:
    """
    A point known in both the source and the target frame.

    Attributes:
        source: Coordinates in the source frame
        target: Coordinates of the same point in the target frame
    """

    source: Coordinate
    target: Coordinate

    def __post_init__(self):
        object.__setattr__(self, "source", as_coordinate(self.source))
        object.__setattr__(self, "target", as_coordinate(self.target))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": {"x": self.source.x, "y": self.source.y},
            "target": {"x": self.target.x, "y": self.target.y},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HelmertControlPoint":
        """Create HelmertControlPoint from ``{"source": {x, y}, "target": {x, y}}``."""
        source = data["source"]
        target = data["target"]
        return cls(
            source=Coordinate(source["x"], source["y"]),
            target=Coordinate(target["x"], target["y"]),
        )
