"""
Point and coordinate system models.

Conventions:
- Planar systems: x = Easting, y = Northing, meters
- WGS84: x = longitude, y = latitude, decimal degrees
- Point IDs: opaque integers used only to label results
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Union


class CoordinateSystem(Enum):
    """
    Coordinate systems understood by the engine.

    Only WGS84 is geodetic. The Lambert zones are projected systems and are
    handled exactly like the local planar system.
    """
    LOCAL = "local"
    WGS84 = "wgs84"
    LAMBERT_NORD_MAROC = "lambert_nord_maroc"
    LAMBERT_SUD_MAROC = "lambert_sud_maroc"
    LAMBERT_Z1 = "lambert_z1"
    LAMBERT_Z2 = "lambert_z2"
    LAMBERT_Z3 = "lambert_z3"
    LAMBERT_Z4 = "lambert_z4"

    @property
    def is_geodetic(self) -> bool:
        """True for longitude/latitude systems."""
        return self is CoordinateSystem.WGS84

    @property
    def is_planar(self) -> bool:
        return not self.is_geodetic

    @classmethod
    def coerce(cls, value: Union["CoordinateSystem", str]) -> "CoordinateSystem":
        """
        Accept an enum member or its string value.

        Raises:
            ValueError: If the string names no known system
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown coordinate system: {value!r}") from None


class Coordinate(NamedTuple):
    """A computed planar or geodetic location (no identifier)."""

    x: float
    y: float


@dataclass(frozen=True)
class Point:
    """
    A surveyed point.

    Attributes:
        id: Opaque identifier, carried through to labelled results
        x: Easting (planar) or longitude (WGS84)
        y: Northing (planar) or latitude (WGS84)
    """

    id: int
    x: float
    y: float

    def __post_init__(self):
        # Frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize point to dictionary."""
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        """
        Create a Point from a dictionary.

        Accepts ``x``/``y`` as well as the ``easting``/``northing`` and
        ``lon``/``lat`` spellings used by collaborators.

        Raises:
            KeyError: If a coordinate is missing
        """
        if "x" in data:
            x = data["x"]
        elif "easting" in data:
            x = data["easting"]
        else:
            x = data["lon"]

        if "y" in data:
            y = data["y"]
        elif "northing" in data:
            y = data["northing"]
        else:
            y = data["lat"]

        return cls(id=int(data.get("id", 0)), x=x, y=y)

    def __repr__(self) -> str:
        return f"Point({self.id}, x={self.x:.3f}, y={self.y:.3f})"


def as_coordinate(value: Any) -> Coordinate:
    """Convert a Point, Coordinate or ``(x, y)`` pair to a Coordinate."""
    if hasattr(value, "x") and hasattr(value, "y"):
        return Coordinate(float(value.x), float(value.y))
    x, y = value
    return Coordinate(float(x), float(y))
