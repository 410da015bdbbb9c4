"""
Tests for the input models: Point, CoordinateSystem, TraverseLeg,
HelmertControlPoint and ComputationOptions.
"""

import pytest

from topocalc.core.models import (
    Point,
    Coordinate,
    CoordinateSystem,
    TraverseLeg,
    HelmertControlPoint,
    ComputationOptions,
)
from topocalc.core.models.point import as_coordinate


class TestPointCreation:
    """Tests for Point creation."""

    def test_create_basic_point(self):
        """Coordinates are stored as floats."""
        point = Point(id=7, x=1000, y=2000)

        assert point.id == 7
        assert point.x == 1000.0
        assert isinstance(point.x, float)
        assert point.coordinate == Coordinate(1000.0, 2000.0)

    def test_point_is_immutable(self):
        point = Point(1, 0.0, 0.0)
        with pytest.raises(AttributeError):
            point.x = 5.0

    def test_repr(self):
        assert repr(Point(3, 1.23456, 2.0)) == "Point(3, x=1.235, y=2.000)"


class TestPointSerialization:
    """Tests for Point.to_dict / Point.from_dict."""

    def test_to_dict(self):
        assert Point(1, 10.0, 20.0).to_dict() == {"id": 1, "x": 10.0, "y": 20.0}

    def test_from_dict_round_trip(self):
        point = Point(4, 512345.678, 3712345.901)
        assert Point.from_dict(point.to_dict()) == point

    def test_from_dict_easting_northing(self):
        point = Point.from_dict({"id": 2, "easting": 1.5, "northing": 2.5})
        assert (point.x, point.y) == (1.5, 2.5)

    def test_from_dict_lon_lat(self):
        point = Point.from_dict({"id": 3, "lon": -7.6, "lat": 33.5})
        assert (point.x, point.y) == (-7.6, 33.5)

    def test_from_dict_missing_coordinate(self):
        with pytest.raises(KeyError):
            Point.from_dict({"id": 1, "x": 0.0})


class TestCoordinateSystem:
    """Tests for CoordinateSystem."""

    def test_only_wgs84_is_geodetic(self):
        geodetic = [cs for cs in CoordinateSystem if cs.is_geodetic]
        assert geodetic == [CoordinateSystem.WGS84]
        assert CoordinateSystem.LAMBERT_Z3.is_planar

    @pytest.mark.parametrize("value, expected", [
        ("wgs84", CoordinateSystem.WGS84),
        ("WGS84", CoordinateSystem.WGS84),
        (" local ", CoordinateSystem.LOCAL),
        ("lambert_nord_maroc", CoordinateSystem.LAMBERT_NORD_MAROC),
        (CoordinateSystem.LAMBERT_Z4, CoordinateSystem.LAMBERT_Z4),
    ])
    def test_coerce(self, value, expected):
        assert CoordinateSystem.coerce(value) is expected

    def test_coerce_unknown(self):
        with pytest.raises(ValueError, match="Unknown coordinate system"):
            CoordinateSystem.coerce("epsg:4326")


class TestAsCoordinate:

    def test_accepts_point_coordinate_and_pair(self):
        assert as_coordinate(Point(1, 2, 3)) == Coordinate(2.0, 3.0)
        assert as_coordinate(Coordinate(2, 3)) == Coordinate(2.0, 3.0)
        assert as_coordinate((2, 3)) == Coordinate(2.0, 3.0)


class TestTraverseLeg:
    """Tests for TraverseLeg."""

    def test_with_angle_keeps_distance(self):
        leg = TraverseLeg(angle=90, distance=120.5)
        corrected = leg.with_angle(90.01)

        assert corrected.angle == 90.01
        assert corrected.distance == 120.5
        assert leg.angle == 90.0

    def test_dict_round_trip(self):
        leg = TraverseLeg(181.2345, 87.654)
        assert TraverseLeg.from_dict(leg.to_dict()) == leg


class TestHelmertControlPoint:
    """Tests for HelmertControlPoint."""

    def test_coerces_points_and_pairs(self):
        cp = HelmertControlPoint(source=Point(1, 0, 0), target=(10, 10))
        assert cp.source == Coordinate(0.0, 0.0)
        assert cp.target == Coordinate(10.0, 10.0)

    def test_dict_round_trip(self):
        cp = HelmertControlPoint((1.0, 2.0), (3.0, 4.0))
        data = cp.to_dict()

        assert data == {"source": {"x": 1.0, "y": 2.0}, "target": {"x": 3.0, "y": 4.0}}
        assert HelmertControlPoint.from_dict(data) == cp


class TestComputationOptions:
    """Tests for ComputationOptions."""

    def test_defaults(self):
        options = ComputationOptions.default()

        assert options.earth_radius == 6_371_000.0
        assert options.tolerance == 1e-9
        assert options.validate_inputs is False

    def test_strict(self):
        assert ComputationOptions.strict().validate_inputs is True

    @pytest.mark.parametrize("kwargs", [
        {"earth_radius": 0.0},
        {"earth_radius": -1.0},
        {"tolerance": 0.0},
        {"angle_tolerance": -1e-6},
        {"tolerance": float("nan")},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ComputationOptions(**kwargs)

    def test_dict_round_trip(self):
        options = ComputationOptions(earth_radius=6_378_137.0, tolerance=1e-6, validate_inputs=True)
        assert ComputationOptions.from_dict(options.to_dict()) == options

    def test_from_dict_partial(self):
        options = ComputationOptions.from_dict({"validate_inputs": True})
        assert options.earth_radius == 6_371_000.0
        assert options.validate_inputs is True
