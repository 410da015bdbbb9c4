"""
Tests for strict input checking.
"""

import math

import pytest

from topocalc import InvalidInputError
from topocalc.core.geometry import distance, bearing, polygon_area, centroid, line_intersection, radiate
from topocalc.core.models import Point, Coordinate, ComputationOptions
from topocalc.core.validation import require_finite, require_finite_point, require_finite_points


STRICT = ComputationOptions.strict()
NAN = float("nan")


class TestRequireFinite:

    def test_returns_float(self):
        assert require_finite("angle", 12) == 12.0

    @pytest.mark.parametrize("value", [NAN, float("inf"), float("-inf"), "abc", None])
    def test_rejects(self, value):
        with pytest.raises(InvalidInputError) as excinfo:
            require_finite("angle", value)
        assert excinfo.value.field == "angle"

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError, match="must be a finite number"):
            require_finite("distance", NAN)

    def test_point_and_pair(self):
        require_finite_point("p", Point(1, 0, 0))
        require_finite_point("p", (1.0, 2.0))
        with pytest.raises(InvalidInputError) as excinfo:
            require_finite_point("p", (1.0, NAN))
        assert excinfo.value.field == "p.y"

    def test_points_report_index(self):
        with pytest.raises(InvalidInputError) as excinfo:
            require_finite_points("points", [Point(1, 0, 0), Point(2, 0, 0), Point(3, math.inf, 0)])
        assert excinfo.value.field == "points[2].x"


class TestDefaultModePropagates:
    """Without strict options, NaN flows through the arithmetic."""

    def test_distance(self):
        assert math.isnan(distance(Point(1, NAN, 0), Point(2, 1, 1)))

    def test_area(self):
        ring = [Point(1, 0, 0), Point(2, 10, 0), Point(3, NAN, 10)]
        assert math.isnan(polygon_area(ring))


class TestStrictMode:
    """With strict options, every entry point fails fast."""

    def test_distance(self):
        with pytest.raises(InvalidInputError):
            distance(Point(1, NAN, 0), Point(2, 1, 1), options=STRICT)

    def test_bearing(self):
        with pytest.raises(InvalidInputError):
            bearing(Point(1, 0, 0), Point(2, 1, math.inf), "wgs84", options=STRICT)

    def test_area(self):
        ring = [Point(1, 0, 0), Point(2, 10, 0), Point(3, NAN, 10)]
        with pytest.raises(InvalidInputError) as excinfo:
            polygon_area(ring, options=STRICT)
        assert excinfo.value.field == "points[2].x"

    def test_centroid(self):
        with pytest.raises(InvalidInputError):
            centroid([Point(1, 0, 0), Point(2, 10, 0), Point(3, 5, NAN)], options=STRICT)

    def test_line_intersection(self):
        with pytest.raises(InvalidInputError):
            line_intersection(Coordinate(0, 0), Coordinate(1, 1), Coordinate(NAN, 0), Coordinate(1, 0),
                              options=STRICT)

    def test_radiate(self):
        with pytest.raises(InvalidInputError) as excinfo:
            radiate(Coordinate(0, 0), 45.0, math.inf, options=STRICT)
        assert excinfo.value.field == "distance"

    def test_finite_input_unchanged(self):
        ring = [Point(1, 0, 0), Point(2, 10, 0), Point(3, 10, 10), Point(4, 0, 10)]
        assert polygon_area(ring, options=STRICT) == pytest.approx(100.0)
