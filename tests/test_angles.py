"""
Tests for angle normalisation and DMS conversion.
"""

import math

import pytest

from topocalc.core.geometry.angles import (
    DMS,
    normalize_bearing,
    normalize_signed,
    bearing_to_math_angle,
    math_angle_to_bearing,
    back_bearing,
    clockwise_angle,
    decimal_degrees_to_dms,
    dms_to_decimal_degrees,
)


def test_normalize_bearing_basic():
    assert normalize_bearing(0.0) == 0.0
    assert normalize_bearing(360.0) == 0.0
    assert normalize_bearing(-90.0) == pytest.approx(270.0)
    assert normalize_bearing(725.0) == pytest.approx(5.0)
    assert 0.0 <= normalize_bearing(-1e-17) < 360.0


def test_normalize_signed_basic():
    assert normalize_signed(180.0) == pytest.approx(180.0)
    assert normalize_signed(-180.0) == pytest.approx(180.0)
    assert normalize_signed(190.0) == pytest.approx(-170.0)
    assert normalize_signed(-350.0) == pytest.approx(10.0)
    assert normalize_signed(0.02) == pytest.approx(0.02)


class TestConventions:
    """Bearing (clockwise from north) vs. math angle (counter-clockwise from east)."""

    @pytest.mark.parametrize("bearing_deg, math_deg", [
        (0.0, 90.0),
        (90.0, 0.0),
        (180.0, 270.0),
        (270.0, 180.0),
        (45.0, 45.0),
        (135.0, 315.0),
    ])
    def test_conversion_both_ways(self, bearing_deg, math_deg):
        assert bearing_to_math_angle(bearing_deg) == pytest.approx(math_deg)
        assert math_angle_to_bearing(math_deg) == pytest.approx(bearing_deg)

    def test_back_bearing(self):
        assert back_bearing(30.0) == pytest.approx(210.0)
        assert back_bearing(270.0) == pytest.approx(90.0)

    def test_clockwise_angle(self):
        assert clockwise_angle(350.0, 10.0) == pytest.approx(20.0)
        assert clockwise_angle(10.0, 350.0) == pytest.approx(340.0)


class TestDMS:
    """Tests for DMS conversion."""

    def test_positive_angle(self):
        dms = decimal_degrees_to_dms(45.5125)
        assert dms.degrees == 45.0
        assert dms.minutes == 30
        assert dms.seconds == pytest.approx(45.0)

    def test_negative_angle_sign_on_degrees_only(self):
        dms = decimal_degrees_to_dms(-7.589)
        assert dms.degrees == -7.0
        assert dms.minutes == 35
        assert dms.seconds == pytest.approx(20.4)
        assert dms.minutes >= 0 and dms.seconds >= 0

    def test_small_negative_angle_keeps_sign(self):
        dms = decimal_degrees_to_dms(-0.5)
        assert dms.degrees == 0.0
        assert math.copysign(1.0, dms.degrees) == -1.0
        assert dms.minutes == 30
        assert dms_to_decimal_degrees(*dms) == pytest.approx(-0.5)

    def test_to_decimal(self):
        assert dms_to_decimal_degrees(33, 35, 20.4) == pytest.approx(33.589)
        assert dms_to_decimal_degrees(-33, 35, 20.4) == pytest.approx(-33.589)

    def test_to_decimal_nan_propagates(self):
        assert math.isnan(dms_to_decimal_degrees(10, float("nan"), 0))

    def test_non_finite_round_trip(self):
        assert math.isnan(dms_to_decimal_degrees(*decimal_degrees_to_dms(float("nan"))))
        assert dms_to_decimal_degrees(*decimal_degrees_to_dms(float("-inf"))) == float("-inf")

    @pytest.mark.parametrize("value", [0.0, 1e-9, 12.3456789, 359.9999999, -0.0001, -179.123456, 1234.5])
    def test_round_trip(self, value):
        assert dms_to_decimal_degrees(*decimal_degrees_to_dms(value)) == pytest.approx(value, abs=1e-9)

    def test_is_named_tuple(self):
        dms = decimal_degrees_to_dms(10.25)
        assert dms == DMS(10.0, 15, pytest.approx(0.0, abs=1e-9))
