import math

import numpy as np
import pytest
from skyfield.api import wgs84 as skyfield_wgs84

from worldline.constants import (
    EARTH_CIRCUMFERENCE_KM,
    WGS84_ECCENTRICITY_SQUARED,
    WGS84_SEMI_MAJOR_AXIS_M,
)
from worldline.wgs84 import (
    InvalidLatitudeError,
    degrees_to_radians,
    latitude_circumference,
    parallel_radius,
    parallel_radius_from_degrees,
    prime_vertical_radius,
    radians_to_degrees,
)


def test_degree_radian_conversion():
    assert degrees_to_radians(180) == pytest.approx(math.pi)
    assert radians_to_degrees(math.pi / 2) == pytest.approx(90)


class TestPrimeVerticalRadius:
    def test_equals_semi_major_axis_at_equator(self):
        assert prime_vertical_radius(0) == WGS84_SEMI_MAJOR_AXIS_M

    def test_pole_value(self):
        expected = WGS84_SEMI_MAJOR_AXIS_M / math.sqrt(1 - WGS84_ECCENTRICITY_SQUARED)
        assert prime_vertical_radius(math.pi / 2) == pytest.approx(expected)

    def test_increases_with_absolute_latitude(self):
        lats = np.radians(np.linspace(0, 90, 91))
        radii = [prime_vertical_radius(float(phi)) for phi in lats]
        assert all(b > a for a, b in zip(radii, radii[1:]))


class TestParallelRadius:
    def test_equator(self):
        assert parallel_radius(0) == WGS84_SEMI_MAJOR_AXIS_M

    @pytest.mark.parametrize("lat", [90, -90])
    def test_poles_do_not_raise_and_are_near_zero(self, lat):
        assert parallel_radius_from_degrees(lat) == pytest.approx(0, abs=1e-6)

    @pytest.mark.parametrize("lat", [90.0001, -90.0001, 91, -180, float("nan")])
    def test_out_of_range_raises(self, lat):
        with pytest.raises(InvalidLatitudeError, match="Invalid latitude"):
            parallel_radius_from_degrees(lat)

    def test_invalid_latitude_is_value_error(self):
        with pytest.raises(ValueError):
            parallel_radius_from_degrees(91)

    def test_strictly_decreasing_in_absolute_latitude(self):
        radii = [parallel_radius_from_degrees(float(x)) for x in np.linspace(0, 90, 181)]
        assert all(b < a for a, b in zip(radii, radii[1:]))

    def test_symmetric_about_equator(self):
        for lat in np.linspace(0, 90, 19):
            assert parallel_radius_from_degrees(float(lat)) == pytest.approx(
                parallel_radius_from_degrees(float(-lat))
            )

    @pytest.mark.parametrize("lat", [0.0, 12.5, 40.0, 51.4779, -33.87, 75.0])
    def test_agrees_with_skyfield_itrs_position(self, lat):
        x, y, _ = skyfield_wgs84.latlon(lat, 0.0).itrs_xyz.m
        assert parallel_radius_from_degrees(lat) == pytest.approx(
            math.hypot(x, y), rel=1e-9
        )


def test_latitude_circumference_in_km():
    assert latitude_circumference(0) == pytest.approx(EARTH_CIRCUMFERENCE_KM, abs=0.001)
    assert latitude_circumference(60) == pytest.approx(
        2 * math.pi * parallel_radius_from_degrees(60) / 1000
    )
    assert latitude_circumference(90) == pytest.approx(0, abs=1e-9)


def test_latitude_circumference_validates():
    with pytest.raises(InvalidLatitudeError):
        latitude_circumference(-91)
