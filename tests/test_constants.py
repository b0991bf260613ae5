import pytest
from skyfield.api import wgs84

from worldline import constants as c


def test_julian_year_is_365_25_solar_days():
    assert c.JULIAN_YEAR_SECONDS == 31_557_600
    assert c.SOLAR_DAY_SECONDS == 86_400


def test_sidereal_day_is_shorter_than_solar_day():
    assert c.SIDEREAL_DAY_SECONDS < c.SOLAR_DAY_SECONDS
    # ~3m56s shorter
    assert c.SOLAR_DAY_SECONDS - c.SIDEREAL_DAY_SECONDS == pytest.approx(235.9095)


def test_wgs84_derived_axes():
    assert c.WGS84_SEMI_MINOR_AXIS_M == pytest.approx(6_356_752.314245, abs=1e-6)
    assert c.WGS84_ECCENTRICITY_SQUARED == pytest.approx(0.00669437999014, rel=1e-12)


def test_wgs84_matches_skyfield_geoid():
    assert c.WGS84_SEMI_MAJOR_AXIS_M == wgs84.radius.m
    assert 1 / c.WGS84_FLATTENING == pytest.approx(wgs84.inverse_flattening)


def test_unit_constants():
    assert c.SPEED_OF_LIGHT_KMS == 299_792.458
    assert c.ASTRONOMICAL_UNIT_KM == 149_597_870.7
    assert c.LIGHT_YEAR_KM == pytest.approx(9.4607304725808e12)
    assert c.KM_PER_MILE * c.MILES_PER_KM == pytest.approx(1.0)


def test_orbital_periods_are_read_only():
    assert c.ORBITAL_PERIODS_DAYS["Earth"] == 365.25
    with pytest.raises(TypeError):
        c.ORBITAL_PERIODS_DAYS["Earth"] = 1.0  # type: ignore[index]
