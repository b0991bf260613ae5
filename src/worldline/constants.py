"""Physical constants for worldline kinematics.

Every value carries its unit in the name. Derived values are computed once at
import time and never mutated.
"""

from types import MappingProxyType

from skyfield.constants import AU_KM, C, DAY_S

# --- Time ---

SIDEREAL_DAY_SECONDS = 86164.0905  # NIST, rotation relative to distant stars
SOLAR_DAY_SECONDS = DAY_S
JULIAN_YEAR_DAYS = 365.25  # IAU
JULIAN_YEAR_SECONDS = JULIAN_YEAR_DAYS * SOLAR_DAY_SECONDS

# --- WGS84 ellipsoid (OGC/EPSG) ---

WGS84_SEMI_MAJOR_AXIS_M = 6378137.0
WGS84_FLATTENING = 1 / 298.257223563
WGS84_SEMI_MINOR_AXIS_M = WGS84_SEMI_MAJOR_AXIS_M * (1 - WGS84_FLATTENING)
WGS84_ECCENTRICITY_SQUARED = WGS84_FLATTENING * (2 - WGS84_FLATTENING)

# --- Heliocentric orbit (NASA Planetary Fact Sheet) ---

EARTH_ORBITAL_VELOCITY_KMS = 29.78  # mean; ranges ~29.29 to ~30.29 km/s
EARTH_ORBITAL_ECCENTRICITY = 0.0167086
EARTH_ORBITAL_PERIOD_SECONDS = 365.256363004 * SOLAR_DAY_SECONDS
ASTRONOMICAL_UNIT_KM = AU_KM  # IAU 2012

# --- Galactic orbit ---

SOLAR_GALACTIC_VELOCITY_KMS = 220.0  # JPL Night Sky Network
SOLAR_GALACTIC_VELOCITY_UNCERTAINTY_KMS = 15.0
SUN_GALACTIC_CENTER_DISTANCE_LY = 26000.0  # Reid et al. 2019
GALACTIC_ORBITAL_PERIOD_YEARS = 225_000_000.0

# --- CMB dipole (PDG 2025) ---

SSB_CMB_VELOCITY_KMS = 369.82
SSB_CMB_VELOCITY_UNCERTAINTY_KMS = 0.11
SSB_CMB_GALACTIC_LONGITUDE_DEG = 264.021
SSB_CMB_GALACTIC_LATITUDE_DEG = 48.253

LOCAL_GROUP_CMB_VELOCITY_KMS = 620.0
LOCAL_GROUP_CMB_VELOCITY_UNCERTAINTY_KMS = 15.0
# Less precisely measured than the SSB direction
LOCAL_GROUP_CMB_GALACTIC_LONGITUDE_DEG = 276.0
LOCAL_GROUP_CMB_GALACTIC_LATITUDE_DEG = 30.0

# --- Unit conversion ---

SPEED_OF_LIGHT_KMS = C / 1000.0  # CODATA, exact
LIGHT_YEAR_KM = SPEED_OF_LIGHT_KMS * JULIAN_YEAR_SECONDS
PARSEC_KM = 3.0857e13
KM_PER_MILE = 1.609344
MILES_PER_KM = 1 / KM_PER_MILE
LIGHT_SECONDS_PER_AU = 499.004784

# --- Comparison distances ---

EARTH_CIRCUMFERENCE_KM = 40_075.017
MOON_MEAN_DISTANCE_KM = 384_400.0
PLUTO_MEAN_DISTANCE_KM = 5_906_380_000.0

ORBITAL_PERIODS_DAYS = MappingProxyType(
    {
        "Mercury": 87.97,
        "Venus": 224.7,
        "Earth": 365.25,
        "Mars": 686.98,
        "Jupiter": 4332.59,
        "Saturn": 10759.22,
        "Uranus": 30688.5,
        "Neptune": 60182.0,
    }
)
