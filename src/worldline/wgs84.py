"""WGS84 ellipsoid geometry for points on Earth's surface.

Altitude above the ellipsoid is taken as zero everywhere.
"""

import math

from worldline.constants import WGS84_ECCENTRICITY_SQUARED, WGS84_SEMI_MAJOR_AXIS_M


class InvalidLatitudeError(ValueError):
    """Latitude outside [-90, 90] degrees."""


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


def radians_to_degrees(radians: float) -> float:
    return radians * (180 / math.pi)


def prime_vertical_radius(latitude_rad: float) -> float:
    """Radius of curvature in the prime vertical, N(φ) = a / √(1 − e²·sin²φ).

    Args:
        latitude_rad: Geodetic latitude in radians.

    Returns:
        N(φ) in meters. Equals the semi-major axis at the equator.
    """
    sin_lat = math.sin(latitude_rad)
    return WGS84_SEMI_MAJOR_AXIS_M / math.sqrt(
        1 - WGS84_ECCENTRICITY_SQUARED * sin_lat * sin_lat
    )


def parallel_radius(latitude_rad: float) -> float:
    """Distance from the rotation axis to the surface, r(φ) = N(φ)·cos φ, in meters."""
    return prime_vertical_radius(latitude_rad) * math.cos(latitude_rad)


def validate_latitude(latitude_deg: float) -> None:
    if not -90 <= latitude_deg <= 90:
        raise InvalidLatitudeError(
            f"Invalid latitude: {latitude_deg}. Must be between -90 and 90."
        )


def parallel_radius_from_degrees(latitude_deg: float) -> float:
    """Radius of the latitude circle in meters.

    Args:
        latitude_deg: Latitude in degrees. Both poles are valid.

    Returns:
        Parallel radius in meters (≈0 at the poles).

    Raises:
        InvalidLatitudeError: If latitude is outside [-90, 90] or NaN.
    """
    validate_latitude(latitude_deg)
    return parallel_radius(degrees_to_radians(latitude_deg))


def latitude_circumference(latitude_deg: float) -> float:
    """Circumference of the latitude circle in kilometers."""
    return 2 * math.pi * parallel_radius_from_degrees(latitude_deg) / 1000
