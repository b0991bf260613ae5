"""Earth rotation (spin) model: tangential speed of a surface point."""

import math
from dataclasses import dataclass

from worldline.constants import SIDEREAL_DAY_SECONDS
from worldline.models import ReferenceFrame, SpinFrameVelocity, SpinMetadata
from worldline.wgs84 import parallel_radius_from_degrees

# Treated as exactly constant; length-of-day variations are ignored.
EARTH_ANGULAR_VELOCITY_RAD_S = (2 * math.pi) / SIDEREAL_DAY_SECONDS


def spin_velocity_ms(latitude_deg: float) -> float:
    """Tangential velocity v = ω·r(φ) in m/s.

    Raises:
        InvalidLatitudeError: If latitude is outside [-90, 90].
    """
    return EARTH_ANGULAR_VELOCITY_RAD_S * parallel_radius_from_degrees(latitude_deg)


def spin_velocity_kms(latitude_deg: float) -> float:
    return spin_velocity_ms(latitude_deg) / 1000


def spin_distance_km(latitude_deg: float, duration_seconds: float) -> float:
    """Arc length traced along the latitude circle over a duration, in km."""
    return spin_velocity_kms(latitude_deg) * duration_seconds


def compute_spin_velocity(latitude_deg: float) -> SpinFrameVelocity:
    """Spin velocity at a latitude, with the parallel radius as metadata."""
    parallel_radius_m = parallel_radius_from_degrees(latitude_deg)
    velocity_ms = EARTH_ANGULAR_VELOCITY_RAD_S * parallel_radius_m
    return SpinFrameVelocity(
        velocity_kms=velocity_ms / 1000,
        metadata=SpinMetadata(
            latitude_deg=latitude_deg,
            parallel_radius_km=parallel_radius_m / 1000,
        ),
    )


@dataclass(frozen=True)
class SpinModel:
    """Constant angular velocity at a fixed latitude."""

    latitude_deg: float
    frame: ReferenceFrame = ReferenceFrame.SPIN

    def velocity(self) -> SpinFrameVelocity:
        return compute_spin_velocity(self.latitude_deg)

    def distance_km(self, duration_seconds: float) -> float:
        return spin_distance_km(self.latitude_deg, duration_seconds)
