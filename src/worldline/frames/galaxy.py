"""Galactic orbit model: the Solar System's motion around the Milky Way center.

All values are empirical; the uncertainty (~7%) is always significant.
"""

from dataclasses import dataclass

from worldline.constants import (
    GALACTIC_ORBITAL_PERIOD_YEARS,
    SOLAR_GALACTIC_VELOCITY_KMS,
    SOLAR_GALACTIC_VELOCITY_UNCERTAINTY_KMS,
    SUN_GALACTIC_CENTER_DISTANCE_LY,
)
from worldline.models import GalaxyFrameVelocity, GalaxyMetadata, ReferenceFrame

GALACTIC_VELOCITY_KMS = SOLAR_GALACTIC_VELOCITY_KMS


def galaxy_distance_km(duration_seconds: float) -> float:
    return GALACTIC_VELOCITY_KMS * duration_seconds


def compute_galaxy_velocity() -> GalaxyFrameVelocity:
    return GalaxyFrameVelocity(
        velocity_kms=GALACTIC_VELOCITY_KMS,
        uncertainty_kms=SOLAR_GALACTIC_VELOCITY_UNCERTAINTY_KMS,
        has_significant_uncertainty=True,
        metadata=GalaxyMetadata(
            distance_to_galactic_center_ly=SUN_GALACTIC_CENTER_DISTANCE_LY,
            orbital_period_years=GALACTIC_ORBITAL_PERIOD_YEARS,
        ),
    )


@dataclass(frozen=True)
class GalaxyModel:
    frame: ReferenceFrame = ReferenceFrame.GALAXY

    def velocity(self) -> GalaxyFrameVelocity:
        return compute_galaxy_velocity()

    def distance_km(self, duration_seconds: float) -> float:
        return galaxy_distance_km(duration_seconds)
