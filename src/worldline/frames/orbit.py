"""Earth orbit model (heliocentric frame).

Distances use the mean orbital speed. The true speed varies with the
anomaly between the aphelion and perihelion values below; integrating it is
left to a richer FrameModel.
"""

import math
from dataclasses import dataclass

from worldline.constants import EARTH_ORBITAL_ECCENTRICITY, EARTH_ORBITAL_VELOCITY_KMS
from worldline.models import OrbitFrameVelocity, OrbitMetadata, ReferenceFrame

MEAN_ORBITAL_VELOCITY_KMS = EARTH_ORBITAL_VELOCITY_KMS

_e = EARTH_ORBITAL_ECCENTRICITY

# Vis-viva ratios for an ellipse (Bate, Mueller, White)
APHELION_VELOCITY_KMS = EARTH_ORBITAL_VELOCITY_KMS * math.sqrt((1 - _e) / (1 + _e))
PERIHELION_VELOCITY_KMS = EARTH_ORBITAL_VELOCITY_KMS * math.sqrt((1 + _e) / (1 - _e))


def orbit_distance_km(duration_seconds: float) -> float:
    return MEAN_ORBITAL_VELOCITY_KMS * duration_seconds


def compute_orbit_velocity() -> OrbitFrameVelocity:
    return OrbitFrameVelocity(
        velocity_kms=MEAN_ORBITAL_VELOCITY_KMS,
        metadata=OrbitMetadata(
            aphelion_velocity_kms=APHELION_VELOCITY_KMS,
            perihelion_velocity_kms=PERIHELION_VELOCITY_KMS,
            eccentricity=EARTH_ORBITAL_ECCENTRICITY,
        ),
    )


@dataclass(frozen=True)
class MeanOrbitModel:
    frame: ReferenceFrame = ReferenceFrame.ORBIT

    def velocity(self) -> OrbitFrameVelocity:
        return compute_orbit_velocity()

    def distance_km(self, duration_seconds: float) -> float:
        return orbit_distance_km(duration_seconds)
