"""CMB rest frame model, derived from the CMB dipole."""

from dataclasses import dataclass

from worldline.constants import (
    LOCAL_GROUP_CMB_GALACTIC_LATITUDE_DEG,
    LOCAL_GROUP_CMB_GALACTIC_LONGITUDE_DEG,
    LOCAL_GROUP_CMB_VELOCITY_KMS,
    LOCAL_GROUP_CMB_VELOCITY_UNCERTAINTY_KMS,
    SSB_CMB_GALACTIC_LATITUDE_DEG,
    SSB_CMB_GALACTIC_LONGITUDE_DEG,
    SSB_CMB_VELOCITY_KMS,
    SSB_CMB_VELOCITY_UNCERTAINTY_KMS,
)
from worldline.models import CMBFrameVelocity, CMBMetadata, CMBReference, ReferenceFrame
from worldline.uncertainty import is_significant_uncertainty

SSB_VELOCITY_KMS = SSB_CMB_VELOCITY_KMS
LOCAL_GROUP_VELOCITY_KMS = LOCAL_GROUP_CMB_VELOCITY_KMS

# reference -> (velocity, uncertainty, galactic longitude, galactic latitude)
_DIPOLE: dict[CMBReference, tuple[float, float, float, float]] = {
    CMBReference.SSB: (
        SSB_VELOCITY_KMS,
        SSB_CMB_VELOCITY_UNCERTAINTY_KMS,
        SSB_CMB_GALACTIC_LONGITUDE_DEG,
        SSB_CMB_GALACTIC_LATITUDE_DEG,
    ),
    CMBReference.LOCAL_GROUP: (
        LOCAL_GROUP_VELOCITY_KMS,
        LOCAL_GROUP_CMB_VELOCITY_UNCERTAINTY_KMS,
        LOCAL_GROUP_CMB_GALACTIC_LONGITUDE_DEG,
        LOCAL_GROUP_CMB_GALACTIC_LATITUDE_DEG,
    ),
}


def cmb_distance_km(
    duration_seconds: float, reference: CMBReference | str = CMBReference.SSB
) -> float:
    """Distance traveled relative to the CMB over a duration, in km.

    Raises:
        ValueError: If reference is not "ssb" or "local-group".
    """
    velocity = _DIPOLE[CMBReference(reference)][0]
    return velocity * duration_seconds


def compute_cmb_velocity(
    reference: CMBReference | str = CMBReference.SSB,
    rel_threshold: float = 1e-3,
) -> CMBFrameVelocity:
    """CMB velocity with its dipole direction in galactic coordinates.

    Args:
        reference: Solar System Barycenter (default) or Local Group.
        rel_threshold: Relative uncertainty above which the flag is raised.

    Raises:
        ValueError: If reference is not "ssb" or "local-group".
    """
    reference = CMBReference(reference)
    velocity, uncertainty, lon, lat = _DIPOLE[reference]
    return CMBFrameVelocity(
        velocity_kms=velocity,
        uncertainty_kms=uncertainty,
        has_significant_uncertainty=is_significant_uncertainty(
            velocity, uncertainty, rel_threshold
        ),
        metadata=CMBMetadata(
            reference=reference,
            direction_galactic_longitude=lon,
            direction_galactic_latitude=lat,
        ),
    )


@dataclass(frozen=True)
class CMBModel:
    reference: CMBReference = CMBReference.SSB
    rel_threshold: float = 1e-3
    frame: ReferenceFrame = ReferenceFrame.CMB

    def __post_init__(self) -> None:
        object.__setattr__(self, "reference", CMBReference(self.reference))

    def velocity(self) -> CMBFrameVelocity:
        return compute_cmb_velocity(self.reference, self.rel_threshold)

    def distance_km(self, duration_seconds: float) -> float:
        return cmb_distance_km(duration_seconds, self.reference)
