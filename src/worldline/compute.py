"""Worldline computation layer: combines the four frame models into one state."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime

from worldline.config import Settings
from worldline.dates import DateInput, compute_duration_seconds, parse_date_input
from worldline.frames.base import FrameModel, frame_distance
from worldline.frames.cmb import CMBModel
from worldline.frames.galaxy import GalaxyModel
from worldline.frames.orbit import MeanOrbitModel
from worldline.frames.spin import SpinModel
from worldline.models import (
    CMBReference,
    FrameDistances,
    FrameVelocities,
    WorldlineQuery,
    WorldlineState,
)
from worldline.uncertainty import is_significant_uncertainty
from worldline.wgs84 import validate_latitude

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameModels:
    """One strategy per frame. Swap any of them for a higher-fidelity model."""

    spin: FrameModel
    orbit: FrameModel
    galaxy: FrameModel
    cmb: FrameModel


def default_models(
    latitude_deg: float,
    reference: CMBReference | str = CMBReference.SSB,
    rel_threshold: float = 1e-3,
) -> FrameModels:
    """Constant-velocity models for every frame."""
    return FrameModels(
        spin=SpinModel(latitude_deg),
        orbit=MeanOrbitModel(),
        galaxy=GalaxyModel(),
        cmb=CMBModel(reference, rel_threshold),
    )


def compute_worldline_state(
    birth_date: DateInput,
    latitude_deg: float,
    target_date: DateInput | None = None,
    *,
    reference: CMBReference | str = CMBReference.SSB,
    rel_threshold: float = 1e-3,
    models: FrameModels | None = None,
) -> WorldlineState:
    """Compute the complete worldline state for an observer.

    Date-only strings (YYYY-MM-DD) are interpreted as local noon.

    Args:
        birth_date: Observer's birth date or instant.
        latitude_deg: Observer's latitude in degrees, -90..90.
        target_date: Target date or instant. Defaults to now.
        reference: CMB reference body, used when models is None.
        rel_threshold: Relative uncertainty that counts as significant for the
            CMB frame.
        models: Frame strategies. Defaults to default_models(latitude_deg, reference).

    Returns:
        WorldlineState. duration_seconds is negative before birth.

    Raises:
        InvalidDateError: If either date cannot be parsed.
        InvalidLatitudeError: If latitude is outside [-90, 90].
    """
    birth = parse_date_input(birth_date)
    target = parse_date_input(target_date if target_date is not None else datetime.now())
    validate_latitude(latitude_deg)
    duration = compute_duration_seconds(birth, target)

    if models is None:
        models = default_models(latitude_deg, reference, rel_threshold)

    spin = models.spin.velocity()
    orbit = models.orbit.velocity()
    galaxy = models.galaxy.velocity()
    cmb = models.cmb.velocity()

    frames = FrameVelocities(
        spin=replace(spin, has_significant_uncertainty=False, uncertainty_kms=None),
        orbit=replace(orbit, has_significant_uncertainty=False, uncertainty_kms=None),
        galaxy=replace(
            galaxy,
            # Galactic speed is judged against the fixed default threshold only.
            has_significant_uncertainty=is_significant_uncertainty(
                galaxy.velocity_kms, galaxy.uncertainty_kms
            ),
        ),
        cmb=replace(
            cmb,
            has_significant_uncertainty=is_significant_uncertainty(
                cmb.velocity_kms, cmb.uncertainty_kms, rel_threshold
            ),
        ),
    )

    distances = FrameDistances(
        spin=frame_distance(models.spin, duration),
        orbit=frame_distance(models.orbit, duration),
        galaxy=frame_distance(models.galaxy, duration),
        cmb=frame_distance(models.cmb, duration),
    )

    logger.debug(
        "Worldline state: lat=%s duration=%.0fs cmb=%s",
        latitude_deg,
        duration,
        cmb.metadata.reference.value,
    )

    return WorldlineState(
        timestamp=target,
        birth_date=birth,
        latitude_deg=latitude_deg,
        duration_seconds=duration,
        frames=frames,
        distances=distances,
    )


def run(query: WorldlineQuery, settings: Settings | None = None) -> WorldlineState:
    """Top-level entry point: takes a WorldlineQuery and returns a WorldlineState.

    Args:
        query: User input (birth, latitude, optional target and CMB reference).
        settings: Runtime settings; only the uncertainty threshold is used here.

    Returns:
        Fully computed WorldlineState.
    """
    settings = settings or Settings()
    return compute_worldline_state(
        query.birth,
        query.latitude_deg,
        query.target,
        reference=query.reference,
        rel_threshold=settings.uncertainty_threshold,
    )
