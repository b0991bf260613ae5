"""Strategy interface shared by the four frame models.

The shipped models are constant-velocity approximations. A higher-fidelity
model (e.g. instantaneous orbital speed from an ephemeris) plugs into the
aggregator by implementing the same protocol.
"""

from typing import Protocol

from worldline.models import FrameDistance, FrameVelocity, ReferenceFrame


class FrameModel(Protocol):
    frame: ReferenceFrame

    def velocity(self) -> FrameVelocity: ...

    def distance_km(self, duration_seconds: float) -> float: ...


def frame_distance(model: FrameModel, duration_seconds: float) -> FrameDistance:
    """Wrap a model's path length for a duration into a FrameDistance."""
    return FrameDistance(
        frame=model.frame,
        path_length_km=model.distance_km(duration_seconds),
        duration_seconds=duration_seconds,
    )
