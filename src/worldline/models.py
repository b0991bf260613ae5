"""Data model definitions for queries, per-frame results, and the aggregated worldline state."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Literal, Union


class ReferenceFrame(str, Enum):
    """The four nested frames an observer's motion is measured in."""

    SPIN = "spin"
    ORBIT = "orbit"
    GALAXY = "galaxy"
    CMB = "cmb"


class CMBReference(str, Enum):
    """Which body's motion relative to the CMB rest frame is reported."""

    SSB = "ssb"  # Solar System Barycenter
    LOCAL_GROUP = "local-group"


@dataclass(frozen=True)
class WorldlineQuery:
    """Raw user input. Not yet validated."""

    birth: str  # "YYYY-MM-DD" or ISO 8601 timestamp
    latitude_deg: float  # Decimal degrees, -90..90
    target: str | None = None  # None = now
    reference: CMBReference = CMBReference.SSB


# --- Frame-specific metadata ---


@dataclass(frozen=True)
class SpinMetadata:
    latitude_deg: float
    parallel_radius_km: float  # Distance from the rotation axis


@dataclass(frozen=True)
class OrbitMetadata:
    aphelion_velocity_kms: float  # Slowest point of the orbit
    perihelion_velocity_kms: float  # Fastest point of the orbit
    eccentricity: float


@dataclass(frozen=True)
class GalaxyMetadata:
    distance_to_galactic_center_ly: float
    orbital_period_years: float


@dataclass(frozen=True)
class CMBMetadata:
    reference: CMBReference
    direction_galactic_longitude: float  # Degrees
    direction_galactic_latitude: float  # Degrees


# --- Frame velocities (tagged by `frame`) ---


@dataclass(frozen=True)
class SpinFrameVelocity:
    """Tangential speed from Earth's rotation. Exact geometry, no uncertainty."""

    velocity_kms: float
    metadata: SpinMetadata
    has_significant_uncertainty: bool = False
    uncertainty_kms: float | None = None
    frame: Literal[ReferenceFrame.SPIN] = field(default=ReferenceFrame.SPIN, init=False)


@dataclass(frozen=True)
class OrbitFrameVelocity:
    """Mean heliocentric orbital speed."""

    velocity_kms: float
    metadata: OrbitMetadata
    has_significant_uncertainty: bool = False
    uncertainty_kms: float | None = None
    frame: Literal[ReferenceFrame.ORBIT] = field(
        default=ReferenceFrame.ORBIT, init=False
    )


@dataclass(frozen=True)
class GalaxyFrameVelocity:
    """Galactocentric speed. Always carries measurement uncertainty."""

    velocity_kms: float
    uncertainty_kms: float
    has_significant_uncertainty: bool
    metadata: GalaxyMetadata
    frame: Literal[ReferenceFrame.GALAXY] = field(
        default=ReferenceFrame.GALAXY, init=False
    )


@dataclass(frozen=True)
class CMBFrameVelocity:
    """Speed relative to the CMB rest frame, from the dipole measurement."""

    velocity_kms: float
    uncertainty_kms: float
    has_significant_uncertainty: bool
    metadata: CMBMetadata
    frame: Literal[ReferenceFrame.CMB] = field(default=ReferenceFrame.CMB, init=False)


FrameVelocity = Union[
    SpinFrameVelocity, OrbitFrameVelocity, GalaxyFrameVelocity, CMBFrameVelocity
]


@dataclass(frozen=True)
class FrameDistance:
    """Path length traveled in one frame over a duration."""

    frame: ReferenceFrame
    path_length_km: float  # Arc length, velocity × duration
    duration_seconds: float


@dataclass(frozen=True)
class FrameVelocities:
    spin: SpinFrameVelocity
    orbit: OrbitFrameVelocity
    galaxy: GalaxyFrameVelocity
    cmb: CMBFrameVelocity


@dataclass(frozen=True)
class FrameDistances:
    spin: FrameDistance
    orbit: FrameDistance
    galaxy: FrameDistance
    cmb: FrameDistance

    def __iter__(self):
        return iter((self.spin, self.orbit, self.galaxy, self.cmb))


@dataclass(frozen=True)
class WorldlineState:
    """The sole output of the aggregator. Fully computed state.

    duration_seconds is signed: negative means the target precedes birth.
    """

    timestamp: datetime  # Parsed target instant
    birth_date: datetime  # Parsed birth instant
    latitude_deg: float
    duration_seconds: float
    frames: FrameVelocities
    distances: FrameDistances

    def total_path_length_km(self) -> float:
        """Sum of the path lengths across all four frames."""
        return sum(d.path_length_km for d in self.distances)


@dataclass(frozen=True)
class AgeDuration:
    """Display breakdown of a duration. Components are clamped to zero before birth."""

    total_seconds: float  # Clamped
    total_days: float
    total_years: float  # Julian years
    years: int
    months: int  # Average months (Julian year / 12)
    days: int
    hours: int
    minutes: int
    seconds: int
    is_pre_birth: bool  # Sign of the unclamped duration


class Hemisphere(str, Enum):
    NORTHERN = "northern"
    SOUTHERN = "southern"


@dataclass(frozen=True)
class SeasonInfo:
    season: str  # "Spring", "Summer", ...
    progress: float  # Percent through the current season, 0-100
    next_event: str  # "Summer Solstice", ...
    days_until_next: int


@dataclass(frozen=True)
class MoonPhaseInfo:
    phase: str  # "Full Moon", "Waxing Crescent", ...
    illumination: int  # Percent, 0-100
    age: float  # Days since new moon, rounded to 0.1
    emoji: str


@dataclass(frozen=True)
class BirthInstant:
    """Result of resolving a local birth time at a location."""

    utc_dt: datetime  # tzinfo=utc
    timezone: str  # IANA name used for the conversion
