"""Unit conversion and human-readable formatting of frame speeds and distances."""

import math
from dataclasses import dataclass
from typing import Literal

from worldline.constants import (
    ASTRONOMICAL_UNIT_KM,
    KM_PER_MILE,
    LIGHT_SECONDS_PER_AU,
    LIGHT_YEAR_KM,
    MOON_MEAN_DISTANCE_KM,
    PARSEC_KM,
    PLUTO_MEAN_DISTANCE_KM,
)
from worldline.i18n import t

SpeedUnit = Literal["km/s", "km/h", "mph", "m/s"]

_COMPACT_SUFFIXES = ("", "K", "M", "B", "T")

# --- Speed ---


def kms_to_kmh(kms: float) -> float:
    return kms * 3600


def kms_to_mph(kms: float) -> float:
    return (kms * 3600) / KM_PER_MILE


def kms_to_ms(kms: float) -> float:
    return kms * 1000


def ms_to_kms(ms: float) -> float:
    return ms / 1000


# --- Distance ---


def km_to_miles(km: float) -> float:
    return km / KM_PER_MILE


def miles_to_km(miles: float) -> float:
    return miles * KM_PER_MILE


def km_to_au(km: float) -> float:
    return km / ASTRONOMICAL_UNIT_KM


def au_to_km(au: float) -> float:
    return au * ASTRONOMICAL_UNIT_KM


def km_to_light_years(km: float) -> float:
    return km / LIGHT_YEAR_KM


def light_years_to_km(ly: float) -> float:
    return ly * LIGHT_YEAR_KM


def km_to_parsecs(km: float) -> float:
    return km / PARSEC_KM


# --- Comparisons ---


def moon_round_trips(distance_km: float) -> float:
    """How many Earth–Moon round trips a distance represents."""
    return distance_km / (2 * MOON_MEAN_DISTANCE_KM)


def pluto_trips(distance_km: float) -> float:
    """How many one-way trips from the Sun to Pluto a distance represents."""
    return distance_km / PLUTO_MEAN_DISTANCE_KM


def light_year_progress(distance_km: float) -> float:
    """Progress toward one light-year, in percent."""
    return (distance_km / LIGHT_YEAR_KM) * 100


# --- Formatting ---


@dataclass(frozen=True)
class FormattedDistance:
    value: float  # In `unit`
    unit: str  # "km", "AU" or "ly"
    formatted: str  # Localized display string


def format_compact(value: float, decimals: int = 2) -> str:
    """Format with a K/M/B/T suffix: 1234567 -> "1.23M". Values past T stay in T."""
    index = 0
    scaled = abs(value)
    while scaled >= 1000 and index < len(_COMPACT_SUFFIXES) - 1:
        scaled /= 1000
        index += 1
    sign = "-" if value < 0 else ""
    return f"{sign}{scaled:.{decimals}f}{_COMPACT_SUFFIXES[index]}"


def format_distance(km: float, lang: str = "en") -> FormattedDistance:
    """Format a distance in km, AU, or light-years depending on magnitude.

    Below 0.01 AU the distance stays in km; below 0.01 ly it is shown in AU.
    """
    abs_km = abs(km)

    if abs_km < ASTRONOMICAL_UNIT_KM / 100:
        return FormattedDistance(
            value=km, unit="km", formatted=f"{format_compact(km)} {t('unit_km', lang)}"
        )

    if abs_km < LIGHT_YEAR_KM / 100:
        au = km_to_au(km)
        return FormattedDistance(
            value=au, unit="AU", formatted=f"{au:.2f} {t('unit_au', lang)}"
        )

    ly = km_to_light_years(km)
    return FormattedDistance(
        value=ly, unit="ly", formatted=f"{ly:.4f} {t('unit_ly', lang)}"
    )


def format_speed(kms: float, unit: SpeedUnit = "km/s", lang: str = "en") -> str:
    """Format a speed given in km/s in the requested unit.

    Raises:
        ValueError: On an unknown unit.
    """
    if unit == "km/h":
        return f"{format_compact(kms_to_kmh(kms))} {t('unit_kmh', lang)}"
    if unit == "mph":
        return f"{format_compact(kms_to_mph(kms))} {t('unit_mph', lang)}"
    if unit == "m/s":
        return f"{format_compact(kms_to_ms(kms))} {t('unit_ms', lang)}"
    if unit == "km/s":
        return f"{kms:.2f} {t('unit_kms', lang)}"
    raise ValueError(f"Unknown speed unit: {unit}")


def format_light_time(distance_au: float) -> str:
    """Light travel time over a distance in AU, e.g. "8m 19s" or "4h 10m"."""
    total_seconds = distance_au * LIGHT_SECONDS_PER_AU

    if total_seconds < 60:
        return f"{total_seconds:.0f}s"
    if total_seconds < 3600:
        minutes = math.floor(total_seconds / 60)
        seconds = round(total_seconds % 60)
        return f"{minutes}m {seconds}s" if seconds > 0 else f"{minutes}m"
    hours = math.floor(total_seconds / 3600)
    minutes = round((total_seconds % 3600) / 60)
    return f"{hours}h {minutes}m" if minutes > 0 else f"{hours}h"
