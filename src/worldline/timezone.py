"""Timezone lookup and local-to-UTC conversion for birth locations."""

import logging
from datetime import datetime

from pytz import UnknownTimeZoneError, timezone, utc
from timezonefinder import TimezoneFinder

from worldline.dates import InvalidDateError
from worldline.models import BirthInstant

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()


def get_timezone_from_coords(lat: float, lon: float) -> str:
    """IANA timezone name for a coordinate, falling back to "UTC".

    The fallback covers points with no zone polygon (open ocean, poles) and
    coordinates outside the valid range.
    """
    try:
        tz_str = _tf.timezone_at(lat=lat, lng=lon)
    except ValueError as e:
        logger.warning(
            "Timezone lookup failed for lat=%s, lon=%s: %s; using UTC", lat, lon, e
        )
        return "UTC"
    if tz_str is None:
        logger.warning("No timezone found for lat=%s, lon=%s; using UTC", lat, lon)
        return "UTC"
    return tz_str


def local_time_to_utc(
    year: int, month: int, day: int, hour: int, minute: int, tz_name: str
) -> datetime:
    """Interpret a wall-clock time in tz_name and return the UTC instant.

    Ambiguous and non-existent DST wall times resolve to standard time.

    Raises:
        InvalidDateError: On an unknown zone name or impossible calendar date.
    """
    try:
        local_tz = timezone(tz_name)
    except UnknownTimeZoneError as e:
        raise InvalidDateError(f"Unknown timezone: {tz_name}") from e
    try:
        dt = datetime(year, month, day, hour, minute)
    except ValueError as e:
        raise InvalidDateError(str(e)) from e
    return local_tz.localize(dt).astimezone(utc)


def birth_time_to_utc(
    lat: float, lon: float, year: int, month: int, day: int, hour: int, minute: int
) -> BirthInstant:
    """Resolve a local birth clock time at a location to UTC.

    Example:
        Birth in São Paulo at 12:00 local time on 1984-10-03 resolves to
        1984-10-03 15:00 UTC with timezone "America/Sao_Paulo".
    """
    tz_name = get_timezone_from_coords(lat, lon)
    utc_dt = local_time_to_utc(year, month, day, hour, minute, tz_name)
    return BirthInstant(utc_dt=utc_dt, timezone=tz_name)
