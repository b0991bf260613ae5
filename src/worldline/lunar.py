"""Lunar phase from the mean synodic month.

Accurate to within a few hours for most dates; no lunar theory is applied.
"""

import math
from datetime import date, datetime, timezone

from worldline.models import MoonPhaseInfo

SYNODIC_MONTH_DAYS = 29.53058867  # USNO

# NASA Eclipse Website phase catalogue
REFERENCE_NEW_MOON = datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)

# Upper bound (days since new moon) of each phase, ~3.69 days apart
_PHASES = (
    (1.85, "New Moon", "\U0001f311"),
    (5.53, "Waxing Crescent", "\U0001f312"),
    (9.22, "First Quarter", "\U0001f313"),
    (12.91, "Waxing Gibbous", "\U0001f314"),
    (16.61, "Full Moon", "\U0001f315"),
    (20.3, "Waning Gibbous", "\U0001f316"),
    (23.99, "Last Quarter", "\U0001f317"),
    (27.68, "Waning Crescent", "\U0001f318"),
)


def _as_aware(when: datetime | date) -> datetime:
    if not isinstance(when, datetime):
        when = datetime(when.year, when.month, when.day, 12)
    if when.tzinfo is None:
        when = when.astimezone()  # naive = local time
    return when


def get_moon_age(when: datetime | date) -> float:
    """Days since the last new moon, in [0, SYNODIC_MONTH_DAYS)."""
    days = (_as_aware(when) - REFERENCE_NEW_MOON).total_seconds() / 86400
    return days % SYNODIC_MONTH_DAYS


def _illumination(age: float) -> int:
    cycle = age / SYNODIC_MONTH_DAYS
    return round((1 - math.cos(cycle * 2 * math.pi)) / 2 * 100)


def get_moon_illumination(when: datetime | date) -> int:
    """Illuminated fraction in percent, cosine approximation."""
    return _illumination(get_moon_age(when))


def get_moon_phase(when: datetime | date) -> MoonPhaseInfo:
    age = get_moon_age(when)
    name, emoji = "New Moon", _PHASES[0][2]
    for upper, phase_name, phase_emoji in _PHASES:
        if age < upper:
            name, emoji = phase_name, phase_emoji
            break
    return MoonPhaseInfo(
        phase=name,
        illumination=_illumination(age),
        age=round(age, 1),
        emoji=emoji,
    )
