"""Date parsing, elapsed time, and age breakdown.

Naive datetimes are local wall-clock time throughout. Bare calendar dates
("YYYY-MM-DD") are anchored at local noon so that the date never shifts
backward for observers west of UTC, and never lands in a DST gap.
"""

import math
import re
from datetime import date, datetime, timezone

from worldline.constants import JULIAN_YEAR_SECONDS, SOLAR_DAY_SECONDS
from worldline.models import AgeDuration

_DATE_ONLY = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_AVG_MONTH_SECONDS = JULIAN_YEAR_SECONDS / 12

DateInput = datetime | date | str


class InvalidDateError(ValueError):
    """Unparseable or unsupported date input."""


def parse_date_input(value: DateInput) -> datetime:
    """Parse a date input with well-defined semantics.

    - datetime objects are returned unchanged
    - date objects and "YYYY-MM-DD" strings become local noon on that date
    - any other string goes through ISO 8601 parsing (a trailing "Z" is UTC)

    Raises:
        InvalidDateError: If the string cannot be parsed or the type is unsupported.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, 12)
    if not isinstance(value, str):
        raise InvalidDateError(f"Unsupported date input: {value!r}")

    s = value.strip()
    m = _DATE_ONLY.match(s)
    try:
        if m:
            year, month, day = (int(g) for g in m.groups())
            return datetime(year, month, day, 12)
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        return datetime.fromisoformat(s)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date: {value!r}") from e


def format_date_input(d: datetime | date) -> str:
    """Format as "YYYY-MM-DD" from local calendar components."""
    if isinstance(d, datetime) and d.tzinfo is not None:
        d = d.astimezone()
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def _parse_side(value: DateInput, side: str) -> datetime:
    try:
        return parse_date_input(value)
    except InvalidDateError as e:
        raise InvalidDateError(f"Invalid {side} date") from e


def _as_aware(dt: datetime) -> datetime:
    if dt.tzinfo is not None:
        return dt
    try:
        return dt.astimezone()
    except (OverflowError, OSError, ValueError):
        # Outside the platform time range there are no local zone rules; use UTC.
        return dt.replace(tzinfo=timezone.utc)


def compute_duration_seconds(birth: DateInput, target: DateInput | None = None) -> float:
    """Seconds from birth to target, negative when target precedes birth.

    Args:
        birth: Birth instant or date.
        target: Target instant or date. Defaults to now.

    Raises:
        InvalidDateError: If either input is not a valid date.
    """
    if target is None:
        target = datetime.now()
    birth_dt = _parse_side(birth, "birth")
    target_dt = _parse_side(target, "target")
    if birth_dt.tzinfo is None and target_dt.tzinfo is None:
        try:
            return target_dt.timestamp() - birth_dt.timestamp()
        except (OverflowError, OSError, ValueError):
            return (target_dt - birth_dt).total_seconds()
    return (_as_aware(target_dt) - _as_aware(birth_dt)).total_seconds()


def breakdown_duration(total_seconds: float) -> AgeDuration:
    """Break a duration into years/months/days/hours/minutes/seconds.

    Uses the Julian year and an average month of 30.4375 days. This is a
    display approximation; calendar months vary. Negative durations are
    clamped to zero and flagged as pre-birth.
    """
    is_pre_birth = total_seconds < 0
    effective = max(0.0, float(total_seconds))

    years = math.floor(effective / JULIAN_YEAR_SECONDS)
    rest = effective - years * JULIAN_YEAR_SECONDS

    months = math.floor(rest / _AVG_MONTH_SECONDS)
    rest -= months * _AVG_MONTH_SECONDS

    days = math.floor(rest / SOLAR_DAY_SECONDS)
    rest -= days * SOLAR_DAY_SECONDS

    hours = math.floor(rest / 3600)
    rest -= hours * 3600

    minutes = math.floor(rest / 60)
    seconds = math.floor(rest - minutes * 60)

    return AgeDuration(
        total_seconds=effective,
        total_days=effective / SOLAR_DAY_SECONDS,
        total_years=effective / JULIAN_YEAR_SECONDS,
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        is_pre_birth=is_pre_birth,
    )


def compute_age(birth: DateInput) -> AgeDuration:
    """Age from birth until now."""
    return breakdown_duration(compute_duration_seconds(birth))


def format_duration(duration: AgeDuration) -> str:
    """Format as "41y 3m 21d | 00h:07m:45s"."""
    d = duration
    return (
        f"{d.years}y {d.months}m {d.days}d | "
        f"{d.hours:02d}h:{d.minutes:02d}m:{d.seconds:02d}s"
    )
