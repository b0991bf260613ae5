"""Earth seasons from fixed approximate equinox and solstice dates.

The real event dates drift by a day or two from year to year. This is a
display aid only and plays no part in the frame models.
"""

import math
from datetime import date, datetime

from worldline.models import Hemisphere, SeasonInfo

# (month, day, northern season, southern season, event that starts it)
_EVENTS = (
    (3, 20, "Spring", "Autumn", "Spring Equinox"),
    (6, 21, "Summer", "Winter", "Summer Solstice"),
    (9, 22, "Autumn", "Spring", "Autumn Equinox"),
    (12, 21, "Winter", "Summer", "Winter Solstice"),
)

# Southern-hemisphere names for the same astronomical events
_SOUTHERN_EVENT_NAMES = {
    "Spring Equinox": "Autumn Equinox",
    "Summer Solstice": "Winter Solstice",
    "Autumn Equinox": "Spring Equinox",
    "Winter Solstice": "Summer Solstice",
}


def _as_datetime(d: datetime | date) -> datetime:
    if isinstance(d, datetime):
        return d.replace(tzinfo=None)
    return datetime(d.year, d.month, d.day)


def get_earth_season(
    when: datetime | date, hemisphere: Hemisphere | str = Hemisphere.NORTHERN
) -> SeasonInfo:
    """Current season, progress through it, and the next equinox/solstice.

    Args:
        when: Local date or datetime. Aware datetimes use their wall-clock time.
        hemisphere: Which hemisphere's season names to report.

    Returns:
        SeasonInfo with progress clamped to 0-100.
    """
    hemisphere = Hemisphere(hemisphere)
    now = _as_datetime(when)
    year = now.year

    # Boundaries from last year's winter solstice through next year's vernal equinox
    boundaries = [(datetime(year - 1, 12, 21), _EVENTS[3])]
    boundaries += [(datetime(year, ev[0], ev[1]), ev) for ev in _EVENTS]
    boundaries.append((datetime(year + 1, 3, 20), _EVENTS[0]))

    for (start, event), (end, next_event) in zip(boundaries, boundaries[1:]):
        if start <= now < end:
            break

    _, _, north, south, _ = event
    next_name = next_event[4]
    if hemisphere is Hemisphere.NORTHERN:
        season = north
    else:
        season = south
        next_name = _SOUTHERN_EVENT_NAMES[next_name]

    length = (end - start).total_seconds()
    elapsed = (now - start).total_seconds()
    progress = max(0.0, min(100.0, elapsed / length * 100))
    days_until_next = math.ceil((end - now).total_seconds() / 86400)

    return SeasonInfo(
        season=season,
        progress=progress,
        next_event=next_name,
        days_until_next=days_until_next,
    )
