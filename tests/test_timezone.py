import logging
from datetime import datetime

import pytest
from pytz import utc

from worldline import timezone as tz
from worldline.dates import InvalidDateError


class _NoZoneFinder:
    def timezone_at(self, *, lat, lng):
        return None


def test_timezone_from_coords():
    assert tz.get_timezone_from_coords(-23.55, -46.64) == "America/Sao_Paulo"
    assert tz.get_timezone_from_coords(37.5665, 126.978) == "Asia/Seoul"


def test_falls_back_to_utc(monkeypatch, caplog):
    monkeypatch.setattr(tz, "_tf", _NoZoneFinder())
    with caplog.at_level(logging.WARNING, logger="worldline.timezone"):
        assert tz.get_timezone_from_coords(0.0, -160.0) == "UTC"
    assert "No timezone found" in caplog.text


def test_out_of_range_coords_fall_back_to_utc(caplog):
    with caplog.at_level(logging.WARNING, logger="worldline.timezone"):
        assert tz.get_timezone_from_coords(0.0, 200.0) == "UTC"
    assert "Timezone lookup failed" in caplog.text


def test_local_time_to_utc():
    assert tz.local_time_to_utc(1984, 10, 3, 12, 0, "America/Sao_Paulo") == datetime(
        1984, 10, 3, 15, 0, tzinfo=utc
    )


def test_local_time_to_utc_respects_dst():
    winter = tz.local_time_to_utc(2024, 1, 15, 12, 0, "America/New_York")
    summer = tz.local_time_to_utc(2024, 7, 15, 12, 0, "America/New_York")
    assert winter.hour == 17
    assert summer.hour == 16


def test_unknown_timezone():
    with pytest.raises(InvalidDateError, match="Unknown timezone"):
        tz.local_time_to_utc(2024, 1, 1, 0, 0, "Mars/Olympus_Mons")


def test_impossible_calendar_date():
    with pytest.raises(InvalidDateError):
        tz.local_time_to_utc(2023, 2, 29, 0, 0, "UTC")


def test_birth_time_to_utc():
    result = tz.birth_time_to_utc(-23.55, -46.64, 1984, 10, 3, 12, 0)
    assert result.timezone == "America/Sao_Paulo"
    assert result.utc_dt == datetime(1984, 10, 3, 15, 0, tzinfo=utc)
