import time

import pytest

_WORLDLINE_VARS = (
    "WORLDLINE_LOCALE",
    "WORLDLINE_CMB_REFERENCE",
    "WORLDLINE_UNCERTAINTY_THRESHOLD",
    "WORLDLINE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's WORLDLINE_* variables out of the tests."""
    for name in _WORLDLINE_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def local_tz(monkeypatch):
    """Switch the process-local timezone for the duration of a test.

    Usage: ``local_tz("America/Los_Angeles")``.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
