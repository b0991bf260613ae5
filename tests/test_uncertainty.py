import pytest

from worldline.uncertainty import is_significant_uncertainty


@pytest.mark.parametrize("sigma", [None, 0, 0.0])
def test_missing_or_zero_sigma_is_never_significant(sigma):
    assert is_significant_uncertainty(100.0, sigma) is False
    assert is_significant_uncertainty(0.0, sigma) is False


def test_zero_value_with_nonzero_sigma_is_significant():
    assert is_significant_uncertainty(0.0, 1e-12) is True
    assert is_significant_uncertainty(0.0, -3.0) is True


def test_boundary_is_inclusive():
    assert is_significant_uncertainty(1000.0, 1.0, 1e-3) is True
    assert is_significant_uncertainty(1000.0, 2.0, 2e-3) is True


def test_below_threshold():
    assert is_significant_uncertainty(1000.0, 0.999, 1e-3) is False


def test_sign_is_irrelevant():
    assert is_significant_uncertainty(-220.0, 15.0) is True
    assert is_significant_uncertainty(220.0, -15.0) is True
    assert is_significant_uncertainty(-369.82, -0.11) is False


@pytest.mark.parametrize(
    "value, sigma, threshold, expected",
    [
        (220.0, 15.0, 1e-3, True),  # galactic velocity, ~7%
        (369.82, 0.11, 1e-3, False),  # SSB dipole, ~0.03%
        (620.0, 15.0, 1e-3, True),  # Local Group, ~2.4%
        (220.0, 15.0, 0.1, False),
    ],
)
def test_frame_constants(value, sigma, threshold, expected):
    assert is_significant_uncertainty(value, sigma, threshold) is expected
