"""Decides whether a measurement uncertainty is worth surfacing."""


def is_significant_uncertainty(
    value: float, sigma: float | None = None, rel_threshold: float = 1e-3
) -> bool:
    """Return True when sigma is large relative to value.

    A missing or zero sigma is never significant. A non-zero sigma on a zero
    value is always significant. Otherwise the test is |sigma / value| >=
    rel_threshold, inclusive at the boundary.
    """
    if sigma is None or sigma == 0:
        return False
    if value == 0:
        return True
    return abs(sigma / value) >= rel_threshold
