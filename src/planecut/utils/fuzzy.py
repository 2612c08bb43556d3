"""Approximate float comparisons driven by the active geometry tolerances."""

import math

from planecut.config.context import current_geometry


def approx_eq(a: float, b: float, epsilon: float | None = None) -> bool:
    """Check whether two floats are equal within a relative/absolute tolerance.

    Infinities of the same sign compare equal; NaN never does.

    Args:
        a: First value
        b: Second value
        epsilon: Tolerance override (defaults to the context's `epsilon`)

    Returns:
        True if the values are approximately equal

    Examples:
        >>> approx_eq(0.1 + 0.2, 0.3)
        True
        >>> approx_eq(1.0, 1.001)
        False
    """
    if epsilon is None:
        epsilon = current_geometry().epsilon
    return math.isclose(a, b, rel_tol=epsilon, abs_tol=epsilon)


def approx_zero(value: float, epsilon: float | None = None) -> bool:
    """Check whether a float is approximately zero."""
    return approx_eq(value, 0.0, epsilon)
