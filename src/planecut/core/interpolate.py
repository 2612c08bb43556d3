"""Locating points along segments, and points at a fraction along them."""

from planecut.config.context import current_geometry
from planecut.domain import Percent, Point
from planecut.exceptions import InterpolationError
from planecut.utils.fuzzy import approx_eq


def interpolate(a: float, b: float, i: float) -> float:
    """Fraction of the way from `a` to `b` at which `i` lies (unchecked)."""
    return (i - a) / (b - a)


def interpolate_2d(a: Point, b: Point, i: Point) -> Percent:
    """Fraction along the segment `a->b` at which point `i` lies.

    The fraction is measured along whichever axis the segment spans further.
    Unless the segment is axis-aligned, `i` must then sit on the line: its
    other coordinate has to match within the context's
    `interpolation_epsilon`.

    Args:
        a: Segment start
        b: Segment end
        i: Point on the segment

    Returns:
        The fraction as a Percent (snapped to ZERO/ONE near the endpoints)

    Raises:
        InterpolationError: If `a` and `b` coincide, `i` is off the line,
            or `i` lies beyond either end

    Examples:
        >>> interpolate_2d(Point(0, 0), Point(2, 2), Point(1, 1))
        Percent(value=0.5)
    """
    x_same = approx_eq(a.x, b.x)
    y_same = approx_eq(a.y, b.y)

    if x_same and y_same:
        raise InterpolationError(f"segment endpoints {a!r} and {b!r} are the same")
    if y_same:
        return Percent.new(interpolate(a.x, b.x, i.x))
    if x_same:
        return Percent.new(interpolate(a.y, b.y, i.y))

    # Measure along the longer axis
    eps = current_geometry().interpolation_epsilon
    if abs(b.x - a.x) >= abs(b.y - a.y):
        v = interpolate(a.x, b.x, i.x)
        on_line = approx_eq(a.y + v * (b.y - a.y), i.y, eps)
    else:
        v = interpolate(a.y, b.y, i.y)
        on_line = approx_eq(a.x + v * (b.x - a.x), i.x, eps)
    if not on_line:
        raise InterpolationError(f"{i!r} does not lie on the line through {a!r} and {b!r}")
    return Percent.new(v)


def extrapolate_2d(a: Point, b: Point, fraction: float | Percent) -> Point:
    """Point lying `fraction` of the way from `a` to `b`."""
    if isinstance(fraction, Percent):
        fraction = fraction.value
    return a + (b - a) * fraction
