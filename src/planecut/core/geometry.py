"""Low-level geometric calculations.

This module provides small mathematical utilities shared by the classifier
and the crop graph:
- Signed angle subtended at a point (winding-number building block)
- Winding sum of a point cycle around a test point
- Colinearity of a point list
- Line-line intersection parameters

All functions are pure, stateless, and designed for use in parallel processing.
"""

import math

from planecut.domain import Point, Segment
from planecut.utils.fuzzy import approx_eq, approx_zero


def abp(o: Point, i: Point, j: Point) -> float:
    """Signed angle at `o` from the ray `o->i` to the ray `o->j`.

    Angles within tolerance of zero snap to exactly zero.

    Args:
        o: Vertex of the angle
        i: Point on the first ray
        j: Point on the second ray

    Returns:
        Angle in radians in (-pi, pi]

    Examples:
        >>> abp(Point(0, 0), Point(1, 0), Point(0, 1))
        1.5707963267948966
        >>> abp(Point(0, 0), Point(0, 1), Point(1, 0))
        -1.5707963267948966
    """
    a = i - o
    b = j - o
    angle = math.atan2(a.x * b.y - a.y * b.x, a.x * b.x + a.y * b.y)
    if approx_zero(angle):
        return 0.0
    return angle


def winding_sum(point: Point, cycle: list[Point]) -> float:
    """Sum of the angles subtended at `point` by each edge of a closed cycle.

    The sum is close to zero for points outside the cycle and close to a
    nonzero multiple of tau for points inside it.
    """
    return sum(abp(point, a, b) for a, b in zip(cycle, cycle[1:] + cycle[:1]))


def is_colinear_3(p1: Point, p2: Point, p3: Point) -> bool:
    """Check whether `p3` lies on the line through `p1` and `p2`."""
    return approx_eq((p2.y - p1.y) * (p3.x - p2.x), (p3.y - p2.y) * (p2.x - p1.x))


def is_colinear_n(points: list[Point]) -> bool:
    """Check whether every point lies on the line through the first two.

    Lists of two points or fewer are never considered colinear.
    """
    if len(points) <= 2:
        return False
    return all(is_colinear_3(points[0], points[1], p) for p in points[2:])


def line_intersection(sa: Segment, sb: Segment) -> tuple[float, float, Point] | None:
    """Intersect two segments as parametric lines.

    Solves `sa.i + t * (sa.f - sa.i) == sb.i + s * (sb.f - sb.i)`.

    Args:
        sa: First segment
        sb: Second segment

    Returns:
        (s, t, point) if both parameters fall within [0, 1], otherwise None.
        Parallel lines (zero determinant) never intersect here; colinear
        overlaps are the classifier's job.
    """
    p0_x, p0_y = sa.i.x, sa.i.y
    p1_x, p1_y = sa.f.x, sa.f.y
    p2_x, p2_y = sb.i.x, sb.i.y
    p3_x, p3_y = sb.f.x, sb.f.y

    s1_x = p1_x - p0_x
    s1_y = p1_y - p0_y
    s2_x = p3_x - p2_x
    s2_y = p3_y - p2_y

    denom = -s2_x * s1_y + s1_x * s2_y
    if denom == 0.0:
        return None

    s = (-s1_y * (p0_x - p2_x) + s1_x * (p0_y - p2_y)) / denom
    t = (s2_x * (p0_y - p2_y) - s2_y * (p0_x - p2_x)) / denom

    if 0.0 <= s <= 1.0 and 0.0 <= t <= 1.0:
        return s, t, Point(p0_x + (t * s1_x), p0_y + (t * s1_y))
    return None
