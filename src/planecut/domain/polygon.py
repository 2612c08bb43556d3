"""Closed polygons and point-location results.

This module defines:
- WindingDirection: Enum for curve orientation
- Outside, Inside, OnVertex, OnEdge: Where a point sits relative to a polygon
- Polygon: A closed cycle of points in canonical counter-clockwise order
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from planecut.domain.bounds import Bounds
from planecut.domain.point import Point
from planecut.domain.segment import Segment
from planecut.exceptions import ConstructionError
from planecut.utils.fuzzy import approx_zero

if TYPE_CHECKING:
    from planecut.config.settings import CropMode
    from planecut.domain.multiline import Multiline


class WindingDirection(Enum):
    """Polygon curve orientation (y axis pointing up)."""

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Outside:
    """The point is outside the polygon."""


@dataclass(frozen=True, slots=True)
class Inside:
    """The point is strictly inside the polygon."""


@dataclass(frozen=True, slots=True)
class OnVertex:
    """The point is exactly the polygon vertex at `index`."""

    index: int


@dataclass(frozen=True, slots=True)
class OnEdge:
    """The point lies on the edge starting at vertex `index`."""

    index: int


PointLocation = Outside | Inside | OnVertex | OnEdge


def curve_orientation(points: list[Point]) -> WindingDirection | None:
    """Orientation of a closed point cycle.

    Uses the edge sum `(x2 - x1) * (y2 + y1)`; a sum near zero means the
    points are colinear and have no orientation.

    Args:
        points: Closed cycle of points

    Returns:
        The winding direction, or None for a degenerate cycle
    """
    total = 0.0
    for a, b in zip(points, points[1:] + points[:1]):
        total += (b.x - a.x) * (b.y + a.y)
    if approx_zero(total):
        return None
    if total >= 0.0:
        return WindingDirection.CLOCKWISE
    return WindingDirection.COUNTER_CLOCKWISE


class Polygon:
    """A closed polygon.

    The last point implicitly connects back to the first. The constructor
    drops an explicit closing point and stores the cycle counter-clockwise,
    so two polygons over the same cycle compare equal regardless of the
    starting vertex or the direction they were given in.

    Attributes:
        points: Three or more vertices, counter-clockwise

    Example:
        >>> Polygon([(0, 0), (0, 1), (1, 1), (1, 0)]).points[1]
        Point(x=1.0, y=1.0)
    """

    __slots__ = ("points",)

    def __init__(self, points: Iterable[Point | tuple[float, float]]) -> None:
        pts = [Point.coerce(p) for p in points]
        if len(pts) >= 2 and pts[0] == pts[-1]:
            pts.pop()
        if len(pts) < 3:
            raise ConstructionError("polygon", f"needs at least 3 points, got {len(pts)}")
        if curve_orientation(pts) is WindingDirection.CLOCKWISE:
            pts.reverse()
        self.points: list[Point] = pts

    @classmethod
    def rect(cls, origin: Point | tuple[float, float], width: float, height: float) -> "Polygon":
        """Axis-aligned rectangle with `origin` as its bottom-left corner."""
        o = Point.coerce(origin)
        return cls([o, o + (width, 0.0), o + (width, height), o + (0.0, height)])

    def __repr__(self) -> str:
        return f"Polygon(points={self.points!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        n = len(self.points)
        if n != len(other.points):
            return False
        return any(self.points[k:] + self.points[:k] == other.points for k in range(n))

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @property
    def orientation(self) -> WindingDirection | None:
        return curve_orientation(self.points)

    @property
    def signed_area(self) -> float:
        """Shoelace area; positive for the canonical counter-clockwise order."""
        area = 0.0
        for a, b in zip(self.points, self.points[1:] + self.points[:1]):
            area += a.x * b.y - b.x * a.y
        return area / 2.0

    @property
    def average(self) -> Point:
        """Mean of the vertices."""
        n = len(self.points)
        return Point(sum(p.x for p in self.points) / n, sum(p.y for p in self.points) / n)

    def to_segments(self) -> list[Segment]:
        """Edges of the polygon, including the closing edge back to the start."""
        return [Segment(a, b) for a, b in zip(self.points, self.points[1:] + self.points[:1])]

    def bounds(self) -> Bounds:
        return Bounds.of(self.points)

    def contains(self, point: Point | tuple[float, float]) -> PointLocation:
        """Locate a point relative to this polygon.

        Vertex hits are checked first, then edge hits, and only then the
        winding number decides between inside and outside.

        Args:
            point: Point to locate

        Returns:
            OnVertex, OnEdge, Inside, or Outside
        """
        from planecut.core.opinion import (
            PolygonAreaPointOp,
            PolygonEdgePointOp,
            PolygonPointOp,
        )
        from planecut.core.overlaps import polygon_overlaps_point

        op = polygon_overlaps_point(self, Point.coerce(point))
        if op is None:
            return Outside()
        if isinstance(op, PolygonPointOp):
            return OnVertex(op.index)
        if isinstance(op, PolygonEdgePointOp):
            return OnEdge(op.index)
        if isinstance(op, PolygonAreaPointOp):
            return Inside()
        raise TypeError(f"Unexpected polygon opinion for a point: {op!r}")

    def totally_contains(self, other: "Polygon") -> bool:
        """True if no vertex of `other` is outside this polygon."""
        return all(not isinstance(self.contains(p), Outside) for p in other.points)

    def contains_not_at_all(self, other: "Polygon") -> bool:
        """True if every vertex of `other` is outside this polygon."""
        return all(isinstance(self.contains(p), Outside) for p in other.points)

    def intersects(self, other: "Point | Segment | Multiline | Polygon") -> bool:
        """Check whether another shape touches or crosses this polygon.

        For points, segments and multilines this includes lying in the
        interior; for polygons it compares boundaries.
        """
        from planecut.core.overlaps import overlaps

        return overlaps(self, other)

    def crop(self, frame: "Polygon", mode: "CropMode") -> list["Polygon"]:
        """Crop this polygon against a frame.

        See `planecut.core.crop.crop_polygon`.
        """
        from planecut.core.crop import crop_polygon

        return crop_polygon(self, frame, mode)

    def translate(self, dx: float, dy: float) -> "Polygon":
        return Polygon(p.translate(dx, dy) for p in self.points)

    def scale(self, factor: float) -> "Polygon":
        return Polygon(p.scale(factor) for p in self.points)

    def rotate(self, about: Point, by: float) -> "Polygon":
        return Polygon(p.rotate(about, by) for p in self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary."""
        return cls(Point.from_dict(p) for p in data["points"])
