"""Axis-aligned bounding boxes."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from planecut.domain.point import Point

if TYPE_CHECKING:
    from planecut.domain.polygon import Polygon


@dataclass(frozen=True, slots=True)
class Bounds:
    """Bounding box of a shape. The y axis points up: (0, 0) is bottom-left."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @classmethod
    def of(cls, points: Iterable[Point]) -> "Bounds":
        """Smallest box containing every point.

        Raises:
            ValueError: If no points are given
        """
        pts = list(points)
        if not pts:
            raise ValueError("Cannot bound an empty collection of points")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), max(xs), min(ys), max(ys))

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Point:
        return Point(self.x_min + self.width / 2.0, self.y_min + self.height / 2.0)

    @property
    def bottom_left(self) -> Point:
        return Point(self.x_min, self.y_min)

    @property
    def top_right(self) -> Point:
        return Point(self.x_max, self.y_max)

    def union(self, other: "Bounds") -> "Bounds":
        return Bounds(
            min(self.x_min, other.x_min),
            max(self.x_max, other.x_max),
            min(self.y_min, other.y_min),
            max(self.y_max, other.y_max),
        )

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside or on the box."""
        return self.x_min <= point.x <= self.x_max and self.y_min <= point.y <= self.y_max

    def to_polygon(self) -> "Polygon":
        from planecut.domain.polygon import Polygon

        return Polygon(
            [
                Point(self.x_min, self.y_min),
                Point(self.x_max, self.y_min),
                Point(self.x_max, self.y_max),
                Point(self.x_min, self.y_max),
            ]
        )
