"""Open chains of segments."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from planecut.domain.bounds import Bounds
from planecut.domain.point import Point
from planecut.domain.segment import Segment
from planecut.exceptions import ConstructionError


@dataclass(init=False)
class Multiline:
    """An open chain of segments `(p0, p1), (p1, p2), ...`.

    Consecutive points may repeat, but the chain must not close on itself:
    a closed chain is a Polygon.

    Attributes:
        points: Two or more points, first and last distinct
    """

    points: list[Point]

    def __init__(self, points: Iterable[Point | tuple[float, float]]) -> None:
        pts = [Point.coerce(p) for p in points]
        if len(pts) < 2:
            raise ConstructionError("multiline", f"needs at least 2 points, got {len(pts)}")
        if pts[0] == pts[-1]:
            raise ConstructionError(
                "multiline", f"first and last point coincide at {pts[0]!r}; use a polygon"
            )
        self.points = pts

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def to_segments(self) -> list[Segment]:
        """Consecutive segments of the chain (not wrapping around)."""
        return [Segment(a, b) for a, b in zip(self.points, self.points[1:])]

    def bounds(self) -> Bounds:
        return Bounds.of(self.points)

    def translate(self, dx: float, dy: float) -> "Multiline":
        return Multiline(p.translate(dx, dy) for p in self.points)

    def scale(self, factor: float) -> "Multiline":
        return Multiline(p.scale(factor) for p in self.points)

    def rotate(self, about: Point, by: float) -> "Multiline":
        return Multiline(p.rotate(about, by) for p in self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Multiline":
        """Deserialize from dictionary."""
        return cls(Point.from_dict(p) for p in data["points"])
