"""2D point value type."""

import math
from dataclasses import dataclass
from typing import Any

from planecut.exceptions import ConstructionError


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts (the crop graph keys its
    adjacency on points). Ordering is total: by x, then by y. Equality is
    exact; approximate comparisons happen where derived values are compared,
    never on coordinates directly.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        x, y = float(self.x), float(self.y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ConstructionError("point", f"coordinates must be finite, got ({x}, {y})")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def polar(cls, r: float, theta: float) -> "Point":
        """Build a point from polar coordinates about the origin."""
        return cls(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def coerce(cls, value: "Point | tuple[float, float]") -> "Point":
        """Accept either a Point or an (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)

    def __add__(self, other: "Point | tuple[float, float]") -> "Point":
        o = Point.coerce(other)
        return Point(self.x + o.x, self.y + o.y)

    def __sub__(self, other: "Point | tuple[float, float]") -> "Point":
        o = Point.coerce(other)
        return Point(self.x - o.x, self.y - o.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Point":
        return Point(self.x / divisor, self.y / divisor)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def dot(self, other: "Point") -> float:
        """Dot product, treating both points as vectors from the origin."""
        return self.x * other.x + self.y * other.y

    def dist(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def avg(self, other: "Point") -> "Point":
        """Midpoint between this point and another."""
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)

    def angle_to(self, other: "Point") -> float:
        """Angle in radians of the ray from this point to another."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def translate(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def scale(self, factor: float) -> "Point":
        return self * factor

    def rotate(self, about: "Point", by: float) -> "Point":
        """Rotate counter-clockwise around a pivot.

        Args:
            about: Pivot point
            by: Angle in radians

        Returns:
            The rotated point
        """
        cos, sin = math.cos(by), math.sin(by)
        dx, dy = self.x - about.x, self.y - about.y
        return Point(cos * dx - sin * dy + about.x, sin * dx + cos * dy + about.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])
