"""Line segments and rays."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from planecut.domain.point import Point
from planecut.utils.fuzzy import approx_eq

if TYPE_CHECKING:
    from planecut.config.settings import CropMode
    from planecut.domain.polygon import Polygon


@dataclass(frozen=True, slots=True, order=True)
class Segment:
    """A directed line segment from `i` to `f`.

    Direction matters for percent-along and dot products, but a segment and
    its flip lie on the same geometric line.

    Attributes:
        i: Initial point
        f: Final point
    """

    i: Point
    f: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "i", Point.coerce(self.i))
        object.__setattr__(self, "f", Point.coerce(self.f))

    @property
    def slope(self) -> float:
        """Rise over run.

        Vertical segments have a signed infinite slope; zero-length segments
        have a NaN slope, which never compares equal to anything.
        """
        dx = self.f.x - self.i.x
        dy = self.f.y - self.i.y
        if dx == 0.0:
            if dy == 0.0:
                return math.nan
            return math.copysign(math.inf, dy)
        return dy / dx

    @property
    def ray_angle(self) -> float:
        """Angle in radians of the direction from `i` to `f`."""
        return self.i.angle_to(self.f)

    @property
    def length(self) -> float:
        return math.sqrt((self.f.x - self.i.x) ** 2 + (self.f.y - self.i.y) ** 2)

    @property
    def midpoint(self) -> Point:
        return self.i.avg(self.f)

    def vector(self) -> Point:
        """Direction vector `f - i`."""
        return self.f - self.i

    def flip(self) -> "Segment":
        return Segment(self.f, self.i)

    def dot(self, other: "Segment") -> float:
        """Dot product of the two direction vectors."""
        return self.vector().dot(other.vector())

    def cross_z(self, pt: Point) -> float:
        """Z component of `(f - i) x (pt - i)`; positive when pt is to the left."""
        d = self.vector()
        e = pt - self.i
        return d.x * e.y - d.y * e.x

    def perpendicular_rays(self) -> tuple["Ray", "Ray"]:
        """Two rays leaving the midpoint at right angles, pointing opposite ways."""
        ray = Ray(self.midpoint, self.ray_angle + math.pi / 2.0)
        return ray, ray.rotate(math.pi)

    def try_add(self, other: "Segment") -> "Segment | None":
        """Join two same-slope segments that chain tip to tail.

        Args:
            other: Segment to join with

        Returns:
            The combined segment, or None if they do not chain

        Examples:
            >>> Segment(Point(0, 0), Point(1, 0)).try_add(Segment(Point(1, 0), Point(3, 0)))
            Segment(i=Point(x=0.0, y=0.0), f=Point(x=3.0, y=0.0))
        """
        if not approx_eq(self.slope, other.slope):
            return None
        if self.f == other.i:
            return Segment(self.i, other.f)
        if other.f == self.i:
            return Segment(other.i, self.f)
        return None

    def translate(self, dx: float, dy: float) -> "Segment":
        return Segment(self.i.translate(dx, dy), self.f.translate(dx, dy))

    def scale(self, factor: float) -> "Segment":
        return Segment(self.i.scale(factor), self.f.scale(factor))

    def rotate(self, about: Point, by: float) -> "Segment":
        return Segment(self.i.rotate(about, by), self.f.rotate(about, by))

    def crop(self, frame: "Polygon", mode: "CropMode") -> list["Segment"]:
        """Crop this segment against a polygon frame.

        See `planecut.core.crop.crop_segment`.
        """
        from planecut.core.crop import crop_segment

        return crop_segment(self, frame, mode)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"i": self.i.to_dict(), "f": self.f.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary."""
        return cls(Point.from_dict(data["i"]), Point.from_dict(data["f"]))


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line leaving `origin` at `angle` radians (normalized modulo tau)."""

    origin: Point
    angle: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "angle", self.angle % math.tau)

    def rotate(self, by: float) -> "Ray":
        return Ray(self.origin, self.angle + by)

    def to_segment(self, length: float) -> Segment:
        """Segment starting at the origin and running `length` along the ray."""
        return Segment(self.origin, self.origin + Point.polar(length, self.angle))
