"""Domain models for planecut.

This module contains the geometric value types the kernel reasons about.
All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Free of algorithmic logic beyond their own invariants; classification and
  cropping live in `planecut.core`

Key classes:
- Point: A 2D point with total ordering
- Percent: A tagged fraction along a segment
- Segment, Ray: Directed segments and half-lines
- Multiline: An open chain of segments
- Polygon: A closed, canonically oriented polygon
- Bounds: Axis-aligned bounding box
"""

from planecut.domain.bounds import Bounds
from planecut.domain.multiline import Multiline
from planecut.domain.percent import Percent
from planecut.domain.point import Point
from planecut.domain.polygon import (
    Inside,
    OnEdge,
    OnVertex,
    Outside,
    PointLocation,
    Polygon,
    WindingDirection,
    curve_orientation,
)
from planecut.domain.segment import Ray, Segment

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Percent",
    "Segment",
    "Ray",
    "Multiline",
    "Polygon",
    "Bounds",
    # Point location
    "Inside",
    "OnEdge",
    "OnVertex",
    "Outside",
    "PointLocation",
    "curve_orientation",
]
