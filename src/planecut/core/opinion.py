"""Opinions: typed facts about how something touches a shape.

Each shape kind has its own closed family of opinion variants. An opinion
about a segment says where along it an overlap sits; an opinion about a
multiline or polygon also says which edge or vertex is involved.

Within a family, opinions sort by variant rank and then by their fields,
which keeps aggregated results deterministic.

Key types:
- SegmentOp: SegmentPointOp | SegmentSubsegmentOp | SegmentEntireOp
- MultilineOp: MultilinePointOp | MultilineSegmentPointOp |
  MultilineSubsegmentOp | MultilineSegmentOp | MultilineEntireOp
- PolygonOp: PolygonPointOp | PolygonEdgePointOp | PolygonEdgeSubsegmentOp |
  PolygonEdgeOp | PolygonAreaPointOp | PolygonAreaSegmentOp | PolygonEntireOp
"""

from dataclasses import astuple, dataclass
from typing import Any, ClassVar, assert_never

from planecut.domain import Multiline, Percent, Point, Polygon, Segment

Shape = Point | Segment | Multiline | Polygon


class _Ranked:
    """Mixin giving opinions a total order across variants of one family."""

    __slots__ = ()

    RANK: ClassVar[int]

    def sort_key(self) -> tuple[Any, ...]:
        return (self.RANK, *astuple(self))  # type: ignore[call-overload]


# Segment opinions


@dataclass(frozen=True, slots=True)
class SegmentPointOp(_Ranked):
    """The overlap is the single `point`, lying `percent` along the segment."""

    RANK: ClassVar[int] = 0

    point: Point
    percent: Percent

    def to_shape(self, original: Segment) -> Shape:
        return self.point


@dataclass(frozen=True, slots=True)
class SegmentSubsegmentOp(_Ranked):
    """The overlap is `segment`, a part of the segment pointing the same way."""

    RANK: ClassVar[int] = 1

    segment: Segment

    def to_shape(self, original: Segment) -> Shape:
        return self.segment


@dataclass(frozen=True, slots=True)
class SegmentEntireOp(_Ranked):
    """The whole segment overlaps."""

    RANK: ClassVar[int] = 2

    def to_shape(self, original: Segment) -> Shape:
        return original


SegmentOp = SegmentPointOp | SegmentSubsegmentOp | SegmentEntireOp


# Multiline opinions


@dataclass(frozen=True, slots=True)
class MultilinePointOp(_Ranked):
    """The overlap is exactly vertex `index` of the multiline."""

    RANK: ClassVar[int] = 0

    index: int
    point: Point

    def to_shape(self, original: Multiline) -> Shape:
        return self.point


@dataclass(frozen=True, slots=True)
class MultilineSegmentPointOp(_Ranked):
    """The overlap is a point strictly inside segment `index`."""

    RANK: ClassVar[int] = 1

    index: int
    point: Point
    percent: Percent

    def to_shape(self, original: Multiline) -> Shape:
        return self.point


@dataclass(frozen=True, slots=True)
class MultilineSubsegmentOp(_Ranked):
    """The overlap is part of segment `index`."""

    RANK: ClassVar[int] = 2

    index: int
    segment: Segment

    def to_shape(self, original: Multiline) -> Shape:
        return self.segment


@dataclass(frozen=True, slots=True)
class MultilineSegmentOp(_Ranked):
    """The overlap is all of segment `index`."""

    RANK: ClassVar[int] = 3

    index: int

    def to_shape(self, original: Multiline) -> Shape:
        return original.to_segments()[self.index]


@dataclass(frozen=True, slots=True)
class MultilineEntireOp(_Ranked):
    """The whole multiline overlaps."""

    RANK: ClassVar[int] = 4

    def to_shape(self, original: Multiline) -> Shape:
        return original


MultilineOp = (
    MultilinePointOp
    | MultilineSegmentPointOp
    | MultilineSubsegmentOp
    | MultilineSegmentOp
    | MultilineEntireOp
)


# Polygon opinions


@dataclass(frozen=True, slots=True)
class PolygonPointOp(_Ranked):
    """The overlap is exactly vertex `index` of the polygon."""

    RANK: ClassVar[int] = 0

    index: int
    point: Point

    def to_shape(self, original: Polygon) -> Shape:
        return self.point


@dataclass(frozen=True, slots=True)
class PolygonEdgePointOp(_Ranked):
    """The overlap is a point strictly inside edge `index`."""

    RANK: ClassVar[int] = 1

    index: int
    point: Point
    percent: Percent

    def to_shape(self, original: Polygon) -> Shape:
        return self.point


@dataclass(frozen=True, slots=True)
class PolygonEdgeSubsegmentOp(_Ranked):
    """The overlap is part of edge `index`."""

    RANK: ClassVar[int] = 2

    index: int
    segment: Segment

    def to_shape(self, original: Polygon) -> Shape:
        return self.segment


@dataclass(frozen=True, slots=True)
class PolygonEdgeOp(_Ranked):
    """The overlap is all of edge `index`."""

    RANK: ClassVar[int] = 3

    index: int

    def to_shape(self, original: Polygon) -> Shape:
        return original.to_segments()[self.index]


@dataclass(frozen=True, slots=True)
class PolygonAreaPointOp(_Ranked):
    """The overlap is a point in the polygon's interior."""

    RANK: ClassVar[int] = 4

    point: Point

    def to_shape(self, original: Polygon) -> Shape:
        return self.point


@dataclass(frozen=True, slots=True)
class PolygonAreaSegmentOp(_Ranked):
    """The overlap is a segment crossing the polygon's interior."""

    RANK: ClassVar[int] = 5

    segment: Segment

    def to_shape(self, original: Polygon) -> Shape:
        return self.segment


@dataclass(frozen=True, slots=True)
class PolygonEntireOp(_Ranked):
    """The whole polygon overlaps."""

    RANK: ClassVar[int] = 6

    def to_shape(self, original: Polygon) -> Shape:
        return original


PolygonOp = (
    PolygonPointOp
    | PolygonEdgePointOp
    | PolygonEdgeSubsegmentOp
    | PolygonEdgeOp
    | PolygonAreaPointOp
    | PolygonAreaSegmentOp
    | PolygonEntireOp
)


def multiline_op_from_segment_op(index: int, op: SegmentOp) -> MultilineOp:
    """Restate an opinion about segment `index` of a multiline as a multiline opinion.

    Points at either end of the segment become vertex opinions.
    """
    if isinstance(op, SegmentPointOp):
        if op.percent.is_zero:
            return MultilinePointOp(index, op.point)
        if op.percent.is_one:
            return MultilinePointOp(index + 1, op.point)
        return MultilineSegmentPointOp(index, op.point, op.percent)
    if isinstance(op, SegmentSubsegmentOp):
        return MultilineSubsegmentOp(index, op.segment)
    if isinstance(op, SegmentEntireOp):
        return MultilineSegmentOp(index)
    assert_never(op)


def polygon_op_from_segment_op(index: int, op: SegmentOp, vertex_count: int) -> PolygonOp:
    """Restate an opinion about edge `index` of a polygon as a polygon opinion.

    The end of the closing edge is vertex 0, so vertex indices wrap.
    """
    if isinstance(op, SegmentPointOp):
        if op.percent.is_zero:
            return PolygonPointOp(index, op.point)
        if op.percent.is_one:
            return PolygonPointOp((index + 1) % vertex_count, op.point)
        return PolygonEdgePointOp(index, op.point, op.percent)
    if isinstance(op, SegmentSubsegmentOp):
        return PolygonEdgeSubsegmentOp(index, op.segment)
    if isinstance(op, SegmentEntireOp):
        return PolygonEdgeOp(index)
    assert_never(op)
