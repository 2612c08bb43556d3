"""Opinion sets: per-shape accumulators for opinions.

An opinion set receives a stream of raw opinions about one shape (usually one
per edge comparison) and keeps a minimal description of them:

- Coverage: a new opinion already covered by an existing one is discarded,
  and existing opinions covered by the new one are dropped.
- Merging: adjacent sub-segment opinions on the same edge are joined.
- Canonicalization: sub-segments that cover a whole edge, and edges that
  cover a whole shape, are restated as the larger opinion.

Key classes:
- SegmentOpSet: Opinions about a segment, with cut-point derivation
- MultilineOpSet: Opinions about a multiline
- PolygonOpSet: Opinions about a polygon
"""

from typing import Any, Generic, TypeVar

from planecut.core.interpolate import interpolate_2d
from planecut.core.opinion import (
    MultilineEntireOp,
    MultilineOp,
    MultilineSegmentOp,
    MultilineSubsegmentOp,
    PolygonAreaSegmentOp,
    PolygonEdgeOp,
    PolygonEdgeSubsegmentOp,
    PolygonEntireOp,
    PolygonOp,
    SegmentEntireOp,
    SegmentOp,
    SegmentPointOp,
    SegmentSubsegmentOp,
)
from planecut.domain import Multiline, Percent, Point, Polygon, Segment

OpT = TypeVar("OpT", SegmentOp, MultilineOp, PolygonOp)
ShapeT = TypeVar("ShapeT", Segment, Multiline, Polygon)


def _covers_whole(candidate: Segment, whole: Segment) -> bool:
    return candidate == whole or candidate == whole.flip()


class OpinionSet(Generic[OpT, ShapeT]):
    """Common coverage bookkeeping for all opinion sets.

    Subclasses decide how a surviving opinion is inserted (`_insert`) and how
    the final collection is canonicalized (`_final_pass`).
    """

    def __init__(self, original: ShapeT) -> None:
        self.original = original
        self._ops: list[OpT] = []

    def __len__(self) -> int:
        return len(self._ops)

    def add(self, op: OpT) -> None:
        """Add an opinion, applying the coverage and merge rules.

        Args:
            op: Opinion about `self.original`
        """
        from planecut.core.overlaps import totally_covers

        new_shape = op.to_shape(self.original)
        for existing in self._ops:
            if totally_covers(existing.to_shape(self.original), new_shape):
                return
        self._ops = [
            existing
            for existing in self._ops
            if not totally_covers(new_shape, existing.to_shape(self.original))
        ]
        self._insert(op)

    def _insert(self, op: OpT) -> None:
        self._ops.append(op)

    def _final_pass(self) -> list[OpT]:
        return list(self._ops)

    def to_nonempty(self) -> list[OpT] | None:
        """Canonicalize, sort and de-duplicate the opinions.

        Returns:
            The opinions in a deterministic order, or None if there are none
        """
        ops = sorted(self._final_pass(), key=lambda o: o.sort_key())
        result: list[OpT] = []
        for op in ops:
            if not result or result[-1] != op:
                result.append(op)
        return result or None


class SegmentOpSet(OpinionSet[SegmentOp, Segment]):
    """Opinions about a single segment."""

    def _insert(self, op: SegmentOp) -> None:
        if isinstance(op, SegmentSubsegmentOp):
            for existing in self._ops:
                if not isinstance(existing, SegmentSubsegmentOp):
                    continue
                if _covers_whole(op.segment, existing.segment):
                    return
                merged = existing.segment.try_add(op.segment)
                if merged is not None:
                    self._ops.remove(existing)
                    self.add(SegmentSubsegmentOp(merged))
                    return
        self._ops.append(op)

    def _final_pass(self) -> list[SegmentOp]:
        return [
            SegmentEntireOp()
            if isinstance(op, SegmentSubsegmentOp) and _covers_whole(op.segment, self.original)
            else op
            for op in self._ops
        ]

    def to_cuts(self) -> list[tuple[Point, Percent]]:
        """Points along the original segment implied by the opinions so far.

        Always includes both endpoints; adds every point opinion and both ends
        of every sub-segment opinion. Sorted by position along the segment.

        Returns:
            (point, percent) pairs in order from `original.i` to `original.f`
        """
        cuts: list[tuple[Point, Percent]] = [
            (self.original.i, Percent.ZERO),
            (self.original.f, Percent.ONE),
        ]
        for op in self._ops:
            if isinstance(op, SegmentPointOp):
                cuts.append((op.point, op.percent))
            elif isinstance(op, SegmentSubsegmentOp):
                for pt in (op.segment.i, op.segment.f):
                    cuts.append((pt, interpolate_2d(self.original.i, self.original.f, pt)))

        cuts.sort(key=lambda cut: (cut[1].value, cut[0]))
        deduped: list[tuple[Point, Percent]] = []
        for cut in cuts:
            if not deduped or deduped[-1] != cut:
                deduped.append(cut)
        return deduped


class MultilineOpSet(OpinionSet[MultilineOp, Multiline]):
    """Opinions about a multiline."""

    def __init__(self, original: Multiline) -> None:
        super().__init__(original)
        self._segments = original.to_segments()

    def _insert(self, op: MultilineOp) -> None:
        if isinstance(op, MultilineSubsegmentOp):
            if _covers_whole(op.segment, self._segments[op.index]):
                self.add(MultilineSegmentOp(op.index))
                return
            for existing in self._ops:
                if not isinstance(existing, MultilineSubsegmentOp) or existing.index != op.index:
                    continue
                if _covers_whole(op.segment, existing.segment):
                    return
                merged = existing.segment.try_add(op.segment)
                if merged is not None:
                    self._ops.remove(existing)
                    self.add(MultilineSubsegmentOp(op.index, merged))
                    return
        self._ops.append(op)

    def _final_pass(self) -> list[MultilineOp]:
        whole = {op.index for op in self._ops if isinstance(op, MultilineSegmentOp)}
        if whole == set(range(len(self._segments))):
            return [MultilineEntireOp()]
        return list(self._ops)


class PolygonOpSet(OpinionSet[PolygonOp, Polygon]):
    """Opinions about a polygon."""

    def __init__(self, original: Polygon) -> None:
        super().__init__(original)
        self._edges = original.to_segments()

    def _insert(self, op: PolygonOp) -> None:
        if isinstance(op, PolygonEdgeSubsegmentOp):
            if _covers_whole(op.segment, self._edges[op.index]):
                self.add(PolygonEdgeOp(op.index))
                return
            for existing in self._ops:
                if (
                    not isinstance(existing, PolygonEdgeSubsegmentOp)
                    or existing.index != op.index
                ):
                    continue
                merged = existing.segment.try_add(op.segment)
                if merged is not None:
                    self._ops.remove(existing)
                    self.add(PolygonEdgeSubsegmentOp(op.index, merged))
                    return
        elif isinstance(op, PolygonAreaSegmentOp):
            for existing in self._ops:
                if not isinstance(existing, PolygonAreaSegmentOp):
                    continue
                merged = existing.segment.try_add(op.segment)
                if merged is not None:
                    self._ops.remove(existing)
                    self.add(PolygonAreaSegmentOp(merged))
                    return
        self._ops.append(op)

    def _final_pass(self) -> list[PolygonOp]:
        whole = {op.index for op in self._ops if isinstance(op, PolygonEdgeOp)}
        if whole == set(range(len(self._edges))):
            return [PolygonEntireOp()]
        return list(self._ops)


def describe(ops: list[Any] | None) -> str:
    """Compact one-line rendering of an opinion list, for logs."""
    if not ops:
        return "none"
    return ", ".join(type(op).__name__.removesuffix("Op") for op in ops)
