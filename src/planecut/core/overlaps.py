"""Overlap classification between pairs of shapes.

Each `*_overlaps_*` function reports *how* two shapes touch, as opinions
about each input, or None when they do not touch at all:

              | point | segment | multiline | polygon
    ----------+-------+---------+-----------+--------
    point     |   x   |         |           |
    segment   |   x   |    x    |           |
    multiline |   x   |    x    |     x     |
    polygon   |   x   |    x    |     x     |   x

Sub-segment opinions always point the same way as the segment (or edge)
they describe.

On top of the classifier sit two predicates:
- totally_covers: Whether one shape covers all of another
- overlaps: Whether two shapes touch at all, in either argument order
"""

import logging

from planecut.config.context import current_geometry
from planecut.core.geometry import line_intersection, winding_sum
from planecut.core.interpolate import interpolate_2d
from planecut.core.opinion import (
    MultilineEntireOp,
    MultilineOp,
    PolygonAreaPointOp,
    PolygonAreaSegmentOp,
    PolygonEdgePointOp,
    PolygonEdgeSubsegmentOp,
    PolygonEntireOp,
    PolygonOp,
    PolygonPointOp,
    SegmentEntireOp,
    SegmentOp,
    SegmentPointOp,
    SegmentSubsegmentOp,
    Shape,
    multiline_op_from_segment_op,
    polygon_op_from_segment_op,
)
from planecut.core.opinion_set import MultilineOpSet, PolygonOpSet, SegmentOpSet
from planecut.domain import Multiline, Percent, Point, Polygon, Segment
from planecut.exceptions import OverlapCaseError
from planecut.utils.fuzzy import approx_eq, approx_zero

logger = logging.getLogger(__name__)


def _aligned(segment: Segment, along: Segment) -> Segment:
    """`segment`, flipped if needed to run the same way as `along`."""
    if segment.dot(along) < 0.0:
        return segment.flip()
    return segment


def point_overlaps_point(a: Point, b: Point) -> Point | None:
    """The shared point, if `a` and `b` are the same point."""
    if a == b:
        return a
    return None


def segment_overlaps_point(s: Segment, p: Point) -> SegmentPointOp | None:
    """Locate `p` along `s`.

    Endpoint hits are tagged exactly; a point strictly between is accepted
    when the detour through it is no longer than the segment itself.

    Args:
        s: Segment to test against
        p: Point to locate

    Returns:
        A point opinion about `s`, or None if `p` is not on it
    """
    if p == s.i:
        return SegmentPointOp(p, Percent.ZERO)
    if p == s.f:
        return SegmentPointOp(p, Percent.ONE)
    if approx_eq(s.length, Segment(s.i, p).length + Segment(p, s.f).length):
        return SegmentPointOp(p, interpolate_2d(s.i, s.f, p))
    return None


def segment_overlaps_segment(
    sa: Segment, sb: Segment
) -> tuple[SegmentOp, SegmentOp] | None:
    """Classify how two segments touch.

    `sa` and `sb` need not point the same way. Colinear segments are matched
    by which endpoints of each lie on the other; everything else falls back
    to a line-line intersection test.

    Args:
        sa: First segment
        sb: Second segment

    Returns:
        (opinion about sa, opinion about sb), or None

    Raises:
        OverlapCaseError: If colinear segments show an impossible endpoint layout
    """
    if approx_eq(sa.slope, sb.slope) or approx_eq(sa.slope, sb.flip().slope):
        a_i = segment_overlaps_point(sb, sa.i)
        a_f = segment_overlaps_point(sb, sa.f)
        b_i = segment_overlaps_point(sa, sb.i)
        b_f = segment_overlaps_point(sa, sb.f)
        hits = (a_i is not None, a_f is not None, b_i is not None, b_f is not None)

        isxn: Segment | None = None
        if hits == (False, False, False, False):
            pass
        elif all(hits):
            return SegmentEntireOp(), SegmentEntireOp()
        elif hits[0] and hits[1]:
            # sa lies within sb
            return SegmentEntireOp(), SegmentSubsegmentOp(_aligned(sa, sb))
        elif hits[2] and hits[3]:
            # sb lies within sa
            return SegmentSubsegmentOp(_aligned(sb, sa)), SegmentEntireOp()
        elif hits == (True, False, False, True):
            assert a_i is not None and b_f is not None
            if a_i.percent.is_one and b_f.percent.is_zero:
                # sb ends where sa starts
                return b_f, a_i
            isxn = Segment(sa.i, sb.f)
        elif hits == (False, True, True, False):
            assert a_f is not None and b_i is not None
            if a_f.percent.is_zero and b_i.percent.is_one:
                # sa ends where sb starts
                return b_i, a_f
            isxn = Segment(sb.i, sa.f)
        elif hits == (True, False, True, False):
            assert a_i is not None and b_i is not None
            if a_i.percent.is_zero and b_i.percent.is_zero:
                # shared start, pointing away from each other
                return b_i, a_i
            isxn = Segment(sa.i, sb.i)
        elif hits == (False, True, False, True):
            assert a_f is not None and b_f is not None
            if a_f.percent.is_one and b_f.percent.is_one:
                # shared end, pointing toward each other
                return b_f, a_f
            isxn = Segment(sa.f, sb.f)
        else:
            raise OverlapCaseError(sa, sb, f"endpoint hits {hits}")

        if isxn is not None:
            return (
                SegmentSubsegmentOp(_aligned(isxn, sa)),
                SegmentSubsegmentOp(_aligned(isxn, sb)),
            )

    found = line_intersection(sa, sb)
    if found is None:
        return None
    s, t, pt = found
    pct_a = Percent.new(t)
    pct_b = Percent.new(s)

    # Snap to an endpoint so both opinions share exactly the same point.
    if pct_a.is_endpoint:
        pt = sa.i if pct_a.is_zero else sa.f
    elif pct_b.is_endpoint:
        pt = sb.i if pct_b.is_zero else sb.f
    return SegmentPointOp(pt, pct_a), SegmentPointOp(pt, pct_b)


def multiline_overlaps_point(ml: Multiline, p: Point) -> list[MultilineOp] | None:
    """Opinions about `ml` from every segment that `p` lies on."""
    ml_set = MultilineOpSet(ml)
    for index, sg in enumerate(ml.to_segments()):
        op = segment_overlaps_point(sg, p)
        if op is not None:
            ml_set.add(multiline_op_from_segment_op(index, op))
    return ml_set.to_nonempty()


def multiline_overlaps_segment(
    ml: Multiline, sg: Segment
) -> tuple[list[MultilineOp], list[SegmentOp]] | None:
    """Classify a segment against every segment of a multiline."""
    ml_set = MultilineOpSet(ml)
    sg_set = SegmentOpSet(sg)
    for index, ml_sg in enumerate(ml.to_segments()):
        found = segment_overlaps_segment(ml_sg, sg)
        if found is not None:
            ml_op, sg_op = found
            ml_set.add(multiline_op_from_segment_op(index, ml_op))
            sg_set.add(sg_op)

    ml_ops = ml_set.to_nonempty()
    sg_ops = sg_set.to_nonempty()
    if ml_ops is None or sg_ops is None:
        return None
    return ml_ops, sg_ops


def multiline_overlaps_multiline(
    ml1: Multiline, ml2: Multiline
) -> tuple[list[MultilineOp], list[MultilineOp]] | None:
    """Classify every segment pairing between two multilines."""
    ml1_set = MultilineOpSet(ml1)
    ml2_set = MultilineOpSet(ml2)
    ml2_segments = ml2.to_segments()
    for idx1, sg1 in enumerate(ml1.to_segments()):
        for idx2, sg2 in enumerate(ml2_segments):
            found = segment_overlaps_segment(sg1, sg2)
            if found is not None:
                op1, op2 = found
                ml1_set.add(multiline_op_from_segment_op(idx1, op1))
                ml2_set.add(multiline_op_from_segment_op(idx2, op2))

    ops1 = ml1_set.to_nonempty()
    ops2 = ml2_set.to_nonempty()
    if ops1 is None or ops2 is None:
        return None
    return ops1, ops2


def polygon_overlaps_point(polygon: Polygon, point: Point) -> PolygonOp | None:
    """Locate a point relative to a polygon.

    Exact vertex hits are checked first, then edge hits; only then does the
    winding sum decide between the interior and the outside. Checking the
    boundary first keeps the winding sum away from its unstable case.

    Args:
        polygon: Polygon to test against
        point: Point to locate

    Returns:
        PolygonPointOp, PolygonEdgePointOp, PolygonAreaPointOp, or None
    """
    for index, vertex in enumerate(polygon.points):
        if vertex == point:
            return PolygonPointOp(index, point)

    for index, edge in enumerate(polygon.to_segments()):
        op = segment_overlaps_point(edge, point)
        if op is not None:
            return PolygonEdgePointOp(index, op.point, op.percent)

    theta = winding_sum(point, polygon.points)
    if approx_zero(theta, current_geometry().winding_epsilon):
        return None
    return PolygonAreaPointOp(point)


def polygon_overlaps_segment(
    polygon: Polygon, segment: Segment
) -> tuple[list[PolygonOp], list[SegmentOp]] | None:
    """Classify a segment against a polygon's boundary and interior.

    Boundary contacts come from comparing the segment with every edge. The
    segment is then cut at those contacts, and each piece whose midpoint lies
    inside (or on) the polygon is recorded as overlapping.

    Args:
        polygon: Polygon to test against
        segment: Segment to classify

    Returns:
        (opinions about the polygon, opinions about the segment), or None
    """
    pg_set = PolygonOpSet(polygon)
    sg_set = SegmentOpSet(segment)
    edges = polygon.to_segments()
    n = len(polygon.points)

    for index, edge in enumerate(edges):
        found = segment_overlaps_segment(edge, segment)
        if found is not None:
            edge_op, sg_op = found
            pg_set.add(polygon_op_from_segment_op(index, edge_op, n))
            sg_set.add(sg_op)

    cuts = sg_set.to_cuts()
    for (start, _), (end, _) in zip(cuts, cuts[1:]):
        piece = Segment(start, end)
        if polygon_overlaps_point(polygon, piece.midpoint) is None:
            continue

        sg_set.add(SegmentSubsegmentOp(piece))

        at_start = polygon_overlaps_point(polygon, piece.i)
        at_end = polygon_overlaps_point(polygon, piece.f)
        if (
            isinstance(at_start, PolygonEdgePointOp)
            and isinstance(at_end, PolygonEdgePointOp)
            and at_start.index == at_end.index
        ):
            pg_set.add(
                PolygonEdgeSubsegmentOp(at_start.index, _aligned(piece, edges[at_start.index]))
            )
        else:
            pg_set.add(PolygonAreaSegmentOp(piece))

    pg_ops = pg_set.to_nonempty()
    sg_ops = sg_set.to_nonempty()
    if pg_ops is None or sg_ops is None:
        return None
    return pg_ops, sg_ops


def polygon_overlaps_multiline(
    polygon: Polygon, multiline: Multiline
) -> tuple[list[PolygonOp], list[MultilineOp]] | None:
    """Classify each segment of a multiline against a polygon."""
    pg_set = PolygonOpSet(polygon)
    ml_set = MultilineOpSet(multiline)
    for index, ml_sg in enumerate(multiline.to_segments()):
        found = polygon_overlaps_segment(polygon, ml_sg)
        if found is None:
            continue
        pg_ops, sg_ops = found
        for pg_op in pg_ops:
            pg_set.add(pg_op)
        for sg_op in sg_ops:
            ml_set.add(multiline_op_from_segment_op(index, sg_op))

    pg_ops_out = pg_set.to_nonempty()
    ml_ops_out = ml_set.to_nonempty()
    if pg_ops_out is None or ml_ops_out is None:
        return None
    return pg_ops_out, ml_ops_out


def polygon_overlaps_polygon(
    pg1: Polygon, pg2: Polygon
) -> tuple[list[PolygonOp], list[PolygonOp]] | None:
    """Classify how the boundaries of two polygons touch.

    Equal polygons overlap entirely. Otherwise only boundary contacts are
    reported, so a polygon nested strictly inside another gives None.
    """
    if pg1 == pg2:
        return [PolygonEntireOp()], [PolygonEntireOp()]

    pg1_set = PolygonOpSet(pg1)
    pg2_set = PolygonOpSet(pg2)
    n1, n2 = len(pg1.points), len(pg2.points)
    edges2 = pg2.to_segments()
    for idx1, e1 in enumerate(pg1.to_segments()):
        for idx2, e2 in enumerate(edges2):
            found = segment_overlaps_segment(e1, e2)
            if found is not None:
                op1, op2 = found
                pg1_set.add(polygon_op_from_segment_op(idx1, op1, n1))
                pg2_set.add(polygon_op_from_segment_op(idx2, op2, n2))

    ops1 = pg1_set.to_nonempty()
    ops2 = pg2_set.to_nonempty()
    if ops1 is None or ops2 is None:
        return None
    return ops1, ops2


def totally_covers(a: Shape, b: Shape) -> bool:
    """Check whether shape `a` covers every part of shape `b`.

    A smaller kind of shape never covers a larger one (a point never covers a
    segment, a segment never covers a multiline or polygon, and a multiline
    never covers a polygon).

    Args:
        a: Covering shape
        b: Shape to be covered

    Returns:
        True if all of `b` lies on `a` (or, for polygons, in it)
    """
    if isinstance(a, Point):
        return isinstance(b, Point) and point_overlaps_point(a, b) is not None

    if isinstance(a, Segment):
        if isinstance(b, Point):
            return segment_overlaps_point(a, b) is not None
        if isinstance(b, Segment):
            found = segment_overlaps_segment(a, b)
            return found is not None and isinstance(found[1], SegmentEntireOp)
        return False

    if isinstance(a, Multiline):
        if isinstance(b, Point):
            return multiline_overlaps_point(a, b) is not None
        if isinstance(b, Segment):
            found_sg = multiline_overlaps_segment(a, b)
            return found_sg is not None and found_sg[1] == [SegmentEntireOp()]
        if isinstance(b, Multiline):
            found_ml = multiline_overlaps_multiline(a, b)
            return found_ml is not None and found_ml[1] == [MultilineEntireOp()]
        return False

    if isinstance(a, Polygon):
        if isinstance(b, Point):
            return polygon_overlaps_point(a, b) is not None
        if isinstance(b, Segment):
            found_pg = polygon_overlaps_segment(a, b)
            return found_pg is not None and found_pg[1] == [SegmentEntireOp()]
        if isinstance(b, Multiline):
            found_pm = polygon_overlaps_multiline(a, b)
            return found_pm is not None and found_pm[1] == [MultilineEntireOp()]
        if isinstance(b, Polygon):
            return a == b or all(totally_covers(a, edge) for edge in b.to_segments())

    raise TypeError(f"Cannot compare {type(a).__name__} with {type(b).__name__}")


_SHAPE_RANK: dict[type, int] = {Point: 0, Segment: 1, Multiline: 2, Polygon: 3}


def overlaps(a: Shape, b: Shape) -> bool:
    """Check whether two shapes touch at all, in either argument order.

    Polygons are compared by boundary with each other, but by interior and
    boundary with points, segments and multilines.
    """
    if type(a) not in _SHAPE_RANK or type(b) not in _SHAPE_RANK:
        raise TypeError(f"Cannot compare {type(a).__name__} with {type(b).__name__}")
    if _SHAPE_RANK[type(a)] < _SHAPE_RANK[type(b)]:
        a, b = b, a

    if isinstance(a, Point):
        assert isinstance(b, Point)
        return point_overlaps_point(a, b) is not None
    if isinstance(a, Segment):
        if isinstance(b, Point):
            return segment_overlaps_point(a, b) is not None
        assert isinstance(b, Segment)
        return segment_overlaps_segment(a, b) is not None
    if isinstance(a, Multiline):
        if isinstance(b, Point):
            return multiline_overlaps_point(a, b) is not None
        if isinstance(b, Segment):
            return multiline_overlaps_segment(a, b) is not None
        assert isinstance(b, Multiline)
        return multiline_overlaps_multiline(a, b) is not None

    assert isinstance(a, Polygon)
    if isinstance(b, Point):
        return polygon_overlaps_point(a, b) is not None
    if isinstance(b, Segment):
        return polygon_overlaps_segment(a, b) is not None
    if isinstance(b, Multiline):
        return polygon_overlaps_multiline(a, b) is not None
    assert isinstance(b, Polygon)
    return polygon_overlaps_polygon(a, b) is not None
