"""Tests for overlap classification between shapes.

Points are laid out on a 5x5 grid:

              ^ (y)
              |
      a . b . c . d . e
              |
      f . g . h . i . j
              |
    <-k---l---m---n---o-> (x)
              |
      p . q . r . s . t
              |
      u . v . w . x . y
              |
              v
"""

import pytest

from planecut.core.opinion import (
    MultilineEntireOp,
    MultilinePointOp,
    MultilineSegmentOp,
    MultilineSegmentPointOp,
    MultilineSubsegmentOp,
    PolygonAreaPointOp,
    PolygonAreaSegmentOp,
    PolygonEdgeOp,
    PolygonEdgePointOp,
    PolygonEdgeSubsegmentOp,
    PolygonEntireOp,
    PolygonPointOp,
    SegmentEntireOp,
    SegmentPointOp,
    SegmentSubsegmentOp,
)
from planecut.core.overlaps import (
    multiline_overlaps_multiline,
    multiline_overlaps_point,
    multiline_overlaps_segment,
    overlaps,
    point_overlaps_point,
    polygon_overlaps_multiline,
    polygon_overlaps_point,
    polygon_overlaps_polygon,
    polygon_overlaps_segment,
    segment_overlaps_point,
    segment_overlaps_segment,
    totally_covers,
)
from planecut.domain import Multiline, Percent, Point, Polygon, Segment

A, B, C, D, E = Point(-2, 2), Point(-1, 2), Point(0, 2), Point(1, 2), Point(2, 2)
F, G, H, I, J = Point(-2, 1), Point(-1, 1), Point(0, 1), Point(1, 1), Point(2, 1)  # noqa: E741
K, L, M, N, O = Point(-2, 0), Point(-1, 0), Point(0, 0), Point(1, 0), Point(2, 0)  # noqa: E741
P, Q, R, S, T = Point(-2, -1), Point(-1, -1), Point(0, -1), Point(1, -1), Point(2, -1)
U, V, W, X, Y = Point(-2, -2), Point(-1, -2), Point(0, -2), Point(1, -2), Point(2, -2)

ZERO = Percent.ZERO
ONE = Percent.ONE
HALF = Percent(0.5)


@pytest.fixture
def square() -> Polygon:
    """Square from (-1, -1) to (1, 1), starting at its top-right corner.

    Edges: 0 = i->g, 1 = g->q, 2 = q->s, 3 = s->i.
    """
    return Polygon([I, G, Q, S])


class TestPointOverlaps:
    """Tests for point/point and segment/point classification."""

    def test_point_overlaps_point(self) -> None:
        assert point_overlaps_point(C, C) == C
        assert point_overlaps_point(D, Point(1, 2)) == D
        assert point_overlaps_point(D, H) is None
        assert point_overlaps_point(A, B) is None

    def test_segment_overlaps_point_at_ends(self) -> None:
        """Test that endpoint hits carry the exact endpoint tags."""
        assert segment_overlaps_point(Segment(C, D), C) == SegmentPointOp(C, ZERO)
        assert segment_overlaps_point(Segment(C, D), D) == SegmentPointOp(D, ONE)
        assert segment_overlaps_point(Segment(C, I), C) == SegmentPointOp(C, ZERO)
        assert segment_overlaps_point(Segment(C, I), I) == SegmentPointOp(I, ONE)

    def test_segment_overlaps_point_halfway(self) -> None:
        assert segment_overlaps_point(Segment(C, E), D) == SegmentPointOp(D, HALF)
        assert segment_overlaps_point(Segment(C, O), I) == SegmentPointOp(I, HALF)
        assert segment_overlaps_point(Segment(C, W), M) == SegmentPointOp(M, HALF)

    def test_segment_misses_point(self) -> None:
        assert segment_overlaps_point(Segment(C, E), H) is None
        assert segment_overlaps_point(Segment(C, D), E) is None


class TestSegmentOverlapsSegment:
    """Tests for segment/segment classification.

    Every case is also checked with the arguments swapped.
    """

    def check(self, a: Segment, b: Segment, expected: tuple) -> None:
        assert segment_overlaps_segment(a, b) == expected
        assert segment_overlaps_segment(b, a) == (expected[1], expected[0])

    def test_same(self) -> None:
        entire = (SegmentEntireOp(), SegmentEntireOp())
        self.check(Segment(C, D), Segment(C, D), entire)
        self.check(Segment(C, M), Segment(C, M), entire)

    def test_same_reversed(self) -> None:
        entire = (SegmentEntireOp(), SegmentEntireOp())
        self.check(Segment(C, M), Segment(M, C), entire)
        self.check(Segment(Y, M), Segment(M, Y), entire)

    def test_total_collision(self) -> None:
        self.check(
            Segment(B, E),
            Segment(C, D),
            (SegmentSubsegmentOp(Segment(C, D)), SegmentEntireOp()),
        )

    def test_total_collision_flipped_is_aligned(self) -> None:
        """Test that a sub-segment opinion points the same way as its segment."""
        self.check(
            Segment(B, E),
            Segment(D, C),
            (SegmentSubsegmentOp(Segment(C, D)), SegmentEntireOp()),
        )

    def test_partial_collision(self) -> None:
        self.check(
            Segment(B, D),
            Segment(C, E),
            (SegmentSubsegmentOp(Segment(C, D)), SegmentSubsegmentOp(Segment(C, D))),
        )

    def test_partial_collision_flipped(self) -> None:
        self.check(
            Segment(B, D),
            Segment(E, C),
            (SegmentSubsegmentOp(Segment(C, D)), SegmentSubsegmentOp(Segment(D, C))),
        )

    def test_colinear_touching_at_one_point(self) -> None:
        """Test colinear segments sharing only an endpoint, in every direction."""
        self.check(
            Segment(A, C), Segment(C, E), (SegmentPointOp(C, ONE), SegmentPointOp(C, ZERO))
        )
        self.check(
            Segment(A, C), Segment(E, C), (SegmentPointOp(C, ONE), SegmentPointOp(C, ONE))
        )
        self.check(
            Segment(C, A), Segment(E, C), (SegmentPointOp(C, ZERO), SegmentPointOp(C, ONE))
        )
        self.check(
            Segment(C, A), Segment(C, E), (SegmentPointOp(C, ZERO), SegmentPointOp(C, ZERO))
        )

    def test_subsegments(self) -> None:
        self.check(
            Segment(A, E), Segment(A, C), (SegmentSubsegmentOp(Segment(A, C)), SegmentEntireOp())
        )
        self.check(
            Segment(A, E), Segment(B, D), (SegmentSubsegmentOp(Segment(B, D)), SegmentEntireOp())
        )
        self.check(
            Segment(A, E), Segment(C, E), (SegmentSubsegmentOp(Segment(C, E)), SegmentEntireOp())
        )

    def test_crosshairs(self) -> None:
        expected = (SegmentPointOp(I, HALF), SegmentPointOp(I, HALF))
        self.check(Segment(C, O), Segment(E, M), expected)
        self.check(Segment(O, C), Segment(M, E), expected)
        self.check(Segment(C, O), Segment(M, E), expected)
        self.check(Segment(O, C), Segment(E, M), expected)

    def test_corner_touch(self) -> None:
        """Test perpendicular segments meeting at a shared endpoint."""
        self.check(Segment(M, N), Segment(N, I), (SegmentPointOp(N, ONE), SegmentPointOp(N, ZERO)))

    def test_t_junction(self) -> None:
        self.check(Segment(K, O), Segment(M, C), (SegmentPointOp(M, HALF), SegmentPointOp(M, ZERO)))

    def test_parallel_apart(self) -> None:
        assert segment_overlaps_segment(Segment(A, E), Segment(F, J)) is None
        assert segment_overlaps_segment(Segment(C, M), Segment(D, N)) is None

    def test_colinear_apart(self) -> None:
        assert segment_overlaps_segment(Segment(A, B), Segment(D, E)) is None

    def test_crossing_lines_out_of_range(self) -> None:
        assert segment_overlaps_segment(Segment(A, B), Segment(M, E)) is None

    def test_crossing_a_nearly_vertical_segment(self) -> None:
        """Test crossings where one segment leans only a hair off vertical."""
        horizontal = Segment((-1, 0.5), (1, 0.5))
        for k in range(1, 40):
            steep = Segment((0, 0), (k * 5e-13, 1))
            found = segment_overlaps_segment(horizontal, steep)
            assert found is not None, k
            op_a, op_b = found
            assert isinstance(op_a, SegmentPointOp) and isinstance(op_b, SegmentPointOp)
            assert op_a.point == op_b.point
            assert op_a.percent.value == pytest.approx(0.5)
            assert op_b.percent.value == pytest.approx(0.5)


class TestMultilineOverlaps:
    """Tests for multiline classification."""

    @pytest.fixture
    def zigzag(self) -> Multiline:
        return Multiline([A, C, E, O, Y])

    def test_point_at_vertices(self, zigzag: Multiline) -> None:
        assert multiline_overlaps_point(zigzag, A) == [MultilinePointOp(0, A)]
        assert multiline_overlaps_point(zigzag, E) == [MultilinePointOp(2, E)]
        assert multiline_overlaps_point(zigzag, Y) == [MultilinePointOp(4, Y)]

    def test_point_along_segments(self, zigzag: Multiline) -> None:
        assert multiline_overlaps_point(zigzag, B) == [MultilineSegmentPointOp(0, B, HALF)]
        assert multiline_overlaps_point(zigzag, D) == [MultilineSegmentPointOp(1, D, HALF)]
        assert multiline_overlaps_point(zigzag, J) == [MultilineSegmentPointOp(2, J, HALF)]
        assert multiline_overlaps_point(zigzag, T) == [MultilineSegmentPointOp(3, T, HALF)]

    def test_point_unrelated(self, zigzag: Multiline) -> None:
        assert multiline_overlaps_point(zigzag, M) is None

    def test_segment_none(self) -> None:
        assert multiline_overlaps_segment(Multiline([C, E, O]), Segment(M, N)) is None
        assert multiline_overlaps_segment(Multiline([C, E, J]), Segment(M, N)) is None
        assert multiline_overlaps_segment(Multiline([C, E, O]), Segment(H, N)) is None
        assert multiline_overlaps_segment(Multiline([C, I, O]), Segment(D, J)) is None

    def test_segment_at_vertex(self) -> None:
        assert multiline_overlaps_segment(Multiline([C, E, O]), Segment(C, M)) == (
            [MultilinePointOp(0, C)],
            [SegmentPointOp(C, ZERO)],
        )
        assert multiline_overlaps_segment(Multiline([E, O, M]), Segment(C, E)) == (
            [MultilinePointOp(0, E)],
            [SegmentPointOp(E, ONE)],
        )
        assert multiline_overlaps_segment(Multiline([D, I, N]), Segment(C, E)) == (
            [MultilinePointOp(0, D)],
            [SegmentPointOp(D, HALF)],
        )

    def test_segment_through_middle_vertex(self) -> None:
        """Test that a hit on a shared vertex is reported once."""
        assert multiline_overlaps_segment(Multiline([D, I, N]), Segment(H, J)) == (
            [MultilinePointOp(1, I)],
            [SegmentPointOp(I, HALF)],
        )
        assert multiline_overlaps_segment(Multiline([D, I, N]), Segment(M, N)) == (
            [MultilinePointOp(2, N)],
            [SegmentPointOp(N, ONE)],
        )

    def test_segment_bookends(self) -> None:
        assert multiline_overlaps_segment(Multiline([C, E, O]), Segment(C, O)) == (
            [MultilinePointOp(0, C), MultilinePointOp(2, O)],
            [SegmentPointOp(C, ZERO), SegmentPointOp(O, ONE)],
        )
        assert multiline_overlaps_segment(Multiline([C, E, O]), Segment(D, J)) == (
            [MultilineSegmentPointOp(0, D, HALF), MultilineSegmentPointOp(1, J, HALF)],
            [SegmentPointOp(D, ZERO), SegmentPointOp(J, ONE)],
        )

    def test_segment_partial_collision(self) -> None:
        ml = Multiline([C, D, E])
        assert multiline_overlaps_segment(ml, Segment(C, D)) == (
            [MultilineSegmentOp(0)],
            [SegmentEntireOp()],
        )
        assert multiline_overlaps_segment(ml, Segment(D, C)) == (
            [MultilineSegmentOp(0)],
            [SegmentEntireOp()],
        )
        assert multiline_overlaps_segment(ml, Segment(E, D)) == (
            [MultilineSegmentOp(1)],
            [SegmentEntireOp()],
        )

    def test_segment_total_collision(self) -> None:
        ml = Multiline([C, D, E])
        expected = ([MultilineEntireOp()], [SegmentEntireOp()])
        assert multiline_overlaps_segment(ml, Segment(C, E)) == expected
        assert multiline_overlaps_segment(ml, Segment(E, C)) == expected

    def test_segment_half_shifted(self) -> None:
        """Test a segment straddling a vertex, in both directions."""
        ml = Multiline([C, D, E])
        expected = (
            [
                MultilineSubsegmentOp(0, Segment(Point(0.5, 2), D)),
                MultilineSubsegmentOp(1, Segment(D, Point(1.5, 2))),
            ],
            [SegmentEntireOp()],
        )
        assert multiline_overlaps_segment(ml, Segment(Point(0.5, 2), Point(1.5, 2))) == expected
        assert multiline_overlaps_segment(ml, Segment(Point(1.5, 2), Point(0.5, 2))) == expected

    def test_segment_crossing_inside_a_segment(self) -> None:
        assert multiline_overlaps_segment(Multiline([H, J, O]), Segment(D, N)) == (
            [MultilineSegmentPointOp(0, I, HALF)],
            [SegmentPointOp(I, HALF)],
        )
        assert multiline_overlaps_segment(Multiline([M, H, J]), Segment(I, N)) == (
            [MultilineSegmentPointOp(1, I, HALF)],
            [SegmentPointOp(I, ZERO)],
        )

    def test_multiline_none(self) -> None:
        assert multiline_overlaps_multiline(Multiline([C, D, E]), Multiline([H, I, J])) is None
        assert multiline_overlaps_multiline(Multiline([C, I, O]), Multiline([D, J])) is None

    def test_multiline_at_points(self) -> None:
        assert multiline_overlaps_multiline(Multiline([C, D, E]), Multiline([M, H, C])) == (
            [MultilinePointOp(0, C)],
            [MultilinePointOp(2, C)],
        )
        assert multiline_overlaps_multiline(Multiline([C, I, O]), Multiline([M, I, E])) == (
            [MultilinePointOp(1, I)],
            [MultilinePointOp(1, I)],
        )

    def test_multiline_crosshairs(self) -> None:
        assert multiline_overlaps_multiline(Multiline([C, O]), Multiline([E, M])) == (
            [MultilineSegmentPointOp(0, I, HALF)],
            [MultilineSegmentPointOp(0, I, HALF)],
        )

    def test_multiline_shared_segments(self) -> None:
        assert multiline_overlaps_multiline(Multiline([C, D, E]), Multiline([D, E, J])) == (
            [MultilineSegmentOp(1)],
            [MultilineSegmentOp(0)],
        )
        assert multiline_overlaps_multiline(
            Multiline([C, D, E, J, O]), Multiline([C, D, I, J, O])
        ) == (
            [MultilineSegmentOp(0), MultilineSegmentOp(3)],
            [MultilineSegmentOp(0), MultilineSegmentOp(3)],
        )
        assert multiline_overlaps_multiline(
            Multiline([C, D, E, J, O]), Multiline([C, D, I, J])
        ) == (
            [MultilinePointOp(3, J), MultilineSegmentOp(0)],
            [MultilinePointOp(3, J), MultilineSegmentOp(0)],
        )

    def test_multiline_entire(self) -> None:
        assert multiline_overlaps_multiline(Multiline([C, D, E]), Multiline([E, D, C])) == (
            [MultilineEntireOp()],
            [MultilineEntireOp()],
        )
        assert multiline_overlaps_multiline(Multiline([A, B, C]), Multiline([A, C, E])) == (
            [MultilineEntireOp()],
            [MultilineSegmentOp(0)],
        )


class TestPolygonOverlapsPoint:
    """Tests for polygon/point classification."""

    def test_outside(self) -> None:
        diamond = Polygon([D, H, N, J])
        assert polygon_overlaps_point(diamond, C) is None
        assert polygon_overlaps_point(diamond, E) is None

    def test_inside(self) -> None:
        assert polygon_overlaps_point(Polygon([D, H, N, J]), I) == PolygonAreaPointOp(I)

    def test_vertices(self) -> None:
        diamond = Polygon([D, H, N, J])
        assert polygon_overlaps_point(diamond, D) == PolygonPointOp(0, D)
        assert polygon_overlaps_point(diamond, H) == PolygonPointOp(1, H)
        assert polygon_overlaps_point(diamond, N) == PolygonPointOp(2, N)
        assert polygon_overlaps_point(diamond, J) == PolygonPointOp(3, J)

    def test_edges(self) -> None:
        pg = Polygon([C, M, O, E])
        assert polygon_overlaps_point(pg, H) == PolygonEdgePointOp(0, H, HALF)
        assert polygon_overlaps_point(pg, N) == PolygonEdgePointOp(1, N, HALF)
        assert polygon_overlaps_point(pg, J) == PolygonEdgePointOp(2, J, HALF)
        assert polygon_overlaps_point(pg, D) == PolygonEdgePointOp(3, D, HALF)


class TestPolygonOverlapsSegment:
    """Tests for polygon/segment classification."""

    def test_misses(self) -> None:
        pg = Polygon([G, Q, S, I])
        for sg in (Segment(A, E), Segment(E, A), Segment(B, F), Segment(T, X), Segment(O, J)):
            assert polygon_overlaps_segment(pg, sg) is None

    def test_passes_through_a_vertex(self) -> None:
        pg = Polygon([G, Q, S, I])
        expected = ([PolygonPointOp(0, G)], [SegmentPointOp(G, HALF)])
        assert polygon_overlaps_segment(pg, Segment(C, K)) == expected
        assert polygon_overlaps_segment(pg, Segment(K, C)) == (
            [PolygonPointOp(0, G)],
            [SegmentPointOp(G, HALF)],
        )

    def test_passes_through_two_vertices_of_a_notch(self) -> None:
        pg = Polygon([I, M, G, K, O])
        assert polygon_overlaps_segment(pg, Segment(J, F)) == (
            [PolygonPointOp(0, I), PolygonPointOp(2, G)],
            [SegmentPointOp(G, Percent(0.75)), SegmentPointOp(I, Percent(0.25))],
        )

    def test_runs_along_two_edges(self) -> None:
        pg = Polygon([T, N, M, H, B, F, X])
        assert polygon_overlaps_segment(pg, Segment(T, B)) == (
            [PolygonEdgeOp(0), PolygonEdgeOp(3)],
            [SegmentSubsegmentOp(Segment(H, B)), SegmentSubsegmentOp(Segment(T, N))],
        )

    def test_runs_along_an_edge(self) -> None:
        pg = Polygon([I, G, K, O])
        assert polygon_overlaps_segment(pg, Segment(F, J)) == (
            [PolygonEdgeOp(0)],
            [SegmentSubsegmentOp(Segment(G, I))],
        )
        assert polygon_overlaps_segment(pg, Segment(I, G)) == (
            [PolygonEdgeOp(0)],
            [SegmentEntireOp()],
        )

    def test_ends_at_a_vertex(self) -> None:
        pg = Polygon([G, Q, S, I])
        for start in (A, B, F):
            assert polygon_overlaps_segment(pg, Segment(start, G)) == (
                [PolygonPointOp(0, G)],
                [SegmentPointOp(G, ONE)],
            )
        for start in (U, P, V):
            assert polygon_overlaps_segment(pg, Segment(start, Q)) == (
                [PolygonPointOp(1, Q)],
                [SegmentPointOp(Q, ONE)],
            )

    def test_ends_on_an_edge(self, square: Polygon) -> None:
        for start in (C, B, D):
            assert polygon_overlaps_segment(square, Segment(start, H)) == (
                [PolygonEdgePointOp(0, H, HALF)],
                [SegmentPointOp(H, ONE)],
            )

    def test_ends_inside(self, square: Polygon) -> None:
        assert polygon_overlaps_segment(square, Segment(C, M)) == (
            [PolygonAreaSegmentOp(Segment(H, M))],
            [SegmentSubsegmentOp(Segment(H, M))],
        )
        assert polygon_overlaps_segment(square, Segment(E, M)) == (
            [PolygonAreaSegmentOp(Segment(I, M))],
            [SegmentSubsegmentOp(Segment(I, M))],
        )

    def test_starts_at_a_vertex(self, square: Polygon) -> None:
        assert polygon_overlaps_segment(square, Segment(I, J)) == (
            [PolygonPointOp(0, I)],
            [SegmentPointOp(I, ZERO)],
        )
        assert polygon_overlaps_segment(square, Segment(I, U)) == (
            [PolygonAreaSegmentOp(Segment(I, Q))],
            [SegmentSubsegmentOp(Segment(I, Q))],
        )
        assert polygon_overlaps_segment(square, Segment(I, G)) == (
            [PolygonEdgeOp(0)],
            [SegmentEntireOp()],
        )
        assert polygon_overlaps_segment(square, Segment(I, H)) == (
            [PolygonEdgeSubsegmentOp(0, Segment(I, H))],
            [SegmentEntireOp()],
        )
        assert polygon_overlaps_segment(square, Segment(I, M)) == (
            [PolygonAreaSegmentOp(Segment(I, M))],
            [SegmentEntireOp()],
        )

    def test_starts_on_an_edge(self, square: Polygon) -> None:
        assert polygon_overlaps_segment(square, Segment(N, O)) == (
            [PolygonEdgePointOp(3, N, HALF)],
            [SegmentPointOp(N, ZERO)],
        )
        assert polygon_overlaps_segment(square, Segment(N, I)) == (
            [PolygonEdgeSubsegmentOp(3, Segment(N, I))],
            [SegmentEntireOp()],
        )
        assert polygon_overlaps_segment(square, Segment(N, H)) == (
            [PolygonAreaSegmentOp(Segment(N, H))],
            [SegmentEntireOp()],
        )
        assert polygon_overlaps_segment(square, Segment(N, M)) == (
            [PolygonAreaSegmentOp(Segment(N, M))],
            [SegmentEntireOp()],
        )

    def test_starts_inside(self, square: Polygon) -> None:
        assert polygon_overlaps_segment(square, Segment(M, O)) == (
            [PolygonAreaSegmentOp(Segment(M, N))],
            [SegmentSubsegmentOp(Segment(M, N))],
        )
        assert polygon_overlaps_segment(square, Segment(M, I)) == (
            [PolygonAreaSegmentOp(Segment(M, I))],
            [SegmentEntireOp()],
        )
        assert polygon_overlaps_segment(square, Segment(M, N)) == (
            [PolygonAreaSegmentOp(Segment(M, N))],
            [SegmentEntireOp()],
        )

    def test_entirely_inside(self) -> None:
        assert polygon_overlaps_segment(Polygon([A, U, Y, E]), Segment(G, I)) == (
            [PolygonAreaSegmentOp(Segment(G, I))],
            [SegmentEntireOp()],
        )


class TestPolygonOverlapsMultiline:
    """Tests for polygon/multiline classification."""

    def test_no_contact(self, square: Polygon) -> None:
        assert polygon_overlaps_multiline(square, Multiline([A, C, E])) is None

    def test_along_an_edge(self, square: Polygon) -> None:
        assert polygon_overlaps_multiline(square, Multiline([A, F, J])) == (
            [PolygonEdgeOp(0)],
            [MultilineSubsegmentOp(1, Segment(G, I))],
        )

    def test_through_a_vertex(self, square: Polygon) -> None:
        assert polygon_overlaps_multiline(square, Multiline([A, C, K])) == (
            [PolygonPointOp(1, G)],
            [MultilineSegmentPointOp(1, G, HALF)],
        )

    def test_through_the_interior(self, square: Polygon) -> None:
        assert polygon_overlaps_multiline(square, Multiline([E, A, Y])) == (
            [PolygonAreaSegmentOp(Segment(G, S))],
            [MultilineSubsegmentOp(1, Segment(G, S))],
        )

    def test_ends_at_a_vertex(self, square: Polygon) -> None:
        assert polygon_overlaps_multiline(square, Multiline([A, C, I])) == (
            [PolygonPointOp(0, I)],
            [MultilinePointOp(2, I)],
        )

    def test_ends_on_an_edge(self, square: Polygon) -> None:
        """Test that each opinion's sub-segment follows its own shape's direction."""
        assert polygon_overlaps_multiline(square, Multiline([A, F, H])) == (
            [PolygonEdgeSubsegmentOp(0, Segment(H, G))],
            [MultilineSubsegmentOp(1, Segment(G, H))],
        )

    def test_pivots_on_a_vertex(self, square: Polygon) -> None:
        assert polygon_overlaps_multiline(square, Multiline([B, G, F])) == (
            [PolygonPointOp(1, G)],
            [MultilinePointOp(1, G)],
        )
        assert polygon_overlaps_multiline(square, Multiline([B, G, I])) == (
            [PolygonEdgeOp(0)],
            [MultilineSegmentOp(1)],
        )
        assert polygon_overlaps_multiline(square, Multiline([B, G, H])) == (
            [PolygonEdgeSubsegmentOp(0, Segment(H, G))],
            [MultilineSegmentOp(1)],
        )
        assert polygon_overlaps_multiline(square, Multiline([B, G, S])) == (
            [PolygonAreaSegmentOp(Segment(G, S))],
            [MultilineSegmentOp(1)],
        )

    def test_pivots_on_an_edge(self, square: Polygon) -> None:
        assert polygon_overlaps_multiline(square, Multiline([B, H, D])) == (
            [PolygonEdgePointOp(0, H, HALF)],
            [MultilinePointOp(1, H)],
        )
        assert polygon_overlaps_multiline(square, Multiline([B, H, P])) == (
            [PolygonAreaSegmentOp(Segment(H, L))],
            [MultilineSubsegmentOp(1, Segment(H, L))],
        )
        assert polygon_overlaps_multiline(square, Multiline([B, H, I])) == (
            [PolygonEdgeSubsegmentOp(0, Segment(I, H))],
            [MultilineSegmentOp(1)],
        )


class TestPolygonOverlapsPolygon:
    """Tests for polygon/polygon classification."""

    def test_no_overlap(self) -> None:
        assert polygon_overlaps_polygon(Polygon([B, A, F, G]), Polygon([D, C, H, I])) is None

    def test_entire_overlap(self) -> None:
        assert polygon_overlaps_polygon(Polygon([B, A, F, G]), Polygon([A, F, G, B])) == (
            [PolygonEntireOp()],
            [PolygonEntireOp()],
        )

    def test_shared_edge(self) -> None:
        left = Polygon.rect((0, 0), 1, 1)
        right = Polygon.rect((1, 0), 1, 1)
        assert polygon_overlaps_polygon(left, right) == ([PolygonEdgeOp(1)], [PolygonEdgeOp(3)])

    def test_nested_has_no_boundary_contact(self) -> None:
        assert polygon_overlaps_polygon(Polygon([A, U, Y, E]), Polygon([G, Q, S, I])) is None


class TestPredicates:
    """Tests for totally_covers and overlaps."""

    def test_point_covers_only_points(self) -> None:
        assert totally_covers(C, C)
        assert not totally_covers(C, D)
        assert not totally_covers(C, Segment(C, D))

    def test_segment_covers(self) -> None:
        assert totally_covers(Segment(A, E), C)
        assert totally_covers(Segment(A, E), Segment(B, D))
        assert totally_covers(Segment(A, E), Segment(D, B))
        assert not totally_covers(Segment(B, D), Segment(A, E))
        assert not totally_covers(Segment(A, E), Multiline([A, C, E]))

    def test_multiline_covers(self) -> None:
        ml = Multiline([A, C, E])
        assert totally_covers(ml, Segment(B, D))
        assert totally_covers(ml, Multiline([B, C, D]))
        assert not totally_covers(ml, Segment(B, I))

    def test_polygon_covers(self, square: Polygon) -> None:
        big = Polygon([A, U, Y, E])
        assert totally_covers(big, M)
        assert totally_covers(big, Segment(G, I))
        assert totally_covers(big, Multiline([G, M, I]))
        assert totally_covers(big, square)
        assert totally_covers(square, square)
        assert not totally_covers(square, big)
        assert not totally_covers(square, Segment(M, O))

    def test_overlaps_is_symmetric(self, square: Polygon) -> None:
        pairs = [
            (C, C),
            (Segment(C, M), H),
            (Segment(C, O), Segment(E, M)),
            (Multiline([C, E, O]), Segment(C, M)),
            (Multiline([C, O]), Multiline([E, M])),
            (square, M),
            (square, Segment(C, M)),
            (square, Multiline([A, C, I])),
            (square, Polygon.rect(I, 1, 1)),
        ]
        for a, b in pairs:
            assert overlaps(a, b)
            assert overlaps(b, a)

    def test_overlaps_false(self, square: Polygon) -> None:
        assert not overlaps(A, B)
        assert not overlaps(Segment(A, B), Segment(D, E))
        assert not overlaps(square, E)
        assert not overlaps(square, Segment(A, E))

    def test_nested_polygons_do_not_intersect(self, square: Polygon) -> None:
        """Test that polygon/polygon contact is decided by boundaries."""
        big = Polygon([A, U, Y, E])
        assert not big.intersects(square)
        assert big.intersects(M)

    def test_unknown_shape(self) -> None:
        with pytest.raises(TypeError):
            overlaps(C, "not a shape")  # type: ignore[arg-type]
