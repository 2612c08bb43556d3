"""Directed-graph polygon crop.

The boundaries of the subject (A) and the frame (B) are cut at every point
where they touch and loaded into one directed graph. Pruning then removes
every node and edge that cannot be part of the result, and the remaining
cycles are walked off one at a time as output polygons.

Under exclusive cropping the frame's edges are reversed before loading, so
that walking "forward" along the frame follows the outside of it.

The graph is a `networkx.DiGraph` whose nodes are points. Because
independently computed intersections can differ in the last few bits, every
point goes through a fuzzy registry before it is used as a key.
"""

import logging

import networkx as nx

from planecut.config.context import current_geometry
from planecut.config.settings import CropMode
from planecut.core.geometry import is_colinear_n
from planecut.core.interpolate import interpolate_2d
from planecut.core.opinion import SegmentEntireOp, SegmentPointOp, SegmentSubsegmentOp
from planecut.core.overlaps import segment_overlaps_segment
from planecut.domain import Inside, Outside, Percent, Point, Polygon, Segment
from planecut.exceptions import CropTraversalError
from planecut.utils.fuzzy import approx_eq

logger = logging.getLogger(__name__)


class CropGraph:
    """Single-use graph for cropping polygon `a` by polygon `b`.

    Build with the constructor, then call `run()` once.

    Attributes:
        a: Subject polygon
        b: Frame polygon
        mode: Inclusive or exclusive cropping
        graph: Directed graph of boundary pieces
    """

    def __init__(self, a: Polygon, b: Polygon, mode: CropMode) -> None:
        self.a = a
        self.b = b
        self.mode = mode
        self.graph = nx.DiGraph()
        self._known: list[Point] = []
        self._a_vertices = set(a.points)

    # Graph primitives

    def normalize(self, pt: Point) -> Point:
        """Return the registered point approximately equal to `pt`.

        Unknown points are registered and returned as-is.
        """
        eps = current_geometry().point_merge_epsilon
        for known in self._known:
            if approx_eq(known.x, pt.x, eps) and approx_eq(known.y, pt.y, eps):
                return known
        self._known.append(pt)
        return pt

    def add_node(self, pt: Point) -> Point:
        node = self.normalize(pt)
        self.graph.add_node(node)
        return node

    def add_edge(self, i: Point, f: Point) -> None:
        self.graph.add_edge(i, f)

    def remove_edge(self, i: Point, f: Point) -> None:
        if self.graph.has_edge(i, f):
            self.graph.remove_edge(i, f)

    def remove_node(self, node: Point) -> None:
        self.graph.remove_node(node)

    @property
    def nodes(self) -> list[Point]:
        return list(self.graph.nodes)

    @property
    def edges(self) -> list[tuple[Point, Point]]:
        return list(self.graph.edges)

    def outgoing(self, node: Point) -> list[Point]:
        return list(self.graph.successors(node))

    def incoming(self, node: Point) -> list[Point]:
        return list(self.graph.predecessors(node))

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    # Build

    def _cut_points(self, sg: Segment, other: Polygon) -> list[Point]:
        """Points where `other`'s boundary touches `sg`, ordered along `sg`."""
        cuts: list[tuple[Percent, Point]] = []
        for edge in other.to_segments():
            found = segment_overlaps_segment(sg, edge)
            if found is None:
                continue
            op = found[0]
            if isinstance(op, SegmentPointOp):
                cuts.append((op.percent, op.point))
            elif isinstance(op, SegmentSubsegmentOp):
                for pt in (op.segment.i, op.segment.f):
                    cuts.append((interpolate_2d(sg.i, sg.f, pt), pt))
            elif isinstance(op, SegmentEntireOp):
                cuts.append((Percent.ZERO, sg.i))
                cuts.append((Percent.ONE, sg.f))
        cuts.sort(key=lambda cut: cut[0].value)
        return [pt for _, pt in cuts]

    def build(self) -> None:
        """Load both boundaries, cut at every mutual contact."""
        for this, that, is_frame in ((self.a, self.b, False), (self.b, self.a, True)):
            for sg in this.to_segments():
                if is_frame and self.mode is CropMode.EXCLUSIVE:
                    sg = sg.flip()
                chain = [sg.i, *self._cut_points(sg, that), sg.f]
                prev = self.add_node(chain[0])
                for pt in chain[1:]:
                    node = self.add_node(pt)
                    if node != prev:
                        self.add_edge(prev, node)
                    prev = node
        logger.debug(
            "Built crop graph: %d nodes, %d edges", len(self), self.graph.number_of_edges()
        )

    # Pruning

    def remove_nodes_outside(self, polygon: Polygon) -> None:
        for node in self.nodes:
            if isinstance(polygon.contains(node), Outside):
                self.remove_node(node)

    def remove_nodes_inside(self, polygon: Polygon) -> None:
        for node in self.nodes:
            if isinstance(polygon.contains(node), Inside):
                self.remove_node(node)

    def remove_edges_outside(self, polygon: Polygon) -> None:
        for i, f in self.edges:
            if isinstance(polygon.contains(i.avg(f)), Outside):
                self.remove_edge(i, f)

    def remove_edges_inside(self, polygon: Polygon) -> None:
        for i, f in self.edges:
            if isinstance(polygon.contains(i.avg(f)), Inside):
                self.remove_edge(i, f)

    def remove_stubs(self) -> None:
        """Remove nodes whose only edges go out to and back from one neighbor."""
        changed = True
        while changed:
            changed = False
            for node in self.nodes:
                ins, outs = self.incoming(node), self.outgoing(node)
                if len(ins) == 1 and len(outs) == 1 and ins[0] == outs[0]:
                    self.remove_node(node)
                    changed = True

    def remove_dual_edges(self) -> None:
        """Remove every pair of edges running both ways between two nodes."""
        for i, f in self.edges:
            if self.graph.has_edge(i, f) and self.graph.has_edge(f, i):
                self.remove_edge(i, f)
                self.remove_edge(f, i)

    def remove_dangling_nodes(self) -> None:
        """Remove nodes lacking incoming or outgoing edges, until none remain."""
        changed = True
        while changed:
            changed = False
            for node in self.nodes:
                if not self.graph.out_degree(node) or not self.graph.in_degree(node):
                    self.remove_node(node)
                    changed = True

    def prune(self) -> None:
        self.remove_nodes_outside(self.a)
        if self.mode is CropMode.INCLUSIVE:
            self.remove_nodes_outside(self.b)
            self.remove_edges_outside(self.a)
            self.remove_edges_outside(self.b)
        else:
            self.remove_nodes_inside(self.b)
            self.remove_edges_inside(self.b)
        self.remove_stubs()
        self.remove_dual_edges()
        self.remove_dangling_nodes()
        logger.debug(
            "Pruned crop graph: %d nodes, %d edges", len(self), self.graph.number_of_edges()
        )

    # Extraction

    def _start_node(self) -> Point:
        for node, degree in self.graph.out_degree:
            if degree > 1:
                return node
        for node, degree in self.graph.in_degree:
            if degree > 1:
                return node
        return next(iter(self.graph))

    def _choose(self, curr: Point, start: Point, visited: list[Point]) -> Point:
        choices = self.outgoing(curr)
        if len(choices) == 1:
            return choices[0]
        if start in choices:
            return start
        unvisited = [c for c in choices if c not in visited]
        if len(unvisited) == 1:
            return unvisited[0]
        for candidate in unvisited or choices:
            if candidate in self._a_vertices:
                return candidate
        raise CropTraversalError(curr, choices)

    def extract_cycles(self) -> list[list[Point]]:
        """Walk one cycle off the graph, removing edges as they are used.

        A walk that comes back to a node other than its start has closed an
        inner loop; that loop is split off as a cycle of its own.

        Returns:
            The point lists of every cycle closed during the walk
        """
        start = self._start_node()
        cycles: list[list[Point]] = []
        pts = [start]
        curr = start
        while True:
            if not self.graph.out_degree(curr):
                logger.debug("Dead end at %r, closing %d points", curr, len(pts))
                break
            nxt = self._choose(curr, start, pts)
            self.remove_edge(curr, nxt)
            if nxt == start:
                break
            if nxt in pts:
                idx = pts.index(nxt)
                cycles.append(pts[idx:])
                del pts[idx + 1 :]
            else:
                pts.append(nxt)
            curr = nxt
        cycles.append(pts)
        self.remove_dangling_nodes()
        return cycles

    def extract(self) -> list[Polygon]:
        """Walk the graph until it is empty, keeping every non-degenerate cycle."""
        resultant: list[Polygon] = []
        while len(self):
            for cycle in self.extract_cycles():
                if len(cycle) <= 2 or is_colinear_n(cycle):
                    logger.debug("Dropping degenerate cycle %r", cycle)
                    continue
                resultant.append(Polygon(cycle))
        return resultant

    def run(self) -> list[Polygon]:
        """Build, prune and extract.

        Returns:
            Output polygons, possibly empty

        Raises:
            CropTraversalError: If a walk reaches an unresolvable branch
        """
        self.build()
        self.prune()
        return self.extract()
