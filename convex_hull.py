"""
Brute-Force Convex Hull in O(n^3) Time

Every unordered pair of points is tested as a candidate hull edge: the pair
survives when all other points fall on one side of the line through it (or
on the line, strictly between the two endpoints). The surviving edges are
then walked into a single ordered cycle of hull vertices.

The collinearity test compares against zero exactly. Points that are
collinear in exact arithmetic but not in floating point can land on either
side of the line; no tolerance is applied.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class HullError(Exception):
    """Base class for hull computation failures."""


class InsufficientHullEdges(HullError):
    """Fewer than two hull edges were found, so no polygon can be formed."""

    def __init__(self, num_edges: int):
        super().__init__(f"need at least 2 hull edges to form a polygon, found {num_edges}")
        self.num_edges = num_edges


class NonCyclicEdgeSet(HullError):
    """The accepted edges do not form a single simple cycle."""

    def __init__(self, frontier: "Point", remaining: int, reason: str):
        super().__init__(f"{reason} at {frontier} ({remaining} edge(s) left unwalked)")
        self.frontier = frontier
        self.remaining = remaining


@dataclass(frozen=True)
class Point:
    label: str
    x: float
    y: float

    def __str__(self) -> str:
        return f"{self.label} ({self.x},{self.y})"

    def squared_distance(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def is_between(self, o1: Point, o2: Point) -> bool:
        """True if this point lies strictly between o1 and o2.

        Assumes the three points are collinear.
        """
        span = o1.squared_distance(o2)
        return self.squared_distance(o1) < span and self.squared_distance(o2) < span


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point

    def __str__(self) -> str:
        return f"Segment from {self.start} to {self.end}"

    def other_end(self, p: Point) -> Optional[Point]:
        """Endpoint opposite p, or None if p is not an endpoint."""
        if self.start == p:
            return self.end
        if self.end == p:
            return self.start
        return None


@dataclass
class HullStats:
    """Operation counts and timing gathered while computing a hull."""
    pairs: int = 0
    point_tests: int = 0
    edges: int = 0
    hull_vertices: int = 0
    time_ms: float = 0.0


def _sign(value: float) -> int:
    return 1 if value > 0 else -1


def is_hull_edge(points: Sequence[Point], v1: Point, v2: Point,
                 stats: Optional[HullStats] = None,
                 debug: Optional[bool] = None) -> bool:
    """Check whether segment v1-v2 lies on the convex hull of points.

    debug enables the per-point trace; callers looping over many pairs
    should look it up once and pass it in.
    """
    if debug is None:
        debug = logger.isEnabledFor(logging.DEBUG)
    a = v2.y - v1.y
    b = v1.x - v2.x
    c = v1.x * v2.y - v1.y * v2.x

    looking_for = 0  # side of the line every other point must share
    for vtest in points:
        if vtest == v1 or vtest == v2:
            continue
        if stats is not None:
            stats.point_tests += 1
        if debug:
            logger.debug("Checking %s for segment from %s to %s", vtest, v1, v2)

        check_val = a * vtest.x + b * vtest.y - c
        if check_val == 0:
            if vtest.is_between(v1, v2):
                continue
            # A longer collinear segment covers this pair.
            if debug:
                logger.debug("Found collinear point %s outside %s to %s", vtest, v1, v2)
            return False

        if looking_for == 0:
            looking_for = _sign(check_val)
        elif _sign(check_val) != looking_for:
            if debug:
                logger.debug("Found points on opposite sides of line between %s and %s", v1, v2)
            return False
    return True


def compute_hull_edges(points: Sequence[Point],
                       stats: Optional[HullStats] = None) -> List[LineSegment]:
    """
    Return the segments of the convex hull of points.

    Edges come back in evaluation order: pairs (i, j) with i < j, scanned
    row by row. Degenerate inputs (fewer than three distinct points, all
    points collinear) produce too few or non-cyclic edges rather than an
    error; assemble_hull_polygon reports those.
    """
    hull: List[LineSegment] = []
    debug = logger.isEnabledFor(logging.DEBUG)
    n = len(points)
    for i in range(n - 1):
        v1 = points[i]
        for j in range(i + 1, n):
            v2 = points[j]
            if v1 == v2:
                continue
            if stats is not None:
                stats.pairs += 1
            if is_hull_edge(points, v1, v2, stats, debug):
                hull.append(LineSegment(v1, v2))

    if debug:
        logger.debug("Convex hull is formed from %d line segments:", len(hull))
        for seg in hull:
            logger.debug("  %s", seg)
    if stats is not None:
        stats.edges = len(hull)
    return hull


class WalkState(Enum):
    WALKING = auto()
    DONE = auto()


def assemble_hull_polygon(edges: Sequence[LineSegment]) -> List[Point]:
    """
    Walk the hull edges into an ordered polygon.

    The first edge seeds the walk; each step consumes the first unconsumed
    edge touching the frontier point. The walk must end back at the first
    vertex, which is not repeated, so the result holds one vertex per edge.

    Raises InsufficientHullEdges for fewer than two edges and
    NonCyclicEdgeSet when the edges are not exactly one simple cycle.
    """
    if len(edges) < 2:
        raise InsufficientHullEdges(len(edges))

    consumed = [False] * len(edges)
    first = edges[0]
    consumed[0] = True
    polygon = [first.start, first.end]
    visited = {first.start, first.end}
    frontier = first.end
    remaining = len(edges) - 1

    state = WalkState.WALKING
    while state is WalkState.WALKING:
        nxt = None
        for idx, seg in enumerate(edges):
            if consumed[idx]:
                continue
            nxt = seg.other_end(frontier)
            if nxt is not None:
                consumed[idx] = True
                remaining -= 1
                break
        if nxt is None:
            raise NonCyclicEdgeSet(frontier, remaining, "no unwalked edge touches frontier")

        if remaining == 0:
            if nxt != polygon[0]:
                raise NonCyclicEdgeSet(nxt, remaining, "walk does not close")
            state = WalkState.DONE
        elif nxt in visited:
            raise NonCyclicEdgeSet(nxt, remaining, "walk revisits a vertex")
        else:
            polygon.append(nxt)
            visited.add(nxt)
            frontier = nxt

    logger.debug("Assembled hull polygon with %d vertices", len(polygon))
    return polygon


def convex_hull(points: Sequence[Point], stats: Optional[HullStats] = None) -> List[Point]:
    """Compute hull edges and assemble them into an ordered polygon."""
    start = time.perf_counter()
    edges = compute_hull_edges(points, stats)
    polygon = assemble_hull_polygon(edges)
    if stats is not None:
        stats.hull_vertices = len(polygon)
        stats.time_ms = (time.perf_counter() - start) * 1000
    return polygon
