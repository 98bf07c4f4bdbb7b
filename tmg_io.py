"""
Reading and writing METAL TMG graph files.

The format is:
TMG 1.0 simple
N M
label0 x0 y0
...
v0 v1 edge_label   (M lines)

Only the vertex block is needed to build a point set; edge lines are ignored
on input and generated from the hull order on output.
"""

from __future__ import annotations
from pathlib import Path
from typing import IO, Iterator, List, Sequence, Tuple, Union

from convex_hull import HullStats, Point

TMG_HEADER = "TMG 1.0 simple"


class TMGFormatError(ValueError):
    """Raised when a TMG file cannot be parsed into points."""

    def __init__(self, message: str, line_no: int):
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no


def _tokens(lines: Sequence[str], start: int) -> Iterator[Tuple[int, str]]:
    """Yield (line_no, token) pairs from lines[start:], 1-based line numbers."""
    for idx in range(start, len(lines)):
        for tok in lines[idx].split():
            yield idx + 1, tok


def parse_tmg_points(text: str) -> List[Point]:
    lines = text.splitlines()
    if not lines or not lines[0].split() or lines[0].split()[0] != "TMG":
        raise TMGFormatError("missing TMG header", 1)
    if len(lines) < 2 or not lines[1].split():
        raise TMGFormatError("missing vertex and edge counts", 2)

    try:
        n = int(lines[1].split()[0])
    except ValueError:
        raise TMGFormatError(f"bad vertex count {lines[1].split()[0]!r}", 2) from None
    if n < 0:
        raise TMGFormatError(f"negative vertex count {n}", 2)

    toks = _tokens(lines, 2)
    points = []
    for i in range(n):
        # zip pulls from range first, so no token past the record is consumed
        record = [tok for _, tok in zip(range(3), toks)]
        if len(record) < 3:
            raise TMGFormatError(f"expected {n} vertices, found {i}", len(lines))
        (line_no, label), (_, xs), (_, ys) = record
        try:
            points.append(Point(label, float(xs), float(ys)))
        except ValueError:
            raise TMGFormatError(f"bad coordinates for vertex {label!r}", line_no) from None
    return points


def read_tmg_points(source: Union[str, Path, IO[str]]) -> List[Point]:
    """Read the vertex list of a TMG file as Points, in file order."""
    if hasattr(source, "read"):
        return parse_tmg_points(source.read())
    with open(source, "r", encoding="utf-8") as f:
        return parse_tmg_points(f.read())


def write_tmg_points(points: Sequence[Point], path: Path) -> None:
    """Write a point set as a TMG graph with no edges."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{TMG_HEADER}\n")
        f.write(f"{len(points)} 0\n")
        for p in points:
            # High precision so a reread set is bit-identical.
            f.write(f"{p.label} {p.x:.17g} {p.y:.17g}\n")


def format_hull_list(hull: Sequence[Point]) -> str:
    lines = ["Convex hull polygon:"]
    lines.extend(str(p) for p in hull)
    # Repeat the first vertex so the listing draws a closed path.
    if hull:
        lines.append(str(hull[0]))
    return "\n".join(lines) + "\n"


def format_hull_tmg(hull: Sequence[Point]) -> str:
    """Hull as a TMG graph: one vertex per hull point, edges around the cycle."""
    k = len(hull)
    lines = [TMG_HEADER, f"{k} {k}"]
    lines.extend(f"{p.label} {p.x} {p.y}" for p in hull)
    for i in range(k):
        lines.append(f"{i} {(i + 1) % k} HullSeg{i}")
    return "\n".join(lines) + "\n"


def format_hull_timings(stats: HullStats, num_points: int) -> str:
    return (f"bruteforce_hull,points={num_points},hull_vertices={stats.hull_vertices},"
            f"pairs={stats.pairs},point_tests={stats.point_tests},"
            f"time_ms={stats.time_ms}\n")
