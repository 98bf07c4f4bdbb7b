#!/usr/bin/env python3
"""
Generate deterministic point sets for hull benchmarking, written as TMG
graphs with no edges.
"""

import argparse
import math
import random
from pathlib import Path

from convex_hull import Point
from tmg_io import write_tmg_points

# Fixed rotation (radians) so generated sets avoid axis-aligned ties.
ROT_ANGLE = 0.123456789
DEFAULT_SIZES = [10, 20, 50, 100, 200]


def labeled(coords, prefix="P"):
    return [Point(f"{prefix}{i}", x, y) for i, (x, y) in enumerate(coords)]


def rotate_points(coords, angle_rad):
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [(ca * x - sa * y, sa * x + ca * y) for (x, y) in coords]


def square_points(n, side=100.0, seed=42):
    """Four corners of a square plus n - 4 points strictly inside it."""
    rng = random.Random(seed + n)
    coords = [(0.0, 0.0), (side, 0.0), (side, side), (0.0, side)]
    for _ in range(max(0, n - 4)):
        coords.append((side * (0.05 + 0.9 * rng.random()),
                       side * (0.05 + 0.9 * rng.random())))
    return coords


def circle_points(n, radius=100.0):
    """All n points on the hull."""
    return [
        (
            radius * math.cos(2 * math.pi * i / n),
            radius * math.sin(2 * math.pi * i / n),
        )
        for i in range(n)
    ]


def random_points(n, radius=100.0, seed=42):
    rng = random.Random(seed + n)
    coords = []
    for _ in range(n):
        angle = rng.random() * 2 * math.pi
        r = radius * math.sqrt(rng.random())
        coords.append((r * math.cos(angle), r * math.sin(angle)))
    return coords


def collinear_points(n, step=1.0):
    """Degenerate set: n points along the x-axis."""
    return [(i * step, 0.0) for i in range(n)]


GENERATORS = {
    "square": square_points,
    "circle": circle_points,
    "random": random_points,
}


def generate(kind, n):
    coords = GENERATORS[kind](n)
    if kind != "square":
        coords = rotate_points(coords, ROT_ANGLE)
    return labeled(coords)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Generate TMG point sets')
    parser.add_argument("--output", default="points/generated", type=Path)
    parser.add_argument("--sizes", nargs="+", type=int, default=DEFAULT_SIZES)
    args = parser.parse_args(argv)

    for n in args.sizes:
        for kind in GENERATORS:
            write_tmg_points(generate(kind, n), args.output / f"{kind}_{n}.tmg")

    print(f"Generated point sets in {args.output}")


if __name__ == "__main__":
    main()
