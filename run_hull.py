#!/usr/bin/env python3
"""
Brute-force convex hull of the vertices of a METAL TMG graph.

Usage:
    python3 run_hull.py FILE [list|tmg|timings] [--debug]

list     hull vertices in order, readable text (default)
tmg      hull as a TMG graph, plottable in METAL's HDX
timings  one-line operation count and timing summary
"""

import argparse
import logging
import sys

from convex_hull import HullError, HullStats, convex_hull
from tmg_io import (
    TMGFormatError,
    format_hull_list,
    format_hull_timings,
    format_hull_tmg,
    read_tmg_points,
)

logger = logging.getLogger(__name__)

OUTPUT_TYPES = ("list", "tmg", "timings")


def build_parser():
    parser = argparse.ArgumentParser(description='Brute-force O(n^3) convex hull')
    parser.add_argument('filename', help='Input TMG graph file')
    parser.add_argument('type', nargs='?', default='list', choices=OUTPUT_TYPES,
                        help='Output type (default: list)')
    parser.add_argument('--debug', action='store_true',
                        help='Trace every candidate edge check')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        points = read_tmg_points(args.filename)
        stats = HullStats()
        hull = convex_hull(points, stats)
    except (OSError, TMGFormatError, HullError) as e:
        print(f"{args.filename}: {e}", file=sys.stderr)
        return 1

    logger.debug("Read %d points, %d on the hull", len(points), len(hull))
    if args.type == 'list':
        sys.stdout.write(format_hull_list(hull))
    elif args.type == 'tmg':
        sys.stdout.write(format_hull_tmg(hull))
    else:
        sys.stdout.write(format_hull_timings(stats, len(points)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
