#!/usr/bin/env python3
"""
Plot a point set and its brute-force convex hull.
"""

import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Polygon as MplPolygon

from convex_hull import HullError, convex_hull
from tmg_io import TMGFormatError, read_tmg_points

plt.rcParams['font.size'] = 10
plt.rcParams['axes.titlesize'] = 14

HULL_COLOR = '#377eb8'
POINT_COLOR = '#333333'
HULL_VERTEX_COLOR = '#e41a1c'


def plot_hull(points, hull, ax, title=None, show_labels=False):
    """Draw all points, the filled hull polygon, and mark hull vertices."""
    pts = np.array([(p.x, p.y) for p in points])
    verts = np.array([(p.x, p.y) for p in hull])

    ax.add_patch(MplPolygon(verts, closed=True, alpha=0.3, facecolor=HULL_COLOR,
                            edgecolor=HULL_COLOR, linewidth=1.5))
    ax.scatter(pts[:, 0], pts[:, 1], c=POINT_COLOR, s=12, zorder=4)
    ax.scatter(verts[:, 0], verts[:, 1], c=HULL_VERTEX_COLOR, s=30, zorder=5)
    if show_labels:
        for p in hull:
            ax.annotate(p.label, (p.x, p.y), textcoords='offset points', xytext=(4, 4), fontsize=8)

    ax.set_aspect('equal')
    ax.autoscale_view()
    ax.set_title(title or f'Convex hull ({len(hull)} of {len(points)} points)')
    return ax


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot the convex hull of a TMG file')
    parser.add_argument('input', type=Path, help='Input TMG graph file')
    parser.add_argument('--output', '-o', type=Path, help='Output PNG (default: INPUT with .png)')
    parser.add_argument('--labels', action='store_true', help='Label hull vertices')
    args = parser.parse_args(argv)

    try:
        points = read_tmg_points(args.input)
        hull = convex_hull(points)
    except (OSError, TMGFormatError, HullError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = args.output or args.input.with_suffix('.png')
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_hull(points, hull, ax, title=args.input.stem, show_labels=args.labels)
    plt.tight_layout()
    plt.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"Saved {output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
