#!/usr/bin/env python3
"""
Benchmark for the brute-force convex hull.

Times convex_hull() over generated point sets and fits the empirical
scaling law T = a * n^b. The point-test count grows as n^3 regardless of
dataset; wall time should follow it.

Usage:
    python3 hull_benchmark.py [--sizes N1 N2 ...] [--runs R] [--output CSV]
"""

from __future__ import annotations
import argparse
import statistics
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import numpy as np
import pandas as pd

from convex_hull import HullStats, convex_hull
from hull_datasets import DEFAULT_SIZES, GENERATORS, generate

RESULTS_DIR = Path("results")


def log(msg: str) -> None:
    """Progress line on stdout, prefixed with wall-clock time."""
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}")


def time_hull(points) -> HullStats:
    stats = HullStats()
    convex_hull(points, stats)
    return stats


def run_benchmark(sizes: Sequence[int], runs: int = 3,
                  datasets: Sequence[str] = tuple(GENERATORS)) -> pd.DataFrame:
    """One row per (dataset, size, run)."""
    rows: List[Dict] = []
    for kind in datasets:
        for n in sizes:
            points = generate(kind, n)
            for run in range(runs):
                stats = time_hull(points)
                rows.append({
                    "dataset": kind,
                    "num_points": n,
                    "run": run,
                    "hull_vertices": stats.hull_vertices,
                    "pairs": stats.pairs,
                    "point_tests": stats.point_tests,
                    "time_ms": stats.time_ms,
                })
    return pd.DataFrame(rows)


def fit_scaling_law(n_values, time_values) -> Tuple[float, float, float]:
    """
    Fit T = a * n^b by least squares on log n vs log T.

    Applied to time_ms or point_tests per size. For point_tests b lies
    between 2 and 3: every pair costs at least one test, only hull pairs
    scan all n - 2 other points. Returns (a, b, r_squared).
    """
    log_n = np.log(n_values)
    log_t = np.log(time_values)

    coeffs = np.polyfit(log_n, log_t, 1)
    b = coeffs[0]
    a = np.exp(coeffs[1])

    log_t_pred = coeffs[0] * log_n + coeffs[1]
    ss_res = np.sum((log_t - log_t_pred) ** 2)
    ss_tot = np.sum((log_t - np.mean(log_t)) ** 2)
    r_squared = 1 - ss_res / ss_tot if ss_tot > 0 else 0

    return float(a), float(b), float(r_squared)


def scaling_by_dataset(df: pd.DataFrame, column: str = "time_ms") -> Dict[str, Dict[str, float]]:
    results = {}
    for kind in df["dataset"].unique():
        data = df[df["dataset"] == kind].groupby("num_points")[column].median().reset_index()
        n_vals = data["num_points"].values
        vals = data[column].values
        mask = (n_vals > 0) & (vals > 0)
        if mask.sum() < 2:
            continue
        a, b, r2 = fit_scaling_law(n_vals[mask], vals[mask])
        results[kind] = {"a": a, "b": b, "r2": r2}
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description='Benchmark the brute-force hull')
    parser.add_argument("--sizes", nargs="+", type=int, default=DEFAULT_SIZES)
    parser.add_argument("--runs", type=int, default=3)
    parser.add_argument("--output", type=Path, default=RESULTS_DIR / "hull_benchmark.csv")
    args = parser.parse_args(argv)

    log(f"Benchmarking sizes {args.sizes} x {args.runs} runs")
    df = run_benchmark(args.sizes, args.runs)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)
    log(f"Wrote {len(df)} rows to {args.output}")

    for kind, res in scaling_by_dataset(df).items():
        med = statistics.median(df[df["dataset"] == kind]["time_ms"])
        log(f"{kind:<8} T = {res['a']:.3e} * n^{res['b']:.3f}  R^2={res['r2']:.4f}  median={med:.2f}ms")
    for kind, res in scaling_by_dataset(df, column="point_tests").items():
        log(f"{kind:<8} point_tests ~ n^{res['b']:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
