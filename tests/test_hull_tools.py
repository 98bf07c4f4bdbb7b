import math

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import pytest

import hull_benchmark
import hull_datasets
import hull_plot
from convex_hull import convex_hull
from tmg_io import read_tmg_points


@pytest.mark.unit
def test_square_points_interior_stays_off_hull():
    points = hull_datasets.labeled(hull_datasets.square_points(30))
    assert len(points) == 30
    assert convex_hull(points) == points[:4]


@pytest.mark.unit
def test_generate_is_deterministic():
    assert hull_datasets.generate("random", 15) == hull_datasets.generate("random", 15)
    assert hull_datasets.generate("circle", 6)[0].label == "P0"


@pytest.mark.unit
def test_rotate_points_preserves_radius():
    rotated = hull_datasets.rotate_points([(3.0, 4.0)], 1.0)
    assert math.hypot(*rotated[0]) == pytest.approx(5.0)


@pytest.mark.unit
def test_datasets_main_writes_tmg_files(tmp_path, capsys):
    hull_datasets.main(["--output", str(tmp_path), "--sizes", "6"])
    for kind in hull_datasets.GENERATORS:
        points = read_tmg_points(tmp_path / f"{kind}_6.tmg")
        assert points == hull_datasets.generate(kind, 6)
    assert "Generated point sets" in capsys.readouterr().out


@pytest.mark.unit
def test_run_benchmark_rows():
    df = hull_benchmark.run_benchmark([6, 10], runs=2, datasets=["circle", "square"])
    assert len(df) == 8
    assert set(df.columns) >= {"dataset", "num_points", "hull_vertices", "point_tests", "time_ms"}
    circle = df[df["dataset"] == "circle"]
    assert (circle["hull_vertices"] == circle["num_points"]).all()
    assert (df[df["dataset"] == "square"]["hull_vertices"] == 4).all()
    assert (df["pairs"] == df["num_points"] * (df["num_points"] - 1) // 2).all()


@pytest.mark.unit
def test_fit_scaling_law_recovers_cubic():
    n = [10, 20, 40, 80]
    t = [0.002 * x ** 3 for x in n]
    a, b, r2 = hull_benchmark.fit_scaling_law(n, t)
    assert b == pytest.approx(3.0)
    assert a == pytest.approx(0.002)
    assert r2 == pytest.approx(1.0)


@pytest.mark.unit
def test_scaling_by_dataset_skips_sparse_series():
    df = pd.DataFrame({
        "dataset": ["a", "a", "a", "b"],
        "num_points": [10, 20, 40, 10],
        "point_tests": [1000, 8000, 64000, 5],
    })
    results = hull_benchmark.scaling_by_dataset(df, column="point_tests")
    assert list(results) == ["a"]
    assert results["a"]["b"] == pytest.approx(3.0)


@pytest.mark.unit
def test_benchmark_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    assert hull_benchmark.main(["--sizes", "5", "8", "--runs", "1", "--output", str(out)]) == 0
    df = pd.read_csv(out)
    assert len(df) == 2 * len(hull_datasets.GENERATORS)
    assert "circle   point_tests ~ n^" in capsys.readouterr().out


@pytest.mark.unit
def test_plot_hull_draws_polygon():
    points = hull_datasets.labeled(hull_datasets.square_points(8))
    hull = convex_hull(points)
    fig, ax = plt.subplots()
    hull_plot.plot_hull(points, hull, ax, show_labels=True)
    assert len(ax.patches) == 1
    assert len(ax.patches[0].get_xy()) >= len(hull)
    assert ax.get_title() == "Convex hull (4 of 8 points)"
    plt.close(fig)


@pytest.mark.unit
def test_plot_main_saves_png(tmp_path):
    src = tmp_path / "pts.tmg"
    src.write_text("TMG 1.0 simple\n4 0\nA 0 0\nB 1 0\nC 1 1\nD 0.5 0.2\n", encoding="utf-8")
    assert hull_plot.main([str(src)]) == 0
    assert (tmp_path / "pts.png").stat().st_size > 0


@pytest.mark.unit
def test_plot_main_reports_degenerate_input(tmp_path, capsys):
    src = tmp_path / "line.tmg"
    src.write_text("TMG 1.0 simple\n2 0\nA 0 0\nB 1 0\n", encoding="utf-8")
    assert hull_plot.main([str(src)]) == 1
    assert "Error:" in capsys.readouterr().err
