import os
import subprocess
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from pointsets.main import log_to_rerun, main, plot_nearest, sample_points  # noqa: E402
from pointsets.naive import NaivePointSet  # noqa: E402
from pointsets.point import Point  # noqa: E402


def test_sample_points_is_seeded_and_in_unit_square():
    a = sample_points(25, seed=7)
    b = sample_points(25, seed=7)

    assert a == b
    assert len(a) == 25
    assert all(0.0 <= p.x < 1.0 and 0.0 <= p.y < 1.0 for p in a)
    assert [p.payload for p in a] == list(range(25))


def test_plot_nearest_draws_circle_through_nearest():
    points = [Point(0.1, 0.1), Point(0.6, 0.5), Point(0.9, 0.9)]
    fig, ax = plt.subplots()
    try:
        out = plot_nearest(points, Point(0.5, 0.5), Point(0.6, 0.5), ax=ax)

        assert out is ax
        assert len(ax.patches) == 1
        assert ax.patches[0].radius == pytest.approx(0.1)
        assert len(ax.collections) == 3
    finally:
        plt.close(fig)


@pytest.mark.parametrize("extra", [[], ["--naive"]])
def test_main_prints_nearest_of_sampled_points(extra, capsys):
    try:
        result = main(["--count", "40", "--seed", "3", "--target", "0.2", "0.7", "--no-show"] + extra)
    finally:
        plt.close("all")

    assert result is None

    target = Point(0.2, 0.7)
    expected = NaivePointSet(sample_points(40, seed=3)).nearest(target)
    out = capsys.readouterr().out
    assert f"Nearest: ({expected.x:.6f}, {expected.y:.6f})" in out
    assert f"Squared distance: {expected.distance_squared_to(target):.6f}" in out


def test_demo_exits_with_status_zero():
    env = dict(os.environ)
    env["MPLBACKEND"] = "Agg"
    python_dir = str(Path(__file__).resolve().parents[1])
    env["PYTHONPATH"] = os.pathsep.join(p for p in [python_dir, env.get("PYTHONPATH")] if p)

    proc = subprocess.run(
        [sys.executable, "-m", "pointsets.main", "--count", "5", "--no-show"],
        env=env,
        capture_output=True,
        text=True,
    )

    assert proc.returncode == 0, proc.stderr
    assert "Nearest:" in proc.stdout
    assert "Point(" not in proc.stderr


def test_log_to_rerun_logs_points_and_nearest(monkeypatch):
    import rerun as rr

    inits = []
    logged = {}
    monkeypatch.setattr(rr, "init", lambda *args, **kwargs: inits.append((args, kwargs)))
    monkeypatch.setattr(rr, "log", lambda path, entity, *args, **kwargs: logged.update({path: entity}))

    points = [Point(0.1, 0.1), Point(0.6, 0.5), Point(0.9, 0.9)]
    log_to_rerun(points, Point(0.5, 0.5), Point(0.6, 0.5))

    assert inits == [(("nearest",), {"spawn": True})]
    assert set(logged) == {"points", "nearest"}
    assert all(isinstance(entity, rr.Points2D) for entity in logged.values())


def test_main_rejects_empty_point_count():
    with pytest.raises(SystemExit) as exc_info:
        main(["--count", "0", "--no-show"])

    assert exc_info.value.code == 2
