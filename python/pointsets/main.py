from __future__ import annotations

import argparse
import math
import sys
from typing import List, Optional, Sequence

import matplotlib.patches as patches
import matplotlib.pyplot as plt
import numpy as np

from .errors import InvalidArgumentError
from .kdtree import KdTreePointSet
from .logger import set_debug
from .naive import NaivePointSet
from .point import Point, PointLike


def sample_points(count: int, seed: Optional[int] = None) -> List[Point]:
    """Returns count points drawn uniformly from the unit square."""
    rng = np.random.default_rng(seed)
    samples = rng.random((max(count, 0), 2))
    return [Point.from_array(row, payload=i) for i, row in enumerate(samples)]


def plot_nearest(
    points: Sequence[PointLike],
    target: PointLike,
    nearest: PointLike,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """Scatter the points, the query target and its nearest neighbor.

    A circle centered at the target passes through the nearest point. No other
    point lies strictly inside it.
    """
    if ax is None:
        ax = plt.axes()

    radius = math.sqrt(nearest.distance_squared_to(target))
    c = patches.Circle(
        (target.x, target.y), radius=radius, edgecolor="green", facecolor="none", linewidth=1
    )
    ax.add_patch(c)

    ax.scatter([p.x for p in points], [p.y for p in points])
    ax.scatter(target.x, target.y)
    ax.scatter(nearest.x, nearest.y)
    ax.axis("square")
    x, y = 1.1, 1.1
    ax.set_xlim(0, x)
    ax.set_ylim(0, y)
    ax.set_xticks(np.arange(0, x + 0.1, step=0.1))
    ax.set_yticks(np.arange(0, y + 0.1, step=0.1))
    ax.axhline(0, linewidth=2, color="gray")
    ax.axvline(0, linewidth=2, color="gray")
    return ax


def log_to_rerun(points: Sequence[PointLike], target: PointLike, nearest: PointLike):
    import rerun as rr

    positions = np.array([[p.x, p.y] for p in points] + [[target.x, target.y]])

    colors = np.full((len(points), 3), [0, 255, 0])
    colors = np.append(colors, np.array([255, 0, 0]).reshape(1, 3), axis=0)

    rr.init("nearest", spawn=True)
    rr.log("points", rr.Points2D(positions, colors=colors, radii=0.02))
    rr.log("nearest", rr.Points2D([[nearest.x, nearest.y]], colors=[0, 0, 255], radii=0.03))


def main(argv: Optional[Sequence[str]] = None):
    # NOTE:
    # e.g.
    # python3 -m pointsets.main --count 100 --seed 19 --target 0.5 0.5
    parser = argparse.ArgumentParser(description="Find the nearest of random points")
    parser.add_argument("-n", "--count", type=int, help="Number of points", default=10)
    parser.add_argument("-s", "--seed", type=int, help="Random seed", default=19)
    parser.add_argument(
        "-t",
        "--target",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        help="Query point",
        default=[0.5, 0.5],
    )
    parser.add_argument(
        "--naive", action="store_true", help="Use the linear scan instead of the k-d tree"
    )
    parser.add_argument("--rerun", action="store_true", help="Show the result in rerun viewer")
    parser.add_argument("--no-show", action="store_true", help="Do not open a plot window")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    set_debug(args.debug)

    points = sample_points(args.count, args.seed)
    target = Point(*args.target)

    try:
        if args.naive:
            point_set = NaivePointSet.create(points)
        else:
            point_set = KdTreePointSet.create(points, seed=args.seed)
    except InvalidArgumentError as err:
        parser.error(str(err))

    nearest = point_set.nearest(target)
    print(f"Nearest: ({nearest.x:.6f}, {nearest.y:.6f})")
    print(f"Squared distance: {nearest.distance_squared_to(target):.6f}")

    try:
        if args.rerun:
            log_to_rerun(points, target, nearest)
        else:
            plot_nearest(points, target, nearest)
            if not args.no_show:
                plt.show()
    except KeyboardInterrupt:
        sys.exit(1)


if __name__ == "__main__":
    main()
