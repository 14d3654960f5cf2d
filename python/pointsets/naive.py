from __future__ import annotations

from typing import Sequence, Tuple

from .logger import logger
from .point import PointLike, as_point_list
from .point_set import PointSet


class NaivePointSet(PointSet):
    """Nearest neighbor by linear scan.

    O(N) per query. Kept as the reference answer for the k-d tree.
    """

    def __init__(self, points: Sequence[PointLike]):
        self._points: Tuple[PointLike, ...] = tuple(as_point_list(points))
        logger.debug("Built naive point set with %d points", len(self._points))

    def nearest(self, target: PointLike) -> PointLike:
        # Ties keep the earliest point in storage order.
        result = self._points[0]
        result_dist2 = result.distance_squared_to(target)
        for point in self._points[1:]:
            dist2 = point.distance_squared_to(target)
            if dist2 < result_dist2:
                result = point
                result_dist2 = dist2
        return result

    def all_points(self) -> Tuple[PointLike, ...]:
        return self._points
