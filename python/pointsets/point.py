from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Sequence

import numpy as np
import numpy.typing as npt

from .errors import InvalidArgumentError


class PointLike(Protocol):
    """Anything a point set can store or be queried with."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    def distance_squared_to(self, other: PointLike) -> float: ...


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    payload: Any = field(default=None, compare=False)

    def distance_squared_to(self, other: PointLike) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    @staticmethod
    def from_array(values: Sequence[float] | npt.NDArray, payload: Any = None) -> Point:
        """Create a point from a 2 element sequence or numpy row.

        Args:
            values: x and y, in that order. Shape (2,) or (1, 2).
            payload: Optional value carried along with the point.

        Raises:
            InvalidArgumentError: values do not hold exactly two coordinates.
        """
        coords = np.asarray(values, dtype=np.float64).reshape(-1)
        if coords.shape[0] != 2:
            raise InvalidArgumentError(f"Point needs 2 coordinates, got {coords.shape[0]}")
        return Point(float(coords[0]), float(coords[1]), payload)

    def as_array(self) -> npt.NDArray:
        return np.array([self.x, self.y], dtype=np.float64)


def as_point_list(points: Optional[Sequence[PointLike] | npt.NDArray]) -> List[PointLike]:
    """Copy the input into a fresh non-empty list.

    A numpy array of shape (N, 2) is accepted and converted row by row.

    Raises:
        InvalidArgumentError: points is None or empty.
    """
    if points is None:
        raise InvalidArgumentError("points must not be None")

    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] != 2:
            raise InvalidArgumentError(f"points must have shape (N, 2), got {points.shape}")
        points_list: List[PointLike] = [Point.from_array(row) for row in points]
    else:
        points_list = list(points)

    if not points_list:
        raise InvalidArgumentError("points must not be empty")

    return points_list
