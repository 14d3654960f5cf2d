from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from .point import PointLike


class PointSet(ABC):
    """A fixed, non-empty set of 2D points answering nearest neighbor queries.

    Instances are built once through ``create`` and never change afterwards,
    so concurrent queries are safe as long as the stored points are immutable.
    """

    @classmethod
    def create(cls, points: Sequence[PointLike]) -> PointSet:
        return cls(points)  # type: ignore[call-arg]

    @abstractmethod
    def nearest(self, target: PointLike) -> PointLike:
        """Returns the stored point closest to target."""

    @abstractmethod
    def all_points(self) -> Tuple[PointLike, ...]:
        """Returns every stored point, duplicates included."""

    def __len__(self) -> int:
        return len(self.all_points())
