from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .point import PointLike


class Axis(IntEnum):
    """Coordinate a tree level splits on."""

    X = 0
    Y = 1

    def flip(self) -> Axis:
        return Axis.Y if self is Axis.X else Axis.X

    def coordinate(self, point: PointLike) -> float:
        return point.x if self is Axis.X else point.y


@dataclass
class KdTreeNode:
    axis: Axis
    location_point: PointLike
    left_child: KdTreeNode | None = None
    right_child: KdTreeNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left_child is None and self.right_child is None
