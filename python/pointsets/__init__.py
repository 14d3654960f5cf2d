"""Nearest neighbor point sets in two dimensions.

Exports :class:`KdTreePointSet`, a k-d tree answering queries in expected
O(log N), and :class:`NaivePointSet`, a linear scan used as the reference.
"""

from __future__ import annotations

from .errors import InvalidArgumentError, PointSetError
from .kdtree import KdTree, KdTreePointSet
from .kdtree_node import Axis, KdTreeNode
from .naive import NaivePointSet
from .point import Point, PointLike
from .point_set import PointSet

__all__ = [
    "Axis",
    "InvalidArgumentError",
    "KdTree",
    "KdTreeNode",
    "KdTreePointSet",
    "NaivePointSet",
    "Point",
    "PointLike",
    "PointSet",
    "PointSetError",
]
