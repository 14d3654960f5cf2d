from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .kdtree_node import Axis, KdTreeNode
from .logger import logger
from .point import PointLike, as_point_list
from .point_set import PointSet

SeedLike = Union[int, np.random.Generator, None]


class KdTree:
    @staticmethod
    def create(points: Sequence[PointLike]) -> KdTreeNode:
        """Build a tree by inserting points in the given order.

        The first point becomes the root. No rebalancing happens, so the
        shape depends entirely on the insertion order.
        """
        root = KdTreeNode(axis=Axis.X, location_point=points[0])
        for point in points[1:]:
            root = KdTree.insert(root, point, Axis.X)
        return root

    @staticmethod
    def insert(node: KdTreeNode | None, point: PointLike, axis: Axis) -> KdTreeNode:
        """Insert point below node and return the root of that subtree.

        Walks down to the first empty child slot, so tall trees (e.g. many
        coincident points) do not hit the recursion limit.

        Args:
            node: Root of the subtree, None for an empty slot.
            point: Point to insert.
            axis: Axis node splits on. Only used when node is None.

        Returns:
            node itself, or a new leaf when node is None.
        """
        if node is None:
            return KdTreeNode(axis=axis, location_point=point)

        coords = (point.x, point.y)
        current = node
        while True:
            # Equal coordinates go right.
            if coords[current.axis] < current.axis.coordinate(current.location_point):
                if current.left_child is None:
                    current.left_child = KdTreeNode(axis=current.axis.flip(), location_point=point)
                    return node
                current = current.left_child
            else:
                if current.right_child is None:
                    current.right_child = KdTreeNode(axis=current.axis.flip(), location_point=point)
                    return node
                current = current.right_child

    @staticmethod
    def search_nearest_neighbor(
        target: PointLike,
        best: KdTreeNode,
        node: KdTreeNode | None,
        visited_nodes: Optional[List[KdTreeNode]] = None,
    ) -> KdTreeNode:
        """Returns the node closest to target in the subtree, or best if none is closer.

        The near side of every node is searched before its far side. The far
        side is skipped unless the splitting line is strictly closer than the
        best point found by then.

        Args:
            target: Query point.
            best: Closest node found so far.
            node: Root of the subtree to search.
            visited_nodes: If given, every node examined is appended to it.
        """
        best_dist2 = best.location_point.distance_squared_to(target)

        # (node, squared distance to the parent's splitting line), None for near children.
        stack: List[Tuple[KdTreeNode, Optional[float]]] = []
        if node is not None:
            stack.append((node, None))

        while stack:
            current, plane_dist2 = stack.pop()
            if plane_dist2 is not None and not plane_dist2 < best_dist2:
                continue

            if visited_nodes is not None:
                visited_nodes.append(current)

            dist2 = current.location_point.distance_squared_to(target)
            if dist2 < best_dist2:
                best = current
                best_dist2 = dist2

            axis = current.axis
            delta = axis.coordinate(target) - axis.coordinate(current.location_point)

            if delta < 0:
                near_child, far_child = current.left_child, current.right_child
            else:
                near_child, far_child = current.right_child, current.left_child

            # The far side cannot hold anything closer than the splitting line
            # itself. It is pushed first so the whole near side is done before it.
            if far_child is not None:
                stack.append((far_child, delta * delta))
            if near_child is not None:
                stack.append((near_child, None))

        return best

    @staticmethod
    def height(node: KdTreeNode | None) -> int:
        result = 0
        stack = [(node, 1)] if node is not None else []
        while stack:
            current, depth = stack.pop()
            result = max(result, depth)
            for child in (current.left_child, current.right_child):
                if child is not None:
                    stack.append((child, depth + 1))
        return result


class KdTreePointSet(PointSet):
    """Nearest neighbor search with a 2D k-d tree.

    Queries take O(log N) on average when the points were inserted in random
    order, which ``create`` takes care of by default. Sorted or otherwise
    adversarial insertion orders degrade the tree towards a list and queries
    towards O(N); results stay correct either way.

    Construction and search walk the tree with loops and an explicit stack,
    so tall trees, such as many copies of one point, cost time but never
    recursion depth.
    """

    def __init__(self, points: Sequence[PointLike]):
        """Build the tree from points in the given order, without shuffling."""
        self._points: Tuple[PointLike, ...] = tuple(as_point_list(points))
        self._root = KdTree.create(self._points)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built k-d tree with %d points, height %d",
                len(self._points),
                KdTree.height(self._root),
            )

    @classmethod
    def create(
        cls,
        points: Sequence[PointLike],
        shuffle: bool = True,
        seed: SeedLike = None,
    ) -> KdTreePointSet:
        """Instantiate a KdTreePointSet, by default from a shuffled copy of points.

        Randomizing the order makes a spindly tree unlikely even when the
        input is sorted.

        Args:
            points: Non-empty points to store. The caller's sequence is left untouched.
            shuffle: Whether to permute the points before inserting them.
            seed: Seed or numpy Generator used for the permutation.

        Raises:
            InvalidArgumentError: points is None or empty.
        """
        points_list = as_point_list(points)
        if shuffle:
            rng = np.random.default_rng(seed)
            order = rng.permutation(len(points_list))
            points_list = [points_list[i] for i in order]
        return cls(points_list)

    @property
    def root(self) -> KdTreeNode:
        return self._root

    def height(self) -> int:
        return KdTree.height(self._root)

    def nearest(self, target: PointLike) -> PointLike:
        node = KdTree.search_nearest_neighbor(target, self._root, self._root)
        return node.location_point

    def nearest_with_stats(self, target: PointLike) -> Tuple[PointLike, int]:
        """Same as nearest, also returning how many nodes the search examined."""
        visited_nodes: List[KdTreeNode] = []
        node = KdTree.search_nearest_neighbor(target, self._root, self._root, visited_nodes)
        return node.location_point, len(visited_nodes)

    def all_points(self) -> Tuple[PointLike, ...]:
        return self._points
