"""Minimum spanning tree weights by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

Weight = int
WeightMatrix = Sequence[Sequence["Weight | None"]]


class DisjointSet:
    """Union-find over ``0 .. size - 1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [1] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if they were already one."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._rank[x] < self._rank[y]:
            x, y = y, x
        self._parent[y] = x
        if self._rank[x] == self._rank[y]:
            self._rank[x] += 1
        return True


def _square_size(matrix: WeightMatrix) -> int:
    n = len(matrix)
    for row in matrix:
        if len(row) != n:
            raise ValueError("matrix must be square")
    return n


def kruskal_weight(matrix: WeightMatrix) -> int:
    """Return the total weight of a minimum spanning forest.

    ``matrix[i][j]`` is the weight of the undirected edge between ``i`` and
    ``j``, or None where there is no edge. Only the upper triangle is read.
    """
    n = _square_size(matrix)
    edges = sorted(
        (
            (matrix[i][j], i, j)
            for i in range(n)
            for j in range(i + 1, n)
            if matrix[i][j] is not None
        ),
        key=lambda edge: edge[0],
    )
    sets = DisjointSet(n)
    return sum(weight for weight, x, y in edges if sets.union(x, y))


def prim_weight(matrix: WeightMatrix) -> int:
    """Return the weight of a minimum spanning tree of the component holding vertex 0.

    The matrix has the same form as for :func:`kruskal_weight`.
    """
    n = _square_size(matrix)
    if n == 0:
        return 0
    in_tree = {0}
    heap = [(w, y) for y, w in enumerate(matrix[0]) if y != 0 and w is not None]
    heapq.heapify(heap)
    total = 0
    while heap:
        weight, y = heapq.heappop(heap)
        if y in in_tree:
            continue
        in_tree.add(y)
        total += weight
        for z, w in enumerate(matrix[y]):
            if w is not None and z not in in_tree:
                heapq.heappush(heap, (w, z))
    return total