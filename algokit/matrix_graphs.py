"""Cycle detection, two-colouring and transitive closure on list and matrix graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _square_size(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    for row in matrix:
        if len(row) != n:
            raise ValueError("matrix must be square")
    return n


def has_cycle_undirected(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return whether an undirected graph, given as adjacency lists, holds a cycle.

    Each edge must appear in the lists of both its ends.
    """
    n = len(adjacency)
    visited = [False] * n
    parents: list[int | None] = [None] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        queue = deque([root])
        while queue:
            now = queue.popleft()
            for y in adjacency[now]:
                if visited[y]:
                    if parents[now] != y:
                        return True
                    continue
                visited[y] = True
                parents[y] = now
                queue.append(y)
    return False


def is_bipartite(matrix: Sequence[Sequence[int]]) -> bool:
    """Return whether the graph of an adjacency matrix can be coloured with two colours.

    A vertex linked to itself makes the graph not bipartite.
    """
    n = _square_size(matrix)
    if any(matrix[i][i] for i in range(n)):
        return False
    colour: list[int | None] = [None] * n
    for root in range(n):
        if colour[root] is not None:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            now = queue.popleft()
            for y, linked in enumerate(matrix[now]):
                if not linked:
                    continue
                if colour[y] is None:
                    colour[y] = 1 - colour[now]
                    queue.append(y)
                elif colour[y] == colour[now]:
                    return False
    return True


def transitive_closure(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the 0/1 reachability matrix; every vertex reaches itself."""
    n = _square_size(matrix)
    reach = [
        [bool(value) or i == j for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    for k in range(n):
        via = reach[k]
        for row in reach:
            if row[k]:
                row[:] = [a or b for a, b in zip(row, via)]
    return [[int(value) for value in row] for row in reach]