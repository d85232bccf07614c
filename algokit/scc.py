"""Strongly connected components by Kosaraju's algorithm."""

from __future__ import annotations

from collections.abc import Sequence


def _finish_order(adjacency: Sequence[Sequence[int]], start: int, seen: list[bool], out: list[int]) -> None:
    seen[start] = True
    stack = [(start, iter(adjacency[start]))]
    while stack:
        v, pending = stack[-1]
        for y in pending:
            if not seen[y]:
                seen[y] = True
                stack.append((y, iter(adjacency[y])))
                break
        else:
            stack.pop()
            out.append(v)


def count_strongly_connected_components(adjacency: Sequence[Sequence[int]]) -> int:
    """Return the number of strongly connected components of a directed graph.

    ``adjacency[v]`` lists the vertices that ``v`` has edges to.
    """
    n = len(adjacency)
    for targets in adjacency:
        for y in targets:
            if not 0 <= y < n:
                raise ValueError(f"vertex {y} out of range 0..{n - 1}")

    seen = [False] * n
    finished: list[int] = []
    for v in range(n):
        if not seen[v]:
            _finish_order(adjacency, v, seen, finished)

    transposed: list[list[int]] = [[] for _ in range(n)]
    for x, targets in enumerate(adjacency):
        for y in targets:
            transposed[y].append(x)

    seen = [False] * n
    count = 0
    discard: list[int] = []
    for v in reversed(finished):
        if not seen[v]:
            _finish_order(transposed, v, seen, discard)
            count += 1
    return count