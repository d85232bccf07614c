"""Adjacency-list graphs with breadth-first search, paths and cycle finding."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path


class Graph:
    """A graph over vertices ``0 .. nvertices - 1`` stored as adjacency lists.

    Neighbours are kept newest first: the edge added last is visited first.
    """

    def __init__(self, nvertices: int, directed: bool = False) -> None:
        if nvertices < 0:
            raise ValueError("nvertices must not be negative")
        self.nvertices = nvertices
        self.directed = directed
        self.nedges = 0
        self._adjacency: list[deque[int]] = [deque() for _ in range(nvertices)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.nvertices:
            raise IndexError(f"vertex {v} out of range 0..{self.nvertices - 1}")

    def add_edge(self, x: int, y: int) -> None:
        """Add an edge from ``x`` to ``y``, and back again if undirected."""
        self._check(x)
        self._check(y)
        self._adjacency[x].appendleft(y)
        if not self.directed:
            self._adjacency[y].appendleft(x)
        self.nedges += 1

    def neighbors(self, v: int) -> list[int]:
        """Return the vertices adjacent to ``v``, newest edge first."""
        self._check(v)
        return list(self._adjacency[v])

    def degree(self, v: int) -> int:
        """Return the number of edge ends leaving ``v``."""
        self._check(v)
        return len(self._adjacency[v])

    def format(self) -> str:
        """Render one line per vertex: ``v :  n1 n2 ...``."""
        return "\n".join(
            f"{v} : " + "".join(f" {y}" for y in adjacent)
            for v, adjacent in enumerate(self._adjacency)
        )


@dataclass
class BFSResult:
    """What a breadth-first search saw: visit order, edges examined, tree parents."""

    order: list[int] = field(default_factory=list)
    edges: list[tuple[int, int]] = field(default_factory=list)
    parents: list[int | None] = field(default_factory=list)


def _tokens_as_ints(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def parse_graph(text: str, directed: bool = False) -> Graph:
    """Build a graph from ``n m`` followed by ``m`` pairs ``x y``."""
    numbers = _tokens_as_ints(text)

    def take() -> int:
        try:
            return next(numbers)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    nvertices, nedges = take(), take()
    if nedges < 0:
        raise ValueError(f"edge count must not be negative, got {nedges}")
    graph = Graph(nvertices, directed)
    for _ in range(nedges):
        x, y = take(), take()
        try:
            graph.add_edge(x, y)
        except IndexError as exc:
            raise ValueError(str(exc)) from None
    return graph


def bfs(graph: Graph, start: int) -> BFSResult:
    """Search breadth-first from ``start``.

    An edge is recorded when it is first examined; in an undirected graph
    each edge is therefore recorded once.
    """
    graph._check(start)
    result = BFSResult(parents=[None] * graph.nvertices)
    discovered = [False] * graph.nvertices
    processed = [False] * graph.nvertices
    queue = deque([start])
    discovered[start] = True
    while queue:
        v = queue.popleft()
        result.order.append(v)
        processed[v] = True
        for y in graph.neighbors(v):
            if not processed[y] or graph.directed:
                result.edges.append((v, y))
            if not discovered[y]:
                queue.append(y)
                discovered[y] = True
                result.parents[y] = v
    return result


def find_path(parents: Sequence[int | None], start: int, end: int) -> list[int]:
    """Follow ``parents`` back from ``end`` and return the path ``start .. end``."""
    path = [end]
    current: int | None = end
    while current != start:
        current = parents[current]
        if current is None:
            raise ValueError(f"vertex {start} is not an ancestor of {end}")
        path.append(current)
    path.reverse()
    return path


def find_cycle(graph: Graph, start: int) -> list[int] | None:
    """Search depth-first from ``start`` and return the first cycle met, or None.

    The cycle is given from the older vertex of the closing edge down the
    search tree to the vertex the edge leaves.
    """
    graph._check(start)
    discovered = [False] * graph.nvertices
    processed = [False] * graph.nvertices
    parents: list[int | None] = [None] * graph.nvertices

    discovered[start] = True
    stack = [(start, iter(graph.neighbors(start)))]
    while stack:
        v, pending = stack[-1]
        y = next(pending, None)
        if y is None:
            processed[v] = True
            stack.pop()
            continue
        if not discovered[y]:
            parents[y] = v
            discovered[y] = True
            stack.append((y, iter(graph.neighbors(y))))
        elif not processed[y] or graph.directed:
            if parents[v] != y:
                return find_path(parents, y, v)
        else:
            raise ValueError(f"unexpected edge ({v} {y}) to a finished vertex")
    return None


def main(argv: list[str] | None = None) -> int:
    """Read a graph and run a breadth-first search or a cycle search on it."""
    parser = argparse.ArgumentParser(
        prog="graph-search",
        description="Read 'n m' and m edges 'x y', print the graph and search it from vertex 0.",
    )
    parser.add_argument("input", nargs="?", default="-", help="input file, or - for stdin")
    parser.add_argument("--mode", choices=("bfs", "dfs"), default="bfs")
    parser.add_argument("--directed", action="store_true", help="treat edges as directed")
    parser.add_argument("--target", type=int, default=2, help="vertex to show a BFS path to")
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    try:
        graph = parse_graph(text, args.directed)
    except ValueError as exc:
        parser.error(str(exc))

    print(graph.format())
    if graph.nvertices == 0:
        return 0

    if args.mode == "bfs":
        print("start to BFS")
        result = bfs(graph, 0)
        by_source: dict[int, list[int]] = {}
        for x, y in result.edges:
            by_source.setdefault(x, []).append(y)
        for v in result.order:
            print(f"processed vertex {v}")
            for y in by_source.get(v, []):
                print(f"processed edge ({v} {y})")
        if 0 <= args.target < graph.nvertices:
            try:
                print(" ".join(map(str, find_path(result.parents, 0, args.target))))
            except ValueError:
                print("cannot find start value")
    else:
        print("start to DFS")
        try:
            cycle = find_cycle(graph, 0)
        except ValueError as exc:
            parser.error(str(exc))
        if cycle is None:
            print("no cycle found")
        else:
            print(f"Cycle from {cycle[0]} to {cycle[-1]} : " + " ".join(map(str, cycle)))
    return 0


if __name__ == "__main__":
    sys.exit(main())