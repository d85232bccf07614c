"""Depth-first analyses: articulation vertices, edge classes and topological order."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from algokit.graph import Graph

EdgeHook = Callable[[int, int, bool], None]
VertexHook = Callable[[int], None]


class EdgeType(Enum):
    """The class of an edge in a depth-first search tree."""

    TREE = "tree"
    BACK = "back"
    FORWARD = "forward"
    CROSS = "cross"


class NotADAGError(ValueError):
    """Raised when a directed graph holds a cycle and so has no topological order."""

    def __init__(self, edge: tuple[int, int]) -> None:
        self.edge = edge
        super().__init__(
            f"directed cycle found through edge ({edge[0]} {edge[1]}), not a DAG"
        )


@dataclass
class ArticulationReport:
    """Articulation vertices of one connected component, grouped by how they were found."""

    root: set[int] = field(default_factory=set)
    parent: set[int] = field(default_factory=set)
    bridge: set[int] = field(default_factory=set)

    @property
    def vertices(self) -> list[int]:
        """All articulation vertices, sorted."""
        return sorted(self.root | self.parent | self.bridge)


class _Search:
    """Bookkeeping shared by every depth-first search in this module."""

    def __init__(self, graph: Graph) -> None:
        n = graph.nvertices
        self.graph = graph
        self.discovered = [False] * n
        self.processed = [False] * n
        self.entry = [-1] * n
        self.exit = [-1] * n
        self.parents: list[int | None] = [None] * n
        self.time = 0

    def _enter(self, v: int, on_early: VertexHook | None) -> Iterator[int]:
        self.discovered[v] = True
        self.time += 1
        self.entry[v] = self.time
        if on_early is not None:
            on_early(v)
        return iter(self.graph.neighbors(v))

    def run(
        self,
        start: int,
        on_edge: EdgeHook,
        on_early: VertexHook | None = None,
        on_late: VertexHook | None = None,
    ) -> None:
        """Search from ``start``; ``on_edge`` gets ``(x, y, is_tree_edge)``."""
        stack = [(start, self._enter(start, on_early))]
        while stack:
            v, pending = stack[-1]
            y = next(pending, None)
            if y is None:
                stack.pop()
                if on_late is not None:
                    on_late(v)
                self.time += 1
                self.exit[v] = self.time
                self.processed[v] = True
                continue
            if not self.discovered[y]:
                self.parents[y] = v
                on_edge(v, y, True)
                stack.append((y, self._enter(y, on_early)))
            elif not self.processed[y] or self.graph.directed:
                on_edge(v, y, False)

    def classify(self, x: int, y: int, tree: bool) -> EdgeType:
        if tree:
            return EdgeType.TREE
        if not self.processed[y]:
            return EdgeType.BACK
        if self.entry[y] > self.entry[x]:
            return EdgeType.FORWARD
        return EdgeType.CROSS


def articulation_vertices(graph: Graph, start: int = 0) -> ArticulationReport:
    """Find the vertices whose removal disconnects the component holding ``start``."""
    if graph.directed:
        raise ValueError("articulation vertices are defined for undirected graphs")
    graph.degree(start)
    search = _Search(graph)
    reachable = list(range(graph.nvertices))
    tree_out_degree = [0] * graph.nvertices
    report = ArticulationReport()

    def on_early(v: int) -> None:
        reachable[v] = v

    def on_edge(x: int, y: int, tree: bool) -> None:
        if tree:
            tree_out_degree[x] += 1
            return
        if search.parents[x] == y:
            return
        if search.entry[y] < search.entry[reachable[x]]:
            reachable[x] = y

    def on_late(v: int) -> None:
        parent = search.parents[v]
        if parent is None:
            if tree_out_degree[v] > 1:
                report.root.add(v)
            return
        parent_is_root = search.parents[parent] is None
        if reachable[v] == parent and not parent_is_root:
            report.parent.add(parent)
        if reachable[v] == v:
            if not parent_is_root:
                report.bridge.add(parent)
            if tree_out_degree[v] > 0:
                report.bridge.add(v)
        if search.entry[reachable[v]] < search.entry[reachable[parent]]:
            reachable[parent] = reachable[v]

    search.run(start, on_edge, on_early, on_late)
    return report


def classify_edges(graph: Graph) -> list[tuple[int, int, EdgeType]]:
    """Search the whole graph depth-first and classify every edge once.

    Edges come in the order the search examines them. An undirected edge
    appears a single time, oriented from the vertex whose scan reaches it earlier.
    """
    search = _Search(graph)
    found: list[tuple[int, int, EdgeType]] = []

    def on_edge(x: int, y: int, tree: bool) -> None:
        if not graph.directed and not tree and search.parents[x] == y:
            return
        found.append((x, y, search.classify(x, y, tree)))

    for v in range(graph.nvertices):
        if not search.discovered[v]:
            search.run(v, on_edge)
    return found


def topological_sort(graph: Graph) -> list[int]:
    """Order the vertices of a directed acyclic graph so every edge points forward."""
    if not graph.directed:
        raise ValueError("topological sort needs a directed graph")
    search = _Search(graph)
    finished: list[int] = []

    def on_edge(x: int, y: int, tree: bool) -> None:
        if search.classify(x, y, tree) is EdgeType.BACK:
            raise NotADAGError((x, y))

    for v in range(graph.nvertices):
        if not search.discovered[v]:
            search.run(v, on_edge, on_late=finished.append)
    finished.reverse()
    return finished