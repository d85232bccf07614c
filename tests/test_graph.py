import pytest

from algokit.graph import (
    BFSResult,
    Graph,
    bfs,
    find_cycle,
    find_path,
    main,
    parse_graph,
)


def _path_graph(n):
    graph = Graph(n, directed=False)
    for v in range(n - 1):
        graph.add_edge(v, v + 1)
    return graph


def test_undirected_edge_appears_both_ways():
    graph = Graph(3, directed=False)
    graph.add_edge(0, 2)
    assert graph.neighbors(0) == [2]
    assert graph.neighbors(2) == [0]
    assert graph.nedges == 1


def test_directed_edge_one_way():
    graph = Graph(3, directed=True)
    graph.add_edge(0, 2)
    assert graph.neighbors(0) == [2]
    assert graph.neighbors(2) == []
    assert graph.nedges == 1


def test_neighbors_newest_first_and_degree():
    graph = Graph(4, directed=True)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(0, 3)
    assert graph.neighbors(0) == [3, 2, 1]
    assert graph.degree(0) == 3


def test_vertex_out_of_range():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.neighbors(-1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_format_lines():
    graph = Graph(3)
    graph.add_edge(0, 1)
    assert graph.format().splitlines() == ["0 :  1", "1 :  0", "2 : "]


def test_parse_graph_builds_edges():
    graph = parse_graph("3 2\n0 1\n1 2\n", directed=False)
    assert graph.nvertices == 3
    assert graph.nedges == 2
    assert sorted(graph.neighbors(1)) == [0, 2]


@pytest.mark.parametrize("text", ["", "3", "3 2\n0 1", "3 1\n0 x", "2 1\n0 5"])
def test_parse_graph_errors(text):
    with pytest.raises(ValueError):
        parse_graph(text)


def test_bfs_on_path_graph():
    result = bfs(_path_graph(4), 0)
    assert isinstance(result, BFSResult)
    assert result.order == [0, 1, 2, 3]
    assert result.parents == [None, 0, 1, 2]


def test_bfs_undirected_records_each_edge_once():
    graph = parse_graph("4 5\n0 1\n0 2\n1 2\n2 3\n1 3\n")
    result = bfs(graph, 0)
    assert len(result.edges) == graph.nedges
    assert {frozenset(e) for e in result.edges} == {
        frozenset((0, 1)), frozenset((0, 2)), frozenset((1, 2)),
        frozenset((2, 3)), frozenset((1, 3)),
    }


def test_bfs_leaves_unreachable_vertices_out():
    graph = Graph(3)
    graph.add_edge(0, 1)
    result = bfs(graph, 0)
    assert 2 not in result.order
    assert result.parents[2] is None


def test_bfs_paths_follow_edges():
    graph = parse_graph("5 5\n0 1\n0 2\n1 3\n2 3\n3 4\n")
    result = bfs(graph, 0)
    for v in range(5):
        path = find_path(result.parents, 0, v)
        assert path[0] == 0 and path[-1] == v
        for a, b in zip(path, path[1:]):
            assert b in graph.neighbors(a)


def test_find_path_same_vertex():
    assert find_path([None, 0], 1, 1) == [1]


def test_find_path_not_ancestor():
    with pytest.raises(ValueError):
        find_path([None, 0, None], 2, 1)


def test_find_cycle_none_in_tree():
    assert find_cycle(_path_graph(5), 0) is None


def test_find_cycle_triangle():
    graph = parse_graph("4 4\n0 1\n1 2\n2 0\n2 3\n")
    cycle = find_cycle(graph, 0)
    assert sorted(cycle) == [0, 1, 2]
    for a, b in zip(cycle, cycle[1:] + cycle[:1]):
        assert b in graph.neighbors(a)


def test_find_cycle_directed():
    graph = Graph(3, directed=True)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 0)
    assert find_cycle(graph, 0) == [0, 1, 2]


def test_main_bfs(tmp_path, capsys):
    data = tmp_path / "graph.txt"
    data.write_text("3 2\n0 1\n1 2\n")
    assert main([str(data)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "start to BFS" in out
    assert "processed vertex 0" in out
    assert "processed edge (0 1)" in out
    assert out[-1] == "0 1 2"


def test_main_dfs_reports_cycle(tmp_path, capsys):
    data = tmp_path / "graph.txt"
    data.write_text("3 3\n0 1\n1 2\n2 0\n")
    assert main([str(data), "--mode", "dfs"]) == 0
    out = capsys.readouterr().out
    assert "start to DFS" in out
    assert "Cycle from" in out


def test_main_rejects_bad_input(tmp_path):
    data = tmp_path / "graph.txt"
    data.write_text("3 2\n0 1\n")
    with pytest.raises(SystemExit):
        main([str(data)])