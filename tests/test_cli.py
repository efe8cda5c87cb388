import pytest

from graphalgos.algorithms import bfs, dfs, dijkstra, kruskal, prim
from graphalgos.cli import main, sample_graph


def test_sample_graph_has_all_edges():
    g = sample_graph()
    assert g.num_vertices() == 6
    assert g.edge_count() == 8
    assert g.edge_weight(3, 5) == 5
    assert g.edge_weight(5, 3) == 5


def test_main_returns_zero_and_prints_title(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Graph Algorithms Demo\n\n")


def test_main_prints_every_section_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    headers = [
        "=== Original Graph ===",
        "=== BFS Tree from Vertex 0 ===",
        "=== DFS Tree from Vertex 0 ===",
        "=== Dijkstra's Shortest Paths from Vertex 0 ===",
        "=== Prim's Minimum Spanning Tree ===",
        "=== Kruskal's Minimum Spanning Tree ===",
    ]
    positions = [out.index(h) for h in headers]
    assert positions == sorted(positions)


def test_main_prints_rendered_results(capsys):
    main([])
    out = capsys.readouterr().out
    g = sample_graph()
    for result in (g, bfs(g, 0), dfs(g, 0), dijkstra(g, 0), prim(g), kruskal(g)):
        assert result.render() in out


def test_main_section_followed_by_blank_line(capsys):
    main([])
    out = capsys.readouterr().out
    expected = "=== Original Graph ===\n" + sample_graph().render() + "\n"
    assert expected in out


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2