import pytest

from graphalgos.algorithms import bfs, dfs, dijkstra, kruskal, prim
from graphalgos.graph import Graph


def create_sample_graph():
    g = Graph(6)
    g.add_edge(0, 1, 2)
    g.add_edge(0, 2, 4)
    g.add_edge(1, 2, 1)
    g.add_edge(1, 3, 7)
    g.add_edge(2, 4, 3)
    g.add_edge(3, 4, 1)
    g.add_edge(3, 5, 5)
    g.add_edge(4, 5, 7)
    return g


def adjacency_entries(g):
    return sum(len(g.neighbors(i)) for i in range(g.num_vertices()))


def edge_set(g):
    return {
        frozenset((u, n.vertex))
        for u in range(g.num_vertices())
        for n in g.neighbors(u)
    }


def total_weight(g):
    return sum(
        n.weight
        for u in range(g.num_vertices())
        for n in g.neighbors(u)
        if u < n.vertex
    )


def test_bfs_returns_connected_tree():
    tree = bfs(create_sample_graph(), 0)
    assert adjacency_entries(tree) >= tree.num_vertices() - 1


def test_dfs_returns_connected_tree():
    tree = dfs(create_sample_graph(), 0)
    assert adjacency_entries(tree) >= tree.num_vertices() - 1


def test_dijkstra_returns_valid_shortest_paths():
    tree = dijkstra(create_sample_graph(), 0)
    assert 1 in {n.vertex for n in tree.neighbors(0)}
    assert 2 in {n.vertex for n in tree.neighbors(1)}
    assert 4 in {n.vertex for n in tree.neighbors(2)}
    assert 3 in {n.vertex for n in tree.neighbors(4)}
    assert 5 in {n.vertex for n in tree.neighbors(3)}


def test_prim_returns_valid_mst():
    mst = prim(create_sample_graph())
    assert adjacency_entries(mst) // 2 == mst.num_vertices() - 1


def test_kruskal_returns_valid_mst():
    mst = kruskal(create_sample_graph())
    assert adjacency_entries(mst) // 2 == mst.num_vertices() - 1


def test_bfs_tree_edges_follow_adjacency_order():
    tree = bfs(create_sample_graph(), 0)
    assert edge_set(tree) == {
        frozenset(e) for e in [(0, 2), (0, 1), (2, 4), (1, 3), (4, 5)]
    }


def test_dfs_tree_edges_follow_adjacency_order():
    tree = dfs(create_sample_graph(), 0)
    assert edge_set(tree) == {
        frozenset(e) for e in [(0, 2), (2, 4), (4, 5), (5, 3), (3, 1)]
    }


def test_trees_keep_original_weights():
    g = create_sample_graph()
    for tree in (bfs(g, 0), dfs(g, 0), dijkstra(g, 0), prim(g), kruskal(g)):
        for u in range(tree.num_vertices()):
            for n in tree.neighbors(u):
                assert g.edge_weight(u, n.vertex) == n.weight


def test_dijkstra_tree_edges():
    tree = dijkstra(create_sample_graph(), 0)
    assert edge_set(tree) == {
        frozenset(e) for e in [(0, 1), (1, 2), (2, 4), (4, 3), (3, 5)]
    }


def test_kruskal_edges_and_weight():
    mst = kruskal(create_sample_graph())
    assert edge_set(mst) == {
        frozenset(e) for e in [(1, 2), (3, 4), (0, 1), (2, 4), (3, 5)]
    }
    assert total_weight(mst) == 12


def test_prim_and_kruskal_agree_on_weight():
    g = create_sample_graph()
    assert total_weight(prim(g)) == total_weight(kruskal(g))


def test_bfs_only_reaches_component():
    g = Graph(4)
    g.add_edge(0, 1, 3)
    g.add_edge(2, 3, 1)
    tree = bfs(g, 0)
    assert tree.edge_count() == 1
    assert tree.has_edge(0, 1)
    assert not tree.has_edge(2, 3)


def test_dfs_on_long_path_does_not_overflow_recursion():
    n = 5000
    g = Graph(n)
    for i in range(n - 1):
        g.add_edge(i, i + 1, 1)
    tree = dfs(g, 0)
    assert tree.edge_count() == n - 1


def test_kruskal_on_disconnected_graph_gives_forest():
    g = Graph(4)
    g.add_edge(0, 1, 3)
    g.add_edge(2, 3, 1)
    forest = kruskal(g)
    assert edge_set(forest) == {frozenset((0, 1)), frozenset((2, 3))}


def test_prim_on_empty_graph():
    assert prim(Graph(0)).num_vertices() == 0


def test_single_vertex_trees_have_no_edges():
    g = Graph(1)
    for tree in (bfs(g, 0), dfs(g, 0), dijkstra(g, 0), prim(g), kruskal(g)):
        assert tree.edge_count() == 0


@pytest.mark.parametrize("algorithm", [bfs, dfs, dijkstra])
@pytest.mark.parametrize("start", [-1, 6])
def test_invalid_start_raises(algorithm, start):
    with pytest.raises(IndexError):
        algorithm(create_sample_graph(), start)