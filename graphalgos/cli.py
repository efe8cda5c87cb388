"""Command that runs every algorithm on a sample graph and prints the results."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from graphalgos.algorithms import bfs, dfs, dijkstra, kruskal, prim
from graphalgos.graph import Graph


def sample_graph() -> Graph:
    """The six-vertex weighted graph used by the demonstration."""
    graph = Graph(6)
    for src, dest, weight in [
        (0, 1, 2),
        (0, 2, 4),
        (1, 2, 1),
        (1, 3, 7),
        (2, 4, 3),
        (3, 4, 1),
        (3, 5, 5),
        (4, 5, 7),
    ]:
        graph.add_edge(src, dest, weight)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample graph and the trees each algorithm builds from it."""
    parser = argparse.ArgumentParser(
        prog="graphalgos",
        description="Demonstrate graph algorithms on a sample graph.",
    )
    parser.parse_args(argv)

    print("Graph Algorithms Demo\n")
    graph = sample_graph()
    sections = [
        ("Original Graph", graph),
        ("BFS Tree from Vertex 0", bfs(graph, 0)),
        ("DFS Tree from Vertex 0", dfs(graph, 0)),
        ("Dijkstra's Shortest Paths from Vertex 0", dijkstra(graph, 0)),
        ("Prim's Minimum Spanning Tree", prim(graph)),
        ("Kruskal's Minimum Spanning Tree", kruskal(graph)),
    ]
    for title, result in sections:
        print(f"=== {title} ===")
        print(result.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())