"""Traversal, shortest-path and minimum-spanning-tree algorithms on a Graph."""

from __future__ import annotations

from collections.abc import Iterator

from graphalgos.datastructures import PriorityQueue, Queue, UnionFind
from graphalgos.graph import Graph, Neighbor

INFINITY = 10**9
"""Distance used for vertices not yet reached."""

_NO_PARENT = -1


def _check_start(graph: Graph, start: int) -> None:
    if not 0 <= start < graph.num_vertices():
        raise IndexError("Invalid vertex index")


def _relax(u: int, v: int, weight: int, dist: list[int], parent: list[int]) -> bool:
    """Shorten the distance to ``v`` through ``u`` if that is an improvement."""
    candidate = dist[u] + weight
    if dist[v] > candidate:
        dist[v] = candidate
        parent[v] = u
        return True
    return False


def _tree_from_parents(graph: Graph, parent: list[int], first: int) -> Graph:
    tree = Graph(graph.num_vertices())
    for vertex in range(first, graph.num_vertices()):
        up = parent[vertex]
        if up != _NO_PARENT:
            tree.add_edge(vertex, up, graph.edge_weight(vertex, up))
    return tree


def bfs(graph: Graph, start: int) -> Graph:
    """Breadth-first search tree of ``graph`` rooted at ``start``."""
    _check_start(graph, start)
    n = graph.num_vertices()
    tree = Graph(n)
    queue = Queue(n)
    visited = [False] * n

    visited[start] = True
    queue.push(start)
    while len(queue):
        current = queue.pop()
        for neighbor in graph.neighbors(current):
            if not visited[neighbor.vertex]:
                visited[neighbor.vertex] = True
                queue.push(neighbor.vertex)
                tree.add_edge(current, neighbor.vertex, neighbor.weight)
    return tree


def dfs(graph: Graph, start: int) -> Graph:
    """Depth-first search tree of ``graph`` rooted at ``start``."""
    _check_start(graph, start)
    n = graph.num_vertices()
    tree = Graph(n)
    visited = [False] * n

    visited[start] = True
    pending: list[tuple[int, Iterator[Neighbor]]] = [
        (start, iter(graph.neighbors(start)))
    ]
    while pending:
        current, remaining = pending[-1]
        for neighbor in remaining:
            if not visited[neighbor.vertex]:
                tree.add_edge(current, neighbor.vertex, neighbor.weight)
                visited[neighbor.vertex] = True
                pending.append(
                    (neighbor.vertex, iter(graph.neighbors(neighbor.vertex)))
                )
                break
        else:
            pending.pop()
    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Shortest-path tree of ``graph`` from ``start``."""
    _check_start(graph, start)
    n = graph.num_vertices()
    dist = [INFINITY] * n
    parent = [_NO_PARENT] * n
    visited = [False] * n
    dist[start] = 0

    queue = PriorityQueue(n)
    for vertex, distance in enumerate(dist):
        queue.insert(vertex, distance)

    while len(queue):
        u = queue.extract_min()
        visited[u] = True
        for neighbor in graph.neighbors(u):
            v = neighbor.vertex
            if not visited[v] and _relax(u, v, neighbor.weight, dist, parent):
                queue.decrease_priority(v, dist[v])

    return _tree_from_parents(graph, parent, 0)


def prim(graph: Graph) -> Graph:
    """Minimum spanning tree grown from vertex 0 by Prim's algorithm."""
    n = graph.num_vertices()
    if n == 0:
        return Graph(0)
    key = [INFINITY] * n
    parent = [_NO_PARENT] * n
    in_tree = [False] * n
    key[0] = 0

    queue = PriorityQueue(n)
    for vertex, value in enumerate(key):
        queue.insert(vertex, value)

    while len(queue):
        u = queue.extract_min()
        in_tree[u] = True
        for neighbor in graph.neighbors(u):
            v, weight = neighbor
            if not in_tree[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
                queue.decrease_priority(v, weight)

    return _tree_from_parents(graph, parent, 1)


def kruskal(graph: Graph) -> Graph:
    """Minimum spanning forest of ``graph`` by Kruskal's algorithm."""
    n = graph.num_vertices()
    edges = [
        (u, neighbor.vertex, neighbor.weight)
        for u in range(n)
        for neighbor in graph.neighbors(u)
        if u < neighbor.vertex
    ]
    edges.sort(key=lambda edge: edge[2])

    sets = UnionFind(n)
    tree = Graph(n)
    used = 0
    for u, v, weight in edges:
        if used >= n - 1:
            break
        if sets.find(u) != sets.find(v):
            tree.add_edge(u, v, weight)
            sets.unite(u, v)
            used += 1
    return tree