# graphalgos

graphalgos stores weighted, undirected graphs as adjacency lists. It runs five
classic algorithms on them, and each algorithm returns a new `Graph` with the
same number of vertices:

- `bfs(graph, start)` returns the breadth-first search tree rooted at `start`.
- `dfs(graph, start)` returns the depth-first search tree rooted at `start`.
- `dijkstra(graph, start)` returns the tree of shortest paths from `start`.
  A vertex that cannot be reached from `start` has no edges in this tree.
- `prim(graph)` returns a minimum spanning tree grown from vertex 0.
- `kruskal(graph)` returns a minimum spanning forest. It is built by taking
  the lightest edges that do not close a cycle.

These functions are in `graphalgos.algorithms`. `bfs`, `dfs` and `dijkstra`
raise `IndexError` when `start` is not a vertex of the graph.

## The Graph class

`graphalgos.graph.Graph(n)` has the vertices `0 .. n-1` and starts with no edges.

- `add_edge(src, dest, weight=1)` adds an undirected edge. If the edge is
  already there, the call does nothing.
- `remove_edge(src, dest)` removes the edge if there is one.
- `has_edge(src, dest)` returns `True` or `False`.
- `edge_weight(src, dest)` returns the weight of the edge, or `0` if there is
  no such edge.
- `neighbors(vertex)` returns a tuple of `Neighbor(vertex, weight)` entries.
  The most recently added edge comes first.
- `num_vertices()` and `edge_count()` return the number of vertices and the
  number of undirected edges.
- `render()` returns the adjacency lists as text, one line per vertex, such as
  `Vertex 0: -> (2, 4) -> (1, 2)`. `str(graph)` returns the same text.

`add_edge`, `remove_edge` and `neighbors` raise `IndexError` for a vertex
outside `0 .. n-1`. For such a vertex, `has_edge` returns `False` and
`edge_weight` returns `0`.

## Data structures

`graphalgos.datastructures` has the small containers that the algorithms
use:

- `Queue(capacity)` and `Stack(capacity)` have a fixed capacity. `push`
  raises `OverflowError` when the container is full. `pop`, `peek` (on
  `Queue`) and `top` (on `Stack`) raise `IndexError` when it is empty. Both
  also have `is_full()` and `len()`.
- `PriorityQueue(capacity)` is a bounded min-heap with `insert(item, priority)`,
  `extract_min()` and `decrease_priority(item, new_priority)`, and supports
  `len()`.
- `UnionFind(n)` is a disjoint-set structure with `find(x)` and `unite(x, y)`.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from graphalgos.graph import Graph
from graphalgos.algorithms import dijkstra, kruskal

g = Graph(4)
g.add_edge(0, 1, 2)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 4)
g.add_edge(2, 3, 3)

tree = dijkstra(g, 0)
print(tree.render())

mst = kruskal(g)
print(mst.edge_count())      # 3
print(mst.has_edge(0, 2))    # False
```

## Command line

```
graphalgos
```

This command builds a sample graph with six vertices and prints its adjacency
list. It then prints the BFS, DFS, Dijkstra, Prim and Kruskal trees that the
algorithms build from it, starting from vertex 0. The command has no options
apart from `--help`. It cannot read a graph from a file or from the command
line. To run the algorithms on your own graphs, use the Python API. You can
get the same sample graph in Python from `graphalgos.cli.sample_graph()`.