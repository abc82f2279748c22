"""
Graph algorithms package for graphengine.

This package provides canonical textbook graph algorithms including:
- Graph data structures (Graph, Vertex, Edge, CostPathPair)
- Traversal algorithms (BFS, DFS)
- Shortest path algorithms (Dijkstra, Bellman-Ford)
- All-pairs shortest paths (Floyd-Warshall, Johnson)
- Minimum spanning trees (Prim, Kruskal)
- Maximum flow (Edmonds-Karp, push-relabel)
- Maximum matching and A* search
- Structural analysis (cycle detection, topological sort, components)

All algorithms follow vertex insertion order for reproducibility.
"""

from .allpairs import floyd_warshall, has_negative_diagonal, johnson, johnson_potentials
from .core import (
    INFINITY,
    CostPathPair,
    CostVertexPair,
    Edge,
    Graph,
    GraphCopy,
    GraphKind,
    Vertex,
)
from .flow import PushRelabelConfig, edmonds_karp, push_relabel
from .matching import MatchingResult, maximum_matching
from .mst import UnionFind, kruskal, prim
from .search import a_star, unit_heuristic, zero_heuristic
from .shortest import bellman_ford, dijkstra
from .structure import connected_components, has_cycle, topological_sort
from .traversal import bfs, dfs
from .utils import reconstruct_path

__all__ = [
    "INFINITY",
    "GraphKind",
    "Vertex",
    "Edge",
    "CostVertexPair",
    "CostPathPair",
    "GraphCopy",
    "Graph",
    "bfs",
    "dfs",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "has_negative_diagonal",
    "johnson",
    "johnson_potentials",
    "prim",
    "kruskal",
    "UnionFind",
    "edmonds_karp",
    "push_relabel",
    "PushRelabelConfig",
    "maximum_matching",
    "MatchingResult",
    "a_star",
    "zero_heuristic",
    "unit_heuristic",
    "has_cycle",
    "topological_sort",
    "connected_components",
    "reconstruct_path",
]

# Example usage:
# from graphengine.graphs import Graph, GraphKind, dijkstra
#
# G = Graph(GraphKind.DIRECTED)
# G.add_edge('A', 'B', 1)
# G.add_edge('B', 'C', 2)
# dijkstra(G, 'A', 'C').cost  # 3
