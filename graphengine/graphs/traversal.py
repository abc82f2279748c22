"""
Graph traversal algorithms: BFS and DFS.

Both walk outgoing edges in adjacency (insertion) order, so results are
reproducible for a given construction order. DFS keeps an explicit stack of
edge iterators and never recurses, which keeps deep graphs off the Python
call stack while visiting vertices in the same order as the recursive form.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Dict, Iterator, List, Optional, Tuple

from .core import INFINITY, Edge, Graph, Vertex, VertexLike
from .utils import require_graph, require_vertex


def bfs(
    graph: Graph, source: VertexLike
) -> Tuple[List[Vertex], Dict[Vertex, float], Dict[Vertex, Optional[Vertex]]]:
    """
    Breadth-first search from a source vertex.

    Returns vertices in BFS visitation order, hop distances from source, and
    parent map for path reconstruction.

    Args:
        graph: Graph to traverse.
        source: Source vertex (or its value).

    Returns:
        Tuple of:
        - order: List of vertices in BFS visitation order
        - distance: Dictionary mapping vertex -> hop count (INFINITY if unreached)
        - parent: Dictionary mapping vertex -> parent vertex (None for source/unreached)

    Raises:
        NullInputError: If graph or source is None.
        UnknownVertexError: If source is not in graph.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph(GraphKind.DIRECTED)
        >>> G.add_edge('A', 'B')
        >>> G.add_edge('A', 'C')
        >>> order, dist, parent = bfs(G, 'A')
        >>> [v.value for v in order]
        ['A', 'B', 'C']
    """
    require_graph(graph)
    start = require_vertex(graph, source, "source")

    order: List[Vertex] = []
    distance: Dict[Vertex, float] = {v: INFINITY for v in graph.vertices}
    parent: Dict[Vertex, Optional[Vertex]] = {v: None for v in graph.vertices}

    distance[start] = 0
    queue = deque([start])

    while queue:
        u = queue.popleft()
        order.append(u)

        for e in u.edges:
            v = e.to_vertex
            if distance[v] == INFINITY:
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.append(v)

    return order, distance, parent


def dfs(
    graph: Graph, source: VertexLike
) -> Tuple[List[Vertex], List[Vertex], Dict[Vertex, Optional[Vertex]]]:
    """
    Depth-first search using an explicit stack.

    Returns pre-order and post-order visitation lists, plus parent map.
    The first unvisited neighbour is always explored first, exactly like the
    recursive formulation.

    Args:
        graph: Graph to traverse.
        source: Source vertex (or its value).

    Returns:
        Tuple of:
        - preorder: List of vertices in pre-order (when first discovered)
        - postorder: List of vertices in post-order (when finished exploring)
        - parent: Dictionary mapping vertex -> parent vertex (only for reached vertices)

    Raises:
        NullInputError: If graph or source is None.
        UnknownVertexError: If source is not in graph.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    require_graph(graph)
    start = require_vertex(graph, source, "source")

    preorder: List[Vertex] = [start]
    postorder: List[Vertex] = []
    parent: Dict[Vertex, Optional[Vertex]] = {start: None}
    visited = {start}
    stack: List[Tuple[Vertex, Iterator[Edge]]] = [(start, iter(start.edges))]

    while stack:
        u, pending = stack[-1]
        for e in pending:
            v = e.to_vertex
            if v not in visited:
                visited.add(v)
                preorder.append(v)
                parent[v] = u
                stack.append((v, iter(v.edges)))
                break
        else:
            # All neighbours explored
            stack.pop()
            postorder.append(u)

    return preorder, postorder, parent
