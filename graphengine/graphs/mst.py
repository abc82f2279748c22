"""
Minimum spanning tree algorithms: Prim and Kruskal.

Kruskal uses a union-find data structure. Prim grows the tree from a start
vertex with a priority queue of crossing edges. Both require an undirected
graph with non-negative costs and refuse to return a forest: a graph that
cannot be spanned raises DisconnectedError.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
"""

import heapq
import itertools
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from ..cancellation import CancellationToken, check_token
from ..diagnostics import assert_spanning_tree, run_check
from ..errors import DisconnectedError
from ..logging import get_logger
from .core import CostPathPair, Edge, Graph, GraphKind, Vertex, VertexLike
from .utils import check_non_negative, require_graph, require_kind, require_vertex

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by size.

    Used by Kruskal's algorithm for efficient cycle detection.
    """

    def __init__(self, items: Iterable[Hashable] = ()):
        """
        Initialize union-find with a singleton set per item.

        Args:
            items: Iterable of hashable items.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.size: Dict[Hashable, int] = {}

        for item in items:
            self.add(item)

    def add(self, x: Hashable) -> None:
        """Add x as a singleton set (no-op if already present)."""
        if x not in self.parent:
            self.parent[x] = x
            self.size[x] = 1

    def find(self, x: Hashable) -> Hashable:
        """
        Find root of x with path compression.

        Raises:
            KeyError: If x was never added.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union sets containing x and y, attaching the smaller under the larger.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.size[root_x] < self.size[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        self.size[root_x] += self.size[root_y]
        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        return self.find(x) == self.find(y)

    def __len__(self) -> int:
        return len(self.parent)


def _spanning_result(graph: Graph, tree: List[Edge], algorithm: str) -> CostPathPair:
    result = CostPathPair.unordered(sum(e.cost for e in tree), tree)
    run_check(assert_spanning_tree, graph, tree)
    logger.debug("%s spanning tree: %d edges, cost %s", algorithm, len(tree), result.cost)
    return result


def prim(
    graph: Graph,
    start: VertexLike,
    *,
    token: Optional[CancellationToken] = None,
) -> CostPathPair:
    """
    Prim's algorithm for minimum spanning tree.

    Greedily adds the cheapest edge leaving the current tree. Candidate edges
    are keyed by (cost, insertion counter) so ties resolve in discovery order.

    Args:
        graph: Undirected Graph with non-negative costs.
        start: Vertex (or value) the tree grows from.
        token: Optional cancellation token, checked once per popped edge.

    Returns:
        Unordered CostPathPair of the |V| - 1 tree edges and their total cost.

    Raises:
        NullInputError: If graph or start is None.
        InvalidGraphTypeError: If graph is directed.
        InvalidWeightError: If an edge cost is negative.
        UnknownVertexError: If start is not in graph.
        DisconnectedError: If some vertex cannot be reached from start.

    Complexity: O(E log E) using binary heap.

    Example:
        >>> G = Graph(GraphKind.UNDIRECTED)
        >>> G.add_edge('A', 'B', 1)
        >>> G.add_edge('B', 'C', 2)
        >>> prim(G, 'A').cost
        3
    """
    require_graph(graph)
    require_kind(graph, GraphKind.UNDIRECTED, "Prim")
    origin = require_vertex(graph, start, "start")
    check_non_negative(graph, "Prim")

    visited = {origin}
    tree: List[Edge] = []
    counter = itertools.count()
    frontier: List[Tuple[int, int, Edge]] = []

    def push_crossing(v: Vertex) -> None:
        for e in v.edges:
            if e.to_vertex not in visited:
                heapq.heappush(frontier, (e.cost, next(counter), e))

    push_crossing(origin)
    while frontier and len(visited) < len(graph):
        check_token(token)
        _, _, e = heapq.heappop(frontier)
        if e.to_vertex in visited:
            continue
        visited.add(e.to_vertex)
        tree.append(e)
        push_crossing(e.to_vertex)

    if len(visited) < len(graph):
        unreached = [v for v in graph.vertices if v not in visited]
        logger.debug("Prim could not reach %d vertices", len(unreached))
        raise DisconnectedError(
            f"Graph is not connected: {len(unreached)} vertices unreachable from {origin!r}",
            unreached=unreached,
        )

    return _spanning_result(graph, tree, "Prim")


def kruskal(graph: Graph, *, token: Optional[CancellationToken] = None) -> CostPathPair:
    """
    Kruskal's algorithm for minimum spanning tree.

    Scans edges sorted by (cost, from index, to index) and keeps each edge
    that joins two different components.

    Args:
        graph: Undirected Graph with non-negative costs.
        token: Optional cancellation token, checked once per edge.

    Returns:
        Unordered CostPathPair of the tree edges; its cost equals Prim's on any
        connected graph.

    Raises:
        NullInputError: If graph is None.
        InvalidGraphTypeError: If graph is directed.
        InvalidWeightError: If an edge cost is negative.
        DisconnectedError: If the graph has more than one component.

    Complexity: O(E log E) for sorting and near-constant union-find operations.
    """
    require_graph(graph)
    require_kind(graph, GraphKind.UNDIRECTED, "Kruskal")
    check_non_negative(graph, "Kruskal")

    edges = sorted(
        graph.edge_list,
        key=lambda e: (e.cost, graph.index_of(e.from_vertex), graph.index_of(e.to_vertex)),
    )

    uf = UnionFind(graph.vertices)
    tree: List[Edge] = []
    target = max(len(graph) - 1, 0)

    for e in edges:
        if len(tree) == target:
            break
        check_token(token)
        if uf.union(e.from_vertex, e.to_vertex):
            tree.append(e)

    if len(tree) < target:
        root = uf.find(graph.vertices[0])
        unreached = [v for v in graph.vertices if uf.find(v) is not root]
        logger.debug("Kruskal left %d components", len(graph) - len(tree))
        raise DisconnectedError(
            f"Graph is not connected: spanning tree has {len(tree)} of {target} edges",
            unreached=unreached,
        )

    return _spanning_result(graph, tree, "Kruskal")
