"""
Shortest path algorithms: Dijkstra and Bellman-Ford.

Dijkstra's algorithm for non-negative edge costs.
Bellman-Ford algorithm for signed edge costs (raises on negative cycles).

Both return a single ordered CostPathPair when a target is given, and a map
vertex -> CostPathPair (unordered paths) otherwise. Unreachable vertices get
INFINITY and an empty path in the map form.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

import heapq
from typing import Callable, Dict, List, Optional, Union

from ..cancellation import CancellationToken, check_token
from ..diagnostics import assert_path_consistent, run_check
from ..errors import DisconnectedError, NegativeCycleError
from ..logging import get_logger
from .core import INFINITY, CostPathPair, CostVertexPair, Edge, Graph, Vertex, VertexLike
from .utils import check_non_negative, reconstruct_path, require_graph, require_vertex

logger = get_logger(__name__)

ShortestPaths = Union[CostPathPair, Dict[Vertex, CostPathPair]]


def _collect(
    graph: Graph,
    source: Vertex,
    target: Optional[Vertex],
    cost_of: Callable[[Vertex], float],
    parent: Dict[Vertex, Optional[Edge]],
    algorithm: str,
) -> ShortestPaths:
    if target is not None:
        cost = cost_of(target)
        if cost == INFINITY:
            logger.debug("%s: %r unreachable from %r", algorithm, target, source)
            raise DisconnectedError(
                f"{target!r} is not reachable from {source!r}", unreached=[target]
            )
        result = CostPathPair.ordered(cost, reconstruct_path(parent, target))
        run_check(assert_path_consistent, result, source, target)
        return result

    paths: Dict[Vertex, CostPathPair] = {}
    for v in graph.vertices:
        edges = reconstruct_path(parent, v) or ()
        paths[v] = CostPathPair.unordered(cost_of(v), edges)
    return paths


def dijkstra(
    graph: Graph,
    source: VertexLike,
    target: Optional[VertexLike] = None,
    *,
    token: Optional[CancellationToken] = None,
) -> ShortestPaths:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Args:
        graph: Graph with non-negative edge costs.
        source: Source vertex (or value).
        target: Optional target. When given, the search stops as soon as the
            target is settled.
        token: Optional cancellation token, checked once per settled vertex.

    Returns:
        With target: ordered CostPathPair from source to target.
        Without target: dict vertex -> CostPathPair for every vertex.

    Raises:
        NullInputError: If graph or source is None.
        UnknownVertexError: If source or target is not in graph.
        InvalidWeightError: If graph contains a negative edge cost.
        DisconnectedError: If target is unreachable.

    Complexity: O((V + E) log V) using a binary heap.

    Example:
        >>> G = Graph(GraphKind.DIRECTED)
        >>> G.add_edge('A', 'B', 1)
        >>> G.add_edge('B', 'C', 2)
        >>> dijkstra(G, 'A', 'C').cost
        3
    """
    require_graph(graph)
    start = require_vertex(graph, source, "source")
    goal = require_vertex(graph, target, "target") if target is not None else None
    check_non_negative(graph, "Dijkstra")

    costs: Dict[Vertex, CostVertexPair] = {}
    frontier: List[CostVertexPair] = []
    for i, v in enumerate(graph.vertices):
        pair = CostVertexPair(0 if v is start else INFINITY, v, i)
        costs[v] = pair
        frontier.append(CostVertexPair(pair.cost, v, i))
    heapq.heapify(frontier)

    parent: Dict[Vertex, Optional[Edge]] = {start: None}
    settled = set()

    while frontier:
        check_token(token)
        entry = heapq.heappop(frontier)
        u = entry.vertex
        # Stale heap entries are skipped instead of decreasing keys in place
        if u in settled or entry.cost != costs[u].cost:
            continue
        if entry.cost == INFINITY:
            break
        settled.add(u)
        if u is goal:
            break

        for e in u.edges:
            v = e.to_vertex
            if v in settled:
                continue
            candidate = entry.cost + e.cost
            if candidate < costs[v].cost:
                costs[v].cost = candidate
                parent[v] = e
                heapq.heappush(frontier, CostVertexPair(candidate, v, costs[v].index))

    logger.debug("Dijkstra settled %d of %d vertices", len(settled), len(graph))
    return _collect(graph, start, goal, lambda v: costs[v].cost, parent, "Dijkstra")


def bellman_ford(
    graph: Graph,
    source: VertexLike,
    target: Optional[VertexLike] = None,
    *,
    token: Optional[CancellationToken] = None,
) -> ShortestPaths:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Relaxes every arc for up to |V| - 1 passes, then runs one more detection
    pass; any arc that still improves a cost lies on a negative cycle.
    Undirected edges are relaxed in both directions, so a negative undirected
    edge is itself a negative cycle.

    Args:
        graph: Graph (may have negative costs).
        source: Source vertex (or value).
        target: Optional target vertex (or value).
        token: Optional cancellation token, checked once per pass.

    Returns:
        With target: ordered CostPathPair from source to target.
        Without target: dict vertex -> CostPathPair for every vertex.

    Raises:
        NullInputError: If graph or source is None.
        UnknownVertexError: If source or target is not in graph.
        NegativeCycleError: If a negative cycle is reachable from source. The
            error's ``edge`` is the arc that still improved.
        DisconnectedError: If target is unreachable.

    Complexity: O(VE) where V is vertices and E is edges.
    """
    require_graph(graph)
    start = require_vertex(graph, source, "source")
    goal = require_vertex(graph, target, "target") if target is not None else None

    costs: Dict[Vertex, float] = {v: INFINITY for v in graph.vertices}
    costs[start] = 0
    parent: Dict[Vertex, Optional[Edge]] = {start: None}
    arcs = list(graph.arcs())

    passes = 0
    for passes in range(1, len(graph)):
        check_token(token)
        changed = False
        for e in arcs:
            u, v = e.from_vertex, e.to_vertex
            if costs[u] == INFINITY:
                continue
            candidate = costs[u] + e.cost
            if candidate < costs[v]:
                costs[v] = candidate
                parent[v] = e
                changed = True
        if not changed:
            break
    logger.debug("Bellman-Ford ran %d relaxation passes", passes)

    for e in arcs:
        u, v = e.from_vertex, e.to_vertex
        if costs[u] != INFINITY and costs[u] + e.cost < costs[v]:
            logger.debug("Bellman-Ford found negative cycle through %r", e)
            raise NegativeCycleError(
                f"Graph contains a negative cycle reachable from {start!r} (via {e!r})",
                edge=e,
            )

    return _collect(graph, start, goal, costs.__getitem__, parent, "Bellman-Ford")
