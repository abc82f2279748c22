"""
All-pairs shortest path algorithms: Floyd-Warshall and Johnson.

Floyd-Warshall runs the dense dynamic program on a numpy cost matrix.
Johnson reweights the graph with Bellman-Ford potentials and then runs
Dijkstra from every vertex, which is faster on sparse graphs.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 25.2 (Floyd-Warshall) and 25.3 (Johnson).
"""

from typing import Dict, Mapping, Optional

import numpy as np

from ..cancellation import CancellationToken, check_token
from ..diagnostics import assert_non_negative_reweighting, run_check
from ..errors import NegativeCycleError
from ..logging import get_logger
from .core import INFINITY, CostPathPair, Edge, Graph, Vertex
from .shortest import bellman_ford, dijkstra
from .utils import require_graph, vertex_index_map

logger = get_logger(__name__)


class _Connector:
    """Value of the temporary vertex Johnson joins to every real vertex."""

    def __repr__(self) -> str:
        return "<connector>"


def floyd_warshall(
    graph: Graph, *, token: Optional[CancellationToken] = None
) -> Dict[Vertex, Dict[Vertex, int]]:
    """
    Floyd-Warshall algorithm for all-pairs shortest path costs.

    Handles negative edge costs but does not detect negative cycles: if one
    exists, some diagonal entry ends up negative and the result is invalid
    (see :func:`has_negative_diagonal`).

    Args:
        graph: Graph (undirected edges count in both directions).
        token: Optional cancellation token, checked once per intermediate
            vertex.

    Returns:
        Nested dict ``costs[u][v]`` holding the shortest cost for every
        reachable pair, including ``costs[u][u] == 0``.

    Raises:
        NullInputError: If graph is None.

    Complexity: O(n^3) where n is number of vertices.

    Example:
        >>> G = Graph(GraphKind.DIRECTED)
        >>> a, b, c = G.add_vertex('A'), G.add_vertex('B'), G.add_vertex('C')
        >>> G.add_edge(a, b, 1)
        >>> G.add_edge(b, c, 2)
        >>> floyd_warshall(G)[a][c]
        3
    """
    require_graph(graph)
    index, ordered = vertex_index_map(graph.vertices)
    n = len(ordered)

    sums = np.full((n, n), np.inf)
    np.fill_diagonal(sums, 0.0)
    for e in graph.arcs():
        i, j = index[e.from_vertex], index[e.to_vertex]
        if e.cost < sums[i, j]:
            sums[i, j] = e.cost

    for k in range(n):
        check_token(token)
        # inf + finite stays inf, so unreachable legs never produce a route
        via_k = sums[:, k : k + 1] + sums[k : k + 1, :]
        np.minimum(sums, via_k, out=sums)
    logger.debug("Floyd-Warshall finished %d x %d matrix", n, n)

    costs: Dict[Vertex, Dict[Vertex, int]] = {}
    for i, u in enumerate(ordered):
        row = sums[i]
        costs[u] = {ordered[j]: int(row[j]) for j in range(n) if np.isfinite(row[j])}
    return costs


def has_negative_diagonal(costs: Mapping[Vertex, Mapping[Vertex, int]]) -> bool:
    """Return True if some ``costs[v][v]`` is negative (a negative cycle exists)."""
    return any(row.get(v, 0) < 0 for v, row in costs.items())


def johnson_potentials(
    graph: Graph, *, token: Optional[CancellationToken] = None
) -> Dict[Vertex, int]:
    """
    Vertex potentials for Johnson reweighting.

    Adds a connector vertex with 0-cost arcs to every vertex of a directed
    copy and runs Bellman-Ford from it. ``h(v)`` is the resulting cost, so
    ``cost(u, v) + h(u) - h(v) >= 0`` for every arc.

    Raises:
        NullInputError: If graph is None.
        NegativeCycleError: If the graph has a negative cycle. ``edge`` is the
            original-graph arc that still improved.
    """
    require_graph(graph)
    work = graph.copy(as_directed=True)
    connector = work.graph.add_vertex(_Connector())
    for v in graph.vertices:
        work.graph.add_edge(connector, work.copies[v], 0)

    try:
        distances = bellman_ford(work.graph, connector, token=token)
    except NegativeCycleError as exc:
        edge = exc.edge
        if edge is not None and edge.from_vertex is not connector:
            edge = _original_arc(edge, work.originals)
        raise NegativeCycleError(str(exc), edge=edge) from exc

    return {v: distances[work.copies[v]].cost for v in graph.vertices}


def _original_arc(arc: Edge, originals: Mapping[Vertex, Vertex]) -> Edge:
    tail, head = originals[arc.from_vertex], originals[arc.to_vertex]
    # Reweighting shifts parallel arcs equally, so the cheapest one was used
    return min((e for e in tail.edges if e.to_vertex is head), key=lambda e: e.cost)


def johnson(
    graph: Graph, *, token: Optional[CancellationToken] = None
) -> Dict[Vertex, Dict[Vertex, CostPathPair]]:
    """
    Johnson's algorithm for all-pairs shortest paths.

    Computes potentials with :func:`johnson_potentials`, reweights every arc
    to ``cost + h(u) - h(v)`` on a fresh directed copy (the caller's graph is
    never touched), and runs Dijkstra from every vertex of the copy.

    Args:
        graph: Graph (may have negative costs).
        token: Optional cancellation token, forwarded to every inner run.

    Returns:
        Nested dict ``paths[u][v]`` of CostPathPair with original-graph costs
        and paths made of the original graph's edges. Unreachable pairs get
        INFINITY and an empty path.

    Raises:
        NullInputError: If graph is None.
        NegativeCycleError: If the graph has a negative cycle.

    Complexity: O(VE log V) plus the O(VE) Bellman-Ford pass.
    """
    require_graph(graph)
    h = johnson_potentials(graph, token=token)
    run_check(assert_non_negative_reweighting, graph, h)

    work = graph.copy(
        as_directed=True,
        cost=lambda e: e.cost + h[e.from_vertex] - h[e.to_vertex],
    )

    paths: Dict[Vertex, Dict[Vertex, CostPathPair]] = {}
    for u in graph.vertices:
        check_token(token)
        reweighted = dijkstra(work.graph, work.copies[u], token=token)
        row: Dict[Vertex, CostPathPair] = {}
        for copy_v, pair in reweighted.items():
            v = work.originals[copy_v]
            if pair.cost == INFINITY:
                row[v] = CostPathPair.unordered(INFINITY, ())
                continue
            edges = [_original_arc(e, work.originals) for e in pair.path]
            row[v] = CostPathPair.unordered(pair.cost - h[u] + h[v], edges)
        paths[u] = row

    logger.debug("Johnson computed %d single-source trees", len(paths))
    return paths
