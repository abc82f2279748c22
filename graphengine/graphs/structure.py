"""
Structural analysis: cycle detection, topological sort, connected components.
"""

from collections import deque
from typing import Dict, List, Optional, Set, Tuple

from ..cancellation import CancellationToken, check_token
from ..diagnostics import assert_topological_order, run_check
from ..errors import NotADagError
from ..logging import get_logger
from .core import Graph, GraphKind, Vertex
from .utils import require_graph, require_kind

logger = get_logger(__name__)


def has_cycle(graph: Graph, *, token: Optional[CancellationToken] = None) -> bool:
    """
    Detect a cycle in an undirected graph.

    Runs an iterative DFS from every unvisited vertex, consuming each edge in
    both directions when it is first walked. Reaching an already-visited
    vertex through an unconsumed edge closes a cycle. Self-loops and
    parallel edges are cycles.

    Args:
        graph: Undirected Graph.
        token: Optional cancellation token, checked once per component.

    Returns:
        True if any component contains a cycle.

    Raises:
        NullInputError: If graph is None.
        InvalidGraphTypeError: If graph is directed.

    Complexity: O(V + E).
    """
    require_graph(graph)
    require_kind(graph, GraphKind.UNDIRECTED, "Cycle detection")

    # Index stored edges so both orientations share one consumed flag
    incident: Dict[Vertex, List[Tuple[int, Vertex]]] = {v: [] for v in graph.vertices}
    for i, e in enumerate(graph.edge_list):
        incident[e.from_vertex].append((i, e.to_vertex))
        if e.to_vertex is not e.from_vertex:
            incident[e.to_vertex].append((i, e.from_vertex))

    visited: Set[Vertex] = set()
    consumed: Set[int] = set()
    for root in graph.vertices:
        if root in visited:
            continue
        check_token(token)
        visited.add(root)
        stack = [root]
        while stack:
            u = stack.pop()
            for i, v in incident[u]:
                if i in consumed:
                    continue
                consumed.add(i)
                if v in visited:
                    logger.debug("Cycle closed at %r", v)
                    return True
                visited.add(v)
                stack.append(v)
    return False


def topological_sort(
    graph: Graph,
    sinks_first: bool = False,
    *,
    token: Optional[CancellationToken] = None,
) -> List[Vertex]:
    """
    Topological order of a directed acyclic graph.

    Repeatedly peels vertices whose remaining out-degree is zero, lowering
    the out-degree of their predecessors. Degrees live in a local map; the
    graph is never modified.

    Args:
        graph: Directed Graph.
        sinks_first: Return the peeling order (every edge's target before its
            source) instead of the default source-first order.
        token: Optional cancellation token, checked once per peeled vertex.

    Returns:
        Every vertex exactly once. By default each edge's source precedes its
        target.

    Raises:
        NullInputError: If graph is None.
        InvalidGraphTypeError: If graph is undirected.
        NotADagError: If the graph has a directed cycle. ``remaining`` lists
            the vertices that could not be ordered.

    Complexity: O(V + E).

    Example:
        >>> G = Graph(GraphKind.DIRECTED)
        >>> G.add_edge('a', 'b')
        >>> [v.value for v in topological_sort(G)]
        ['a', 'b']
    """
    require_graph(graph)
    require_kind(graph, GraphKind.DIRECTED, "Topological sort")

    out_degree: Dict[Vertex, int] = {v: len(v.edges) for v in graph.vertices}
    predecessors: Dict[Vertex, List[Vertex]] = {v: [] for v in graph.vertices}
    for e in graph.edge_list:
        predecessors[e.to_vertex].append(e.from_vertex)

    ready = deque(v for v in graph.vertices if out_degree[v] == 0)
    order: List[Vertex] = []
    while ready:
        check_token(token)
        v = ready.popleft()
        order.append(v)
        for p in predecessors[v]:
            out_degree[p] -= 1
            if out_degree[p] == 0:
                ready.append(p)

    if len(order) < len(graph):
        remaining = [v for v in graph.vertices if out_degree[v] > 0]
        logger.debug("Topological sort stuck with %d vertices on cycles", len(remaining))
        raise NotADagError(
            f"Graph has a cycle; {len(remaining)} vertices cannot be ordered",
            remaining=remaining,
        )

    if not sinks_first:
        order.reverse()
    run_check(assert_topological_order, graph, order if not sinks_first else order[::-1])
    return order


def connected_components(graph: Graph) -> List[List[Vertex]]:
    """
    Group vertices joined by a chain of edges, ignoring edge direction.

    Vertices are taken in insertion order; each unlabelled one starts a new
    component grown by an explicit-stack DFS. Every edge links both of its
    endpoints, so directed graphs yield their weakly connected components
    and the grouping does not depend on insertion order.

    Args:
        graph: Graph of either kind.

    Returns:
        Components in discovery order, each listing vertices in discovery
        order.

    Raises:
        NullInputError: If graph is None.

    Complexity: O(V + E).
    """
    require_graph(graph)

    # Both endpoints see every edge, in edge insertion order
    neighbours: Dict[Vertex, List[Vertex]] = {v: [] for v in graph.vertices}
    for e in graph.edge_list:
        neighbours[e.from_vertex].append(e.to_vertex)
        if e.to_vertex is not e.from_vertex:
            neighbours[e.to_vertex].append(e.from_vertex)

    seen: Set[Vertex] = set()
    components: List[List[Vertex]] = []
    for root in graph.vertices:
        if root in seen:
            continue
        seen.add(root)
        component = [root]
        stack = [root]
        while stack:
            u = stack.pop()
            for v in neighbours[u]:
                if v not in seen:
                    seen.add(v)
                    component.append(v)
                    stack.append(v)
        components.append(component)
    return components
