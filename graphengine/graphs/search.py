"""
A* heuristic search for a single source-to-goal path.

References:
    - Hart, Nilsson, Raphael. "A Formal Basis for the Heuristic Determination
      of Minimum Cost Paths", IEEE Trans. SSC 4(2), 1968.
"""

import heapq
from typing import Callable, Dict, List, Optional, Set, Tuple

from ..cancellation import CancellationToken, check_token
from ..diagnostics import assert_path_consistent, run_check
from ..logging import get_logger
from .core import CostPathPair, Edge, Graph, Vertex, VertexLike
from .utils import check_non_negative, reconstruct_path, require_graph, require_vertex

logger = get_logger(__name__)

Heuristic = Callable[[Vertex, Vertex], float]


def zero_heuristic(vertex: Vertex, goal: Vertex) -> int:
    """Constant 0 estimate; A* degenerates to uniform-cost search."""
    return 0


def unit_heuristic(vertex: Vertex, goal: Vertex) -> int:
    """
    Estimate 1 for every vertex except the goal.

    Admissible whenever every edge costs at least 1.
    """
    return 0 if vertex is goal else 1


def a_star(
    graph: Graph,
    start: VertexLike,
    goal: VertexLike,
    heuristic: Optional[Heuristic] = None,
    *,
    token: Optional[CancellationToken] = None,
) -> Optional[CostPathPair]:
    """
    A* search from start to goal.

    Keeps an open heap keyed by (f, vertex insertion index), a closed set,
    g and f score maps and a came-from edge map. The returned path is optimal
    when the heuristic never overestimates the remaining cost. A closed
    vertex reached again more cheaply is reopened, so the estimate need not
    be consistent.

    Args:
        graph: Graph with non-negative edge costs.
        start: Start vertex (or value).
        goal: Goal vertex (or value).
        heuristic: ``heuristic(vertex, goal)`` estimate of the remaining cost.
            Defaults to :func:`zero_heuristic`.
        token: Optional cancellation token, checked once per expansion.

    Returns:
        Ordered CostPathPair from start to goal, or None if goal is
        unreachable.

    Raises:
        NullInputError: If graph, start or goal is None.
        UnknownVertexError: If start or goal is not in graph.
        InvalidWeightError: If graph contains a negative edge cost.

    Example:
        >>> G = Graph(GraphKind.DIRECTED)
        >>> G.add_edge('A', 'B', 1)
        >>> G.add_edge('B', 'C', 2)
        >>> a_star(G, 'A', 'C').cost
        3
    """
    require_graph(graph)
    origin = require_vertex(graph, start, "start")
    target = require_vertex(graph, goal, "goal")
    check_non_negative(graph, "A*")
    estimate = heuristic if heuristic is not None else zero_heuristic

    g_score: Dict[Vertex, float] = {origin: 0}
    f_score: Dict[Vertex, float] = {origin: estimate(origin, target)}
    came_from: Dict[Vertex, Optional[Edge]] = {origin: None}
    closed: Set[Vertex] = set()
    open_heap: List[Tuple[float, int, Vertex]] = [
        (f_score[origin], graph.index_of(origin), origin)
    ]

    while open_heap:
        check_token(token)
        f, _, current = heapq.heappop(open_heap)
        if current in closed or f != f_score[current]:
            continue

        if current is target:
            result = CostPathPair.ordered(g_score[current], reconstruct_path(came_from, current))
            run_check(assert_path_consistent, result, origin, target)
            logger.debug("A* reached goal after expanding %d vertices", len(closed))
            return result

        closed.add(current)
        for e in current.edges:
            neighbour = e.to_vertex
            tentative = g_score[current] + e.cost
            if neighbour not in g_score or tentative < g_score[neighbour]:
                # An admissible but inconsistent estimate can close a vertex too early
                closed.discard(neighbour)
                came_from[neighbour] = e
                g_score[neighbour] = tentative
                f_score[neighbour] = tentative + estimate(neighbour, target)
                heapq.heappush(
                    open_heap, (f_score[neighbour], graph.index_of(neighbour), neighbour)
                )

    logger.debug("A* exhausted the open set without reaching %r", target)
    return None
