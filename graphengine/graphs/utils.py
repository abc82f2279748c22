"""
Utility functions for graph algorithms.

Provides argument validation shared by every algorithm, vertex indexing, and
edge-path reconstruction.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..errors import InvalidGraphTypeError, InvalidWeightError, NullInputError
from ..logging import get_logger
from .core import Edge, Graph, GraphKind, Vertex, VertexLike

logger = get_logger(__name__)


def require_graph(graph: Optional[Graph]) -> Graph:
    """
    Ensure a graph argument is present.

    Raises:
        NullInputError: If graph is None.
    """
    if graph is None:
        raise NullInputError("Graph must be non-None.")
    return graph


def require_vertex(graph: Graph, vertex: Optional[VertexLike], role: str = "vertex") -> Vertex:
    """
    Resolve a vertex (or vertex value) against a graph.

    Args:
        graph: Graph the vertex must belong to.
        vertex: Vertex object or value.
        role: Name used in error messages ("source", "goal", ...).

    Raises:
        NullInputError: If vertex is None.
        UnknownVertexError: If vertex is not in graph.
    """
    if vertex is None:
        raise NullInputError(f"{role.capitalize()} must be non-None.")
    return graph.vertex(vertex)


def require_kind(graph: Graph, kind: GraphKind, algorithm: str) -> None:
    """
    Raises:
        InvalidGraphTypeError: If graph.kind differs from kind.
    """
    if graph.kind is not kind:
        raise InvalidGraphTypeError(
            f"{algorithm} requires a {kind.value} graph, got {graph.kind.value}."
        )


def check_non_negative(graph: Graph, algorithm: str) -> None:
    """
    Reject graphs with a negative edge cost.

    Raises:
        InvalidWeightError: Carrying the first negative edge found.
    """
    for e in graph.edge_list:
        if e.cost < 0:
            logger.debug("%s rejected negative edge %r", algorithm, e)
            raise InvalidWeightError(
                f"{algorithm} requires non-negative costs. "
                f"Found negative cost {e.cost} on {e!r}",
                edge=e,
            )


def vertex_index_map(vertices: Iterable[Vertex]) -> Tuple[Dict[Vertex, int], List[Vertex]]:
    """
    Map vertices to indices 0..n-1 in first-seen order.

    Duplicates are ignored, so the list gives the ordering used for
    indexing.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).
    """
    vertex_to_index: Dict[Vertex, int] = {}
    ordered: List[Vertex] = []
    for v in vertices:
        if v not in vertex_to_index:
            vertex_to_index[v] = len(ordered)
            ordered.append(v)
    return vertex_to_index, ordered


def reconstruct_path(parent: Dict[Vertex, Optional[Edge]], target: Vertex) -> Optional[List[Edge]]:
    """
    Rebuild the source-to-target edge path from a predecessor-edge map.

    ``parent[v]`` is the edge used to reach ``v`` (None for the source).

    Args:
        parent: Map vertex -> edge entering it on the best path found.
        target: Vertex to walk back from.

    Returns:
        Edges in source-to-target order (empty for the source itself), or
        None if target was never reached.

    Example:
        >>> # parent = {a: None, b: e_ab, c: e_bc}
        >>> # reconstruct_path(parent, c) == [e_ab, e_bc]
    """
    if target not in parent:
        return None

    path: List[Edge] = []
    seen = set()
    current = target
    while parent[current] is not None:
        if current in seen:
            # Only a negative cycle can loop the predecessor map
            return None
        seen.add(current)
        edge = parent[current]
        path.append(edge)
        current = edge.from_vertex

    path.reverse()
    return path
