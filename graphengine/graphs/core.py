"""
Core graph data structures.

Provides the weighted Graph container together with its Vertex and Edge
objects and the two value types algorithms return (CostVertexPair,
CostPathPair). Vertices keep insertion order, which doubles as the
deterministic tie-break for every priority queue in the package.

An undirected edge is stored once in ``Graph.edge_list``. Its reverse
orientation is a graph-owned view placed in the far endpoint's adjacency, so
every algorithm that walks ``Graph.edges(vertex)`` sees it both ways.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Callable,
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from ..errors import NullInputError, UnknownVertexError

# Cost of an unreachable vertex
INFINITY = math.inf


class GraphKind(Enum):
    """Whether edges are one-way or traversable in both directions."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@dataclass(eq=False)
class Vertex:
    """
    Graph vertex: an opaque value plus its outgoing edges.

    Equality and hashing are by identity, so two vertices carrying the same
    value are still distinct map keys. Vertices are created through
    :meth:`Graph.add_vertex`; the graph fills ``edges``.

    Attributes:
        value: Hashable label.
        edges: Outgoing edges in insertion order. For undirected graphs this
            holds both orientations of every incident edge.
    """

    value: Hashable
    edges: List["Edge"] = field(default_factory=list, repr=False)

    def get_edge(self, to: "Vertex") -> Optional["Edge"]:
        """Return the first outgoing edge ending at ``to``, or None."""
        for e in self.edges:
            if e.to_vertex is to:
                return e
        return None

    def path_to(self, to: "Vertex") -> bool:
        """Return True if an outgoing edge ends at ``to``."""
        return self.get_edge(to) is not None

    def __repr__(self) -> str:
        return f"Vertex({self.value!r})"


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Weighted edge between two vertices.

    Edges are immutable. A directed edge equals another directed edge with the
    same cost, from-vertex and to-vertex. An undirected edge equals another
    undirected edge with the same cost and the same endpoint pair in either
    order, so ``6 -> 5`` and ``5 -> 6`` name the same undirected edge.

    Attributes:
        cost: Signed integer cost (or capacity).
        from_vertex: Tail vertex.
        to_vertex: Head vertex.
        undirected: True when the edge belongs to an undirected graph.
    """

    cost: int
    from_vertex: Vertex
    to_vertex: Vertex
    undirected: bool = False

    def __post_init__(self) -> None:
        if self.from_vertex is None or self.to_vertex is None:
            raise NullInputError("Both 'from' and 'to' vertices must be non-None.")

    def reversed(self) -> "Edge":
        """Return the same edge walked in the opposite direction."""
        return Edge(self.cost, self.to_vertex, self.from_vertex, self.undirected)

    def other(self, vertex: Vertex) -> Vertex:
        """
        Return the endpoint opposite ``vertex``.

        Raises:
            UnknownVertexError: If ``vertex`` is not an endpoint.
        """
        if vertex is self.from_vertex:
            return self.to_vertex
        if vertex is self.to_vertex:
            return self.from_vertex
        raise UnknownVertexError(f"{vertex!r} is not an endpoint of {self!r}")

    def _endpoints(self) -> Union[Tuple[Vertex, Vertex], FrozenSet[Vertex]]:
        if self.undirected:
            return frozenset((self.from_vertex, self.to_vertex))
        return (self.from_vertex, self.to_vertex)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.cost == other.cost
            and self.undirected == other.undirected
            and self._endpoints() == other._endpoints()
        )

    def __hash__(self) -> int:
        return hash((self.cost, self.undirected, self._endpoints()))

    def __repr__(self) -> str:
        arrow = "--" if self.undirected else "->"
        return (
            f"Edge({self.from_vertex.value!r} {arrow} {self.to_vertex.value!r}, "
            f"cost={self.cost})"
        )


@dataclass(eq=False)
class CostVertexPair:
    """
    Mutable (cost, vertex) priority-queue element.

    Ordered by cost ascending; ties fall back to the vertex insertion index so
    heap order never depends on hashing.
    """

    cost: float
    vertex: Vertex
    index: int = 0

    def sort_key(self) -> Tuple[float, int]:
        return (self.cost, self.index)

    def __lt__(self, other: "CostVertexPair") -> bool:
        return self.sort_key() < other.sort_key()

    def __le__(self, other: "CostVertexPair") -> bool:
        return self.sort_key() <= other.sort_key()


PathEdges = Union[Tuple[Edge, ...], FrozenSet[Edge]]


@dataclass(frozen=True)
class CostPathPair:
    """
    Immutable (total cost, edges) result.

    ``path`` is a tuple when order matters (point-to-point shortest paths,
    A*) and a frozenset for spanning trees and all-destination maps, so
    equality is order-sensitive or order-independent accordingly.
    """

    cost: float
    path: PathEdges

    def __post_init__(self) -> None:
        if self.path is None:
            raise NullInputError("path cannot be None.")
        if isinstance(self.path, list):
            object.__setattr__(self, "path", tuple(self.path))
        elif not isinstance(self.path, (tuple, frozenset)):
            raise TypeError("path must be a tuple (ordered) or frozenset (unordered).")

    @classmethod
    def ordered(cls, cost: float, edges: Iterable[Edge]) -> "CostPathPair":
        return cls(cost, tuple(edges))

    @classmethod
    def unordered(cls, cost: float, edges: Iterable[Edge]) -> "CostPathPair":
        return cls(cost, frozenset(edges))

    @property
    def is_ordered(self) -> bool:
        return isinstance(self.path, tuple)

    @property
    def reachable(self) -> bool:
        return self.cost != INFINITY


class GraphCopy(NamedTuple):
    """Deep copy of a graph plus vertex correspondences in both directions."""

    graph: "Graph"
    originals: Dict[Vertex, Vertex]
    copies: Dict[Vertex, Vertex]


VertexLike = Union[Vertex, Hashable]


class Graph:
    """
    Weighted graph with per-vertex adjacency lists.

    Supports directed and undirected graphs. Vertex order is insertion order
    and adjacency order is edge insertion order, which keeps every algorithm
    deterministic without sorting labels.

    Attributes:
        kind: GraphKind.DIRECTED or GraphKind.UNDIRECTED.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(1) amortized
        - edges(v): O(deg(v))
        - arcs: O(E)

    Example:
        >>> G = Graph(GraphKind.UNDIRECTED)
        >>> e = G.add_edge(1, 2, 7)
        >>> G.edge(2, 1).cost
        7
    """

    def __init__(self, kind: GraphKind = GraphKind.UNDIRECTED):
        if not isinstance(kind, GraphKind):
            raise TypeError(f"kind must be a GraphKind, got {kind!r}")
        self.kind = kind
        self._vertices: List[Vertex] = []
        self._edges: List[Edge] = []
        self._index: Dict[Vertex, int] = {}
        self._by_value: Dict[Hashable, Vertex] = {}

    @classmethod
    def from_edges(
        cls,
        kind: GraphKind,
        values: Iterable[Hashable],
        edges: Iterable[Tuple[Hashable, Hashable, int]],
    ) -> "Graph":
        """
        Build a graph from literal vertex values and ``(u, v, cost)`` triples.

        Args:
            kind: Graph kind.
            values: Vertex values in the desired insertion order.
            edges: ``(from_value, to_value, cost)`` triples.

        Returns:
            New Graph.
        """
        graph = cls(kind)
        for value in values:
            graph.add_vertex(value)
        for u, v, cost in edges:
            graph.add_edge(u, v, cost)
        return graph

    @property
    def directed(self) -> bool:
        return self.kind is GraphKind.DIRECTED

    @property
    def vertices(self) -> List[Vertex]:
        """Vertices in insertion order (a copy)."""
        return list(self._vertices)

    @property
    def edge_list(self) -> List[Edge]:
        """Edges exactly as added; an undirected edge appears once (a copy)."""
        return list(self._edges)

    def add_vertex(self, value: Hashable) -> Vertex:
        """
        Add a vertex carrying ``value``.

        Raises:
            NullInputError: If value is None.
            ValueError: If a vertex with this value already exists.
        """
        if value is None:
            raise NullInputError("Vertex value must be non-None.")
        if value in self._by_value:
            raise ValueError(f"Vertex {value!r} already in graph")
        vertex = Vertex(value)
        self._index[vertex] = len(self._vertices)
        self._vertices.append(vertex)
        self._by_value[value] = vertex
        return vertex

    def add_edge(self, u: VertexLike, v: VertexLike, cost: int = 0) -> Edge:
        """
        Add an edge from u to v.

        Values that are not yet vertices are added. For undirected graphs the
        reverse orientation is placed in v's adjacency list.

        Args:
            u: Source vertex or value.
            v: Target vertex or value.
            cost: Integer cost (may be negative).

        Returns:
            The stored Edge.
        """
        if not isinstance(cost, numbers.Integral) or isinstance(cost, bool):
            raise TypeError(f"Edge cost must be an integer, got {cost!r}")
        tail = self._resolve(u, create=True)
        head = self._resolve(v, create=True)

        edge = Edge(int(cost), tail, head, undirected=not self.directed)
        self._edges.append(edge)
        tail.edges.append(edge)
        if not self.directed and tail is not head:
            head.edges.append(edge.reversed())
        return edge

    def _resolve(self, item: VertexLike, create: bool = False) -> Vertex:
        if item is None:
            raise NullInputError("Vertex must be non-None.")
        if isinstance(item, Vertex):
            if item not in self._index:
                raise UnknownVertexError(f"{item!r} does not belong to this graph")
            return item
        if item in self._by_value:
            return self._by_value[item]
        if create:
            return self.add_vertex(item)
        raise UnknownVertexError(f"Vertex {item!r} not in graph")

    def vertex(self, value: VertexLike) -> Vertex:
        """
        Return the vertex for a value (vertices are returned unchanged).

        Raises:
            UnknownVertexError: If not in graph.
        """
        return self._resolve(value)

    def index_of(self, vertex: VertexLike) -> int:
        """Insertion index of a vertex."""
        return self._index[self._resolve(vertex)]

    def edges(self, vertex: VertexLike) -> List[Edge]:
        """
        Outgoing edges of a vertex in insertion order.

        Raises:
            UnknownVertexError: If vertex is not in graph.
        """
        return list(self._resolve(vertex).edges)

    def arcs(self) -> Iterator[Edge]:
        """
        Yield every traversable orientation: each directed edge once, each
        undirected edge in both directions (self-loops once).
        """
        for vertex in self._vertices:
            yield from vertex.edges

    def edge(self, u: VertexLike, v: VertexLike) -> Optional[Edge]:
        """Return the outgoing edge from u to v (oriented u -> v), or None."""
        return self._resolve(u).get_edge(self._resolve(v))

    def has_negative_edge(self) -> bool:
        return any(e.cost < 0 for e in self._edges)

    def copy(
        self,
        *,
        as_directed: bool = False,
        cost: Optional[Callable[[Edge], int]] = None,
    ) -> GraphCopy:
        """
        Deep-copy the graph into new, independent Vertex and Edge objects.

        Args:
            as_directed: Produce a directed copy. Undirected edges become two
                directed edges, one per orientation.
            cost: Optional function giving the copied cost of each original
                edge (or arc, with ``as_directed``). Defaults to the edge's
                own cost.

        Returns:
            GraphCopy with the clone and vertex maps (copy -> original and
            original -> copy).
        """
        if as_directed and not self.directed:
            clone = Graph(GraphKind.DIRECTED)
            source_edges: Sequence[Edge] = list(self.arcs())
        else:
            clone = Graph(self.kind)
            source_edges = self._edges

        copies: Dict[Vertex, Vertex] = {}
        for v in self._vertices:
            copies[v] = clone.add_vertex(v.value)
        for e in source_edges:
            weight = e.cost if cost is None else cost(e)
            clone.add_edge(copies[e.from_vertex], copies[e.to_vertex], weight)

        originals = {c: o for o, c in copies.items()}
        return GraphCopy(clone, originals, copies)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Vertex):
            return item in self._index
        try:
            return item in self._by_value
        except TypeError:
            return False

    def __repr__(self) -> str:
        return (
            f"Graph(kind={self.kind.value}, vertices={len(self._vertices)}, "
            f"edges={len(self._edges)})"
        )


__all__ = [
    "INFINITY",
    "GraphKind",
    "Vertex",
    "Edge",
    "CostVertexPair",
    "CostPathPair",
    "GraphCopy",
    "Graph",
]
