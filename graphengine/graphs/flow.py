"""
Maximum flow algorithms: Edmonds-Karp and push-relabel.

Both take a capacity map ``{Edge: int}`` plus source and sink vertices and
return the value of a maximum flow. Capacities of parallel edges between the
same ordered pair are summed; an undirected edge contributes its capacity in
both directions.

The map is keyed by Edge value, and two parallel edges with the same cost
are equal Edges, so they occupy a single key: building the map as
``{e: e.cost for e in graph.edge_list}`` keeps only one of them. Give such
edges distinct costs or fold their capacities into one entry.

References:
    - Edmonds, Karp. "Theoretical improvements in algorithmic efficiency for
      network flow problems", JACM 19(2), 1972.
    - Goldberg, Tarjan. "A new approach to the maximum-flow problem", JACM
      35(4), 1988.
"""

from __future__ import annotations

import numbers
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from ..cancellation import CancellationToken, check_token
from ..errors import InvalidFlowNetworkError, InvalidWeightError, NullInputError
from ..logging import get_logger
from .core import Edge, Vertex
from .utils import vertex_index_map

logger = get_logger(__name__)

Capacities = Mapping[Edge, int]


@dataclass(frozen=True)
class PushRelabelConfig:
    """
    Tuning knobs for :func:`push_relabel`.

    Args:
        global_relabel_interval: Number of relabel operations between two
            global relabels (reverse BFS height recomputation). None uses the
            number of vertices. Must be positive when given.
    """

    global_relabel_interval: Optional[int] = None


def _validate(capacities: Optional[Capacities], source: Optional[Vertex], sink: Optional[Vertex]) -> None:
    if capacities is None or len(capacities) == 0:
        raise NullInputError("Capacity map must be non-empty.")
    if source is None or sink is None:
        raise NullInputError("Source and sink must be non-None.")
    if source is sink:
        raise InvalidFlowNetworkError("Source and sink must be different vertices.")
    for e, capacity in capacities.items():
        if not isinstance(capacity, numbers.Integral):
            raise TypeError(f"Capacity of {e!r} must be an integer, got {capacity!r}")
        if capacity < 0:
            raise InvalidWeightError(f"Negative capacity {capacity} on {e!r}", edge=e)


def _pair_capacities(capacities: Capacities) -> Dict[Tuple[Vertex, Vertex], int]:
    pairs: Dict[Tuple[Vertex, Vertex], int] = {}
    for e, capacity in capacities.items():
        key = (e.from_vertex, e.to_vertex)
        pairs[key] = pairs.get(key, 0) + int(capacity)
        if e.undirected and e.from_vertex is not e.to_vertex:
            back = (e.to_vertex, e.from_vertex)
            pairs[back] = pairs.get(back, 0) + int(capacity)
    return pairs


def edmonds_karp(
    capacities: Capacities,
    source: Vertex,
    sink: Vertex,
    *,
    token: Optional[CancellationToken] = None,
) -> int:
    """
    Edmonds-Karp maximum flow (Ford-Fulkerson with BFS augmenting paths).

    Keeps dense numpy capacity and flow matrices. The flow matrix is
    skew-symmetric, so the residual capacity ``capacity - flow`` covers both
    unused forward capacity and cancellable reverse flow.

    Args:
        capacities: Map directed edge -> non-negative integer capacity.
        source: Source vertex.
        sink: Sink vertex.
        token: Optional cancellation token, checked once per augmentation.

    Returns:
        Value of a maximum flow (total flow out of the source).

    Raises:
        NullInputError: If the map is None/empty or source/sink is None.
        InvalidFlowNetworkError: If source is sink.
        InvalidWeightError: If a capacity is negative.

    Complexity: O(V E^2) augmentations bound; each BFS is O(V^2) on the
    dense matrix.
    """
    _validate(capacities, source, sink)
    pairs = _pair_capacities(capacities)

    endpoints = [v for pair in pairs for v in pair]
    index, ordered = vertex_index_map([source, sink, *endpoints])
    n = len(ordered)
    s, t = index[source], index[sink]

    capacity = np.zeros((n, n), dtype=np.int64)
    for (u, v), c in pairs.items():
        capacity[index[u], index[v]] += c
    flow = np.zeros((n, n), dtype=np.int64)

    total = 0
    augmentations = 0
    while True:
        check_token(token)
        parent = [-1] * n
        parent[s] = s
        queue = deque([s])
        while queue and parent[t] == -1:
            u = queue.popleft()
            for v in np.flatnonzero(capacity[u] - flow[u] > 0):
                if parent[v] == -1:
                    parent[v] = u
                    queue.append(v)

        if parent[t] == -1:
            break

        bottleneck = None
        v = t
        while v != s:
            u = parent[v]
            residual = int(capacity[u, v] - flow[u, v])
            bottleneck = residual if bottleneck is None else min(bottleneck, residual)
            v = u

        v = t
        while v != s:
            u = parent[v]
            flow[u, v] += bottleneck
            flow[v, u] -= bottleneck
            v = u

        total += bottleneck
        augmentations += 1
        logger.debug("Edmonds-Karp augmentation %d carried %d", augmentations, bottleneck)

    logger.debug("Edmonds-Karp max flow %d after %d augmentations", total, augmentations)
    return int(total)


@dataclass(eq=False)
class _FlowArc:
    head: "_FlowVertex"
    capacity: int
    flow: int = 0
    reverse: Optional["_FlowArc"] = None

    @property
    def residual(self) -> int:
        return self.capacity - self.flow


@dataclass(eq=False)
class _FlowVertex:
    vertex: Vertex
    height: int = 0
    excess: int = 0
    arcs: List[_FlowArc] = field(default_factory=list)
    current: int = 0


class _PushRelabel:
    """FIFO push-relabel state for a single call."""

    def __init__(self, pairs: Dict[Tuple[Vertex, Vertex], int], source: Vertex, sink: Vertex):
        self.nodes: Dict[Vertex, _FlowVertex] = {}
        for v in (source, sink):
            self._node(v)
        for (u, v), c in pairs.items():
            tail, head = self._node(u), self._node(v)
            forward = _FlowArc(head, c)
            backward = _FlowArc(tail, 0)
            forward.reverse, backward.reverse = backward, forward
            tail.arcs.append(forward)
            head.arcs.append(backward)

        self.source = self.nodes[source]
        self.sink = self.nodes[sink]
        self.n = len(self.nodes)
        self.queue: deque = deque()
        self.queued = set()
        self.relabels = 0

    def _node(self, v: Vertex) -> _FlowVertex:
        if v not in self.nodes:
            self.nodes[v] = _FlowVertex(v)
        return self.nodes[v]

    def enqueue(self, node: _FlowVertex) -> None:
        if node is self.source or node is self.sink or node in self.queued:
            return
        if node.excess > 0:
            self.queue.append(node)
            self.queued.add(node)

    def push(self, node: _FlowVertex, arc: _FlowArc) -> None:
        amount = min(node.excess, arc.residual)
        arc.flow += amount
        arc.reverse.flow -= amount
        node.excess -= amount
        arc.head.excess += amount
        self.enqueue(arc.head)

    def relabel(self, node: _FlowVertex) -> None:
        heights = [arc.head.height for arc in node.arcs if arc.residual > 0]
        if heights:
            node.height = min(heights) + 1
        node.current = 0
        self.relabels += 1

    def _reverse_bfs(self, root: _FlowVertex, base: int, labelled: set) -> None:
        root.height = base
        labelled.add(root)
        frontier = deque([root])
        while frontier:
            x = frontier.popleft()
            for arc in x.arcs:
                y = arc.head
                # y reaches x when the arc y -> x still has residual capacity
                if y not in labelled and arc.reverse.residual > 0:
                    y.height = x.height + 1
                    labelled.add(y)
                    frontier.append(y)

    def global_relabel(self) -> None:
        """Exact heights: distance to the sink, else n + distance to the source."""
        for node in self.nodes.values():
            node.height = 2 * self.n
            node.current = 0
        # The source keeps height n, so the sink search never relabels it
        labelled = {self.source}
        self._reverse_bfs(self.sink, 0, labelled)
        self._reverse_bfs(self.source, self.n, labelled)

    def discharge(self, node: _FlowVertex, interval: int) -> None:
        while node.excess > 0:
            if node.current == len(node.arcs):
                self.relabel(node)
                if self.relabels % interval == 0:
                    self.global_relabel()
                continue
            arc = node.arcs[node.current]
            if arc.residual > 0 and node.height == arc.head.height + 1:
                self.push(node, arc)
            else:
                node.current += 1

    def run(self, interval: int, token: Optional[CancellationToken]) -> int:
        self.source.height = self.n
        for arc in self.source.arcs:
            if arc.residual > 0:
                self.source.excess += arc.residual
                self.push(self.source, arc)
        self.global_relabel()

        while self.queue:
            check_token(token)
            node = self.queue.popleft()
            self.queued.discard(node)
            self.discharge(node, interval)

        logger.debug("Push-relabel finished with %d relabels", self.relabels)
        return self.sink.excess


def push_relabel(
    capacities: Capacities,
    source: Vertex,
    sink: Vertex,
    *,
    config: Optional[PushRelabelConfig] = None,
    token: Optional[CancellationToken] = None,
) -> int:
    """
    Goldberg-Tarjan push-relabel maximum flow with FIFO vertex selection.

    Saturates every source arc to build a preflow, then discharges active
    vertices in FIFO order: push along admissible arcs (residual > 0 and
    height exactly one above the head), relabel to one more than the lowest
    residual neighbour when none is left. Every ``global_relabel_interval``
    relabels the heights are recomputed by reverse BFS from the sink (and
    from the source for vertices that cannot reach the sink).

    Args:
        capacities: Map directed edge -> non-negative integer capacity.
        source: Source vertex.
        sink: Sink vertex.
        config: Optional PushRelabelConfig.
        token: Optional cancellation token, checked once per discharge.

    Returns:
        Value of a maximum flow (final excess at the sink).

    Raises:
        NullInputError: If the map is None/empty or source/sink is None.
        InvalidFlowNetworkError: If source is sink.
        InvalidWeightError: If a capacity is negative.
        ValueError: If config.global_relabel_interval is not positive.

    Complexity: O(V^3).
    """
    if config is None:
        config = PushRelabelConfig()
    if config.global_relabel_interval is not None and config.global_relabel_interval <= 0:
        raise ValueError("global_relabel_interval must be positive.")

    _validate(capacities, source, sink)
    state = _PushRelabel(_pair_capacities(capacities), source, sink)
    interval = config.global_relabel_interval or state.n
    return int(state.run(interval, token))
