"""Invariant checks for graph algorithm results.

The checks only rely on the attributes of vertices and edges (``edges``,
``cost``, ``from_vertex``, ``to_vertex``), so they can run against results of
any algorithm in :mod:`graphengine.graphs`.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, Mapping, Optional, Sequence


def path_cost(edges: Iterable[Any]) -> int:
    """
    Sum the costs of a collection of edges.

    Parameters
    ----------
    edges:
        Iterable of Edge objects (tuple, frozenset, list).

    Returns
    -------
    int
        Total cost; 0 for an empty path.
    """
    return sum(e.cost for e in edges)


def assert_path_consistent(
    pair: Any,
    source: Optional[Any] = None,
    target: Optional[Any] = None,
) -> None:
    """
    Assert that a CostPathPair's cost matches its edges.

    For ordered paths each edge must start where the previous one ended, and
    the chain must run from ``source`` to ``target`` when those are given.

    Parameters
    ----------
    pair:
        CostPathPair to check.
    source, target:
        Optional expected endpoints of an ordered path.

    Raises
    ------
    ValueError
        If the cost or chain is inconsistent.
    """
    total = path_cost(pair.path)
    if pair.path and total != pair.cost:
        raise ValueError(
            f"Path cost {pair.cost} does not match sum of edge costs {total}."
        )
    if not isinstance(pair.path, tuple) or not pair.path:
        return

    edges = pair.path
    for prev, nxt in zip(edges, edges[1:]):
        if prev.to_vertex is not nxt.from_vertex:
            raise ValueError(f"Path is broken between {prev!r} and {nxt!r}.")
    if source is not None and edges[0].from_vertex is not source:
        raise ValueError(f"Path does not start at {source!r}.")
    if target is not None and edges[-1].to_vertex is not target:
        raise ValueError(f"Path does not end at {target!r}.")


def is_topological_order(graph: Any, order: Sequence[Any]) -> bool:
    """
    Check whether ``order`` lists every vertex once with each edge's source
    before its target.

    Parameters
    ----------
    graph:
        Directed Graph.
    order:
        Candidate ordering of the graph's vertices.

    Returns
    -------
    bool
        True if ``order`` is a topological order of ``graph``.
    """
    position: Dict[Any, int] = {}
    for i, v in enumerate(order):
        if v in position:
            return False
        position[v] = i
    if len(position) != len(graph.vertices):
        return False

    for e in graph.edge_list:
        if e.from_vertex not in position or e.to_vertex not in position:
            return False
        if position[e.from_vertex] >= position[e.to_vertex]:
            return False
    return True


def assert_topological_order(graph: Any, order: Sequence[Any]) -> None:
    """
    Assert that ``order`` is a topological order of ``graph``.

    Raises
    ------
    ValueError
        If any edge points backwards or vertices are missing or repeated.
    """
    if not is_topological_order(graph, order):
        raise ValueError("Ordering is not a topological order of the graph.")


def is_spanning_tree(graph: Any, edges: Iterable[Any]) -> bool:
    """
    Check whether ``edges`` form a spanning tree of ``graph``.

    A spanning tree has exactly ``|V| - 1`` edges, all taken from the graph,
    and joins every vertex without forming a cycle.

    Parameters
    ----------
    graph:
        Undirected Graph.
    edges:
        Candidate tree edges.

    Returns
    -------
    bool
        True if the edges form a spanning tree.
    """
    tree = list(edges)
    vertices = graph.vertices
    if len(tree) != max(len(vertices) - 1, 0):
        return False

    stored = set(graph.edge_list)
    parent: Dict[Hashable, Any] = {v: v for v in vertices}

    def find(v: Any) -> Any:
        while parent[v] is not v:
            parent[v] = parent[parent[v]]
            v = parent[v]
        return v

    for e in tree:
        if e not in stored:
            return False
        if e.from_vertex not in parent or e.to_vertex not in parent:
            return False
        ra, rb = find(e.from_vertex), find(e.to_vertex)
        if ra is rb:
            return False
        parent[ra] = rb
    return True


def assert_spanning_tree(graph: Any, edges: Iterable[Any]) -> None:
    """
    Assert that ``edges`` form a spanning tree of ``graph``.

    Raises
    ------
    ValueError
        If the edge set is not a spanning tree.
    """
    if not is_spanning_tree(graph, edges):
        raise ValueError("Edge set is not a spanning tree of the graph.")


def assert_symmetric_matching(mate: Mapping[Any, Any]) -> None:
    """
    Assert that a matching map is symmetric: ``mate[mate[v]] is v``.

    Raises
    ------
    ValueError
        If any vertex is matched to itself or the map is one-sided.
    """
    for v, m in mate.items():
        if m is v:
            raise ValueError(f"{v!r} is matched to itself.")
        if mate.get(m) is not v:
            raise ValueError(f"Matching is not symmetric at {v!r} -> {m!r}.")


def assert_non_negative_reweighting(graph: Any, potentials: Mapping[Any, int]) -> None:
    """
    Assert that every arc stays non-negative under ``w + h(u) - h(v)``.

    Parameters
    ----------
    graph:
        Graph whose arcs are reweighted.
    potentials:
        Vertex potentials h, typically Bellman-Ford distances from a
        connector vertex.

    Raises
    ------
    ValueError
        If some reweighted arc is negative.
    """
    for e in graph.arcs():
        reweighted = e.cost + potentials[e.from_vertex] - potentials[e.to_vertex]
        if reweighted < 0:
            raise ValueError(f"Reweighted cost of {e!r} is negative ({reweighted}).")
