"""Pytest configuration and shared fixtures for graphengine tests.

This module provides:
- The reference undirected, directed and negative-cost graphs
- A small flow network with its capacity map
- An autouse fixture restoring the global debug flag after every test
"""

from typing import Dict, Generator

import pytest

from graphengine.diagnostics import is_debug_enabled, set_debug_enabled
from graphengine.graphs import Graph, GraphKind


@pytest.fixture(scope="function")
def undirected_graph() -> Graph:
    """Eight-vertex undirected graph; vertices 7 and 8 hang off vertex 1.

    Returns:
        Graph with vertices 1..8 inserted in order.
    """
    return Graph.from_edges(
        GraphKind.UNDIRECTED,
        range(1, 9),
        [
            (1, 2, 7),
            (1, 3, 9),
            (1, 6, 14),
            (2, 3, 10),
            (2, 4, 15),
            (3, 4, 11),
            (3, 6, 2),
            (5, 6, 9),
            (4, 5, 6),
            (1, 7, 1),
            (1, 8, 1),
        ],
    )


@pytest.fixture(scope="function")
def directed_graph() -> Graph:
    """Eight-vertex directed graph with non-negative costs."""
    return Graph.from_edges(
        GraphKind.DIRECTED,
        range(1, 9),
        [
            (1, 2, 7),
            (1, 3, 9),
            (1, 6, 14),
            (2, 3, 10),
            (2, 4, 15),
            (3, 4, 11),
            (3, 6, 2),
            (6, 5, 9),
            (6, 8, 14),
            (4, 5, 6),
            (4, 7, 16),
            (1, 8, 30),
        ],
    )


@pytest.fixture(scope="function")
def negative_graph() -> Graph:
    """Four-vertex directed graph with negative costs and no negative cycle."""
    return Graph.from_edges(
        GraphKind.DIRECTED,
        range(1, 5),
        [
            (1, 4, 2),
            (2, 1, 6),
            (2, 3, 3),
            (3, 1, 4),
            (3, 4, 5),
            (4, 2, -7),
            (4, 3, -3),
        ],
    )


@pytest.fixture(scope="function")
def flow_network() -> Dict[str, object]:
    """Seven-vertex network A..G whose maximum A -> G flow is 5.

    Returns:
        Dict with ``graph``, ``capacities`` ({Edge: int}), ``source`` and
        ``sink``.
    """
    arcs = [
        ("A", "D", 3),
        ("D", "F", 6),
        ("A", "B", 3),
        ("E", "B", 1),
        ("E", "G", 1),
        ("F", "G", 9),
        ("D", "E", 2),
        ("B", "C", 4),
        ("C", "A", 3),
        ("C", "D", 1),
        ("C", "E", 2),
    ]
    graph = Graph.from_edges(GraphKind.DIRECTED, "ABCDEFG", arcs)
    capacities = {e: e.cost for e in graph.edge_list}
    return {
        "graph": graph,
        "capacities": capacities,
        "source": graph.vertex("A"),
        "sink": graph.vertex("G"),
    }


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Generator[None, None, None]:
    """Auto-use fixture so a test toggling debug mode cannot leak it."""
    previous = is_debug_enabled()
    yield
    set_debug_enabled(previous)

