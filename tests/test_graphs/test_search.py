"""Tests for A* search."""

import pytest

from graphengine.cancellation import CancellationToken
from graphengine.diagnostics import debug_context
from graphengine.errors import InvalidWeightError, NullInputError, OperationCancelledError, UnknownVertexError
from graphengine.graphs import (
    CostPathPair,
    Graph,
    GraphKind,
    a_star,
    dijkstra,
    unit_heuristic,
    zero_heuristic,
)


class TestAStar:
    """Tests for A* search."""

    def test_undirected_direct_edge(self, undirected_graph):
        """Test the one-edge path to a pendant vertex."""
        G = undirected_graph
        result = a_star(G, 1, 8)
        assert result == CostPathPair.ordered(1, [G.edge(1, 8)])

    def test_directed_prefers_cheaper_detour(self, directed_graph):
        """Test that a three-edge route beats the expensive direct edge."""
        G = directed_graph
        result = a_star(G, 1, 8)
        assert result == CostPathPair.ordered(25, [G.edge(1, 3), G.edge(3, 6), G.edge(6, 8)])

    def test_unit_heuristic(self, directed_graph):
        """Test the constant-1 estimate finds the same path."""
        G = directed_graph
        assert a_star(G, 1, 8, unit_heuristic).cost == 25
        assert a_star(G, 1, 7, heuristic=unit_heuristic).cost == 36

    def test_matches_dijkstra(self, undirected_graph):
        """Test A* with the zero heuristic agrees with Dijkstra everywhere."""
        G = undirected_graph
        for v in G.vertices:
            assert a_star(G, 1, v).cost == dijkstra(G, 1, v).cost

    def test_custom_heuristic_called_with_goal(self, directed_graph):
        """Test the heuristic receives (vertex, goal)."""
        G = directed_graph
        goal = G.vertex(5)
        seen = []

        def estimate(vertex, target):
            seen.append(target)
            return 0

        assert a_star(G, 1, 5, estimate).cost == 20
        assert seen and all(t is goal for t in seen)

    def test_inconsistent_heuristic_reopens_closed_vertex(self):
        """Test an admissible but inconsistent estimate still yields the cheapest path."""
        G = Graph.from_edges(
            GraphKind.DIRECTED,
            ["S", "A", "B", "C", "G"],
            [("S", "A", 1), ("S", "B", 2), ("A", "C", 3), ("B", "C", 1), ("C", "G", 3)],
        )

        def overeager(vertex, goal):
            return 4 if vertex.value == "B" else 0

        result = a_star(G, "S", "G", overeager)
        assert result.cost == 6
        assert result == CostPathPair.ordered(6, [G.edge("S", "B"), G.edge("B", "C"), G.edge("C", "G")])
        assert result == dijkstra(G, "S", "G")

    def test_start_is_goal(self, directed_graph):
        """Test the empty path."""
        assert a_star(directed_graph, 4, 4) == CostPathPair.ordered(0, ())

    def test_unreachable_returns_none(self, directed_graph):
        """Test that no path gives None rather than an error."""
        assert a_star(directed_graph, 7, 1) is None

    def test_negative_cost_rejected(self, negative_graph):
        """Test negative costs."""
        with pytest.raises(InvalidWeightError):
            a_star(negative_graph, 1, 3)

    def test_bad_arguments(self, directed_graph):
        """Test argument validation."""
        with pytest.raises(NullInputError):
            a_star(directed_graph, None, 1)
        with pytest.raises(UnknownVertexError):
            a_star(directed_graph, 1, 99)

    def test_heuristics(self):
        """Test the built-in heuristics."""
        G = Graph(GraphKind.DIRECTED)
        a, b = G.add_vertex("a"), G.add_vertex("b")
        assert zero_heuristic(a, b) == 0
        assert unit_heuristic(a, b) == 1
        assert unit_heuristic(b, b) == 0

    def test_debug_mode(self, directed_graph):
        """Test the path consistency check in debug mode."""
        with debug_context(True):
            assert a_star(directed_graph, 1, 7).cost == 36

    def test_cancelled(self, directed_graph):
        """Test cancellation."""
        token = CancellationToken()
        token.cancel()
        with pytest.raises(OperationCancelledError):
            a_star(directed_graph, 1, 8, token=token)
