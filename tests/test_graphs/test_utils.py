"""Tests for graph utility functions."""

import pytest

from graphengine.errors import (
    InvalidGraphTypeError,
    InvalidWeightError,
    NullInputError,
    UnknownVertexError,
)
from graphengine.graphs import Graph, GraphKind, reconstruct_path
from graphengine.graphs.utils import (
    check_non_negative,
    require_graph,
    require_kind,
    require_vertex,
    vertex_index_map,
)


class TestValidation:
    """Tests for argument validation helpers."""

    def test_require_graph(self):
        """Test None graph is rejected."""
        with pytest.raises(NullInputError):
            require_graph(None)
        G = Graph()
        assert require_graph(G) is G

    def test_require_vertex(self):
        """Test vertex resolution by value and by object."""
        G = Graph()
        a = G.add_vertex("a")
        assert require_vertex(G, "a") is a
        assert require_vertex(G, a) is a
        with pytest.raises(NullInputError, match="Source"):
            require_vertex(G, None, "source")
        with pytest.raises(UnknownVertexError):
            require_vertex(G, "b")

    def test_require_kind(self):
        """Test graph kind check."""
        with pytest.raises(InvalidGraphTypeError, match="undirected"):
            require_kind(Graph(GraphKind.DIRECTED), GraphKind.UNDIRECTED, "Prim")
        require_kind(Graph(GraphKind.DIRECTED), GraphKind.DIRECTED, "Topological sort")

    def test_check_non_negative_reports_edge(self, negative_graph):
        """Test the offending edge travels with the error."""
        with pytest.raises(InvalidWeightError) as info:
            check_non_negative(negative_graph, "Dijkstra")
        assert info.value.edge.cost < 0
        assert isinstance(info.value, ValueError)


class TestIndexing:
    """Tests for vertex_index_map."""

    def test_first_seen_order(self):
        """Test indices follow first appearance and ignore duplicates."""
        G = Graph()
        a, b, c = G.add_vertex("a"), G.add_vertex("b"), G.add_vertex("c")
        index, ordered = vertex_index_map([c, a, c, b])
        assert ordered == [c, a, b]
        assert index == {c: 0, a: 1, b: 2}


class TestReconstructPath:
    """Tests for predecessor-edge path reconstruction."""

    def test_simple_chain(self):
        """Test a two-edge chain."""
        G = Graph(GraphKind.DIRECTED)
        e1 = G.add_edge("A", "B", 1)
        e2 = G.add_edge("B", "C", 1)
        a, b, c = G.vertices
        parent = {a: None, b: e1, c: e2}

        assert reconstruct_path(parent, c) == [e1, e2]
        assert reconstruct_path(parent, a) == []

    def test_unreached_target(self):
        """Test that a missing target gives None."""
        G = Graph(GraphKind.DIRECTED)
        a = G.add_vertex("A")
        d = G.add_vertex("D")
        assert reconstruct_path({a: None}, d) is None
