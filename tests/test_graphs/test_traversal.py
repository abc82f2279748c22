"""Tests for graph traversal algorithms."""

import pytest

from graphengine.errors import NullInputError, UnknownVertexError
from graphengine.graphs import INFINITY, Graph, GraphKind, bfs, dfs


@pytest.fixture
def small_digraph() -> Graph:
    """Directed graph 0..3 with a self-loop on 3."""
    return Graph.from_edges(
        GraphKind.DIRECTED,
        range(4),
        [(0, 1, 0), (0, 2, 0), (1, 2, 0), (2, 0, 0), (2, 3, 0), (3, 3, 0)],
    )


def values(vertices):
    return [v.value for v in vertices]


class TestBFS:
    """Tests for breadth-first search."""

    def test_bfs_from_two(self, small_digraph):
        """Test BFS visitation order from vertex 2."""
        order, dist, parent = bfs(small_digraph, 2)
        assert values(order) == [2, 0, 3, 1]
        assert dist[small_digraph.vertex(1)] == 2
        assert parent[small_digraph.vertex(1)] is small_digraph.vertex(0)

    def test_bfs_from_zero(self, small_digraph):
        """Test BFS visitation order from vertex 0."""
        order, dist, parent = bfs(small_digraph, 0)
        assert values(order) == [0, 1, 2, 3]
        assert dist[small_digraph.vertex(3)] == 2
        assert parent[small_digraph.vertex(0)] is None

    def test_bfs_unreachable(self):
        """Test unreachable vertices keep INFINITY distance."""
        G = Graph(GraphKind.DIRECTED)
        G.add_edge("A", "B")
        G.add_vertex("C")

        order, dist, parent = bfs(G, "A")
        assert values(order) == ["A", "B"]
        assert dist[G.vertex("C")] == INFINITY
        assert parent[G.vertex("C")] is None

    def test_bfs_undirected_walks_both_ways(self):
        """Test BFS over an undirected edge added in the other direction."""
        G = Graph(GraphKind.UNDIRECTED)
        G.add_edge("B", "A")
        order, _, _ = bfs(G, "A")
        assert values(order) == ["A", "B"]

    def test_bfs_bad_source(self, small_digraph):
        """Test BFS argument validation."""
        with pytest.raises(UnknownVertexError):
            bfs(small_digraph, 99)
        with pytest.raises(NullInputError):
            bfs(small_digraph, None)
        with pytest.raises(NullInputError):
            bfs(None, 0)


class TestDFS:
    """Tests for depth-first search."""

    def test_dfs_from_two(self, small_digraph):
        """Test DFS preorder from vertex 2."""
        pre, post, parent = dfs(small_digraph, 2)
        assert values(pre) == [2, 0, 1, 3]
        assert values(post) == [1, 0, 3, 2]
        assert parent[small_digraph.vertex(3)] is small_digraph.vertex(2)

    def test_dfs_from_zero(self, small_digraph):
        """Test DFS preorder from vertex 0."""
        pre, post, _ = dfs(small_digraph, 0)
        assert values(pre) == [0, 1, 2, 3]
        assert values(post) == [3, 2, 1, 0]

    def test_dfs_deep_chain_does_not_recurse(self):
        """Test DFS on a chain far deeper than the recursion limit."""
        n = 5000
        G = Graph.from_edges(
            GraphKind.DIRECTED, range(n), [(i, i + 1, 1) for i in range(n - 1)]
        )
        pre, post, _ = dfs(G, 0)
        assert len(pre) == n
        assert post[0].value == n - 1

    def test_dfs_unknown_source(self, small_digraph):
        """Test DFS with a vertex not in the graph."""
        with pytest.raises(UnknownVertexError):
            dfs(small_digraph, "missing")
