"""Tests for maximum flow algorithms."""

import pytest

from graphengine.cancellation import CancellationToken
from graphengine.errors import (
    InvalidFlowNetworkError,
    InvalidWeightError,
    NullInputError,
    OperationCancelledError,
)
from graphengine.graphs import Edge, Graph, GraphKind, PushRelabelConfig, edmonds_karp, push_relabel

ALGORITHMS = [edmonds_karp, push_relabel]


def network(arcs, kind=GraphKind.DIRECTED):
    """Build a graph plus the capacity map taken from its edge costs."""
    graph = Graph(kind)
    for u, v, c in arcs:
        graph.add_edge(u, v, c)
    return graph, {e: e.cost for e in graph.edge_list}


@pytest.mark.parametrize("max_flow", ALGORITHMS)
class TestMaxFlowValues:
    """Known max-flow values shared by both algorithms."""

    def test_reference_network(self, max_flow, flow_network):
        """Test the seven-vertex A..G network."""
        value = max_flow(
            flow_network["capacities"], flow_network["source"], flow_network["sink"]
        )
        assert value == 5

    def test_single_reverse_edge(self, max_flow):
        """Test that capacity only counts in its own direction."""
        G, caps = network([(1, 0, 10)])
        v0, v1 = G.vertex(0), G.vertex(1)
        assert max_flow(caps, v0, v1) == 0
        assert max_flow(caps, v1, v0) == 10

    def test_diamond_with_cross_edge(self, max_flow):
        """Test a diamond whose cross edge is a trap for naive augmenting."""
        G, caps = network(
            [(0, 1, 1000), (0, 2, 1000), (1, 3, 1000), (2, 3, 1000), (1, 2, 1)]
        )
        assert max_flow(caps, G.vertex(0), G.vertex(3)) == 2000

    def test_six_vertex_network(self, max_flow):
        """Test a six-vertex network limited by the sink's in-capacity."""
        G, caps = network(
            [
                (0, 1, 3),
                (0, 3, 3),
                (1, 3, 2),
                (1, 2, 3),
                (3, 4, 2),
                (4, 5, 3),
                (2, 4, 4),
                (2, 5, 2),
            ]
        )
        assert max_flow(caps, G.vertex(0), G.vertex(5)) == 5

    def test_push_relabel_reference(self, max_flow):
        """Test the four-vertex network with opposing arcs between 2 and 3."""
        G, caps = network(
            [(1, 2, 3), (1, 3, 5), (3, 2, 3), (2, 3, 2), (2, 4, 7), (3, 4, 1)]
        )
        assert max_flow(caps, G.vertex(1), G.vertex(4)) == 7

    def test_parallel_capacities_sum(self, max_flow):
        """Test that parallel edges between the same pair add up."""
        G, caps = network([("s", "t", 3), ("s", "t", 4)])
        assert len(caps) == 2
        assert max_flow(caps, G.vertex("s"), G.vertex("t")) == 7

    def test_equal_parallel_edges_share_a_key(self, max_flow):
        """Test equal parallel edges collapse to one map entry unless folded."""
        G, caps = network([("s", "t", 3), ("s", "t", 3)])
        s, t = G.vertex("s"), G.vertex("t")
        assert len(G.edge_list) == 2
        assert len(caps) == 1
        assert max_flow(caps, s, t) == 3

        folded = {G.edge_list[0]: sum(e.cost for e in G.edge_list)}
        assert max_flow(folded, s, t) == 6

    def test_undirected_edge_carries_both_ways(self, max_flow):
        """Test an undirected edge contributes capacity in both directions."""
        G, caps = network([("A", "B", 5)], kind=GraphKind.UNDIRECTED)
        assert max_flow(caps, G.vertex("B"), G.vertex("A")) == 5

    def test_source_without_edges(self, max_flow):
        """Test a source with no outgoing capacity."""
        G, caps = network([("A", "B", 5)])
        lonely = G.add_vertex("Z")
        assert max_flow(caps, lonely, G.vertex("B")) == 0

    def test_zero_capacity(self, max_flow):
        """Test zero capacities carry nothing."""
        G, caps = network([("s", "a", 0), ("a", "t", 4)])
        assert max_flow(caps, G.vertex("s"), G.vertex("t")) == 0

    def test_returns_int(self, max_flow, flow_network):
        """Test that the result is a plain int."""
        value = max_flow(
            flow_network["capacities"], flow_network["source"], flow_network["sink"]
        )
        assert type(value) is int


@pytest.mark.parametrize("max_flow", ALGORITHMS)
class TestMaxFlowValidation:
    """Argument validation shared by both algorithms."""

    def test_empty_capacities(self, max_flow):
        """Test None or empty capacity maps."""
        G = Graph(GraphKind.DIRECTED)
        a, b = G.add_vertex("a"), G.add_vertex("b")
        with pytest.raises(NullInputError):
            max_flow({}, a, b)
        with pytest.raises(NullInputError):
            max_flow(None, a, b)

    def test_none_endpoints(self, max_flow, flow_network):
        """Test None source or sink."""
        with pytest.raises(NullInputError):
            max_flow(flow_network["capacities"], None, flow_network["sink"])

    def test_source_is_sink(self, max_flow, flow_network):
        """Test source equal to sink."""
        s = flow_network["source"]
        with pytest.raises(InvalidFlowNetworkError):
            max_flow(flow_network["capacities"], s, s)
        with pytest.raises(ValueError):
            max_flow(flow_network["capacities"], s, s)

    def test_negative_capacity(self, max_flow):
        """Test negative capacities are rejected with their edge."""
        G = Graph(GraphKind.DIRECTED)
        e = G.add_edge("s", "t", 1)
        with pytest.raises(InvalidWeightError) as info:
            max_flow({e: -1}, G.vertex("s"), G.vertex("t"))
        assert info.value.edge is e

    def test_cancelled(self, max_flow, flow_network):
        """Test a fired token stops the run."""
        token = CancellationToken()
        token.cancel()
        with pytest.raises(OperationCancelledError):
            max_flow(
                flow_network["capacities"],
                flow_network["source"],
                flow_network["sink"],
                token=token,
            )


class TestPushRelabelConfig:
    """Tests for push-relabel configuration."""

    def test_frequent_global_relabel(self, flow_network):
        """Test that relabel frequency does not change the value."""
        for interval in (1, 2, 100):
            config = PushRelabelConfig(global_relabel_interval=interval)
            value = push_relabel(
                flow_network["capacities"],
                flow_network["source"],
                flow_network["sink"],
                config=config,
            )
            assert value == 5

    def test_invalid_interval(self, flow_network):
        """Test a non-positive interval."""
        with pytest.raises(ValueError):
            push_relabel(
                flow_network["capacities"],
                flow_network["source"],
                flow_network["sink"],
                config=PushRelabelConfig(global_relabel_interval=0),
            )

    def test_config_is_frozen(self):
        """Test configuration immutability."""
        config = PushRelabelConfig()
        with pytest.raises(AttributeError):
            config.global_relabel_interval = 3


class TestAgreement:
    """Both algorithms agree on a larger layered network."""

    def test_layered_network(self):
        """Test a three-layer network with crossing capacities."""
        arcs = [("s", f"a{i}", 4 + i) for i in range(4)]
        arcs += [(f"a{i}", f"b{j}", (i * 3 + j) % 5 + 1) for i in range(4) for j in range(4)]
        arcs += [(f"b{j}", "t", 6 - j) for j in range(4)]
        G, caps = network(arcs)
        s, t = G.vertex("s"), G.vertex("t")

        assert edmonds_karp(caps, s, t) == push_relabel(caps, s, t)
        assert edmonds_karp(caps, s, t) <= sum(4 + i for i in range(4))

    def test_flow_bounded_by_cut(self, flow_network):
        """Test the value never exceeds the source's out-capacity."""
        caps = flow_network["capacities"]
        s = flow_network["source"]
        out_capacity = sum(c for e, c in caps.items() if isinstance(e, Edge) and e.from_vertex is s)
        assert edmonds_karp(caps, s, flow_network["sink"]) <= out_capacity
