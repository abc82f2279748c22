"""graphengine - weighted graph algorithms over a single adjacency-list model."""

__version__ = "0.1.0"

# Cancellation
from .cancellation import CancellationToken, Deadline

# Diagnostics
from .diagnostics import (
    assert_non_negative_reweighting,
    assert_path_consistent,
    assert_spanning_tree,
    assert_symmetric_matching,
    assert_topological_order,
    debug_context,
    debug_flag_from_env,
    is_debug_enabled,
    is_spanning_tree,
    is_topological_order,
    path_cost,
    run_check,
    set_debug_enabled,
)

# Errors
from .errors import (
    DisconnectedError,
    GraphEngineError,
    InvalidFlowNetworkError,
    InvalidGraphTypeError,
    InvalidWeightError,
    NegativeCycleError,
    NotADagError,
    NullInputError,
    OperationCancelledError,
    UnknownVertexError,
)

# Graph model and algorithms
from .graphs import (
    INFINITY,
    CostPathPair,
    CostVertexPair,
    Edge,
    Graph,
    GraphCopy,
    GraphKind,
    MatchingResult,
    PushRelabelConfig,
    UnionFind,
    Vertex,
    a_star,
    bellman_ford,
    bfs,
    connected_components,
    dfs,
    dijkstra,
    edmonds_karp,
    floyd_warshall,
    has_cycle,
    has_negative_diagonal,
    johnson,
    johnson_potentials,
    kruskal,
    maximum_matching,
    prim,
    push_relabel,
    topological_sort,
    unit_heuristic,
    zero_heuristic,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph model
    "INFINITY",
    "GraphKind",
    "Vertex",
    "Edge",
    "CostVertexPair",
    "CostPathPair",
    "GraphCopy",
    "Graph",
    # Traversal
    "bfs",
    "dfs",
    # Shortest paths
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "has_negative_diagonal",
    "johnson",
    "johnson_potentials",
    # Spanning trees
    "prim",
    "kruskal",
    "UnionFind",
    # Flow
    "edmonds_karp",
    "push_relabel",
    "PushRelabelConfig",
    # Matching and search
    "maximum_matching",
    "MatchingResult",
    "a_star",
    "zero_heuristic",
    "unit_heuristic",
    # Structure
    "has_cycle",
    "topological_sort",
    "connected_components",
    # Errors
    "GraphEngineError",
    "NullInputError",
    "UnknownVertexError",
    "InvalidGraphTypeError",
    "InvalidWeightError",
    "NegativeCycleError",
    "DisconnectedError",
    "NotADagError",
    "InvalidFlowNetworkError",
    "OperationCancelledError",
    # Cancellation
    "CancellationToken",
    "Deadline",
    # Diagnostics
    "path_cost",
    "assert_path_consistent",
    "is_topological_order",
    "assert_topological_order",
    "is_spanning_tree",
    "assert_spanning_tree",
    "assert_symmetric_matching",
    "assert_non_negative_reweighting",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "debug_flag_from_env",
    "run_check",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
