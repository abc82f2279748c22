"""Diagnostics and debugging utilities for graphengine."""

from .core import (
    assert_non_negative_reweighting,
    assert_path_consistent,
    assert_spanning_tree,
    assert_symmetric_matching,
    assert_topological_order,
    is_spanning_tree,
    is_topological_order,
    path_cost,
)
from .debug_mode import (
    DEBUG_ENV_VAR,
    debug_context,
    debug_flag_from_env,
    is_debug_enabled,
    run_check,
    set_debug_enabled,
)

__all__ = [
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
    "DEBUG_ENV_VAR",
]
