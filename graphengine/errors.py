"""Exception types raised by graph algorithms.

Every precondition violation surfaces as a distinct subclass of
:class:`GraphEngineError`. Most also derive from :class:`ValueError` so callers
that only expect the built-in type keep working.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class GraphEngineError(Exception):
    """Base class for all package-specific errors."""


class NullInputError(GraphEngineError, ValueError):
    """Raised when the graph or a required argument is ``None``."""


class UnknownVertexError(GraphEngineError, ValueError):
    """Raised when a vertex does not belong to the graph it is used with."""


class InvalidGraphTypeError(GraphEngineError, ValueError):
    """Raised when an algorithm receives a graph of the wrong kind."""


class InvalidWeightError(GraphEngineError, ValueError):
    """Raised when a negative cost or capacity reaches an algorithm that forbids it."""

    def __init__(self, message: str, edge: Optional[Any] = None):
        super().__init__(message)
        self.edge = edge


class NegativeCycleError(GraphEngineError, ValueError):
    """Raised when Bellman-Ford (or Johnson) finds a negative-weight cycle."""

    def __init__(self, message: str, edge: Optional[Any] = None):
        super().__init__(message)
        self.edge = edge


class DisconnectedError(GraphEngineError, ValueError):
    """Raised when a spanning tree or a target cannot be reached."""

    def __init__(self, message: str, unreached: Sequence[Any] = ()):
        super().__init__(message)
        self.unreached = list(unreached)


class NotADagError(GraphEngineError, ValueError):
    """Raised when topological sort meets a directed cycle."""

    def __init__(self, message: str, remaining: Sequence[Any] = ()):
        super().__init__(message)
        self.remaining = list(remaining)


class InvalidFlowNetworkError(GraphEngineError, ValueError):
    """Raised for malformed flow networks, e.g. source equal to sink."""


class OperationCancelledError(GraphEngineError, RuntimeError):
    """Raised when a cancellation token fires inside an algorithm loop."""


__all__ = [
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
]
