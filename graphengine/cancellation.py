"""Cooperative cancellation for long-running graph algorithms.

Algorithms accept an optional keyword-only ``token`` and call
:meth:`CancellationToken.raise_if_cancelled` once per outer-loop iteration
(Bellman-Ford pass, MST frontier step, push-relabel discharge, ...).
"""

from __future__ import annotations

import time
from typing import Optional

from .errors import OperationCancelledError


class CancellationToken:
    """Flag that a caller flips to stop an algorithm at its next check."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self) -> None:
        """
        Raise if the token has fired.

        Raises:
            OperationCancelledError: If :meth:`cancel` was called (or the
                deadline passed, for :class:`Deadline`).
        """
        if self.cancelled:
            raise OperationCancelledError("Graph algorithm cancelled.")


class Deadline(CancellationToken):
    """
    Token that fires once a wall-clock budget is spent.

    Args:
        seconds: Budget measured with ``time.monotonic`` from construction.
            Must be non-negative.

    Example:
        >>> token = Deadline(0.5)
        >>> # bellman_ford(graph, source, token=token)
    """

    def __init__(self, seconds: float):
        if seconds < 0:
            raise ValueError("Deadline must be non-negative.")
        super().__init__()
        self._expires_at = time.monotonic() + seconds

    @property
    def remaining(self) -> float:
        return max(0.0, self._expires_at - time.monotonic())

    @property
    def cancelled(self) -> bool:
        return self._cancelled or time.monotonic() >= self._expires_at


def check_token(token: Optional[CancellationToken]) -> None:
    """Raise :class:`OperationCancelledError` if ``token`` is set and has fired."""
    if token is not None:
        token.raise_if_cancelled()


__all__ = ["CancellationToken", "Deadline", "check_token"]
