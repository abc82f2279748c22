"""Debug-mode switch and the hook algorithms use to verify their results.

With debug mode on, every algorithm hands its result to one of the invariant
checks in :mod:`graphengine.diagnostics.core` through :func:`run_check`
before returning it. The switch starts from the ``GRAPHENGINE_DEBUG``
environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from ..logging import get_logger

logger = get_logger(__name__)

DEBUG_ENV_VAR = "GRAPHENGINE_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def debug_flag_from_env(value: Optional[str] = None) -> bool:
    """
    Interpret a ``GRAPHENGINE_DEBUG`` setting.

    Parameters
    ----------
    value:
        Raw setting; read from the environment when None.

    Returns
    -------
    bool
        True for ``1``, ``true``, ``yes`` or ``on`` (any case, surrounding
        whitespace ignored).
    """
    if value is None:
        value = os.getenv(DEBUG_ENV_VAR, "")
    return value.strip().lower() in _TRUTHY


_debug_enabled: bool = debug_flag_from_env()


def is_debug_enabled() -> bool:
    """Return whether algorithms currently verify their results."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable result verification.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch debug mode, restoring the previous setting on exit.

    Example
    -------
    >>> with debug_context(True):
    ...     prim(G, 'A')  # spanning tree is checked before it is returned
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def run_check(check: Callable[..., None], *args: Any) -> bool:
    """
    Run an invariant check on an algorithm result when debug mode is on.

    Parameters
    ----------
    check:
        One of the ``assert_*`` functions from :mod:`graphengine.diagnostics`.
    *args:
        Arguments forwarded to ``check``.

    Returns
    -------
    bool
        True if the check ran, False if debug mode is off.

    Raises
    ------
    ValueError
        Whatever ``check`` raises; the failure is logged first.
    """
    if not _debug_enabled:
        return False
    try:
        check(*args)
    except ValueError as exc:
        logger.debug("%s failed: %s", check.__name__, exc)
        raise
    return True
