"""Debug mode management for qbloch.

Two settings are read from the environment at import time:

* ``QBLOCH_DEBUG`` (``1/true/yes/on``) turns on runtime checks in
  gate application;
* ``QBLOCH_DEBUG_ATOL`` sets the tolerance those checks use
  (default ``1e-6``).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "QBLOCH_DEBUG"
_ATOL_ENV_VAR = "QBLOCH_DEBUG_ATOL"
_DEFAULT_ATOL = 1e-6


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in ("1", "true", "yes", "on")


def _env_positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not value > 0.0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


_debug_enabled: bool = _env_flag(_DEBUG_ENV_VAR)
_debug_atol: float = _env_positive_float(_ATOL_ENV_VAR, _DEFAULT_ATOL)


def is_debug_enabled() -> bool:
    """
    Return whether qbloch debug mode is currently enabled.

    When enabled, ``apply_and_convert`` warns about non-unitary gates and
    raises if the renormalized state is not unit norm.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable qbloch debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def get_debug_tolerance() -> float:
    """Return the absolute tolerance used by debug-mode checks."""
    return _debug_atol


def set_debug_tolerance(atol: float) -> None:
    """
    Set the absolute tolerance used by debug-mode checks.

    Raises
    ------
    ValueError
        If atol is not a positive number.
    """
    global _debug_atol
    atol = float(atol)
    if not atol > 0.0:
        raise ValueError(f"debug tolerance must be positive, got {atol}")
    _debug_atol = atol


@contextmanager
def debug_context(enabled: bool = True, atol: Optional[float] = None) -> Iterator[None]:
    """
    Context manager to temporarily change debug settings.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode within the context.
    atol:
        Tolerance to use within the context. Unchanged if None.

    Example
    -------
    >>> with debug_context(True, atol=1e-9):
    ...     # gate applications inside this block are checked
    ...     pass
    """
    global _debug_enabled, _debug_atol
    prev_enabled, prev_atol = _debug_enabled, _debug_atol
    _debug_enabled = bool(enabled)
    try:
        if atol is not None:
            set_debug_tolerance(atol)
        yield
    finally:
        _debug_enabled, _debug_atol = prev_enabled, prev_atol
