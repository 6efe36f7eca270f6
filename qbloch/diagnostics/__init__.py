"""Diagnostics and debugging utilities for qbloch."""

from .core import (
    assert_normalized,
    assert_on_sphere,
    bloch_radius,
    state_norm,
)
from .debug_mode import (
    debug_context,
    get_debug_tolerance,
    is_debug_enabled,
    set_debug_enabled,
    set_debug_tolerance,
)

__all__ = [
    "state_norm",
    "assert_normalized",
    "bloch_radius",
    "assert_on_sphere",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_debug_tolerance",
    "set_debug_tolerance",
]
