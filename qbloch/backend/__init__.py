"""Statevector backend for single-qubit states."""

from .statevector import (
    amplitudes,
    apply_gate,
    as_gate_matrix,
    as_state,
    ket0,
    ket1,
    normalize,
    zero_state,
)

__all__ = [
    "ket0",
    "ket1",
    "zero_state",
    "as_state",
    "as_gate_matrix",
    "amplitudes",
    "apply_gate",
    "normalize",
]
