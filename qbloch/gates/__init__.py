"""Single-qubit gate library."""

from .standard import (
    GATE_NAMES,
    PHASE,
    H,
    I,
    S,
    T,
    X,
    Y,
    Z,
    canonical_gate_name,
    gate_by_name,
    is_unitary,
)

__all__ = [
    "I",
    "X",
    "Y",
    "Z",
    "H",
    "S",
    "T",
    "PHASE",
    "GATE_NAMES",
    "canonical_gate_name",
    "gate_by_name",
    "is_unitary",
]
