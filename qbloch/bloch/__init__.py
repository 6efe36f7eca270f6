"""Bloch-sphere conversion and gate application on coordinates."""

from .conversion import (
    BlochVector,
    as_bloch,
    bloch_from_angles,
    bloch_to_angles,
    bloch_to_state,
    normalize_bloch,
    state_to_bloch,
)
from .engine import (
    apply_and_convert,
    apply_hadamard,
    apply_named_gate,
    apply_pauli_x,
    apply_pauli_y,
    apply_pauli_z,
    apply_phase,
    apply_phase_degrees,
    apply_s,
    apply_t,
)

__all__ = [
    "BlochVector",
    "as_bloch",
    "bloch_from_angles",
    "bloch_to_angles",
    "bloch_to_state",
    "normalize_bloch",
    "state_to_bloch",
    "apply_and_convert",
    "apply_named_gate",
    "apply_pauli_x",
    "apply_pauli_y",
    "apply_pauli_z",
    "apply_hadamard",
    "apply_s",
    "apply_t",
    "apply_phase",
    "apply_phase_degrees",
]
