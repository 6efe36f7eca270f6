"""qbloch - single-qubit state simulation on the Bloch sphere."""

__version__ = "0.1.0"

# Backend
from .backend import (
    amplitudes,
    apply_gate,
    as_gate_matrix,
    as_state,
    ket0,
    ket1,
    normalize,
    zero_state,
)
# Bloch conversion and gate application
from .bloch import (
    BlochVector,
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
    as_bloch,
    bloch_from_angles,
    bloch_to_angles,
    bloch_to_state,
    normalize_bloch,
    state_to_bloch,
)

# Complex arithmetic
from .core import (
    Complex,
    add,
    conjugate,
    format_complex,
    multiply,
    scale_real,
    squared_magnitude,
    subtract,
)

# Diagnostics
from .diagnostics import (
    assert_normalized,
    assert_on_sphere,
    bloch_radius,
    debug_context,
    get_debug_tolerance,
    is_debug_enabled,
    set_debug_enabled,
    set_debug_tolerance,
    state_norm,
)
from .errors import DimensionMismatch, InvalidDimension

# Gates
from .gates import (
    GATE_NAMES,
    PHASE,
    H,
    I,
    S,
    T,
    X,
    Y,
    Z,
    gate_by_name,
    is_unitary,
)
from .registry import Qubit, QubitRegistry

__all__ = [
    "__version__",
    # Complex arithmetic
    "Complex",
    "add",
    "subtract",
    "multiply",
    "scale_real",
    "conjugate",
    "squared_magnitude",
    "format_complex",
    # Backend
    "ket0",
    "ket1",
    "zero_state",
    "as_state",
    "as_gate_matrix",
    "amplitudes",
    "apply_gate",
    "normalize",
    # Bloch
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
    # Gates
    "I",
    "X",
    "Y",
    "Z",
    "H",
    "S",
    "T",
    "PHASE",
    "GATE_NAMES",
    "gate_by_name",
    "is_unitary",
    # Registry
    "Qubit",
    "QubitRegistry",
    # Errors
    "InvalidDimension",
    "DimensionMismatch",
    # Diagnostics
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
