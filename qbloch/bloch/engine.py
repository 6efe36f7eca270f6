"""Gate application on Bloch coordinates.

``apply_and_convert`` is the entry point for visualization code: it takes a
point on the sphere and a gate and returns the rotated point. Every call is
a pure function of its inputs.
"""

from __future__ import annotations

import math
from typing import Optional

from ..backend.statevector import MatrixLike, apply_gate, as_gate_matrix, normalize
from ..diagnostics import assert_normalized, get_debug_tolerance, is_debug_enabled
from ..gates import standard as stdgates
from ..logging import get_logger
from .conversion import BlochVector, CoordinateLike, bloch_to_state, state_to_bloch

logger = get_logger(__name__)


def apply_and_convert(coordinate: CoordinateLike, gate_matrix: MatrixLike) -> BlochVector:
    """
    Apply a gate to a Bloch coordinate.

    The coordinate is converted to a state, multiplied by the gate,
    renormalized and converted back.

    Args:
        coordinate: Three real components (x, y, z). Off-sphere input is
            normalized; the zero vector is treated as |0⟩.
        gate_matrix: A (2, 2) complex matrix. Unitarity is not enforced.

    Returns:
        The resulting BlochVector on the unit sphere.

    Raises:
        DimensionMismatch: If the matrix does not have 2 columns.
    """
    matrix = as_gate_matrix(gate_matrix)
    state = bloch_to_state(coordinate, dtype=matrix.dtype)
    new_state = normalize(apply_gate(matrix, state))

    if is_debug_enabled():
        atol = get_debug_tolerance()
        if not stdgates.is_unitary(matrix, atol=atol):
            logger.warning("apply_and_convert: gate matrix is not unitary:\n%s", matrix)
        assert_normalized(new_state, atol=atol)

    return state_to_bloch(new_state)


def apply_named_gate(
    coordinate: CoordinateLike, name: str, theta: Optional[float] = None
) -> BlochVector:
    """
    Apply a gate from the standard library by name.

    Args:
        coordinate: Three real components (x, y, z).
        name: Gate name such as "X", "H", "S" or "PHASE" (case-insensitive).
        theta: Phase angle in radians, required for "PHASE".

    Raises:
        ValueError: If the gate name is unknown or PHASE lacks theta.
    """
    gate = stdgates.gate_by_name(name, theta=theta)
    logger.debug("applying %s%s", name, "" if theta is None else f"({theta})")
    return apply_and_convert(coordinate, gate)


def apply_pauli_x(coordinate: CoordinateLike) -> BlochVector:
    return apply_and_convert(coordinate, stdgates.X())


def apply_pauli_y(coordinate: CoordinateLike) -> BlochVector:
    return apply_and_convert(coordinate, stdgates.Y())


def apply_pauli_z(coordinate: CoordinateLike) -> BlochVector:
    return apply_and_convert(coordinate, stdgates.Z())


def apply_hadamard(coordinate: CoordinateLike) -> BlochVector:
    return apply_and_convert(coordinate, stdgates.H())


def apply_s(coordinate: CoordinateLike) -> BlochVector:
    return apply_and_convert(coordinate, stdgates.S())


def apply_t(coordinate: CoordinateLike) -> BlochVector:
    return apply_and_convert(coordinate, stdgates.T())


def apply_phase(coordinate: CoordinateLike, theta: float) -> BlochVector:
    """Apply PHASE(theta); theta is in radians."""
    return apply_and_convert(coordinate, stdgates.PHASE(theta))


def apply_phase_degrees(coordinate: CoordinateLike, degrees: float) -> BlochVector:
    """Apply PHASE with the angle given in degrees, as typed into a UI field."""
    return apply_phase(coordinate, math.radians(degrees))
