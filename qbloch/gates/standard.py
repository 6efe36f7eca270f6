"""Standard single-qubit gate matrices."""

from __future__ import annotations

import math
from typing import Callable, Dict, Optional

import torch

DEFAULT_DTYPE = torch.complex128


def _resolve(
    dtype: torch.dtype | None, device: torch.device | None
) -> tuple[torch.dtype, torch.device]:
    if dtype is None:
        dtype = DEFAULT_DTYPE
    if device is None:
        device = torch.device("cpu")
    return dtype, device


def I(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Identity gate.

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor representing the identity gate.
    """
    dtype, device = _resolve(dtype, device)
    return torch.eye(2, dtype=dtype, device=device)


def X(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Pauli-X gate (bit-flip, NOT gate).

    Rotates the Bloch vector by π about the x axis: |0⟩ ↔ |1⟩.

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor representing the X gate.
    """
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[0.0, 1.0], [1.0, 0.0]], dtype=dtype, device=device)


def Y(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Pauli-Y gate.

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor representing the Y gate.
    """
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[0.0, -1.0j], [1.0j, 0.0]], dtype=dtype, device=device)


def Z(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Pauli-Z gate (phase-flip).

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor representing the Z gate.
    """
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[1.0, 0.0], [0.0, -1.0]], dtype=dtype, device=device)


def H(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Hadamard gate.

    Maps |0⟩ to |+⟩, i.e. the north pole (0, 0, 1) to (1, 0, 0).

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor representing the H gate.
    """
    dtype, device = _resolve(dtype, device)
    sqrt2_inv = 1.0 / math.sqrt(2.0)
    return torch.tensor(
        [[sqrt2_inv, sqrt2_inv], [sqrt2_inv, -sqrt2_inv]], dtype=dtype, device=device
    )


def PHASE(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Generic phase gate: diag(1, e^{iθ}).

    Matrix form:
        [[1, 0],
         [0, cos θ + i sin θ]]

    S and T are the special cases θ = π/2 and θ = π/4.

    Args:
        theta: Phase angle in radians.
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor representing the phase gate.
    """
    dtype, device = _resolve(dtype, device)
    theta_val = float(theta)
    phase = complex(math.cos(theta_val), math.sin(theta_val))
    return torch.tensor([[1.0, 0.0], [0.0, phase]], dtype=dtype, device=device)


def S(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    S gate (√Z), equal to PHASE(π/2).

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor representing the S gate.
    """
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[1.0, 0.0], [0.0, 1.0j]], dtype=dtype, device=device)


def T(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    T gate (π/8 gate, √S), equal to PHASE(π/4).

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor representing the T gate.
    """
    return PHASE(math.pi / 4.0, dtype=dtype, device=device)


def is_unitary(matrix: torch.Tensor, atol: float = 1e-6) -> bool:
    """
    Check if a matrix is unitary within a given tolerance.

    A matrix U is unitary if U†U = I, where U† is the conjugate transpose.

    Args:
        matrix: Tensor of shape (n, n).
        atol: Absolute tolerance for the check.

    Returns:
        True if the matrix is unitary (within tolerance), False otherwise.
    """
    if matrix.dim() != 2 or matrix.shape[-1] != matrix.shape[-2]:
        return False

    adjoint = matrix.conj().transpose(-1, -2)
    product = torch.matmul(adjoint, matrix)

    n = matrix.shape[-1]
    identity = torch.eye(n, dtype=matrix.dtype, device=matrix.device)

    diff = torch.abs(product - identity)
    return bool(torch.all(diff < atol).item())


_FIXED_GATES: Dict[str, Callable[..., torch.Tensor]] = {
    "I": I,
    "X": X,
    "Y": Y,
    "Z": Z,
    "H": H,
    "S": S,
    "T": T,
}

_ALIASES: Dict[str, str] = {
    "ID": "I",
    "IDENTITY": "I",
    "PAULI_X": "X",
    "PAULIX": "X",
    "NOT": "X",
    "PAULI_Y": "Y",
    "PAULIY": "Y",
    "PAULI_Z": "Z",
    "PAULIZ": "Z",
    "HADAMARD": "H",
    "P": "PHASE",
}

GATE_NAMES = tuple(_FIXED_GATES) + ("PHASE",)


def canonical_gate_name(name: str) -> str:
    """
    Map a gate name or alias to its canonical upper-case name.

    Raises:
        ValueError: If the name is not a known gate.
    """
    key = str(name).strip().upper().replace("-", "_")
    key = _ALIASES.get(key, key)
    if key not in GATE_NAMES:
        raise ValueError(
            f"Unsupported gate {name!r}. Known gates: {', '.join(GATE_NAMES)}"
        )
    return key


def gate_by_name(
    name: str,
    theta: Optional[float] = None,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Build a gate matrix from its name.

    Args:
        name: One of GATE_NAMES or a known alias (case-insensitive).
        theta: Phase angle in radians; required for "PHASE", ignored otherwise.
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor.

    Raises:
        ValueError: If the name is unknown, or PHASE is requested without theta.
    """
    key = canonical_gate_name(name)
    if key == "PHASE":
        if theta is None:
            raise ValueError("PHASE gate requires an angle theta (radians).")
        return PHASE(theta, dtype=dtype, device=device)
    return _FIXED_GATES[key](dtype=dtype, device=device)
