"""Statevector backend for a single qubit.

States are 1-D complex tensors and gates are 2-D complex tensors. Callers
may also pass plain Python sequences of numbers or :class:`Complex` values;
``as_state`` and ``as_gate_matrix`` turn those into tensors.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

import torch

from ..core.complex_number import Complex
from ..errors import DimensionMismatch, InvalidDimension
from ..logging import get_logger

logger = get_logger(__name__)

DEFAULT_DTYPE = torch.complex128

# Squared-norm threshold below which normalize() leaves its input untouched.
NORMALIZE_EPS = 1e-12

StateLike = Union[torch.Tensor, Sequence[Union[Complex, complex, float]]]
MatrixLike = Union[torch.Tensor, Sequence[Sequence[Union[Complex, complex, float]]]]


def _complex_dtype(dtype: torch.dtype | None) -> torch.dtype:
    return DEFAULT_DTYPE if dtype is None else dtype


def ket0(
    dtype: torch.dtype | None = None, device: torch.device | None = None
) -> torch.Tensor:
    """Return the basis state |0⟩ = (1, 0), the north pole of the Bloch sphere."""
    return torch.tensor([1.0, 0.0], dtype=_complex_dtype(dtype), device=device)


def ket1(
    dtype: torch.dtype | None = None, device: torch.device | None = None
) -> torch.Tensor:
    """Return the basis state |1⟩ = (0, 1), the south pole of the Bloch sphere."""
    return torch.tensor([0.0, 1.0], dtype=_complex_dtype(dtype), device=device)


def zero_state(
    dtype: torch.dtype | None = None, device: torch.device | None = None
) -> torch.Tensor:
    """
    Return the default single-qubit state |0⟩.

    This is also the state the Bloch conversion falls back to for a
    degenerate (zero-length) coordinate.
    """
    return ket0(dtype=dtype, device=device)


def as_state(amplitudes: StateLike, dtype: torch.dtype | None = None) -> torch.Tensor:
    """
    Convert amplitudes to a 1-D complex tensor.

    Args:
        amplitudes: A tensor, or a sequence of Complex / Python numbers.
        dtype: Complex dtype of the result. Defaults to the tensor's own
            complex dtype, or torch.complex128.

    Returns:
        A 1-D complex tensor. The length is not checked here.

    Raises:
        InvalidDimension: If the input is not one-dimensional.
    """
    if isinstance(amplitudes, torch.Tensor):
        state = amplitudes
        if dtype is not None:
            state = state.to(dtype=dtype)
        elif not torch.is_complex(state):
            state = state.to(dtype=DEFAULT_DTYPE)
    else:
        values = [Complex.from_value(a).to_complex() for a in amplitudes]
        state = torch.tensor(values, dtype=_complex_dtype(dtype))

    if state.dim() != 1:
        raise InvalidDimension(
            f"state must be a 1-D vector of amplitudes, got shape {tuple(state.shape)}"
        )
    return state


def as_gate_matrix(matrix: MatrixLike, dtype: torch.dtype | None = None) -> torch.Tensor:
    """
    Convert a gate matrix to a 2-D complex tensor.

    Args:
        matrix: A tensor, or a sequence of rows of Complex / Python numbers.
        dtype: Complex dtype of the result. Defaults to the tensor's own
            complex dtype, or torch.complex128.

    Raises:
        DimensionMismatch: If the matrix is not two-dimensional or its rows
            have different lengths.
    """
    if isinstance(matrix, torch.Tensor):
        mat = matrix
        if dtype is not None:
            mat = mat.to(dtype=dtype)
        elif not torch.is_complex(mat):
            mat = mat.to(dtype=DEFAULT_DTYPE)
    else:
        rows = [[Complex.from_value(v).to_complex() for v in row] for row in matrix]
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise DimensionMismatch(f"gate matrix rows have differing lengths {sorted(widths)}")
        mat = torch.tensor(rows, dtype=_complex_dtype(dtype))

    if mat.dim() != 2:
        raise DimensionMismatch(
            f"gate matrix must be 2-D, got shape {tuple(mat.shape)}"
        )
    return mat


def amplitudes(state: StateLike) -> Tuple[Complex, ...]:
    """Return the amplitudes of a state as a tuple of Complex values."""
    return tuple(Complex.from_value(a) for a in as_state(state))


def apply_gate(matrix: MatrixLike, state: StateLike) -> torch.Tensor:
    """
    Left-multiply a state by a gate matrix.

    The matrix is not required to be unitary and the product is not
    renormalized; see ``normalize``.

    Args:
        matrix: Gate matrix of shape (rows, cols).
        state: Statevector of length cols.

    Returns:
        A new statevector of length rows, in the state's dtype and device.

    Raises:
        DimensionMismatch: If the matrix column count differs from the state
            length.
    """
    vec = as_state(state)
    mat = as_gate_matrix(matrix)

    if mat.shape[1] != vec.shape[0]:
        raise DimensionMismatch(
            f"gate matrix has {mat.shape[1]} columns but state has "
            f"{vec.shape[0]} amplitudes"
        )

    mat = mat.to(dtype=vec.dtype, device=vec.device)
    return torch.matmul(mat, vec)


def normalize(vector: StateLike) -> torch.Tensor:
    """
    Scale a vector so its squared magnitudes sum to 1.

    If the squared norm is below ``NORMALIZE_EPS`` the vector is returned
    unchanged; no error is raised.

    Args:
        vector: Statevector of any length.

    Returns:
        The normalized statevector.
    """
    vec = as_state(vector)
    norm_sq = float((vec.conj() * vec).real.sum().item())
    if norm_sq < NORMALIZE_EPS:
        logger.debug("normalize: squared norm %.3e below threshold, leaving vector as is", norm_sq)
        return vec
    return vec * (1.0 / math.sqrt(norm_sq))
