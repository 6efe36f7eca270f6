"""Conversion between single-qubit states and Bloch-sphere coordinates.

A pure state α|0⟩ + β|1⟩ corresponds to the point

    x = 2 Re(α* β)
    y = 2 Im(α* β)
    z = |α|² - |β|²

on the unit sphere. The inverse map picks the representative with a real,
non-negative α (the global phase is not observable).
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence, Union

import numpy as np
import torch

from ..backend.statevector import StateLike, amplitudes, as_state, zero_state
from ..core.complex_number import Complex, conjugate, multiply, scale_real, squared_magnitude
from ..errors import InvalidDimension
from ..logging import get_logger

logger = get_logger(__name__)

# Coordinates shorter than this are treated as the zero vector.
DEGENERATE_NORM = 1e-9


class BlochVector(NamedTuple):
    """A point (x, y, z) in right-handed Cartesian coordinates."""

    x: float
    y: float
    z: float


CoordinateLike = Union[BlochVector, Sequence[float], np.ndarray, torch.Tensor]


def as_bloch(coordinate: CoordinateLike) -> BlochVector:
    """
    Coerce a 3-component coordinate to a BlochVector.

    Tuples, lists, numpy arrays and CPU tensors are accepted. The values
    are not normalized.

    Raises:
        InvalidDimension: If the coordinate does not have exactly three
            components.
    """
    if isinstance(coordinate, BlochVector):
        return coordinate
    if isinstance(coordinate, torch.Tensor):
        coordinate = coordinate.detach().cpu().numpy()
    arr = np.asarray(coordinate, dtype=np.float64).reshape(-1)
    if arr.shape != (3,):
        raise InvalidDimension(
            f"Bloch coordinate must have 3 components, got {arr.shape[0]}"
        )
    return BlochVector(float(arr[0]), float(arr[1]), float(arr[2]))


def state_to_bloch(state: StateLike) -> BlochVector:
    """
    Compute the Bloch coordinate of a single-qubit pure state.

    Args:
        state: Two amplitudes (α, β) as a tensor or a sequence of Complex /
            Python numbers.

    Returns:
        The BlochVector (x, y, z). For a normalized state it lies on the
        unit sphere.

    Raises:
        InvalidDimension: If the state does not have exactly 2 amplitudes.
    """
    amps = amplitudes(state)
    if len(amps) != 2:
        raise InvalidDimension(
            f"only single-qubit states are supported, got {len(amps)} amplitudes"
        )
    alpha, beta = amps

    p = multiply(conjugate(alpha), beta)

    x = 2.0 * p.re
    y = 2.0 * p.im
    z = squared_magnitude(alpha) - squared_magnitude(beta)

    return BlochVector(x, y, z)


def bloch_to_state(
    coordinate: CoordinateLike, dtype: torch.dtype | None = None
) -> torch.Tensor:
    """
    Compute a single-qubit state from a Bloch coordinate.

    Off-sphere coordinates are normalized first. A coordinate whose length
    is below ``DEGENERATE_NORM`` maps to |0⟩ = (1, 0) instead of raising.

    Args:
        coordinate: Three real components (x, y, z).
        dtype: Complex dtype of the returned tensor. Defaults to
            torch.complex128.

    Returns:
        A (2,) complex tensor (α, β) with α real and non-negative.
    """
    x, y, z = as_bloch(coordinate)
    norm = math.hypot(x, y, z)
    if norm < DEGENERATE_NORM:
        logger.debug("bloch_to_state: degenerate coordinate (%g, %g, %g), using |0>", x, y, z)
        return zero_state(dtype=dtype)

    xn, yn, zn = x / norm, y / norm, z / norm

    # Rounding can push zn a hair outside [-1, 1].
    theta = math.acos(max(-1.0, min(1.0, zn)))
    phi = math.atan2(yn, xn)

    alpha = Complex(math.cos(theta / 2.0), 0.0)
    beta = scale_real(Complex(math.cos(phi), math.sin(phi)), math.sin(theta / 2.0))

    return as_state([alpha, beta], dtype=dtype)


def bloch_from_angles(theta: float, phi: float) -> BlochVector:
    """
    Convert spherical angles to a point on the unit sphere.

    Args:
        theta: Polar angle from +z, in radians.
        phi: Azimuthal angle from +x towards +y, in radians.
    """
    sin_theta = math.sin(theta)
    return BlochVector(
        sin_theta * math.cos(phi),
        sin_theta * math.sin(phi),
        math.cos(theta),
    )


def bloch_to_angles(coordinate: CoordinateLike) -> tuple[float, float]:
    """
    Return the (theta, phi) angles of a coordinate.

    The zero vector is reported as the north pole (0, 0).
    """
    x, y, z = normalize_bloch(coordinate)
    return math.acos(max(-1.0, min(1.0, z))), math.atan2(y, x)


def normalize_bloch(coordinate: CoordinateLike) -> BlochVector:
    """
    Scale a coordinate onto the unit sphere.

    The zero vector maps to the north pole (0, 0, 1), matching the |0⟩
    fallback of ``bloch_to_state``.
    """
    x, y, z = as_bloch(coordinate)
    norm = math.hypot(x, y, z)
    if norm < DEGENERATE_NORM:
        return BlochVector(0.0, 0.0, 1.0)
    return BlochVector(x / norm, y / norm, z / norm)
