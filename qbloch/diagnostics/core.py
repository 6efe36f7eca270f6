"""Core diagnostic functions for qubit states and Bloch coordinates."""

from __future__ import annotations

import math
from typing import Sequence

import torch


def state_norm(state: torch.Tensor) -> torch.Tensor:
    """
    Compute the L2 norm of a statevector.

    The last dimension is taken to hold the amplitudes.

    Parameters
    ----------
    state:
        Complex tensor with shape (..., dim).

    Returns
    -------
    torch.Tensor
        Real tensor with shape (...) giving the norm for each batch
        element.

    Raises
    ------
    ValueError
        If state has fewer than 1 dimension.
    """
    if state.dim() < 1:
        raise ValueError("state_norm expects a tensor with at least 1 dimension.")

    norm_sq = (state.conj() * state).sum(dim=-1).real
    return torch.sqrt(norm_sq)


def assert_normalized(
    state: torch.Tensor,
    atol: float = 1e-9,
) -> None:
    """
    Assert that a statevector has norm ~1 within a tolerance.

    Parameters
    ----------
    state:
        Complex statevector tensor (..., dim).
    atol:
        Absolute tolerance for |norm - 1|.

    Raises
    ------
    ValueError
        If the state is not normalized within the tolerance.
    """
    norms = state_norm(state)
    if not torch.all(torch.isfinite(norms)):
        raise ValueError("State norm contains non-finite values.")

    if not torch.allclose(norms, torch.ones_like(norms), atol=atol, rtol=0.0):
        raise ValueError(
            f"State is not normalized within tolerance {atol}. "
            f"Norms found: {norms.detach().cpu().tolist()}"
        )


def bloch_radius(coordinate: Sequence[float]) -> float:
    """Return the Euclidean length of a Bloch coordinate."""
    x, y, z = (float(c) for c in coordinate)
    return math.sqrt(x * x + y * y + z * z)


def assert_on_sphere(
    coordinate: Sequence[float],
    atol: float = 1e-9,
) -> None:
    """
    Assert that a Bloch coordinate lies on the unit sphere.

    Parameters
    ----------
    coordinate:
        Three real components (x, y, z).
    atol:
        Absolute tolerance for |x² + y² + z² - 1|.

    Raises
    ------
    ValueError
        If the squared length is not finite or differs from 1 by more
        than atol.
    """
    radius_sq = bloch_radius(coordinate) ** 2
    if not math.isfinite(radius_sq):
        raise ValueError("Bloch coordinate contains non-finite values.")
    if abs(radius_sq - 1.0) > atol:
        raise ValueError(
            f"Bloch coordinate is not on the unit sphere within tolerance {atol}. "
            f"Squared length found: {radius_sq}"
        )
