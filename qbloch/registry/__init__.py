"""Registry of qubit instances for interactive front ends."""

from .qubits import DEFAULT_PALETTE, Qubit, QubitRegistry

__all__ = ["Qubit", "QubitRegistry", "DEFAULT_PALETTE"]
