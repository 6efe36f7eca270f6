"""Caller-owned collection of qubit instances.

A :class:`QubitRegistry` holds the vectors a user has added to a Bloch
sphere view, tracks which one is selected, and applies gates to them by
replacing their current coordinate with the result of
:func:`qbloch.bloch.apply_named_gate`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import cycle
from typing import Dict, Iterator, List, Optional, Sequence

from ..bloch.conversion import DEGENERATE_NORM, BlochVector, as_bloch, normalize_bloch
from ..bloch.engine import apply_named_gate
from ..logging import get_logger

logger = get_logger(__name__)

DEFAULT_PALETTE = (
    "#ffffaa",
    "#ffaaff",
    "#ff0000",
    "#00ff00",
    "#0000ff",
    "#00ffff",
)


@dataclass
class Qubit:
    """
    A qubit drawn on the sphere.

    Attributes
    ----------
    id:
        Identifier assigned by the registry.
    initial:
        Coordinate the qubit was created with; ``reset`` returns to it.
    current:
        Coordinate after the gates applied so far.
    color:
        Display color, e.g. "#ff0000".
    """

    id: int
    initial: BlochVector
    current: BlochVector
    color: str


class QubitRegistry:
    """
    Mapping from qubit id to :class:`Qubit`, plus the current selection.

    Ids are positive integers handed out in increasing order and never
    reused within one registry.
    """

    def __init__(self, palette: Sequence[str] = DEFAULT_PALETTE) -> None:
        """Initialize an empty registry."""
        if not palette:
            raise ValueError("palette must contain at least one color.")
        self._qubits: Dict[int, Qubit] = {}
        self._next_id = 1
        self._colors = cycle(tuple(palette))
        self._selected: Optional[int] = None

    def __len__(self) -> int:
        return len(self._qubits)

    def __iter__(self) -> Iterator[Qubit]:
        return iter(list(self._qubits.values()))

    def __contains__(self, qubit_id: object) -> bool:
        return qubit_id in self._qubits

    def ids(self) -> List[int]:
        """Return the ids of all qubits in insertion order."""
        return list(self._qubits)

    def add(self, x: float, y: float, z: float, color: Optional[str] = None) -> Qubit:
        """
        Add a qubit at the given coordinate.

        The coordinate is scaled onto the unit sphere before it is stored.

        Args:
            x, y, z: Cartesian components.
            color: Display color. Defaults to the next palette entry.

        Returns:
            The new Qubit.

        Raises:
            ValueError: If all three components are zero or any is not finite.
        """
        raw = as_bloch((x, y, z))
        if not all(math.isfinite(c) for c in raw):
            raise ValueError(f"coordinate components must be finite, got {tuple(raw)}")
        if math.hypot(*raw) < DEGENERATE_NORM:
            raise ValueError("cannot add a qubit at the zero vector.")

        point = normalize_bloch(raw)
        qubit = Qubit(
            id=self._next_id,
            initial=point,
            current=point,
            color=color if color is not None else next(self._colors),
        )
        self._qubits[qubit.id] = qubit
        self._next_id += 1
        logger.info("added qubit %d at (%.4f, %.4f, %.4f)", qubit.id, *point)
        return qubit

    def get(self, qubit_id: int) -> Qubit:
        """
        Return the qubit with the given id.

        Raises:
            KeyError: If no such qubit exists.
        """
        try:
            return self._qubits[qubit_id]
        except KeyError:
            raise KeyError(f"no qubit with id {qubit_id}") from None

    def delete(self, qubit_id: int) -> Qubit:
        """
        Remove a qubit and return it. Deleting the selected qubit clears the
        selection.

        Raises:
            KeyError: If no such qubit exists.
        """
        qubit = self.get(qubit_id)
        del self._qubits[qubit_id]
        if self._selected == qubit_id:
            self._selected = None
        logger.info("deleted qubit %d", qubit_id)
        return qubit

    def select(self, qubit_id: int) -> Qubit:
        """
        Mark a qubit as the target of subsequent gate applications.

        Raises:
            KeyError: If no such qubit exists.
        """
        qubit = self.get(qubit_id)
        self._selected = qubit_id
        return qubit

    def clear_selection(self) -> None:
        self._selected = None

    @property
    def selected(self) -> Optional[Qubit]:
        """Return the selected qubit, or None."""
        if self._selected is None:
            return None
        return self._qubits[self._selected]

    def _target(self, qubit_id: Optional[int]) -> Qubit:
        if qubit_id is not None:
            return self.get(qubit_id)
        if self._selected is None:
            raise LookupError("no qubit id given and no qubit selected.")
        return self._qubits[self._selected]

    def apply_gate(
        self,
        name: str,
        theta: Optional[float] = None,
        qubit_id: Optional[int] = None,
    ) -> Qubit:
        """
        Apply a named gate to a qubit and store the new coordinate.

        Args:
            name: Gate name, see :data:`qbloch.gates.GATE_NAMES`.
            theta: Phase angle in radians, required for "PHASE".
            qubit_id: Target qubit. Defaults to the selected qubit.

        Raises:
            KeyError: If qubit_id is unknown.
            LookupError: If qubit_id is None and nothing is selected.
            ValueError: If the gate name is unknown or PHASE lacks theta.
        """
        qubit = self._target(qubit_id)
        qubit.current = apply_named_gate(qubit.current, name, theta=theta)
        logger.debug("qubit %d -> (%.4f, %.4f, %.4f)", qubit.id, *qubit.current)
        return qubit

    def apply_phase_degrees(self, degrees: float, qubit_id: Optional[int] = None) -> Qubit:
        """Apply PHASE with the angle given in degrees."""
        return self.apply_gate("PHASE", theta=math.radians(degrees), qubit_id=qubit_id)

    def reset(self, qubit_id: Optional[int] = None) -> Qubit:
        """
        Restore a qubit's current coordinate to its initial one.

        Args:
            qubit_id: Target qubit. Defaults to the selected qubit.
        """
        qubit = self._target(qubit_id)
        qubit.current = qubit.initial
        return qubit
