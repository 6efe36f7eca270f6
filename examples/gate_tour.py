"""Gate tour: move a few qubits around the Bloch sphere.

This example adds three vectors to a registry, applies the standard gates
to the selected one, and prints each coordinate and the matching state
amplitudes.
"""

from __future__ import annotations

import math

import qbloch as qb
from qbloch.registry import QubitRegistry


def describe(label: str, point: qb.BlochVector) -> str:
    alpha, beta = qb.amplitudes(qb.bloch_to_state(point))
    return (
        f"{label:<12} ({point.x:+.4f}, {point.y:+.4f}, {point.z:+.4f})  "
        f"alpha={qb.format_complex(alpha)}  beta={qb.format_complex(beta)}"
    )


def main() -> None:
    """Run a short sequence of gates on a registry of qubits."""
    registry = QubitRegistry()

    # Polar angle 45 degrees from +z, azimuth 60 degrees from +x
    start = qb.bloch_from_angles(math.pi / 4, math.pi / 3)
    tilted = registry.add(*start)
    plus = registry.add(1.0, 0.0, 0.0)
    diagonal = registry.add(1.0, 1.0, 0.0)

    for qubit in registry:
        print(describe(f"qubit {qubit.id}", qubit.current))

    registry.select(tilted.id)
    for name in ("X", "Y", "Z", "H", "S", "T"):
        registry.apply_gate(name)
        print(describe(f"after {name}", tilted.current))

    registry.apply_phase_degrees(45.0)
    print(describe("after P(45)", tilted.current))

    registry.apply_gate("Z", qubit_id=plus.id)
    print(describe("Z|+>", plus.current))

    registry.apply_gate("Z", qubit_id=diagonal.id)
    print(describe("Z diagonal", diagonal.current))

    registry.reset()
    print(describe("reset", tilted.current))

    print("\nAll coordinates remain on the unit sphere.")


if __name__ == "__main__":
    main()
