"""Tests for gate application on Bloch coordinates."""

from __future__ import annotations

import math

import pytest
import torch

import qbloch as qb
from qbloch.bloch.engine import (
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
from qbloch.errors import DimensionMismatch

TOL = 1e-9

ALL_GATES = {
    "I": qb.I(),
    "X": qb.X(),
    "Y": qb.Y(),
    "Z": qb.Z(),
    "H": qb.H(),
    "S": qb.S(),
    "T": qb.T(),
    "PHASE(1.1)": qb.PHASE(1.1),
}


def assert_coords_close(actual, expected, tol=TOL) -> None:
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol, f"{tuple(actual)} != {tuple(expected)}"


class TestKnownResults:
    def test_z_flips_plus_to_minus(self) -> None:
        assert_coords_close(apply_pauli_z((1.0, 0.0, 0.0)), (-1.0, 0.0, 0.0))

    def test_z_fixes_north_pole(self) -> None:
        assert_coords_close(apply_pauli_z((0.0, 0.0, 1.0)), (0.0, 0.0, 1.0))

    def test_x_flips_north_to_south(self) -> None:
        assert_coords_close(apply_pauli_x((0.0, 0.0, 1.0)), (0.0, 0.0, -1.0))

    def test_y_flips_north_to_south(self) -> None:
        assert_coords_close(apply_pauli_y((0.0, 0.0, 1.0)), (0.0, 0.0, -1.0))

    def test_x_fixes_plus_x(self) -> None:
        assert_coords_close(apply_pauli_x((1.0, 0.0, 0.0)), (1.0, 0.0, 0.0))

    def test_x_flips_huge_off_sphere_point(self) -> None:
        assert_coords_close(apply_pauli_x((0.0, 0.0, 1e200)), (0.0, 0.0, -1.0))

    def test_hadamard_north_to_plus_x(self) -> None:
        assert_coords_close(apply_hadamard((0.0, 0.0, 1.0)), (1.0, 0.0, 0.0))

    def test_hadamard_swaps_x_and_z(self) -> None:
        assert_coords_close(apply_hadamard((1.0, 0.0, 0.0)), (0.0, 0.0, 1.0))

    def test_s_rotates_x_to_y(self) -> None:
        """S is a quarter turn about +z: x -> y."""
        assert_coords_close(apply_s((1.0, 0.0, 0.0)), (0.0, 1.0, 0.0))

    def test_t_rotates_by_eighth_turn(self) -> None:
        s = math.sqrt(0.5)
        assert_coords_close(apply_t((1.0, 0.0, 0.0)), (s, s, 0.0))

    def test_phase_rotates_about_z(self) -> None:
        theta = 0.4
        result = apply_phase((1.0, 0.0, 0.0), theta)
        assert_coords_close(result, (math.cos(theta), math.sin(theta), 0.0))


class TestInvariants:
    @pytest.mark.parametrize("name", list(ALL_GATES))
    def test_norm_preservation(self, name, sphere_points) -> None:
        gate = ALL_GATES[name]
        for point in sphere_points:
            x, y, z = apply_and_convert(point, gate)
            assert abs(x * x + y * y + z * z - 1.0) < TOL

    @pytest.mark.parametrize("apply", [apply_pauli_x, apply_pauli_y, apply_pauli_z, apply_hadamard])
    def test_involution(self, apply, sphere_points) -> None:
        for point in sphere_points:
            assert_coords_close(apply(apply(point)), point)

    def test_phase_matches_s_and_t(self, sphere_points) -> None:
        for point in sphere_points:
            assert_coords_close(apply_phase(point, math.pi / 2), apply_s(point))
            assert_coords_close(apply_phase(point, math.pi / 4), apply_t(point))

    def test_identity_returns_normalized_input(self, sphere_points) -> None:
        for point in sphere_points:
            assert_coords_close(apply_and_convert(point, qb.I()), point)

    def test_off_sphere_input_lands_on_sphere(self) -> None:
        result = apply_pauli_x((0.0, 0.0, 3.0))
        assert_coords_close(result, (0.0, 0.0, -1.0))

    def test_zero_vector_treated_as_north_pole(self) -> None:
        assert_coords_close(apply_pauli_x((0.0, 0.0, 0.0)), (0.0, 0.0, -1.0))

    def test_input_not_mutated(self) -> None:
        point = [0.0, 0.0, 1.0]
        apply_hadamard(point)
        assert point == [0.0, 0.0, 1.0]


class TestNamedGates:
    @pytest.mark.parametrize(
        "name, func",
        [("X", apply_pauli_x), ("y", apply_pauli_y), ("Pauli_Z", apply_pauli_z),
         ("hadamard", apply_hadamard), ("S", apply_s), ("T", apply_t)],
    )
    def test_named_matches_convenience(self, name, func, sphere_points) -> None:
        for point in sphere_points[:5]:
            assert_coords_close(apply_named_gate(point, name), func(point))

    def test_named_phase(self) -> None:
        assert_coords_close(
            apply_named_gate((1.0, 0.0, 0.0), "PHASE", theta=math.pi),
            (-1.0, 0.0, 0.0),
        )

    def test_named_phase_without_theta_raises(self) -> None:
        with pytest.raises(ValueError, match="theta"):
            apply_named_gate((1.0, 0.0, 0.0), "PHASE")

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported"):
            apply_named_gate((1.0, 0.0, 0.0), "SWAP")

    def test_phase_degrees(self) -> None:
        assert_coords_close(apply_phase_degrees((1.0, 0.0, 0.0), 90.0), (0.0, 1.0, 0.0))


class TestCustomMatrices:
    def test_nested_list_matrix(self) -> None:
        x_matrix = [[0, 1], [1, 0]]
        assert_coords_close(apply_and_convert((0.0, 0.0, 1.0), x_matrix), (0.0, 0.0, -1.0))

    def test_non_unitary_output_is_renormalized(self) -> None:
        scaled = 3.0 * qb.H()
        x, y, z = apply_and_convert((0.0, 0.0, 1.0), scaled)
        assert_coords_close((x, y, z), (1.0, 0.0, 0.0))

    def test_three_by_three_raises_dimension_mismatch(self) -> None:
        with pytest.raises(DimensionMismatch):
            apply_and_convert((0.0, 0.0, 1.0), torch.eye(3, dtype=torch.complex128))

    def test_complex64_gate(self) -> None:
        result = apply_and_convert((0.0, 0.0, 1.0), qb.H(dtype=torch.complex64))
        assert_coords_close(result, (1.0, 0.0, 0.0), tol=1e-6)
