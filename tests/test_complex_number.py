"""Tests for the complex arithmetic layer."""

import math

import pytest
import torch

from qbloch.core import (
    Complex,
    add,
    conjugate,
    format_complex,
    multiply,
    scale_real,
    squared_magnitude,
    subtract,
)


def test_add_and_subtract_componentwise():
    a = Complex(1.5, -2.0)
    b = Complex(0.5, 3.0)
    assert add(a, b) == Complex(2.0, 1.0)
    assert subtract(a, b) == Complex(1.0, -5.0)


def test_multiply_matches_builtin_complex():
    a = Complex(1.0, 2.0)
    b = Complex(3.0, -4.0)
    expected = complex(1.0, 2.0) * complex(3.0, -4.0)
    result = multiply(a, b)
    assert result.re == pytest.approx(expected.real)
    assert result.im == pytest.approx(expected.imag)


def test_i_squared_is_minus_one():
    i = Complex(0.0, 1.0)
    assert multiply(i, i) == Complex(-1.0, 0.0)


def test_scale_real():
    assert scale_real(Complex(2.0, -3.0), 0.5) == Complex(1.0, -1.5)


def test_conjugate_negates_imaginary_part():
    assert conjugate(Complex(0.25, 0.75)) == Complex(0.25, -0.75)


def test_squared_magnitude():
    assert squared_magnitude(Complex(3.0, 4.0)) == pytest.approx(25.0)


def test_operators_delegate_to_functions():
    a = Complex(1.0, 1.0)
    b = Complex(2.0, -1.0)
    assert a + b == add(a, b)
    assert a - b == subtract(a, b)
    assert a * b == multiply(a, b)


def test_complex_is_immutable():
    a = Complex(1.0, 0.0)
    with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
        a.re = 2.0


def test_from_value_accepts_numbers_and_tensors():
    assert Complex.from_value(2) == Complex(2.0, 0.0)
    assert Complex.from_value(1.5 - 0.5j) == Complex(1.5, -0.5)
    assert Complex.from_value(torch.tensor(0.5 + 2.0j, dtype=torch.complex128)) == Complex(0.5, 2.0)
    same = Complex(1.0, 1.0)
    assert Complex.from_value(same) is same


def test_from_value_rejects_bad_input():
    with pytest.raises(TypeError):
        Complex.from_value("1+2j")
    with pytest.raises(ValueError, match="single-element"):
        Complex.from_value(torch.tensor([1.0, 2.0]))


def test_to_complex_roundtrip():
    z = Complex(math.sqrt(0.5), -math.sqrt(0.5)).to_complex()
    assert isinstance(z, complex)
    assert z == complex(math.sqrt(0.5), -math.sqrt(0.5))


def test_format_complex():
    assert format_complex(Complex(1.0, 0.0)) == "1.0000"
    assert format_complex(Complex(0.5, 0.25), digits=2) == "0.50+0.25i"
    assert format_complex(Complex(0.5, -0.25), digits=2) == "0.50-0.25i"
    assert str(Complex(0.0, 1e-13)) == "0.0000"
