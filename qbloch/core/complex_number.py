"""Minimal complex-number value type.

Amplitudes read out of a statevector are turned into :class:`Complex`
values so the Bloch conversion can be written as plain scalar arithmetic.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass

import torch


@dataclass(frozen=True)
class Complex:
    """
    An immutable complex number ``re + i*im``.

    Attributes
    ----------
    re:
        Real part.
    im:
        Imaginary part.
    """

    re: float
    im: float = 0.0

    @classmethod
    def from_value(cls, value: "Complex | complex | float | torch.Tensor") -> "Complex":
        """
        Build a Complex from another Complex, a Python number, or a 0-d tensor.

        Raises
        ------
        TypeError
            If value is none of the accepted types.
        ValueError
            If value is a tensor with more than one element.
        """
        if isinstance(value, Complex):
            return value
        if isinstance(value, torch.Tensor):
            if value.numel() != 1:
                raise ValueError(
                    f"expected a single-element tensor, got shape {tuple(value.shape)}"
                )
            value = value.item()
        if isinstance(value, numbers.Complex):
            z = complex(value)
            return cls(z.real, z.imag)
        raise TypeError(f"cannot interpret {type(value).__name__} as a complex number")

    def to_complex(self) -> complex:
        """Return the value as a built-in ``complex``."""
        return complex(self.re, self.im)

    def __add__(self, other: "Complex") -> "Complex":
        return add(self, other)

    def __sub__(self, other: "Complex") -> "Complex":
        return subtract(self, other)

    def __mul__(self, other: "Complex") -> "Complex":
        return multiply(self, other)

    def __str__(self) -> str:
        return format_complex(self)


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I_UNIT = Complex(0.0, 1.0)


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.re + b.re, a.im + b.im)


def subtract(a: Complex, b: Complex) -> Complex:
    return Complex(a.re - b.re, a.im - b.im)


def multiply(a: Complex, b: Complex) -> Complex:
    """(a.re + i a.im)(b.re + i b.im) = (ac - bd) + i(ad + bc)."""
    return Complex(a.re * b.re - a.im * b.im, a.re * b.im + a.im * b.re)


def scale_real(a: Complex, k: float) -> Complex:
    """Scale both components by the real factor k."""
    return Complex(a.re * k, a.im * k)


def conjugate(a: Complex) -> Complex:
    return Complex(a.re, -a.im)


def squared_magnitude(a: Complex) -> float:
    """Return |a|² = re² + im²."""
    return a.re * a.re + a.im * a.im


def format_complex(a: Complex, digits: int = 4) -> str:
    """
    Render a complex number with a fixed number of decimals.

    The imaginary part is omitted when it is below 1e-12 in magnitude.

    Examples
    --------
    >>> format_complex(Complex(0.5, -0.25), digits=2)
    '0.50-0.25i'
    >>> format_complex(Complex(1.0, 0.0))
    '1.0000'
    """
    r = f"{a.re:.{digits}f}"
    i = f"{a.im:.{digits}f}"
    if abs(a.im) < 1e-12:
        return r
    if a.im >= 0:
        return f"{r}+{i}i"
    return f"{r}{i}i"
