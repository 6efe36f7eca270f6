"""Core value types for qbloch."""

from .complex_number import (
    I_UNIT,
    ONE,
    ZERO,
    Complex,
    add,
    conjugate,
    format_complex,
    multiply,
    scale_real,
    squared_magnitude,
    subtract,
)

__all__ = [
    "Complex",
    "ZERO",
    "ONE",
    "I_UNIT",
    "add",
    "subtract",
    "multiply",
    "scale_real",
    "conjugate",
    "squared_magnitude",
    "format_complex",
]
