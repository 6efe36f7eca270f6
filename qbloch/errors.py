"""Exceptions raised by qbloch.

Both errors subclass ``ValueError`` so callers that already guard argument
errors with ``except ValueError`` keep working.
"""

from __future__ import annotations


class InvalidDimension(ValueError):
    """A single-qubit operation received a state that is not 2-dimensional.

    Also raised when a Bloch coordinate does not have exactly three
    components.
    """


class DimensionMismatch(ValueError):
    """A gate matrix's column count does not match the state length."""
