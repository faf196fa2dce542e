"""Exception hierarchy for polynomial operations."""
from __future__ import annotations


class PolynomialError(Exception):
    """Base class for errors raised by polyarith."""


class InvalidInput(PolynomialError, ValueError):
    """Raised for a missing or empty coefficient sequence or a missing operand."""


class IndexOutOfRange(PolynomialError, IndexError):
    """Raised when a coefficient index lies outside ``[0, degree]``."""

    def __init__(self, index: int, degree: int):
        super().__init__(f"coefficient index {index} outside [0, {degree}]")
        self.index = index
        self.degree = degree
