"""Dense single-variable polynomial with real coefficients."""
from __future__ import annotations

import logging
import operator
from numbers import Real
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import IndexOutOfRange, InvalidInput

logger = logging.getLogger(__name__)

EPSILON = 0.001


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _normalize_coefficients(coeffs: Optional[Iterable[float]]) -> Tuple[float, ...]:
    if coeffs is None:
        raise InvalidInput("coefficients must not be None")
    try:
        items = iter(coeffs)
    except TypeError as exc:
        raise InvalidInput(f"coefficients must be iterable, not {type(coeffs).__name__}") from exc
    result: List[float] = []
    for c in items:
        if not _is_scalar(c):
            raise InvalidInput(f"coefficient {c!r} is not a real number")
        result.append(float(c))
    if not result:
        raise InvalidInput("coefficients must not be empty")
    if all(c == 0 for c in result):
        if len(result) > 1:
            logger.debug("collapsing %d zero coefficients to the zero polynomial", len(result))
        return (0.0,)
    return tuple(result)


def convolve(lhs: Sequence[float], rhs: Sequence[float]) -> List[float]:
    """Return the discrete convolution of two coefficient sequences.

    The result always has ``len(lhs) + len(rhs) - 1`` entries; no zero
    collapsing is applied.
    """

    out = [0.0] * (len(lhs) + len(rhs) - 1)
    for i, a in enumerate(lhs):
        for j, b in enumerate(rhs):
            out[i + j] += a * b
    return out


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _format_polynomial(coeffs: Sequence[float], var: str = "x") -> str:
    """Format coefficients (constant term first) as ``1+2x+3x^2-x^5``."""

    formatted = ""
    for power, coeff in enumerate(coeffs):
        if coeff == 0:
            continue
        if formatted and coeff > 0:
            formatted += "+"
        if power == 0:
            formatted += _format_number(coeff)
        elif power == 1:
            formatted += f"{_format_number(coeff)}{var}"
        elif coeff == 1:
            formatted += f"{var}^{power}"
        elif coeff == -1:
            formatted += f"-{var}^{power}"
        else:
            formatted += f"{_format_number(coeff)}{var}^{power}"

    if not formatted:
        return _format_number(coeffs[0])
    return formatted


# ---------------------------------------------------------------------------
# Polynomial
# ---------------------------------------------------------------------------

class Polynomial:
    """Immutable polynomial over the reals. ``coefficients[0]`` is the constant term.

    A sequence of all zeros, of any length, becomes the zero polynomial
    ``Polynomial([0.0])``. Every other sequence is kept as given, trailing
    zeros included, so ``degree`` is always ``len(coefficients) - 1``.
    """

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Iterable[float]):
        self._coeffs = _normalize_coefficients(coeffs)

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return self._coeffs

    def coefficient(self, index: int) -> float:
        # TypeError for non-integer indices such as 1.0 or slices
        index = operator.index(index)
        if not 0 <= index <= self.degree:
            raise IndexOutOfRange(index, self.degree)
        return self._coeffs[index]

    __getitem__ = coefficient

    def as_list(self) -> List[float]:
        """Return a mutable copy of the coefficients."""

        return list(self._coeffs)

    def is_zero(self) -> bool:
        return self._coeffs == (0.0,)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coeffs)

    # arithmetic -------------------------------------------------------------

    def __add__(self, other):
        if other is None:
            raise InvalidInput("cannot add None to a polynomial")
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.degree > other.degree:
            larger, smaller = self._coeffs, other._coeffs
        else:
            larger, smaller = other._coeffs, self._coeffs
        summed = list(larger)
        for i, c in enumerate(smaller):
            summed[i] += c
        return Polynomial(summed)

    def __radd__(self, other):
        if other is None:
            raise InvalidInput("cannot add a polynomial to None")
        return NotImplemented

    def __neg__(self) -> "Polynomial":
        return -1 * self

    def __sub__(self, other):
        if other is None:
            raise InvalidInput("cannot subtract None from a polynomial")
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self + (-1 * other)

    def __rsub__(self, other):
        if other is None:
            raise InvalidInput("cannot subtract a polynomial from None")
        return NotImplemented

    def __mul__(self, other):
        if other is None:
            raise InvalidInput("cannot multiply a polynomial by None")
        if isinstance(other, Polynomial):
            return Polynomial(convolve(self._coeffs, other._coeffs))
        if _is_scalar(other):
            return Polynomial([other * c for c in self._coeffs])
        return NotImplemented

    def __rmul__(self, other):
        if other is None:
            raise InvalidInput("cannot multiply None by a polynomial")
        if _is_scalar(other):
            return Polynomial([other * c for c in self._coeffs])
        return NotImplemented

    # comparison -------------------------------------------------------------

    def isclose(self, other: "Polynomial", epsilon: float = EPSILON) -> bool:
        """Return True when degrees match and every coefficient differs by less than ``epsilon``."""

        if not isinstance(other, Polynomial):
            return False
        if self.degree != other.degree:
            return False
        return all(abs(a - b) < epsilon for a, b in zip(self._coeffs, other._coeffs))

    def __eq__(self, other: object) -> bool:
        return self.isclose(other)  # type: ignore[arg-type]

    def __ne__(self, other: object) -> bool:
        return not self.isclose(other)  # type: ignore[arg-type]

    def __hash__(self) -> int:
        # Not tolerance-aware: polynomials equal within EPSILON may hash apart.
        return sum(hash(c) * i for i, c in enumerate(self._coeffs))

    # formatting -------------------------------------------------------------

    def __str__(self) -> str:
        return _format_polynomial(self._coeffs)

    def __repr__(self) -> str:
        return f"Polynomial([{', '.join(repr(c) for c in self._coeffs)}])"
