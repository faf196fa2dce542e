"""Point evaluation of polynomials."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .polynomial import Polynomial


def evaluate(polynomial: "Polynomial", x: float) -> float:
    """Evaluate ``sum coefficients[i] * x**i`` term by term.

    The power of ``x`` is carried from one term to the next, so values past
    the float range saturate to ``inf`` instead of raising ``OverflowError``.
    """

    total = 0.0
    power_x = 1.0
    for coeff in polynomial.coefficients:
        # zero terms are skipped so 0 * inf cannot turn the sum into nan
        if coeff:
            total += coeff * power_x
        power_x *= x
    return total


def evaluate_horner(polynomial: "Polynomial", x: float) -> float:
    """Evaluate with Horner's scheme, folding from the highest coefficient down.

    Computes ``c0 + x*(c1 + x*(c2 + ... + x*cn))`` without recursion, so the
    cost is one multiply-add per coefficient for any degree.
    """

    result = 0.0
    for coeff in reversed(polynomial.coefficients):
        result = result * x + coeff
    return result
