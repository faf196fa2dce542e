"""Public API for polyarith."""
from .errors import IndexOutOfRange, InvalidInput, PolynomialError
from .evaluate import evaluate, evaluate_horner
from .polynomial import EPSILON, Polynomial, convolve

__all__ = [
    "Polynomial",
    "EPSILON",
    "convolve",
    "evaluate",
    "evaluate_horner",
    "PolynomialError",
    "InvalidInput",
    "IndexOutOfRange",
]
