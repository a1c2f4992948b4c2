# File location: nested-numerics/src/nestnum/core/numerics.py

"""
Elementwise math, bitwise operations and reductions over Numeric Values.

Each function here is a scalar kernel from ``kernels`` dispatched through
the broadcast engine, so it accepts a scalar or an arbitrarily nested,
possibly ragged, list/tuple and returns a value of the matching shape.
Two-argument functions broadcast scalars against containers.

Names that collide with builtins (``abs``, ``round``, ``sum``, ``min``,
``max``) are defined with a trailing underscore and aliased at the end of
the module, the way NumPy exposes them.
"""

import math
from typing import Any

from . import kernels as K
from .broadcast import leaves, map1, map2, reduce
from .errors import DomainError

__all__ = [
    "PI", "E", "TAU",
    "absolute", "abs", "sign", "floor", "ceil", "trunc", "round_", "round", "clip",
    "negative", "add", "subtract", "multiply", "divide", "mod", "remainder",
    "minimum", "maximum",
    "sqrt", "cbrt", "exp", "log", "log10", "log2", "power", "hypot",
    "sin", "cos", "tan", "arcsin", "arccos", "arctan", "arctan2",
    "sinh", "cosh", "tanh", "degrees", "radians",
    "bit_and", "bit_or", "bit_xor", "bit_not",
    "left_shift", "right_shift", "unsigned_right_shift",
    "sum_", "sum", "product", "min_", "min", "max_", "max", "mean",
    "or_all", "and_all", "count",
]

PI = math.pi
E = math.e
TAU = math.tau


# Sign and rounding

def absolute(x: Any) -> Any:
    """Elementwise absolute value."""
    return map1(K.k_abs, x)


def sign(x: Any) -> Any:
    """Elementwise sign: -1, 0 or 1."""
    return map1(K.k_sign, x)


def floor(x: Any) -> Any:
    return map1(K.k_floor, x)


def ceil(x: Any) -> Any:
    return map1(K.k_ceil, x)


def trunc(x: Any) -> Any:
    return map1(K.k_trunc, x)


def round_(x: Any, precision: Any = 1) -> Any:
    """Round to steps of ``1 / precision``, ties away from zero.

    ``precision`` is itself a Numeric Value and broadcasts against ``x``,
    so a list of values can be rounded with a list of precisions.

    Args:
        x: Values to round
        precision: Positive scale factor (10 keeps one decimal place)

    Returns:
        Rounded values with the shape of the broadcast result
    """
    return map2(K.k_round, x, precision)


def clip(x: Any, lo: Any, hi: Any) -> Any:
    """Limit values to ``[lo, hi]``; bounds broadcast like any operand."""
    return map2(K.k_minimum, map2(K.k_maximum, x, lo), hi)


# Arithmetic

def negative(x: Any) -> Any:
    return map1(K.k_negative, x)


def add(x: Any, y: Any) -> Any:
    return map2(K.k_add, x, y)


def subtract(x: Any, y: Any) -> Any:
    return map2(K.k_subtract, x, y)


def multiply(x: Any, y: Any) -> Any:
    return map2(K.k_multiply, x, y)


def divide(x: Any, y: Any) -> Any:
    """Elementwise true division; a zero divisor raises DivideByZeroError."""
    return map2(K.k_divide, x, y)


def mod(x: Any, y: Any) -> Any:
    """Floored modulo, result carries the divisor's sign."""
    return map2(K.k_mod, x, y)


def remainder(x: Any, y: Any) -> Any:
    """Truncated remainder, result carries the dividend's sign."""
    return map2(K.k_remainder, x, y)


def minimum(x: Any, y: Any) -> Any:
    return map2(K.k_minimum, x, y)


def maximum(x: Any, y: Any) -> Any:
    return map2(K.k_maximum, x, y)


# Powers and logarithms

def sqrt(x: Any) -> Any:
    return map1(K.k_sqrt, x)


def cbrt(x: Any) -> Any:
    return map1(K.k_cbrt, x)


def exp(x: Any) -> Any:
    return map1(K.k_exp, x)


def log(x: Any) -> Any:
    """Natural logarithm; non-positive input raises DomainError."""
    return map1(K.k_log, x)


def log10(x: Any) -> Any:
    return map1(K.k_log10, x)


def log2(x: Any) -> Any:
    return map1(K.k_log2, x)


def power(base: Any, exponent: Any) -> Any:
    """Elementwise ``base ** exponent``.

    Raises:
        DomainError: negative base with a non-integral exponent
        DivideByZeroError: zero base with a negative exponent
        UndefinedResultError: ``power(0, 0)``
    """
    return map2(K.k_power, base, exponent)


def hypot(x: Any, y: Any) -> Any:
    return map2(K.k_hypot, x, y)


# Trigonometry

def sin(x: Any) -> Any:
    return map1(K.k_sin, x)


def cos(x: Any) -> Any:
    return map1(K.k_cos, x)


def tan(x: Any) -> Any:
    """Tangent; odd multiples of pi/2 raise DomainError."""
    return map1(K.k_tan, x)


def arcsin(x: Any) -> Any:
    return map1(K.k_arcsin, x)


def arccos(x: Any) -> Any:
    return map1(K.k_arccos, x)


def arctan(x: Any) -> Any:
    return map1(K.k_arctan, x)


def arctan2(y: Any, x: Any) -> Any:
    return map2(K.k_arctan2, y, x)


def sinh(x: Any) -> Any:
    return map1(K.k_sinh, x)


def cosh(x: Any) -> Any:
    return map1(K.k_cosh, x)


def tanh(x: Any) -> Any:
    return map1(K.k_tanh, x)


def degrees(x: Any) -> Any:
    return map1(K.k_degrees, x)


def radians(x: Any) -> Any:
    return map1(K.k_radians, x)


# Bitwise

def bit_and(x: Any, y: Any) -> Any:
    return map2(K.k_bit_and, x, y)


def bit_or(x: Any, y: Any) -> Any:
    return map2(K.k_bit_or, x, y)


def bit_xor(x: Any, y: Any) -> Any:
    return map2(K.k_bit_xor, x, y)


def bit_not(x: Any) -> Any:
    return map1(K.k_bit_not, x)


def left_shift(x: Any, shift: Any) -> Any:
    return map2(K.k_left_shift, x, shift)


def right_shift(x: Any, shift: Any) -> Any:
    """Arithmetic (sign-propagating) right shift on 32-bit patterns."""
    return map2(K.k_right_shift, x, shift)


def unsigned_right_shift(x: Any, shift: Any) -> Any:
    """Zero-filling right shift on 32-bit patterns."""
    return map2(K.k_unsigned_right_shift, x, shift)


# Reductions

def sum_(x: Any) -> Any:
    """Sum of every scalar in ``x`` (0 when empty)."""
    return reduce(K.k_add, 0, x)


def product(x: Any) -> Any:
    """Product of every scalar in ``x`` (1 when empty).

    The fold is seeded with the first scalar rather than an identity.
    """
    result = reduce(K.k_multiply, None, x)
    return 1 if result is None else result


def min_(x: Any) -> Any:
    """Smallest scalar in ``x`` (+inf when empty)."""
    return reduce(K.k_minimum, math.inf, x)


def max_(x: Any) -> Any:
    """Largest scalar in ``x`` (-inf when empty)."""
    return reduce(K.k_maximum, -math.inf, x)


def mean(x: Any) -> float:
    """Arithmetic mean of every scalar in ``x``."""
    n = count(x)
    if n == 0:
        raise DomainError("mean of an empty value")
    return sum_(x) / n


def or_all(x: Any) -> int:
    """Bitwise OR of every scalar viewed as a 32-bit pattern."""
    return reduce(K.k_bit_or, 0, x)


def and_all(x: Any) -> int:
    """Bitwise AND of every scalar viewed as a 32-bit pattern."""
    return reduce(K.k_bit_and, -1, x)


def count(x: Any) -> int:
    """Number of scalars in ``x``."""
    return len(leaves(x))


abs = absolute
round = round_
sum = sum_
min = min_
max = max_
