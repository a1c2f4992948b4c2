# File location: nested-numerics/src/nestnum/core/kernels.py

"""
Scalar kernels: one-number and two-number operations.

Each kernel works on plain scalars only and raises the typed errors from
``errors`` for inputs outside its domain. Shape handling lives in the
broadcast engine; ``numerics`` pairs every kernel with ``map1``/``map2``.
"""

import math
from typing import Any

import numpy as np

from .errors import DivideByZeroError, DomainError, UndefinedResultError
from .values import to_float

__all__ = [
    "k_abs",
    "k_sign",
    "k_floor",
    "k_ceil",
    "k_trunc",
    "k_round",
    "k_negative",
    "k_add",
    "k_subtract",
    "k_multiply",
    "k_divide",
    "k_mod",
    "k_remainder",
    "k_minimum",
    "k_maximum",
    "k_sqrt",
    "k_cbrt",
    "k_exp",
    "k_log",
    "k_log10",
    "k_log2",
    "k_power",
    "k_hypot",
    "k_sin",
    "k_cos",
    "k_tan",
    "k_arcsin",
    "k_arccos",
    "k_arctan",
    "k_arctan2",
    "k_sinh",
    "k_cosh",
    "k_tanh",
    "k_degrees",
    "k_radians",
    "to_int32",
    "k_bit_and",
    "k_bit_or",
    "k_bit_xor",
    "k_bit_not",
    "k_left_shift",
    "k_right_shift",
    "k_unsigned_right_shift",]

_HALF_PI = math.pi / 2.0
_TAN_POLE_TOL = 1e-12
_INT32_MASK = 0xFFFFFFFF


# Sign and rounding

def k_abs(x: Any) -> Any:
    return -x if x < 0 else x


def k_sign(x: Any) -> int:
    x = to_float(x)
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def k_floor(x: Any) -> float:
    return float(math.floor(to_float(x)))


def k_ceil(x: Any) -> float:
    # ceil(x) == -floor(-x)
    return -k_floor(-to_float(x))


def k_trunc(x: Any) -> float:
    return float(math.trunc(to_float(x)))


def k_round(x: Any, precision: Any) -> float:
    """Round the magnitude of ``x`` to steps of ``1 / precision``.

    Ties round away from zero and the sign of ``x`` is restored afterwards.
    """
    x = to_float(x)
    precision = to_float(precision)
    if precision == 0:
        raise DivideByZeroError("round precision must be non-zero", value=precision)
    if precision < 0:
        raise DomainError("round precision must be positive", value=precision)
    magnitude = math.floor(0.5 + abs(x) * precision) / precision
    return math.copysign(magnitude, x) if magnitude else 0.0


# Arithmetic

def k_negative(x: Any) -> Any:
    return -x


def k_add(x: Any, y: Any) -> Any:
    return x + y


def k_subtract(x: Any, y: Any) -> Any:
    return x - y


def k_multiply(x: Any, y: Any) -> Any:
    return x * y


def k_divide(x: Any, y: Any) -> float:
    y = to_float(y)
    if y == 0:
        raise DivideByZeroError("division by zero", value=x)
    return to_float(x) / y


def k_mod(x: Any, y: Any) -> float:
    """Floored modulo: the result takes the sign of the divisor."""
    y = to_float(y)
    if y == 0:
        raise DivideByZeroError("mod by zero", value=x)
    return to_float(x) % y


def k_remainder(x: Any, y: Any) -> float:
    """Truncated remainder: the result takes the sign of the dividend."""
    y = to_float(y)
    if y == 0:
        raise DivideByZeroError("remainder by zero", value=x)
    return math.fmod(to_float(x), y)


def k_minimum(x: Any, y: Any) -> Any:
    return y if y < x else x


def k_maximum(x: Any, y: Any) -> Any:
    return y if y > x else x


# Powers and logarithms

def k_sqrt(x: Any) -> float:
    x = to_float(x)
    if x < 0:
        raise DomainError("sqrt of a negative number", value=x)
    return math.sqrt(x)


def k_cbrt(x: Any) -> float:
    x = to_float(x)
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def k_exp(x: Any) -> float:
    return math.exp(to_float(x))


def _check_log(x: float) -> float:
    if x <= 0:
        raise DomainError("logarithm of a non-positive number", value=x)
    return x


def k_log(x: Any) -> float:
    return math.log(_check_log(to_float(x)))


def k_log10(x: Any) -> float:
    return math.log10(_check_log(to_float(x)))


def k_log2(x: Any) -> float:
    return math.log2(_check_log(to_float(x)))


def k_power(base: Any, exponent: Any) -> float:
    base = to_float(base)
    exponent = to_float(exponent)
    if base == 0:
        if exponent == 0:
            raise UndefinedResultError("0 ** 0 is undefined", value=base)
        if exponent < 0:
            raise DivideByZeroError("zero raised to a negative power", value=base)
    if base < 0 and not exponent.is_integer():
        raise DomainError(
            "negative base with a non-integral exponent", value=base
        )
    return math.pow(base, exponent)


def k_hypot(x: Any, y: Any) -> float:
    return math.hypot(to_float(x), to_float(y))


# Trigonometry

def k_sin(x: Any) -> float:
    return math.sin(to_float(x))


def k_cos(x: Any) -> float:
    return math.cos(to_float(x))


def k_tan(x: Any) -> float:
    x = to_float(x)
    if math.isnan(x):
        return math.nan
    if math.isinf(x):
        raise DomainError("tangent undefined for an infinite angle", value=x)
    # Poles sit at pi/2 + k*pi; unresolvable once the spacing of k reaches 1/2
    k = (x - _HALF_PI) / math.pi
    if math.ulp(k) < 0.5 and abs(k - round(k)) < max(_TAN_POLE_TOL, math.ulp(k)):
        raise DomainError("tangent undefined at odd multiples of pi/2", value=x)
    return math.tan(x)


def _check_unit_interval(x: float, name: str) -> float:
    if x < -1.0 or x > 1.0:
        raise DomainError(f"{name} argument outside [-1, 1]", value=x)
    return x


def k_arcsin(x: Any) -> float:
    return math.asin(_check_unit_interval(to_float(x), "arcsin"))


def k_arccos(x: Any) -> float:
    return math.acos(_check_unit_interval(to_float(x), "arccos"))


def k_arctan(x: Any) -> float:
    return math.atan(to_float(x))


def k_arctan2(y: Any, x: Any) -> float:
    return math.atan2(to_float(y), to_float(x))


def k_sinh(x: Any) -> float:
    return math.sinh(to_float(x))


def k_cosh(x: Any) -> float:
    return math.cosh(to_float(x))


def k_tanh(x: Any) -> float:
    return math.tanh(to_float(x))


def k_degrees(x: Any) -> float:
    return math.degrees(to_float(x))


def k_radians(x: Any) -> float:
    return math.radians(to_float(x))


# Bitwise: scalars are reinterpreted as signed 32-bit patterns

def to_int32(x: Any) -> np.int32:
    """Truncate toward zero and wrap into a signed 32-bit integer."""
    x = to_float(x)
    if not math.isfinite(x):
        return np.int32(0)
    bits = int(x) & _INT32_MASK
    return np.array([bits], dtype=np.uint32).view(np.int32)[0]


def _shift_count(s: Any) -> np.int32:
    return np.int32(int(to_int32(s)) & 31)


def k_bit_and(x: Any, y: Any) -> int:
    return int(np.bitwise_and(to_int32(x), to_int32(y)))


def k_bit_or(x: Any, y: Any) -> int:
    return int(np.bitwise_or(to_int32(x), to_int32(y)))


def k_bit_xor(x: Any, y: Any) -> int:
    return int(np.bitwise_xor(to_int32(x), to_int32(y)))


def k_bit_not(x: Any) -> int:
    return int(np.invert(to_int32(x)))


def k_left_shift(x: Any, s: Any) -> int:
    shifted = (int(to_int32(x)) << int(_shift_count(s))) & _INT32_MASK
    return int(to_int32(shifted))


def k_right_shift(x: Any, s: Any) -> int:
    return int(np.right_shift(to_int32(x), _shift_count(s)))


def k_unsigned_right_shift(x: Any, s: Any) -> int:
    unsigned = np.array([to_int32(x)], dtype=np.int32).view(np.uint32)[0]
    return int(np.right_shift(unsigned, np.uint32(_shift_count(s))))
