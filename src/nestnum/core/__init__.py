# File location: nested-numerics/src/nestnum/core/__init__.py

"""
Core shape-polymorphic numerics.

This module provides the building blocks shared by every exported function:
- Numeric Value validation and description
- The broadcast engine (map1, map2, reduce)
- Scalar kernels and the elementwise/reduction library built on them
- Seeded pseudo-random draws
"""

from .errors import *
from .values import *
from .broadcast import *
from .numerics import *
from .prng import *

__all__ = [
    # errors.py
    "NumericError",
    "ShapeMismatchError",
    "DomainError",
    "DivideByZeroError",
    "UndefinedResultError",
    "RangeError",
    "ResourceExhaustedError",

    # values.py
    "is_scalar",
    "is_container",
    "to_float",
    "as_value",
    "shape",
    "structure",
    "same_structure",
    "depth",
    "is_ragged",
    "value_summary",

    # broadcast.py
    "map1",
    "map2",
    "reduce",
    "leaves",
    "iter_leaves",

    # numerics.py
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

    # prng.py
    "MAX_BOUND",
    "RandomGenerator",
    "default_generator",
    "generator_scope",
    "reseed",
    "draw_bounded",
    "draw_range",
    "draw_unit",
    "random_like",
]
