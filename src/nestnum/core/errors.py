# File location: nested-numerics/src/nestnum/core/errors.py

"""
Error taxonomy shared by the broadcast engine, kernels and PRNG.

Every error derives from ``NumericError`` and from the closest builtin
exception, so callers can catch either the library type or the generic one.
The engine fills in ``path`` (container indices from the outermost level
down to the offending element) on the way out.
"""

from typing import Any, Optional, Tuple

__all__ = [
    "NumericError",
    "ShapeMismatchError",
    "DomainError",
    "DivideByZeroError",
    "UndefinedResultError",
    "RangeError",
    "ResourceExhaustedError",
]


class NumericError(Exception):
    """Base class for all errors raised by nestnum."""

    def __init__(self, message: str, value: Any = None,
                 path: Optional[Tuple[int, ...]] = None):
        super().__init__(message)
        self.message = message
        self.value = value
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at path {list(self.path)})"
        return self.message


class ShapeMismatchError(NumericError, ValueError):
    """Two containers paired at the same level have different lengths."""

    def __init__(self, left_length: int, right_length: int,
                 path: Optional[Tuple[int, ...]] = None):
        super().__init__(
            f"Container length mismatch: {left_length} vs {right_length}",
            path=path,
        )
        self.left_length = left_length
        self.right_length = right_length


class DomainError(NumericError, ValueError):
    """Scalar input outside the mathematically valid domain of a kernel."""


class DivideByZeroError(NumericError, ZeroDivisionError):
    """A kernel divisor is zero."""


class UndefinedResultError(NumericError, ArithmeticError):
    """Mathematically indeterminate input such as 0 ** 0."""


class RangeError(NumericError, ValueError):
    """Invalid bounds passed to a random draw."""


class ResourceExhaustedError(NumericError, RecursionError):
    """Nesting depth exceeds the traversal budget."""
