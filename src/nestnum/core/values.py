# File location: nested-numerics/src/nestnum/core/values.py

"""
Numeric Value model: scalars and ragged nested containers.

A Numeric Value is either a real scalar or a list/tuple whose elements are
themselves Numeric Values. NumPy and JAX arrays are accepted on input and
turned into nested lists. Booleans (Python, NumPy or 0-d bool arrays) are
scalars and normalize to the integers 0 and 1. This module validates,
normalizes and describes values; it never changes them in place.

Every walk here honors the nesting budget: containers deeper than
``NESTNUM_MAX_DEPTH``, or deep enough to exhaust the interpreter stack,
raise ``ResourceExhaustedError``.
"""

import functools
import numbers
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

import jax
import numpy as np
from jax import tree_util

from ..config import get_config
from .errors import ResourceExhaustedError

__all__ = [
    "Scalar",
    "Value",
    "is_scalar",
    "is_container",
    "to_float",
    "as_value",
    "iter_leaves",
    "shape",
    "structure",
    "same_structure",
    "depth",
    "count",
    "is_ragged",
    "value_summary",
]

Scalar = Union[int, float]
Value = Union[Scalar, List[Any], Tuple[Any, ...]]
Path = Tuple[int, ...]

CONTAINER_TYPES = (list, tuple)
_BOOL_TYPES = (bool, np.bool_)


def check_depth(path: Path) -> None:
    """Raise if a container found at ``path`` exceeds the configured limit."""
    max_depth = get_config().max_depth
    if max_depth and len(path) >= max_depth:
        raise ResourceExhaustedError(
            f"Nesting depth exceeds limit of {max_depth}", path=path
        )


def guard_recursion(fn: Callable) -> Callable:
    """Report host stack exhaustion as ``ResourceExhaustedError``."""
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except ResourceExhaustedError:
            raise
        except RecursionError as exc:
            raise ResourceExhaustedError(
                "Nesting depth exceeds the interpreter's recursion budget"
            ) from exc
    return wrapper


def is_container(v: Any) -> bool:
    """True for list/tuple containers."""
    return isinstance(v, CONTAINER_TYPES)


def is_scalar(v: Any) -> bool:
    """True for real numbers, booleans, NumPy scalars and 0-d arrays."""
    if isinstance(v, (np.ndarray, jax.Array)):
        if v.ndim != 0:
            return False
        return v.dtype == np.bool_ or (
            np.issubdtype(v.dtype, np.number)
            and not np.issubdtype(v.dtype, np.complexfloating)
        )
    return isinstance(v, (numbers.Real, np.bool_))


def to_float(v: Any) -> float:
    """Convert a scalar to a Python float, rejecting non-numeric input."""
    if not is_scalar(v):
        raise TypeError(f"Expected a real scalar, got {type(v).__name__}")
    return float(v)


def _normalize_scalar(v: Any) -> Scalar:
    if isinstance(v, (np.ndarray, jax.Array, np.generic)):
        v = v.item()
    if isinstance(v, _BOOL_TYPES):
        return int(v)
    return v


@guard_recursion
def as_value(v: Any) -> Value:
    """Normalize input into canonical nested-list form.

    Args:
        v: Scalar, list/tuple (possibly nested and ragged), or array

    Returns:
        The scalar (booleans as 0/1), or a freshly built nested list

    Raises:
        TypeError: if any element is not a real scalar or container
        ResourceExhaustedError: if the nesting exceeds the depth budget
    """
    def _normalize(node, path):
        if is_scalar(node):
            return _normalize_scalar(node)
        if isinstance(node, (np.ndarray, jax.Array)):
            node = np.asarray(node).tolist()
        if is_container(node):
            check_depth(path)
            return [_normalize(e, path + (i,)) for i, e in enumerate(node)]
        raise TypeError(
            f"Not a numeric value: {type(node).__name__} at path {list(path)}"
        )

    return _normalize(v, ())


def iter_leaves(v: Any, path: Path = ()) -> Iterator[Tuple[Path, Any]]:
    """Yield (path, scalar) pairs of a canonical value in pre-order."""
    if is_container(v):
        check_depth(path)
        for i, e in enumerate(v):
            yield from iter_leaves(e, path + (i,))
    else:
        yield path, v


@guard_recursion
def shape(v: Any) -> Optional[Tuple[Any, ...]]:
    """Describe the nesting of a value.

    Returns ``None`` for a scalar, and for a container a tuple holding the
    shape of each element. Ragged containers are described exactly.
    """
    def _shape(node):
        if is_container(node):
            return tuple(_shape(e) for e in node)
        return None

    return _shape(as_value(v))


def structure(v: Any) -> tree_util.PyTreeDef:
    """PyTree structure of the canonical form of ``v``."""
    return tree_util.tree_structure(as_value(v))


def same_structure(a: Any, b: Any) -> bool:
    """True if ``a`` and ``b`` nest identically (scalar values ignored)."""
    return structure(a) == structure(b)


@guard_recursion
def depth(v: Any) -> int:
    """Maximum container nesting depth (0 for a scalar)."""
    def _depth(node):
        if is_container(node):
            return 1 + max((_depth(e) for e in node), default=0)
        return 0

    return _depth(as_value(v))


@guard_recursion
def count(v: Any) -> int:
    """Number of scalars transitively contained in ``v``."""
    return sum(1 for _ in iter_leaves(as_value(v)))


@guard_recursion
def is_ragged(v: Any) -> bool:
    """True if siblings anywhere in ``v`` differ in shape."""
    def _ragged(node):
        if not is_container(node):
            return False
        if len({shape(e) for e in node}) > 1:
            return True
        return any(_ragged(e) for e in node)

    return _ragged(as_value(v))


@guard_recursion
def value_summary(v: Any, name: str = "Value") -> Dict[str, Any]:
    """Generate a summary of a Numeric Value.

    Args:
        v: Value to analyze
        name: Name for the value in summary

    Returns:
        Dictionary with scalar/container counts, depth and raggedness
    """
    canonical = as_value(v)
    if not is_container(canonical):
        return {'name': name, 'scalar': True, 'num_scalars': 1, 'max_depth': 0}

    def _count_containers(node):
        if is_container(node):
            return 1 + sum(_count_containers(e) for e in node)
        return 0

    return {
        'name': name,
        'scalar': False,
        'num_scalars': count(canonical),
        'num_containers': _count_containers(canonical),
        'length': len(canonical),
        'max_depth': depth(canonical),
        'ragged': is_ragged(canonical),
        'tree_structure': tree_util.tree_structure(canonical),
    }
